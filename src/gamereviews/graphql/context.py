"""
Access to per-request GraphQL context
"""

from typing import Any

import strawberry

from ..store import EntityStore


def get_store_from_info(info: strawberry.Info) -> EntityStore:
    """Return the entity store placed in the GraphQL context by the context getter."""
    context: Any = info.context
    store = context.get("store") if isinstance(context, dict) else getattr(context, "store", None)
    if store is None:
        raise RuntimeError("GraphQL context has no entity store")
    return store

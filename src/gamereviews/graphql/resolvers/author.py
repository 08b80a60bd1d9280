from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_store_from_info
from .relationships import reviews_for_author

if TYPE_CHECKING:
    from ..types.author import Author
    from ..types.review import Review

logger = get_logger(__name__)


# Query resolvers
def resolve_authors(info: strawberry.Info) -> list[Author]:
    """Resolve every author in store order."""
    from ..types.author import Author as AuthorType

    store = get_store_from_info(info)
    return [AuthorType.from_record(record) for record in store.list_authors()]


def resolve_author_by_id(info: strawberry.Info, id: str) -> Author | None:
    """Resolve an author by ID, or None when no author has that ID."""
    from ..types.author import Author as AuthorType

    store = get_store_from_info(info)
    record = store.get_author(id)
    if record is None:
        logger.info("Author not found", author_id=id)
        return None

    return AuthorType.from_record(record)


# Field resolvers
def resolve_author_reviews(author: Author, info: strawberry.Info) -> list[Review]:
    from ..types.review import Review as ReviewType

    store = get_store_from_info(info)
    return [ReviewType.from_record(record) for record in reviews_for_author(store, author)]

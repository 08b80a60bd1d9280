"""
Game Reviews GraphQL API
Read-only queries over games, authors and reviews
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_store_from_info
from .relationships import author_for_review, game_for_review

if TYPE_CHECKING:
    from ..types.author import Author
    from ..types.game import Game
    from ..types.review import Review

logger = get_logger(__name__)


# Query resolvers
def resolve_reviews(info: strawberry.Info) -> list[Review]:
    """Resolve every review in store order."""
    from ..types.review import Review as ReviewType

    store = get_store_from_info(info)
    return [ReviewType.from_record(record) for record in store.list_reviews()]


def resolve_review_by_id(info: strawberry.Info, id: str) -> Review | None:
    """Resolve a review by ID, or None when no review has that ID."""
    from ..types.review import Review as ReviewType

    store = get_store_from_info(info)
    record = store.get_review(id)
    if record is None:
        logger.info("Review not found", review_id=id)
        return None

    return ReviewType.from_record(record)


# Field resolvers
def resolve_review_game(review: Review, info: strawberry.Info) -> Game | None:
    """
    Resolve the game a review refers to.

    A review pointing at a missing game resolves to None instead of an error.
    """
    from ..types.game import Game as GameType

    store = get_store_from_info(info)
    record = game_for_review(store, review)
    if record is None:
        logger.warning(
            "Review references missing game", review_id=review.id, game_id=review.game_id
        )
        return None

    return GameType.from_record(record)


def resolve_review_author(review: Review, info: strawberry.Info) -> Author | None:
    """Resolve the author of a review, or None for a missing author."""
    from ..types.author import Author as AuthorType

    store = get_store_from_info(info)
    record = author_for_review(store, review)
    if record is None:
        logger.warning(
            "Review references missing author", review_id=review.id, author_id=review.author_id
        )
        return None

    return AuthorType.from_record(record)

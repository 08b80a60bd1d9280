from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_store_from_info
from .relationships import reviews_for_game

if TYPE_CHECKING:
    from ..types.game import Game
    from ..types.review import Review

logger = get_logger(__name__)


# Query resolvers
def resolve_games(info: strawberry.Info) -> list[Game]:
    """Resolve every game in store order."""
    from ..types.game import Game as GameType

    store = get_store_from_info(info)
    return [GameType.from_record(record) for record in store.list_games()]


def resolve_game_by_id(info: strawberry.Info, id: str) -> Game | None:
    """Resolve a game by its ID, or None when no game has that ID."""
    from ..types.game import Game as GameType

    store = get_store_from_info(info)
    record = store.get_game(id)
    if record is None:
        logger.info("Game not found", game_id=id)
        return None

    return GameType.from_record(record)


# Field resolvers
def resolve_game_reviews(game: Game, info: strawberry.Info) -> list[Review]:
    from ..types.review import Review as ReviewType

    store = get_store_from_info(info)
    return [ReviewType.from_record(record) for record in reviews_for_game(store, game)]

"""
Game GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store import GameRecord

if TYPE_CHECKING:
    from .review import Review


@strawberry.type
class Game:
    """Game type for GraphQL API."""

    id: strawberry.ID
    title: str
    platform: list[str]
    year: int | None
    rating: float | None

    @classmethod
    def from_record(cls, record: GameRecord) -> "Game":
        return cls(
            id=strawberry.ID(record.id),
            title=record.title,
            platform=list(record.platform),
            year=record.year,
            rating=record.rating,
        )

    @strawberry.field
    def reviews(
        self, info: strawberry.Info
    ) -> list[Annotated["Review", strawberry.lazy(".review")]]:
        """Get the reviews written about this game."""
        from ..resolvers.game import resolve_game_reviews

        return resolve_game_reviews(self, info)

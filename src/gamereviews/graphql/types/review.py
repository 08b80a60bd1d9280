"""
Review GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store import ReviewRecord

if TYPE_CHECKING:
    from .author import Author
    from .game import Game


@strawberry.type
class Review:
    """Review type for GraphQL API."""

    id: strawberry.ID
    rating: int
    content: str

    # References are followed through the game/author fields, not exposed
    game_id: strawberry.Private[str]
    author_id: strawberry.Private[str]

    @classmethod
    def from_record(cls, record: ReviewRecord) -> "Review":
        return cls(
            id=strawberry.ID(record.id),
            rating=record.rating,
            content=record.content,
            game_id=record.game_id,
            author_id=record.author_id,
        )

    @strawberry.field
    def game(self, info: strawberry.Info) -> Annotated["Game", strawberry.lazy(".game")] | None:
        """Get the game this review is about."""
        from ..resolvers.review import resolve_review_game

        return resolve_review_game(self, info)

    @strawberry.field
    def author(
        self, info: strawberry.Info
    ) -> Annotated["Author", strawberry.lazy(".author")] | None:
        """Get the author who wrote this review."""
        from ..resolvers.review import resolve_review_author

        return resolve_review_author(self, info)

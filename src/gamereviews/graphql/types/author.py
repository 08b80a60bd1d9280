"""
Author GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store import AuthorRecord

if TYPE_CHECKING:
    from .review import Review


@strawberry.type
class Author:
    """Author type for GraphQL API."""

    id: strawberry.ID
    name: str
    verified: bool

    @classmethod
    def from_record(cls, record: AuthorRecord) -> "Author":
        return cls(id=strawberry.ID(record.id), name=record.name, verified=record.verified)

    @strawberry.field
    def reviews(
        self, info: strawberry.Info
    ) -> list[Annotated["Review", strawberry.lazy(".review")]]:
        """Get the reviews written by this author."""
        from ..resolvers.author import resolve_author_reviews

        return resolve_author_reviews(self, info)

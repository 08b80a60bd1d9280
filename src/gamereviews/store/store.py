"""
In-memory entity store for games, authors and reviews
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

from .models import AuthorRecord, GameRecord, Record, ReviewRecord

R = TypeVar("R", bound=Record)


def _find(records: Sequence[R], id: str) -> R | None:
    for record in records:
        if record.id == id:
            return record
    return None


class EntityStore:
    """Immutable collections of games, authors and reviews.

    Built once at process start and shared read-only by every request.
    Lookups are linear scans in insertion order; a missing id yields None.
    """

    def __init__(
        self,
        games: Iterable[GameRecord] = (),
        authors: Iterable[AuthorRecord] = (),
        reviews: Iterable[ReviewRecord] = (),
    ):
        self._games = tuple(games)
        self._authors = tuple(authors)
        self._reviews = tuple(reviews)

    def __repr__(self) -> str:
        return (
            f"EntityStore(games={len(self._games)}, authors={len(self._authors)}, "
            f"reviews={len(self._reviews)})"
        )

    def list_games(self) -> Sequence[GameRecord]:
        return self._games

    def list_authors(self) -> Sequence[AuthorRecord]:
        return self._authors

    def list_reviews(self) -> Sequence[ReviewRecord]:
        return self._reviews

    def get_game(self, id: str) -> GameRecord | None:
        return _find(self._games, id)

    def get_author(self, id: str) -> AuthorRecord | None:
        return _find(self._authors, id)

    def get_review(self, id: str) -> ReviewRecord | None:
        return _find(self._reviews, id)

    def counts(self) -> dict[str, int]:
        """Number of records per collection."""
        return {
            "games": len(self._games),
            "authors": len(self._authors),
            "reviews": len(self._reviews),
        }

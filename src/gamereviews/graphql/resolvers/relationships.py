"""
Derived relationships between games, authors and reviews.

Each function scans the store on every call. Nothing is indexed or cached,
so repeated calls return the same records in store order.
"""

from __future__ import annotations

from typing import Protocol

from ...store import AuthorRecord, EntityStore, GameRecord, ReviewRecord


class HasId(Protocol):
    @property
    def id(self) -> str: ...


class ReferencesGameAndAuthor(Protocol):
    @property
    def game_id(self) -> str: ...

    @property
    def author_id(self) -> str: ...


def reviews_for_game(store: EntityStore, game: HasId) -> list[ReviewRecord]:
    return [review for review in store.list_reviews() if review.game_id == game.id]


def reviews_for_author(store: EntityStore, author: HasId) -> list[ReviewRecord]:
    return [review for review in store.list_reviews() if review.author_id == author.id]


def game_for_review(store: EntityStore, review: ReferencesGameAndAuthor) -> GameRecord | None:
    # A dangling game_id resolves to None
    return store.get_game(review.game_id)


def author_for_review(store: EntityStore, review: ReferencesGameAndAuthor) -> AuthorRecord | None:
    return store.get_author(review.author_id)

"""Pydantic records held by the entity store."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", coerce_numbers_to_str=True)

    id: str


class GameRecord(Record):
    title: str
    platform: tuple[str, ...] = ()
    year: int | None = None
    rating: float | None = None


class AuthorRecord(Record):
    name: str
    verified: bool = False


class ReviewRecord(Record):
    rating: int
    content: str
    game_id: str
    author_id: str


class Dataset(BaseModel):
    """Shape of a dataset fixture file."""

    model_config = ConfigDict(frozen=True)

    games: tuple[GameRecord, ...] = ()
    authors: tuple[AuthorRecord, ...] = ()
    reviews: tuple[ReviewRecord, ...] = ()

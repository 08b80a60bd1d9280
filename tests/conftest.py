"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any

import pytest

from gamereviews.store import AuthorRecord, EntityStore, GameRecord, ReviewRecord


@pytest.fixture
def zelda_store() -> EntityStore:
    """One game, one author and one review linking them."""
    return EntityStore(
        games=[GameRecord(id="1", title="Zelda", platform=("Switch",), year=2023, rating=9.6)],
        authors=[AuthorRecord(id="1", name="A", verified=True)],
        reviews=[ReviewRecord(id="1", rating=9, content="great", game_id="1", author_id="1")],
    )


@pytest.fixture
def library_store() -> EntityStore:
    """A few games and authors with reviews interleaved across them."""
    return EntityStore(
        games=[
            GameRecord(id="1", title="Zelda", platform=("Switch",), year=2023, rating=9.6),
            GameRecord(id="2", title="Elden Ring", platform=("PS5", "PC"), year=2022, rating=9.5),
            GameRecord(id="3", title="Unreviewed", platform=(), year=None, rating=None),
        ],
        authors=[
            AuthorRecord(id="1", name="mario", verified=True),
            AuthorRecord(id="2", name="yoshi", verified=False),
            AuthorRecord(id="3", name="silent", verified=False),
        ],
        reviews=[
            ReviewRecord(id="10", rating=9, content="a", game_id="1", author_id="2"),
            ReviewRecord(id="11", rating=7, content="b", game_id="2", author_id="1"),
            ReviewRecord(id="12", rating=10, content="c", game_id="1", author_id="1"),
            ReviewRecord(id="13", rating=5, content="d", game_id="2", author_id="2"),
        ],
    )


@pytest.fixture
def dangling_store() -> EntityStore:
    """A review whose game and author are missing from the store."""
    return EntityStore(
        games=[GameRecord(id="1", title="Zelda")],
        authors=[AuthorRecord(id="1", name="A")],
        reviews=[
            ReviewRecord(id="1", rating=9, content="ok", game_id="1", author_id="1"),
            ReviewRecord(id="2", rating=3, content="lost", game_id="404", author_id="405"),
        ],
    )


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")

"""
Dataset loading for the entity store.

The dataset is a JSON document with three arrays (``games``, ``authors``,
``reviews``) whose objects carry the record attribute names. A default
fixture ships inside the package; ``settings.dataset_path`` overrides it.
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..logging import get_logger
from .models import Dataset, Record
from .store import EntityStore

logger = get_logger(__name__)

DEFAULT_FIXTURE = "dataset.json"


class DatasetError(Exception):
    """Raised when a dataset cannot be loaded into the entity store."""

    pass


def _read_default_fixture() -> str:
    return (resources.files(__package__) / "fixtures" / DEFAULT_FIXTURE).read_text(
        encoding="utf-8"
    )


def _check_unique_ids(name: str, records: tuple[Record, ...]) -> None:
    seen: set[str] = set()
    for record in records:
        if record.id in seen:
            raise DatasetError(f"Duplicate id {record.id!r} in {name}")
        seen.add(record.id)


def find_dangling_references(store: EntityStore) -> list[dict[str, str]]:
    """List review references that do not resolve to a game or author.

    Returns one entry per broken reference with the review id, the
    referencing field and the missing id.
    """
    problems = []
    for review in store.list_reviews():
        if store.get_game(review.game_id) is None:
            problems.append(
                {"review_id": review.id, "field": "game_id", "missing_id": review.game_id}
            )
        if store.get_author(review.author_id) is None:
            problems.append(
                {"review_id": review.id, "field": "author_id", "missing_id": review.author_id}
            )
    return problems


def build_store(data: dict[str, Any], strict_references: bool = False) -> EntityStore:
    """Validate raw dataset data and build an EntityStore from it.

    Raises:
        DatasetError: If the data does not match the record shapes, contains
            duplicate ids, or (with strict_references) has dangling references.
    """
    try:
        dataset = Dataset.model_validate(data)
    except ValidationError as e:
        raise DatasetError(f"Invalid dataset: {e}") from e

    _check_unique_ids("games", dataset.games)
    _check_unique_ids("authors", dataset.authors)
    _check_unique_ids("reviews", dataset.reviews)

    store = EntityStore(dataset.games, dataset.authors, dataset.reviews)

    dangling = find_dangling_references(store)
    if dangling:
        if strict_references:
            raise DatasetError(f"Dataset has {len(dangling)} dangling review reference(s)")
        logger.warning("Dataset has dangling review references", references=dangling)

    return store


def load_dataset(path: str | Path | None = None, strict_references: bool = False) -> EntityStore:
    """Load a dataset fixture into an EntityStore.

    Args:
        path: JSON fixture to read. The bundled fixture is used when None.
        strict_references: Fail on reviews pointing at missing games/authors.
    """
    source = str(path) if path is not None else f"<bundled {DEFAULT_FIXTURE}>"
    try:
        if path is not None:
            text = Path(path).read_text(encoding="utf-8")
        else:
            text = _read_default_fixture()
        data = json.loads(text)
    except OSError as e:
        raise DatasetError(f"Cannot read dataset {source}: {e}") from e
    except UnicodeDecodeError as e:
        raise DatasetError(f"Dataset {source} is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise DatasetError(f"Dataset {source} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise DatasetError(f"Dataset {source} must be a JSON object")

    store = build_store(data, strict_references=strict_references)
    logger.info("Dataset loaded", source=source, **store.counts())
    return store

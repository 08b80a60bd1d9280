"""
Tests for dataset loading and reference checks
"""

import json

import pytest

from gamereviews.store import DatasetError, build_store, find_dangling_references, load_dataset


def _write(tmp_path, data):
    path = tmp_path / "dataset.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestBundledDataset:
    def test_loads_bundled_fixture(self):
        store = load_dataset()

        assert store.counts() == {"games": 5, "authors": 3, "reviews": 7}
        assert store.get_game("1").title.startswith("Zelda")

    def test_bundled_fixture_has_no_dangling_references(self):
        assert find_dangling_references(load_dataset()) == []


class TestLoadFromFile:
    def test_numeric_ids_are_read_as_strings(self, tmp_path):
        path = _write(
            tmp_path,
            {
                "games": [{"id": 1, "title": "Zelda", "platform": ["Switch"], "year": 2023, "rating": 9}],
                "authors": [{"id": 1, "name": "A", "verified": True}],
                "reviews": [{"id": 1, "rating": 9, "content": "x", "game_id": 1, "author_id": 1}],
            },
        )

        store = load_dataset(path)

        review = store.get_review("1")
        assert review.game_id == "1"
        assert store.get_game(review.game_id).title == "Zelda"

    def test_missing_file(self, tmp_path):
        with pytest.raises(DatasetError, match="Cannot read dataset"):
            load_dataset(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(DatasetError, match="not valid JSON"):
            load_dataset(path)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"games": [{"id": "1", "title": "\xff"}]}')

        with pytest.raises(DatasetError, match="not valid UTF-8"):
            load_dataset(path)

    def test_top_level_must_be_object(self, tmp_path):
        path = _write(tmp_path, [1, 2, 3])

        with pytest.raises(DatasetError, match="must be a JSON object"):
            load_dataset(path)


class TestBuildStore:
    def test_missing_collections_default_to_empty(self):
        store = build_store({"games": [{"id": "1", "title": "Zelda"}]})

        assert store.counts() == {"games": 1, "authors": 0, "reviews": 0}

    def test_unknown_attribute_is_rejected(self):
        with pytest.raises(DatasetError, match="Invalid dataset"):
            build_store({"authors": [{"id": "1", "name": "A", "email": "a@example.com"}]})

    def test_missing_required_attribute_is_rejected(self):
        with pytest.raises(DatasetError, match="Invalid dataset"):
            build_store({"reviews": [{"id": "1", "rating": 5, "content": "x", "game_id": "1"}]})

    def test_duplicate_ids_are_rejected(self):
        with pytest.raises(DatasetError, match="Duplicate id '1' in games"):
            build_store({"games": [{"id": "1", "title": "A"}, {"id": "1", "title": "B"}]})

    def test_dangling_references_are_tolerated_by_default(self):
        store = build_store(
            {"reviews": [{"id": "1", "rating": 5, "content": "x", "game_id": "9", "author_id": "8"}]}
        )

        assert store.counts()["reviews"] == 1

    def test_strict_references_rejects_dangling(self):
        with pytest.raises(DatasetError, match="2 dangling"):
            build_store(
                {
                    "reviews": [
                        {"id": "1", "rating": 5, "content": "x", "game_id": "9", "author_id": "8"}
                    ]
                },
                strict_references=True,
            )


def test_find_dangling_references(dangling_store):
    assert find_dangling_references(dangling_store) == [
        {"review_id": "2", "field": "game_id", "missing_id": "404"},
        {"review_id": "2", "field": "author_id", "missing_id": "405"},
    ]

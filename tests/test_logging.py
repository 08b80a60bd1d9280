"""
Tests for structured logging helpers
"""

import json
import logging

import pytest

from gamereviews.logging import (
    clear_request_context,
    configure_logging,
    generate_request_id,
    get_logger,
    get_request_id,
    set_request_context,
)


@pytest.fixture(autouse=True)
def clean_context():
    clear_request_context()
    yield
    clear_request_context()


def test_request_id_format():
    ids = {generate_request_id() for _ in range(20)}

    assert len(ids) == 20
    for request_id in ids:
        assert len(request_id) == 12
        assert "=" not in request_id


def test_request_context_roundtrip():
    assert set_request_context(request_id="req-123") == "req-123"
    assert get_request_id() == "req-123"

    clear_request_context()
    assert get_request_id() is None


def test_set_request_context_generates_id():
    request_id = set_request_context()

    assert request_id
    assert get_request_id() == request_id


def test_json_output_carries_bound_request_id(capsys):
    configure_logging(debug=False, level="INFO")
    logger = get_logger("gamereviews.tests.json")

    set_request_context(request_id="req-456")
    logger.info("Dataset loaded", games=5)
    clear_request_context()
    logger.info("Outside request")

    lines = [json.loads(line) for line in capsys.readouterr().out.splitlines() if line]
    assert lines[0]["event"] == "Dataset loaded"
    assert lines[0]["games"] == 5
    assert lines[0]["request_id"] == "req-456"
    assert "request_id" not in lines[1]


def test_level_defaults_to_settings(monkeypatch):
    from gamereviews.config import settings

    monkeypatch.setattr(settings, "log_level", "WARNING")
    configure_logging()

    assert logging.getLogger().level == logging.WARNING


def test_debug_overrides_level():
    configure_logging(debug=True, level="ERROR")

    assert logging.getLogger().level == logging.DEBUG

"""Pytest fixtures for rain-table tests."""

from typing import Any

import pytest


@pytest.fixture
def users() -> list[dict[str, Any]]:
    """Three records with a missing field and a wide-character value."""
    return [
        {"id": 1, "name": "alice", "description": "0123456789"},
        {"id": 2, "name": "bob", "description": "あいうえお"},
        {"id": 3, "name": "carol"},
    ]


@pytest.fixture
def user_columns() -> list[dict[str, Any]]:
    """Explicit column selection for the ``users`` fixture."""
    return [
        {"key": "id", "label": "ID"},
        {"key": "name", "label": "名前", "align": "right"},
        {"key": "description", "label": "説明", "size": 8, "align": "right"},
    ]

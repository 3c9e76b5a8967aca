"""Shared fixtures for thread_keys tests."""

import copy
import json
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / 'fixtures'


@pytest.fixture
def comments_path() -> Path:
    """Returns path to the unkeyed comment fixture."""
    return FIXTURES_DIR / 'comments.json'


@pytest.fixture
def comments(comments_path):
    """Returns a fresh copy of the unkeyed comment records."""
    with comments_path.open('r', encoding='utf-8') as f:
        return copy.deepcopy(json.load(f))

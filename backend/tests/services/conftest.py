"""Service test fixtures — in-memory GraphStore with a small seeded population."""

import pytest

from tests.services.fake_graph_store import FakeGraphStore


@pytest.fixture
def store():
    s = FakeGraphStore()
    for email in (
        "john@example.com",
        "jane@example.com",
        "bob@example.com",
        "alice@example.com",
        "carol@example.com",
    ):
        s.add_user(email)
    return s

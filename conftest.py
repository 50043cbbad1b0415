"""
Root conftest.py — shared fixtures for the reflow tests.

Fixtures:
  collected — a sink recording everything written to it, for forwarding writers
"""
from __future__ import annotations

import pytest


class CollectingSink:
    """Records every write; ``text`` is the concatenation, ``writes`` the raw calls."""

    def __init__(self) -> None:
        self.writes: list[str] = []

    def write(self, text: str) -> int:
        self.writes.append(text)
        return len(text)

    @property
    def text(self) -> str:
        return "".join(self.writes)


@pytest.fixture
def collected() -> CollectingSink:
    return CollectingSink()

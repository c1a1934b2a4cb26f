"""Shared pytest fixtures for limited-combo tests."""

import pytest


@pytest.fixture
def abc_counts():
    """The reference availability map A:2, B:1, C:1."""
    return {"A": 2, "B": 1, "C": 1}

"""Shared pytest fixtures for gift graph tests."""

from __future__ import annotations

from typing import Callable

import pytest

from giftgraph.model.graph import GiftGraph, build_graph
from giftgraph.model.participants import (
    participants_from_count,
    participants_from_names,
)


@pytest.fixture
def trio_graph() -> GiftGraph:
    """Graph for Alice, Bob and Carol."""
    return build_graph(participants_from_names(["Alice", "Bob", "Carol"]))


@pytest.fixture
def graph_of_size() -> Callable[[int], GiftGraph]:
    """Factory building a graph of N auto-named participants."""

    def _build(n: int) -> GiftGraph:
        return build_graph(participants_from_count(n))

    return _build

"""
Pytest configuration and fixtures for pagination tests.
Provides a recording change listener and controller/model factories.
"""

from collections.abc import Callable
from typing import Any

import pytest

from dynpaginate.window.controller import PaginationController, init
from dynpaginate.window.model import PaginationModel


class ChangeRecorder:
    """Callable change listener that remembers every notified page."""

    def __init__(self) -> None:
        self.pages: list[int] = []

    def __call__(self, page: int) -> None:
        self.pages.append(page)


@pytest.fixture
def recorder() -> ChangeRecorder:
    return ChangeRecorder()


@pytest.fixture
def make_model(recorder) -> Callable[..., PaginationModel]:
    """
    Helper to build a model with the recording listener.

    Usage:
        model = make_model(count=30, adj=2, edge_count=2)
    """

    def _make(**options: Any) -> PaginationModel:
        options.setdefault("on_change", recorder)
        return PaginationModel(options)

    return _make


@pytest.fixture
def make_controller(recorder) -> Callable[..., PaginationController]:
    """
    Helper to build a controller through init() with the recording listener.

    Usage:
        controller = make_controller(count=30, adj=2, edge_count=2)
    """

    def _make(**options: Any) -> PaginationController:
        options.setdefault("on_change", recorder)
        return init(options)

    return _make


@pytest.fixture
def sample_options(recorder) -> dict[str, Any]:
    """Plugin-style options using the camelCase keys."""
    return {
        "count": 30,
        "adj": 2,
        "edgeCount": 2,
        "onChange": recorder,
    }

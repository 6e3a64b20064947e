"""Visible-window pagination controls, independent of any rendering surface."""

from dynpaginate.models.config import PaginationConfig
from dynpaginate.models.errors import (
    ConfigError,
    OutOfRangeError,
    PageChangeInProgressError,
    PaginationError,
)
from dynpaginate.models.window import VisibilityWindow
from dynpaginate.render.items import PageItem, build_items, describe_items
from dynpaginate.utils.validators import build_config
from dynpaginate.window.controller import PaginationController, init
from dynpaginate.window.model import PaginationModel

__version__ = "1.0.0"
__description__ = (
    "Pagination state and visibility-window algorithm for page controls"
)

__all__ = [
    "ConfigError",
    "OutOfRangeError",
    "PageChangeInProgressError",
    "PageItem",
    "PaginationConfig",
    "PaginationController",
    "PaginationError",
    "PaginationModel",
    "VisibilityWindow",
    "build_config",
    "build_items",
    "describe_items",
    "init",
]

"""
Pagination state and the visibility-window algorithm.
"""

from collections.abc import Mapping
from typing import Any

from aws_lambda_powertools import Logger

from dynpaginate.models.config import PaginationConfig
from dynpaginate.models.window import Mode, VisibilityWindow, Zone
from dynpaginate.utils.constants import (
    FIRST_PAGE,
    MODE_DYNAMIC,
    MODE_EMPTY,
    MODE_STATIC,
    SERVICE_NAME,
    ZONE_MIDDLE,
    ZONE_NEAR_END,
    ZONE_NEAR_START,
    max_visible_indicators,
)
from dynpaginate.utils.validators import build_config

logger = Logger(service=SERVICE_NAME, UTC=True)


class PaginationModel:
    """
    Owns the configuration, the current page and the window computation.

    The mode is decided once at construction:
    - empty: there are no pages
    - static: the window plus both edge zones already cover every page
    - dynamic: pages outside the edges and the window are hidden

    ``current`` is only mutated by the controller; ``compute_window`` never
    touches it.
    """

    def __init__(self, config: PaginationConfig | Mapping[str, Any]) -> None:
        if not isinstance(config, PaginationConfig):
            config = build_config(config)

        self.config = config
        self.mode: Mode = self._resolve_mode(config)
        self.current: int | None = FIRST_PAGE if config.count > 0 else None

    @staticmethod
    def _resolve_mode(config: PaginationConfig) -> Mode:
        if config.count == 0:
            return MODE_EMPTY
        if max_visible_indicators(config.adj, config.edge_count) > config.count:
            return MODE_STATIC
        return MODE_DYNAMIC

    def compute_window(self, current: int | None) -> VisibilityWindow:
        """
        Compute the visibility window for a hypothetical current page.

        Pure: calling it with different values never changes the model.
        ``current`` must lie in ``1..count``; the model does not clamp it and
        the result for other values is unspecified.

        Example:
            count=30, adj=2, edge_count=2, current=15

            → pages (1, 2, 13, 14, 15, 16, 17, 29, 30), both ellipses shown
        """
        if self.mode == MODE_EMPTY:
            return VisibilityWindow(mode=MODE_EMPTY, count=0)

        count = self.config.count

        if self.mode == MODE_STATIC:
            return VisibilityWindow(
                mode=MODE_STATIC,
                count=count,
                current=current,
                visible_pages=tuple(range(FIRST_PAGE, count + 1)),
            )

        return self._compute_dynamic_window(current)

    def _compute_dynamic_window(self, current: int) -> VisibilityWindow:
        count = self.config.count
        adj = self.config.adj
        edge_count = self.config.edge_count

        zone = self._zone_for(current)

        # Window around the current page, clipped to the range
        window_start = max(FIRST_PAGE, current - adj)
        window_end = min(count, current + adj)

        visible = set(range(FIRST_PAGE, edge_count + 1))
        visible.update(range(window_start, window_end + 1))
        visible.update(range(count - edge_count + 1, count + 1))

        window = VisibilityWindow(
            mode=MODE_DYNAMIC,
            count=count,
            current=current,
            zone=zone,
            visible_pages=tuple(sorted(visible)),
            show_ellipsis_first=current - adj > edge_count + 1,
            show_ellipsis_last=current + adj + 1 <= count - edge_count,
            show_prev=current != FIRST_PAGE,
            show_next=current != count,
            has_controls=True,
        )

        logger.debug(
            "Computed visibility window",
            extra={
                "current": current,
                "zone": zone,
                "visible_count": len(window.visible_pages),
            },
        )

        return window

    def _zone_for(self, current: int) -> Zone:
        """Classify the current page; boundaries are closed on the middle zone."""
        adj = self.config.adj
        trailing_start = self.config.count - self.config.edge_count

        if current < adj + 1:
            return ZONE_NEAR_START
        if current <= trailing_start:
            return ZONE_MIDDLE
        return ZONE_NEAR_END

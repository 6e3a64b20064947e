"""
Page-change requests, bounds checking and change notification.
"""

from collections.abc import Mapping
from typing import Any, NoReturn

from aws_lambda_powertools import Logger

from dynpaginate.models.errors import OutOfRangeError, PageChangeInProgressError
from dynpaginate.models.window import Mode, VisibilityWindow
from dynpaginate.utils.constants import FIRST_PAGE, SERVICE_NAME
from dynpaginate.utils.validators import build_config
from dynpaginate.window.model import PaginationModel

logger = Logger(service=SERVICE_NAME, UTC=True)


class PaginationController:
    """Application-facing wrapper around a PaginationModel.

    This controller coordinates:
    - Validating requested pages against ``1..count`` (no clamping)
    - Committing the new current page on the model
    - Notifying ``on_change`` once per committed change

    A rejected request leaves the current page untouched and fires no
    notification. Changes requested from inside ``on_change`` are rejected.
    """

    def __init__(self, model: PaginationModel) -> None:
        self.model = model
        self._changing = False

    @property
    def current(self) -> int | None:
        return self.model.current

    @property
    def count(self) -> int:
        return self.model.config.count

    @property
    def mode(self) -> Mode:
        return self.model.mode

    def current_window(self) -> VisibilityWindow:
        """Return the window for the current state without changing it."""
        return self.model.compute_window(self.model.current)

    def go_to(self, page: int) -> VisibilityWindow:
        """Move to ``page`` and return the resulting window.

        Raises:
            OutOfRangeError: If ``page`` is not an integer within ``1..count``
            PageChangeInProgressError: If called from inside ``on_change``
        """
        if self._changing:
            raise PageChangeInProgressError(
                message="Cannot change page while a change notification is running",
                details={"page": page, "current": self.model.current},
            )

        self._validate_page(page)

        self._changing = True
        try:
            self.model.current = page
            window = self.model.compute_window(page)

            logger.debug(
                "Page changed",
                extra={"page": page, "mode": self.model.mode, "zone": window.zone},
            )

            # State is committed before listeners run
            self.model.config.on_change(page)
        finally:
            self._changing = False

        return window

    def step(self, delta: int) -> VisibilityWindow:
        """Move ``delta`` pages relative to the current page."""
        if self.model.current is None:
            self._reject(None, reason=f"cannot step by {delta}, there are no pages")

        if isinstance(delta, bool) or not isinstance(delta, int):
            self._reject(delta, reason="step must be an integer")

        return self.go_to(self.model.current + delta)

    def prev(self) -> VisibilityWindow:
        return self.step(-1)

    def next(self) -> VisibilityWindow:
        return self.step(1)

    def _validate_page(self, page: Any) -> None:
        if isinstance(page, bool) or not isinstance(page, int):
            self._reject(page, reason="page must be an integer")

        if page < FIRST_PAGE or page > self.count:
            self._reject(page, reason=f"page must be between {FIRST_PAGE} and {self.count}")

    def _reject(self, page: Any, *, reason: str) -> NoReturn:
        logger.warning(
            "Rejected page change",
            extra={"page": repr(page), "count": self.count, "reason": reason},
        )
        raise OutOfRangeError(
            message=f"Rejected page {page!r}: {reason}",
            details={"page": page, "count": self.count},
        )


def init(
    options: Mapping[str, Any] | None = None,
    **overrides: Any,
) -> PaginationController:
    """
    Build a controller from plugin-style options.

    Options are merged over the defaults and validated before any state is
    created.

    Example:
        controller = init({"count": 30, "adj": 2, "edgeCount": 2, "onChange": render})
        controller.go_to(15)

    Raises:
        ConfigError: If the options are invalid
    """
    config = build_config(options, **overrides)
    model = PaginationModel(config)
    controller = PaginationController(model)

    logger.info(
        "Pagination initialised",
        extra={
            "count": config.count,
            "adj": config.adj,
            "edge_count": config.edge_count,
            "mode": model.mode,
        },
    )

    return controller

"""
Declarative list of pagination controls for a rendering layer.

The order matches the plugin's markup: prev, leading pages, first ellipsis,
window, last ellipsis, trailing pages, next. Only visible controls are
listed, so a renderer can draw the list as-is.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr

from dynpaginate.models.config import PaginationConfig
from dynpaginate.models.window import VisibilityWindow
from dynpaginate.utils.constants import ELLIPSIS_FIRST, ELLIPSIS_LAST, ELLIPSIS_TEXT


class PageItem(BaseModel):
    """One visible control."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["prev", "page", "ellipsis", "next"]
    label: StrictStr
    page: StrictInt | None = Field(None, description="Page number for page items")
    active: StrictBool = Field(False, description="Whether this is the current page")
    position: Literal["first", "last"] | None = Field(
        None,
        description="Which gap an ellipsis bridges",
    )


def _ellipsis(position: Literal["first", "last"]) -> PageItem:
    return PageItem(kind="ellipsis", label=ELLIPSIS_TEXT, position=position)


def build_items(window: VisibilityWindow, config: PaginationConfig) -> list[PageItem]:
    """Translate a visibility window into the ordered controls to draw.

    Ellipses are placed in the gaps of ``window.visible_pages``. A gap that
    starts before the current page is the ``first`` ellipsis, any other gap
    is the ``last`` one.

    Example:
        count=30, adj=2, edge_count=2, current=15

        → Prev 1 2 ... 13 14 [15] 16 17 ... 29 30 Next
    """
    items: list[PageItem] = []

    if window.has_controls and window.show_prev:
        items.append(PageItem(kind="prev", label=config.prev_text))

    previous = 0
    for page in window.visible_pages:
        if page - previous > 1:
            items.append(_ellipsis(ELLIPSIS_FIRST if previous + 1 < window.current else ELLIPSIS_LAST))

        items.append(
            PageItem(
                kind="page",
                label=str(page),
                page=page,
                active=page == window.current,
            )
        )
        previous = page

    # Only possible without a trailing edge zone
    if window.visible_pages and previous < window.count:
        items.append(_ellipsis(ELLIPSIS_LAST))

    if window.has_controls and window.show_next:
        items.append(PageItem(kind="next", label=config.next_text))

    return items


def describe_items(items: list[PageItem]) -> str:
    """One-line text rendering of controls; the active page is bracketed."""
    parts = []
    for item in items:
        parts.append(f"[{item.label}]" if item.active else item.label)
    return " ".join(parts)

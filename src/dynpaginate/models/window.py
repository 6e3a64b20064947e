"""Visibility window model."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt

Mode = Literal["empty", "static", "dynamic"]
Zone = Literal["near_start", "middle", "near_end"]


class VisibilityWindow(BaseModel):
    """Which page indicators and controls are visible for one current page.

    Produced fresh by every query; never stored by the model.
    """

    model_config = ConfigDict(frozen=True)

    mode: Mode = Field(..., description="Pagination mode of the producing model")
    count: StrictInt = Field(..., description="Total number of pages")
    current: StrictInt | None = Field(None, description="Active page, None when there are no pages")
    zone: Zone | None = Field(
        None,
        description="Position of the current page relative to the edges (dynamic mode only)",
    )
    visible_pages: tuple[StrictInt, ...] = Field(
        default=(),
        description="Ascending page indices that are shown",
    )
    show_ellipsis_first: StrictBool = Field(False, description="Gap between leading edge and window")
    show_ellipsis_last: StrictBool = Field(False, description="Gap between window and trailing edge")
    show_prev: StrictBool = Field(False, description="Whether the previous-page control is shown")
    show_next: StrictBool = Field(False, description="Whether the next-page control is shown")
    has_controls: StrictBool = Field(
        False,
        description="Whether prev/next controls exist at all (dynamic mode only)",
    )

    def is_shown(self, page: int) -> bool:
        """Return True when the indicator for ``page`` is visible."""
        return page in self.visible_pages

    def page_flags(self) -> list[bool]:
        """One visibility flag per page, index 0 being page 1."""
        shown = set(self.visible_pages)
        return [page in shown for page in range(1, self.count + 1)]

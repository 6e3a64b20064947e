"""
Pydantic model for pagination configuration.
"""

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from dynpaginate.utils.constants import (
    DEFAULT_ADJ,
    DEFAULT_COUNT,
    DEFAULT_EDGE_COUNT,
    DEFAULT_NEXT_TEXT,
    DEFAULT_PREV_TEXT,
)


class PaginationConfig(BaseModel):
    """
    Validated, immutable configuration for one pagination widget.

    Accepts both snake_case field names and the camelCase option names of
    the jQuery plugin (``edgeCount``, ``onChange``, ``prevText``,
    ``nextText``). Unknown options are rejected.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_by_name=True,
        validate_by_alias=True,
    )

    count: StrictInt = Field(
        default=DEFAULT_COUNT,
        ge=0,
        description="Total number of pages",
    )
    adj: StrictInt = Field(
        default=DEFAULT_ADJ,
        ge=0,
        description="Pages shown on each side of the current page",
    )
    edge_count: StrictInt = Field(
        default=DEFAULT_EDGE_COUNT,
        ge=0,
        alias="edgeCount",
        description="Pages always shown at each end of the range",
    )
    on_change: Callable[[int], None] = Field(
        ...,
        alias="onChange",
        description="Invoked with the new page after every committed change",
    )
    prev_text: StrictStr = Field(
        default=DEFAULT_PREV_TEXT,
        alias="prevText",
        description="Label of the previous-page control",
    )
    next_text: StrictStr = Field(
        default=DEFAULT_NEXT_TEXT,
        alias="nextText",
        description="Label of the next-page control",
    )

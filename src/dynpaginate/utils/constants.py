"""Global constants used throughout the pagination package.

This module centralizes defaults, error codes and the names of modes and
zones so the model, controller and rendering adapter agree on them.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================

ERROR_CODE_INVALID_CONFIG = "INVALID_CONFIG"
ERROR_CODE_PAGE_OUT_OF_RANGE = "PAGE_OUT_OF_RANGE"
ERROR_CODE_PAGE_CHANGE_IN_PROGRESS = "PAGE_CHANGE_IN_PROGRESS"


# ============================================================================
# Configuration Defaults
# ============================================================================

DEFAULT_COUNT = 0
DEFAULT_ADJ = 10
DEFAULT_EDGE_COUNT = 2
DEFAULT_PREV_TEXT = "Prev"
DEFAULT_NEXT_TEXT = "Next"
ELLIPSIS_TEXT = "..."

FIRST_PAGE = 1

# ============================================================================
# Modes and Zones
# ============================================================================

MODE_EMPTY: Final = "empty"
MODE_STATIC: Final = "static"
MODE_DYNAMIC: Final = "dynamic"

ZONE_NEAR_START: Final = "near_start"
ZONE_MIDDLE: Final = "middle"
ZONE_NEAR_END: Final = "near_end"

ELLIPSIS_FIRST: Final = "first"
ELLIPSIS_LAST: Final = "last"

# ============================================================================
# Logging
# ============================================================================

SERVICE_NAME: Final[str] = "dynpaginate"

# ============================================================================
# Helper Functions
# ============================================================================


def max_visible_indicators(adj: int, edge_count: int) -> int:
    """Upper bound on page indicators shown at once.

    The window contributes ``2 * adj + 1`` pages and each edge zone
    contributes ``edge_count``. When this bound exceeds the page count the
    whole range fits and no windowing is needed.
    """
    return (2 * adj + 1) + (2 * edge_count)

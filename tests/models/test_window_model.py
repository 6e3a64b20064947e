"""Unit tests for VisibilityWindow model."""

import pytest
from pydantic import ValidationError

from dynpaginate.models.window import VisibilityWindow


class TestVisibilityWindow:
    def test_defaults_hide_everything(self) -> None:
        window = VisibilityWindow(mode="empty", count=0)

        assert window.current is None
        assert window.zone is None
        assert window.visible_pages == ()
        assert window.show_ellipsis_first is False
        assert window.show_ellipsis_last is False
        assert window.show_prev is False
        assert window.show_next is False
        assert window.has_controls is False
        assert window.page_flags() == []

    def test_is_shown(self) -> None:
        window = VisibilityWindow(
            mode="dynamic",
            count=10,
            current=5,
            zone="middle",
            visible_pages=(1, 4, 5, 6, 10),
        )

        assert window.is_shown(5) is True
        assert window.is_shown(2) is False

    def test_page_flags(self) -> None:
        window = VisibilityWindow(
            mode="dynamic",
            count=5,
            current=1,
            visible_pages=(1, 2, 5),
        )

        assert window.page_flags() == [True, True, False, False, True]

    def test_invalid_mode_raises(self) -> None:
        with pytest.raises(ValidationError):
            VisibilityWindow(mode="paged", count=1)

    def test_is_frozen(self) -> None:
        window = VisibilityWindow(mode="static", count=1, current=1, visible_pages=(1,))

        with pytest.raises(ValidationError):
            window.current = 2

    def test_equal_windows_compare_equal(self) -> None:
        first = VisibilityWindow(mode="static", count=2, current=1, visible_pages=(1, 2))
        second = VisibilityWindow(mode="static", count=2, current=1, visible_pages=(1, 2))

        assert first == second

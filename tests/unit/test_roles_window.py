"""Tests for TimeWindow and has_mixed_digit_widths."""
from __future__ import annotations

from datetime import datetime, timezone

import pytest

from session_role_manager.roles.window import TimeWindow, has_mixed_digit_widths


class TestTimeWindowContains:
    def test_start_is_inclusive(self) -> None:
        assert TimeWindow(10, 20).contains(10)

    def test_end_is_inclusive(self) -> None:
        assert TimeWindow(10, 20).contains(20)

    def test_inside(self) -> None:
        assert TimeWindow(10, 20).contains(15)

    def test_before_start(self) -> None:
        assert not TimeWindow(10, 20).contains(9)

    def test_after_end(self) -> None:
        assert not TimeWindow(10, 20).contains(21)

    def test_inverted_window_never_matches(self) -> None:
        window = TimeWindow(20, 10)
        assert not any(window.contains(t) for t in range(0, 30))

    def test_string_tokens_compare_lexicographically(self) -> None:
        window = TimeWindow("05", "15")
        assert window.contains("10")
        assert not window.contains("20")

    def test_datetime_tokens(self) -> None:
        window = TimeWindow(
            datetime(2024, 1, 1, tzinfo=timezone.utc),
            datetime(2024, 12, 31, tzinfo=timezone.utc),
        )
        assert window.contains(datetime(2024, 6, 1, tzinfo=timezone.utc))

    def test_frozen(self) -> None:
        window = TimeWindow(1, 2)
        with pytest.raises(Exception):
            window.start = 0  # type: ignore[misc]

    def test_repr(self) -> None:
        assert repr(TimeWindow("00", "10")) == "TimeWindow(start='00', end='10')"


class TestHasMixedDigitWidths:
    def test_same_width(self) -> None:
        assert has_mixed_digit_widths("0900", "1700") is False

    def test_different_width(self) -> None:
        assert has_mixed_digit_widths("999", "1000") is True

    def test_non_digit_strings_ignored(self) -> None:
        assert has_mixed_digit_widths("2024-01-01", "99") is False

    def test_integers_ignored(self) -> None:
        assert has_mixed_digit_widths(5, 1000) is False

    def test_no_tokens(self) -> None:
        assert has_mixed_digit_widths() is False

"""Closed validity intervals over opaque, totally ordered time tokens.

Time tokens are supplied by the caller and compared with their natural
ordering only; nothing here parses or interprets them.  Decimal strings
compare correctly only when every token has the same number of digits,
see :func:`has_mixed_digit_widths`.

Classes
-------
- TimeWindow  — ``[start, end]`` interval with an inclusive membership test
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar


class SupportsOrdering(Protocol):
    """Any value usable as a time token (``str``, ``int``, ``datetime`` ...)."""

    def __le__(self, other: Any, /) -> bool: ...

    def __lt__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=SupportsOrdering)


@dataclass(frozen=True)
class TimeWindow(Generic[T]):
    """The period during which an inheritance edge is active.

    No ``start <= end`` check is made.  An inverted window is legal and
    simply never contains any time.

    Parameters
    ----------
    start:
        First instant at which the edge is valid (inclusive).
    end:
        Last instant at which the edge is valid (inclusive).
    """

    start: T
    end: T

    def contains(self, request_time: T) -> bool:
        """Return True if ``start <= request_time <= end``."""
        return self.start <= request_time <= self.end

    def __repr__(self) -> str:
        return f"TimeWindow(start={self.start!r}, end={self.end!r})"


def has_mixed_digit_widths(*tokens: object) -> bool:
    """Return True when the tokens are all-digit strings of different lengths.

    Such tokens order lexicographically, so ``"999" > "1000"``.  The caller
    decides what to do about it; this only detects the situation.

    Parameters
    ----------
    *tokens:
        Time tokens to inspect.  Non-string tokens are ignored.

    Returns
    -------
    bool
    """
    widths = {len(t) for t in tokens if isinstance(t, str) and t.isdigit()}
    return len(widths) > 1

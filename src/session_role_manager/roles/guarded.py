"""Mutex-guarded handle around a role manager.

``SessionRoleManager`` keeps no locks of its own.  When a manager must be
shared between threads, wrap it in a :class:`LockedRoleManager`: every
operation then runs while holding one re-entrant lock, so writers and
readers never interleave.

Usage
-----
::

    from session_role_manager import LockedRoleManager, SessionRoleManager

    shared = LockedRoleManager(SessionRoleManager(max_hierarchy_level=10))
    shared.add_link("alpha", "bravo", "00", "10")
"""
from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, TypeVar

from session_role_manager.roles.base import RoleManager

_R = TypeVar("_R")


class LockedRoleManager(RoleManager):
    """Serialise all calls to an inner :class:`RoleManager`.

    All public methods are thread-safe.

    Parameters
    ----------
    inner:
        The manager to guard.  It must not be used directly while wrapped.
    """

    def __init__(self, inner: RoleManager) -> None:
        self._inner = inner
        self._lock = threading.RLock()

    @property
    def inner(self) -> RoleManager:
        """The wrapped manager."""
        return self._inner

    @contextmanager
    def locked(self) -> Iterator[RoleManager]:
        """Hold the lock across several calls on the inner manager.

        Example
        -------
        ::

            with shared.locked() as rm:
                rm.delete_link("alpha", "bravo")
                rm.add_link("alpha", "bravo", "00", "20")
        """
        with self._lock:
            yield self._inner

    def _call(self, fn: Callable[..., _R], *args: Any) -> _R:
        with self._lock:
            return fn(*args)

    # ------------------------------------------------------------------
    # RoleManager interface
    # ------------------------------------------------------------------

    def clear(self) -> None:
        self._call(self._inner.clear)

    def add_link(self, name1: str, name2: str, *args: Any) -> None:
        self._call(self._inner.add_link, name1, name2, *args)

    def delete_link(self, name1: str, name2: str, *args: Any) -> None:
        self._call(self._inner.delete_link, name1, name2, *args)

    def has_link(self, name1: str, name2: str, *args: Any) -> bool:
        return self._call(self._inner.has_link, name1, name2, *args)

    def get_roles(self, name: str, *args: Any) -> list[str]:
        return self._call(self._inner.get_roles, name, *args)

    def get_users(self, name: str, *args: Any) -> list[str]:
        return self._call(self._inner.get_users, name, *args)

    def print_roles(self) -> None:
        self._call(self._inner.print_roles)

    def __repr__(self) -> str:
        return f"LockedRoleManager({self._inner!r})"

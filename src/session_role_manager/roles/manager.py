"""Temporal role manager.

Provides ``SessionRoleManager``, a :class:`RoleManager` whose inheritance
links are only valid during a time window.  Reachability queries walk the
link graph up to a fixed depth, honouring each link's window at the
requested instant.

Classes
-------
- SessionRoleManager  — time-aware, depth-bounded role manager
"""
from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, TextIO

from session_role_manager.config import ManagerConfig
from session_role_manager.roles.base import RoleManager
from session_role_manager.roles.errors import InvalidArgumentError, RoleNotFoundError
from session_role_manager.roles.role import Role, Session
from session_role_manager.roles.store import RoleStore
from session_role_manager.roles.window import TimeWindow, has_mixed_digit_widths

logger = logging.getLogger(__name__)


class SessionRoleManager(RoleManager):
    """Role manager supporting time-limited role inheritance.

    Links are added with a start and an end time token and queried with a
    single request time token.  Tokens are compared with their natural
    ordering and are never interpreted.

    The manager is a single-owner structure with no internal locking.
    Wrap it in :class:`~session_role_manager.roles.guarded.LockedRoleManager`
    to share it between threads.

    Parameters
    ----------
    max_hierarchy_level:
        Depth budget of :meth:`has_link`.  Must be >= 1.  The value is fixed
        for the lifetime of the manager and survives :meth:`clear`.

    Raises
    ------
    InvalidArgumentError
        If ``max_hierarchy_level < 1``.

    Example
    -------
    ::

        rm = SessionRoleManager(max_hierarchy_level=3)
        rm.add_link("alpha", "bravo", "0900", "1700")
        assert rm.has_link("alpha", "bravo", "1200")
    """

    def __init__(self, max_hierarchy_level: int) -> None:
        if max_hierarchy_level < 1:
            raise InvalidArgumentError(
                f"max_hierarchy_level must be >= 1, got {max_hierarchy_level!r}."
            )
        self._max_hierarchy_level = max_hierarchy_level
        self._store = RoleStore()

    @classmethod
    def from_config(cls, config: ManagerConfig) -> SessionRoleManager:
        """Build a manager from a validated :class:`ManagerConfig`."""
        return cls(max_hierarchy_level=config.max_hierarchy_level)

    @property
    def max_hierarchy_level(self) -> int:
        """The depth budget used by reachability queries."""
        return self._max_hierarchy_level

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def clear(self) -> None:
        """Remove every role and link.  The hierarchy level is kept."""
        count = len(self._store)
        self._store.clear()
        logger.debug("SessionRoleManager: cleared %d roles", count)

    def add_link(self, name1: str, name2: str, *time_range: Any) -> None:
        """Add a link from ``name1`` to ``name2`` valid during ``time_range``.

        Both roles are created if they do not exist yet.  The new link is
        appended even if an identical one is already present.

        Parameters
        ----------
        name1:
            The inheriting (child) role.
        name2:
            The inherited (parent) role.
        *time_range:
            Exactly two tokens: start time and end time, both inclusive.

        Raises
        ------
        InvalidArgumentError
            If ``time_range`` does not hold exactly two tokens.
        """
        if len(time_range) != 2:
            raise InvalidArgumentError("Time range must consist of start and end times.")
        start, end = time_range

        if has_mixed_digit_widths(start, end):
            logger.warning(
                "SessionRoleManager: link %r -> %r uses digit strings of different "
                "widths (%r, %r); they compare lexicographically",
                name1,
                name2,
                start,
                end,
            )

        role1 = self._store.get_or_create(name1)
        role2 = self._store.get_or_create(name2)
        role1.add_session(Session(target=role2, window=TimeWindow(start, end)))
        logger.debug(
            "SessionRoleManager: added link %r -> %r [%r, %r]", name1, name2, start, end
        )

    def delete_link(self, name1: str, name2: str, *unused: Any) -> None:
        """Delete every link from ``name1`` to ``name2``, whatever its window.

        Parameters
        ----------
        name1:
            The inheriting (child) role.
        name2:
            The inherited (parent) role.
        *unused:
            Accepted for interface compatibility and ignored.

        Raises
        ------
        RoleNotFoundError
            If either role is unknown.
        """
        if not self._store.exists(name1) or not self._store.exists(name2):
            raise RoleNotFoundError(name1, name2)

        removed = self._store.get(name1).delete_sessions(name2)
        logger.debug(
            "SessionRoleManager: deleted %d link(s) %r -> %r", removed, name1, name2
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_link(self, name1: str, name2: str, *request_time: Any) -> bool:
        """Return True if ``name1`` inherits ``name2`` at the request time.

        A role always inherits itself, known or not.  Unknown roles
        otherwise never match.

        Parameters
        ----------
        name1:
            The inheriting (child) role.
        name2:
            The inherited (parent) role.
        *request_time:
            Exactly one time token.

        Returns
        -------
        bool

        Raises
        ------
        InvalidArgumentError
            If ``request_time`` does not hold exactly one token.
        """
        if len(request_time) != 1:
            raise InvalidArgumentError("Request time must be specified.")
        if name1 == name2:
            return True
        if not self._store.exists(name1) or not self._store.exists(name2):
            return False

        return self._search(self._store.get(name1), name2, request_time[0])

    def get_roles(self, name: str, *current_time: Any) -> list[str]:
        """Return the roles ``name`` directly inherits at ``current_time``.

        Only one hop is examined, regardless of the hierarchy level.

        Parameters
        ----------
        name:
            The role to inspect.
        *current_time:
            Exactly one time token.

        Returns
        -------
        list[str]
            Target names in link order, each listed once.

        Raises
        ------
        InvalidArgumentError
            If ``current_time`` does not hold exactly one token.
        RoleNotFoundError
            If ``name`` is unknown.
        """
        if len(current_time) != 1:
            raise InvalidArgumentError("Current time must be specified.")
        if not self._store.exists(name):
            raise RoleNotFoundError(name)

        return self._store.get(name).session_roles(current_time[0])

    def get_users(self, name: str, *current_time: Any) -> list[str]:
        """Return the roles that directly inherit ``name`` at ``current_time``.

        Parameters
        ----------
        name:
            The inherited role.  Need not exist.
        *current_time:
            Exactly one time token.

        Returns
        -------
        list[str]
            Sorted role names; empty when nothing matches.

        Raises
        ------
        InvalidArgumentError
            If ``current_time`` does not hold exactly one token.
        """
        if len(current_time) != 1:
            raise InvalidArgumentError("Current time must be specified.")
        request_time = current_time[0]

        return sorted(
            role.name for role in self._store if role.has_direct_role(name, request_time)
        )

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def format_roles(self) -> list[str]:
        """Return one ``name < target (until: end), ...`` line per role."""
        return [str(role) for role in self._store]

    def print_roles(self, file: TextIO | None = None) -> None:
        """Write :meth:`format_roles` lines to ``file`` (default stdout)."""
        out = file if file is not None else sys.stdout
        for line in self.format_roles():
            print(line, file=out)

    # ------------------------------------------------------------------
    # Import / export
    # ------------------------------------------------------------------

    def export_links(self) -> list[dict[str, Any]]:
        """Export all links as plain dicts.

        Returns
        -------
        list[dict[str, Any]]
            ``source``, ``target``, ``start``, ``end`` per link, in role
            creation order then link order.
        """
        return [
            {
                "source": role.name,
                "target": session.target.name,
                "start": session.window.start,
                "end": session.window.end,
            }
            for role in self._store
            for session in role.sessions
        ]

    def import_links(self, records: Iterable[Mapping[str, Any]]) -> int:
        """Add the links described by ``records`` (as produced by :meth:`export_links`).

        Existing links are kept; no deduplication is made.

        Returns
        -------
        int
            Number of links added.
        """
        count = 0
        for record in records:
            self.add_link(
                str(record["source"]), str(record["target"]), record["start"], record["end"]
            )
            count += 1
        return count

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _search(self, root: Role, target_name: str, request_time: Any) -> bool:
        """Depth-bounded search for ``target_name`` starting at ``root``.

        Each frame holds its remaining budget and an iterator over its
        role's sessions, so the walk visits links in the same order as a
        recursive descent would.  A frame whose budget is 1 only compares
        the role name and examines no links.
        """
        if self._max_hierarchy_level == 1:
            return root.name == target_name

        stack: list[tuple[int, Iterator[Session]]] = [
            (self._max_hierarchy_level, iter(root.sessions))
        ]
        while stack:
            budget, sessions = stack[-1]
            session = next(sessions, None)
            if session is None:
                stack.pop()
                continue
            if not session.is_active(request_time):
                continue

            child = session.target
            if child.name == target_name:
                return True
            if budget - 1 == 1:
                # A budget-1 frame only compares names, which was done above.
                continue
            stack.append((budget - 1, iter(child.sessions)))
        return False

    def __repr__(self) -> str:
        links = sum(len(role.sessions) for role in self._store)
        return (
            f"SessionRoleManager(max_hierarchy_level={self._max_hierarchy_level}, "
            f"roles={len(self._store)}, links={links})"
        )

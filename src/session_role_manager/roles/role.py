"""Role vertices and their time-windowed inheritance edges.

Classes
-------
- Session  — directed edge to a target role, valid during a TimeWindow
- Role     — named vertex holding its outbound sessions in insertion order
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from session_role_manager.roles.window import TimeWindow


# ---------------------------------------------------------------------------
# Edge
# ---------------------------------------------------------------------------


@dataclass(eq=False)
class Session:
    """A temporal inheritance edge.

    The owning role does not own ``target``; it is a reference to another
    vertex of the same store.

    Parameters
    ----------
    target:
        The inherited role.
    window:
        The period during which the inheritance holds.
    """

    target: Role
    window: TimeWindow[Any]

    def is_active(self, request_time: Any) -> bool:
        """Return True if the edge is valid at ``request_time``."""
        return self.window.contains(request_time)

    def __repr__(self) -> str:
        return (
            f"Session(target={self.target.name!r}, "
            f"start={self.window.start!r}, end={self.window.end!r})"
        )


# ---------------------------------------------------------------------------
# Vertex
# ---------------------------------------------------------------------------


@dataclass(eq=False)
class Role:
    """A named vertex of the role-inheritance graph.

    Parameters
    ----------
    name:
        Unique identifier of the role within its store.
    sessions:
        Outbound edges in the order they were added.  Identical or
        overlapping edges are kept side by side.
    """

    name: str
    sessions: list[Session] = field(default_factory=list)

    def add_session(self, session: Session) -> None:
        """Append ``session`` without merging it with existing edges."""
        self.sessions.append(session)

    def delete_sessions(self, target_name: str) -> int:
        """Remove every edge pointing at ``target_name``, whatever its window.

        Returns
        -------
        int
            Number of edges removed.
        """
        before = len(self.sessions)
        self.sessions = [s for s in self.sessions if s.target.name != target_name]
        return before - len(self.sessions)

    def session_roles(self, request_time: Any) -> list[str]:
        """Return the names of directly inherited roles valid at ``request_time``.

        Names appear in first-occurrence order with duplicates removed.
        """
        roles: list[str] = []
        for session in self.sessions:
            if session.is_active(request_time) and session.target.name not in roles:
                roles.append(session.target.name)
        return roles

    def has_direct_role(self, role_name: str, request_time: Any) -> bool:
        """Return True if a single edge to ``role_name`` is valid at ``request_time``."""
        return any(
            s.target.name == role_name and s.is_active(request_time)
            for s in self.sessions
        )

    def __str__(self) -> str:
        edges = ", ".join(
            f"{s.target.name} (until: {s.window.end})" for s in self.sessions
        )
        return f"{self.name} < {edges}"

    def __repr__(self) -> str:
        return f"Role(name={self.name!r}, sessions={len(self.sessions)})"

"""Exceptions raised by the temporal role graph.

Classes
-------
- SessionRoleError      — base class for every error raised by this package
- InvalidArgumentError  — wrong number of time tokens or a bad configuration value
- RoleNotFoundError     — a referenced role is not present in the store
"""
from __future__ import annotations


class SessionRoleError(Exception):
    """Base class for all session-role-manager errors."""


class InvalidArgumentError(SessionRoleError, ValueError):
    """Raised when an operation receives arguments it cannot accept.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    """


class RoleNotFoundError(SessionRoleError, KeyError):
    """Raised when one or more referenced roles are not in the store.

    Parameters
    ----------
    *names:
        The role names involved in the failed operation.
    """

    def __init__(self, *names: str) -> None:
        self.names: tuple[str, ...] = names
        super().__init__(f"Role not found: {' or '.join(names)}")

    def __str__(self) -> str:
        # KeyError.__str__ would wrap the message in quotes.
        return str(self.args[0])

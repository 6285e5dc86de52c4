"""Abstract role-resolution capability for host authorization engines.

An authorization engine asks its role manager whether a subject inherits a
role, and which roles or users sit one hop away.  Any object implementing
:class:`RoleManager` can be plugged into such an engine.  Extra positional
arguments carry engine-specific data; for temporal managers they are time
tokens.

Classes
-------
- RoleManager  — abstract base for all role managers
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class RoleManager(ABC):
    """Protocol for managing and querying role inheritance links.

    Implementations must be safe for sequential (single-threaded) use.
    Thread-safety is the responsibility of the caller, see
    :class:`~session_role_manager.roles.guarded.LockedRoleManager`.
    """

    @abstractmethod
    def clear(self) -> None:
        """Remove all roles and links."""

    @abstractmethod
    def add_link(self, name1: str, name2: str, *args: Any) -> None:
        """Record that ``name1`` inherits ``name2``.

        Parameters
        ----------
        name1:
            The inheriting (child) role.
        name2:
            The inherited (parent) role.
        *args:
            Implementation-specific qualifiers of the link.
        """

    @abstractmethod
    def delete_link(self, name1: str, name2: str, *args: Any) -> None:
        """Remove the inheritance link(s) from ``name1`` to ``name2``."""

    @abstractmethod
    def has_link(self, name1: str, name2: str, *args: Any) -> bool:
        """Return True if ``name1`` inherits ``name2``, possibly transitively."""

    @abstractmethod
    def get_roles(self, name: str, *args: Any) -> list[str]:
        """Return the roles ``name`` directly inherits."""

    @abstractmethod
    def get_users(self, name: str, *args: Any) -> list[str]:
        """Return the roles that directly inherit ``name``."""

    @abstractmethod
    def print_roles(self) -> None:
        """Write a human-readable dump of all roles."""

"""In-memory role store.

Maps role names to :class:`~session_role_manager.roles.role.Role` vertices
in a plain Python dict.  Nothing is persisted.

Classes
-------
- RoleStore  — dict-backed name → Role mapping
"""
from __future__ import annotations

from collections.abc import Iterator

from session_role_manager.roles.role import Role


class RoleStore:
    """Name-keyed collection of role vertices.

    The store is not thread-safe; it is owned by a single manager that
    issues operations sequentially.
    """

    def __init__(self) -> None:
        self._roles: dict[str, Role] = {}

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def exists(self, name: str) -> bool:
        """Return True if a role called ``name`` is present."""
        return name in self._roles

    def get(self, name: str) -> Role:
        """Return the role called ``name`` without creating it.

        Raises
        ------
        KeyError
            If ``name`` is not in the store.
        """
        try:
            return self._roles[name]
        except KeyError:
            raise KeyError(f"Role {name!r} not found in RoleStore.") from None

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def get_or_create(self, name: str) -> Role:
        """Return the role called ``name``, inserting an empty one if absent."""
        role = self._roles.get(name)
        if role is None:
            role = Role(name)
            self._roles[name] = role
        return role

    def clear(self) -> None:
        """Remove every role."""
        self._roles.clear()

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[Role]:
        return iter(list(self._roles.values()))

    def __len__(self) -> int:
        return len(self._roles)

    def __contains__(self, name: object) -> bool:
        return name in self._roles

    def __repr__(self) -> str:
        return f"RoleStore(roles={len(self._roles)})"

"""Temporal role-inheritance subpackage.

Public surface
--------------
- TimeWindow          — closed validity interval over opaque time tokens
- Role / Session      — graph vertex and its time-windowed outbound edge
- RoleStore           — name → Role mapping
- RoleManager         — abstract host-plugin capability
- SessionRoleManager  — time-aware, depth-bounded role manager
- LockedRoleManager   — mutex-guarded handle for shared use
"""
from __future__ import annotations

from session_role_manager.roles.base import RoleManager
from session_role_manager.roles.errors import (
    InvalidArgumentError,
    RoleNotFoundError,
    SessionRoleError,
)
from session_role_manager.roles.guarded import LockedRoleManager
from session_role_manager.roles.manager import SessionRoleManager
from session_role_manager.roles.role import Role, Session
from session_role_manager.roles.store import RoleStore
from session_role_manager.roles.window import TimeWindow

__all__ = [
    "InvalidArgumentError",
    "LockedRoleManager",
    "Role",
    "RoleManager",
    "RoleNotFoundError",
    "RoleStore",
    "Session",
    "SessionRoleError",
    "SessionRoleManager",
    "TimeWindow",
]

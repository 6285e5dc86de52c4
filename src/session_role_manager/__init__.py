"""session-role-manager — Time-windowed role inheritance for RBAC engines.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
>>> from session_role_manager import SessionRoleManager
>>> rm = SessionRoleManager(max_hierarchy_level=3)
>>> rm.add_link("alpha", "bravo", "00", "10")
>>> rm.has_link("alpha", "bravo", "05")
True
>>> rm.has_link("alpha", "bravo", "15")
False
"""
from __future__ import annotations

# Configuration
from session_role_manager.config import ManagerConfig, load_config

# Role graph
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

# Policy files
from session_role_manager.policy.loader import (
    LinkRecord,
    PolicyFormatError,
    load_policy,
    read_policy,
)

__version__: str = "0.1.0"

__all__ = [
    "__version__",
    # Configuration
    "ManagerConfig",
    "load_config",
    # Role graph
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
    # Policy files
    "LinkRecord",
    "PolicyFormatError",
    "load_policy",
    "read_policy",
]

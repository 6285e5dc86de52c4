"""Grouping-policy file loading.

Public surface
--------------
- LinkRecord        — one validated inheritance link
- PolicyFormatError — raised for malformed or unknown policy files
- read_policy       — parse a CSV/YAML policy file
- load_policy       — parse a policy file into a role manager
"""
from __future__ import annotations

from session_role_manager.policy.loader import (
    LinkRecord,
    PolicyFormatError,
    load_policy,
    read_policy,
)

__all__ = [
    "LinkRecord",
    "PolicyFormatError",
    "load_policy",
    "read_policy",
]

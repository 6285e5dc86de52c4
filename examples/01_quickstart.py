#!/usr/bin/env python3
"""Example: Quickstart — session-role-manager

Load a time-windowed grouping policy, then ask which roles ``alpha``
inherits at different points in time.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install session-role-manager
"""
from __future__ import annotations

from pathlib import Path

import session_role_manager
from session_role_manager import LockedRoleManager, SessionRoleManager, load_policy

POLICY = Path(__file__).parent / "rbac_policy_with_sessions.csv"


def main() -> None:
    print(f"session-role-manager version: {session_role_manager.__version__}")

    # Step 1: Build a manager and load the policy's grouping rules
    rm = SessionRoleManager(max_hierarchy_level=10)
    count = load_policy(rm, POLICY)
    print(f"Loaded {count} links")
    rm.print_roles()

    # Step 2: Reachability over time
    for time in ["00", "05", "10", "15", "20"]:
        reachable = [r for r in ("delta", "echo", "foxtrott") if rm.has_link("alpha", r, time)]
        print(f"  t={time}: alpha inherits {reachable}")

    # Step 3: One-hop queries
    print(f"\nDirect roles of alpha at 05: {rm.get_roles('alpha', '05')}")
    print(f"Direct users of echo at 10: {rm.get_users('echo', '10')}")

    # Step 4: Share the manager between threads
    shared = LockedRoleManager(rm)
    shared.delete_link("charlie", "foxtrott")
    print(f"\nAfter delete, alpha inherits foxtrott at 10: {shared.has_link('alpha', 'foxtrott', '10')}")


if __name__ == "__main__":
    main()

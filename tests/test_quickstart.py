"""Test that the top-level quickstart API works for session-role-manager."""
from __future__ import annotations


def test_quickstart_import() -> None:
    from session_role_manager import SessionRoleManager

    rm = SessionRoleManager(max_hierarchy_level=3)
    assert rm is not None


def test_quickstart_version() -> None:
    import session_role_manager

    assert isinstance(session_role_manager.__version__, str)


def test_quickstart_link_and_query() -> None:
    from session_role_manager import SessionRoleManager

    rm = SessionRoleManager(max_hierarchy_level=3)
    rm.add_link("alpha", "bravo", "00", "10")
    assert rm.has_link("alpha", "bravo", "05") is True
    assert rm.has_link("alpha", "bravo", "15") is False


def test_quickstart_public_names() -> None:
    import session_role_manager

    for name in session_role_manager.__all__:
        assert hasattr(session_role_manager, name)


def test_quickstart_error_types() -> None:
    from session_role_manager import InvalidArgumentError, RoleNotFoundError

    assert issubclass(InvalidArgumentError, ValueError)
    assert issubclass(RoleNotFoundError, KeyError)

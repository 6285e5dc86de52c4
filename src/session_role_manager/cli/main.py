"""CLI entry point for session-role-manager.

Invoked as::

    session-role-manager [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m session_role_manager.cli.main

Commands
--------
- version  — Show version information
- check    — Test whether one role inherits another at a given time
- roles    — List the roles a role directly inherits at a given time
- users    — List the roles directly inheriting a role at a given time
- show     — Display every role and its links
- export   — Dump the links of a policy file as YAML or JSON

Every command except ``version`` loads a grouping-policy file (CSV or
YAML) into a fresh in-memory manager; nothing is ever written back.
"""
from __future__ import annotations

import json
import logging
import sys

import click
import yaml
from rich.console import Console
from rich.table import Table

from session_role_manager.config import ManagerConfig, load_config
from session_role_manager.policy.loader import PolicyFormatError, load_policy
from session_role_manager.roles.errors import SessionRoleError
from session_role_manager.roles.manager import SessionRoleManager

console = Console()

# ---------------------------------------------------------------------------
# Manager factory
# ---------------------------------------------------------------------------


def _make_manager(ctx: click.Context, policy: str) -> SessionRoleManager:
    """Build a manager from the group options and load ``policy`` into it."""
    config: ManagerConfig = ctx.obj["config"]
    manager = SessionRoleManager.from_config(config)
    try:
        load_policy(manager, policy, numeric_time=config.numeric_time)
    except (PolicyFormatError, SessionRoleError) as exc:
        console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)
    return manager


def _request_time(ctx: click.Context, raw: str) -> str | int:
    config: ManagerConfig = ctx.obj["config"]
    if not config.numeric_time:
        return raw
    try:
        return int(raw)
    except ValueError:
        console.print(f"[red]Error:[/red] time {raw!r} is not numeric.")
        sys.exit(1)


# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="session-role-manager")
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(dir_okay=False),
    help="YAML configuration file.",
)
@click.option(
    "--max-level",
    default=None,
    type=click.IntRange(min=1),
    help="Maximum hierarchy level (overrides the configuration file).",
)
@click.option(
    "--numeric-time",
    is_flag=True,
    help="Compare time tokens as integers instead of opaque strings.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: str | None,
    max_level: int | None,
    numeric_time: bool,
    verbose: bool,
) -> None:
    """Temporal role-inheritance queries over grouping-policy files"""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        config = load_config(config_path) if config_path else ManagerConfig()
    except (ValueError, yaml.YAMLError) as exc:
        # pydantic.ValidationError is a ValueError.
        console.print(f"[red]Error:[/red] invalid configuration: {exc}")
        sys.exit(1)
    overrides: dict[str, object] = {}
    if max_level is not None:
        overrides["max_hierarchy_level"] = max_level
    if numeric_time:
        overrides["numeric_time"] = True
    if overrides:
        config = config.model_copy(update=overrides)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config


# ---------------------------------------------------------------------------
# version
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from session_role_manager import __version__

    console.print(f"[bold]session-role-manager[/bold] v{__version__}")


# ---------------------------------------------------------------------------
# check
# ---------------------------------------------------------------------------


@cli.command(name="check")
@click.argument("policy", type=click.Path(exists=True, dir_okay=False))
@click.argument("name1")
@click.argument("name2")
@click.argument("time")
@click.pass_context
def check_command(ctx: click.Context, policy: str, name1: str, name2: str, time: str) -> None:
    """Test whether NAME1 inherits NAME2 at TIME."""
    manager = _make_manager(ctx, policy)
    if manager.has_link(name1, name2, _request_time(ctx, time)):
        console.print(f"[green]yes[/green] {name1} inherits {name2} at {time}")
    else:
        console.print(f"[yellow]no[/yellow] {name1} does not inherit {name2} at {time}")


# ---------------------------------------------------------------------------
# roles / users
# ---------------------------------------------------------------------------


@cli.command(name="roles")
@click.argument("policy", type=click.Path(exists=True, dir_okay=False))
@click.argument("name")
@click.argument("time")
@click.pass_context
def roles_command(ctx: click.Context, policy: str, name: str, time: str) -> None:
    """List the roles NAME directly inherits at TIME."""
    manager = _make_manager(ctx, policy)
    try:
        roles = manager.get_roles(name, _request_time(ctx, time))
    except SessionRoleError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)
    for role in roles:
        click.echo(role)


@cli.command(name="users")
@click.argument("policy", type=click.Path(exists=True, dir_okay=False))
@click.argument("name")
@click.argument("time")
@click.pass_context
def users_command(ctx: click.Context, policy: str, name: str, time: str) -> None:
    """List the roles directly inheriting NAME at TIME."""
    manager = _make_manager(ctx, policy)
    for user in manager.get_users(name, _request_time(ctx, time)):
        click.echo(user)


# ---------------------------------------------------------------------------
# show
# ---------------------------------------------------------------------------


@cli.command(name="show")
@click.argument("policy", type=click.Path(exists=True, dir_okay=False))
@click.option("--plain", is_flag=True, help="Print the raw role dump instead of a table.")
@click.pass_context
def show_command(ctx: click.Context, policy: str, plain: bool) -> None:
    """Display every role of POLICY and its links."""
    manager = _make_manager(ctx, policy)
    if plain:
        manager.print_roles()
        return

    links = manager.export_links()
    if not links:
        console.print("[yellow]No links found.[/yellow]")
        return

    table = Table(title=f"Links (max level {manager.max_hierarchy_level})", show_lines=False)
    table.add_column("Role", style="cyan")
    table.add_column("Inherits", style="green")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    for link in links:
        table.add_row(link["source"], link["target"], str(link["start"]), str(link["end"]))
    console.print(table)


# ---------------------------------------------------------------------------
# export
# ---------------------------------------------------------------------------


@cli.command(name="export")
@click.argument("policy", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format",
    "output_format",
    default="yaml",
    show_default=True,
    type=click.Choice(["yaml", "json"], case_sensitive=False),
    help="Output format.",
)
@click.pass_context
def export_command(ctx: click.Context, policy: str, output_format: str) -> None:
    """Dump the links of POLICY to stdout."""
    manager = _make_manager(ctx, policy)
    links = manager.export_links()
    if output_format.lower() == "json":
        click.echo(json.dumps({"links": links}, indent=2, default=str))
    else:
        click.echo(yaml.safe_dump({"links": links}, default_flow_style=False, sort_keys=False))


if __name__ == "__main__":
    cli()

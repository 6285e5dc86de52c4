"""Grouping-policy files.

Reads time-windowed inheritance links from the files an authorization
engine keeps its grouping policy in, and applies them to a role manager.
Two formats are understood:

CSV (``.csv``)::

    p, delta, data1, read
    g, alpha, bravo, 00, 10

Only ``g`` lines are used; blank lines, ``#`` comments and other policy
types are skipped.

YAML (``.yaml`` / ``.yml``)::

    links:
      - {source: alpha, target: bravo, start: "00", end: "10"}

Classes
-------
- LinkRecord        — one validated inheritance link
- PolicyFormatError — a policy file cannot be understood

Functions
---------
- read_policy  — parse a policy file into LinkRecords
- load_policy  — parse a policy file and add its links to a manager
"""
from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from session_role_manager.roles.base import RoleManager

logger = logging.getLogger(__name__)

_GROUPING_TYPE = "g"
_YAML_SUFFIXES: frozenset[str] = frozenset({".yaml", ".yml"})


class PolicyFormatError(ValueError):
    """Raised when a policy file is malformed or of an unknown type."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        super().__init__(f"{path}: {detail}")


class LinkRecord(BaseModel):
    """A time-windowed inheritance link read from a policy file.

    Parameters
    ----------
    source:
        The inheriting (child) role.
    target:
        The inherited (parent) role.
    start:
        Start time token (inclusive).  Numbers are stored in their string
        form; use :meth:`as_numeric` for integer tokens.
    end:
        End time token (inclusive).
    """

    model_config = {"frozen": True}

    source: str
    target: str
    start: str | int
    end: str | int

    @field_validator("source", "target")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("role name must not be empty")
        return value

    @field_validator("start", "end", mode="before")
    @classmethod
    def _opaque_token(cls, value: Any) -> Any:
        # YAML reads unquoted numbers as int/float; keep every token a string
        # so tokens from one file compare with each other and with CLI input.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    def as_numeric(self) -> LinkRecord:
        """Return a copy whose time tokens are converted to ``int``."""
        return self.model_copy(update={"start": int(self.start), "end": int(self.end)})


def read_policy(path: str | Path, *, numeric_time: bool = False) -> list[LinkRecord]:
    """Parse the grouping links stored in ``path``.

    Parameters
    ----------
    path:
        A ``.csv``, ``.yaml`` or ``.yml`` policy file.
    numeric_time:
        Convert every time token to ``int``.

    Returns
    -------
    list[LinkRecord]
        Links in file order.

    Raises
    ------
    PolicyFormatError
        If the file type is unknown or its content is malformed.
    FileNotFoundError
        If ``path`` does not exist.
    """
    policy_path = Path(path)
    suffix = policy_path.suffix.lower()
    if suffix == ".csv":
        records = _read_csv(policy_path)
    elif suffix in _YAML_SUFFIXES:
        records = _read_yaml(policy_path)
    else:
        raise PolicyFormatError(policy_path, f"unsupported policy file type {suffix!r}")

    if numeric_time:
        try:
            records = [record.as_numeric() for record in records]
        except ValueError as exc:
            raise PolicyFormatError(policy_path, f"non-numeric time token: {exc}") from exc
    logger.debug("read %d grouping link(s) from %s", len(records), policy_path)
    return records


def load_policy(
    manager: RoleManager, path: str | Path, *, numeric_time: bool = False
) -> int:
    """Add every link found in ``path`` to ``manager``.

    Returns
    -------
    int
        Number of links added.
    """
    records = read_policy(path, numeric_time=numeric_time)
    for record in records:
        manager.add_link(record.source, record.target, record.start, record.end)
    return len(records)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _read_csv(path: Path) -> list[LinkRecord]:
    records: list[LinkRecord] = []
    with path.open(newline="", encoding="utf-8") as fh:
        for line_no, row in enumerate(csv.reader(fh, skipinitialspace=True), start=1):
            fields = [f.strip() for f in row]
            if not fields or not fields[0] or fields[0].startswith("#"):
                continue
            if fields[0] != _GROUPING_TYPE:
                continue
            if len(fields) != 5:
                raise PolicyFormatError(
                    path,
                    f"line {line_no}: grouping rule needs name1, name2, start, end; "
                    f"got {len(fields) - 1} field(s)",
                )
            _, source, target, start, end = fields
            records.append(_build(path, source=source, target=target, start=start, end=end))
    return records


def _read_yaml(path: Path) -> list[LinkRecord]:
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        return []
    if not isinstance(data, dict) or not isinstance(data.get("links", []), list):
        raise PolicyFormatError(path, "expected a mapping with a 'links' list")
    return [_build(path, **_as_mapping(path, item)) for item in data.get("links", [])]


def _as_mapping(path: Path, item: object) -> dict[str, Any]:
    if not isinstance(item, dict):
        raise PolicyFormatError(path, f"link entry must be a mapping, got {item!r}")
    return item


def _build(path: Path, **fields: Any) -> LinkRecord:
    try:
        return LinkRecord(**fields)
    except ValidationError as exc:
        raise PolicyFormatError(path, f"invalid link {fields!r}: {exc}") from exc

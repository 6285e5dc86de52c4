"""Manager configuration.

Classes
-------
- ManagerConfig  — validated settings for a SessionRoleManager

Functions
---------
- load_config  — read a ManagerConfig from a YAML file
"""
from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field


class ManagerConfig(BaseModel):
    """Configuration parameters for ``SessionRoleManager``.

    Parameters
    ----------
    max_hierarchy_level:
        Depth budget of reachability queries.  A chain of N edges is only
        reachable when this is at least N + 1.  Default: 10.
    numeric_time:
        When True, time tokens read from policy files and the command line
        are converted to ``int`` before use.  Default: False (tokens stay
        opaque strings).
    """

    model_config = {"frozen": True}

    max_hierarchy_level: int = Field(default=10, ge=1)
    numeric_time: bool = False


def load_config(path: str | Path) -> ManagerConfig:
    """Load a :class:`ManagerConfig` from a YAML mapping.

    A missing or empty file yields the defaults.

    Parameters
    ----------
    path:
        Location of the YAML document.

    Returns
    -------
    ManagerConfig

    Raises
    ------
    pydantic.ValidationError
        If the document contains invalid values.
    ValueError
        If the document is not a mapping.
    """
    config_path = Path(path)
    if not config_path.exists():
        return ManagerConfig()

    data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if data is None:
        return ManagerConfig()
    if not isinstance(data, dict):
        raise ValueError(
            f"Configuration in {config_path} must be a mapping, got {type(data).__name__}."
        )
    return ManagerConfig.model_validate(data)

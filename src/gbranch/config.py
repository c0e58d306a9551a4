"""Configuration loading from CLI args, env vars, and config file."""

from __future__ import annotations

import functools
import os
import sys
import tomllib
import typing
from pathlib import Path

import platformdirs
import pydantic

CONFIG_FILE_NAME = ".gbranch.toml"


class ConfigError(Exception): ...


def _get_home_config_file() -> Path | None:
    """Get the user config file if it exists."""
    home_config = Path(platformdirs.user_config_dir("gbranch")) / "gbranch.toml"
    if home_config.exists():
        return home_config
    return None


@functools.cache
def _get_home_config() -> dict | None:
    if home_config_path := _get_home_config_file():
        with open(home_config_path, "rb") as f:
            return tomllib.load(f)
    return None


def _get_project_config_file() -> Path | None:
    """Search upward from cwd for .gbranch.toml, stopping at git root."""
    current = Path.cwd()
    for directory in [current, *current.parents]:
        config_path = directory / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path
        # Stop at git repository root
        if (directory / ".git").exists():
            break
    return None


@functools.cache
def _get_project_config() -> dict | None:
    if project_config_path := _get_project_config_file():
        with open(project_config_path, "rb") as f:
            return tomllib.load(f)
    return None


class _PartialConfig(typing.TypedDict, total=False):
    git: object
    reverse_order: object


def _first_set(*values: object) -> object:
    for value in values:
        if value is not None and value != "":
            return value
    return None


def _load_config(
    **flags_: typing.Unpack[_PartialConfig],
) -> dict[str, object]:
    """
    Load configuration from CLI args, env vars, project config, and home config.

    Priority: CLI flags > env vars > project config > home config
    """
    home_config = _get_home_config() or {}
    project_config = _get_project_config() or {}

    # Merge: project config overrides home config
    file_config = {**home_config, **project_config}

    # Resolve each field: CLI > env > file. Booleans may be false, so compare with None.
    config = {
        "git": flags_.get("git")
        or os.environ.get("GBRANCH_GIT")
        or file_config.get("git"),
        "reverse_order": _first_set(
            flags_.get("reverse_order"),
            os.environ.get("GBRANCH_REVERSE_ORDER"),
            file_config.get("reverse_order"),
        ),
    }
    # Leave unset fields to the model defaults
    return {k: v for k, v in config.items() if v is not None}


def get_app_config(
    git: str | None = None, reverse_order: bool | None = None
) -> AppConfig:
    config = _load_config(git=git, reverse_order=reverse_order)
    try:
        return AppConfig(**config)  # ty: ignore
    except pydantic.ValidationError as e:
        raise ConfigError(str(e)) from e


class AppConfig(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(extra="ignore", frozen=True)

    git: str = "git"
    # git returns for-each-ref output in reverse order on macOS
    reverse_order: bool = sys.platform == "darwin"

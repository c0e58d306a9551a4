import dataclasses
from pathlib import Path
from typing import Annotated

import cyclopts

from .output import OutputFormat

LogLevelFlag = Annotated[
    str,
    cyclopts.Parameter(
        name=["--log-level"],
        help="Log level (debug, info, warning, error, critical)",
    ),
]

DEFAULT_LOG_LEVEL = "warning"


@cyclopts.Parameter(name="*")
@dataclasses.dataclass(frozen=True)
class CommonFlags:
    """Flags shared by all commands."""

    repo_path: Annotated[
        Path | None,
        cyclopts.Parameter(
            name=["--repo-path", "-C"],
            help="Path to the git repository. Defaults to the current directory",
        ),
    ] = None
    git: Annotated[
        str | None,
        cyclopts.Parameter(
            name=["--git"],
            help="The git executable. Set via the GBRANCH_GIT environment variable, the .gbranch.toml config file or the --git flag",
        ),
    ] = None
    reverse_order: Annotated[
        bool | None,
        cyclopts.Parameter(
            name=["--reverse-order"],
            help="Reverse the order git lists branches in. Defaults to on for macOS. Set via the GBRANCH_REVERSE_ORDER environment variable, the .gbranch.toml config file or the --reverse-order flag",
        ),
    ] = None
    output_format: Annotated[
        OutputFormat,
        cyclopts.Parameter(
            name=["--output-format"],
            help="Output format",
        ),
    ] = OutputFormat.pretty
    log_level: LogLevelFlag = DEFAULT_LOG_LEVEL

"""Interpreting `git rev-parse --abbrev-ref HEAD`."""

from __future__ import annotations

import enum

from .git import GitError

HEAD_QUERY = ("rev-parse", "--abbrev-ref", "HEAD")


class HeadState(enum.StrEnum):
    branch = "branch"
    # No upstream, or otherwise no branch checked out
    no_branch = "no-branch"
    # HEAD points at a branch with no commits yet
    unborn = "unborn"


HEAD_EXIT_CODES: dict[int, HeadState] = {
    0: HeadState.branch,
    1: HeadState.no_branch,
    128: HeadState.unborn,
}


class UnexpectedExitCodeError(GitError):
    def __init__(self, exit_code: int, stderr: str = "") -> None:
        super().__init__(HEAD_QUERY, exit_code, stderr)


def classify_head_exit_code(exit_code: int) -> HeadState:
    try:
        return HEAD_EXIT_CODES[exit_code]
    except KeyError:
        raise UnexpectedExitCodeError(exit_code) from None


def strip_heads_prefix(name: str) -> str:
    """New branches can be reported as `heads/<name>`."""
    return name.removeprefix("heads/")

"""Running the git executable."""

from __future__ import annotations

import asyncio
import dataclasses
import logging
import typing
from collections.abc import Sequence, Set
from pathlib import Path

logger = logging.getLogger(__name__)

SUCCESS = frozenset({0})


class GitError(Exception):
    def __init__(self, args: Sequence[str], exit_code: int | None, stderr: str) -> None:
        self.git_args = list(args)
        self.exit_code = exit_code
        self.stderr = stderr
        command = " ".join(["git", *self.git_args])
        detail = stderr.strip() or "no output"
        super().__init__(f"`{command}` failed (exit code {exit_code}): {detail}")


@dataclasses.dataclass(frozen=True)
class GitResult:
    stdout: str
    stderr: str
    exit_code: int


class GitRunner(typing.Protocol):
    async def run(
        self,
        args: Sequence[str],
        cwd: Path,
        success_exit_codes: Set[int] = SUCCESS,
    ) -> GitResult: ...


@dataclasses.dataclass(frozen=True)
class SubprocessGitRunner:
    executable: str = "git"

    async def run(
        self,
        args: Sequence[str],
        cwd: Path,
        success_exit_codes: Set[int] = SUCCESS,
    ) -> GitResult:
        """
        Run git with `args` in `cwd`.

        Raises GitError unless the exit code is in `success_exit_codes`.
        """
        logger.info("Running git %s in %s", " ".join(args), cwd)
        try:
            process = await asyncio.create_subprocess_exec(
                self.executable,
                *args,
                cwd=cwd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise GitError(args, None, str(e)) from e

        stdout, stderr = await process.communicate()
        result = GitResult(
            stdout=stdout.decode("utf-8", errors="replace"),
            stderr=stderr.decode("utf-8", errors="replace"),
            exit_code=typing.cast(int, process.returncode),
        )
        logger.debug("git %s exited with %s", args[0] if args else "", result.exit_code)

        if result.exit_code not in success_exit_codes:
            raise GitError(args, result.exit_code, result.stderr)
        return result

from __future__ import annotations

import dataclasses
import enum
import logging
from collections.abc import Sequence
from pathlib import Path

from . import git, head, reconstruct, records
from .models import Branch, BranchType

logger = logging.getLogger(__name__)

DEFAULT_PREFIXES = ("refs/heads", "refs/remotes")


class AppError(Exception):
    pass


class BranchFilter(enum.StrEnum):
    local = "local"
    remote = "remote"
    all = "all"


@dataclasses.dataclass(frozen=True)
class BranchService:
    repository_path: Path
    runner: git.GitRunner
    reverse_order: bool = False

    async def get_branches(
        self, branch_filter: BranchFilter = BranchFilter.all
    ) -> list[Branch]:
        branches = await self._get_branches(DEFAULT_PREFIXES)
        match branch_filter:
            case BranchFilter.local:
                return [b for b in branches if b.type == BranchType.local]
            case BranchFilter.remote:
                return [b for b in branches if b.type == BranchType.remote]
            case BranchFilter.all:
                return branches

    async def get_current_branch(self) -> Branch | None:
        """
        Get the checked out branch.

        Returns None when nothing is checked out, HEAD is unborn, or the branch
        disappeared before it could be listed.
        """
        result = await self.runner.run(
            head.HEAD_QUERY,
            self.repository_path,
            success_exit_codes=frozenset(head.HEAD_EXIT_CODES),
        )
        state = head.classify_head_exit_code(result.exit_code)
        if state != head.HeadState.branch:
            logger.info("No current branch (%s)", state)
            return None

        name = head.strip_heads_prefix(result.stdout.strip())
        branches = await self._get_branches([f"refs/heads/{name}"])
        return branches[0] if branches else None

    async def create_branch(
        self, name: str, start_point: str | None = None, checkout: bool = False
    ) -> None:
        self._check_name(name)
        args = ["checkout", "-b", name] if checkout else ["branch", name]
        if start_point:
            args.append(start_point)
        await self.runner.run(args, self.repository_path)

    async def rename_branch(self, name: str, new_name: str, force: bool = False) -> None:
        self._check_name(new_name)
        args = ["branch", "-M" if force else "-m", name, new_name]
        await self.runner.run(args, self.repository_path)

    async def delete_branch(
        self, name: str, force: bool = False, remote: bool = False
    ) -> None:
        """
        Delete a branch.

        With `remote`, the branch's upstream is deleted on its remote too. The
        upstream is looked up before deleting, since it is gone afterwards.
        """
        branches = await self._get_branches(DEFAULT_PREFIXES) if remote else []

        args = ["branch", "-D" if force else "-d", name]
        await self.runner.run(args, self.repository_path)

        if not remote:
            return

        branch = next(
            (b for b in branches if head.strip_heads_prefix(b.name) == name), None
        )
        if branch is None or not branch.remote:
            logger.info("No remote branch to delete for %s", name)
            return

        await self.runner.run(
            ["push", branch.remote, f":{branch.upstream_without_remote}"],
            self.repository_path,
        )

    async def _get_branches(self, prefixes: Sequence[str]) -> list[Branch]:
        # Most recently committed first
        args = [
            "for-each-ref",
            f"--format={records.FOR_EACH_REF_FORMAT}",
            "--sort=-committerdate",
            *prefixes,
        ]
        result = await self.runner.run(args, self.repository_path)
        branches = reconstruct.build_branches(
            records.decode_records(result.stdout), reverse_order=self.reverse_order
        )
        logger.info("Found %s branches in %s", len(branches), " ".join(prefixes))
        return branches

    @staticmethod
    def _check_name(name: str) -> None:
        if not name.strip():
            raise AppError("Branch name must not be empty")

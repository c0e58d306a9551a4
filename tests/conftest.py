from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import create_autospec

from gbranch import git
from gbranch.identity import CommitIdentity
from gbranch.models import Branch, BranchTip, BranchType
from gbranch.records import RefRecord, encode_records

REPO_PATH = Path("/repo")

AUTHOR_LINE = "Jane Doe <jane@example.com> 1700000000 +0000"
AUTHORED_AT = datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)


def make_record(**overrides) -> RefRecord:
    defaults = dict(
        ref="refs/heads/main",
        name="main",
        upstream="origin/main",
        sha="a" * 40,
        author=AUTHOR_LINE,
        parents="b" * 40,
        summary="Add feature",
        body="",
    )
    return RefRecord(**{**defaults, **overrides})


def make_remote_record(**overrides) -> RefRecord:
    defaults = dict(
        ref="refs/remotes/origin/main",
        name="origin/main",
        upstream="",
    )
    return make_record(**{**defaults, **overrides})


def make_identity(**overrides) -> CommitIdentity:
    defaults = dict(
        name="Jane Doe",
        email="jane@example.com",
        date=AUTHORED_AT,
        tz_offset=0,
    )
    return CommitIdentity(**{**defaults, **overrides})


def make_branch(**overrides) -> Branch:
    tip_overrides = overrides.pop("tip", {})
    tip = BranchTip(
        **{
            **dict(
                sha="a" * 40,
                summary="Add feature",
                body="",
                parent_shas=["b" * 40],
                author=make_identity(),
            ),
            **tip_overrides,
        }
    )
    defaults = dict(
        name="main",
        upstream="origin/main",
        tip=tip,
        type=BranchType.local,
    )
    return Branch(**{**defaults, **overrides})


def git_result(stdout: str = "", exit_code: int = 0) -> git.GitResult:
    return git.GitResult(stdout=stdout, stderr="", exit_code=exit_code)


def for_each_ref_result(*records: RefRecord) -> git.GitResult:
    return git_result(encode_records(records))


def make_runner():
    return create_autospec(git.SubprocessGitRunner, instance=True)

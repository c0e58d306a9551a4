from __future__ import annotations

import enum

import pydantic

from .identity import CommitIdentity


class _BaseModel(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(extra="ignore", frozen=True)


class BranchType(enum.StrEnum):
    local = "local"
    remote = "remote"


class BranchTip(_BaseModel):
    """The commit a branch points to."""

    sha: str
    summary: str
    body: str
    parent_shas: list[str]
    author: CommitIdentity


class Branch(_BaseModel):
    name: str = pydantic.Field(min_length=1)
    upstream: str | None
    tip: BranchTip
    type: BranchType

    @property
    def remote(self) -> str | None:
        """The remote of the upstream, e.g. `origin` for `origin/main`."""
        if not self.upstream or "/" not in self.upstream:
            return None
        return self.upstream.split("/", 1)[0]

    @property
    def upstream_without_remote(self) -> str | None:
        if not self.upstream or "/" not in self.upstream:
            return None
        return self.upstream.split("/", 1)[1]


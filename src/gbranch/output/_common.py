"""Shared helpers used across output implementations."""

from ..models import Branch


def short_sha(branch: Branch) -> str:
    return branch.tip.sha[:7]


def format_upstream(branch: Branch) -> str:
    return branch.upstream or ""


def first_body_line(branch: Branch) -> str:
    """First line of the commit body, for compact listings."""
    body = branch.tip.body.strip()
    if not body:
        return ""
    return body.splitlines()[0]

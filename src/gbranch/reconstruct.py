from __future__ import annotations

import logging
from collections.abc import Iterable

import pydantic

from .identity import parse_identity
from .models import Branch, BranchTip, BranchType
from .records import DecodeError, RefRecord

logger = logging.getLogger(__name__)

LOCAL_PREFIX = "refs/heads/"


def build_branches(
    records: Iterable[RefRecord], reverse_order: bool = False
) -> list[Branch]:
    """
    Build branches from decoded records, keeping the order git returned them in.

    `reverse_order` flips the result for environments (macOS) where git returns
    the refs in the opposite order. A single bad record fails the whole listing.
    """
    branches = [build_branch(record) for record in records]
    if reverse_order:
        logger.debug("Reversing order of %s branches", len(branches))
        branches.reverse()
    return branches


def build_branch(record: RefRecord) -> Branch:
    author = parse_identity(record.author)
    if author is None:
        raise DecodeError(f"Couldn't parse author identity {record.author!r}")

    tip = BranchTip(
        sha=record.sha,
        summary=record.summary,
        body=record.body,
        parent_shas=_parse_parents(record.parents),
        author=author,
    )
    try:
        return Branch(
            name=record.name,
            upstream=record.upstream or None,
            tip=tip,
            type=classify_ref(record.ref),
        )
    except pydantic.ValidationError as e:
        raise DecodeError(f"Invalid branch record for {record.ref!r}: {e}") from e


def classify_ref(ref: str) -> BranchType:
    if ref.startswith(LOCAL_PREFIX):
        return BranchType.local
    return BranchType.remote


def _parse_parents(parents: str) -> list[str]:
    # A root commit has no parents, which would otherwise split into [""].
    if not parents:
        return []
    return parents.split(" ")

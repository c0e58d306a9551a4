"""
Decoding of `git for-each-ref` batch output.

Each ref is emitted as eight NUL terminated fields followed by a unit separator
(0x1F). Git appends a newline after every record, so all records but the first
start with a stray newline and the text after the final sentinel is just that
trailing newline. Commit bodies may contain newlines, so output is never split
on lines.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Iterable

logger = logging.getLogger(__name__)

RECORD_SENTINEL = "\x1f"
FIELD_SEPARATOR = "\0"

FIELDS = (
    "%(refname)",
    "%(refname:short)",
    "%(upstream:short)",
    "%(objectname)",
    "%(author)",
    "%(parent)",
    "%(subject)",
    "%(body)",
)

FOR_EACH_REF_FORMAT = "%00".join([*FIELDS, "%1F"])


class DecodeError(Exception): ...


class RefRecord(typing.NamedTuple):
    ref: str
    name: str
    upstream: str
    sha: str
    author: str
    parents: str
    summary: str
    body: str


def decode_records(raw: str) -> list[RefRecord]:
    """Split raw for-each-ref output into one RefRecord per ref."""
    chunks = raw.split(RECORD_SENTINEL)
    # Whatever follows the last sentinel is the trailing newline.
    chunks.pop()

    records = []
    for i, chunk in enumerate(chunks):
        if i > 0:
            chunk = chunk[1:]
        # Every field, including the last, is NUL terminated.
        *fields, rest = chunk.split(FIELD_SEPARATOR)
        if rest or len(fields) != len(RefRecord._fields):
            raise DecodeError(
                f"Expected {len(RefRecord._fields)} fields in record {i}, got {len(fields)}: {chunk!r}"
            )
        records.append(RefRecord(*fields))

    logger.debug("Decoded %s ref records", len(records))
    return records


def encode_records(records: Iterable[RefRecord]) -> str:
    """Render records the way git prints them for FOR_EACH_REF_FORMAT."""
    return "".join(
        FIELD_SEPARATOR.join(record) + FIELD_SEPARATOR + RECORD_SENTINEL + "\n"
        for record in records
    )

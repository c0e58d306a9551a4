from __future__ import annotations

import datetime
import re

import pydantic

_IDENTITY_PATTERN = re.compile(r"^(.*?) <(.*?)> (\d+) (\+|-)?(\d{2})(\d{2})")


class CommitIdentity(pydantic.BaseModel):
    """Author or committer of a commit, as git records it."""

    model_config = pydantic.ConfigDict(frozen=True)

    name: str
    email: str
    date: datetime.datetime
    # Minutes east of UTC
    tz_offset: int

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"


def parse_identity(line: str) -> CommitIdentity | None:
    """
    Parse a raw identity such as `Jane Doe <jane@example.com> 1700000000 +0100`.

    Returns None if the line is not an identity.
    """
    m = _IDENTITY_PATTERN.match(line)
    if m is None:
        return None

    name, email, timestamp, sign, hours, minutes = m.groups()
    tz_offset = int(hours) * 60 + int(minutes)
    if sign == "-":
        tz_offset = -tz_offset

    try:
        tz = datetime.timezone(datetime.timedelta(minutes=tz_offset))
        date = datetime.datetime.fromtimestamp(int(timestamp), tz=tz)
    except (OverflowError, OSError, ValueError):
        return None

    return CommitIdentity(name=name, email=email, date=date, tz_offset=tz_offset)

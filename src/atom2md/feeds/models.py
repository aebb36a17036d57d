"""Data models for Atom feeds and their entries."""

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, ConfigDict, Field

from atom2md.utils.errors import TimestampError

_RFC3339_RE = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"T(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d{1,9}))?"
    r"(?P<offset>Z|[+-]\d{2}:\d{2})$"
)


@dataclass(frozen=True)
class Timestamp:
    """An `updated` instant as it appears in the feed.

    Parsed from RFC3339 text with up to nanosecond precision and rendered
    back as second-precision RFC3339. Python datetimes stop at microseconds,
    so any further digits are dropped on parse.

    Example:
        >>> ts = Timestamp.parse("2023-03-05T10:20:30.123456789Z")
        >>> ts.isoformat()
        '2023-03-05T10:20:30Z'
        >>> ts.ymd()
        '2023-03-05'
    """

    value: datetime

    @classmethod
    def parse(cls, text: str) -> "Timestamp":
        """Parse RFC3339 text.

        Args:
            text: Timestamp such as ``2023-01-05T00:00:00Z``

        Returns:
            Parsed Timestamp

        Raises:
            TimestampError: If text is not valid RFC3339
        """
        match = _RFC3339_RE.match(text.strip())
        if match is None:
            raise TimestampError(f"Invalid RFC3339 timestamp: {text!r}")

        parts = match.groupdict()
        fraction = (parts["fraction"] or "").ljust(6, "0")[:6]

        try:
            tzinfo = _parse_offset(parts["offset"])
            value = datetime(
                int(parts["year"]),
                int(parts["month"]),
                int(parts["day"]),
                int(parts["hour"]),
                int(parts["minute"]),
                int(parts["second"]),
                int(fraction),
                tzinfo=tzinfo,
            )
        except ValueError as e:
            raise TimestampError(f"Invalid RFC3339 timestamp: {text!r} ({e})") from e

        return cls(value)

    @classmethod
    def zero(cls) -> "Timestamp":
        """Timestamp used for entries without an `updated` element.

        Renders as `0001-01-01T00:00:00Z`, with `1-01-01` as its date.
        """
        return cls(datetime(1, 1, 1, tzinfo=timezone.utc))

    def isoformat(self) -> str:
        """Render as RFC3339 without fractional seconds."""
        v = self.value
        base = (
            f"{v.year:04d}-{v.month:02d}-{v.day:02d}"
            f"T{v.hour:02d}:{v.minute:02d}:{v.second:02d}"
        )
        offset = v.utcoffset() or timedelta(0)
        if not offset:
            return f"{base}Z"

        sign = "+" if offset > timedelta(0) else "-"
        minutes = abs(int(offset.total_seconds())) // 60
        return f"{base}{sign}{minutes // 60:02d}:{minutes % 60:02d}"

    def ymd(self) -> str:
        """Render the calendar date as YEAR-MM-DD with an unpadded year."""
        return f"{self.value.year}-{self.value.month:02d}-{self.value.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


def _parse_offset(offset: str) -> timezone:
    if offset == "Z":
        return timezone.utc

    sign = -1 if offset[0] == "-" else 1
    hours, minutes = int(offset[1:3]), int(offset[4:6])
    if minutes > 59:
        raise ValueError(f"offset minutes out of range: {offset}")
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


class Author(BaseModel):
    """Entry author."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    uri: str = ""


class Link(BaseModel):
    """An entry `<link>` element; attributes are carried verbatim."""

    model_config = ConfigDict(frozen=True)

    href: str = ""
    rel: str = ""
    type: str = ""


class Entry(BaseModel):
    """A single release-note entry.

    The parser fills the feed fields. `description`, `extra` and `repo` stay
    empty until the entry is enriched, and `content` holds HTML until it is
    converted. Both steps build a new Entry instead of mutating this one.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    id: str = ""
    updated: Timestamp
    title: str = ""
    content: str = ""
    links: list[Link] = Field(default_factory=list)
    author: Author = Field(default_factory=Author)

    # Derived
    description: str = ""
    extra: str = ""
    repo: str = ""


class Feed(BaseModel):
    """A parsed Atom feed export."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    entries: list[Entry] = Field(default_factory=list)

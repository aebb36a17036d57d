"""Atom feed parser built on ElementTree."""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from atom2md.feeds.models import Author, Entry, Feed, Link, Timestamp
from atom2md.utils.errors import FeedParseError, FeedReadError, TimestampError

logger = logging.getLogger(__name__)


def _local_name(tag: str) -> str:
    """Strip the `{namespace}` prefix ElementTree puts on qualified tags."""
    return tag.rsplit("}", 1)[-1]


def _children(element: ET.Element, name: str) -> list[ET.Element]:
    return [child for child in element if _local_name(child.tag) == name]


def _child_text(element: ET.Element, name: str) -> str:
    """Text content of the last direct child called `name`, or ""."""
    matches = _children(element, name)
    if not matches:
        return ""
    return "".join(matches[-1].itertext())


class AtomParser:
    """Parses Atom feed exports into a Feed.

    Elements are matched by local name, so documents with or without the
    Atom namespace declaration parse the same way.

    Example:
        >>> parser = AtomParser()
        >>> feed = parser.parse_file(Path("releases.atom"))
        >>> feed.title
        'Release notes from widget'
    """

    def parse_file(self, path: Path) -> Feed:
        """Read and parse a feed file.

        Args:
            path: Path to the XML document

        Returns:
            Parsed Feed

        Raises:
            FeedReadError: If the file cannot be read
            FeedParseError: If the document is not a valid feed
        """
        try:
            data = path.read_bytes()
        except OSError as e:
            raise FeedReadError(f"Cannot read feed file {path}: {e}") from e

        logger.debug(f"Read {len(data)} bytes from {path}")
        return self.parse_bytes(data)

    def parse_bytes(self, data: bytes) -> Feed:
        """Parse a feed document.

        Args:
            data: Raw XML bytes

        Returns:
            Parsed Feed

        Raises:
            FeedParseError: If the XML is malformed, the root is not `feed`,
                or any entry has an invalid `updated` timestamp
        """
        try:
            root = ET.fromstring(data)
        except ET.ParseError as e:
            raise FeedParseError(f"Malformed XML: {e}") from e

        if _local_name(root.tag) != "feed":
            raise FeedParseError(
                f"Expected root element 'feed', found '{_local_name(root.tag)}'"
            )

        entries = [
            self._parse_entry(element, index)
            for index, element in enumerate(_children(root, "entry"), start=1)
        ]

        feed = Feed(title=_child_text(root, "title"), entries=entries)
        logger.debug(f"Parsed feed {feed.title!r} with {len(entries)} entries")
        return feed

    def _parse_entry(self, element: ET.Element, index: int) -> Entry:
        title = _child_text(element, "title")

        updated = Timestamp.zero()
        updated_elements = _children(element, "updated")
        if updated_elements:
            try:
                updated = Timestamp.parse("".join(updated_elements[-1].itertext()))
            except TimestampError as e:
                raise TimestampError(f"Entry #{index} ({title!r}): {e}") from e
        else:
            logger.warning(f"Entry #{index} ({title!r}) has no <updated> element")

        author_elements = _children(element, "author")
        author = Author()
        if author_elements:
            author = Author(
                name=_child_text(author_elements[-1], "name"),
                uri=_child_text(author_elements[-1], "uri"),
            )

        links = [
            Link(
                href=link.get("href", ""),
                rel=link.get("rel", ""),
                type=link.get("type", ""),
            )
            for link in _children(element, "link")
        ]

        return Entry(
            id=_child_text(element, "id"),
            updated=updated,
            title=title,
            content=_child_text(element, "content"),
            links=links,
            author=author,
        )

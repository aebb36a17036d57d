"""Derive per-entry metadata from the feed it belongs to."""

from atom2md.feeds.models import Entry

RELEASE_NOTES_PREFIX = "Release notes from "


def derive_repo(feed_title: str) -> str:
    """Get the repository label from a feed title.

    Example:
        >>> derive_repo("Release notes from widget")
        'widget'
        >>> derive_repo("widget")
        'widget'
    """
    return feed_title.replace(RELEASE_NOTES_PREFIX, "", 1)


def derive_description(feed_title: str, entry_title: str) -> str:
    """Get `<feed title>: <entry title>`, or "" when the feed has no title."""
    if not feed_title:
        return ""
    return f"{feed_title}: {entry_title}"


def enrich_entry(entry: Entry, feed_title: str, extra: str = "") -> Entry:
    """Return a copy of `entry` with description, repo and extra filled in.

    Args:
        entry: Entry as parsed from the feed
        feed_title: Title of the enclosing feed
        extra: Free-form metadata applied to every entry in a run

    Returns:
        New Entry; the input is left unchanged
    """
    return entry.model_copy(
        update={
            "repo": derive_repo(feed_title),
            "description": derive_description(feed_title, entry.title),
            "extra": extra,
        }
    )

"""Atom feed models, parsing and enrichment for atom2md."""

from atom2md.feeds.enrich import derive_description, derive_repo, enrich_entry
from atom2md.feeds.models import Author, Entry, Feed, Link, Timestamp
from atom2md.feeds.parser import AtomParser

__all__ = [
    "AtomParser",
    "Author",
    "Entry",
    "Feed",
    "Link",
    "Timestamp",
    "derive_description",
    "derive_repo",
    "enrich_entry",
]

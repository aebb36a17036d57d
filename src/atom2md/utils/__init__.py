"""Utility functions and helpers for atom2md."""

from atom2md.utils.errors import (
    Atom2MdError,
    ConfigError,
    ConfigNotFoundError,
    EmptyFeedError,
    FeedError,
    FeedParseError,
    FeedReadError,
    InvalidConfigError,
    OutputDirectoryError,
    OutputError,
    OutputWriteError,
    SlugCollisionError,
    TimestampError,
)

__all__ = [
    "Atom2MdError",
    "ConfigError",
    "InvalidConfigError",
    "ConfigNotFoundError",
    "FeedError",
    "FeedReadError",
    "FeedParseError",
    "TimestampError",
    "EmptyFeedError",
    "OutputError",
    "OutputDirectoryError",
    "OutputWriteError",
    "SlugCollisionError",
]

"""Custom exceptions for atom2md."""


class Atom2MdError(Exception):
    """Base exception for all atom2md errors."""

    pass


class ConfigError(Atom2MdError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class ConfigNotFoundError(ConfigError):
    """Configuration file not found."""

    pass


class FeedError(Atom2MdError):
    """Feed reading and parsing errors."""

    pass


class FeedReadError(FeedError):
    """Input feed file could not be read."""

    pass


class FeedParseError(FeedError):
    """Atom feed document is malformed."""

    pass


class TimestampError(FeedParseError):
    """An `updated` value is not a valid RFC3339 timestamp."""

    pass


class EmptyFeedError(FeedError):
    """Feed contains no entries."""

    pass


class OutputError(Atom2MdError):
    """Errors writing converted entries to disk."""

    pass


class OutputDirectoryError(OutputError):
    """Target directory is missing, unusable, or not a directory."""

    pass


class OutputWriteError(OutputError):
    """A single entry could not be written."""

    def __init__(self, title: str, reason: str) -> None:
        self.title = title
        self.reason = reason
        super().__init__(f"Failed writing post {title!r} to disk:\n{reason}")


class SlugCollisionError(OutputError):
    """Two entries map to the same output filename."""

    def __init__(self, slug: str, first_title: str, second_title: str) -> None:
        self.slug = slug
        self.first_title = first_title
        self.second_title = second_title
        super().__init__(
            f"Entries {first_title!r} and {second_title!r} both map to {slug}.md"
        )

"""File output manager for writing converted entries to disk.

Handles target directory creation, filename derivation, slug collision
policy and atomic file writes.
"""

import logging
import os
import tempfile
from pathlib import Path

from atom2md.config.schema import CollisionPolicy
from atom2md.output.models import OutputFile
from atom2md.utils.errors import (
    OutputDirectoryError,
    OutputWriteError,
    SlugCollisionError,
)

logger = logging.getLogger(__name__)

_SLUG_PUNCTUATION = frozenset("._-")


def slugify(title: str) -> str:
    """Turn an entry title into a filesystem-safe name.

    Trims the title, replaces spaces with hyphens, lowercases, then drops
    every character that is not a Unicode letter, a decimal digit, `.`,
    `_` or `-`.

    Example:
        >>> slugify("  Social Media  ")
        'social-media'
        >>> slugify("Version 2.0 (beta)!")
        'version-2.0-beta'
    """
    lowered = title.strip().replace(" ", "-").lower()
    return "".join(
        ch for ch in lowered if ch.isalpha() or ch.isdecimal() or ch in _SLUG_PUNCTUATION
    )


class OutputManager:
    """Manage file output for converted entries.

    Handles:
    - Target directory creation (recursive)
    - Slug-based filenames (`<dir>/<slug>.md`)
    - Slug collisions within a run (overwrite with a warning, or fail)
    - Atomic file writes (write to temp, then move)

    Example:
        >>> manager = OutputManager(output_dir=Path("./content/changelog"))
        >>> manager.ensure_directory()
        >>> path = manager.claim("v1.2.0")
        >>> output = manager.write_entry("v1.2.0", rendered, path)
        >>> print(output.path)
        content/changelog/v1.2.0.md
    """

    def __init__(
        self, output_dir: Path, on_collision: CollisionPolicy = "overwrite"
    ) -> None:
        """Initialize output manager.

        Args:
            output_dir: Directory the Markdown files are written to
            on_collision: What to do when two entries share a slug
        """
        self.output_dir = output_dir
        self.on_collision = on_collision
        self._claimed: dict[str, str] = {}
        self.collisions: list[str] = []

    def ensure_directory(self) -> None:
        """Create the output directory if it does not exist.

        Raises:
            OutputDirectoryError: If the path exists but is not a directory,
                or cannot be created
        """
        if self.output_dir.exists():
            if not self.output_dir.is_dir():
                raise OutputDirectoryError(
                    f"Target path is not a directory: {self.output_dir}"
                )
            return

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputDirectoryError(
                f"Cannot create target directory {self.output_dir}: {e}"
            ) from e

        logger.info(f"Created target directory {self.output_dir}")

    def path_for(self, title: str) -> Path:
        """Get the output path for an entry title.

        Raises:
            OutputWriteError: If the title has no usable characters
        """
        slug = slugify(title)
        if not slug:
            raise OutputWriteError(title, "Title produces an empty filename")
        return self.output_dir / f"{slug}.md"

    def claim(self, title: str) -> Path:
        """Reserve the output path for an entry, applying the collision policy.

        Claims are recorded per manager, so only entries from the same run
        count as collisions. Existing files on disk are always replaced.

        Args:
            title: Entry title

        Returns:
            Path the entry should be written to

        Raises:
            SlugCollisionError: If the slug was already claimed and the
                policy is "fail"
            OutputWriteError: If the title has no usable characters
        """
        path = self.path_for(title)
        slug = path.stem

        if slug in self._claimed:
            first_title = self._claimed[slug]
            if self.on_collision == "fail":
                raise SlugCollisionError(slug, first_title, title)

            logger.warning(
                f"Post {title!r} overwrites {first_title!r} (both map to {path.name})"
            )
            self.collisions.append(slug)

        self._claimed[slug] = title
        return path

    def write_entry(self, title: str, content: str, path: Path | None = None) -> OutputFile:
        """Write one rendered entry.

        Args:
            title: Entry title (used for the filename and error messages)
            content: Rendered document
            path: Path returned by `claim`; derived from the title if None

        Returns:
            OutputFile describing the written file

        Raises:
            OutputWriteError: If the file cannot be written
        """
        if path is None:
            path = self.path_for(title)

        try:
            self._write_file_atomic(path, content)
        except OSError as e:
            raise OutputWriteError(title, str(e)) from e

        size = len(content.encode("utf-8"))
        logger.debug(f"Wrote {path} ({size} bytes)")
        return OutputFile(title=title, filename=path.name, path=path, size_bytes=size)

    def _write_file_atomic(self, file_path: Path, content: str) -> None:
        """Write file atomically.

        Content goes to a temporary file in the same directory, is flushed
        and fsynced, then renamed over the target.

        Args:
            file_path: Target file path
            content: File content

        Raises:
            OSError: If write or rename fails
        """
        temp_fd, temp_path = tempfile.mkstemp(
            dir=file_path.parent, prefix=".tmp_", suffix=".md"
        )

        try:
            with open(temp_fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())

            # mkstemp creates 0600 files
            os.chmod(temp_path, 0o644)
            Path(temp_path).replace(file_path)

        except Exception:
            Path(temp_path).unlink(missing_ok=True)
            raise

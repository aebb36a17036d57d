"""Data models for output generation.

This module defines Pydantic models for:
- Output files (one Markdown file per feed entry)
- Conversion summary (result of a whole run)
"""

from pathlib import Path

from pydantic import BaseModel, Field


class OutputFile(BaseModel):
    """A Markdown file written for one entry.

    Example:
        >>> file = OutputFile(
        ...     title="v1.2.0",
        ...     filename="v1.2.0.md",
        ...     path=Path("site/content/changelog/v1.2.0.md"),
        ...     size_bytes=412,
        ... )
    """

    title: str = Field(..., description="Entry title the filename was derived from")
    filename: str = Field(..., description="Output filename (e.g., 'v1.2.0.md')")
    path: Path = Field(..., description="Full path of the written file")
    size_bytes: int = Field(0, description="File size in bytes", ge=0)


class ConversionSummary(BaseModel):
    """Result of converting one feed.

    `drafts` is always zero; Atom exports carry no draft state, but the count
    is still reported so the output matches earlier tooling.
    """

    target_dir: Path = Field(..., description="Directory the files were written to")
    feed_title: str = Field("", description="Title of the converted feed")
    files: list[OutputFile] = Field(default_factory=list, description="Written files")
    drafts: int = Field(0, description="Number of drafts written", ge=0)
    collisions: list[str] = Field(
        default_factory=list, description="Slugs written more than once"
    )

    @property
    def written(self) -> int:
        """Number of entries written (published posts)."""
        return len(self.files)

    @property
    def total_size_bytes(self) -> int:
        """Combined size of the written files in bytes."""
        return sum(f.size_bytes for f in self.files)

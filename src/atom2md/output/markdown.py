"""Markdown document generation for converted entries.

Each entry becomes a YAML frontmatter block followed by its Markdown body.
The key order and layout are fixed because downstream site generators read
these files.
"""

from typing import Any

import yaml

from atom2md.feeds.models import Entry

FRONTMATTER_DELIMITER = "---"


class MarkdownRenderer:
    """Render enriched entries into frontmatter + body documents.

    Values are inserted verbatim; a title containing a double quote produces
    frontmatter that YAML readers will reject.

    Example:
        >>> renderer = MarkdownRenderer()
        >>> print(renderer.render(entry))
        ---
        title: "v1.2.0: 2023-03-05"
        date: 2023-03-05T10:20:30Z
        ...
    """

    def render(self, entry: Entry) -> str:
        """Render an entry.

        Args:
            entry: Entry with derived fields populated and Markdown content

        Returns:
            Complete file contents
        """
        return f"{self.render_frontmatter(entry)}\n{entry.content}\n"

    def render_frontmatter(self, entry: Entry) -> str:
        """Render the delimited frontmatter block, ending with a newline."""
        lines = [
            FRONTMATTER_DELIMITER,
            f'title: "{entry.title}: {entry.updated.ymd()}"',
            f"date: {entry.updated.isoformat()}",
            f'description: "{entry.description}"',
            "changelog:",
            f"- {entry.repo}",
            f'version: "{entry.title}"',
            "author:",
            f'  name: "{entry.author.name}"',
            FRONTMATTER_DELIMITER,
        ]
        return "\n".join(lines) + "\n"


def split_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Split a rendered document into parsed frontmatter and body.

    Args:
        text: Document starting with a `---` delimited YAML block

    Returns:
        Tuple of (frontmatter dict, body with the separating blank line removed)

    Raises:
        ValueError: If the document has no frontmatter block
    """
    lines = text.split("\n")
    if not lines or lines[0] != FRONTMATTER_DELIMITER:
        raise ValueError("Document does not start with frontmatter")

    try:
        end = lines.index(FRONTMATTER_DELIMITER, 1)
    except ValueError:
        raise ValueError("Frontmatter block is not closed") from None

    frontmatter = yaml.safe_load("\n".join(lines[1:end])) or {}
    body = "\n".join(lines[end + 1 :])
    if body.startswith("\n"):
        body = body[1:]
    return frontmatter, body

"""HTML to Markdown conversion for entry bodies.

Converters sit behind the small `HtmlConverter` interface so the concrete
library can be swapped without touching the rest of the pipeline.
"""

import logging
from abc import ABC, abstractmethod
from typing import ClassVar

from bs4 import BeautifulSoup
from markdownify import ATX, markdownify

logger = logging.getLogger(__name__)


class HtmlConverter(ABC):
    """Base class for HTML to Markdown converters."""

    NAME: ClassVar[str]

    @abstractmethod
    def convert(self, html: str) -> str:
        """Convert an HTML fragment to Markdown.

        Implementations must not raise: empty or malformed markup yields an
        empty or degraded result.
        """
        pass


class MarkdownifyConverter(HtmlConverter):
    """Converter backed by the `markdownify` library.

    Fragments without any HTML elements are returned as they are, apart
    from surrounding blank lines, so plain text and Markdown this converter
    produced pass through unchanged. Underscores and asterisks are not
    escaped, and links are never written as `<url>` autolinks.

    Example:
        >>> MarkdownifyConverter().convert("<h2>Fixes</h2><ul><li>a bug</li></ul>")
        '## Fixes\\n\\n- a bug'
    """

    NAME = "markdownify"

    def __init__(self, heading_style: str = ATX, bullets: str = "-") -> None:
        self.heading_style = heading_style
        self.bullets = bullets

    def convert(self, html: str) -> str:
        if not html or not html.strip():
            return ""

        if BeautifulSoup(html, "html.parser").find() is None:
            return html.strip("\n")

        markdown = markdownify(
            html,
            heading_style=self.heading_style,
            bullets=self.bullets,
            escape_underscores=False,
            escape_asterisks=False,
            escape_misc=False,
            autolinks=False,
        )
        return markdown.strip("\n")


CONVERTERS: dict[str, type[HtmlConverter]] = {
    MarkdownifyConverter.NAME: MarkdownifyConverter,
}


def get_converter(name: str = MarkdownifyConverter.NAME) -> HtmlConverter:
    """Get a converter instance by registry name.

    Raises:
        KeyError: If no converter is registered under `name`
    """
    try:
        converter_class = CONVERTERS[name]
    except KeyError:
        raise KeyError(
            f"Unknown converter '{name}'. Available: {', '.join(sorted(CONVERTERS))}"
        ) from None

    logger.debug(f"Using {converter_class.__name__}")
    return converter_class()

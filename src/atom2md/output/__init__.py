"""Markdown conversion, rendering and file output for atom2md."""

from atom2md.output.converter import HtmlConverter, MarkdownifyConverter, get_converter
from atom2md.output.manager import OutputManager, slugify
from atom2md.output.markdown import MarkdownRenderer, split_frontmatter
from atom2md.output.models import ConversionSummary, OutputFile

__all__ = [
    "ConversionSummary",
    "HtmlConverter",
    "MarkdownRenderer",
    "MarkdownifyConverter",
    "OutputFile",
    "OutputManager",
    "get_converter",
    "slugify",
    "split_frontmatter",
]

"""atom2md - Convert Atom release-note feeds into Markdown posts."""

__version__ = "0.1.0"

"""Unit tests for Markdown document rendering."""

from datetime import datetime

import pytest

from atom2md.feeds.enrich import enrich_entry
from atom2md.feeds.models import Author, Entry, Timestamp
from atom2md.output.markdown import MarkdownRenderer, split_frontmatter


@pytest.fixture
def renderer() -> MarkdownRenderer:
    return MarkdownRenderer()


@pytest.fixture
def entry() -> Entry:
    """Enriched entry with Markdown content."""
    parsed = Entry(
        id="tag:1",
        updated=Timestamp.parse("2023-03-05T10:20:30.5Z"),
        title="v1.2.0",
        content="## Fixes\n\n- Crash on startup",
        author=Author(name="octocat", uri="https://github.com/octocat"),
    )
    return enrich_entry(parsed, "Release notes from widget")


class TestMarkdownRenderer:
    """Tests for MarkdownRenderer."""

    def test_render_exact_layout(self, renderer: MarkdownRenderer, entry: Entry) -> None:
        """Test the full document byte for byte."""
        expected = (
            "---\n"
            'title: "v1.2.0: 2023-03-05"\n'
            "date: 2023-03-05T10:20:30Z\n"
            'description: "Release notes from widget: v1.2.0"\n'
            "changelog:\n"
            "- widget\n"
            'version: "v1.2.0"\n'
            "author:\n"
            '  name: "octocat"\n'
            "---\n"
            "\n"
            "## Fixes\n"
            "\n"
            "- Crash on startup\n"
        )

        assert renderer.render(entry) == expected

    def test_render_offset_date(self, renderer: MarkdownRenderer, entry: Entry) -> None:
        """Test that offsets are kept in the date field."""
        shifted = entry.model_copy(
            update={"updated": Timestamp.parse("2022-12-04T08:00:00+02:00")}
        )

        frontmatter = renderer.render_frontmatter(shifted)

        assert 'title: "v1.2.0: 2022-12-04"' in frontmatter
        assert "date: 2022-12-04T08:00:00+02:00" in frontmatter

    def test_render_empty_description(self, renderer: MarkdownRenderer, entry: Entry) -> None:
        """Test that an empty feed title gives an empty description."""
        bare = enrich_entry(entry, "")

        assert 'description: ""' in renderer.render(bare)

    def test_render_empty_content(self, renderer: MarkdownRenderer, entry: Entry) -> None:
        """Test the body is just a newline when there is no content."""
        empty = entry.model_copy(update={"content": ""})

        assert renderer.render(empty).endswith("---\n\n\n")

    def test_extra_is_not_rendered(self, renderer: MarkdownRenderer, entry: Entry) -> None:
        """Test that the extra string does not change the document."""
        with_extra = entry.model_copy(update={"extra": "team: web"})

        assert renderer.render(with_extra) == renderer.render(entry)


class TestFrontmatterRoundTrip:
    """Tests for reading rendered documents back."""

    def test_round_trip_fields(self, renderer: MarkdownRenderer, entry: Entry) -> None:
        """Test that frontmatter fields survive a YAML parse."""
        frontmatter, body = split_frontmatter(renderer.render(entry))

        assert frontmatter["title"] == "v1.2.0: 2023-03-05"
        assert frontmatter["description"] == entry.description
        assert frontmatter["changelog"] == [entry.repo]
        assert frontmatter["version"] == entry.title
        assert frontmatter["author"] == {"name": entry.author.name}
        assert isinstance(frontmatter["date"], datetime)
        assert body == entry.content + "\n"

    def test_round_trip_unicode(self, renderer: MarkdownRenderer, entry: Entry) -> None:
        """Test non-ASCII titles and names."""
        unicode_entry = enrich_entry(
            entry.model_copy(
                update={"title": "Version 2 – Ünïcode", "author": Author(name="Zoë")}
            ),
            "Release notes from café",
        )

        frontmatter, _ = split_frontmatter(renderer.render(unicode_entry))

        assert frontmatter["version"] == "Version 2 – Ünïcode"
        assert frontmatter["changelog"] == ["café"]
        assert frontmatter["author"]["name"] == "Zoë"

    def test_split_requires_frontmatter(self) -> None:
        with pytest.raises(ValueError):
            split_frontmatter("# Just markdown\n")

    def test_split_requires_closing_delimiter(self) -> None:
        with pytest.raises(ValueError, match="not closed"):
            split_frontmatter("---\ntitle: x\n")

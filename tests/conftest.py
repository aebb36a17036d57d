"""Shared fixtures for atom2md tests."""

import logging
from pathlib import Path

import pytest

SAMPLE_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom" xml:lang="en-US">
  <id>tag:github.com,2008:https://github.com/acme/widget/releases</id>
  <link type="text/html" rel="alternate" href="https://github.com/acme/widget/releases"/>
  <title>Release notes from widget</title>
  <updated>2023-03-05T10:20:30Z</updated>
  <entry>
    <id>tag:github.com,2008:Repository/1/v1.2.0</id>
    <updated>2023-03-05T10:20:30.123456789Z</updated>
    <link rel="alternate" type="text/html" href="https://github.com/acme/widget/releases/tag/v1.2.0"/>
    <title>v1.2.0</title>
    <content type="html">&lt;h2&gt;Fixes&lt;/h2&gt;&lt;ul&gt;&lt;li&gt;Crash on startup&lt;/li&gt;&lt;/ul&gt;</content>
    <author>
      <name>octocat</name>
      <uri>https://github.com/octocat</uri>
    </author>
  </entry>
  <entry>
    <id>tag:github.com,2008:Repository/1/v1.1.0</id>
    <updated>2022-12-24T08:00:00+02:00</updated>
    <link rel="alternate" type="text/html" href="https://github.com/acme/widget/releases/tag/v1.1.0"/>
    <title>v1.1.0</title>
    <content type="html">&lt;p&gt;Adds &lt;strong&gt;dark mode&lt;/strong&gt;.&lt;/p&gt;</content>
    <author>
      <name>hubot</name>
      <uri>https://github.com/hubot</uri>
    </author>
  </entry>
</feed>
"""


def make_feed(title: str, entries: list[dict[str, str]]) -> str:
    """Build a bare (namespace-free) feed document."""
    parts = [f"<feed><title>{title}</title>"]
    for entry in entries:
        parts.append(
            "<entry>"
            f"<id>{entry.get('id', '')}</id>"
            f"<updated>{entry.get('updated', '2023-01-05T00:00:00Z')}</updated>"
            f"<title>{entry['title']}</title>"
            f"<content>{entry.get('content', '')}</content>"
            f"<author><name>{entry.get('author', '')}</name><uri></uri></author>"
            "</entry>"
        )
    parts.append("</feed>")
    return "".join(parts)


@pytest.fixture
def sample_feed_xml() -> str:
    """Two-entry GitHub-style release feed."""
    return SAMPLE_FEED


@pytest.fixture
def feed_factory():
    """Factory building bare feed documents."""
    return make_feed


@pytest.fixture
def sample_feed_file(tmp_path: Path) -> Path:
    """Write the sample feed to disk."""
    path = tmp_path / "releases.atom"
    path.write_text(SAMPLE_FEED, encoding="utf-8")
    return path


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """Output directory that does not exist yet."""
    return tmp_path / "content" / "changelog"


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo CLI logging setup so caplog sees package records."""
    yield
    logger = logging.getLogger("atom2md")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)

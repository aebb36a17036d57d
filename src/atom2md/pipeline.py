"""Conversion pipeline: feed file in, one Markdown file per entry out.

Each entry goes through enrich -> convert -> render -> write. Entries are
independent, so they can be processed on a thread pool; entries that share
an output path are always handled by the same task, in document order, so
the last one wins exactly as in a sequential run.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from pydantic import BaseModel, Field

from atom2md.config.schema import CollisionPolicy, ConvertConfig
from atom2md.feeds.enrich import enrich_entry
from atom2md.feeds.models import Entry, Feed
from atom2md.feeds.parser import AtomParser
from atom2md.output.converter import HtmlConverter, get_converter
from atom2md.output.manager import OutputManager
from atom2md.output.markdown import MarkdownRenderer
from atom2md.output.models import ConversionSummary, OutputFile
from atom2md.utils.errors import EmptyFeedError, InvalidConfigError

logger = logging.getLogger(__name__)


class PipelineOptions(BaseModel):
    """Options for a single conversion run."""

    extra: str = ""
    on_collision: CollisionPolicy = "overwrite"
    converter: str = "markdownify"
    workers: int = Field(default=1, ge=1)

    @classmethod
    def from_config(cls, config: ConvertConfig, **overrides) -> "PipelineOptions":
        """Build options from loaded config, letting non-None overrides win."""
        values = config.model_dump(include=set(cls.model_fields))
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)


class ConversionPipeline:
    """Convert an Atom feed export into Markdown posts.

    Example:
        >>> pipeline = ConversionPipeline(PipelineOptions(extra="team: web"))
        >>> summary = pipeline.run(Path("releases.atom"), Path("content/changelog"))
        >>> summary.written
        12
    """

    def __init__(
        self,
        options: PipelineOptions | None = None,
        parser: AtomParser | None = None,
        converter: HtmlConverter | None = None,
        renderer: MarkdownRenderer | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            options: Run options (defaults if None)
            parser: Feed parser (creates one if None)
            converter: HTML converter (looked up from options if None)
            renderer: Markdown renderer (creates one if None)

        Raises:
            InvalidConfigError: If options name an unknown converter
        """
        self.options = options or PipelineOptions()
        self.parser = parser or AtomParser()
        self.renderer = renderer or MarkdownRenderer()

        if converter is None:
            try:
                converter = get_converter(self.options.converter)
            except KeyError as e:
                raise InvalidConfigError(str(e.args[0])) from e
        self.converter = converter

    def run(self, xml_file: Path, target_dir: Path) -> ConversionSummary:
        """Convert every entry of `xml_file` into `target_dir`.

        Args:
            xml_file: Atom feed export
            target_dir: Output directory (created if missing)

        Returns:
            ConversionSummary of the written files

        Raises:
            OutputDirectoryError: If the target cannot be used as a directory
            FeedReadError: If the feed file cannot be read
            FeedParseError: If the feed is malformed
            EmptyFeedError: If the feed has no entries
            SlugCollisionError: If two entries share a filename under "fail"
            OutputWriteError: If any entry cannot be written
        """
        manager = OutputManager(target_dir, on_collision=self.options.on_collision)
        manager.ensure_directory()

        feed = self.parser.parse_file(xml_file)
        if not feed.entries:
            raise EmptyFeedError("No releases found!")

        logger.info(f"Converting {len(feed.entries)} entries from {feed.title!r}")

        # Claim every path up front so collisions are detected before any write.
        groups: dict[Path, list[tuple[int, Entry]]] = {}
        for index, entry in enumerate(feed.entries):
            path = manager.claim(entry.title)
            groups.setdefault(path, []).append((index, entry))

        results: dict[int, OutputFile] = {}
        tasks = list(groups.items())

        if self.options.workers > 1 and len(tasks) > 1:
            with ThreadPoolExecutor(max_workers=self.options.workers) as executor:
                for written in executor.map(
                    lambda task: self._process_group(feed, manager, *task), tasks
                ):
                    results.update(written)
        else:
            for path, group in tasks:
                results.update(self._process_group(feed, manager, path, group))

        return ConversionSummary(
            target_dir=target_dir,
            feed_title=feed.title,
            files=[results[index] for index in sorted(results)],
            collisions=list(manager.collisions),
        )

    def convert_entry(self, entry: Entry, feed_title: str) -> Entry:
        """Enrich an entry and convert its content to Markdown."""
        enriched = enrich_entry(entry, feed_title, extra=self.options.extra)
        return enriched.model_copy(
            update={"content": self.converter.convert(enriched.content)}
        )

    def _process_group(
        self,
        feed: Feed,
        manager: OutputManager,
        path: Path,
        group: list[tuple[int, Entry]],
    ) -> dict[int, OutputFile]:
        written = {}
        for index, entry in group:
            converted = self.convert_entry(entry, feed.title)
            document = self.renderer.render(converted)
            written[index] = manager.write_entry(entry.title, document, path)
        return written

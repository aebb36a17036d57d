"""CLI entry point for atom2md."""

import sys
from enum import Enum
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from atom2md.config.logging import setup_logging
from atom2md.config.manager import load_config
from atom2md.config.schema import ConvertConfig
from atom2md.pipeline import ConversionPipeline, PipelineOptions
from atom2md.utils.errors import Atom2MdError

USAGE = "Usage: atom2md [options] <xmlfile> <targetdir>"

app = typer.Typer(
    name="atom2md",
    help="Convert an Atom release-notes feed into Markdown files with frontmatter",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


class CollisionChoice(str, Enum):
    """What to do when two entries map to the same filename."""

    OVERWRITE = "overwrite"
    FAIL = "fail"


def _version_callback(value: bool) -> None:
    if value:
        from atom2md import __version__

        console.print(f"[bold cyan]atom2md[/bold cyan] v{__version__}")
        raise typer.Exit()


@app.command()
def convert(
    paths: list[Path] | None = typer.Argument(
        None, help="<xmlfile> <targetdir>", show_default=False
    ),
    extra: str | None = typer.Option(
        None,
        "--extra",
        "-extra",
        "-e",
        help="Additional metadata to set in frontmatter",
    ),
    on_collision: CollisionChoice | None = typer.Option(
        None,
        "--on-collision",
        help="When two titles map to the same file: overwrite (default) or fail",
    ),
    workers: int | None = typer.Option(
        None, "--workers", "-j", min=1, help="Number of entries converted in parallel"
    ),
    config_file: Path | None = typer.Option(
        None, "--config", help="YAML file with default options"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"
    ),
    log_file: Path | None = typer.Option(None, "--log-file", help="Write logs to file"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version information and exit",
    ),
) -> None:
    """Write one Markdown file per feed entry into the target directory.

    Examples:
        atom2md releases.atom content/changelog

        atom2md --extra "team: web" releases.atom content/changelog
    """
    setup_logging(verbose=verbose, log_file=log_file)

    if not paths or len(paths) != 2:
        err_console.print(USAGE, markup=False)
        err_console.print("Run with --help for the list of options.", markup=False)
        sys.exit(1)

    xml_file, target_dir = paths

    try:
        config = load_config(config_file) if config_file else ConvertConfig()
        if config.log_level != "INFO" and not verbose:
            setup_logging(log_file=log_file, level=config.log_level)

        options = PipelineOptions.from_config(
            config,
            extra=extra,
            on_collision=on_collision.value if on_collision else None,
            workers=workers,
        )
        summary = ConversionPipeline(options).run(xml_file, target_dir)

    except Atom2MdError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        sys.exit(1)

    console.print(
        f"[green]✓[/green] Wrote {summary.written} published posts to disk."
    )
    console.print(f"Wrote {summary.drafts} drafts to disk.")
    target = escape(str(summary.target_dir))
    console.print(f"[dim]  {summary.total_size_bytes} bytes in {target}[/dim]")
    if summary.collisions:
        console.print(
            f"[yellow]⚠[/yellow] {len(summary.collisions)} post(s) overwritten "
            "by later entries with the same filename"
        )


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()

"""CLI entry point for podfeed."""

import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from podfeed.config.logging import setup_logging
from podfeed.config.manager import ConfigManager
from podfeed.config.schema import GlobalConfig
from podfeed.feeds.formatters import format_float, format_pub_date
from podfeed.feeds.generator import generate
from podfeed.feeds.loader import load_channel
from podfeed.feeds.models import Channel
from podfeed.feeds.sample import sample_channel
from podfeed.utils.errors import ConfigError, FeedError, PodfeedError

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="podfeed",
    help="Generate Podcasting 2.0 RSS feeds from feed descriptions",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Write logs to file"
    ),
) -> None:
    """podfeed - Turn podcast descriptions into RSS feeds."""
    try:
        config = ConfigManager().load_config()
    except ConfigError as e:
        err_console.print(f"[red]✗[/red] {escape(str(e))}")
        sys.exit(1)

    setup_logging(verbose=verbose, log_file=log_file, level=config.log_level)
    ctx.obj = config


def _get_config(ctx: typer.Context) -> GlobalConfig:
    return ctx.obj if isinstance(ctx.obj, GlobalConfig) else GlobalConfig()


def _write_feed(
    channel: Channel,
    config: GlobalConfig,
    output: Path | None,
    indent: int | None,
    xml_declaration: bool,
) -> None:
    xml = generate(
        channel,
        indent=config.indent if indent is None else indent,
        xml_declaration=xml_declaration or config.xml_declaration,
    )

    target = output or config.default_output
    if target is None:
        typer.echo(xml)
        return

    target = target.expanduser()
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(xml + "\n", encoding="utf-8")
    logger.info("Wrote %d items to %s", len(channel.items), target)
    err_console.print(
        f"[green]✓[/green] Feed '[bold]{escape(channel.title)}[/bold]' written to {target}"
    )


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from podfeed import __version__

    console.print(f"[bold cyan]podfeed[/bold cyan] v{__version__}")


@app.command("generate")
def generate_feed(
    ctx: typer.Context,
    feed_file: Path = typer.Argument(..., help="Feed description (.yaml, .yml or .json)"),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write the feed to this file instead of stdout"
    ),
    indent: int | None = typer.Option(
        None, "--indent", min=0, help="Spaces per nesting level"
    ),
    xml_declaration: bool = typer.Option(
        False, "--xml-declaration", help="Prepend an XML declaration"
    ),
) -> None:
    """Generate an RSS feed from a feed description.

    Examples:
        podfeed generate show.yaml

        podfeed generate show.yaml -o public/feed.xml
    """
    try:
        channel = load_channel(feed_file)
        _write_feed(channel, _get_config(ctx), output, indent, xml_declaration)
    except FeedError as e:
        err_console.print(f"[red]✗[/red] {escape(str(e))}")
        sys.exit(1)
    except PodfeedError as e:
        err_console.print(f"[red]✗[/red] Error: {escape(str(e))}")
        sys.exit(1)


@app.command("sample")
def generate_sample(
    ctx: typer.Context,
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write the feed to this file instead of stdout"
    ),
) -> None:
    """Generate the built-in sample feed."""
    _write_feed(sample_channel(), _get_config(ctx), output, None, False)


@app.command("inspect")
def inspect_feed(
    feed_file: Path = typer.Argument(..., help="Feed description (.yaml, .yml or .json)"),
) -> None:
    """Show the episodes of a feed description."""
    try:
        channel = load_channel(feed_file)
    except FeedError as e:
        err_console.print(f"[red]✗[/red] {escape(str(e))}")
        sys.exit(1)

    if not channel.items:
        console.print(f"[yellow]'{escape(channel.title)}' has no episodes.[/yellow]")
        return

    table = Table(title=escape(channel.title), show_header=True, header_style="bold magenta")
    table.add_column("Title", style="cyan")
    table.add_column("Published", style="green")
    table.add_column("Season", justify="right")
    table.add_column("Episode", justify="right")
    table.add_column("Enclosure", style="dim")

    for item in channel.items:
        table.add_row(
            escape(item.title),
            format_pub_date(item.pub_date),
            str(item.season.number),
            format_float(item.episode.number),
            item.enclosure.mime_type if item.enclosure else "—",
        )

    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {len(channel.items)} episode(s)")


if __name__ == "__main__":
    app()

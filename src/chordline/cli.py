import logging
import sys
from pathlib import Path
from typing import TextIO

import click

from .exceptions import UnsupportedFormatError
from .registry import available_formats, get_formatter

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("-f", "--format", "format_name", default="text", show_default=True,
              envvar="CHORDLINE_FORMAT", metavar="FORMAT",
              help="Output format: text, html or json.  [env: CHORDLINE_FORMAT]")
@click.option("-o", "--output", "output_path", default=None, metavar="PATH",
              help="Output file path (default: stdout)")
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Log parsing details to stderr.")
def main(source: TextIO, format_name: str, output_path: str | None, verbose: bool) -> None:
    """Render ChordPro-annotated lyric lines such as "[Am]Hello [G]world".

    Reads SOURCE (default: stdin) one lyric line at a time.

    \b
    Formats:
      - text  chords above lyrics
      - html  <div class="line"> markup for the song pages
      - json  one array of {chord, text} records per line
    """
    _configure_logging(verbose)

    # --- Resolve formatter ---
    try:
        formatter = get_formatter(format_name)
    except UnsupportedFormatError as exc:
        click.echo(f"Error: {exc}", err=True)
        click.echo(f"Supported formats: {', '.join(available_formats())}", err=True)
        sys.exit(1)

    # --- Render ---
    # Only \n, \r and \r\n end a lyric line; U+2028, \x0c and \x85 stay in the text
    try:
        lines = [line.rstrip("\r\n") for line in source]
    except UnicodeDecodeError as exc:
        click.echo(f"Error: {source.name} is not valid UTF-8 ({exc.reason})", err=True)
        sys.exit(1)
    logger.info("Rendering %d line(s) as %s", len(lines), formatter.name)
    rendered = formatter.render(lines)

    # --- Output ---
    if output_path is None:
        click.echo(rendered, nl=False)
        return

    dest = Path(output_path)
    dest.write_text(rendered, encoding="utf-8")
    click.echo(f"Written to {dest}")

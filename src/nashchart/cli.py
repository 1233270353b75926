import logging
import re
import sys
from pathlib import Path

import click

from .chart import MEASURES_PER_LINE, build_chart
from .chordpro import ChordProFormatter
from .exceptions import FetchError, SourceError, UnsupportedSourceError
from .metadata import extract_metadata, is_valid_chord_sheet
from .registry import get_source
from .render import SEPARATORS, ChartFormatter

_EXTENSIONS = {"chart": ".txt", "chordpro": ".cho"}


def _slugify(text: str) -> str:
    """Convert a string to a lowercase hyphenated slug suitable for filenames."""
    text = text.lower()
    text = re.sub(r"[^\w\s-]", "", text)   # drop punctuation
    text = re.sub(r"[\s_]+", "-", text)     # spaces/underscores → hyphens
    text = re.sub(r"-{2,}", "-", text)      # collapse multiple hyphens
    return text.strip("-")


def _default_filename(artist: str, title: str, output_format: str) -> str:
    return f"{_slugify(artist)}-{_slugify(title)}{_EXTENSIONS[output_format]}"


@click.command(context_settings={"auto_envvar_prefix": "NASHCHART"})
@click.argument("source")
@click.option("-o", "--output", "output_path", default=None, metavar="PATH",
              help="Output file path (default: <artist>-<title>.txt or .cho)")
@click.option("--stdout", is_flag=True, default=False,
              help="Print to stdout instead of writing a file.")
@click.option("--format", "output_format", type=click.Choice(sorted(_EXTENSIONS)),
              default="chart", show_default=True,
              help="Plain Nashville chart or chord-only ChordPro.")
@click.option("--separator", type=click.Choice(sorted(SEPARATORS)), default="space",
              show_default=True, help="Chord separator for the plain chart.")
@click.option("--width", type=click.IntRange(min=1), default=MEASURES_PER_LINE,
              show_default=True, help="Chords per measure line.")
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Log parsing details to stderr.")
def main(
    source: str,
    output_path: str | None,
    stdout: bool,
    output_format: str,
    separator: str,
    width: int,
    verbose: bool,
) -> None:
    """Turn a chord sheet into a Nashville chart.

    \b
    SOURCE may be:
      - a local text or ChordPro file (.txt, .cho, .chordpro, .crd, .pro)
      - an http:// or https:// URL
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # --- Read ---
    try:
        document = get_source(source).fetch(source)
    except UnsupportedSourceError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    except FetchError as exc:
        msg = f"Error: Could not fetch {exc.location}"
        if exc.status_code:
            msg += f" (HTTP {exc.status_code})"
        click.echo(msg, err=True)
        sys.exit(1)
    except SourceError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if document.is_pdf:
        click.echo(
            f"Error: {document.file_name} is a PDF; open it in a PDF viewer instead",
            err=True,
        )
        sys.exit(1)

    if not is_valid_chord_sheet(document.content):
        click.echo(f"Error: {document.file_name or source} does not look like a chord sheet", err=True)
        sys.exit(1)

    # --- Parse ---
    metadata = extract_metadata(document.content, document.file_name)
    chart = build_chart(document.content, width=width)
    if chart.is_empty:
        click.echo(f"Error: No chords found in {document.file_name or source}", err=True)
        sys.exit(1)

    # --- Render ---
    if output_format == "chordpro":
        text = ChordProFormatter().render(chart, metadata)
    else:
        text = ChartFormatter(separator=SEPARATORS[separator], width=width).render(chart) + "\n"

    # --- Output ---
    if stdout:
        click.echo(text, nl=False)
        return

    dest = (
        Path(output_path)
        if output_path
        else Path(_default_filename(metadata.artist, metadata.title, output_format))
    )
    dest.write_text(text, encoding="utf-8")
    click.echo(f"Written to {dest}")

"""Metadata extraction and validity checks for raw chord sheets.

Metadata is resolved in priority order:

  1. ChordPro tags anywhere in the text: ``{title: ...}``, ``{t: ...}``,
     ``{artist: ...}``, ``{subtitle: ...}``, ``{st: ...}``, ``{key: ...}``,
     ``{tempo: ...}``
  2. ``Title:`` / ``Song:`` / ``Artist:`` / ``By:`` lines near the top
  3. the first line of the sheet as the title
  4. ``Key:`` / ``Tempo:`` / ``BPM:`` lines near the top
  5. the file name (extension stripped) as the title, "Unknown Artist"
"""

import re

from .lines import CHORD_RE
from .models import ChordSheetMetadata

UNKNOWN_ARTIST = "Unknown Artist"

# {tag: value} — the tag itself may not contain a colon or brace
CHORDPRO_TAG_RE = re.compile(r"\{([^:{}]+):([^}]*)\}")
_ANY_TAG_RE = re.compile(r"\{[^}]+\}")

_FILE_EXTENSION_RE = re.compile(r"\.(?:txt|chordpro|cho|crd|pro|pdf)$", re.IGNORECASE)

_TITLE_SCAN_LINES = 5
_KEY_SCAN_LINES = 10


def chordpro_tags(content: str) -> dict[str, str]:
    """Return ``{tag: value}`` for every ChordPro tag in *content*.

    Tags are lowercased; a repeated tag keeps its last value.  Malformed tags
    (no closing brace, no colon) are skipped.
    """
    return {m.group(1).strip().lower(): m.group(2).strip() for m in CHORDPRO_TAG_RE.finditer(content)}


def _after_prefix(line: str, prefixes: tuple[str, ...]) -> str | None:
    lowered = line.lower()
    for prefix in prefixes:
        if lowered.startswith(prefix):
            return line[len(prefix):].strip()
    return None


def _title_from_lines(lines: list[str]) -> str:
    title = ""
    for line in lines[:_TITLE_SCAN_LINES]:
        value = _after_prefix(line, ("title:", "song:"))
        if value is not None:
            title = value
    if title:
        return title
    first = lines[0] if lines else ""
    if first and not first.startswith(("[", "#")):
        return first
    return ""


def _artist_from_lines(lines: list[str]) -> str:
    artist = ""
    for line in lines[:_TITLE_SCAN_LINES]:
        value = _after_prefix(line, ("artist:", "by:"))
        if value is not None:
            artist = value
    return artist


def title_from_filename(file_name: str) -> str:
    return _FILE_EXTENSION_RE.sub("", file_name)


def extract_metadata(content: str, file_name: str) -> ChordSheetMetadata:
    """Return best-effort title/artist/key/tempo for a chord sheet.

    Never fails: missing fields fall back to the file name and
    ``"Unknown Artist"``; key and tempo stay ``None``.  *content* is passed
    through untouched.
    """
    tags = chordpro_tags(content)
    title = tags.get("title") or tags.get("t") or ""
    artist = tags.get("artist") or tags.get("subtitle") or tags.get("st") or ""
    key = tags.get("key") or ""
    tempo = tags.get("tempo") or ""

    lines = [line.strip() for line in content.splitlines()]

    if not title:
        title = _title_from_lines(lines)
    if not artist:
        artist = _artist_from_lines(lines)

    for line in lines[:_KEY_SCAN_LINES]:
        if not key:
            key = _after_prefix(line, ("key:",)) or ""
        if not tempo:
            tempo = _after_prefix(line, ("tempo:", "bpm:")) or ""

    if not title:
        title = title_from_filename(file_name)
    if not artist:
        artist = UNKNOWN_ARTIST

    return ChordSheetMetadata(
        title=title,
        artist=artist,
        content=content,
        key=key or None,
        tempo=tempo or None,
    )


def is_valid_chord_sheet(content: str, is_pdf: bool = False) -> bool:
    """Return True if *content* plausibly holds chord-sheet data.

    PDFs are always accepted (their content is opaque here).  Otherwise any
    ChordPro tag or any chord-shaped token is enough; false positives are
    preferred over rejecting real charts.
    """
    if is_pdf:
        return True
    if not content or not content.strip():
        return False
    return bool(_ANY_TAG_RE.search(content) or CHORD_RE.search(content))


def is_pdf_file(file_name: str, mime_type: str | None = None) -> bool:
    """Return True if the file is a PDF, by extension or MIME type."""
    return file_name.lower().endswith(".pdf") or mime_type == "application/pdf"

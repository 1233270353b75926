"""Chord lexing and line classification for free-form chord sheets.

Every line of a chord sheet is sorted into exactly one bucket by an ordered
list of rules; the first rule that claims a line wins:

  1. BLANK     — empty or whitespace only
  2. METADATA  — ``Title:``, ``Key:``, ``Capo:`` ... and ChordPro ``{...}`` directives
  3. SECTION   — ``[Verse 2]``, ``Chorus:``, ``Bridge``, ``{start_of_chorus}``
  4. LYRICS    — mostly lowercase text, or text containing common English words
  5. CHORDS    — at least one chord token
  6. OTHER     — anything left over; contributes nothing to a chart

Chord tokens follow a purely lexical grammar (no music theory)::

    root       A-G
    accidental #  b  ♯  ♭          (optional)
    quality    maj min m dim aug sus add   (optional)
    extension  a single digit     (optional)
    bass       /root[accidental]  (optional)

Examples: ``C``, ``F#m``, ``Bbmaj7``, ``Asus4``, ``G/B``, ``E♭``.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto

from .models import ChordToken

# ---------------------------------------------------------------------------
# Regexes
# ---------------------------------------------------------------------------

_ACCIDENTAL = "[#b♯♭]"

_CHORD_PAT = (
    rf"[A-G]{_ACCIDENTAL}?"
    r"(?:maj|min|m|dim|aug|sus|add)?"
    r"\d?"
    rf"(?:/[A-G]{_ACCIDENTAL}?)?"
)

# A chord embedded anywhere in a line.  The lookarounds keep it from matching
# inside words ("Bad", "Cadillac") or swallowing half of "C#".
CHORD_RE = re.compile(rf"(?<![\w#♯♭/])({_CHORD_PAT})(?![\w#♯♭])")

# A whole word that is exactly one chord
CHORD_NAME_RE = re.compile(rf"^{_CHORD_PAT}$")

# Bar lines, repeat marks and similar chart notation that may sit between chords
_NOTATION_RE = re.compile(r"^(?:[|:/%.\-]*|x\d+|\d+x|n\.?c)$", re.IGNORECASE)
_NOTATION_STRIP = "|:[](),."

# "No chord" marker; its C is not a chord
_NO_CHORD_RE = re.compile(r"(?<![\w.])N\.C\.?(?![\w])")

# Single letters on a mixed line are dropped as lyric false positives, except these
SINGLE_LETTER_WHITELIST = frozenset({"A", "I"})

_METADATA_PREFIXES = ("title:", "artist:", "key:", "tempo:", "bpm:", "by:", "capo:")

# ChordPro directive: {name} or {name: value}
_DIRECTIVE_RE = re.compile(r"^\{\s*([^:}]+?)\s*(?::\s*([^}]*?))?\s*\}")

_COMMENT_DIRECTIVES = ("comment", "c", "comment_italic", "ci")

_SHORT_SECTION_DIRECTIVES = {
    "sov": "verse",
    "soc": "chorus",
    "sob": "bridge",
    "sot": "tab",
    "sog": "grid",
}

# [Label] at the start of a line
BRACKET_LABEL_RE = re.compile(r"^\[([^\]]*)\]")

# Known section-header keywords (case-insensitive), optionally numbered
SECTION_KEYWORDS_RE = re.compile(
    r"^(Pre-?Chorus|Verse|Chorus|Bridge|Intro|Outro|Interlude|Solo|Tag|Ending|"
    r"Refrain|Hook|Coda|Instrumental)(?:\s*(\d+))?(?=\s|:|$)",
    re.IGNORECASE,
)

LYRIC_RATIO = 0.6

_COMMON_WORDS = (
    "the", "and", "you", "me", "my", "your", "love", "heart", "time", "day",
    "night", "way", "life", "know", "see", "feel", "want", "need", "come", "go",
    "take", "make", "give", "tell", "say", "think", "look", "find", "keep",
    "hold", "stay", "leave", "turn", "walk", "run", "sing", "dance", "play",
    "dream", "hope", "wish", "believe",
)
COMMON_WORDS_RE = re.compile(rf"\b(?:{'|'.join(_COMMON_WORDS)})\b", re.IGNORECASE)

_LOWER_RE = re.compile(r"[a-z]")
_ROOT_UPPER_RE = re.compile(r"[A-G]")


# ---------------------------------------------------------------------------
# Chord extraction
# ---------------------------------------------------------------------------


def find_chords(text: str) -> list[ChordToken]:
    """Return every chord-shaped token in *text*, with no filtering at all."""
    return [m.group(1) for m in CHORD_RE.finditer(text)]


def is_chord_only(line: str) -> bool:
    """True if every word on *line* is a chord or bar/repeat notation."""
    words = line.split()
    if not words:
        return False
    for word in words:
        core = word.strip(_NOTATION_STRIP)
        if not (CHORD_NAME_RE.match(core) or _NOTATION_RE.match(core)):
            return False
    return True


def extract_chords(line: str) -> list[ChordToken]:
    """Return the chord tokens of *line*, left to right.

    On a line made only of chords (and bar lines), every token is kept.  On a
    mixed line, single-letter tokens are dropped unless whitelisted.
    """
    tokens = find_chords(_NO_CHORD_RE.sub(" ", line))
    if not tokens or is_chord_only(line):
        return tokens
    return [t for t in tokens if len(t) > 1 or t in SINGLE_LETTER_WHITELIST]


# ---------------------------------------------------------------------------
# LineType
# ---------------------------------------------------------------------------


class LineType(Enum):
    BLANK = auto()  # empty or whitespace only
    METADATA = auto()  # Title: ..., Key: G, {title: ...}
    SECTION = auto()  # [Verse 1], Chorus:, Bridge
    LYRICS = auto()  # sung text
    CHORDS = auto()  # at least one chord token
    OTHER = auto()  # nothing usable


@dataclass(frozen=True)
class ClassifiedLine:
    """One trimmed source line and what it was classified as.

    ``name`` is set for SECTION lines, ``chords`` for CHORDS lines.
    """

    kind: LineType
    text: str
    name: str | None = None
    chords: tuple[ChordToken, ...] = ()


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


def _blank_rule(line: str) -> ClassifiedLine | None:
    if not line:
        return ClassifiedLine(LineType.BLANK, line)
    return None


def _metadata_rule(line: str) -> ClassifiedLine | None:
    if line.lower().startswith(_METADATA_PREFIXES):
        return ClassifiedLine(LineType.METADATA, line)
    m = _DIRECTIVE_RE.match(line)
    if m:
        name = directive_section_name(m.group(1), m.group(2))
        if name:
            return ClassifiedLine(LineType.SECTION, line, name=name)
        return ClassifiedLine(LineType.METADATA, line)
    return None


def _section_rule(line: str) -> ClassifiedLine | None:
    name = section_name(line)
    if name:
        return ClassifiedLine(LineType.SECTION, line, name=name)
    return None


def _lyrics_rule(line: str) -> ClassifiedLine | None:
    # Bare chord lines are never lyrics
    if not is_chord_only(line) and looks_like_lyrics(line):
        return ClassifiedLine(LineType.LYRICS, line)
    return None


def _chord_rule(line: str) -> ClassifiedLine | None:
    chords = extract_chords(line)
    if chords:
        return ClassifiedLine(LineType.CHORDS, line, chords=tuple(chords))
    return None


_RULES: tuple[Callable[[str], ClassifiedLine | None], ...] = (
    _blank_rule,
    _metadata_rule,
    _section_rule,
    _lyrics_rule,
    _chord_rule,
)


# ---------------------------------------------------------------------------
# Line classification
# ---------------------------------------------------------------------------


def classify_line(line: str) -> ClassifiedLine:
    """Classify a single line of chord-sheet text.

    The line is trimmed first.  Rules are tried in priority order; a line no
    rule claims comes back as :attr:`LineType.OTHER`.
    """
    stripped = line.strip()
    for rule in _RULES:
        result = rule(stripped)
        if result is not None:
            return result
    return ClassifiedLine(LineType.OTHER, stripped)


def classify_lines(content: str) -> list[ClassifiedLine]:
    return [classify_line(line) for line in content.splitlines()]


def section_name(line: str) -> str | None:
    """Return the section label of a header line, or None.

    Handles ``[Verse 1]`` (any bracketed label that is not itself a chord) and
    keyword headers such as ``Chorus:``, ``verse 2``, ``Bridge``.
    """
    m = BRACKET_LABEL_RE.match(line)
    if m:
        label = m.group(1).strip()
        if label and not CHORD_NAME_RE.match(label):
            return label
    m = SECTION_KEYWORDS_RE.match(line)
    if m:
        word, number = m.group(1), m.group(2)
        return f"{word} {number}" if number else word
    return None


def directive_section_name(directive: str, value: str | None) -> str | None:
    """Return the section a ChordPro directive opens, or None.

    ``{start_of_chorus}`` → "Chorus", ``{sov: Verse 2}`` → "Verse 2", and
    ``{comment: Bridge}`` → "Bridge" when the comment is a section keyword.
    """
    directive = directive.lower()
    if directive in _SHORT_SECTION_DIRECTIVES:
        kind = _SHORT_SECTION_DIRECTIVES[directive]
    elif directive.startswith("start_of_"):
        kind = directive[len("start_of_"):]
    elif directive in _COMMENT_DIRECTIVES:
        return section_name(value) if value else None
    else:
        return None
    return value or kind.replace("_", " ").title()


def looks_like_lyrics(line: str) -> bool:
    """Heuristic: is *line* sung text rather than chords?

    Lyrics are lines where lowercase letters outweigh chord roots (A-G), or
    that contain a common English word.
    """
    lower = len(_LOWER_RE.findall(line))
    total = lower + len(_ROOT_UPPER_RE.findall(line))
    if total and lower / total > LYRIC_RATIO:
        return True
    return COMMON_WORDS_RE.search(line) is not None

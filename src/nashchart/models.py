from collections.abc import Iterator
from dataclasses import dataclass, field

# A chord symbol as lexed from text, e.g. "Am7", "F#m", "G/B".
ChordToken = str


@dataclass(frozen=True)
class NashvilleSection:
    """A named block of measure lines (Verse, Chorus, Chart, ...).

    Each measure line holds at most ``width`` chords (4 by default).  Short
    trailing lines are stored as-is; padding them out is up to the renderer.
    """

    name: str
    measures: tuple[tuple[ChordToken, ...], ...] = ()


@dataclass(frozen=True)
class NashvilleChart:
    """Ordered sections of a chart.  No sections means "no chart"."""

    sections: tuple[NashvilleSection, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.sections

    def chords(self) -> Iterator[ChordToken]:
        for section in self.sections:
            for measure in section.measures:
                yield from measure


@dataclass(frozen=True)
class ChordSheetMetadata:
    """Best-effort metadata pulled out of a chord sheet."""

    title: str
    artist: str
    content: str
    key: str | None = None
    tempo: str | None = None  # verbatim, e.g. "80" or "80 BPM"


@dataclass(frozen=True)
class SourceDocument:
    """Raw chord-sheet text as handed over by a source adapter.

    PDF documents carry no text (``content == ""``); they are recognised so
    callers can route them to a viewer instead of the parser.
    """

    content: str
    file_name: str
    location: str = ""
    mime_type: str | None = None
    is_pdf: bool = field(default=False)

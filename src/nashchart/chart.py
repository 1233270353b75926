"""Build a Nashville chart out of chord-sheet text.

The builder folds over classified lines (see :mod:`nashchart.lines`) with an
immutable ``(sections, current)`` accumulator:

  - BLANK, METADATA, LYRICS and OTHER lines are skipped.
  - A SECTION line closes the current section (kept only if it has at least
    one measure line) and opens a new, empty one.
  - A CHORDS line opens a default ``"Chart"`` section if none is active, then
    appends its chords in groups of ``width`` (one source line with more than
    ``width`` chords yields several measure lines).

If that pass finds nothing, every non-lyric line is rescanned and all chords
found are put into a single ``"Chart"`` section.
"""

import logging
from collections.abc import Iterable, Sequence
from functools import partial, reduce
from typing import NamedTuple

from .lines import ClassifiedLine, LineType, classify_lines, extract_chords, find_chords
from .models import ChordToken, NashvilleChart, NashvilleSection

logger = logging.getLogger(__name__)

DEFAULT_SECTION = "Chart"
MEASURES_PER_LINE = 4


class _ChartState(NamedTuple):
    sections: tuple[NashvilleSection, ...] = ()
    current: NashvilleSection | None = None


def group_measures(
    chords: Sequence[ChordToken], width: int = MEASURES_PER_LINE
) -> tuple[tuple[ChordToken, ...], ...]:
    """Split *chords* into consecutive measure lines of at most *width*."""
    return tuple(tuple(chords[i : i + width]) for i in range(0, len(chords), width))


def _flush(state: _ChartState) -> tuple[NashvilleSection, ...]:
    if state.current is not None and state.current.measures:
        return state.sections + (state.current,)
    return state.sections


def _step(state: _ChartState, line: ClassifiedLine, width: int) -> _ChartState:
    if line.kind == LineType.SECTION:
        return _ChartState(_flush(state), NashvilleSection(name=line.name or DEFAULT_SECTION))

    if line.kind != LineType.CHORDS:
        return state

    current = state.current or NashvilleSection(name=DEFAULT_SECTION)
    measures = current.measures + group_measures(line.chords, width)
    return state._replace(current=NashvilleSection(name=current.name, measures=measures))


def _fallback_chords(lines: Iterable[ClassifiedLine]) -> list[ChordToken]:
    chords: list[ChordToken] = []
    for line in lines:
        if line.kind in (LineType.BLANK, LineType.LYRICS):
            continue
        chords.extend(extract_chords(line.text))
    return chords


def build_chart(content: str, width: int = MEASURES_PER_LINE) -> NashvilleChart:
    """Parse *content* into a :class:`~nashchart.models.NashvilleChart`.

    Never fails for string input: text without chords gives a chart with no
    sections.  Raises :class:`ValueError` if *width* is less than 1.
    """
    if width < 1:
        raise ValueError(f"width must be at least 1, got {width}")

    lines = classify_lines(content)
    state = reduce(partial(_step, width=width), lines, _ChartState())
    sections = _flush(state)

    if not sections and content.strip():
        chords = _fallback_chords(lines)
        if chords:
            logger.debug("No chord sections found; falling back to %d loose chords", len(chords))
            sections = (NashvilleSection(name=DEFAULT_SECTION, measures=group_measures(chords, width)),)

    logger.debug("Built chart with %d section(s)", len(sections))
    return NashvilleChart(sections=sections)


parse_to_nashville_chart = build_chart


def has_enough_chords(content: str, minimum: int = 4) -> bool:
    """Return True if *content* holds at least *minimum* chord-shaped tokens."""
    return len(find_chords(content)) >= minimum


def extract_chords_only(content: str) -> str:
    """Strip lyrics and metadata, keeping section headers and chord lines verbatim."""
    kept = [
        line.text
        for line in classify_lines(content)
        if line.kind in (LineType.SECTION, LineType.CHORDS)
    ]
    return "\n".join(kept)

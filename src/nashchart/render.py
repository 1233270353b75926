"""Plain-text rendering of a :class:`~nashchart.models.NashvilleChart`.

Output looks like::

    [Verse]
    C  G  Am  F
    C  G  F  G

    [Chorus]
    F  C  G

Lyrics and original spacing are gone for good; only section names and chords
survive.  Feeding the output back through :func:`~nashchart.chart.build_chart`
gives the same sections and measure lines.
"""

from .chart import MEASURES_PER_LINE
from .models import NashvilleChart, NashvilleSection

# Named separator styles, selectable from the command line
SEPARATORS = {
    "space": "  ",
    "pipe": "  |  ",
}

EMPTY_CELL = "-"


class ChartFormatter:
    """Render a chart as ``[Section]`` blocks of measure lines."""

    def __init__(self, separator: str = SEPARATORS["space"], width: int = MEASURES_PER_LINE):
        self.separator = separator
        self.width = width

    def render(self, chart: NashvilleChart) -> str:
        """Return the chart as text, with no trailing whitespace."""
        parts: list[str] = []
        for section in chart.sections:
            parts.append(f"[{section.name}]")
            parts.extend(self.separator.join(measure) for measure in section.measures)
            parts.append("")
        return "\n".join(parts).rstrip()

    def grid(self, section: NashvilleSection) -> list[list[str]]:
        """Return the section's measure lines padded to ``width`` cells.

        Missing slots are filled with ``"-"``; the stored chart is untouched.
        """
        rows = []
        for measure in section.measures:
            row = list(measure)
            row.extend(EMPTY_CELL for _ in range(self.width - len(row)))
            rows.append(row)
        return rows


def chart_to_string(chart: NashvilleChart, separator: str = SEPARATORS["space"]) -> str:
    return ChartFormatter(separator=separator).render(chart)

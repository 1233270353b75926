"""Render a Nashville chart as a chord-only ChordPro (``.cho``) document.

Section name → ChordPro directive mapping
-----------------------------------------

+--------------------------------------+------------------------------------+
| Name (case-insensitive prefix)       | Directive pair                     |
+======================================+====================================+
| ``Verse``, ``Verse N``               | ``{start_of_verse: Verse N}`` /    |
|                                      | ``{end_of_verse}``                 |
+--------------------------------------+------------------------------------+
| ``Chorus``                           | ``{start_of_chorus}`` /            |
|                                      | ``{end_of_chorus}``                |
+--------------------------------------+------------------------------------+
| ``Bridge``                           | ``{start_of_bridge}`` /            |
|                                      | ``{end_of_bridge}``                |
+--------------------------------------+------------------------------------+
| anything else (``Intro``, ``Chart``, | ``{comment: <name>}``              |
| ``Solo``, ``Tag``, ...)              | (no matching ChordPro standard)    |
+--------------------------------------+------------------------------------+

Each measure line becomes one line of bracketed chords: ``[C] [G] [Am] [F]``.

Usage::

    from nashchart.chordpro import ChordProFormatter
    text = ChordProFormatter().render(chart, metadata)
    Path("output.cho").write_text(text)
"""

from .models import ChordSheetMetadata, NashvilleChart, NashvilleSection

# Section names whose directives ChordPro has standardised.
_STRUCTURED = {
    "verse": ("start_of_verse", "end_of_verse"),
    "chorus": ("start_of_chorus", "end_of_chorus"),
    "bridge": ("start_of_bridge", "end_of_bridge"),
}


class ChordProFormatter:
    """Render a :class:`~nashchart.models.NashvilleChart` to ChordPro text."""

    def render(self, chart: NashvilleChart, metadata: ChordSheetMetadata | None = None) -> str:
        """Return ChordPro text for *chart*, headed by *metadata* if given.

        The returned string ends with a single newline.
        """
        parts: list[str] = []

        # --- Metadata block ---
        if metadata is not None:
            parts.append(f"{{title: {metadata.title}}}")
            parts.append(f"{{artist: {metadata.artist}}}")
            if metadata.key:
                parts.append(f"{{key: {metadata.key}}}")
            if metadata.tempo:
                parts.append(f"{{tempo: {metadata.tempo}}}")

        # --- Section blocks ---
        for section in chart.sections:
            if parts:
                parts.append("")  # blank line before every section
            parts.extend(_render_section(section))

        return "\n".join(parts) + "\n"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _render_section(section: NashvilleSection) -> list[str]:
    """Return the lines for one section (no trailing blank line)."""
    lines = [" ".join(f"[{chord}]" for chord in measure) for measure in section.measures]

    words = section.name.lower().split()
    first_word = words[0] if words else ""  # "verse" from "Verse 1"

    if first_word in _STRUCTURED:
        start_dir, end_dir = _STRUCTURED[first_word]
        # Verse keeps its full name ("Verse 2"); chorus/bridge use the bare directive
        if first_word == "verse":
            start_line = f"{{{start_dir}: {section.name}}}"
        else:
            start_line = f"{{{start_dir}}}"
        return [start_line, *lines, f"{{{end_dir}}}"]

    return [f"{{comment: {section.name}}}", *lines]

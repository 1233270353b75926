from nashchart.lines import (
    LineType,
    classify_line,
    classify_lines,
    directive_section_name,
    extract_chords,
    find_chords,
    is_chord_only,
    looks_like_lyrics,
    section_name,
)

# ---------------------------------------------------------------------------
# find_chords / extract_chords
# ---------------------------------------------------------------------------


def test_find_chords_basic():
    assert find_chords("C G Am F") == ["C", "G", "Am", "F"]


def test_find_chords_qualities_and_slash_bass():
    assert find_chords("Cmaj7  F#m7  Bb/D  Asus4  Ddim  Eaug  Cadd9") == [
        "Cmaj7",
        "F#m7",
        "Bb/D",
        "Asus4",
        "Ddim",
        "Eaug",
        "Cadd9",
    ]


def test_find_chords_unicode_accidentals():
    assert find_chords("E♭  F♯m") == ["E♭", "F♯m"]


def test_find_chords_keeps_sharp():
    assert find_chords("C#") == ["C#"]


def test_find_chords_ignores_letters_inside_words():
    assert find_chords("Bad Cadillac Everything") == []


def test_extract_chords_bracketed():
    assert extract_chords("[G] [D] [Em]") == ["G", "D", "Em"]


def test_extract_chords_with_bar_lines_and_repeats():
    assert extract_chords("| C  G | Am  F |  (x2)") == ["C", "G", "Am", "F"]


def test_extract_chords_mixed_line_drops_single_letters():
    assert extract_chords("C then G") == []


def test_extract_chords_mixed_line_keeps_whitelisted_a():
    assert extract_chords("A then C") == ["A"]


def test_extract_chords_mixed_line_keeps_multi_letter_chords():
    assert extract_chords("Intro: Am Em") == ["Am", "Em"]


def test_is_chord_only():
    assert is_chord_only("C  G  |  Am  F")
    assert not is_chord_only("C G and more")
    assert not is_chord_only("   ")


# ---------------------------------------------------------------------------
# classify_line — blank and metadata
# ---------------------------------------------------------------------------


def test_classify_blank():
    assert classify_line("").kind == LineType.BLANK
    assert classify_line("   ").kind == LineType.BLANK


def test_classify_metadata_prefixes():
    for line in ("Title: Foo", "artist: Bar", "KEY: G", "Tempo: 90", "BPM: 120", "By: Someone", "Capo: 2"):
        assert classify_line(line).kind == LineType.METADATA, line


def test_classify_chordpro_directive_is_metadata():
    assert classify_line("{title: Amazing Grace}").kind == LineType.METADATA
    assert classify_line("{end_of_chorus}").kind == LineType.METADATA


# ---------------------------------------------------------------------------
# classify_line — section headers
# ---------------------------------------------------------------------------


def test_classify_bracketed_section():
    result = classify_line("[Verse]")
    assert result.kind == LineType.SECTION
    assert result.name == "Verse"


def test_classify_bracketed_arbitrary_label():
    assert classify_line("[Guitar Break]").name == "Guitar Break"


def test_classify_bracketed_chord_is_not_section():
    result = classify_line("[Am]")
    assert result.kind == LineType.CHORDS
    assert result.chords == ("Am",)


def test_classify_keyword_sections():
    assert classify_line("Verse 2:").name == "Verse 2"
    assert classify_line("Verse2").name == "Verse 2"
    assert classify_line("Chorus").name == "Chorus"
    assert classify_line("Pre-Chorus:").name == "Pre-Chorus"
    assert classify_line("instrumental").name == "instrumental"


def test_classify_keyword_must_end_at_word_boundary():
    assert classify_line("Taggart").kind != LineType.SECTION


def test_classify_chordpro_section_directives():
    assert classify_line("{start_of_chorus}").name == "Chorus"
    assert classify_line("{soc}").name == "Chorus"
    assert classify_line("{sov: Verse 2}").name == "Verse 2"
    assert classify_line("{c: Bridge}").name == "Bridge"


def test_section_name_none_for_plain_text():
    assert section_name("C G Am F") is None


def test_directive_section_name_ignores_other_comments():
    assert directive_section_name("comment", "Play softly") is None
    assert directive_section_name("title", "Chorus") is None


# ---------------------------------------------------------------------------
# classify_line — lyrics and chords
# ---------------------------------------------------------------------------


def test_classify_lyrics_suppresses_chord_letters():
    result = classify_line("Amazing grace how sweet the sound")
    assert result.kind == LineType.LYRICS
    assert result.chords == ()


def test_classify_lyrics_by_common_word():
    assert classify_line("GO GO GO").kind == LineType.LYRICS


def test_classify_chord_line():
    result = classify_line("  C   G   Am   F  ")
    assert result.kind == LineType.CHORDS
    assert result.chords == ("C", "G", "Am", "F")
    assert result.text == "C   G   Am   F"


def test_classify_other():
    assert classify_line("---").kind == LineType.OTHER
    assert classify_line("N.C.").kind == LineType.OTHER


def test_looks_like_lyrics():
    assert looks_like_lyrics("Dark star crashes, pouring its light")
    assert not looks_like_lyrics("C  G  Am  F")
    assert not looks_like_lyrics("")


def test_looks_like_lyrics_ratio_must_exceed_threshold():
    # 6 lowercase letters to 4 chord roots is exactly 0.6
    assert not looks_like_lyrics("Dmaj7 Gmaj7 A D")
    # 9 to 4 is above it
    assert looks_like_lyrics("Dmaj7 Gmaj7 Asus D")


def test_classify_mixed_line_at_lyric_threshold_stays_chords():
    result = classify_line("Dmaj7 Gmaj7 A D 4/4")
    assert result.kind == LineType.CHORDS
    assert result.chords == ("Dmaj7", "Gmaj7", "A")


def test_classify_mixed_line_above_lyric_threshold_is_lyrics():
    assert classify_line("Dmaj7 Gmaj7 Asus D 4/4").kind == LineType.LYRICS


def test_classify_extended_chord_line_is_not_lyrics():
    result = classify_line("Cmaj7 Fmaj7 Gsus4 Dsus2")
    assert result.kind == LineType.CHORDS
    assert result.chords == ("Cmaj7", "Fmaj7", "Gsus4", "Dsus2")


def test_no_chord_marker():
    assert is_chord_only("G D N.C. C")
    assert extract_chords("G D N.C. C") == ["G", "D", "C"]
    assert classify_line("G D N.C. C").chords == ("G", "D", "C")


def test_classify_lines_splits_content():
    kinds = [line.kind for line in classify_lines("[Verse]\nC G\n\nsing it loud")]
    assert kinds == [LineType.SECTION, LineType.CHORDS, LineType.BLANK, LineType.LYRICS]

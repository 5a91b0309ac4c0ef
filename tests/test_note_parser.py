"""Unit tests for note token and melody parsing."""

import pytest

from counterlint.issues import IssueKind, VoiceName
from counterlint.note_parser import Note, NoteParseError, parse_melody, parse_note


def test_middle_c_is_sixty() -> None:
    assert parse_note("C4").pitch == 60


def test_enharmonic_sharp_and_flat_share_pitch() -> None:
    assert parse_note("C#4").pitch == parse_note("Db4").pitch == 61


@pytest.mark.parametrize("token", ["C4", "c#4", "Db3", "B-1", "Cb4", "B#4", "G9", "e0"])
def test_pitch_class_matches_pitch(token: str) -> None:
    note = parse_note(token)
    assert note.pitch_class == note.pitch % 12


def test_lowercase_letter_accepted() -> None:
    assert parse_note("a4").pitch == 69


def test_negative_octave() -> None:
    assert parse_note("C-1").pitch == 0


def test_flat_wraps_below_c() -> None:
    note = parse_note("Cb4")
    assert note.pitch_class == 11
    assert note.pitch == 71


def test_sharp_wraps_above_b() -> None:
    note = parse_note("B#4")
    assert note.pitch_class == 0
    assert note.pitch == 60


def test_raw_token_preserved() -> None:
    assert parse_note("Eb5").raw == "Eb5"


@pytest.mark.parametrize(
    "token",
    ["X9", "H4", "C", "C##4", "Cbb4", "C4.5", "C#", "4C", "CB4", "", "C\u0664", "C\uff14", "D\u0663"],
)
def test_malformed_tokens_raise(token: str) -> None:
    with pytest.raises(NoteParseError) as exc_info:
        parse_note(token)
    assert exc_info.value.token == token


def test_note_rejects_inconsistent_pitch_class() -> None:
    with pytest.raises(ValueError):
        Note(raw="C4", pitch=60, pitch_class=1)


def test_parse_melody_splits_on_any_whitespace() -> None:
    notes, issues = parse_melody("  C4\tD4 \n  E4  ")
    assert [n.pitch for n in notes] == [60, 62, 64]
    assert issues == []


def test_parse_melody_empty_line() -> None:
    assert parse_melody("   ") == ([], [])


def test_parse_melody_isolates_bad_tokens() -> None:
    notes, issues = parse_melody("C4 X9 E4 ??", VoiceName.LOWER)
    assert [n.raw for n in notes] == ["C4", "E4"]
    assert [(i.kind, i.position, i.voice) for i in issues] == [
        (IssueKind.PARSE_ERROR, 1, VoiceName.LOWER),
        (IssueKind.PARSE_ERROR, 3, VoiceName.LOWER),
    ]
    assert '"X9"' in issues[0].detail

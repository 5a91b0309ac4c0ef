"""Unit tests for key string parsing."""

import pytest

from counterlint.key_parser import MODES, Key, KeyParseError, parse_key


def test_c_major() -> None:
    assert parse_key("C major") == Key(tonic_pitch_class=0, mode="major")


def test_mode_word_is_case_insensitive() -> None:
    assert parse_key("a MINOR") == Key(tonic_pitch_class=9, mode="minor")


def test_space_before_mode_is_optional() -> None:
    assert parse_key("F#minor").tonic_pitch_class == 6


def test_flat_tonic() -> None:
    assert parse_key("Bb major").tonic_pitch_class == 10


def test_surrounding_whitespace_ignored() -> None:
    assert parse_key("  G major  ").tonic_pitch_class == 7


def test_leading_tone_is_semitone_below_tonic() -> None:
    assert parse_key("C major").leading_tone_pitch_class == 11
    assert parse_key("G major").leading_tone_pitch_class == 6


@pytest.mark.parametrize("text", ["Z major", "C", "C dorian", "", "C## major", "CB major", "major"])
def test_invalid_keys_raise(text: str) -> None:
    with pytest.raises(KeyParseError) as exc_info:
        parse_key(text)
    assert exc_info.value.text == text
    assert "C major" in str(exc_info.value)


@pytest.mark.parametrize("mode", MODES)
def test_every_mode_word_accepted(mode: str) -> None:
    assert parse_key(f"D {mode.upper()}").mode == mode

"""Unit tests for MidiExporter."""

import pytest

from counterlint.midi_exporter import MidiExporter
from counterlint.note_parser import parse_melody


def _voices(upper: str, lower: str):
    upper_notes, _ = parse_melody(upper)
    lower_notes, _ = parse_melody(lower)
    return upper_notes, lower_notes


@pytest.mark.integration
def test_export_writes_standard_midi_file(tmp_path) -> None:
    out = tmp_path / "voices.mid"
    MidiExporter().export(*_voices("E4 F4", "C3 D3"), str(out))
    data = out.read_bytes()
    assert data.startswith(b"MThd")
    assert b"MTrk" in data


@pytest.mark.integration
def test_export_names_both_voice_tracks(tmp_path) -> None:
    out = tmp_path / "voices.mid"
    MidiExporter().export(*_voices("E4", "C3"), str(out))
    data = out.read_bytes()
    assert b"Upper Voice" in data
    assert b"Lower Voice" in data


@pytest.mark.integration
def test_export_contains_every_pitch_at_velocity(tmp_path) -> None:
    out = tmp_path / "voices.mid"
    MidiExporter(velocity=99).export(*_voices("A4 B4", "D3"), str(out))
    data = out.read_bytes()
    for pitch in (69, 71, 50):
        assert bytes([pitch, 99]) in data


@pytest.mark.integration
def test_export_accepts_uneven_voices(tmp_path) -> None:
    out = tmp_path / "voices.mid"
    MidiExporter().export(*_voices("C4 D4 E4", ""), str(out))
    assert out.exists()


@pytest.mark.integration
def test_export_rejects_pitch_above_midi_range(tmp_path) -> None:
    out = tmp_path / "voices.mid"
    with pytest.raises(ValueError, match="C10"):
        MidiExporter().export(*_voices("C10", "C3"), str(out))
    assert not out.exists()

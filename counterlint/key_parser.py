"""Key parser: ``"C major"``, ``"f# minor"``, ``"BbMajor"`` → tonic pitch class + mode."""

from __future__ import annotations

import re
from dataclasses import dataclass

from counterlint.note_parser import SEMITONES_PER_OCTAVE, spelled_pitch_class

MODES = ("major", "minor")

_KEY_RE = re.compile(rf"^([A-Ga-g])([#b]?)\s*((?i:{'|'.join(MODES)}))$")


class KeyParseError(ValueError):
    """Raised when a key string cannot be understood."""

    def __init__(self, text: str) -> None:
        super().__init__(f'Key "{text}" not understood. Use like "C major" or "A minor".')
        self.text = text


@dataclass(frozen=True)
class Key:
    """
    A tonal centre.

    Attributes:
        tonic_pitch_class: Pitch class of the tonic (0 = C).
        mode:              "major" or "minor". Kept for future mode-specific
                           rules; no current rule reads it.
    """

    tonic_pitch_class: int
    mode: str

    @property
    def leading_tone_pitch_class(self) -> int:
        """Pitch class one semitone below the tonic."""
        return (self.tonic_pitch_class - 1) % SEMITONES_PER_OCTAVE


def parse_key(text: str) -> Key:
    """
    Parse a key string such as ``"C major"`` or ``"Eb minor"``.

    Raises:
        KeyParseError: If the string does not name a major or minor key.
    """
    # Only the mode word is case-insensitive: "CB major" is not C-flat.
    match = _KEY_RE.match(text.strip())
    if not match:
        raise KeyParseError(text)

    letter, accidental, mode = match.groups()
    return Key(
        tonic_pitch_class=spelled_pitch_class(letter, accidental),
        mode=mode.lower(),
    )

"""Note parser: turns tokens such as ``C#4`` or ``Bb3`` into absolute pitches."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Final

from counterlint.issues import Issue, IssueKind, VoiceName

logger = logging.getLogger(__name__)

# ── Pitch constants ─────────────────────────────────────────────────────────
SEMITONES_PER_OCTAVE = 12

#: Natural letter names → pitch class (0 = C)
LETTER_TO_PITCH_CLASS: Final[dict[str, int]] = {
    "C": 0,
    "D": 2,
    "E": 4,
    "F": 5,
    "G": 7,
    "A": 9,
    "B": 11,
}

ACCIDENTAL_OFFSETS: Final[dict[str, int]] = {"": 0, "#": 1, "b": -1}

_NOTE_RE = re.compile(r"^([A-Ga-g])([#b]?)(-?[0-9]+)$")


class NoteParseError(ValueError):
    """Raised when a token is not a valid note."""

    def __init__(self, token: str) -> None:
        super().__init__(f'Cannot parse note "{token}"')
        self.token = token


def spelled_pitch_class(letter: str, accidental: str) -> int:
    """
    Resolve a letter name plus optional accidental to a pitch class.

    The accidental is applied before wrapping into 0-11, so ``Cb`` is 11
    and ``B#`` is 0.
    """
    base = LETTER_TO_PITCH_CLASS[letter.upper()]
    return (base + ACCIDENTAL_OFFSETS[accidental]) % SEMITONES_PER_OCTAVE


def pitch_class_to_pitch(pitch_class: int, octave: int) -> int:
    """
    Convert a pitch class and a scientific octave number to an absolute pitch.

    Numbering follows MIDI: C-1 = 0, C0 = 12, ... C4 (Middle C) = 60.
    """
    return (octave + 1) * SEMITONES_PER_OCTAVE + pitch_class


@dataclass(frozen=True)
class Note:
    """
    A single parsed note.

    Attributes:
        raw:         The token exactly as written, kept for diagnostics.
        pitch:       Absolute semitone number (C4 = 60).
        pitch_class: ``pitch % 12``; 0 = C, 11 = B.
    """

    raw: str
    pitch: int
    pitch_class: int

    def __post_init__(self) -> None:
        if self.pitch_class != self.pitch % SEMITONES_PER_OCTAVE:
            raise ValueError(
                f"pitch_class {self.pitch_class} does not match pitch {self.pitch}"
            )


def parse_note(token: str) -> Note:
    """
    Parse one note token: letter A-G, optional ``#``/``b``, signed octave.

    Raises:
        NoteParseError: If the token does not match the note grammar.
    """
    match = _NOTE_RE.match(token.strip())
    if not match:
        raise NoteParseError(token)

    letter, accidental, octave = match.groups()
    pitch_class = spelled_pitch_class(letter, accidental)
    pitch = pitch_class_to_pitch(pitch_class, int(octave))
    return Note(raw=token, pitch=pitch, pitch_class=pitch_class)


def parse_melody(line: str, voice: VoiceName | None = None) -> tuple[list[Note], list[Issue]]:
    """
    Parse a whitespace-separated melodic line.

    Each token is parsed on its own, so one bad token does not stop the rest
    of the line from being read.

    Args:
        line:  Note tokens separated by any run of whitespace.
        voice: Voice to tag parse errors with, if known.

    Returns:
        The successfully parsed notes and a ParseError issue per rejected
        token, both in token order.
    """
    notes: list[Note] = []
    issues: list[Issue] = []

    for index, token in enumerate(line.split()):
        try:
            notes.append(parse_note(token))
        except NoteParseError as exc:
            logger.debug("Rejected token %r at %d: %s", token, index, exc)
            issues.append(
                Issue(kind=IssueKind.PARSE_ERROR, detail=str(exc), position=index, voice=voice)
            )

    return notes, issues

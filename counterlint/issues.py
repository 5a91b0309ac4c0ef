"""Issue data model: the only channel through which the linter reports problems."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class IssueKind(str, Enum):
    """Enumerated kinds of counterpoint issue."""

    PARALLEL_FIFTHS = "Parallel5ths"
    PARALLEL_OCTAVES = "Parallel8ves"
    LEAP_OVER_OCTAVE = "LeapOverOctave"
    UNRESOLVED_LEADING_TONE = "UnresolvedLeadingTone"
    LENGTH_MISMATCH = "LengthMismatch"
    PARSE_ERROR = "ParseError"

    @property
    def is_error(self) -> bool:
        """True for input errors, False for rule violations and warnings."""
        return self is IssueKind.PARSE_ERROR


class VoiceName(str, Enum):
    """Identifies one of the two analysed voices."""

    UPPER = "upper"
    LOWER = "lower"


@dataclass(frozen=True)
class Issue:
    """
    One detected problem.

    Attributes:
        kind:     What was detected.
        detail:   Human-readable description.
        position: Index into the voice sequence(s). For checks that compare two
                  adjacent positions this is the earlier one.
        voice:    The voice the issue belongs to, when it concerns only one.
    """

    kind: IssueKind
    detail: str
    position: int | None = None
    voice: VoiceName | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the plain wire form, omitting unset optional fields."""
        data: dict[str, Any] = {"kind": self.kind.value}
        if self.position is not None:
            data["position"] = self.position
        if self.voice is not None:
            data["voice"] = self.voice.value
        data["detail"] = self.detail
        return data

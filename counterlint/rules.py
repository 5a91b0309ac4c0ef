"""Counterpoint rule passes.

Every rule is a plain function ``rule(context) -> list[Issue]`` over the same
parsed data. Rules never see each other's output, so adding one to the
sequence the analyzer runs does not change what the others report.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from counterlint.issues import Issue, IssueKind, VoiceName
from counterlint.key_parser import Key
from counterlint.note_parser import SEMITONES_PER_OCTAVE, Note

# ── Interval constants ──────────────────────────────────────────────────────
PERFECT_UNISON = 0  # interval class shared by unisons and octaves
PERFECT_FIFTH = 7
OCTAVE = 12  # widest leap allowed by default

_VOICE_LABELS: dict[VoiceName, str] = {
    VoiceName.UPPER: "Upper",
    VoiceName.LOWER: "Lower",
}


@dataclass(frozen=True)
class AnalysisContext:
    """Parsed input shared by every rule pass."""

    upper: list[Note]
    lower: list[Note]
    key: Key
    max_leap: int = OCTAVE

    @property
    def overlap(self) -> int:
        """Number of positions present in both voices."""
        return min(len(self.upper), len(self.lower))

    def voices(self) -> list[tuple[VoiceName, list[Note]]]:
        """Both voices, upper first."""
        return [(VoiceName.UPPER, self.upper), (VoiceName.LOWER, self.lower)]


Rule = Callable[[AnalysisContext], list[Issue]]


def interval_class(a: Note, b: Note) -> int:
    """Absolute distance between two notes, reduced modulo the octave."""
    return abs(a.pitch - b.pitch) % SEMITONES_PER_OCTAVE


def direction(a: Note, b: Note) -> int:
    """-1, 0 or +1 for a step from ``a`` to ``b``."""
    delta = b.pitch - a.pitch
    return (delta > 0) - (delta < 0)


def check_parallel_motion(context: AnalysisContext) -> list[Issue]:
    """
    Flag parallel fifths and octaves/unisons between the two voices.

    Only aligned positions are compared. Motion counts as similar when both
    voices move and move the same way; contrary and oblique motion are exempt
    even when the interval class repeats.
    """
    upper, lower = context.upper, context.lower
    issues: list[Issue] = []

    for i in range(context.overlap - 1):
        first = interval_class(upper[i], lower[i])
        second = interval_class(upper[i + 1], lower[i + 1])
        upper_dir = direction(upper[i], upper[i + 1])
        lower_dir = direction(lower[i], lower[i + 1])

        if upper_dir == 0 or upper_dir != lower_dir:
            continue

        if first == second == PERFECT_FIFTH:
            issues.append(
                Issue(
                    kind=IssueKind.PARALLEL_FIFTHS,
                    position=i,
                    detail=(
                        f"Parallel 5ths at positions {i}→{i + 1} "
                        f"({upper[i].raw}/{lower[i].raw} → {upper[i + 1].raw}/{lower[i + 1].raw})"
                    ),
                )
            )
        elif first == second == PERFECT_UNISON:
            issues.append(
                Issue(
                    kind=IssueKind.PARALLEL_OCTAVES,
                    position=i,
                    detail=f"Parallel 8ves (or unisons) at positions {i}→{i + 1}",
                )
            )

    return issues


def check_leaps(context: AnalysisContext) -> list[Issue]:
    """Flag melodic leaps wider than ``context.max_leap`` in each voice."""
    issues: list[Issue] = []

    for voice, notes in context.voices():
        for i in range(len(notes) - 1):
            leap = abs(notes[i + 1].pitch - notes[i].pitch)
            if leap > context.max_leap:
                issues.append(
                    Issue(
                        kind=IssueKind.LEAP_OVER_OCTAVE,
                        position=i,
                        voice=voice,
                        detail=(
                            f"{_VOICE_LABELS[voice]} voice leaps {leap} semitones at "
                            f"{i}→{i + 1} ({notes[i].raw}→{notes[i + 1].raw})"
                        ),
                    )
                )

    return issues


def check_leading_tones(context: AnalysisContext) -> list[Issue]:
    """
    Flag leading tones not followed by the tonic a semitone above.

    Only the next note is inspected. The last note of a voice has no
    successor and is never flagged.
    """
    tonic = context.key.tonic_pitch_class
    leading = context.key.leading_tone_pitch_class
    issues: list[Issue] = []

    for voice, notes in context.voices():
        for i in range(len(notes) - 1):
            current, following = notes[i], notes[i + 1]
            if current.pitch_class != leading:
                continue
            step_up = (following.pitch_class - current.pitch_class) % SEMITONES_PER_OCTAVE == 1
            if following.pitch_class == tonic and step_up:
                continue
            issues.append(
                Issue(
                    kind=IssueKind.UNRESOLVED_LEADING_TONE,
                    position=i,
                    voice=voice,
                    detail=(
                        f"{_VOICE_LABELS[voice]} voice leading tone ({current.raw}) "
                        "does not resolve up by semitone to tonic"
                    ),
                )
            )

    return issues


#: Rule passes in reporting order.
DEFAULT_RULES: tuple[Rule, ...] = (
    check_parallel_motion,
    check_leaps,
    check_leading_tones,
)

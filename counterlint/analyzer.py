"""CounterpointAnalyzer: lints a pair of melodic lines against a key."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from counterlint.issues import Issue, IssueKind, VoiceName
from counterlint.key_parser import KeyParseError, parse_key
from counterlint.note_parser import parse_melody
from counterlint.rules import DEFAULT_RULES, OCTAVE, AnalysisContext, Rule

logger = logging.getLogger(__name__)


class CounterpointAnalyzer:
    """
    Checks two synchronised voices for elementary counterpoint errors.

    Algorithm overview
    ------------------
    1. **Key** – The key string is parsed first. Without a tonic nothing else
       can be judged, so an unreadable key ends the analysis with a single
       ParseError issue.

    2. **Voices** – Each line is parsed token by token. Bad tokens become
       ParseError issues (upper voice first) and are left out of the voice.

    3. **Alignment** – Voices of different length produce one LengthMismatch
       warning. Rules comparing the voices use the common prefix; rules
       looking at one voice at a time use all of it.

    4. **Rules** – Each rule pass runs over the parsed data in order and its
       issues are appended as returned.
    """

    DEFAULT_MAX_LEAP = OCTAVE  # semitones; wider melodic leaps are flagged

    def __init__(
        self,
        max_leap: int = DEFAULT_MAX_LEAP,
        rules: Sequence[Rule] = DEFAULT_RULES,
    ) -> None:
        """
        Args:
            max_leap: Widest melodic leap (semitones) allowed within a voice.
            rules:    Rule passes to run, in reporting order.

        Raises:
            ValueError: If max_leap is negative.
        """
        if max_leap < 0:
            raise ValueError(f"max_leap must be non-negative, got {max_leap}.")
        self.max_leap = max_leap
        self.rules = tuple(rules)

    def analyze(self, upper_line: str, lower_line: str, key_string: str) -> list[Issue]:
        """
        Lint two melodic lines in the given key.

        Args:
            upper_line: Upper voice, whitespace-separated note tokens.
            lower_line: Lower voice, whitespace-separated note tokens.
            key_string: Key such as "C major" or "F# minor".

        Returns:
            Every issue found, in discovery order. An empty list means clean.
        """
        try:
            key = parse_key(key_string)
        except KeyParseError as exc:
            logger.debug("Aborting analysis: %s", exc)
            return [Issue(kind=IssueKind.PARSE_ERROR, detail=str(exc))]

        upper, upper_errors = parse_melody(upper_line, VoiceName.UPPER)
        lower, lower_errors = parse_melody(lower_line, VoiceName.LOWER)
        issues: list[Issue] = [*upper_errors, *lower_errors]

        if len(upper) != len(lower):
            issues.append(
                Issue(
                    kind=IssueKind.LENGTH_MISMATCH,
                    detail=(
                        f"Voices have different lengths ({len(upper)} vs {len(lower)}). "
                        "Lint assumes aligned notes."
                    ),
                )
            )

        context = AnalysisContext(upper=upper, lower=lower, key=key, max_leap=self.max_leap)
        for rule in self.rules:
            found = rule(context)
            logger.debug("%s: %d issue(s)", getattr(rule, "__name__", rule), len(found))
            issues.extend(found)

        return issues


_DEFAULT_ANALYZER = CounterpointAnalyzer()


def analyze(upper_line: str, lower_line: str, key_string: str) -> list[Issue]:
    """Lint two melodic lines with the default analyzer settings."""
    return _DEFAULT_ANALYZER.analyze(upper_line, lower_line, key_string)

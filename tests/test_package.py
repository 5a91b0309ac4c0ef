"""Smoke tests for the package surface."""

import counterlint
from counterlint.report import format_issue, format_report


def test_exposes_version_string() -> None:
    assert isinstance(counterlint.__version__, str)
    assert counterlint.__version__


def test_public_analyze_is_exported() -> None:
    assert counterlint.analyze("C4", "C3", "C major") == []


def test_format_issue_without_annotations() -> None:
    issues = counterlint.analyze("C4 D4", "C3", "C major")
    assert format_issue(issues[0]) == (
        "- LengthMismatch: Voices have different lengths (2 vs 1). Lint assumes aligned notes."
    )


def test_format_report_clean() -> None:
    report = format_report([], key="G major", upper="G4", lower="G3")
    assert report.splitlines() == [
        "Key: G major",
        "Upper: G4",
        "Lower: G3",
        "No issues found.",
    ]


def test_only_parse_errors_count_as_errors() -> None:
    errors = [kind for kind in counterlint.IssueKind if kind.is_error]
    assert errors == [counterlint.IssueKind.PARSE_ERROR]

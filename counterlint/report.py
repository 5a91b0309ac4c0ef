"""Plain-text and JSON rendering of analysis results."""

from __future__ import annotations

import json

from counterlint.issues import Issue


def format_issue(issue: Issue) -> str:
    """One report line, e.g. ``- LeapOverOctave [voice upper] [idx 0]: ...``."""
    voice = f" [voice {issue.voice.value}]" if issue.voice is not None else ""
    at = f" [idx {issue.position}]" if issue.position is not None else ""
    return f"- {issue.kind.value}{voice}{at}: {issue.detail}"


def format_report(issues: list[Issue], key: str, upper: str, lower: str) -> str:
    """Header naming the inputs followed by one line per issue."""
    lines = [
        f"Key: {key}",
        f"Upper: {upper}",
        f"Lower: {lower}",
    ]
    if not issues:
        lines.append("No issues found.")
    else:
        lines.append(f"Issues ({len(issues)}):")
        lines.extend(format_issue(issue) for issue in issues)
    return "\n".join(lines)


def format_json(issues: list[Issue]) -> str:
    """The issue list in its wire form."""
    return json.dumps([issue.to_dict() for issue in issues], ensure_ascii=False, indent=2)

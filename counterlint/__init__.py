"""counterlint — two-voice counterpoint linter."""

from counterlint.analyzer import CounterpointAnalyzer, analyze
from counterlint.issues import Issue, IssueKind, VoiceName
from counterlint.key_parser import Key, KeyParseError, parse_key
from counterlint.note_parser import Note, NoteParseError, parse_melody, parse_note

__version__ = "0.1.0"

__all__ = [
    "CounterpointAnalyzer",
    "Issue",
    "IssueKind",
    "Key",
    "KeyParseError",
    "Note",
    "NoteParseError",
    "VoiceName",
    "__version__",
    "analyze",
    "parse_key",
    "parse_melody",
    "parse_note",
]

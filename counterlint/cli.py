"""counterlint CLI entry point."""

import logging
import sys

import click

from counterlint import __version__
from counterlint.analyzer import CounterpointAnalyzer
from counterlint.issues import VoiceName
from counterlint.key_parser import KeyParseError, parse_key
from counterlint.midi_exporter import MidiExporter
from counterlint.note_parser import parse_melody
from counterlint.report import format_issue, format_json, format_report

DEFAULT_KEY = "C major"

EXIT_ISSUES = 1
EXIT_BAD_KEY = 2

# Built-in exercise for `counterlint demo`.
DEMO_KEY = "C major"
DEMO_UPPER = "E4 A4 B4 A4 B4 C5 D5 C5"
DEMO_LOWER = "C3 D3 E3 F3 G3 A3 B2 C3"


def _run_lint(
    upper: str,
    lower: str,
    key: str,
    output_format: str,
    strict: bool,
    max_leap: int,
) -> None:
    """Analyse, print the report and exit with the matching status."""
    analyzer = CounterpointAnalyzer(max_leap=max_leap)
    issues = analyzer.analyze(upper, lower, key)

    if output_format == "json":
        click.echo(format_json(issues))
    else:
        click.echo(format_report(issues, key=key, upper=upper, lower=lower))

    try:
        parse_key(key)
    except KeyParseError:
        sys.exit(EXIT_BAD_KEY)
    if strict and issues:
        sys.exit(EXIT_ISSUES)


# ── CLI group ──────────────────────────────────────────────────────────────────

@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="counterlint")
@click.option("--verbose", "-v", is_flag=True, help="Log parsing and rule details to stderr.")
def main(verbose: bool) -> None:
    """counterlint — check two-voice counterpoint for common errors."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# ── lint subcommand ────────────────────────────────────────────────────────────

@main.command()
@click.argument("upper")
@click.argument("lower")
@click.option(
    "--key",
    "-k",
    default=DEFAULT_KEY,
    show_default=True,
    help='Key of the exercise, e.g. "G major" or "F# minor".',
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    show_default=True,
    help="Report format.",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with status 1 when any issue is reported.",
)
@click.option(
    "--max-leap",
    type=click.IntRange(0, 127),
    default=CounterpointAnalyzer.DEFAULT_MAX_LEAP,
    show_default=True,
    metavar="SEMITONES",
    help="Widest melodic leap allowed within a voice.",
)
def lint(upper: str, lower: str, key: str, output_format: str, strict: bool, max_leap: int) -> None:
    """
    Lint an UPPER and a LOWER voice written as space-separated notes.

    Wrap each voice in quotes. Notes are a letter, an optional # or b, and
    an octave number (C4 is middle C).

    \b
    Examples:
      counterlint lint "C5 B4 C5" "A3 G3 A3" --key "A minor"
      counterlint lint "E4 F4 G4" "C3 D3 E3" --format json --strict
    """
    _run_lint(upper, lower, key, output_format.lower(), strict, max_leap)


# ── demo subcommand ────────────────────────────────────────────────────────────

@main.command()
def demo() -> None:
    """Lint a short built-in exercise in C major."""
    _run_lint(
        DEMO_UPPER,
        DEMO_LOWER,
        DEMO_KEY,
        output_format="text",
        strict=False,
        max_leap=CounterpointAnalyzer.DEFAULT_MAX_LEAP,
    )


# ── export subcommand ──────────────────────────────────────────────────────────

@main.command()
@click.argument("upper")
@click.argument("lower")
@click.option(
    "--output",
    "-o",
    required=True,
    metavar="PATH",
    help="Destination MIDI file path.",
)
@click.option(
    "--tempo",
    type=click.IntRange(20, 300),
    default=MidiExporter.DEFAULT_TEMPO,
    show_default=True,
    help="Playback tempo in BPM.",
)
def export(upper: str, lower: str, output: str, tempo: int) -> None:
    """
    Write an UPPER and a LOWER voice to a two-track MIDI file.

    Each note becomes one quarter note. Unreadable notes are skipped.

    \b
    Examples:
      counterlint export "E4 F4 G4" "C3 D3 E3" -o exercise.mid
    """
    upper_notes, upper_errors = parse_melody(upper, VoiceName.UPPER)
    lower_notes, lower_errors = parse_melody(lower, VoiceName.LOWER)
    for issue in (*upper_errors, *lower_errors):
        click.echo(f"  WARNING: skipped {format_issue(issue)[2:]}", err=True)

    exporter = MidiExporter(tempo=tempo)
    try:
        exporter.export(upper_notes, lower_notes, output)
    except ValueError as exc:
        click.echo(f"  ERROR: {exc}", err=True)
        sys.exit(1)
    except OSError as exc:
        click.echo(f"  ERROR: Could not write MIDI file — {exc}", err=True)
        sys.exit(1)

    click.echo(f"Wrote {len(upper_notes)} upper and {len(lower_notes)} lower note(s) → '{output}'")

"""MidiExporter: writes the two linted voices to a Standard MIDI File."""

from midiutil import MIDIFile

from counterlint.note_parser import Note

# In midiutil Format 1 MIDI, track 0 is the conductor/tempo track.
# Note data written to track 0 is ignored by most players and notation apps.
TRACK_CONDUCTOR = 0  # Tempo only — never receives notes
TRACK_UPPER = 1      # Upper voice → top staff
TRACK_LOWER = 2      # Lower voice → bottom staff

CHANNEL_UPPER = 0
CHANNEL_LOWER = 1


class MidiExporter:
    """
    Writes an upper and a lower voice as two note tracks.

    Every note lasts one beat and the voices start together, which is the
    same note-against-note alignment the analyzer assumes. Voices of
    different length are written as they are; the shorter one simply stops.
    """

    DEFAULT_TEMPO = 80     # BPM
    DEFAULT_VELOCITY = 80  # MIDI velocity (0-127)
    NOTE_BEATS = 1.0       # one quarter note per token

    def __init__(
        self,
        tempo: int = DEFAULT_TEMPO,
        velocity: int = DEFAULT_VELOCITY,
    ) -> None:
        """
        Args:
            tempo:    Playback tempo in beats per minute.
            velocity: MIDI note-on velocity for both voices.
        """
        self.tempo = tempo
        self.velocity = velocity

    def _add_voice(self, midi: MIDIFile, track: int, channel: int, notes: list[Note]) -> None:
        for beat, note in enumerate(notes):
            midi.addNote(
                track=track,
                channel=channel,
                pitch=note.pitch,
                time=beat * self.NOTE_BEATS,
                duration=self.NOTE_BEATS,
                volume=self.velocity,
            )

    def export(self, upper: list[Note], lower: list[Note], output_path: str) -> None:
        """
        Render both voices to a Standard MIDI File (format 1).

        Raises:
            ValueError: If a pitch falls outside the MIDI range 0-127.
            OSError: If the output file cannot be opened for writing.
        """
        for note in (*upper, *lower):
            if not 0 <= note.pitch <= 127:
                raise ValueError(f"Note {note.raw} (pitch {note.pitch}) is outside the MIDI range.")

        midi = MIDIFile(numTracks=3, removeDuplicates=False, deinterleave=False)
        midi.addTempo(TRACK_CONDUCTOR, 0, self.tempo)
        midi.addTrackName(TRACK_UPPER, 0, "Upper Voice")
        midi.addTrackName(TRACK_LOWER, 0, "Lower Voice")

        self._add_voice(midi, TRACK_UPPER, CHANNEL_UPPER, upper)
        self._add_voice(midi, TRACK_LOWER, CHANNEL_LOWER, lower)

        with open(output_path, "wb") as f:
            midi.writeFile(f)

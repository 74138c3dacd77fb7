"""Keyboard and falling-note state driven by MIDI messages."""

from __future__ import annotations

from dataclasses import dataclass, field

from keyfall.notes import (
    MAX_NOTES,
    MIN_NOTE_HEIGHT,
    NOTE_COUNT,
    SCREEN_HEIGHT_LARGE,
    WHITE_KEY_HEIGHT,
    Note,
    black_index,
    is_black,
    white_index,
)

SCROLL_STEP = 3
NOTE_ON = 0x90
NOTE_OFF = 0x80


def _check_note(midi_note: int) -> None:
    if not 0 <= midi_note <= NOTE_COUNT:
        raise ValueError(f"MIDI note out of range: {midi_note}")


def _fresh_keys() -> list[bool]:
    # One slot for every 7-bit note number.
    return [False] * (NOTE_COUNT + 1)


@dataclass
class KeyboardState:
    """The falling notes and the pressed keys of the on-screen keyboard."""

    notes: list[Note] = field(default_factory=list)
    key_active: list[bool] = field(default_factory=_fresh_keys)

    def reset(self) -> None:
        """Drop every note and release every key."""
        self.notes.clear()
        self.key_active = _fresh_keys()

    def note_on(self, midi_note: int, velocity: int) -> None:
        """Start a new falling note, unless the note limit is reached, and press its key."""
        _check_note(midi_note)
        if len(self.notes) < MAX_NOTES:
            black = is_black(midi_note)
            self.notes.append(
                Note(
                    midi_note=midi_note,
                    index=black_index(midi_note) if black else white_index(midi_note),
                    active=True,
                    black=black,
                    y=SCREEN_HEIGHT_LARGE - WHITE_KEY_HEIGHT,
                    height=MIN_NOTE_HEIGHT,
                    velocity=velocity,
                )
            )
        self.key_active[midi_note] = True

    def note_off(self, midi_note: int) -> None:
        """Stop every held note with this number and release its key."""
        _check_note(midi_note)
        for note in self.notes:
            if note.midi_note == midi_note and note.active:
                note.active = False
        self.key_active[midi_note] = False

    def handle_message(self, status: int, data1: int, data2: int) -> None:
        """Apply one MIDI channel message; anything but note on/off is ignored."""
        kind = status & 0xF0
        if kind == NOTE_ON and data2 > 0:
            self.note_on(data1, data2)
        elif kind == NOTE_OFF or (kind == NOTE_ON and data2 == 0):
            self.note_off(data1)

    def advance(self) -> None:
        """Move every note one frame upwards; held notes grow as they rise."""
        for note in self.notes:
            if note.active:
                note.y -= SCROLL_STEP
                note.height += SCROLL_STEP
            elif note.height > 0:
                note.y -= SCROLL_STEP
                if note.y + note.height < 0:
                    note.height = 0

    def prune(self) -> None:
        """Forget notes that have left the screen, keeping the order of the rest."""
        self.notes = [note for note in self.notes if note.height > 0]
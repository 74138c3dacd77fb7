"""Piano geometry constants and note classification helpers."""

from __future__ import annotations

from dataclasses import dataclass

SCREEN_WIDTH_LARGE = 1920
SCREEN_HEIGHT_LARGE = 1080
SCREEN_WIDTH_SMALL = 800
SCREEN_HEIGHT_SMALL = 600

WHITE_KEY_WIDTH = 34
BLACK_KEY_WIDTH = 18
WHITE_KEY_HEIGHT = 230
BLACK_KEY_HEIGHT = 145

MIN_NOTE_HEIGHT = 20
NOTE_COUNT = 127
MAX_NOTES = 512

MAX_MIDI_EVENTS = 256
MIDI_NOTE_MIN = 21
MIDI_NOTE_MAX = 108

RADIUS = 4
TEXT_SIZE = 80
TEXT_COLOR = (255, 255, 255, 255)

_BLACK_PITCH_CLASSES = frozenset({1, 3, 6, 8, 10})
_WHITE_PITCH_CLASSES = frozenset({0, 2, 4, 5, 7, 9, 11})


@dataclass
class Note:
    """A falling note bar on screen."""

    midi_note: int
    index: int
    active: bool
    black: bool
    y: int
    height: int
    velocity: int


def is_black(midi_note: int) -> bool:
    """Return True if the note sits on a black key."""
    return midi_note % 12 in _BLACK_PITCH_CLASSES


def is_white(midi_note: int) -> bool:
    """Return True if the note sits on a white key."""
    return midi_note % 12 in _WHITE_PITCH_CLASSES


def white_index(midi_note: int) -> int:
    """Number of white keys from the lowest piano key up to, not including, the note."""
    return sum(1 for n in range(MIDI_NOTE_MIN, midi_note) if is_white(n))


def black_index(midi_note: int) -> int:
    """Number of black keys from the lowest piano key up to, not including, the note."""
    return sum(1 for n in range(MIDI_NOTE_MIN, midi_note) if is_black(n))
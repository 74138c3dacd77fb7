"""Drawing of the falling notes and the piano keyboard."""

from __future__ import annotations

import pygame

from keyfall.notes import (
    BLACK_KEY_HEIGHT,
    BLACK_KEY_WIDTH,
    MIDI_NOTE_MAX,
    MIDI_NOTE_MIN,
    RADIUS,
    SCREEN_HEIGHT_LARGE,
    WHITE_KEY_HEIGHT,
    WHITE_KEY_WIDTH,
    Note,
    is_black,
    is_white,
    white_index,
)
from keyfall.state import KeyboardState

BACKGROUND = (49, 49, 49)
WHITE_NOTE_COLOR = (0, 255, 100)
BLACK_NOTE_COLOR = (0, 120, 40)
WHITE_KEY_COLOR = (255, 255, 255)
BLACK_KEY_COLOR = (0, 0, 0)

KEY_SPACING = WHITE_KEY_WIDTH + 2
LEFT_MARGIN = 25
KEYBOARD_TOP = SCREEN_HEIGHT_LARGE - WHITE_KEY_HEIGHT


def white_key_x(midi_note: int) -> int:
    """Left edge of the white key for a note."""
    return white_index(midi_note) * KEY_SPACING + LEFT_MARGIN


def black_key_x(midi_note: int) -> int:
    """Left edge of the black key for a note, centred on the gap before it."""
    shifted = white_index(midi_note) - 1
    return shifted * KEY_SPACING + LEFT_MARGIN + WHITE_KEY_WIDTH - BLACK_KEY_WIDTH // 2


def note_rect(note: Note) -> pygame.Rect:
    """Screen rectangle of a falling note."""
    if note.black:
        return pygame.Rect(black_key_x(note.midi_note), note.y, BLACK_KEY_WIDTH, note.height)
    x = note.index * KEY_SPACING + LEFT_MARGIN
    return pygame.Rect(x, note.y, WHITE_KEY_WIDTH, note.height)


def render_white_notes(surface: pygame.Surface, state: KeyboardState) -> None:
    """Draw the visible notes that belong to white keys."""
    for note in state.notes:
        if note.height == 0 or note.black:
            continue
        pygame.draw.rect(surface, WHITE_NOTE_COLOR, note_rect(note), border_radius=RADIUS)


def render_black_notes(surface: pygame.Surface, state: KeyboardState) -> None:
    """Draw the visible notes that belong to black keys."""
    for note in state.notes:
        if note.height == 0 or not note.black:
            continue
        pygame.draw.rect(surface, BLACK_NOTE_COLOR, note_rect(note), border_radius=RADIUS)


def render_white_keys(surface: pygame.Surface, state: KeyboardState) -> None:
    """Draw the white keys, lit when pressed."""
    for midi_note in range(MIDI_NOTE_MIN, MIDI_NOTE_MAX + 1):
        if not is_white(midi_note):
            continue
        color = WHITE_NOTE_COLOR if state.key_active[midi_note] else WHITE_KEY_COLOR
        rect = pygame.Rect(white_key_x(midi_note), KEYBOARD_TOP, WHITE_KEY_WIDTH, WHITE_KEY_HEIGHT)
        surface.fill(color, rect)


def render_black_keys(surface: pygame.Surface, state: KeyboardState) -> None:
    """Draw the black keys over the white ones, lit when pressed."""
    for midi_note in range(MIDI_NOTE_MIN, MIDI_NOTE_MAX + 1):
        if not is_black(midi_note):
            continue
        color = BLACK_NOTE_COLOR if state.key_active[midi_note] else BLACK_KEY_COLOR
        rect = pygame.Rect(black_key_x(midi_note), KEYBOARD_TOP, BLACK_KEY_WIDTH, BLACK_KEY_HEIGHT)
        surface.fill(color, rect)


def render_frame(surface: pygame.Surface, state: KeyboardState) -> None:
    """Clear the surface and draw notes, then keys on top."""
    surface.fill(BACKGROUND)
    render_white_notes(surface, state)
    render_black_notes(surface, state)
    render_white_keys(surface, state)
    render_black_keys(surface, state)
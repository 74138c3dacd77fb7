import pytest

from keyfall.notes import (
    MIDI_NOTE_MAX,
    MIDI_NOTE_MIN,
    Note,
    black_index,
    is_black,
    is_white,
    white_index,
)


@pytest.mark.parametrize("midi_note", range(0, 128))
def test_black_and_white_are_complementary(midi_note):
    assert is_black(midi_note) != is_white(midi_note)


def test_octave_pattern():
    pattern = [is_black(n) for n in range(60, 72)]
    assert pattern == [False, True, False, True, False, False, True, False, True, False, True, False]


def test_lowest_key_has_index_zero():
    assert white_index(MIDI_NOTE_MIN) == 0
    assert black_index(MIDI_NOTE_MIN) == 0


def test_notes_below_range_have_index_zero():
    assert white_index(0) == 0
    assert black_index(10) == 0


def test_full_keyboard_counts():
    assert white_index(MIDI_NOTE_MAX) == 51
    assert black_index(MIDI_NOTE_MAX + 1) == 36


@pytest.mark.parametrize("midi_note", range(MIDI_NOTE_MIN, MIDI_NOTE_MAX + 1))
def test_indices_partition_the_range(midi_note):
    assert white_index(midi_note) + black_index(midi_note) == midi_note - MIDI_NOTE_MIN


def test_white_indices_are_consecutive():
    whites = [n for n in range(MIDI_NOTE_MIN, MIDI_NOTE_MAX + 1) if is_white(n)]
    assert [white_index(n) for n in whites] == list(range(len(whites)))


def test_black_indices_are_consecutive():
    blacks = [n for n in range(MIDI_NOTE_MIN, MIDI_NOTE_MAX + 1) if is_black(n)]
    assert [black_index(n) for n in blacks] == list(range(len(blacks)))


def test_note_is_mutable():
    note = Note(midi_note=60, index=5, active=True, black=False, y=10, height=20, velocity=64)
    note.y -= 3
    assert note.y == 7
from unittest import mock

import pygame.midi
import pytest

from keyfall.midi import (
    STREAM_BUFFER_SIZE,
    DeviceInfo,
    MidiError,
    list_devices,
    open_stream,
    poll_events,
)
from keyfall.notes import MAX_MIDI_EVENTS
from keyfall.state import KeyboardState


class FakeStream:
    def __init__(self, batches):
        self.batches = list(batches)
        self.requested = []

    def poll(self):
        return bool(self.batches)

    def read(self, num_events):
        self.requested.append(num_events)
        batch = self.batches.pop(0)
        return [[[status, data1, data2, 0], stamp] for stamp, (status, data1, data2) in enumerate(batch)]


def test_note_on_starts_note_and_presses_key():
    state = KeyboardState()
    count = poll_events(FakeStream([[(0x90, 60, 100)]]), state)
    assert count == 1
    assert [n.midi_note for n in state.notes] == [60]
    assert state.notes[0].velocity == 100
    assert state.notes[0].active
    assert state.key_active[60]


def test_note_off_releases_note():
    state = KeyboardState()
    stream = FakeStream([[(0x90, 64, 90)], [(0x80, 64, 0)]])
    poll_events(stream, state)
    poll_events(stream, state)
    assert not state.notes[0].active
    assert not state.key_active[64]


def test_note_on_with_zero_velocity_acts_as_off():
    state = KeyboardState()
    poll_events(FakeStream([[(0x90, 50, 70), (0x90, 50, 0)]]), state)
    assert len(state.notes) == 1
    assert not state.notes[0].active
    assert not state.key_active[50]


def test_channel_bits_are_ignored():
    state = KeyboardState()
    poll_events(FakeStream([[(0x93, 48, 10)]]), state)
    assert state.key_active[48]
    assert state.notes[0].midi_note == 48


def test_other_messages_are_read_but_ignored():
    state = KeyboardState()
    count = poll_events(FakeStream([[(0xB0, 7, 100)]]), state)
    assert count == 1
    assert state.notes == []
    assert not any(state.key_active)


def test_nothing_pending_reads_nothing():
    state = KeyboardState()
    stream = FakeStream([])
    assert poll_events(stream, state) == 0
    assert stream.requested == []


def test_read_asks_for_event_limit():
    stream = FakeStream([[(0x90, 60, 1)]])
    poll_events(stream, KeyboardState())
    assert stream.requested == [MAX_MIDI_EVENTS]


def test_list_devices_reports_names_and_input_support():
    infos = {
        0: (b"ALSA", b"Synth In", 1, 0, 0),
        1: (b"ALSA", b"Synth Out", 0, 1, 0),
    }
    with mock.patch("pygame.midi.get_init", return_value=True), mock.patch(
        "pygame.midi.get_count", return_value=2
    ), mock.patch("pygame.midi.get_device_info", side_effect=infos.get):
        devices = list_devices()
    assert devices == [DeviceInfo("Synth In", True), DeviceInfo("Synth Out", False)]


def test_list_devices_without_devices_fails():
    with mock.patch("pygame.midi.get_init", return_value=True), mock.patch(
        "pygame.midi.get_count", return_value=0
    ):
        with pytest.raises(MidiError, match="No MIDI input devices found"):
            list_devices()


def test_open_stream_uses_buffer_size():
    sentinel = object()
    with mock.patch("pygame.midi.get_init", return_value=True), mock.patch(
        "pygame.midi.Input", return_value=sentinel
    ) as factory:
        assert open_stream(3) is sentinel
    factory.assert_called_once_with(3, STREAM_BUFFER_SIZE)
    assert STREAM_BUFFER_SIZE == 512


def test_open_stream_failure_raises_midi_error():
    with mock.patch("pygame.midi.get_init", return_value=True), mock.patch(
        "pygame.midi.Input", side_effect=pygame.midi.MidiException("bad device")
    ):
        with pytest.raises(MidiError, match="Failed to open MIDI stream"):
            open_stream(9)
"""MIDI input devices, streams and event polling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, Sequence

import pygame
import pygame.midi

from keyfall.notes import MAX_MIDI_EVENTS
from keyfall.state import KeyboardState

STREAM_BUFFER_SIZE = 512


class MidiError(Exception):
    """Raised when MIDI devices cannot be listed or opened."""


@dataclass(frozen=True)
class DeviceInfo:
    """A MIDI device as reported by the system."""

    name: str
    input_support: bool


class MidiStream(Protocol):
    """What the poller needs from an open MIDI input."""

    def poll(self) -> Any: ...

    def read(self, num_events: int) -> Sequence[Sequence[Any]]: ...


def _ensure_init() -> None:
    if pygame.midi.get_init():
        return
    try:
        pygame.midi.init()
    except (pygame.midi.MidiException, pygame.error, RuntimeError) as exc:
        raise MidiError(str(exc)) from exc


def _decode(name: bytes | str) -> str:
    if isinstance(name, bytes):
        return name.decode("utf-8", errors="replace")
    return name


def list_devices() -> list[DeviceInfo]:
    """Return every MIDI device known to the system, in device-id order."""
    _ensure_init()
    count = pygame.midi.get_count()
    if count <= 0:
        raise MidiError("No MIDI input devices found")
    devices = []
    for device_id in range(count):
        _interface, name, is_input, _is_output, _opened = pygame.midi.get_device_info(device_id)
        devices.append(DeviceInfo(name=_decode(name), input_support=bool(is_input)))
    return devices


def open_stream(device_id: int) -> pygame.midi.Input:
    """Open the input device with the given id."""
    _ensure_init()
    try:
        return pygame.midi.Input(device_id, STREAM_BUFFER_SIZE)
    except (pygame.midi.MidiException, pygame.error) as exc:
        raise MidiError("Failed to open MIDI stream") from exc


def poll_events(stream: MidiStream, state: KeyboardState) -> int:
    """Apply every pending message from the stream to the state; return how many were read."""
    if not stream.poll():
        return 0
    events = stream.read(MAX_MIDI_EVENTS)
    for data, _timestamp in events:
        state.handle_message(data[0], data[1], data[2])
    return len(events)
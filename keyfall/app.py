"""The application window, device selection and main loop."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Iterable, TextIO

import pygame
import pygame.midi

from keyfall.midi import DeviceInfo, MidiError, MidiStream, list_devices, open_stream, poll_events
from keyfall.notes import (
    SCREEN_HEIGHT_LARGE,
    SCREEN_HEIGHT_SMALL,
    SCREEN_WIDTH_LARGE,
    SCREEN_WIDTH_SMALL,
)
from keyfall.render import render_frame
from keyfall.state import KeyboardState

WINDOW_TITLE = "keyfall"
FRAME_DELAY_MS = 16

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class AppError(Exception):
    """Raised when the application cannot start or is given bad input."""


def format_device_list(devices: Iterable[DeviceInfo]) -> str:
    """One line per device, telling whether it can be used for input."""
    lines = []
    for device_id, device in enumerate(devices):
        support = "SUPPORTED" if device.input_support else "NOT SUPPORTED"
        lines.append(f"Midi device {device_id}: {device.name} [{support}]\n")
    return "".join(lines)


def parse_device_id(text: str, device_count: int) -> int:
    """Read the leading integer of the text and check it names a listed device."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise AppError("Invalid device ID")
    device_id = int(match.group(1))
    if not 0 <= device_id < device_count:
        raise AppError("Invalid device ID")
    return device_id


class App:
    """A window that shows MIDI input as notes falling onto a piano keyboard."""

    def __init__(self, *, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.state = KeyboardState()
        self.devices: list[DeviceInfo] = []
        self.stream: MidiStream | None = None
        self.running = True
        self.closed = False
        pygame.init()
        try:
            if not pygame.display.get_init():
                pygame.display.init()
            pygame.font.init()
            self.screen = pygame.display.set_mode((SCREEN_WIDTH_SMALL, SCREEN_HEIGHT_SMALL))
            pygame.display.set_caption(WINDOW_TITLE)
            pygame.midi.init()
        except (pygame.error, pygame.midi.MidiException, RuntimeError) as exc:
            raise AppError(str(exc)) from exc

    def __enter__(self) -> App:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _go_fullscreen(self) -> None:
        try:
            self.screen = pygame.display.set_mode(
                (SCREEN_WIDTH_LARGE, SCREEN_HEIGHT_LARGE), pygame.FULLSCREEN
            )
        except pygame.error:
            pass

    def device_input(self) -> None:
        """List the MIDI devices, ask for one, open it and run until the window closes."""
        self._go_fullscreen()
        self.devices = list_devices()
        self.stdout.write(format_device_list(self.devices))
        self.stdout.write("Select a MIDI device ID: ")
        self.stdout.flush()
        line = self.stdin.readline()
        try:
            device_id = parse_device_id(line, len(self.devices))
        except AppError:
            self.close()
            raise
        self.stream = open_stream(device_id)
        self.main_loop()

    def main_loop(self) -> None:
        """Read MIDI, move and draw the notes, once per frame, until asked to quit."""
        if self.stream is None:
            raise AppError("No MIDI stream is open")
        self.state.reset()
        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
            poll_events(self.stream, self.state)
            self.state.advance()
            render_frame(self.screen, self.state)
            pygame.display.flip()
            pygame.time.wait(FRAME_DELAY_MS)
            self.state.prune()

    def close(self) -> None:
        """Close the MIDI stream and shut the window down; safe to call twice."""
        if self.closed:
            return
        self.closed = True
        stream, self.stream = self.stream, None
        try:
            if stream is not None:
                stream.close()
            pygame.midi.quit()
            pygame.font.quit()
            pygame.quit()
        except (pygame.error, pygame.midi.MidiException) as exc:
            raise AppError(str(exc)) from exc


def main(argv: list[str] | None = None) -> int:
    """Run the viewer; return the process exit status."""
    parser = argparse.ArgumentParser(
        prog="keyfall",
        description="Show MIDI input as notes falling onto a piano keyboard.",
    )
    parser.parse_args(argv)
    try:
        with App() as app:
            app.device_input()
    except (AppError, MidiError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0
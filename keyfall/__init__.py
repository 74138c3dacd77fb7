"""Falling-note piano visualiser for live MIDI input."""

__version__ = "0.1.0"
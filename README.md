# keyfall

keyfall shows what you play on a MIDI keyboard as notes rising from an
on-screen 88-key piano, in the style of falling-note piano tutorials.
Each key you press lights up on the keyboard and starts a bar that grows
for as long as the key is held. Once the key is released, the bar drifts
up and off the screen.

## Installing

```
pip install .
```

keyfall needs pygame, which brings its own MIDI support.

## Running

Connect a MIDI keyboard and run:

```
keyfall
```

The command takes no options apart from `--help`. keyfall opens a window
called `keyfall` and switches it to 1920×1080 full screen. If full screen
is not available, the window stays at 800×600. keyfall then lists the MIDI
devices it can see in the terminal. Each device is marked `[SUPPORTED]` if
it can be used for input and `[NOT SUPPORTED]` otherwise. Then it asks for
a device ID:

```
Midi device 0: Midi Through Port-0 [SUPPORTED]
Midi device 1: Digital Piano [SUPPORTED]
Select a MIDI device ID: 1
```

keyfall reads the leading integer of the line you type. If there is none,
or it is outside the listed range, keyfall prints `Error: Invalid device ID`
and exits with status 1. It does the same, with its own message, in these
cases:

- no MIDI devices are found;
- the chosen device cannot be opened;
- the window cannot be set up.

Once a device is open, play away. Close the window to quit.

## How notes are drawn

- The keyboard covers MIDI notes 21 (A0) to 108 (C8). It is laid out for
  a 1920×1080 screen.
- A note-on message with a non-zero velocity lights its key and starts a
  new bar.
- A note-off message, or a note-on with velocity 0, releases the key and
  stops every held bar for that note from growing.
- Other MIDI messages are ignored.
- Bars move up 3 pixels per frame. A bar is forgotten once it has left
  the top of the screen.
- Up to 512 bars are kept at once. Bars beyond that are not started, but
  the key still lights up.
- Colours:
  - white-key notes are drawn as rounded bars in bright green;
  - black-key notes are drawn in a darker green;
  - the background is dark grey.
- keyfall waits 16 ms after each frame.

## Using it as a library

The pieces behind the command can also be used on their own.

`keyfall.notes`

- `is_black`, `is_white`, `white_index` and `black_index` place a MIDI
  note on the keyboard.
- `Note` is one bar.
- The module also holds the layout constants.

`keyfall.state`

- `KeyboardState` tracks held keys and bars.
- `note_on` and `note_off` take a note number. Both raise `ValueError`
  for note numbers outside 0–127.
- `handle_message` takes raw status and data bytes.
- `advance` moves the bars one frame, `prune` drops finished bars, and
  `reset` clears everything.

`keyfall.render`

- `white_key_x`, `black_key_x` and `note_rect` give the geometry.
- `render_white_notes`, `render_black_notes`, `render_white_keys` and
  `render_black_keys` draw one layer each.
- `render_frame` clears a pygame surface and draws a whole
  `KeyboardState` onto it.

`keyfall.midi`

- `list_devices` returns `DeviceInfo` entries (`name`, `input_support`).
- `open_stream` opens an input device.
- `poll_events` applies pending messages from a stream to a
  `KeyboardState` and returns how many it read.
- Failures to list or open devices raise `MidiError`.

`keyfall.app`

- `App` owns the window and runs the loop. It can be used as a context
  manager, and `close` shuts it down.
- `format_device_list` and `parse_device_id` handle the device prompt.
  `parse_device_id` raises `AppError` on bad input.
- `main` is the command.

## What keyfall does not do

keyfall only shows live input from a MIDI device. It does not:

- play or load MIDI files;
- make any sound;
- record what is played.

## Tests

```
pip install .[test]
pytest
```
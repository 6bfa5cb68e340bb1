# rhythmgame

A four-lane rhythm game that runs in your terminal. Notes fall down four
lanes towards a judgement line in time with a metronome. Hit them at the
right moment to score Perfect, Great, Good or Bad judgements.

## Installing

```
pip install .
```

## Playing

```
rhythmgame
```

The game takes over the terminal (full screen, hidden cursor) until you
press Ctrl+C.

The title screen shows a metronome, the play field, the current timing
windows and an option panel. Move between the options with the Up and
Down arrow keys and change a value with Left and Right:

- **Difficulty**: Beginner, Easy, Normal, Hard, VeryHard, Expert or Master
  (default Normal).
- **BPM**: from 15 to 300, in steps of 15 (default 120).
- **Speed**: how fast notes fall, 1, 2 or 4 (default 2).
- **JudgeScale**: widens or narrows the timing windows, in steps of 0.1
  (default 2.0).
- **PlaySound**: turns the metronome sound on or off.
- **ShowDebug**: shows note and beat details beside the play field.

Move to **Start** and press Enter to begin. Changing difficulty, BPM or
speed restarts the notes shown on the title screen.

During play, tap the lane keys as notes reach the `=` judgement line:

| Lane | Key |
|------|-----|
| 1    | D   |
| 2    | F   |
| 3    | J   |
| 4    | K   |

During play the screen shows the lanes, the metronome and a timing
indicator: a histogram of your recent hits, early ("fast") on the left
and late ("slow") on the right. Press Escape to end a run, and Escape
again to return to the title screen.

Beside the play area the game prints the frame rate, the time of the last
update, the BPM and the difficulty.

## Timing windows

With a JudgeScale of 1.0 the windows are 10 ms (Perfect), 20 ms (Great),
40 ms (Good) and 80 ms (Bad) either side of the judgement line; the scale
multiplies all of them. The title screen lists each window's full width
(both sides together) in milliseconds. A note that passes the Bad window
counts as a Miss and resets the combo.

## Limitations

- There is no result screen. After Escape ends a run, the play area is
  blank apart from its border and the status text beside it; scores,
  combos and fast/slow counts are kept in `UserData` but not displayed.
- The metronome sound is the terminal bell, so accented and plain beats
  sound the same. `SoundManager` accepts any player callable taking a
  frequency in Hz and a duration in ms if you want real tones.
- Terminals report key presses but not releases. `TerminalKeys` treats a
  key as held for a short time (0.12 s by default) after it was last seen,
  so holding a key may register as repeated taps depending on your
  terminal's key repeat.

## Using the pieces

The game is built from small parts that can be driven directly, for
example in tests:

- `rhythmgame.models.DataStore` holds all shared state (`system`, `game`,
  `user`).
- `rhythmgame.state_manager.StateManager` runs the `NodeController`,
  `MeterController` and `SceneController` each frame.
- `rhythmgame.input_manager.InputManager` updates button states from any
  `is_pressed(key)` callable.
- `rhythmgame.render_manager.RenderManager` composes a frame as text with
  `compose()` and writes it with `render(out)`.
- `rhythmgame.game_manager.GameManager` ties them together; `step()` runs
  one pass of the loop with an injectable clock.

## Running the tests

```
pip install ".[test]"
pytest
```
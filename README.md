# curtainsdrawn

A text-mode horror game played inside a fake "animatronic interfacing
terminal". Freddy, Bonnie, Chica, Foxy and the Puppet wander the rooms of
the building while the clock runs from 0:00 to 6:00. Everything is done by
typing commands at a prompt.

## Installing

```
pip install .
```

The terminal interface uses `blessed`. Sound is played through the
`pygame` mixer; if the mixer cannot be started the game runs silently, and
a sound file that is missing or cannot be loaded is simply skipped.

## Playing

```
curtainsdrawn [--assets DIR]
```

`--assets` names the directory the game's text screens, map and sounds
are read from (default: `./assets`). The game refuses to start, with an
error message and exit status 1, unless `welcome.txt`, `home_menu.txt`,
`help.txt` and `map.txt` can be read from it. During play it also reads
`night1.txt`, `night2.txt`, `rooted_help.txt` and the `.wav` files under
`sound/`.

After the boot screen, type a command and press Enter. Up and Down scroll
the log; Backspace deletes the last character.

### Home menu

- `start` – print the night's introduction and begin the current night
- `help` – show `help.txt`
- `map` – show `map.txt`
- `clear` – clear the log
- `exit`, `exit-game`, `quit-game` – leave the game

### During a night

Input is lower-cased before it is read.

- `map` – draw the map, replacing each room's placeholder with markers for
  the animatronics in it (no extra arguments allowed)
- `anims` – list each animatronic's cooldown, move delay and whether it may
  move
- `root <name>` – try to take control of an animatronic (for example
  `root freddy`); the chance of success falls with its awareness
- `intercom <room>` – play the intercom; without an argument it answers
  `already intercom`
- `ping-near`, `error-logs`, `help`
- `clear`, `continue` – clear the log
- `exit-game` – leave the game

While rooted, commands go to the animatronic instead:

- `status` – read its internal state (raises its awareness)
- `unroot` – release control
- `clear`, `help` (shows `rooted_help.txt`)

The clock advances one displayed minute per real second. Each second also
counts down the animatronics' move cooldowns; when a cooldown reaches zero
the animatronic moves to a neighbouring room on the next frame. Bonnie and
Chica head for rooms no farther from the office, Freddy for rooms holding
at most one other animatronic; Foxy and the Puppet stay put. Reaching 6:00
ends the night, shows the victory screens and moves on to the next night.

## Modules

- `curtainsdrawn.app` – the terminal front end (`main`, `run`, `render`,
  `status_bar`, `visible_lines`, `translate_key`)
- `curtainsdrawn.commands` – key handling (`process_input`,
  `process_input_home`, `process_input_night`, `KeyEvent`, `KeyCode`)
- `curtainsdrawn.gamestate` – `GameState` (log, clock, map, sound) and
  `Night`
- `curtainsdrawn.nights` – `build_map`, `start_game`, `start_night1`,
  `start_night2`
- `curtainsdrawn.anim` – `Anim`, `AnimType`, `TravelMethod`
- `curtainsdrawn.rooms` – `Room`
- `curtainsdrawn.audio` – `AudioPlayer`
- `curtainsdrawn.text` – `Line`, `Span`, `Style`, `Color`

## What the game does not do

- No asset files are included; the game needs an assets directory of its own.
- Only the first and second nights can be played. Starting a later night
  fails with `ValueError`.
- Nothing happens when an animatronic reaches the office: there is no game
  over, no power meter and no doors. The battery figure in the status bar
  is fixed text.

## Running the tests

```
pip install .[test]
pytest
```
# bubblegum

A small boss-battle arcade game built on pygame. You face three bosses in a
row. Each one stands at the right of the arena and throws its own kind of
food at you. Jump over the food or duck under it, fire bubblegum back and
catch the power-ups that fall from the sky.

## Installing

```
pip install .
```

This installs `pygame`, which opens the window, reads the keyboard and mouse,
and plays sound.

## Playing

```
bubblegum
```

Options:

- `--windowed` runs in a window instead of full screen.
- `--scores PATH` keeps the high score in `PATH` instead of the default file.

The title screen has **start**, **score** and **exit** buttons, which you
click with the mouse. The score screen shows the best score so far. Press
`Esc` or click its **home** button to leave it.

Controls during a fight:

| Key | Action |
| --- | --- |
| `A` / `←`, `D` / `→` | walk left / right |
| `W` / `↑` | jump |
| `S` / `↓` / `Shift` | duck (only while on the ground) |
| `Space` or left mouse button | shoot; each shot uses one of eight charges |
| `R` | reload the charges |
| `E` | freeze your fighter's movement and shots |
| `Esc` | pause |

The pause screen has **continue** and **home** buttons. `Esc` also resumes
the fight.

## Rules

- You start with five hearts.
- Each hit on the boss scores 5 points per point of damage and drains the
  boss's life bar. Bosses get tougher with every stage: 50, 70 and 90 life.
- Each piece of food that reaches you costs one heart and 50 points. A score
  below 100 drops to 0.
- When you lose your last heart, the game is over. Click **again** to restart
  from the first boss, or **home** to go back to the title screen.
- When a boss falls, each heart you have left gives 100 bonus points, and then
  the next stage begins. After the third boss, the victory screen shows your
  final score. Any key on that screen returns to the title screen.

A power-up falls every fifteen seconds and disappears if nobody catches it:

- **life** restores one heart. If you already have all five, it gives 150
  points instead.
- **attack** doubles your damage for 5 seconds.
- **jump** lets you jump higher for 7 seconds.
- **speed** makes you run faster for 7 seconds.

The best score is saved whenever you beat it. By default it goes to
`$XDG_DATA_HOME/bubblegum/highscore.json`, or to
`~/.local/share/bubblegum/highscore.json` when `XDG_DATA_HOME` is not set.

## Using the pieces

The game rules do not depend on the window, so you can use them on their own:

- `bubblegum.session.Session` tracks the stage, the score and the lives.
- `bubblegum.player.Fighter` handles movement, jumping, shooting, reloading
  and power-ups.
- `bubblegum.combat.Combat` applies hits and pickups to a stage.
- `bubblegum.bosses.boss_for_stage` returns a boss that plans its throws from
  a `random.Random`.
- `bubblegum.storage.HighScoreStore` reads and writes the high-score file.
- `bubblegum.resolution.choose_resolution` picks an asset directory and a
  scale for a given display height.
- `bubblegum.app.Game` runs the screens and the main loop.

## What it does not do

The package contains no images, fonts or sound files:

- Everything on screen is drawn with plain shapes and pygame's default font.
- Sound effects and music play only if matching files exist in the working
  directory, under `res/HDR`, `res/HD` or `res/SD`. The directory is chosen
  from the display height. For example, the menu music is looked for as
  `res/HDR/Music/Menu.MP3`.
- Missing files are skipped silently, and the game then runs without sound.

## Running the tests

```
pip install .[test]
pytest
```
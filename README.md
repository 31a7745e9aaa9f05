# spacepirates

A small top-down arcade shooter built on pygame. You fly a ship in an
1100×900 window and shoot down the coloured polygons that fall from the top
of the screen to score points.

## Installing

```
pip install .
```

To install with the test tools:

```
pip install ".[test]"
```

## Playing

```
spacepirates
```

The command has no options except `--help`.

Controls:

| Key / button      | Action            |
|-------------------|-------------------|
| `W` `A` `S` `D`   | Move the ship     |
| Left mouse button | Fire              |
| `Escape`          | Quit              |

Rules:

- The game runs at 60 frames per second. One enemy appears on the first
  frame, and after that a new enemy appears every 40 frames.
- Each enemy is a regular polygon with 3 to 10 corners. An enemy with more
  corners is bigger and falls faster. It is also worth more points: one point
  for each corner.
- If you hold the fire button, the ship fires one bullet every few frames.
  Bullets fly straight up.
- A bullet that hits an enemy destroys the enemy, uses up the bullet and adds
  the enemy's points to your score.
- An enemy that touches your ship is destroyed and takes 10 HP from your
  50 HP. An enemy that falls past the bottom of the window is removed.
- The ship cannot leave the window.
- The score is shown in the top-left corner. The red bar below it shows how
  much HP you have left.
- When your HP reaches zero the game stops and shows **GAME OVER**. Close
  the window or press `Escape` to quit.

Files the game loads, relative to the current working directory:

- `Textures/01.png`: the bullet
- `Textures/lol1.png`: the ship
- `Textures/SPACE2.png`: the background
- `Fonts/Dosis-Light.otf`: the text font. This one is optional. If the file
  is missing, pygame's default font is used instead.

## Using it from Python

`spacepirates.game.main(argv=None)` parses the command line, then builds a
`Game` and runs it.

`Game` takes only keyword arguments: `width`, `height`, `player`,
`bullet_texture`, `background`, `rng` (a `random.Random`) and
`input_source`. An input source is a callable that returns the controls held
down in the current frame, as a collection of the strings `"left"`,
`"right"`, `"up"`, `"down"` and `"fire"`. If you leave it out, the keyboard
and mouse are read through pygame.

`Game.update()` moves the game forward one frame and does not need a window,
so you can drive the game state directly:

```python
import random

import pygame

from spacepirates.game import Game
from spacepirates.player import Player

ship = Player(texture=pygame.Surface((320, 320)))
game = Game(
    player=ship,
    bullet_texture=pygame.Surface((20, 20)),
    background=pygame.Surface((1100, 900)),
    rng=random.Random(1),
    input_source=lambda: {"right", "fire"},
)
for _ in range(100):
    game.update()
print(game.points, game.player.hp, len(game.enemies), len(game.bullets))
```

`Game.run()` opens the window and repeats the poll-update-render cycle until
the window is closed. `Game.render()` draws one frame. It raises
`RuntimeError` if the window is not open.

The pieces of the game:

- `spacepirates.player.Player` is the ship. It has `move`, `set_position`,
  `can_attack`, `lose_hp` (HP never goes below zero), `update` and `render`.
  `pos` and `bounds` give its position and its bounding rectangle.
- `spacepirates.enemy.Enemy` is a falling polygon. It has `update`, `render`
  and `bounds`.
- `spacepirates.bullet.Bullet` is a projectile. It has `update`, `render`
  and `bounds`.
- `spacepirates.geometry.FloatRect` is the rectangle type used for bounds.
  `intersects` tells whether two rectangles overlap by a non-empty area.

## What it does not do

There is no sound, no pause, and no way to restart after GAME OVER except
quitting and starting again. Scores are not saved between games.

## Running the tests

```
pytest
```
# brickbreak

A brick-breaker arcade game. Move the paddle, launch the ball and clear
every red brick on the board. Grey bricks cannot be broken.

## Installing

```
pip install .
```

## Playing

```
brickbreak
```

To keep the high score file somewhere other than `highscore.txt` in the
working directory:

```
brickbreak --high-score-file path/to/scores.txt
```

A menu asks you to click a difficulty:

| Difficulty | Ball speed | First level |
|------------|------------|-------------|
| Easy       | 3.0        | 1           |
| Medium     | 4.5        | 2           |
| Hard       | 6.0        | 3           |

Levels 1 to 3 have fixed layouts. Every level after that has a random layout.
When the last breakable brick is gone, the next level is built and the ball
returns to the paddle.

### Controls

| Key            | Action                                         |
|----------------|------------------------------------------------|
| Left / Right   | Move the paddle                                |
| Space          | Launch the ball from the paddle                |
| P              | Pause or resume                                |
| R              | Restart the current level (while over or paused) |
| Escape         | Quit (closing the window also quits)           |

You start with three lives. Each breakable brick you clear scores ten points.
Moving the paddle gives the ball a small sideways spin when it bounces off.
Losing the ball costs a life; with no lives left the game is over.

### Power-ups

Every thirty seconds, if no power-up is already falling, one drops from the
top of the screen. Catch it with the paddle:

- **Blue**: doubles the paddle width.
- **Green**: gives an extra life.
- **Red**: puts a protective floor at the bottom of the screen that bounces
  the ball back up.

A caught power-up's effect ends twelve seconds later: the paddle goes back to
its normal width and the floor is removed.

## What it does not do

The high score shown on screen is read from the high score file at start and
written back unchanged when the game closes. Scores you make during play are
not recorded as a new high score.

## Using it as a library

The game logic in `brickbreak.game` does not need a display, so you can drive
it yourself:

```python
from brickbreak.game import Controls, Difficulty, Game

game = Game(Difficulty.EASY)
game.update(1 / 60, Controls(launch=True))
print(game.score, game.status.lives, len(game.bricks))
```

`Game.update(dt, controls)` advances one frame; `Game.toggle_pause()` and
`Game.restart()` do what their names say. Pass a `random.Random` as `rng` to
`Game` for repeatable random levels and power-ups.

Other pieces:

- `brickbreak.level.level_layout(level, rng)` returns the brick grid for a
  level, and `brickbreak.level.build_bricks(matrix)` turns it into `Brick`
  objects; `all_breakable_destroyed(bricks)` tells whether a level is cleared.
- `brickbreak.brick.Brick.check_collision(ball_pos, radius)` returns a `Hit`
  (`NONE`, `VERTICAL` or `SIDE`).
- `brickbreak.geometry` holds `Vec2`, `Rect` and the collision tests.
- `brickbreak.highscore.load_high_score(path)` and
  `save_high_score(path, score)` read and write the score file.
- `brickbreak.app.run(screen, clock, high_score_path)` runs the menu and game
  on a pygame surface you have opened.

## Running the tests

```
pip install .[test]
pytest
```
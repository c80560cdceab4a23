# pixeltetris

A small pixel-art falling-block puzzle game built on pygame. Pieces come in
the seven classic tetromino shapes. You clear full rows to score points and
move up through the stages. Each stage changes the background colour and
makes pieces fall faster.

## Installing

```
pip install .
```

## Playing

Start the game with:

```
pixeltetris
```

The command takes no options apart from `--help`. It opens a window, runs at
up to 60 frames per second and returns when you leave the main menu or close
the window.

The main menu offers **Play**, **Options** and **Exit**. Use Up and Down to
move the highlight and Enter to choose. **Exit** closes the game.

### Controls in a game

| Key                | Action                                          |
|--------------------|-------------------------------------------------|
| Left / Right       | Move the piece sideways                         |
| Down               | Move the piece down one row                     |
| Up or X            | Rotate the piece                                |
| Space              | Hard drop                                       |
| C or Left Shift    | Hold the piece, or swap with the held one       |
| P                  | Pause                                           |
| Q or Escape        | Leave the game and return to the main menu      |

Each game starts with a three-second countdown. The same countdown runs again
when you come back from the pause screen. The first hold puts the current
piece aside and brings in the next one. After that, a hold swaps the current
piece with the held one. You can hold only once per piece placed.

A translucent ghost piece shows where the current piece will land if you drop
it. You can turn it off in the options.

The pause screen has **Quit** and **Resume** buttons. Resume is selected at
first. Left and Right move between them and Enter chooses. Quit goes back to
the main menu.

### Scoring and stages

Clearing lines in one placement scores as follows:

- 1 line: 100 points
- 2 lines: 300 points
- 3 lines: 500 points
- 4 lines: 800 points

Every cleared line moves you up one stage. Each stage cuts the drop interval
by 0.1 seconds. It starts at 0.8 seconds and never goes below 0.1 seconds.
Stages 1 to 10 each have their own background colour, and every stage after
10 keeps the colour of stage 10. The current stage and score are shown in the
top-left corner.

The game ends once any block settles in the two hidden rows above the
playfield. "Game Over!" then stays on screen until you press Q or Escape.

### Options

The options screen has two settings and an **OK** button. Up and Down move
between the rows. Left and Right change the setting on the selected row:

- **Resolution**: scales the 640 × 360 logical screen by 0.25, 0.5, 1, 1.5, 2
  or 3. The default is 2. The window is resized at once.
- **Ghost Block**: Left turns the ghost piece off and Right turns it on.

Choosing **OK**, or pressing Q or Escape, returns to the main menu. The
settings last until the game is closed.

## Assets

The game loads its images and fonts from an `assets` directory inside the
`pixeltetris` package. It needs these files:

- `tetrominoSprites.png`, `playfieldFrame.png` and `paused-frame.png`
- `button-play.png`, `button-options.png`, `button-exit.png`,
  `button-quit.png`, `button-resume.png` and `button-ok.png`
- `arrow-left.png`, `arrow-right.png`, `button-on-on.png`,
  `button-on-off.png`, `button-off-on.png` and `button-off-off.png`
- the fonts `munro-small.ttf` and `munro.ttf`

The package does not ship these files. Put them there yourself before you
start the game. Without them, starting the game raises an error.

## Using the pieces as a library

The game logic does not need a window. You can use it on its own:

```python
import random

from pixeltetris.inputmanager import Action
from pixeltetris.session import GameSession, points_for_lines

session = GameSession(random.Random(1))
session.handle_action(Action.MOVE_LEFT)
session.handle_action(Action.DROP)
print(session.score, session.stage)
print(points_for_lines(4))  # 800
```

- `pixeltetris.board.Board` holds the 22 × 10 playfield, with row 0 at the
  top. It checks whether a piece may stand where it is with
  `is_position_legal`, stores pieces with `store_piece`, removes full rows
  with `clear_full_lines` and reports `is_game_over`.
- `pixeltetris.piece.Piece` is a tetromino type and rotation at a row and
  column. `cells()` yields the board positions of its blocks.
- `pixeltetris.tetrominoes` provides `shape` and `initial_offset` for each
  `TetrominoType` and rotation.
- `pixeltetris.session.GameSession` covers the rest of a game: spawning
  pieces, moves and rotation through `handle_action`, `hold`, hard drops,
  `ghost_piece`, score, stage and drop interval. Each stage-up is logged at
  INFO level on the `pixeltetris.session` logger.

## Running the tests

```
pip install .[test]
pytest
```
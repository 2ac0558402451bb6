# sokoban

A Sokoban puzzle game built on pygame. Push every box onto a goal square; each
move is animated and the number of completed moves is shown in the top-left
corner of the window.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Playing

Start the game with:

```
sokoban
```

By default it loads textures from `./assets` and plays `./levels/level.txt`.
The options are:

| Option                 | Meaning                                   | Default             |
|------------------------|-------------------------------------------|---------------------|
| `--assets DIR`         | texture directory                         | `assets`            |
| `--level FILE`         | level file to play                        | `levels/level.txt`  |
| `--number N`           | number of the level                       | `1`                 |
| `--fps FPS`            | frame rate (must be positive)             | `60`                |
| `--size WIDTH HEIGHT`  | window size in pixels (must be positive)  | 1280 × 768          |

`sokoban --help` prints the same list. A missing asset directory, level file
or texture image is reported as a usage error.

### Controls

| Key                  | Action                                   |
|----------------------|------------------------------------------|
| Arrow keys / W A S D | Walk one tile, or push the box ahead     |
| Escape               | Close the game                           |

A key acts once it has been held across two consecutive updates. The letter
keys wait until the current move has finished; the arrow keys do not.

A box can be pushed only when exactly one box is ahead and the tile behind it
holds no wall or box. When every goal holds a box, "Level Complete!" is drawn,
a line such as `Level 1 complete in 12 steps` is printed to standard output,
and after a short delay the screen fades out and the same level starts again
from the beginning.

## Level files

A level is a plain text file, one row of tiles per line, each tile 64 pixels
square. The characters are:

| Char | Tile                           |
|------|--------------------------------|
| `#`  | Wall                           |
| `B`  | Box on a light floor           |
| `G`  | Goal                           |
| `P`  | Player start on a light floor  |
| `1`  | Light floor                    |
| `2`  | Dark floor                     |

Any other character leaves the square empty. For example:

```
#######
#1P1G1#
#11B11#
#######
```

`sokoban.levels.parse_level` turns rows of text into a list of `Placement`
tuples (a `Piece` and its pixel position), and `sokoban.levels.GameLevelRoom`
builds a playable room from a level file.

## Assets

`sokoban.levels.load_textures` registers every image listed in
`sokoban.levels.TEXTURE_FILES`, relative to the asset directory: menu art under
`menu/` (`GameMenu.png`, `LVLMenu.png` and the button strips), the bitmap font
`font/2.png` (a 16×16 grid of glyphs) and the one-pixel overlay
`font/1x1black.png`, and at the top level `Hero.png`, `Goal.png`, `Box.png`,
`Wall.png`, `FloarLight.png`, `FloarBlack.png`, `Tileset.png` and the two-frame
walk strips `hero_left.png`, `hero_right.png`, `hero_up.png`, `hero_down.png`.
All of them must exist for the game to start.

## Using the pieces

- `sokoban.game.Game` owns the window, steps the current room at a fixed rate
  and switches rooms between frames; `fps`, `title` and
  `set_window_resolution()` adjust it, and `quit()` raises `SystemExit(0)`.
- `sokoban.room.Room` holds objects, steps them, draws them in ascending
  depth order, and answers `objects_at()` and `objects_of_type()` queries.
- `sokoban.gameobject.GameObject` gives sprites speed, direction, animation
  frames and six countdown alarms; `SolidObject` marks things that block
  movement.
- `sokoban.input.Keyboard` and `sokoban.input.Mouse` track up, pressed, down
  and released states from one update to the next; both accept a polling
  function, so they can be driven without a window.
- `sokoban.textures.TextureManager` maps names to surfaces; the first
  registration of a name wins.
- `sokoban.font.BitmapFont` draws tinted, scaled text from a glyph sheet.
- `sokoban.tiles` holds `Box`, `Wall`, `Goal`, `FloorLight`, `FloorDark`,
  `MainMenuBackground` and `LevelMenuBackground`.
- `sokoban.hero.Hero` is the player: movement, pushing, the step count and the
  victory check.
- `sokoban.widgets` provides `Button`, `FadeIn` and `FadeOutAndChangeRoom`.

## What it does not do

There is no main menu, level selection screen or score table: the game opens
straight into the level given on the command line, and Escape closes it.
Results are printed, not saved. `Button`, `MainMenuBackground` and
`LevelMenuBackground` exist as building blocks, but no screen uses them.
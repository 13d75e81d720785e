# treasurehunt

A small top-down puzzle game. You walk a player around a walled map, pick up
every coin, and then step onto the treasure chest to win. After every step the
terminal is cleared and the number of moves made so far is printed.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the game window.

## Playing

```
treasurehunt path/to/level.ber
```

The command takes exactly one argument; with any other number of arguments it
does nothing and exits with status 0.

Controls:

- `W` / `A` / `S` / `D` or the arrow keys move the player.
- `Esc`, or closing the window, quits.

The chest stays locked until every coin on the map has been collected; until
then it blocks the way like a wall. Stepping onto the unlocked chest wins the
game and closes the window.

## Map files

A map is a plain-text file, one row of tiles per line:

| Character | Tile           |
|-----------|----------------|
| `1`       | wall           |
| `0`       | floor          |
| `P`       | player start   |
| `C`       | coin           |
| `E`       | exit (chest)   |

Example:

```
1111111
1P0C0E1
1111111
```

A map is rejected, with a red `Error` message on standard error and exit
status 1, when:

- the argument is a directory or cannot be opened;
- its name matches none of the characters of a `.ber` suffix in place
  (the name check is lenient: one matching position is enough);
- it contains any character other than those above;
- one of `P`, `C` or `E` is missing;
- there is more than one player;
- the rows are not all the same length;
- it is not closed in by walls on every side.

Line terminators are stripped when the map is loaded, so a trailing newline on
the last row is optional.

## Using the pieces from Python

The map loading and rules can be used without opening a window:

```python
from treasurehunt.mapfile import load_map
from treasurehunt.validate import check_map
from treasurehunt.game import Game, Direction

grid = load_map("level.ber")
counts = check_map(grid)   # raises treasurehunt.errors.MapError on a bad map
game = Game(grid)
game.move(Direction.RIGHT) # True when the step was taken
print(game.steps, game.collected, game.can_exit, game.won)
print(game.rows)           # current map, one string per row
```

- `treasurehunt.mapfile`: `iter_lines`, `count_lines`, `load_map`,
  `check_extension`.
- `treasurehunt.validate`: `check_map` and the individual checks
  `count_chars`, `check_rectangle`, `check_edges`, `check_top_bot`;
  `MapCounts` holds the numbers of players, exits and collectibles.
- `treasurehunt.errors`: `MapError` and `format_error`, which builds the
  coloured report the command writes.
- `treasurehunt.game`: `Game` (with `move`, `handle_key`, `check_next_tile`,
  `window_size`, `close`), `Direction`, `key_to_direction` and
  `move_message`.
- `treasurehunt.render`: `Renderer` draws a `Game` with pygame and runs the
  event loop; `tile_layout` gives the pixel position of every tile.
- `treasurehunt.cli.main` ties everything together as the command above.

The package also carries small general helpers: `treasurehunt.chars`
(character classes, `atoi`, `itoa`), `treasurehunt.textutil` (splitting,
searching, bounded copies, trimming), `treasurehunt.memory` (byte-buffer
operations), `treasurehunt.numberlist` (`NumberList`) and
`treasurehunt.output` (writing characters, strings and numbers to a stream).

## What it does not do

Tiles are drawn as flat coloured squares; there are no sprite images or
animations. There are no enemies, and the move counter appears only in the
terminal, not in the window.

## Running the tests

```
pip install ".[test]"
pytest
```
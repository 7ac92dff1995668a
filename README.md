# snowdefense

A tower-defence game played in the terminal, with its prompts in French. The
map is a square field of snow, stones and fir trees. A winding path runs from
the top edge to a crown on the bottom edge. Waves of skiers, snowboarders and
lugers come down the path. Place defenders on the snow before each wave to
stop them. If any attacker reaches the bottom row, you lose.

## Installing

```
pip install .
```

## Playing

```
snowdefense
snowdefense --save mygame.txt
```

`--save` sets the save file. The default is `sauvegarde.txt` in the current
directory.

The main menu offers three choices:

1. New game: deletes the save file, if there is one, and creates a random map
   between 30×30 and 45×45 tiles.
2. Resume a game: loads the save file. If there is no save file, the program
   reports it and exits with status 3.
3. Quit.

You start with 150 snowflakes. Before each wave you may spend them on
defenders:

| Defender             | Cost | Range | Damage |
|----------------------|------|-------|--------|
| Pingu-Patrouilleur   | 100  | 4     | 60     |
| Flocon-Perce-Ciel    | 200  | 7     | 40     |
| Garde Polaire        | 150  | 1     | 80     |

Columns are named by letters (`a`–`z`, then `A`–`Z`) and rows by numbers
starting at 1. A defender can go only on a snow tile. Range is the Euclidean
distance in tiles, rounded down.

Each wave sends at most eight attackers, one at a time, down the path. The
board holds at most 80. The wave counter starts at 0:

- waves 0–2: skiers only (400 HP);
- waves 3–4: skiers or snowboarders (800 HP);
- from wave 5: lugers (1600 HP) as well.

Each attacker you knock out adds one point to your score. Each wave you
survive earns 50 snowflakes. After a wave you can save the game, which returns
you to the menu. You win when the wave counter reaches 11.

Input that cannot be read ends the program with status 4. That covers a
non-number where a number is expected and the end of input.

## Save format

A save file is plain text made of whitespace-separated integers, in this
order:

1. the map size;
2. the map tile codes, row by row;
3. the number of defenders, then `range damage price x y` for each one;
4. the number of attackers, then `health x y` for each one;
5. the score, the snowflakes and the wave.

## Using it as a library

The game logic is in plain modules and can be driven without a terminal:

- `snowdefense.units`: `TileType`, `DefenderKind`, `EnemyKind`, `Defender`,
  `Enemy`, `make_defender`, `make_enemy`, `distance`.
- `snowdefense.board`: `create_map`, `create_path`, `start_column`,
  `crown_column`, `move_enemies`, `defenders_attack` (returns the number
  killed), `spawn_enemy`. Grids are lists of rows, indexed `grid[y][x]`.
- `snowdefense.state`: `GameState`, `load_game`, `save_game`.
  `load_game` raises `SaveFormatError` for a truncated or malformed file.
- `snowdefense.display`: `render_map` returns the framed map as a string.
  `column_label` gives the letter of a column.
- `snowdefense.game`: `Prompter` reads answers from any text stream.
  `place_defenders`, `start_menu`, `announce_end` and `run_game` take a
  prompter and an output stream. `run_game` also accepts a `random.Random`
  and a delay function, and returns `True` on victory, `False` on defeat and
  `None` when the game was saved. `InvalidInput` is raised for unreadable
  answers. `main` is the command.

## Running the tests

```
pip install .[test]
pytest
```
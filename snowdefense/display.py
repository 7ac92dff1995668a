"""Text rendering of the map."""

from __future__ import annotations

from collections.abc import Sequence

from .units import TileType

SNOW = "\u25fb\ufe0f"
STONE = "\U0001faa8"
FLAG = "\U0001f6a9"
TREE = "\U0001f332"
PENGUIN = "\U0001f427"
SNOWMAN = "\u26c4"
BEAR = "\U0001f43b"
SKIER = "\u26f7\ufe0f"
SNOWBOARDER = "\U0001f3c2"
LUGER = "\U0001f6f7"
CROWN = "\U0001f451"
SNOWFLAKE = "\u2744\ufe0f"

# Symbols that render one column narrow carry a trailing space.
_SYMBOLS = {
    0: SNOW + " ",
    1: SNOW + " ",
    2: SNOW + " ",
    TileType.SNOW: SNOW + " ",
    TileType.STONE: STONE,
    TileType.TREE: TREE,
    TileType.PATH: FLAG,
    TileType.CROWN: CROWN,
    TileType.SKIER: SKIER + " ",
    TileType.SNOWBOARDER: SNOWBOARDER,
    TileType.LUGER: LUGER,
    TileType.PENGUIN: PENGUIN,
    TileType.SNOWMAN: SNOWMAN,
    TileType.BEAR: BEAR,
}


def column_label(index: int) -> str:
    """Letter naming a column: a-z for the first 26, then A-Z."""
    if index < 26:
        return chr(ord("a") + index)
    return chr(ord("A") + index - 26)


def render_map(grid: Sequence[Sequence[int]]) -> str:
    """Draw the map with column letters, row numbers and a frame.

    Raises ValueError for a tile code that has no symbol.
    """
    size = len(grid)
    lines = ["    " + "".join(f"{column_label(i)} " for i in range(size))]
    lines.append("    " + "__" * size)
    for number, row in enumerate(grid, start=1):
        cells = []
        for code in row:
            try:
                cells.append(_SYMBOLS[code])
            except KeyError:
                raise ValueError(f"unknown tile code {code}") from None
        lines.append(f"{number:02d} |" + "".join(cells) + "|")
    lines.append("    " + "\u203e\u203e" * size)
    return "\n".join(lines) + "\n"
"""Game state and its plain-text save format."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass, field

from .units import Defender, Enemy

STARTING_SNOWFLAKES = 150


class SaveFormatError(ValueError):
    """A save file is truncated or holds something other than integers."""


@dataclass
class GameState:
    """Everything a game needs to be saved and resumed."""

    grid: list[list[int]] = field(default_factory=list)
    defenders: list[Defender] = field(default_factory=list)
    enemies: list[Enemy] = field(default_factory=list)
    score: int = 0
    snowflakes: int = STARTING_SNOWFLAKES
    wave: int = 0

    @property
    def size(self) -> int:
        """Side length of the square map (0 when no map exists yet)."""
        return len(self.grid)


def _integers(text: str) -> Iterator[int]:
    for token in text.split():
        try:
            yield int(token)
        except ValueError:
            raise SaveFormatError(f"expected an integer, found {token!r}") from None


def _take(numbers: Iterator[int], what: str) -> int:
    try:
        return next(numbers)
    except StopIteration:
        raise SaveFormatError(f"save file ends before {what}") from None


def _count(numbers: Iterator[int], what: str) -> int:
    value = _take(numbers, what)
    if value < 0:
        raise SaveFormatError(f"negative {what}: {value}")
    return value


def load_game(path: str | os.PathLike) -> GameState:
    """Read a saved game; raises FileNotFoundError if there is none."""
    with open(path, encoding="utf-8") as handle:
        numbers = _integers(handle.read())

    size = _count(numbers, "map size")
    grid = [[_take(numbers, "map tiles") for _ in range(size)] for _ in range(size)]

    defenders = [
        Defender(*(_take(numbers, "defender data") for _ in range(5)))
        for _ in range(_count(numbers, "defender count"))
    ]
    enemies = [
        Enemy(*(_take(numbers, "enemy data") for _ in range(3)))
        for _ in range(_count(numbers, "enemy count"))
    ]
    score = _take(numbers, "score")
    snowflakes = _take(numbers, "snowflakes")
    wave = _take(numbers, "wave")
    return GameState(grid, defenders, enemies, score, snowflakes, wave)


def save_game(path: str | os.PathLike, state: GameState) -> None:
    """Write the game to path in the plain-text save format."""
    lines = [f"{state.size}\n"]
    lines.extend("".join(f"{code} " for code in row) + "\n" for row in state.grid)
    lines.append(f"{len(state.defenders)}\n")
    lines.extend(
        f"{d.reach} {d.damage} {d.price} {d.x} {d.y}\n" for d in state.defenders
    )
    lines.append(f"{len(state.enemies)}\n")
    lines.extend(f"{e.health} {e.x} {e.y}\n" for e in state.enemies)
    lines.append(f"{state.score}\n{state.snowflakes}\n{state.wave}\n")
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(lines)
"""Tile codes, unit kinds and the units that fight on the map."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, IntEnum


class TileType(IntEnum):
    """Codes stored in the map grid, as written to save files."""

    SNOW = 3
    STONE = 4
    TREE = 5
    PATH = 6
    CROWN = 7
    SKIER = 8
    SNOWBOARDER = 9
    LUGER = 10
    PENGUIN = 11
    SNOWMAN = 12
    BEAR = 13


# Codes 0 to 3 all stand for snow; the generator only ever writes 3.
SNOW_CODES = frozenset(range(4))

# Tiles an enemy may step onto.
WALKABLE = frozenset({TileType.PATH, TileType.CROWN})


def is_snow(code: int) -> bool:
    """Whether a grid code is a snow tile a defender may be placed on."""
    return code in SNOW_CODES


class DefenderKind(Enum):
    """Defenders the player can buy: (menu number, range, damage, price, tile)."""

    PENGUIN_PATROL = (1, 4, 60, 100, TileType.PENGUIN)
    SKY_PIERCER = (2, 7, 40, 200, TileType.SNOWMAN)
    POLAR_GUARD = (3, 1, 80, 150, TileType.BEAR)

    def __init__(self, number, reach, damage, price, tile):
        self.number = number
        self.reach = reach
        self.damage = damage
        self.price = price
        self.tile = tile

    @classmethod
    def from_number(cls, number: int) -> "DefenderKind":
        """Look a kind up by its menu number (1, 2 or 3)."""
        for kind in cls:
            if kind.number == number:
                return kind
        raise ValueError(f"no defender with number {number}")


class EnemyKind(Enum):
    """Attackers: (index, health, tile)."""

    SKIER = (0, 400, TileType.SKIER)
    SNOWBOARDER = (1, 800, TileType.SNOWBOARDER)
    LUGER = (2, 1600, TileType.LUGER)

    def __init__(self, index, health, tile):
        self.index = index
        self.health = health
        self.tile = tile

    @classmethod
    def from_index(cls, index: int) -> "EnemyKind":
        """Look a kind up by its index (0, 1 or 2)."""
        for kind in cls:
            if kind.index == index:
                return kind
        raise ValueError(f"no enemy with index {index}")


@dataclass
class Defender:
    """A placed defender: its reach, damage, price and position."""

    reach: int
    damage: int
    price: int
    x: int
    y: int


@dataclass(eq=False)
class Enemy:
    """An active attacker: remaining health and position."""

    health: int
    x: int
    y: int


def make_defender(kind: DefenderKind, x: int, y: int) -> Defender:
    """Build a defender of the given kind at (x, y)."""
    return Defender(kind.reach, kind.damage, kind.price, x, y)


def make_enemy(kind: EnemyKind, x: int, y: int) -> Enemy:
    """Build an attacker of the given kind at (x, y)."""
    return Enemy(kind.health, x, y)


def distance(x1: int, y1: int, x2: int, y2: int) -> int:
    """Euclidean distance between two cells, truncated to an integer."""
    dx = x2 - x1
    dy = y2 - y1
    return math.isqrt(dx * dx + dy * dy)
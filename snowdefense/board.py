"""Map generation and the rules applied to it each turn."""

from __future__ import annotations

import random

from .units import (
    WALKABLE,
    Defender,
    Enemy,
    EnemyKind,
    TileType,
    distance,
    make_enemy,
)

MAX_PER_WAVE = 8
MAX_ENEMIES = 80

Grid = list[list[int]]


def create_map(size: int, rng: random.Random) -> Grid:
    """Build a square map of snow, stones and trees, indexed grid[y][x]."""
    grid = []
    for _ in range(size):
        row = []
        for _ in range(size):
            code = rng.randrange(6)
            row.append(TileType.SNOW if code < 3 else code)
        grid.append([int(code) for code in row])
    return grid


def create_path(grid: Grid, rng: random.Random) -> None:
    """Carve a winding path from the top row down to a crown on the last row."""
    size = len(grid)
    if size <= 6:
        raise ValueError("map must be larger than 6 to hold a path")
    column = rng.randrange(size - 6) + 3
    grid[0][column] = TileType.PATH
    grid[1][column] = TileType.PATH

    previous = 0
    for row in range(2, size - 1):
        while True:
            direction = rng.randrange(3) - 1
            if previous != -direction:
                break
        previous = direction
        new_column = min(max(column + direction, 0), size - 1)
        if direction:
            grid[row - 1][new_column] = TileType.PATH
        column = new_column
        grid[row][column] = TileType.PATH
    grid[size - 1][column] = TileType.CROWN


def start_column(grid: Grid) -> int:
    """Column where the path enters the top row."""
    for x, code in enumerate(grid[0]):
        if code == TileType.PATH:
            return x
    raise ValueError("no path on the top row")


def crown_column(grid: Grid) -> int:
    """Column of the crown on the bottom row."""
    for x, code in enumerate(grid[-1]):
        if code == TileType.CROWN:
            return x
    raise ValueError("no crown on the bottom row")


def move_enemies(grid: Grid, enemies: list[Enemy]) -> None:
    """Step every enemy one cell, preferring down, then right, then left."""
    size = len(grid)
    for enemy in enemies:
        x, y = enemy.x, enemy.y
        tile = grid[y][x]
        for nx, ny in ((x, y + 1), (x + 1, y), (x - 1, y)):
            if 0 <= nx < size and ny < size and grid[ny][nx] in WALKABLE:
                grid[ny][nx] = tile
                grid[y][x] = TileType.PATH
                enemy.x, enemy.y = nx, ny
                break


def defenders_attack(
    grid: Grid, defenders: list[Defender], enemies: list[Enemy]
) -> int:
    """Let each defender hit every enemy in reach; return how many were killed."""
    killed = 0
    for defender in defenders:
        survivors = []
        for enemy in enemies:
            if enemy.health > 0 and (
                distance(defender.x, defender.y, enemy.x, enemy.y) <= defender.reach
            ):
                enemy.health -= defender.damage
                if enemy.health <= 0:
                    grid[enemy.y][enemy.x] = TileType.PATH
                    killed += 1
                    continue
            survivors.append(enemy)
        enemies[:] = survivors
    return killed


def spawn_enemy(
    grid: Grid,
    column: int,
    enemies: list[Enemy],
    spawned: int,
    wave: int,
    rng: random.Random,
) -> Enemy | None:
    """Put a new enemy on the top row unless a limit is reached.

    Returns the new enemy, or None when the wave already spawned its share
    or the board holds the maximum number of enemies.
    """
    if spawned >= MAX_PER_WAVE or len(enemies) >= MAX_ENEMIES:
        return None
    if wave <= 2:
        index = 0
    elif wave <= 4:
        index = rng.randrange(2)
    else:
        index = rng.randrange(3)
    kind = EnemyKind.from_index(index)
    grid[0][column] = kind.tile
    enemy = make_enemy(kind, column, 0)
    enemies.append(enemy)
    return enemy
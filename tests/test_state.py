import random

import pytest

from snowdefense.board import create_map, create_path
from snowdefense.state import GameState, SaveFormatError, load_game, save_game
from snowdefense.units import DefenderKind, Enemy, EnemyKind, make_defender, make_enemy


def _sample_state():
    rng = random.Random(7)
    grid = create_map(10, rng)
    create_path(grid, rng)
    return GameState(
        grid=grid,
        defenders=[
            make_defender(DefenderKind.PENGUIN_PATROL, 1, 2),
            make_defender(DefenderKind.SKY_PIERCER, 5, 8),
        ],
        enemies=[make_enemy(EnemyKind.LUGER, 4, 3)],
        score=12,
        snowflakes=250,
        wave=4,
    )


def test_round_trip(tmp_path):
    path = tmp_path / "save.txt"
    state = _sample_state()
    save_game(path, state)
    loaded = load_game(path)
    assert loaded.grid == state.grid
    assert loaded.defenders == state.defenders
    assert [(e.health, e.x, e.y) for e in loaded.enemies] == [
        (e.health, e.x, e.y) for e in state.enemies
    ]
    assert (loaded.score, loaded.snowflakes, loaded.wave) == (12, 250, 4)
    assert loaded.size == 10


def test_file_layout(tmp_path):
    path = tmp_path / "save.txt"
    state = GameState(
        grid=[[3, 6], [4, 7]],
        defenders=[make_defender(DefenderKind.POLAR_GUARD, 0, 1)],
        enemies=[Enemy(400, 1, 0)],
        score=2,
        snowflakes=150,
        wave=1,
    )
    save_game(path, state)
    assert path.read_text(encoding="utf-8") == (
        "2\n3 6 \n4 7 \n1\n1 80 150 0 1\n1\n400 1 0\n2\n150\n1\n"
    )


def test_empty_state_round_trip(tmp_path):
    path = tmp_path / "save.txt"
    save_game(path, GameState())
    loaded = load_game(path)
    assert loaded.grid == []
    assert loaded.defenders == []
    assert loaded.enemies == []
    assert loaded.snowflakes == 150


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_game(tmp_path / "absent.txt")


def test_truncated_file(tmp_path):
    path = tmp_path / "save.txt"
    path.write_text("2\n3 6\n4\n", encoding="utf-8")
    with pytest.raises(SaveFormatError):
        load_game(path)


def test_non_integer_token(tmp_path):
    path = tmp_path / "save.txt"
    path.write_text("1\nx\n0\n0\n0\n150\n0\n", encoding="utf-8")
    with pytest.raises(SaveFormatError):
        load_game(path)


def test_negative_count(tmp_path):
    path = tmp_path / "save.txt"
    path.write_text("-1\n", encoding="utf-8")
    with pytest.raises(SaveFormatError):
        load_game(path)
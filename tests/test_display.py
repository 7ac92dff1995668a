import pytest

from snowdefense.display import (
    CROWN,
    FLAG,
    SNOW,
    STONE,
    column_label,
    render_map,
)
from snowdefense.units import TileType


@pytest.mark.parametrize(
    "index, label",
    [(0, "a"), (25, "z"), (26, "A"), (27, "B")],
)
def test_column_label(index, label):
    assert column_label(index) == label


def test_render_small_map_exactly():
    grid = [[TileType.PATH, TileType.SNOW], [TileType.STONE, TileType.CROWN]]
    expected = (
        "    a b \n"
        "    ____\n"
        f"01 |{FLAG}{SNOW} |\n"
        f"02 |{STONE}{CROWN}|\n"
        "    \u203e\u203e\u203e\u203e\n"
    )
    assert render_map(grid) == expected


def test_all_snow_codes_render_alike():
    assert render_map([[0]]) == render_map([[3]]) == render_map([[1]])


def test_line_count_matches_size():
    grid = [[TileType.TREE] * 5 for _ in range(5)]
    lines = render_map(grid).splitlines()
    assert len(lines) == len(grid) + 3
    assert lines[2].startswith("01 |")
    assert lines[-2].startswith("05 |")


def test_unknown_code_raises():
    with pytest.raises(ValueError):
        render_map([[TileType.PATH, 99], [3, 3]])
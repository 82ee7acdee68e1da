import pytest

from judgebox.grids import min_gangs, tourist_stars


def _transpose(rows):
    return [list(column) for column in zip(*rows)]


def _transpose_text(rows):
    return ["".join(column) for column in zip(*rows)]


def test_min_gangs_uniform_grid():
    grid = [[4, 4], [4, 4]]
    assert min_gangs(grid, (0, 0), (1, 1)) == 1


def test_min_gangs_same_cell():
    grid = [[0, 1, 2], [3, 4, 5], [6, 7, 8]]
    assert min_gangs(grid, (1, 1), (1, 1)) == 1


def test_min_gangs_two_neighbouring_gangs():
    assert min_gangs([[1, 2]], (0, 0), (0, 1)) == 2


def test_min_gangs_detours_around_other_gang():
    grid = [[0, 1, 0], [0, 1, 0], [0, 0, 0]]
    assert min_gangs(grid, (0, 0), (0, 2)) == 1


def test_min_gangs_is_invariant_under_transposition():
    grid = [[0, 1, 2], [3, 3, 3], [5, 1, 2]]
    assert min_gangs(grid, (0, 0), (2, 2)) == min_gangs(_transpose(grid), (0, 0), (2, 2))


def test_min_gangs_bounded_by_gangs_present():
    grid = [[0, 1, 2], [3, 3, 3], [5, 1, 2]]
    result = min_gangs(grid, (0, 0), (0, 2))
    distinct = {gang for row in grid for gang in row}
    assert 2 <= result <= len(distinct)


def test_min_gangs_rejects_bad_gang():
    with pytest.raises(ValueError):
        min_gangs([[10]], (0, 0), (0, 0))


def test_min_gangs_rejects_cell_outside():
    with pytest.raises(ValueError):
        min_gangs([[0, 1]], (0, 0), (1, 1))


def test_min_gangs_rejects_ragged_grid():
    with pytest.raises(ValueError):
        min_gangs([[0, 1], [0]], (0, 0), (0, 1))


SAMPLE_CITY = [
    "*........",
    ".....**#.",
    "..**...#*",
    "..####*#.",
    ".*.#*.*#.",
    "...#**...",
    "*........",
]


def test_tourist_sample_city():
    assert tourist_stars(SAMPLE_CITY) == 7


@pytest.mark.parametrize("row", ["*.*.*", "....", "**#"[:2], "*"])
def test_tourist_single_row_collects_all(row):
    assert tourist_stars([row]) == row.count("*")


def test_tourist_single_column_collects_all():
    column = ["*", ".", "*", "*"]
    assert tourist_stars(column) == "".join(column).count("*")


def test_tourist_without_stars():
    assert tourist_stars(["...", "...", "..."]) == 0


def test_tourist_is_invariant_under_transposition():
    assert tourist_stars(SAMPLE_CITY) == tourist_stars(_transpose_text(SAMPLE_CITY))


def test_tourist_bounded_by_total_stars():
    grid = ["*.*", "*#*", "***"]
    assert tourist_stars(grid) <= "".join(grid).count("*")


def test_tourist_blocked_start():
    with pytest.raises(ValueError):
        tourist_stars(["#.", ".."])


def test_tourist_blocked_end():
    with pytest.raises(ValueError):
        tourist_stars(["..", ".#"])


def test_tourist_unreachable_end():
    with pytest.raises(ValueError):
        tourist_stars([".#", "#."])


def test_tourist_rejects_unknown_cell():
    with pytest.raises(ValueError):
        tourist_stars([".x", ".."])
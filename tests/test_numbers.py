import pytest

from judgebox.numbers import (
    count_holes,
    count_squares,
    is_right_triangle,
    max_ln,
    parquet_dimensions,
    silver_cuts,
    step_number,
    to_negabinary,
    tower_moves,
    until_42,
    will_it_stop,
)


def test_max_ln_sample():
    assert max_ln(1) == pytest.approx(4.25)


def test_max_ln_grows_with_radius():
    values = [max_ln(r) for r in range(0, 20)]
    assert values == sorted(values)
    assert len(set(values)) == len(values)


def test_step_number_sample():
    assert step_number(4, 2) == 6


def test_step_number_off_pattern_is_none():
    assert step_number(3, 4) is None
    assert step_number(5, 0) is None


def test_step_numbers_cover_contiguous_range():
    values = []
    for x in range(50):
        for y in (x, x - 2):
            if y >= 0:
                values.append(step_number(x, y))
    assert sorted(values) == list(range(len(values)))


@pytest.mark.parametrize("length,width", [(4, 3), (5, 5), (10, 3), (7, 6), (100, 42)])
def test_parquet_dimensions_round_trip(length, width):
    red = 2 * length + 2 * width - 4
    brown = (length - 2) * (width - 2)
    assert parquet_dimensions(red, brown) == (length, width)


def test_parquet_dimensions_impossible():
    with pytest.raises(ValueError):
        parquet_dimensions(1, 100)


def test_parquet_dimensions_negative():
    with pytest.raises(ValueError):
        parquet_dimensions(-2, 3)


def test_tower_moves_base_and_recurrence():
    assert tower_moves(1) == 2
    for n in range(2, 60):
        assert tower_moves(n) == 3 * tower_moves(n - 1) + 2


def test_tower_moves_rejects_zero():
    with pytest.raises(ValueError):
        tower_moves(0)


def test_count_squares_differences():
    assert count_squares(0) == 0
    for n in range(1, 100):
        assert count_squares(n) - count_squares(n - 1) == n * n


@pytest.mark.parametrize("sides", [(3, 4, 5), (5, 3, 4), (4, 5, 3), (6, 8, 10), (5, 12, 13)])
def test_right_triangles(sides):
    assert is_right_triangle(*sides) is True


@pytest.mark.parametrize("sides", [(2, 3, 4), (1, 1, 1), (5, 5, 8)])
def test_not_right_triangles(sides):
    assert is_right_triangle(*sides) is False


def test_silver_cuts_bounds():
    for n in range(1, 2000):
        cuts = silver_cuts(n)
        assert 2**cuts <= n < 2 ** (cuts + 1)


def test_silver_cuts_rejects_non_positive():
    with pytest.raises(ValueError):
        silver_cuts(0)


def test_will_it_stop_powers_of_two():
    assert all(will_it_stop(2**k) for k in range(62))


def test_will_it_stop_other_numbers():
    assert not any(will_it_stop(n) for n in (3, 5, 6, 7, 12, 100, 1023))


def test_to_negabinary_zero():
    assert to_negabinary(0) == "0"


@pytest.mark.parametrize("n", range(-300, 301))
def test_to_negabinary_round_trip(n):
    text = to_negabinary(n)
    assert set(text) <= {"0", "1"}
    if n != 0:
        assert text[0] == "1"
    value = sum(int(d) * (-2) ** i for i, d in enumerate(reversed(text)))
    assert value == n


def test_count_holes_weights():
    assert count_holes("8") == 2 * count_holes("6")
    assert count_holes("69") == 2 * count_holes("0")
    assert count_holes("123457") == 0


def test_count_holes_is_additive():
    assert count_holes("680") + count_holes("9123") == count_holes("6809123")


def test_until_42_stops_before_42():
    assert list(until_42([1, 2, 88, 42, 99])) == [1, 2, 88]


def test_until_42_first_is_42():
    assert list(until_42([42, 1, 2])) == []
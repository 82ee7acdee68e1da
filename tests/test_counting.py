import pytest

from judgebox.counting import (
    max_sum_subarrays,
    non_triangles,
    treats_revenue,
    zero_sum_quadruples,
)


@pytest.mark.parametrize("value", [-5, 0, 7])
def test_single_element(value):
    assert max_sum_subarrays([value]) == (value, 1)


@pytest.mark.parametrize("n", [1, 2, 3, 6])
def test_equal_negatives_each_count(n):
    assert max_sum_subarrays([-1] * n) == (-1, n)


@pytest.mark.parametrize("n", [1, 3, 5])
def test_all_zeroes_count_every_subarray(n):
    assert max_sum_subarrays([0] * n) == (0, n * (n + 1) // 2)


def test_positive_values_take_the_whole_array():
    values = [1, 2, 3, 4]
    assert max_sum_subarrays(values) == (sum(values), 1)


def test_mixed_values():
    assert max_sum_subarrays([2, 0, -2, 2]) == (2, 4)


def test_max_sum_of_empty_raises():
    with pytest.raises(ValueError):
        max_sum_subarrays([])


def test_zero_sum_quadruples_sample():
    rows = [
        (-45, 22, 42, -16),
        (-41, -27, 56, 30),
        (-36, 53, -37, 77),
        (-36, 30, -75, -46),
        (26, -38, -10, 62),
        (-32, -54, -6, 45),
    ]
    assert zero_sum_quadruples(rows) == 5
    negated = [tuple(-value for value in row) for row in rows]
    assert zero_sum_quadruples(negated) == 5


@pytest.mark.parametrize("n", [1, 2, 3])
def test_zero_rows_count_every_choice(n):
    assert zero_sum_quadruples([(0, 0, 0, 0)] * n) == n**4


def test_zero_sum_bad_row_raises():
    with pytest.raises(ValueError):
        zero_sum_quadruples([(1, 2, 3)])


def test_non_triangles_example():
    assert non_triangles([4, 2, 10]) == 1


def test_degenerate_triangle_is_not_counted():
    assert non_triangles([1, 2, 3]) == 0


def test_non_triangles_ignore_order():
    lengths = [5, 2, 9, 6, 1, 14, 3]
    assert non_triangles(lengths) == non_triangles(sorted(lengths, reverse=True))


def test_too_few_sticks():
    assert non_triangles([1, 100]) == 0


def test_treats_sample():
    assert treats_revenue([1, 3, 1, 5, 2]) == 43


def test_treats_reversal_gives_same_revenue():
    values = [4, 1, 7, 3, 3, 9, 2]
    assert treats_revenue(values) == treats_revenue(values[::-1])


def test_treats_equal_values():
    assert treats_revenue([3] * 4) == 3 * (1 + 2 + 3 + 4)


def test_treats_single_and_empty():
    assert treats_revenue([8]) == 8
    assert treats_revenue([]) == 0
# judgebox

A library of solutions to classic online-judge problems. Each solution is a
plain function or a small class: you pass it Python values and it returns the
answer. Invalid input raises `ValueError` (or `IndexError` for out-of-range
cells and indexes); a problem with no answer returns `None` where the
function says so.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `judgebox.numbers`: closed forms and digit tricks: `max_ln`,
  `step_number` (returns `None` off the pattern), `parquet_dimensions`,
  `tower_moves`, `count_squares`, `is_right_triangle`, `silver_cuts`,
  `will_it_stop`, `to_negabinary`, `count_holes` and the generator
  `until_42`.
- `judgebox.sequences`: `recaman` (terms 0 to `RECAMAN_LIMIT`),
  `non_decreasing_count` (lengths 1 to `NON_DECREASING_LIMIT`),
  `factorial_factorization`, `primes_between`, `street_trees`,
  `patting_heads` and `smallest_binary_multiple`.
- `judgebox.text`: `largest_after_removal`, `min_rotation`,
  `min_dna_mutations`, `coin_sequence_counts` (counts in `COIN_SEQUENCES`
  order), `splits_into_even_palindromes`, `decode_to_and_fro` and
  `string_distance` (edit distance with adjacent transpositions, computed
  within `DISTANCE_BAND` of the diagonal).
- `judgebox.ranking`: `reversed_order_inversions`, `champion`,
  `christmas_lights_swaps`, `min_nails` and `max_candies_per_person`.
- `judgebox.fenwick`: `Fenwick2D`, a square grid with `set(x, y, value)`
  and inclusive rectangle `sum(x1, y1, x2, y2)`.
- `judgebox.segtrees`: `TwinArrays`, two zero-filled arrays with `sum`,
  `update` and range `swap`; and `MergeSortTree`, with
  `count_at_most(value, lo, hi)` and `kth_smallest(lo, hi, k)` over
  half-open ranges.
- `judgebox.ordering`: `order_ranks`, `queue_order` and
  `min_partial_sum_mod` (returns `None` when no run qualifies).
- `judgebox.graphs`: `make_tree`, `is_tree`, `tree_longest_path`,
  `count_quadruples` and `prime_path` (returns `None` when unreachable).
- `judgebox.grids`: `min_gangs` and `tourist_stars`.
- `judgebox.games`: `is_valid_tictactoe`, `is_final_tictactoe`,
  `rpssl_win_probability` (moves in `RPSSL_MOVES` order) and `pour_steps`
  (returns `None` when impossible).
- `judgebox.counting`: `max_sum_subarrays`, `zero_sum_quadruples`,
  `non_triangles` and `treats_revenue`.
- `judgebox.puzzles`: `min_max_path`, `onion_layers` and `zigzag_sum`.

## Example

```python
from judgebox.numbers import to_negabinary, tower_moves
from judgebox.sequences import primes_between, recaman
from judgebox.fenwick import Fenwick2D

to_negabinary(-13)          # "110111"
tower_moves(3)              # 26
primes_between(1, 10)       # [2, 3, 5, 7]
recaman(3)                  # 6

grid = Fenwick2D(4)
grid.set(0, 0, 5)
grid.set(1, 2, 3)
grid.sum(0, 0, 3, 3)        # 8
```

## What it does not do

The package has no command-line program: it does not read problem input
from standard input or print answers in a judge's output format. Parsing
input and formatting output are left to the caller.
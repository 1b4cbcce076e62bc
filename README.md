# cfsolvers

Plain-Python solvers for a set of competitive-programming problems. Each
solver is an ordinary function. It takes Python values and returns the
answer, so you can call it from code, test it, or combine it with others.
Invalid input raises `ValueError`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `cfsolvers.strings`
  - `count_palindrome_pairs(words)`: the number of pairs of lowercase words
    whose combined letters can be rearranged into a palindrome.
  - `restore_prefix_suffix(n, pieces)`: labels each of the `2n-2` pieces
    `'P'` (prefix) or `'S'` (suffix) of one string of length `n`.
  - `split_message(text, limits)`: returns a `MessageSplit` with the fields
    `ways` (number of splits, reduced modulo 10^9+7), `longest` and `fewest`.
  - `balanced_bracket_sequence(n, k)`: builds `n` bracket pairs whose nesting
    depths sum to `k`. It raises `ValueError("Impossible")` when no such
    sequence exists.
  - `first_winner(rounds)`: the winner of a scoring game. A tie goes to the
    player who first reached the top score.
- `cfsolvers.arrays`
  - `max_firecrackers`, `count_exhibition_positions`, `max_median`,
    `count_interesting_pairs`, `min_replants`, `min_moves_to_sort`,
    `max_stolen_diamonds`, `can_equalize`.
  - `longest_ones_segment(values, k)`: returns an `OnesSegment` with the
    fields `length` and `values`. `values` is the filled-in array.
- `cfsolvers.graphs`
  - `min_operations_to_zero(values)`: the fewest increments or doublings
    modulo 32768 that turn each value into zero.
  - `tag_game_moves`, `evacuation_days`, `count_safe_roads`. Vertices are
    numbered from 1.
- `cfsolvers.grids`
  - `component_sizes_map`, `max_ones_rectangle`, `min_bit_flips`,
    `is_shuffled`.
- `cfsolvers.numbers`
  - `floor_ceil_extremes(x, floors, ceils)`: returns `RoundingExtremes` with
    the fields `minimum` and `maximum`.
  - `mex_operations(values)`: the list of 1-based `(l, r)` operations.
  - `min_coin_moves`, `count_pair_arrangements`.
- `cfsolvers.geometry`
  - `min_fountain_cover`, `min_polyline_segments`, `count_circle_points`.

## Example

```python
from cfsolvers.strings import count_palindrome_pairs, balanced_bracket_sequence

# "aa" and "bb" can be rearranged into a palindrome when joined;
# "cd" pairs with neither of them.
print(count_palindrome_pairs(["aa", "bb", "cd"]))  # 1

print(balanced_bracket_sequence(3, 1))
```

## Command line

The `cfsolvers` command counts palindrome pairs. It reads a word count `n`
followed by `n` lowercase words. The input comes from a file named as the
only argument, or from standard input when no file is given. The command
prints the number of pairs whose letters can be rearranged into a
palindrome:

```
printf '3\naa\nbb\ncd\n' | cfsolvers
cfsolvers words.txt
```

## What is not included

Only the palindrome pair counter has a command. The other solvers are
available only as functions from Python code. The package does not read
problem input for them or print their answers.
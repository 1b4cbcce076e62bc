"""Solvers for grid and matrix puzzles."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

_STEPS = ((-1, 0), (0, -1), (1, 0), (0, 1))


def _rectangular(rows: Iterable[Sequence]) -> list:
    rows = list(rows)
    if not rows or not rows[0]:
        raise ValueError("the grid must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all rows must have the same length")
    return rows


def _bit_rows(grid: Iterable[str]) -> list[list[int]]:
    rows = _rectangular(grid)
    if any(ch not in "01" for row in rows for ch in row):
        raise ValueError("grid cells must be '0' or '1'")
    return [[int(ch) for ch in row] for row in rows]


def _neighbours(x: int, y: int, height: int, width: int) -> Iterator[tuple[int, int]]:
    for dx, dy in _STEPS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < height and 0 <= ny < width:
            yield nx, ny


def component_sizes_map(grid: Iterable[str]) -> list[str]:
    """Replace each wall with the size, mod 10, of the open area it would join."""
    rows = _rectangular(grid)
    height, width = len(rows), len(rows[0])
    label = [[-1] * width for _ in range(height)]
    sizes: list[int] = []
    for i, row in enumerate(rows):
        for j, cell in enumerate(row):
            if cell != "." or label[i][j] != -1:
                continue
            component = len(sizes)
            label[i][j] = component
            stack = [(i, j)]
            size = 0
            while stack:
                x, y = stack.pop()
                size += 1
                for nx, ny in _neighbours(x, y, height, width):
                    if rows[nx][ny] == "." and label[nx][ny] == -1:
                        label[nx][ny] = component
                        stack.append((nx, ny))
            sizes.append(size)

    result = []
    for i, row in enumerate(rows):
        cells = []
        for j, cell in enumerate(row):
            if cell == ".":
                cells.append(".")
                continue
            touching = {
                label[x][y]
                for x, y in _neighbours(i, j, height, width)
                if rows[x][y] == "."
            }
            total = 1 + sum(sizes[component] for component in touching)
            cells.append(str(total % 10))
        result.append("".join(cells))
    return result


def max_ones_rectangle(grid: Iterable[str]) -> int:
    """Largest all-ones rectangle after reordering the rows freely."""
    rows = _bit_rows(grid)
    runs = []
    for row in rows:
        run = 0
        line = []
        for bit in reversed(row):
            run = run + 1 if bit else 0
            line.append(run)
        runs.append(line[::-1])
    best = 0
    for column in zip(*runs):
        for height, width in enumerate(sorted(column, reverse=True), 1):
            best = max(best, height * width)
    return best


def min_bit_flips(grid: Iterable[str]) -> int:
    """Fewest cell flips making every row and column hold an even number of ones."""
    rows = _bit_rows(grid)
    odd_rows = sum(sum(row) % 2 for row in rows)
    odd_columns = sum(sum(column) % 2 for column in zip(*rows))
    return max(odd_rows, odd_columns)


def _squared_distance(first: Sequence[int], second: Sequence[int]) -> int:
    return sum((a - b) ** 2 for a, b in zip(first, second))


def is_shuffled(matrix: Iterable[Sequence[int]]) -> bool:
    """Whether the picture's halves look swapped: the middle seam differs at least as much as top from bottom."""
    rows = _rectangular(matrix)
    if len(rows) < 2:
        raise ValueError("the picture needs at least two rows")
    middle = len(rows) // 2
    edge_gap = _squared_distance(rows[0], rows[-1])
    seam_gap = _squared_distance(rows[middle - 1], rows[middle])
    return seam_gap >= edge_gap
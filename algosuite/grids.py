"""Algorithms over two-dimensional grids."""

from __future__ import annotations

from typing import List, Sequence

_MAGIC_SQUARES = frozenset(
    {
        ((8, 1, 6), (3, 5, 7), (4, 9, 2)),
        ((6, 1, 8), (7, 5, 3), (2, 9, 4)),
        ((4, 9, 2), (3, 5, 7), (8, 1, 6)),
        ((2, 9, 4), (7, 5, 3), (6, 1, 8)),
        ((8, 3, 4), (1, 5, 9), (6, 7, 2)),
        ((4, 3, 8), (9, 5, 1), (2, 7, 6)),
        ((6, 7, 2), (1, 5, 9), (8, 3, 4)),
        ((2, 7, 6), (9, 5, 1), (4, 3, 8)),
    }
)


def spiral_order(matrix: Sequence[Sequence[int]]) -> List[int]:
    """Return the matrix's items in clockwise spiral order from the top left."""
    if not matrix or not matrix[0]:
        return []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    result: List[int] = []
    while top <= bottom and left <= right:
        result.extend(matrix[top][left:right + 1])
        top += 1
        result.extend(matrix[row][right] for row in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(matrix[bottom][col] for col in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            result.extend(matrix[row][left] for row in range(bottom, top - 1, -1))
            left += 1
    return result


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the largest rectangle area under a histogram."""
    bars = [*heights, 0]
    stack: List[int] = []
    best = 0
    for index, height in enumerate(bars):
        while stack and height < bars[stack[-1]]:
            top_height = bars[stack.pop()]
            width = index - stack[-1] - 1 if stack else index
            best = max(best, top_height * width)
        stack.append(index)
    return best


def maximal_rectangle(matrix: Sequence[Sequence[str]]) -> int:
    """Return the area of the largest all-'1' rectangle in a '0'/'1' matrix."""
    if not matrix:
        return 0
    heights = [0] * len(matrix[0])
    best = 0
    for row in matrix:
        heights = [h + 1 if cell == "1" else 0 for h, cell in zip(heights, row)]
        best = max(best, largest_rectangle_area(heights))
    return best


def num_magic_squares_inside(grid: Sequence[Sequence[int]]) -> int:
    """Count 3x3 subgrids that are magic squares of the numbers 1 to 9."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    count = 0
    for i in range(rows - 2):
        for j in range(cols - 2):
            block = tuple(tuple(grid[i + x][j:j + 3]) for x in range(3))
            if block in _MAGIC_SQUARES:
                count += 1
    return count


def spiral_matrix_iii(
    rows: int, cols: int, r_start: int, c_start: int
) -> List[List[int]]:
    """Return grid cells visited by a clockwise spiral walk from a start cell."""
    total = rows * cols
    row, col = r_start, c_start
    d_row, d_col = 0, 1
    turns_left = 2
    steps = 1
    next_steps = 2
    visited: List[List[int]] = []
    while len(visited) < total:
        if 0 <= row < rows and 0 <= col < cols:
            visited.append([row, col])
        row += d_row
        col += d_col
        steps -= 1
        if steps == 0:
            d_row, d_col = d_col, -d_row
            turns_left -= 1
            if turns_left == 0:
                turns_left = 2
                steps = next_steps
                next_steps += 1
            else:
                steps = next_steps - 1
    return visited


class _CycleCounter:
    """Union-find over points that counts unions closing a cycle."""

    def __init__(self, size: int) -> None:
        self.parent = list(range(size))
        self.rank = [1] * size
        self.cycles = 0

    def find(self, item: int) -> int:
        root = item
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[item] != root:
            self.parent[item], item = root, self.parent[item]
        return root

    def union(self, a: int, b: int) -> None:
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            self.cycles += 1
        elif self.rank[root_a] > self.rank[root_b]:
            self.parent[root_b] = root_a
        elif self.rank[root_a] < self.rank[root_b]:
            self.parent[root_a] = root_b
        else:
            self.parent[root_b] = root_a
            self.rank[root_a] += 1


def regions_by_slashes(grid: Sequence[str]) -> int:
    """Count the regions an n x n grid of '/', '\\' and ' ' cells is cut into."""
    n = len(grid)
    dots = n + 1
    counter = _CycleCounter(dots * dots)
    for i in range(dots):
        for j in range(dots):
            if i in (0, n) or j in (0, n):
                counter.union(0, i * dots + j)
    for i, line in enumerate(grid):
        for j, cell in enumerate(line[:n]):
            if cell == "\\":
                counter.union(i * dots + j, (i + 1) * dots + j + 1)
            elif cell == "/":
                counter.union((i + 1) * dots + j, i * dots + j + 1)
    return counter.cycles
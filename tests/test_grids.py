import pytest

from algosuite.grids import (
    largest_rectangle_area,
    maximal_rectangle,
    num_magic_squares_inside,
    regions_by_slashes,
    spiral_matrix_iii,
    spiral_order,
)


def _numbered(rows, cols):
    return [[r * cols + c for c in range(cols)] for r in range(rows)]


@pytest.mark.parametrize("rows, cols", [(1, 1), (1, 4), (4, 1), (3, 3), (3, 4), (5, 2)])
def test_spiral_order_walks_every_cell_adjacently(rows, cols):
    matrix = _numbered(rows, cols)
    order = spiral_order(matrix)
    assert sorted(order) == list(range(rows * cols))
    assert order[:cols] == matrix[0]
    coords = [divmod(value, cols) for value in order]
    for (r1, c1), (r2, c2) in zip(coords, coords[1:]):
        assert abs(r1 - r2) + abs(c1 - c2) == 1


def test_spiral_order_single_column():
    matrix = [[7], [8], [9]]
    assert spiral_order(matrix) == [row[0] for row in matrix]


def test_spiral_order_empty():
    assert spiral_order([]) == []


@pytest.mark.parametrize("heights", [[2, 1, 5, 6, 2, 3], [2, 4], [1, 1, 1], [6, 2, 5, 4, 5, 1, 6]])
def test_largest_rectangle_area_bounds(heights):
    area = largest_rectangle_area(heights)
    assert area >= max(heights)
    assert area >= min(heights) * len(heights)
    assert area <= max(heights) * len(heights)


def test_largest_rectangle_area_flat_and_input_untouched():
    heights = [4] * 5
    assert largest_rectangle_area(heights) == 4 * len(heights)
    assert heights == [4] * 5


def test_maximal_rectangle_all_ones():
    matrix = [["1"] * 4 for _ in range(3)]
    assert maximal_rectangle(matrix) == 3 * 4


def test_maximal_rectangle_single_row_matches_histogram():
    row = ["1", "0", "1", "1", "1", "0"]
    assert maximal_rectangle([row]) == largest_rectangle_area([int(c) for c in row])


def test_maximal_rectangle_zeros_and_empty():
    assert maximal_rectangle([["0", "0"], ["0", "0"]]) == maximal_rectangle([])


def test_maximal_rectangle_transpose_invariant():
    matrix = [
        ["1", "0", "1", "0", "0"],
        ["1", "0", "1", "1", "1"],
        ["1", "1", "1", "1", "1"],
        ["1", "0", "0", "1", "0"],
    ]
    transposed = [list(col) for col in zip(*matrix)]
    assert maximal_rectangle(matrix) == maximal_rectangle(transposed)


def test_magic_square_found_in_padded_grid():
    square = [[4, 3, 8], [9, 5, 1], [2, 7, 6]]
    padded = [row + [row[0]] for row in square]
    assert num_magic_squares_inside(square) == 1
    assert num_magic_squares_inside(padded) == num_magic_squares_inside(square)


def test_magic_square_rejects_equal_sums_and_small_grids():
    assert num_magic_squares_inside([[5] * 3 for _ in range(3)]) == 0
    assert num_magic_squares_inside([[5]]) == 0


@pytest.mark.parametrize(
    "rows, cols, r_start, c_start", [(1, 4, 0, 0), (5, 6, 1, 4), (3, 3, 2, 2), (2, 7, 1, 0)]
)
def test_spiral_matrix_iii_visits_every_cell_once(rows, cols, r_start, c_start):
    cells = spiral_matrix_iii(rows, cols, r_start, c_start)
    assert cells[0] == [r_start, c_start]
    assert sorted(map(tuple, cells)) == [(r, c) for r in range(rows) for c in range(cols)]


def test_spiral_matrix_iii_single_row_from_left():
    assert spiral_matrix_iii(1, 4, 0, 0) == [[0, c] for c in range(4)]


@pytest.mark.parametrize("n", [1, 2, 4])
def test_regions_blank_grid(n):
    assert regions_by_slashes([" " * n] * n) == 1


def test_regions_worked_example():
    assert regions_by_slashes(["/\\", "\\/"]) == 5


@pytest.mark.parametrize("grid", [[" /", "/ "], ["/\\", "\\/"], ["\\/", "/\\"], ["/"]])
def test_regions_mirror_invariant(grid):
    swap = str.maketrans("/\\", "\\/")
    mirrored = [row[::-1].translate(swap) for row in grid]
    assert regions_by_slashes(mirrored) == regions_by_slashes(grid)
    assert regions_by_slashes(grid) >= regions_by_slashes([" " * len(grid)] * len(grid))
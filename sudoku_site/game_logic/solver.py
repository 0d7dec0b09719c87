"""
Backtracking solver.

Fills empty cells depth-first in row-major order, trying the candidate
digits of each cell in a random order. Every placement made on a failed
branch is undone, so a failed solve leaves the grid as it was.
"""
import numpy as np

from ..errors import UnsolvableError
from .board import DIGITS, SIDE, as_grid, copy_grid, fits, is_valid_partial
from .rng import get_rng, shuffled


def find_empty(grid: list[list[int]]):
    """Finds the first empty cell (represented by 0), scanning row by row."""
    for i in range(SIDE):
        for j in range(SIDE):
            if grid[i][j] == 0:
                return (i, j)  # row, col
    return None


def solve_sudoku(grid: list[list[int]], rng: np.random.Generator) -> bool:
    """
    Solves a Sudoku puzzle using backtracking.
    Modifies the grid in place. Returns True if a solution is found.
    """
    find = find_empty(grid)
    if not find:
        return True  # Puzzle is solved
    row, col = find

    for num in shuffled(rng, DIGITS):
        if fits(grid, row, col, num):
            grid[row][col] = num
            if solve_sudoku(grid, rng):
                return True
            grid[row][col] = 0  # Backtrack
    return False


def solve(grid, rng: np.random.Generator = None) -> list[list[int]]:
    """
    Solves `grid` in place and returns it.

    A grid that already breaks a rule is rejected before any search.
    Raises UnsolvableError when there is no completion (the grid is left
    untouched) and InvalidArgumentError when `grid` is not a 9x9 integer
    table. Array-like input (e.g. numpy) is solved on a converted copy.
    """
    board = as_grid(grid)
    if not is_valid_partial(board):
        raise UnsolvableError("grid already breaks a row, column or box rule")
    if not solve_sudoku(board, get_rng(rng)):
        raise UnsolvableError("grid has no valid completion")
    return board


def is_solvable(grid, rng: np.random.Generator = None) -> bool:
    """True if a scratch copy of `grid` can be solved; `grid` is never modified."""
    try:
        solve(copy_grid(as_grid(grid)), rng)
    except UnsolvableError:
        return False
    return True

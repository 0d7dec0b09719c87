import logging

import numpy as np

from .. import config
from ..errors import SudokuInvariantError, UnsolvableError
from .board import SIDE, as_grid, copy_grid, count_holes, fits, new_grid
from .difficulty import holes_for_difficulty
from .rng import get_rng, rand_int
from .solver import solve, solve_sudoku

logger = logging.getLogger(__name__)


def generate_solution(rng: np.random.Generator = None) -> list[list[int]]:
    """Generates a fully solved Sudoku board."""
    board = new_grid()
    if not solve_sudoku(board, get_rng(rng)):
        # An empty board always has a completion; getting here means the solver is broken
        raise SudokuInvariantError("solver failed to fill an empty board")
    return board


def carve_puzzle(
    solution: list[list[int]],
    target_holes: int,
    max_attempts: int = None,
    rng: np.random.Generator = None,
) -> list[list[int]]:
    """
    Removes numbers from a copy of `solution` until it has `target_holes`
    empty cells or `max_attempts` random cells have been tried.

    After each removal a scratch copy is solved; if that fails the digit is
    put back, so the returned puzzle is always solvable. It may have fewer
    holes than requested. Uniqueness of the solution is not checked.
    Raises InvalidArgumentError when `solution` is not a 9x9 integer table.
    """
    rng = get_rng(rng)
    if max_attempts is None:
        max_attempts = config.MAX_CARVE_ATTEMPTS

    puzzle = copy_grid(as_grid(solution))
    tries = 0
    while count_holes(puzzle) < target_holes and tries < max_attempts:
        tries += 1

        row = rand_int(rng, SIDE)
        col = rand_int(rng, SIDE)
        if puzzle[row][col] == 0:
            continue

        saved = puzzle[row][col]
        puzzle[row][col] = 0
        try:
            solve(copy_grid(puzzle), rng)
        except UnsolvableError:
            logger.debug(f"Reverting removal at ({row}, {col}): puzzle became unsolvable")
            puzzle[row][col] = saved

    holes = count_holes(puzzle)
    if holes < target_holes:
        logger.warning(f"Carved only {holes}/{target_holes} holes in {tries} attempts")
    else:
        logger.debug(f"Carved {holes} holes in {tries} attempts")
    return puzzle


def generate_puzzle(difficulty="medium", max_attempts: int = None, rng: np.random.Generator = None):
    """
    Generates a Sudoku puzzle and its solution.
    Difficulty levels: "easy", "medium", "hard"; anything else is treated as medium.
    A cell with 0 means it's empty. Returns (puzzle, solution).
    """
    rng = get_rng(rng)
    solution = generate_solution(rng)
    puzzle = carve_puzzle(solution, holes_for_difficulty(difficulty), max_attempts, rng)
    return puzzle, solution


def check_win(current_grid: list[list[int]], solution_grid: list[list[int]]) -> bool:
    """
    Checks if the current grid matches the solution grid.
    Also ensures the grid is fully populated and valid according to Sudoku rules.
    """
    for i in range(SIDE):
        for j in range(SIDE):
            if current_grid[i][j] == 0 or current_grid[i][j] != solution_grid[i][j]:
                return False

    # Final check: the completed board has to be valid by itself
    board = copy_grid(current_grid)
    for r in range(SIDE):
        for c in range(SIDE):
            num = board[r][c]
            board[r][c] = 0
            if not fits(board, r, c, num):
                return False
            board[r][c] = num
    return True

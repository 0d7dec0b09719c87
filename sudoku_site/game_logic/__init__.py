from .board import (
    BASE,
    SIDE,
    as_grid,
    can_place,
    clear,
    copy_grid,
    count_holes,
    format_board,
    grid_from_string,
    grid_to_string,
    is_filled,
    is_valid_partial,
    new_grid,
    print_board_to_console,
)
from .difficulty import (
    Difficulty,
    difficulty_filename,
    difficulty_label,
    holes_for_difficulty,
    parse_difficulty,
    to_difficulty,
)
from .rng import get_rng, seed
from .solver import find_empty, is_solvable, solve, solve_sudoku
from .sudoku import carve_puzzle, check_win, generate_puzzle, generate_solution

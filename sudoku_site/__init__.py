"""Sudoku puzzle generator and static-site exporter."""
from .errors import (
    ExportError,
    InvalidArgumentError,
    SudokuError,
    SudokuInvariantError,
    UnsolvableError,
)
from .game_logic import (
    Difficulty,
    can_place,
    generate_puzzle,
    generate_solution,
    holes_for_difficulty,
    is_valid_partial,
    seed,
    solve,
)

__version__ = "0.1.0"

"""
Grid model: a 9x9 list of lists of ints, 0 for an empty cell and 1-9 for a digit.
"""
import numpy as np

from ..errors import InvalidArgumentError

BASE = 3
SIDE = BASE * BASE
CELLS = SIDE * SIDE
DIGITS = tuple(range(1, SIDE + 1))
HOLE_CHARS = "0."


def new_grid() -> list[list[int]]:
    """Returns an empty (all zero) grid."""
    return [[0] * SIDE for _ in range(SIDE)]


def clear(grid: list[list[int]]) -> None:
    """Sets all 81 cells to 0 in place."""
    for row in grid:
        for c in range(SIDE):
            row[c] = 0


def copy_grid(grid: list[list[int]]) -> list[list[int]]:
    # list(row) rather than row[:], which is a view for numpy rows
    return [list(row) for row in grid]


def _is_int(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def _is_list_grid(obj) -> bool:
    return (
        isinstance(obj, list)
        and len(obj) == SIDE
        and all(isinstance(row, list) and len(row) == SIDE for row in obj)
        and all(type(v) is int for row in obj for v in row)
    )


def as_grid(obj) -> list[list[int]]:
    """
    Validates that `obj` is a 9x9 table of integers and returns it as a grid.

    A list of lists of ints is returned as-is (same object, so in-place
    solving is visible to the caller). Anything else array-like, e.g. a
    numpy array or a list of tuples, is converted into a new grid.
    Cell values are not range-checked here; is_valid_partial() does that.
    """
    if obj is None:
        raise InvalidArgumentError("grid is required")
    if _is_list_grid(obj):
        return obj
    try:
        arr = np.asarray(obj)
    except (ValueError, TypeError) as e:
        raise InvalidArgumentError(f"grid is not a 9x9 table: {e}") from e
    if arr.shape != (SIDE, SIDE):
        raise InvalidArgumentError(f"grid must be {SIDE}x{SIDE}, got shape {arr.shape}")
    if arr.dtype == object:
        if not all(_is_int(v) for v in arr.flat):
            raise InvalidArgumentError("grid cells must be integers")
    elif not np.issubdtype(arr.dtype, np.integer):
        raise InvalidArgumentError(f"grid cells must be integers, got {arr.dtype}")
    return [[int(v) for v in row] for row in arr]


def is_in_range(value: int) -> bool:
    return 1 <= value <= SIDE


def can_place(grid: list[list[int]], row: int, col: int, value: int) -> bool:
    """
    Checks if `value` can go at (row, col) according to Sudoku rules
    (row, column and 3x3 box). The cell's own content counts too, so a
    filled cell must be vacated before it is tested.
    Malformed grids and non-integer or out-of-range arguments give False.
    """
    if not all(_is_int(v) for v in (row, col, value)):
        return False
    if not (0 <= row < SIDE and 0 <= col < SIDE):
        return False
    if not is_in_range(value):
        return False
    try:
        grid = as_grid(grid)
    except InvalidArgumentError:
        return False
    return fits(grid, row, col, value)


def fits(grid: list[list[int]], row: int, col: int, value: int) -> bool:
    """can_place() without argument checks, for callers holding a validated grid."""
    # Row and column
    for i in range(SIDE):
        if grid[row][i] == value or grid[i][col] == value:
            return False

    # 3x3 box
    start_row, start_col = BASE * (row // BASE), BASE * (col // BASE)
    for r in range(start_row, start_row + BASE):
        for c in range(start_col, start_col + BASE):
            if grid[r][c] == value:
                return False
    return True


def is_valid_partial(grid: list[list[int]]) -> bool:
    """
    True if no filled cell breaks a rule. Empty cells are ignored.
    Never modifies `grid`; a malformed grid gives False.
    """
    try:
        grid = as_grid(grid)
    except InvalidArgumentError:
        return False
    for r in range(SIDE):
        for c in range(SIDE):
            value = grid[r][c]
            if value == 0:
                continue
            if not is_in_range(value):
                return False
            # Vacate the cell on a temporary copy so it doesn't conflict with itself
            tmp = copy_grid(grid)
            tmp[r][c] = 0
            if not fits(tmp, r, c, value):
                return False
    return True


def count_holes(grid: list[list[int]]) -> int:
    return sum(row.count(0) for row in grid)


def is_filled(grid: list[list[int]]) -> bool:
    """True when every cell holds a digit 1-9 (says nothing about validity)."""
    return grid is not None and all(is_in_range(v) for row in grid for v in row)


def grid_to_string(grid: list[list[int]]) -> str:
    """Serializes a grid as 81 row-major digit characters (0 = empty)."""
    return "".join(str(v) for row in grid for v in row)


def grid_from_string(text: str) -> list[list[int]]:
    """Parses 81 row-major characters; '0' or '.' mark an empty cell, whitespace is ignored."""
    if text is None:
        raise InvalidArgumentError("puzzle string is required")
    chars = [ch for ch in text if not ch.isspace()]
    if len(chars) != CELLS:
        raise InvalidArgumentError(f"puzzle string must have {CELLS} cells, got {len(chars)}")
    values = []
    for ch in chars:
        if ch in HOLE_CHARS:
            values.append(0)
        elif ch.isdigit():
            values.append(int(ch))
        else:
            raise InvalidArgumentError(f"unexpected character {ch!r} in puzzle string")
    return [values[r * SIDE:(r + 1) * SIDE] for r in range(SIDE)]


def format_board(board: list[list[int]]) -> str:
    """Formats the board in a readable, boxed layout with '.' for empty cells."""
    horiz_line = "  " + "+-------" * BASE + "+"
    lines = []
    for r in range(SIDE):
        if r % BASE == 0:
            lines.append(horiz_line)
        row_str = ""
        for c in range(SIDE):
            if c % BASE == 0:
                row_str += "|| " if c == 0 else "| "
            num = board[r][c]
            row_str += str(num) if num != 0 else "."
            row_str += " "
        lines.append(row_str + "||")
    lines.append(horiz_line)
    return "\n".join(lines)


def print_board_to_console(board: list[list[int]]):
    """Prints the Sudoku board to the console in a readable format."""
    print(format_board(board))

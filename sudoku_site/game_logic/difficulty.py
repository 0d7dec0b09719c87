from enum import Enum


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


# Empty cells to aim for: more holes, fewer givens, harder puzzle
HOLES = {
    Difficulty.EASY: 35,
    Difficulty.MEDIUM: 45,
    Difficulty.HARD: 55,
}

LABELS = {
    Difficulty.EASY: "Easy",
    Difficulty.MEDIUM: "Medium",
    Difficulty.HARD: "Hard",
}

_ALIASES = {
    "1": Difficulty.EASY,
    "2": Difficulty.MEDIUM,
    "3": Difficulty.HARD,
}


def _lookup(difficulty):
    if isinstance(difficulty, Difficulty):
        return difficulty
    if isinstance(difficulty, str):
        try:
            return Difficulty(difficulty)
        except ValueError:
            return None
    return None


def to_difficulty(difficulty, fallback=Difficulty.MEDIUM) -> Difficulty:
    """Returns the matching Difficulty (enum member or its value), or `fallback`."""
    d = _lookup(difficulty)
    return fallback if d is None else d


def holes_for_difficulty(difficulty) -> int:
    """Target number of empty cells. Unknown values get the medium target."""
    return HOLES[to_difficulty(difficulty)]


def difficulty_label(difficulty) -> str:
    return LABELS[to_difficulty(difficulty)]


def difficulty_filename(difficulty) -> str:
    """Page file name for a difficulty, e.g. sudoku_easy.html."""
    return f"sudoku_{to_difficulty(difficulty).value}.html"


def parse_difficulty(text, fallback=Difficulty.MEDIUM) -> Difficulty:
    """
    Parses user input such as "1", "easy" or " HARD " (case-insensitive).
    Blank or unrecognised input returns `fallback`.
    """
    if not text:
        return fallback
    key = str(text).strip().lower()
    if key in _ALIASES:
        return _ALIASES[key]
    return to_difficulty(key, fallback)

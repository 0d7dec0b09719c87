"""Exceptions raised by the sudoku engine and the site exporter."""


class SudokuError(Exception):
    """Base class for every error raised by sudoku_site."""


class InvalidArgumentError(SudokuError, ValueError):
    """Malformed input: missing grid, wrong shape, bad coordinates or strings."""


class UnsolvableError(SudokuError):
    """The grid breaks a placement rule or has no valid completion."""


class SudokuInvariantError(SudokuError, RuntimeError):
    """The engine reached a state a correct solver never produces."""


class ExportError(SudokuError, OSError):
    """An HTML page or static asset could not be written."""

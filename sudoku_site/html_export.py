"""
HTML export of puzzles as static, self-contained pages.

Pages are rendered from the Jinja2 templates in ``sudoku_site/templates``:
a landing page (index.html) and one puzzle page per difficulty. Puzzle
pages carry 81 row-major ``.cell`` divs (``given`` or ``empty``) and,
when a full solution is supplied, a ``data-solution`` attribute that the
browser script uses to validate moves.
"""
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from jinja2 import Environment, PackageLoader, select_autoescape

from . import config
from .errors import ExportError, InvalidArgumentError
from .game_logic.board import as_grid, grid_to_string, is_filled
from .game_logic.difficulty import Difficulty, difficulty_filename, difficulty_label, to_difficulty

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Sudoku"

# Static for now, the page has no backend to keep scores
LEADERBOARD = [
    "Malunke", "Andrius", "Adomas", "Irmantas", "Arvydas",
    "Luna", "Gabija", "Augustas", "Kostas", "Justas",
]

_CSS_UNSAFE = re.compile(r"[^A-Za-z0-9#(),.% _-]")


@dataclass
class Theme:
    """Colour overrides and title for a page. Colours are CSS values, e.g. "#dabfae"."""

    panel_bg: Optional[str] = None
    cell_hover_bg: Optional[str] = None
    page_title: Optional[str] = None


def default_theme() -> Theme:
    return Theme(panel_bg=config.PANEL_BG, cell_hover_bg=config.CELL_HOVER_BG, page_title=config.SITE_TITLE)


def css_value(text) -> str:
    """Drops every character that could break out of an inline CSS value."""
    return _CSS_UNSAFE.sub("", text or "")


def difficulty_links() -> list[dict]:
    """Link data for the difficulty menu, easiest first."""
    return [
        {"value": d.value, "label": difficulty_label(d), "href": difficulty_filename(d)}
        for d in Difficulty
    ]


def _build_environment() -> Environment:
    env = Environment(
        loader=PackageLoader("sudoku_site", "templates"),
        autoescape=select_autoescape(["html"]),
    )
    env.filters["css_value"] = css_value
    return env


_env = None


def get_environment() -> Environment:
    global _env
    if _env is None:
        _env = _build_environment()
    return _env


def puzzle_page_context(
    puzzle,
    solution=None,
    theme: Theme = None,
    difficulty=Difficulty.MEDIUM,
    css_href: str = None,
    script_src: str = None,
) -> dict:
    """Template variables for puzzle.html. Also used by the preview server."""
    board = as_grid(puzzle)
    solution_attr = None
    if solution is not None:
        solution_board = as_grid(solution)
        if is_filled(solution_board):
            solution_attr = grid_to_string(solution_board)
    return {
        "title": (theme.page_title if theme and theme.page_title else DEFAULT_TITLE),
        "css_href": css_href or config.CSS_HREF,
        "script_src": script_src or config.SCRIPT_SRC,
        "theme": theme,
        "cells": [v for row in board for v in row],
        "solution": solution_attr,
        "difficulties": difficulty_links(),
        "active": to_difficulty(difficulty).value,
        "leaderboard": LEADERBOARD,
    }


def index_page_context(title: str = None, active=Difficulty.MEDIUM, css_href: str = None) -> dict:
    return {
        "title": title or DEFAULT_TITLE,
        "css_href": css_href or config.CSS_HREF,
        "difficulties": difficulty_links(),
        "active": to_difficulty(active).value,
    }


def render_puzzle_page(puzzle, solution=None, theme: Theme = None, difficulty=Difficulty.MEDIUM,
                       css_href: str = None, script_src: str = None) -> str:
    """Renders the playable page for `puzzle`; empty cells (0) become blank divs."""
    if puzzle is None:
        raise InvalidArgumentError("puzzle is required")
    context = puzzle_page_context(puzzle, solution, theme, difficulty, css_href, script_src)
    return get_environment().get_template("puzzle.html").render(**context)


def render_index_page(title: str = None, active=Difficulty.MEDIUM, css_href: str = None) -> str:
    return get_environment().get_template("index.html").render(**index_page_context(title, active, css_href))


def _write(path, html: str) -> Path:
    if not path:
        raise InvalidArgumentError("output path is required")
    path = Path(path)
    try:
        path.write_text(html, encoding="utf-8")
    except OSError as e:
        raise ExportError(f"Could not write {path}: {e}") from e
    logger.info(f"Wrote {path}")
    return path


def write_puzzle_page(path, puzzle, solution=None, theme: Theme = None, difficulty=Difficulty.MEDIUM,
                      css_href: str = None, script_src: str = None) -> Path:
    """
    Writes a puzzle page to `path`.

    Without a solution the page is still playable, but the browser cannot
    tell the player about mistakes.
    """
    html = render_puzzle_page(puzzle, solution, theme, difficulty, css_href, script_src)
    return _write(path, html)


def write_index_page(path, title: str = None, active=Difficulty.MEDIUM, css_href: str = None) -> Path:
    return _write(path, render_index_page(title, active, css_href))

"""
Builds the static mini site: index.html plus one page per difficulty,
all linking to each other, and the stylesheet they share.
"""
import logging
import shutil
from pathlib import Path

import numpy as np

from . import config
from .errors import ExportError
from .game_logic.difficulty import Difficulty, difficulty_filename, difficulty_label
from .game_logic.rng import get_rng
from .game_logic.sudoku import generate_puzzle
from .html_export import Theme, default_theme, write_index_page, write_puzzle_page

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"
INDEX_FILENAME = "index.html"


def copy_static_assets(output_dir, overwrite: bool = False) -> list[Path]:
    """Copies the packaged stylesheet into `output_dir`, keeping existing files unless `overwrite`."""
    output_dir = Path(output_dir)
    copied = []
    for asset in sorted(STATIC_DIR.iterdir()):
        if not asset.is_file():
            continue
        target = output_dir / asset.name
        if target.exists() and not overwrite:
            logger.debug(f"Keeping existing {target}")
            continue
        try:
            shutil.copyfile(asset, target)
        except OSError as e:
            raise ExportError(f"Could not copy {asset.name} to {output_dir}: {e}") from e
        logger.info(f"Copied {target}")
        copied.append(target)
    return copied


def build_difficulty_page(
    output_dir,
    difficulty: Difficulty,
    title: str = None,
    theme: Theme = None,
    css_href: str = None,
    max_attempts: int = None,
    rng: np.random.Generator = None,
) -> Path:
    """Generates a puzzle for `difficulty` and writes its page, e.g. sudoku_hard.html."""
    puzzle, solution = generate_puzzle(difficulty, max_attempts=max_attempts, rng=rng)

    base = theme or default_theme()
    page_theme = Theme(
        panel_bg=base.panel_bg,
        cell_hover_bg=base.cell_hover_bg,
        page_title=f"{title or base.page_title or config.SITE_TITLE} ({difficulty_label(difficulty)})",
    )
    return write_puzzle_page(
        Path(output_dir) / difficulty_filename(difficulty),
        puzzle,
        solution,
        theme=page_theme,
        difficulty=difficulty,
        css_href=css_href,
    )


def build_site(
    output_dir=None,
    title: str = None,
    theme: Theme = None,
    css_href: str = None,
    active: Difficulty = Difficulty.MEDIUM,
    max_attempts: int = None,
    rng: np.random.Generator = None,
    copy_assets: bool = True,
) -> list[Path]:
    """
    Writes index.html and the easy/medium/hard pages into `output_dir`.

    `active` is the difficulty highlighted on the index page. The index is
    always (re)written so the difficulty links work. Returns the paths of
    the written pages.
    """
    output_dir = Path(output_dir or config.OUTPUT_DIR)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ExportError(f"Could not create {output_dir}: {e}") from e

    rng = get_rng(rng)
    title = title or config.SITE_TITLE

    written = [write_index_page(output_dir / INDEX_FILENAME, title, active, css_href)]
    for difficulty in Difficulty:
        written.append(build_difficulty_page(output_dir, difficulty, title, theme, css_href, max_attempts, rng))

    if copy_assets:
        copy_static_assets(output_dir)
    logger.info(f"Built {len(written)} pages in {output_dir}")
    return written

import logging
import os

logger = logging.getLogger(__name__)


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not an integer, using {default}")
        return default


# Engine
DEFAULT_DIFFICULTY = os.environ.get('SUDOKU_DEFAULT_DIFFICULTY', 'medium').lower()
DEFAULT_SEED = _int_from_env('SUDOKU_SEED', 0)
MAX_CARVE_ATTEMPTS = _int_from_env('SUDOKU_MAX_CARVE_ATTEMPTS', 2000)

# Generated site
SITE_TITLE = os.environ.get('SUDOKU_SITE_TITLE', 'Sudoku')
CSS_HREF = os.environ.get('SUDOKU_CSS_HREF', 'style.css')
SCRIPT_SRC = os.environ.get('SUDOKU_SCRIPT_SRC', 'sudoku.js')
PANEL_BG = os.environ.get('SUDOKU_PANEL_BG', '#dabfae')
CELL_HOVER_BG = os.environ.get('SUDOKU_CELL_HOVER_BG', 'wheat')
OUTPUT_DIR = os.environ.get('SUDOKU_OUTPUT_DIR', '.')

# Preview server
# IMPORTANT: the fallback key is for local development ONLY.
FLASK_SECRET_KEY = os.environ.get('FLASK_SECRET_KEY', 'dev_secret_key_123!@#')

LOG_LEVEL = os.environ.get('SUDOKU_LOG_LEVEL', 'INFO').upper()

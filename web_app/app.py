import logging
import os

from flask import Flask, abort, jsonify, request, session, render_template
from whitenoise import WhiteNoise

import sudoku_site
from sudoku_site import config
from sudoku_site.errors import InvalidArgumentError, UnsolvableError
from sudoku_site.game_logic import (
    Difficulty,
    as_grid,
    check_win,
    count_holes,
    difficulty_label,
    generate_puzzle,
    grid_to_string,
    is_filled,
    parse_difficulty,
    solve,
    to_difficulty,
)
from sudoku_site.html_export import css_value, default_theme, index_page_context, puzzle_page_context

logger = logging.getLogger(__name__)

PACKAGE_DIR = os.path.dirname(os.path.abspath(sudoku_site.__file__))
TEMPLATE_DIR = os.path.join(PACKAGE_DIR, 'templates')
STATIC_DIR = os.path.join(PACKAGE_DIR, 'static')

# Pages are rendered from the same templates the static exporter uses
app = Flask(__name__, template_folder=TEMPLATE_DIR, static_folder=None)
app.secret_key = config.FLASK_SECRET_KEY
app.add_template_filter(css_value)

# WhiteNoise serves the stylesheet under /static/, like the published site serves it next to the pages
app.wsgi_app = WhiteNoise(app.wsgi_app)
app.wsgi_app.add_files(STATIC_DIR, prefix='static/')


# --- Helper Functions ---
def get_user_game():
    """Retrieves game state from session."""
    return {
        'puzzle_board': session.get('puzzle_board'),
        'solution_board': session.get('solution_board'),
        'difficulty': session.get('difficulty'),
    }


def set_user_game(puzzle, solution, difficulty):
    """Saves game state to session."""
    session['puzzle_board'] = puzzle
    session['solution_board'] = solution
    session['difficulty'] = difficulty
    session['game_active'] = True


def default_difficulty() -> Difficulty:
    return parse_difficulty(config.DEFAULT_DIFFICULTY)


def static_css_href() -> str:
    return '/static/style.css'


# --- Pages ---

@app.route('/')
def index():
    context = index_page_context(config.SITE_TITLE, default_difficulty(), static_css_href())
    return render_template('index.html', **context)


@app.route('/sudoku_<name>.html')
def puzzle_page(name):
    difficulty = to_difficulty(name, fallback=None)
    if difficulty is None:
        abort(404)

    puzzle, solution = generate_puzzle(difficulty)
    set_user_game(puzzle, solution, difficulty.value)

    theme = default_theme()
    theme.page_title = f"{config.SITE_TITLE} ({difficulty_label(difficulty)})"
    context = puzzle_page_context(puzzle, solution, theme, difficulty, static_css_href())
    return render_template('puzzle.html', **context)


# --- API Routes ---

@app.route('/api/new_game', methods=['POST'])
def new_game_api():
    data = request.get_json(silent=True) or {}
    difficulty = parse_difficulty(data.get('difficulty'), default_difficulty())

    try:
        puzzle, solution = generate_puzzle(difficulty)
    except Exception as e:
        logger.error(f"Error generating puzzle for difficulty {difficulty.value}: {e}", exc_info=True)
        return jsonify({'error': 'Could not start new game. ' + str(e)}), 500

    set_user_game(puzzle, solution, difficulty.value)
    return jsonify({
        'message': f'New game started with difficulty: {difficulty.value}',
        'puzzle_board': puzzle,
        'solution': grid_to_string(solution),
        'holes': count_holes(puzzle),
        'difficulty': difficulty.value,
    }), 200


@app.route('/api/solve', methods=['POST'])
def solve_api():
    data = request.get_json(silent=True) or {}
    try:
        board = solve(data.get('board'))
    except InvalidArgumentError as e:
        return jsonify({'error': f'Invalid board: {e}'}), 400
    except UnsolvableError as e:
        return jsonify({'error': str(e)}), 422
    return jsonify({'board': board, 'solution': grid_to_string(board)}), 200


@app.route('/api/check', methods=['POST'])
def check_game_api():
    if not session.get('game_active'):
        return jsonify({'error': 'No active game.'}), 400

    solution_board = get_user_game().get('solution_board')
    if solution_board is None:
        return jsonify({'error': 'Game state not found in session.'}), 500

    data = request.get_json(silent=True) or {}
    try:
        current_board = as_grid(data.get('board'))
    except InvalidArgumentError as e:
        return jsonify({'error': f'Invalid board: {e}'}), 400

    is_correct = check_win(current_board, solution_board)
    return jsonify({
        'is_solved': is_correct,
        'is_filled': is_filled(current_board),
        'message': 'Congratulations, the puzzle is solved!' if is_correct
        else 'The board is not a correct solution (yet).',
    }), 200


if __name__ == '__main__':
    app.run(debug=True, port=5001)

"""Flask API application."""

import logging
import threading
from typing import Optional

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from lifecounter.config import (
    DEFAULT_API_HOST,
    DEFAULT_API_PORT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PLAYER_COUNT,
    DEFAULT_QUICK_ADJUST_AMOUNTS,
    MAX_LIFE,
    MAX_PLAYERS,
    MIN_LIFE,
    MIN_PLAYERS,
    STARTING_LIFE,
)
from ..engine.errors import InvalidArgumentError, PlayerIndexError
from ..engine.game import Game
from ..parsing.amount_parser import AmountParser


logging.basicConfig(level=DEFAULT_LOG_LEVEL, format='[%(name)-19s - %(levelname)5s] %(message)s')

app = Flask("flask.lifecounter")


@app.before_request
def log_request_info():
    app.logger.info('Access to: %s from %s (%s)',
        request.url,
        request.headers.get('X-Forwarded-For', request.remote_addr),
        request.headers.get('User-Agent'))


# Error handlers for API routes
@app.errorhandler(HTTPException)
def handle_http_exception(e: HTTPException):
    """Return JSON instead of HTML for HTTP errors in API routes."""
    if request.path.startswith("/api/"):
        response = e.get_response()
        response.data = jsonify(
            {
                "error": e.name,
                "code": e.code,
                "description": e.description,
            }
        ).data
        response.content_type = "application/json"
        return response
    return e


@app.errorhandler(500)
def handle_internal_error(e: Exception):
    """Handle 500 errors."""
    if request.path.startswith("/api/"):
        app.logger.error(f"Internal server error: {e}", exc_info=True)
        return jsonify({"error": "Internal Server Error", "message": "An unexpected error occurred"}), 500
    return "Internal Server Error", 500


# Global game storage: game_id -> Game
_games: dict[str, Game] = {}
# Single writer: every request touching a Game holds this lock
_games_lock = threading.Lock()
_amount_parser = AmountParser()


def _get_game(game_id: Optional[str] = None) -> Optional[Game]:
    """Get game by game_id, or return None if not found."""
    if game_id is None:
        return None
    return _games.get(game_id)


def _serialize_game(game: Game) -> dict:
    """Serialize game snapshot for API response."""
    return game.snapshot().model_dump(mode="json")


def _apply_life_change(game: Game, index: int, data: dict):
    """Apply an 'amount' or 'custom_amount' request body to a player."""
    if "amount" in data:
        amount = data["amount"]
        if isinstance(amount, bool) or not isinstance(amount, int):
            return jsonify({"error": "amount must be an integer"}), 400
    elif "custom_amount" in data:
        is_valid, reason = _amount_parser.is_valid(data["custom_amount"])
        if not is_valid:
            # Unusable custom text is ignored, not an error
            app.logger.info(f"Ignored custom amount for player {index} in game {game.game_id}: {reason}")
            return jsonify({"success": True, "adjusted": False, "reason": reason, "state": _serialize_game(game)})
        amount = _amount_parser.parse(data["custom_amount"])
    else:
        return jsonify({"error": "amount or custom_amount is required"}), 400

    try:
        game.adjust_player_life(index, amount)
    except PlayerIndexError as e:
        return jsonify({"error": "Player not found", "message": str(e)}), 404

    return jsonify({"success": True, "adjusted": amount != 0, "state": _serialize_game(game)})


@app.route("/api/games", methods=["GET"])
def list_games():
    """List all games."""
    with _games_lock:
        games = [
            {"game_id": game_id, "player_count": len(game.players), "status": game.check_game_status()}
            for game_id, game in _games.items()
        ]
    return jsonify({"games": games})


@app.route("/api/games", methods=["POST"])
def create_game():
    """Create a new game."""
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400
    player_count = data.get("player_count", DEFAULT_PLAYER_COUNT)
    if isinstance(player_count, bool):
        return jsonify({"error": "Invalid player count", "message": "player_count must be an integer"}), 400

    try:
        game = Game.create(player_count)
    except InvalidArgumentError as e:
        return jsonify({"error": "Invalid player count", "message": str(e)}), 400

    with _games_lock:
        _games[game.game_id] = game
        state = _serialize_game(game)
    return jsonify({"success": True, "game_id": game.game_id, "state": state}), 201


@app.route("/api/games/<game_id>", methods=["DELETE"])
def delete_game(game_id: str):
    """Delete a game."""
    with _games_lock:
        if game_id not in _games:
            return jsonify({"error": "Game not found"}), 404
        del _games[game_id]
    app.logger.info(f"Removed game {game_id} from memory")
    return jsonify({"success": True, "message": f"Game {game_id} has been deleted"})


@app.route("/api/games/<game_id>/state", methods=["GET"])
def get_state(game_id: str):
    """Get current game state."""
    with _games_lock:
        game = _get_game(game_id)
        if not game:
            return jsonify({"error": "Game not found"}), 404
        return jsonify({"state": _serialize_game(game)})


@app.route("/api/games/<game_id>/players", methods=["POST"])
def add_player(game_id: str):
    """Add the next player. A refused add is a normal outcome, not an error."""
    with _games_lock:
        game = _get_game(game_id)
        if not game:
            return jsonify({"error": "Game not found"}), 404
        added = game.add_player()
        return jsonify({"success": added, "state": _serialize_game(game)})


@app.route("/api/games/<game_id>/players/<int:index>/life", methods=["POST"])
def adjust_life(game_id: str, index: int):
    """Adjust a player's life by roster position."""
    if not request.is_json:
        return jsonify({"error": "Content-Type must be application/json"}), 400

    data = request.get_json()
    if not data:
        return jsonify({"error": "No data provided"}), 400
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400

    with _games_lock:
        game = _get_game(game_id)
        if not game:
            return jsonify({"error": "Game not found"}), 404
        return _apply_life_change(game, index, data)


@app.route("/api/games/<game_id>/players/by-id/<player_id>/life", methods=["POST"])
def adjust_life_by_id(game_id: str, player_id: str):
    """Adjust a player's life by stable player id."""
    if not request.is_json:
        return jsonify({"error": "Content-Type must be application/json"}), 400

    data = request.get_json()
    if not data:
        return jsonify({"error": "No data provided"}), 400
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400

    with _games_lock:
        game = _get_game(game_id)
        if not game:
            return jsonify({"error": "Game not found"}), 404
        try:
            index = game.player_index(player_id)
        except PlayerIndexError as e:
            return jsonify({"error": "Player not found", "message": str(e)}), 404
        return _apply_life_change(game, index, data)


@app.route("/api/games/<game_id>/history", methods=["GET"])
def list_history(game_id: str):
    """List life changes, oldest first."""
    with _games_lock:
        game = _get_game(game_id)
        if not game:
            return jsonify({"error": "Game not found"}), 404
        entries = game.history.list_entries()

    return jsonify(
        {
            "history": [
                {
                    "sequence_number": entry.sequence_number,
                    "player_id": entry.player_id,
                    "player_name": entry.player_name,
                    "life_change": entry.life_change,
                    "label": entry.label,
                    "timestamp": entry.timestamp.isoformat(),
                }
                for entry in entries
            ]
        }
    )


@app.route("/api/config/rules", methods=["GET"])
def get_rules():
    """Get game rule constants for building the UI."""
    return jsonify(
        {
            "rules": {
                "starting_life": STARTING_LIFE,
                "min_life": MIN_LIFE,
                "max_life": MAX_LIFE,
                "min_players": MIN_PLAYERS,
                "max_players": MAX_PLAYERS,
                "default_player_count": DEFAULT_PLAYER_COUNT,
                "quick_adjust_amounts": DEFAULT_QUICK_ADJUST_AMOUNTS,
            }
        }
    )


if __name__ == "__main__":
    app.run(host=DEFAULT_API_HOST, port=DEFAULT_API_PORT)

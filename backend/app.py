import random
import logging
from typing import Optional

from flask import Flask, jsonify, request
from flask_cors import CORS

from config import Settings, load_settings
from domain.errors import GameStateError
from domain.game_state import GameState
from move_selector import MoveSelector, build_move_selector
import handlers


logger = logging.getLogger(__name__)

SERVER_HEADER = "battlesnake/corny-snake"


def _parse_game_state() -> GameState:
    payload = request.get_json(silent=True)
    if payload is None:
        raise GameStateError("Request body must be JSON")
    return GameState.from_dict(payload)


def create_app(settings: Optional[Settings] = None, selector: Optional[MoveSelector] = None) -> Flask:
    """
    Build the Flask app serving the Battlesnake callbacks.

    Args:
        settings: defaults to load_settings()
        selector: defaults to the standard chain, seeded from settings.seed
    """
    settings = settings or load_settings()
    if selector is None:
        rng = random.Random(settings.seed) if settings.seed is not None else None
        selector = build_move_selector(rng)

    app = Flask(__name__)
    app.config["SNAKE_SETTINGS"] = settings
    app.config["MOVE_SELECTOR"] = selector

    # Board viewers run in the browser, the game engine does not care
    CORS(app, resources={r"/*": {"origins": list(settings.cors_allowed_origins)}})

    @app.errorhandler(GameStateError)
    def on_bad_game_state(error):
        logger.error(f"Rejected {request.method} {request.path}: {error}")
        return jsonify({"error": str(error)}), 400

    @app.route("/", methods=["GET"])
    def on_info():
        return jsonify(handlers.get_info(settings))

    @app.route("/start", methods=["POST"])
    def on_start():
        handlers.start(_parse_game_state())
        return "ok"

    @app.route("/move", methods=["POST"])
    def on_move():
        game_state = _parse_game_state()
        response = {"move": handlers.get_move(game_state, selector)}
        if settings.shout:
            response["shout"] = settings.shout
        return jsonify(response)

    @app.route("/end", methods=["POST"])
    def on_end():
        handlers.end(_parse_game_state())
        return "ok"

    @app.after_request
    def identify_server(response):
        response.headers.set("server", SERVER_HEADER)
        return response

    return app


settings = load_settings()
logging.basicConfig(level=settings.log_level)
logging.getLogger("werkzeug").setLevel(logging.WARNING)

app = create_app(settings)


if __name__ == "__main__":
    app.run(host=settings.host, port=settings.port, debug=settings.debug)

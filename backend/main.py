import argparse
import json
import logging
import random
import sys
from dataclasses import replace
from typing import List, Optional

from config import load_settings
from domain.errors import GameStateError
from domain.game_state import GameState
from move_selector import build_move_selector
from players import safe_moves


logger = logging.getLogger(__name__)


def decide_from_file(path: str, seed: Optional[int] = None, verbose: bool = False) -> str:
    """
    Run one decision against a saved /move request body.

    Args:
        path: JSON file holding a Battlesnake move request
        seed: seed for the selector's random source
        verbose: also print the board and the safe directions

    Returns:
        The chosen move token.

    Raises:
        OSError: If the file cannot be read.
        GameStateError: If the file is not a valid move request.
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            payload = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise GameStateError(f"{path} is not valid UTF-8 JSON: {e}")

    game_state = GameState.from_dict(payload)
    rng = random.Random(seed) if seed is not None else None
    selector = build_move_selector(rng)

    if verbose:
        print(game_state.board.render(game_state.you))
        print(f"Safe moves: {[d.value for d in safe_moves(game_state)]}")

    return selector.choose(game_state).value


# -------------------------------
# Entry Point
# -------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings()

    parser = argparse.ArgumentParser(
        description="Run the Corny Battlesnake server, or decide a single turn from a saved request."
    )
    parser.add_argument("--host", type=str, default=settings.host,
                        help="Interface to bind the server to")
    parser.add_argument("--port", type=int, default=settings.port,
                        help="Port to serve on")
    parser.add_argument("--debug", action="store_true", default=settings.debug,
                        help="Run Flask in debug mode")
    parser.add_argument("--state", type=str, required=False,
                        help="Path to a /move request body (JSON); prints the chosen move and exits")
    parser.add_argument("--seed", type=int, default=settings.seed,
                        help="Seed for the random move choice")
    parser.add_argument("--verbose", action="store_true",
                        help="With --state, also print the board and the safe moves")

    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level)

    if args.state:
        try:
            move = decide_from_file(args.state, seed=args.seed, verbose=args.verbose)
        except (OSError, GameStateError) as e:
            logger.error(f"Could not decide a move from {args.state}: {e}")
            return 1
        print(move)
        return 0

    from app import create_app

    app = create_app(replace(settings, host=args.host, port=args.port, debug=args.debug, seed=args.seed))
    logging.getLogger("werkzeug").setLevel(logging.WARNING)

    print(f"\nBattlesnake active at http://{args.host}:{args.port}")
    app.run(host=args.host, port=args.port, debug=args.debug)
    return 0


if __name__ == "__main__":
    sys.exit(main())

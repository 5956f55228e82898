"""CLI entry point: python -m scrabblecore [config.yaml]"""

import argparse
import logging
import sys
from pathlib import Path

from scrabblecore.config import AppConfig, ConfigError, load_config
from scrabblecore.console import run_console
from scrabblecore.game.dictionary import Dictionary
from scrabblecore.game.engine import GameMode, ScrabbleGame


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="scrabblecore",
        description="Two-player Scrabble in the terminal",
    )
    parser.add_argument(
        "config",
        type=Path,
        nargs="?",
        default=None,
        help="Path to engine YAML config file (default: built-in settings)",
    )
    parser.add_argument(
        "-d", "--dictionary",
        type=Path,
        default=None,
        help="Word list, one word per line (overrides the config)",
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in GameMode],
        default=GameMode.HUMAN_VS_HUMAN.value,
    )
    parser.add_argument("--names", nargs=2, default=["Player 1", "Player 2"])
    args = parser.parse_args()

    if args.config is not None:
        try:
            config = load_config(args.config)
        except ConfigError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        config = AppConfig()

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    dict_path = args.dictionary or config.dictionary.path
    dictionary = Dictionary(suggestion_limit=config.dictionary.suggestion_limit)
    if dict_path is not None:
        dictionary.load(dict_path)
    else:
        logging.getLogger(__name__).warning(
            "No dictionary given; every word will be rejected"
        )

    game = ScrabbleGame(dictionary, config.engine, log_dir=config.log_dir)
    game.start_new_game(GameMode(args.mode), *args.names)
    run_console(game)


if __name__ == "__main__":
    main()

"""
Main script to play Reversi in the terminal.
"""
import os
import sys
import argparse
from pathlib import Path

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute()))

from src.config import Config, get_default_config
from src.game import ReversiGame
from src.logger import setup_logger
from src.terminal import RawConsole, ReversiController, ReversiView, run_session

def load_config(path):
    """Load the config file, or fall back to defaults when it does not exist."""
    if path and os.path.exists(path):
        print(f"Loading configuration from {path}")
        return Config.load(path)
    if path:
        print(f"Config file {path} not found, using default configuration")
    return get_default_config()

def main():
    """Wire the game, view and controller together and run the session."""
    parser = argparse.ArgumentParser(description='Play Reversi in the terminal')
    parser.add_argument('--config', type=str, default=None,
                      help='Path to config file')
    parser.add_argument('--log-dir', type=str, default=None,
                      help='Directory for log files (overrides config)')
    parser.add_argument('--create-config', type=str, default=None, metavar='PATH',
                      help='Write the default configuration to PATH and exit')
    args = parser.parse_args()

    if args.create_config:
        get_default_config().save(args.create_config)
        print(f"Created default configuration file: {args.create_config}")
        return

    config = load_config(args.config)
    if args.log_dir:
        config.logging.log_dir = args.log_dir

    game_logger = setup_logger(config)
    try:
        with RawConsole() as console:
            game = ReversiGame()
            view = ReversiView(config.display)
            controller = ReversiController(game, view, sys.stdout, game_logger)
            try:
                run_session(controller, console)
            except KeyboardInterrupt:
                sys.stdout.write(view.park() + '\n')
    finally:
        game_logger.close()

if __name__ == "__main__":
    main()

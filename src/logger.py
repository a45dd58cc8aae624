"""
Logging utilities for terminal Reversi.
"""
import os
import sys
import json
import logging
from datetime import datetime
from typing import Optional

from .config import Config
from .game import GameState, MoveResult

class Logger:
    """Logger for game sessions."""

    def __init__(self, config: Config, log_dir: Optional[str] = None):
        """
        Initialize the logger.

        Args:
            config: Configuration object
            log_dir: Directory to save logs (default: config.logging.log_dir)
        """
        self.config = config
        self.log_dir = log_dir or config.logging.log_dir
        self.run_name = f"{config.project_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        self.run_dir = os.path.join(self.log_dir, self.run_name)
        self.handlers = []

        level = getattr(logging, config.logging.log_level.upper(), logging.INFO)
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

        # Console goes to stderr so it never mixes with the board frames on stdout
        if config.logging.log_to_console:
            console = logging.StreamHandler(sys.stderr)
            console.setLevel(level)
            console.setFormatter(formatter)
            self.handlers.append(console)

        if config.logging.log_to_file:
            os.makedirs(self.run_dir, exist_ok=True)
            log_file = os.path.join(self.run_dir, 'game.log')
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.handlers.append(file_handler)
            self.save_config()

        # Configure root logger
        self.logger = logging.getLogger()
        self.logger.setLevel(level)
        for handler in self.handlers:
            self.logger.addHandler(handler)

    def save_config(self):
        """Save the configuration to a JSON file."""
        config_path = os.path.join(self.run_dir, 'config.json')
        with open(config_path, 'w', encoding='utf-8') as f:
            json.dump(self.config.to_dict(), f, indent=2, ensure_ascii=False)

    def log_move(self, step: int, result: MoveResult, state: GameState):
        """
        Log a successful placement.

        Args:
            step: Number of placements made so far
            result: Outcome returned by the game
            state: Snapshot taken after the placement
        """
        black, white = state.score()
        p = result.position
        self.logger.info(
            f"Move {step}: {result.stone.label} at ({p.x}, {p.y}) "
            f"flipped={len(result.flipped)} black={black} white={white}"
        )

    def close(self):
        """Detach and close the handlers added by this logger."""
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers = []


def setup_logger(config: Config) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object

    Returns:
        Logger instance
    """
    return Logger(config)

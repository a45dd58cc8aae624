"""
Configuration parameters for terminal Reversi.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any
import json

@dataclass
class DisplayConfig:
    """Configuration for the board view. Every glyph is 3 columns wide."""
    empty_glyph: str = "   "
    black_glyph: str = " ● "
    white_glyph: str = " ○ "
    cursor_glyph: str = " ☆ "
    show_score: bool = False  # Append stone counts to the turn line

@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_to_file: bool = True
    log_to_console: bool = False  # Console output draws over the board

@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Reversi"
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'Reversi'),
            display=DisplayConfig(**config_dict.get('display', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r', encoding='utf-8') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)

def get_default_config() -> Config:
    """Get default configuration."""
    return Config()

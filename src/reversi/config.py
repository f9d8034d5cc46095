"""
Configuration parameters for the Reversi engine and its AI.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any
import json


@dataclass
class BoardConfig:
    """Configuration for the game board."""
    board_size: int = 8


@dataclass
class AIConfig:
    """Configuration for the computer opponent."""
    difficulty: str = "medium"  # easy, medium, hard or expert
    player: int = 1  # Board.BLACK
    search_depth: int = 3  # Plies searched by the expert tier
    move_timeout: float = 5.0  # Seconds before an AI move is abandoned
    auto_respond: bool = True  # Let the AI answer right after a human move


@dataclass
class ArenaConfig:
    """Configuration for AI tournaments."""
    rounds: int = 2
    k: float = 32.0
    initial_rating: float = 1500.0
    show_progress: bool = True


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_to_file: bool = False


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Reversi"
    seed: int = 42
    board: BoardConfig = field(default_factory=BoardConfig)
    ai: AIConfig = field(default_factory=AIConfig)
    arena: ArenaConfig = field(default_factory=ArenaConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'Reversi'),
            seed=config_dict.get('seed', 42),
            board=BoardConfig(**config_dict.get('board', {})),
            ai=AIConfig(**config_dict.get('ai', {})),
            arena=ArenaConfig(**config_dict.get('arena', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()

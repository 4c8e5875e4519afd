"""
Configuration parameters for flip.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any
import json


@dataclass
class GameConfig:
    """Configuration for starting games."""
    min_board_size: int = 4


@dataclass
class SaveConfig:
    """Configuration for the save file format."""
    magic_tag: str = "flip"  # must match existing save files


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "WARNING"
    log_to_file: bool = False
    log_file: str = "flip.log"


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "flip"
    game: GameConfig = field(default_factory=GameConfig)
    persistence: SaveConfig = field(default_factory=SaveConfig)
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
            project_name=config_dict.get('project_name', 'flip'),
            game=GameConfig(**config_dict.get('game', {})),
            persistence=SaveConfig(**config_dict.get('persistence', {})),
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

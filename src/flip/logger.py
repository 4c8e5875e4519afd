"""
Logging utilities for flip.
"""
import os
import logging
import sys
from typing import Optional

from .config import Config


class Logger:
    """Sets up console and file logging for the flip package."""

    def __init__(self, config: Config, log_dir: Optional[str] = None):
        """
        Initialize the logger.

        Args:
            config: Configuration object
            log_dir: Directory for the log file (default: config.logging.log_dir)
        """
        self.config = config
        self.log_dir = log_dir or config.logging.log_dir
        level = getattr(logging, config.logging.log_level.upper(), logging.WARNING)
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

        # Console logging goes to stderr; stdout belongs to the game
        self.console = logging.StreamHandler(sys.stderr)
        self.console.setLevel(level)
        self.console.setFormatter(formatter)

        self.logger = logging.getLogger('flip')
        self.logger.setLevel(level)
        self.logger.addHandler(self.console)
        self.handlers = [self.console]

        self.log_file = None
        if config.logging.log_to_file:
            os.makedirs(self.log_dir, exist_ok=True)
            self.log_file = os.path.join(self.log_dir, config.logging.log_file)
            file_handler = logging.FileHandler(self.log_file)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)
            self.handlers.append(file_handler)

    def close(self):
        """Remove handlers to prevent duplicate logging."""
        while self.handlers:
            handler = self.handlers.pop()
            self.logger.removeHandler(handler)
            handler.close()

    def __del__(self):
        """Ensure resources are properly released."""
        self.close()


def setup_logger(config: Config) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object

    Returns:
        Logger instance
    """
    return Logger(config)

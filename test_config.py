"""
Test script for configuration and logging setup.
"""
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from flip.config import Config, get_default_config
from flip.logger import setup_logger


def test_config_creation(tmp_path):
    """Test creating, saving and loading a config."""
    config = get_default_config()
    assert config.project_name == "flip"
    assert config.game.min_board_size == 4
    assert config.persistence.magic_tag == "flip"

    test_path = tmp_path / "nested" / "test_config.json"
    config.save(str(test_path))

    loaded_config = Config.load(str(test_path))
    assert config.to_dict() == loaded_config.to_dict(), "Loaded config should match original"


def test_partial_config_uses_defaults():
    config = Config.from_dict({'logging': {'log_level': 'DEBUG'}})
    assert config.logging.log_level == "DEBUG"
    assert config.logging.log_to_file is False
    assert config.game.min_board_size == 4


def test_logger_writes_file(tmp_path):
    config = get_default_config()
    config.logging.log_to_file = True
    config.logging.log_level = "INFO"
    config.logging.log_dir = str(tmp_path / "logs")

    log = setup_logger(config)
    logging.getLogger("flip.test").info("hello from the test")
    log.close()

    assert log.handlers == []
    assert "hello from the test" in Path(log.log_file).read_text()


def test_logger_close_removes_only_its_handlers():
    config = get_default_config()
    first = setup_logger(config)
    second = setup_logger(config)

    first.close()

    flip_logger = logging.getLogger("flip")
    assert second.console in flip_logger.handlers
    assert first.console not in flip_logger.handlers
    second.close()


if __name__ == "__main__":
    import pytest
    pytest.main([__file__])

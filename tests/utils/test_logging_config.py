"""logging_config 모듈 단위 테스트."""

import logging
import os

import pytest

from french_tutor.utils.logging_config import configure_logging, get_log_file


@pytest.fixture(autouse=True)
def restore_root_logger():
    root_logger = logging.getLogger()
    original_level = root_logger.level
    original_handlers = root_logger.handlers[:]
    yield root_logger
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        if handler not in original_handlers:
            handler.close()
    root_logger.setLevel(original_level)
    for handler in original_handlers:
        root_logger.addHandler(handler)


class TestConfigureLogging:
    """configure_logging 함수 테스트."""

    def test_configures_root_logger(self, tmp_path, restore_root_logger):
        assert configure_logging("warning", output_dir=str(tmp_path)) is None
        assert restore_root_logger.level == logging.WARNING
        assert len(restore_root_logger.handlers) == 1

    def test_invalid_level(self, restore_root_logger):
        handlers = restore_root_logger.handlers[:]
        with pytest.raises(ValueError):
            configure_logging("LOUD")
        assert restore_root_logger.handlers == handlers

    def test_reconfigure_replaces_handlers(self, tmp_path, restore_root_logger):
        configure_logging("INFO", output_dir=str(tmp_path))
        configure_logging("ERROR", output_dir=str(tmp_path))
        assert len(restore_root_logger.handlers) == 1
        assert restore_root_logger.level == logging.ERROR

    def test_console_output_disabled(self, tmp_path, restore_root_logger):
        configure_logging("INFO", output_dir=str(tmp_path), console_output=False)
        assert restore_root_logger.handlers == []

    def test_file_logging_only_at_debug(self, tmp_path, restore_root_logger):
        configure_logging("INFO", output_dir=str(tmp_path))
        assert not (tmp_path / "logs").exists()

        log_file = configure_logging("DEBUG", output_dir=str(tmp_path))
        assert log_file == get_log_file(str(tmp_path))
        assert os.path.isfile(log_file)
        assert os.path.basename(log_file).startswith("french_tutor_")
        assert any(isinstance(h, logging.FileHandler) for h in restore_root_logger.handlers)

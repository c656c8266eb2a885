from loguru import logger

from testsuites.ui_testing.framework import log_config
from testsuites.unit.fakes import DummyConfig


def test_init_logger_writes_file_sink_once(tmp_path):
    log_file = tmp_path / "logs" / "ui.log"
    log_config.reset_logger()
    try:
        log_config.init_logger(level="debug", log_file=str(log_file), config=DummyConfig())
        log_config.init_logger(log_file=str(tmp_path / "ignored.log"), config=DummyConfig())
        logger.info("movie page opened")

        assert "movie page opened" in log_file.read_text(encoding="utf-8")
        assert not (tmp_path / "ignored.log").exists()
    finally:
        log_config.reset_logger()
        log_config.init_logger()


def test_init_logger_reads_level_from_config(tmp_path):
    log_file = tmp_path / "ui.log"
    config = DummyConfig({"logging.level": "WARNING", "logging.file": str(log_file)})
    log_config.reset_logger()
    try:
        log_config.init_logger(config=config)
        logger.info("hidden")
        logger.warning("shown")

        content = log_file.read_text(encoding="utf-8")
        assert "shown" in content
        assert "hidden" not in content
    finally:
        log_config.reset_logger()
        log_config.init_logger()

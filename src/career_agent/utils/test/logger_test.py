import logging
from types import SimpleNamespace
import pytest

from src.career_agent.utils.logger import AgentLogger, configure_logging, get_logger


@pytest.fixture(autouse=True)
def reset_logger_factory():
    yield
    for name, logger in list(AgentLogger._loggers.items()):
        for handler in logger.handlers[:]:
            if isinstance(handler, logging.FileHandler):
                logger.removeHandler(handler)
                handler.close()
        if name.startswith("career_agent.logger_test"):
            logger.handlers.clear()
            del AgentLogger._loggers[name]
    AgentLogger._log_file = None
    AgentLogger._global_level = None


def test_records_go_to_stderr_not_stdout(capsys):
    logger = get_logger("career_agent.logger_test.stderr")

    logger.warning("model task failed")

    captured = capsys.readouterr()
    assert "model task failed" in captured.err
    assert " - WARNING - " in captured.err
    assert captured.out == ""


def test_configure_logging_sets_level_and_log_file(tmp_path):
    log_file = tmp_path / "logs" / "session.log"
    settings = SimpleNamespace(LOG_LEVEL="debug", LOG_FILE=str(log_file))

    configure_logging(settings)
    logger = get_logger("career_agent.logger_test.file")
    logger.debug("dispatching career command")

    assert logger.level == logging.DEBUG
    contents = log_file.read_text(encoding="utf-8")
    assert "career_agent.logger_test.file - DEBUG - dispatching career command" in contents


def test_global_level_applies_to_existing_loggers():
    logger = get_logger("career_agent.logger_test.level")
    assert logger.level == logging.WARNING

    configure_logging(SimpleNamespace(LOG_LEVEL="ERROR", LOG_FILE=None))

    assert logger.level == logging.ERROR
    assert logger.propagate is False

import json
import logging

from shopscale_db.services.logger import get_logger


def _close(logger):
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_get_logger_writes_json_to_log_dir(monkeypatch, tmp_path):
    monkeypatch.setenv("LOG_DIR", str(tmp_path))
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    logger = get_logger("init_db_file")
    try:
        logger.info("index_ensured", extra={"extra": {"collection": "products"}})

        lines = (tmp_path / "init_db_file.log").read_text().splitlines()
        record = json.loads(lines[-1])
        assert record["message"] == "index_ensured"
        assert record["level"] == "INFO"
        assert record["collection"] == "products"
        assert logger.propagate is False
    finally:
        _close(logger)


def test_get_logger_attaches_handlers_once(monkeypatch):
    monkeypatch.delenv("LOG_DIR", raising=False)
    logger = get_logger("init_db_once")
    try:
        assert get_logger("init_db_once") is logger
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)
    finally:
        _close(logger)

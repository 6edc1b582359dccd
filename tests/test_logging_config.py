"""
Tests for logging setup.
"""

from __future__ import annotations

import logging

from ledger_service.logging_config import LOG_FILE_NAME, setup_logging


def test_setup_logging_is_idempotent(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("LOG_LEVEL", "debug")

    setup_logging()
    log_file = setup_logging()

    logger = logging.getLogger("ledger_service")
    assert len(logger.handlers) == 2
    assert logger.level == logging.DEBUG
    assert log_file == tmp_path / "logs" / LOG_FILE_NAME
    assert log_file.exists()


def test_setup_logging_arguments_override_environment(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "from_env"))

    log_file = setup_logging(log_dir=tmp_path / "explicit", level="not-a-level")

    assert log_file.parent == tmp_path / "explicit"
    assert logging.getLogger("ledger_service").level == logging.INFO
    assert not (tmp_path / "from_env").exists()


def test_service_records_reach_the_log_file(tmp_path) -> None:
    log_file = setup_logging(log_dir=tmp_path, level="INFO")

    logging.getLogger("ledger_service.store").info("created account id=%s", "Id-1")
    for handler in logging.getLogger("ledger_service").handlers:
        handler.flush()

    assert "created account id=Id-1" in log_file.read_text(encoding="utf-8")

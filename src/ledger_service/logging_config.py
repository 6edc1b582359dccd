"""
Logging setup for the ledger service.

Everything under the ``ledger_service`` logger goes to a size-rotated file in
LOG_DIR; warnings and errors are echoed to stderr as well.
"""

import logging
import logging.config
import os
from pathlib import Path
from typing import Optional, Union

LOG_FILE_NAME = "ledger_service.log"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROTATE_AT_BYTES = 10 * 1024 * 1024
KEEP_ROTATED = 5


def _build_config(log_file: Path, level: str) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT},
        },
        "handlers": {
            "ledger_file": {
                "class": "logging.handlers.RotatingFileHandler",
                "filename": str(log_file),
                "maxBytes": ROTATE_AT_BYTES,
                "backupCount": KEEP_ROTATED,
                "encoding": "utf-8",
                "formatter": "plain",
                "level": level,
            },
            "stderr": {
                "class": "logging.StreamHandler",
                "formatter": "plain",
                "level": "WARNING",
            },
        },
        "loggers": {
            "ledger_service": {"level": level, "handlers": ["ledger_file", "stderr"]},
        },
        "root": {"level": level},
    }


def setup_logging(log_dir: Optional[Union[str, Path]] = None, level: Optional[str] = None) -> Path:
    """
    Install the ledger_service handlers and return the log file path.

    Arguments win over LOG_DIR / LOG_LEVEL. Safe to call repeatedly: dictConfig
    replaces the handlers it installed last time.
    """
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    if not isinstance(logging.getLevelName(level_name), int):
        level_name = "INFO"

    target_dir = Path(log_dir or os.getenv("LOG_DIR", "logs"))
    target_dir.mkdir(parents=True, exist_ok=True)
    log_file = target_dir / LOG_FILE_NAME

    logging.config.dictConfig(_build_config(log_file, level_name))
    return log_file


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)

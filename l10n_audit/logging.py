import logging
import os
from logging.handlers import RotatingFileHandler

from l10n_audit.config import LOG_FILE, LOG_LEVEL


def _resolve_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    name = (level or LOG_LEVEL or "INFO").upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: str | int | None = None, *, log_file: str | None = None) -> None:
    """Configure console logging and, when a log file is configured, a rotating file."""
    if logging.getLogger().handlers:
        # already configured by the host (pytest, an embedding script)
        return

    log_level = _resolve_level(level)
    log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    handlers: list[logging.Handler] = [logging.StreamHandler()]

    file_path = log_file or LOG_FILE
    if file_path:
        logs_dir = os.path.dirname(file_path)
        if logs_dir:
            os.makedirs(logs_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            file_path, maxBytes=1_000_000, backupCount=5, encoding="utf-8"
        )
        handlers.append(file_handler)

    logging.basicConfig(level=log_level, format=log_format, handlers=handlers)


__all__ = ["setup_logging"]

from __future__ import annotations

"""Central logging configuration for xd_toolkit.

Import and call :func:`setup_logging` at application start-up. Library code
only creates loggers; it never configures handlers itself.
"""

import copy
import logging
import logging.config
import os
from typing import Any, Dict, Optional

from xd_toolkit.config import ConfigManager

__all__ = ["setup_logging"]

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure logging from the ``logging`` configuration section.

    Args:
        level: Optional level forced on the ``xd_toolkit`` logger and the
            console handler (e.g. ``"DEBUG"`` for ``--debug``)
    """
    logging_config = copy.deepcopy(ConfigManager().get_logging_config())

    if logging_config.get("version"):
        _add_file_handler(logging_config)
        try:
            logging.config.dictConfig(logging_config)
        except (ValueError, TypeError, AttributeError, ImportError) as exc:
            _setup_minimal_logging()
            logging.getLogger(__name__).error("Invalid logging config, using fallback: %s", exc)
    else:
        _setup_minimal_logging()

    if level:
        _force_level(level)
    _apply_debug_overrides()


def _add_file_handler(logging_config: Dict[str, Any]) -> None:
    """Attach a file handler when ``XD_TOOLKIT_LOG_DIR`` is set."""
    log_dir = os.environ.get("XD_TOOLKIT_LOG_DIR")
    if not log_dir:
        return
    os.makedirs(log_dir, exist_ok=True)

    handlers = dict(logging_config.get("handlers") or {})
    handlers["file"] = {
        "class": "logging.FileHandler",
        "filename": os.path.join(log_dir, "xd_toolkit.log"),
        "encoding": "utf-8",
        "level": "DEBUG",
        "formatter": "simple",
    }
    logging_config["handlers"] = handlers
    formatters = dict(logging_config.get("formatters") or {})
    formatters.setdefault("simple", {"format": _FORMAT})
    logging_config["formatters"] = formatters

    loggers = dict(logging_config.get("loggers") or {})
    package_logger = dict(loggers.get("xd_toolkit") or {"level": "INFO"})
    package_logger["handlers"] = list(package_logger.get("handlers") or []) + ["file"]
    loggers["xd_toolkit"] = package_logger
    logging_config["loggers"] = loggers


def _setup_minimal_logging() -> None:
    """Set up minimal console-only logging when config is unavailable."""
    minimal_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "simple": {"format": _FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "simple",
                "level": "INFO",
            },
        },
        "root": {
            "level": "INFO",
            "handlers": ["console"],
        },
    }
    logging.config.dictConfig(minimal_config)


def _force_level(level: str) -> None:
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")
    package_logger = logging.getLogger("xd_toolkit")
    package_logger.setLevel(numeric)
    for handler in package_logger.handlers + logging.getLogger().handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            handler.setLevel(numeric)


def _apply_debug_overrides() -> None:
    """Apply ``XD_TOOLKIT_DEBUG_MODULES=comma,separated,logger,names``."""
    extra_modules = os.environ.get("XD_TOOLKIT_DEBUG_MODULES", "").strip()
    targets = [m.strip() for m in extra_modules.split(",") if m.strip()]
    for name in targets:
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG)
        has_debug_handler = any(h.level <= logging.DEBUG for h in logger.handlers)
        if not has_debug_handler:
            handler = logging.StreamHandler()
            handler.setLevel(logging.DEBUG)
            handler.setFormatter(logging.Formatter(_FORMAT))
            logger.addHandler(handler)
        logger.info("Debug override active for logger '%s'", name)

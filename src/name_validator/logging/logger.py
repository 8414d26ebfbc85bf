"""
Logging setup shared by every name_validator module.

Handlers hang off the ``name_validator`` base logger:

* console (stderr), WARNING and above unless debugging
* master file ``<logs_dir>/<file>`` from ``config/name_validator.yml``
* optionally one ``<logs_dir>/<module>.log`` per module logger

A relative ``logs_dir`` is taken from the current working directory, never
from where the package is installed. A log file that cannot be opened is
skipped and the console handler carries on alone.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Optional

from name_validator.config import NVConfig, get_config

BASE_LOGGER_NAME = "name_validator"
DEFAULT_LOG_FILE = "name_validator.log"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROTATE_MAX_BYTES = 5 * 1024 * 1024
ROTATE_BACKUP_COUNT = 5


@dataclass
class _LogSettings:
    level: int
    debug: bool
    log_dir: Optional[Path]
    rotate: bool
    module_files: bool


_settings: Optional[_LogSettings] = None
_loggers: Dict[str, Logger] = {}


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------

def _configured_level(cfg: NVConfig) -> int:
    name = str(cfg.logging.get("level", "INFO")).upper()
    return getattr(logging, name, logging.INFO)


def resolve_log_dir(cfg: NVConfig) -> Path:
    """``logging.dir`` or ``paths.logs_dir`` (default ``logs``), made absolute."""
    raw = cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs"
    path = Path(str(raw)).expanduser()
    if not path.is_absolute():
        path = Path.cwd() / path
    return path


def _formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


def _open_file_handler(path: Path, level: int, rotate: bool) -> Optional[logging.Handler]:
    """File handler for ``path``, or None when the file cannot be opened."""
    try:
        if rotate:
            handler: logging.Handler = RotatingFileHandler(
                path,
                maxBytes=ROTATE_MAX_BYTES,
                backupCount=ROTATE_BACKUP_COUNT,
                encoding="utf-8",
            )
        else:
            handler = logging.FileHandler(path, encoding="utf-8")
    except OSError:
        return None

    handler.setLevel(level)
    handler.setFormatter(_formatter())
    return handler


def _make_log_dir(path: Path) -> Optional[Path]:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError:
        return None
    return path


def _setup() -> Logger:
    """Attach console and master-file handlers to the base logger once."""
    global _settings

    base = logging.getLogger(BASE_LOGGER_NAME)
    if _settings is not None:
        return base

    cfg = get_config()
    debug = bool(cfg.debug)
    level = logging.DEBUG if debug else _configured_level(cfg)

    base.setLevel(level)
    base.propagate = False

    console = StreamHandler()
    console.setLevel(logging.DEBUG if debug else logging.WARNING)
    console.setFormatter(_formatter())
    base.addHandler(console)

    wanted_dir = resolve_log_dir(cfg)
    rotate = bool(cfg.logging.get("rotate", False))
    _settings = _LogSettings(
        level=level,
        debug=debug,
        log_dir=_make_log_dir(wanted_dir),
        rotate=rotate,
        module_files=bool(cfg.logging.get("module_files", True)),
    )

    if _settings.log_dir is None:
        base.warning("Cannot create log directory %s; logging to console only", wanted_dir)
        return base

    master_path = _settings.log_dir / str(cfg.logging.get("file") or DEFAULT_LOG_FILE)
    master = _open_file_handler(master_path, level, rotate)
    if master is None:
        base.warning("Cannot open log file %s; logging to console only", master_path)
    else:
        base.addHandler(master)
    return base


def _has_module_file(logger: Logger) -> bool:
    return any(getattr(h, "is_module_handler", False) for h in logger.handlers)


def _add_module_file(logger: Logger) -> None:
    if _settings is None or _settings.log_dir is None:
        return
    path = _settings.log_dir / f"{logger.name.replace('.', '_')}.log"
    handler = _open_file_handler(path, _settings.level, _settings.rotate)
    if handler is None:
        return
    handler.is_module_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def get_logger(name: Optional[str] = None) -> Logger:
    """
    Return ``name_validator.<name>`` wired to the shared handlers.

    Module loggers propagate to the base logger (console + master file) and,
    with ``logging.module_files`` on, also write their own file.
    """
    base = _setup()
    assert _settings is not None

    full_name = name or BASE_LOGGER_NAME
    if full_name != BASE_LOGGER_NAME and not full_name.startswith(BASE_LOGGER_NAME + "."):
        full_name = f"{BASE_LOGGER_NAME}.{full_name}"

    if full_name == BASE_LOGGER_NAME:
        _loggers[full_name] = base
        return base

    logger = logging.getLogger(full_name)
    logger.setLevel(_settings.level)
    logger.propagate = True
    if _settings.module_files and not _has_module_file(logger):
        _add_module_file(logger)

    _loggers[full_name] = logger
    return logger


def set_debug(enabled: bool) -> None:
    """Switch every logger and handler created so far to or from DEBUG."""
    base = _setup()
    assert _settings is not None

    level = logging.DEBUG if enabled else _configured_level(get_config())
    _settings.level = level
    _settings.debug = enabled

    for logger in {base, *_loggers.values()}:
        logger.setLevel(level)
        for handler in logger.handlers:
            if isinstance(handler, logging.FileHandler):
                handler.setLevel(level)
            else:
                handler.setLevel(logging.DEBUG if enabled else logging.WARNING)


def list_active_loggers() -> List[str]:
    return list(_loggers)

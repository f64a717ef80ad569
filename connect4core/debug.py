"""
debug.py - Logging facilities for the connect4core package

This module wraps the standard logging module behind a small manager object so
that every part of the game core logs the same way: one named logger, a
configurable verbosity, optional per-component filtering and simple timers.
"""

import logging
import os
import sys
import time
from enum import Enum
from typing import Dict, Iterable, Optional, Set


class DebugLevel(Enum):
    """Verbosity levels, ordered from silent to most verbose."""
    NONE = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


# logging has no TRACE; it shares DEBUG and is prefixed in the message instead
LEVEL_MAP = {
    DebugLevel.NONE: logging.CRITICAL + 10,
    DebugLevel.ERROR: logging.ERROR,
    DebugLevel.WARNING: logging.WARNING,
    DebugLevel.INFO: logging.INFO,
    DebugLevel.DEBUG: logging.DEBUG,
    DebugLevel.TRACE: logging.DEBUG,
}

LOGGER_NAME = "connect4core"
DEBUG_ENV_VAR = "CONNECT4CORE_DEBUG"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class DebugManager:
    """Owns the package logger and decides which messages reach it."""

    def __init__(self, level: DebugLevel = DebugLevel.WARNING):
        self._level = level
        self._enabled = True
        self._log_file: Optional[str] = None
        self._components: Set[str] = set()  # empty means every component
        self._timers: Dict[str, float] = {}
        self._logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(LEVEL_MAP[self._level])
        logger.propagate = False

        # Every manager shares the one named logger; keep a single console handler.
        if not any(getattr(h, "_connect4core_console", False) for h in logger.handlers):
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
            console_handler._connect4core_console = True
            logger.addHandler(console_handler)

        return logger

    @property
    def level(self) -> DebugLevel:
        return self._level

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def configure(self, level: Optional[DebugLevel] = None,
                  enabled: Optional[bool] = None,
                  log_file: Optional[str] = None,
                  components: Optional[Iterable[str]] = None) -> None:
        """
        Change the manager settings. Arguments left as None are not touched.

        Args:
            level: Verbosity to log at
            enabled: Master switch for all output
            log_file: Also write records to this file ("" removes the file handler)
            components: Only log messages tagged with one of these components
                (an empty iterable re-enables every component)
        """
        if level is not None:
            self._level = level
            self._logger.setLevel(LEVEL_MAP[level])

        if enabled is not None:
            self._enabled = enabled

        if log_file is not None:
            for handler in self._logger.handlers[:]:
                if isinstance(handler, logging.FileHandler):
                    self._logger.removeHandler(handler)
                    handler.close()

            self._log_file = log_file or None
            if self._log_file:
                file_handler = logging.FileHandler(self._log_file)
                file_handler.setFormatter(
                    logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
                self._logger.addHandler(file_handler)

        if components is not None:
            self._components = set(components)

    def is_enabled_for(self, level: DebugLevel, component: Optional[str] = None) -> bool:
        """Return True if a message at this level and component would be emitted."""
        if not self._enabled or level == DebugLevel.NONE:
            return False

        if level.value > self._level.value:
            return False

        if component and self._components and component not in self._components:
            return False

        return True

    def log(self, level: DebugLevel, message: str, component: Optional[str] = None) -> None:
        """
        Log a message at the given level.

        Args:
            level: Level of the message
            message: Text to log
            component: Optional tag used for filtering, shown as a prefix
        """
        if not self.is_enabled_for(level, component):
            return

        if component:
            message = f"[{component}] {message}"

        if level == DebugLevel.ERROR:
            self._logger.error(message)
        elif level == DebugLevel.WARNING:
            self._logger.warning(message)
        elif level == DebugLevel.INFO:
            self._logger.info(message)
        elif level == DebugLevel.DEBUG:
            self._logger.debug(message)
        elif level == DebugLevel.TRACE:
            self._logger.debug(f"TRACE: {message}")

    def error(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.ERROR, message, component)

    def warning(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.WARNING, message, component)

    def info(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.INFO, message, component)

    def debug(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.DEBUG, message, component)

    def trace(self, message: str, component: Optional[str] = None) -> None:
        self.log(DebugLevel.TRACE, message, component)

    def start_timer(self, marker_name: str) -> None:
        """Start (or restart) a named timer."""
        self._timers[marker_name] = time.perf_counter()

    def end_timer(self, marker_name: str, component: Optional[str] = None) -> Optional[float]:
        """
        Stop a named timer and log the elapsed time at DEBUG.

        Returns:
            Elapsed seconds, or None if the timer was never started
        """
        started = self._timers.pop(marker_name, None)
        if started is None:
            self.warning(f"Timer '{marker_name}' not started", "debug")
            return None

        elapsed = time.perf_counter() - started
        self.debug(f"Performance [{marker_name}]: {elapsed:.6f} seconds", component)
        return elapsed

    def set_from_string(self, level_str: str) -> bool:
        """
        Set the level from its name, e.g. from a command line flag or an
        environment variable.

        Returns:
            True if the name was recognised
        """
        try:
            level = DebugLevel[level_str.strip().upper()]
        except KeyError:
            self.warning(f"Unknown debug level: {level_str}")
            return False

        self.configure(level=level)
        return True


debug = DebugManager()

# CONNECT4CORE_DEBUG=debug turns on verbose logging without touching code
_env_level = os.environ.get(DEBUG_ENV_VAR)
if _env_level:
    debug.set_from_string(_env_level)

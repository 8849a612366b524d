"""
Logging configuration and the application-wide logger facade.

- The stdlib logging backend is configured lazily by the first get_logger() call.
- Concurrent first calls share one in-flight configuration; a failed attempt
  is reported on stderr and retried by the next call.
- Request-scoped context lives in a ContextVar and is merged into every record.
"""

import inspect
import json
import logging
import sys
import threading
import traceback
from concurrent.futures import Future
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, TextIO, Tuple, TypeVar, Union

from infrastructure.config.settings import get_settings


ROOT_LOGGER_NAME = "taskhub"
DEFAULT_LOG_LEVEL = "info"

_LOG_LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "critical": logging.CRITICAL,
}

# Marks handlers installed by this module on the root logger
_HANDLER_MARKER = "_taskhub_handler"

_log_context: ContextVar[Optional[Dict[str, Any]]] = ContextVar("log_context", default=None)

T = TypeVar("T")


class ConfigurationError(Exception):
    """Raised when the logging backend cannot be configured."""


class LoggerAlreadyConfiguredError(ConfigurationError):
    """Raised when the backend already carries this module's handler."""


class JSONFormatter(logging.Formatter):
    """JSON Lines formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "properties": getattr(record, "properties", {}),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Custom text formatter with colors for development."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
        "RESET": "\033[0m",
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors."""
        color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        reset = self.COLORS["RESET"]

        timestamp = datetime.fromtimestamp(record.created, timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        log_message = (
            f"{color}[{timestamp}] {record.levelname:8s}{reset} - "
            f"{record.name} - {record.getMessage()}"
        )

        properties = getattr(record, "properties", None)
        if properties:
            rendered = " ".join(f"{key}={value}" for key, value in properties.items())
            log_message += f" | {rendered}"

        if record.exc_info:
            log_message += f"\n{self.formatException(record.exc_info)}"

        return log_message


class Logger:
    """
    Category-bound logger handle.

    Every call merges, in increasing priority, the ambient context,
    the fields bound with with_fields() and the per-call properties.
    Logging never raises into the caller.
    """

    def __init__(self, category: Tuple[str, ...] = (), fields: Optional[Mapping[str, Any]] = None):
        self.category = category
        self._fields = dict(fields or {})
        self._logger = logging.getLogger(".".join((ROOT_LOGGER_NAME,) + category))

    @property
    def name(self) -> str:
        return self._logger.name

    def with_fields(self, **fields: Any) -> "Logger":
        """Return a derived logger that adds `fields` to every record."""
        return Logger(self.category, {**self._fields, **fields})

    def debug(self, message: str, properties: Optional[Mapping[str, Any]] = None) -> None:
        self._log(logging.DEBUG, message, properties)

    def info(self, message: str, properties: Optional[Mapping[str, Any]] = None) -> None:
        self._log(logging.INFO, message, properties)

    def warning(self, message: str, properties: Optional[Mapping[str, Any]] = None) -> None:
        self._log(logging.WARNING, message, properties)

    def error(self, message: str, properties: Optional[Mapping[str, Any]] = None) -> None:
        self._log(logging.ERROR, message, properties)

    def critical(self, message: str, properties: Optional[Mapping[str, Any]] = None) -> None:
        self._log(logging.CRITICAL, message, properties)

    def _log(self, level: int, message: str, properties: Optional[Mapping[str, Any]]) -> None:
        try:
            if not self._logger.isEnabledFor(level):
                return
            merged = {**(_log_context.get() or {}), **self._fields, **(properties or {})}
            self._logger.log(level, message, extra={"properties": merged})
        except Exception as e:
            print(f"[Logger] Failed to emit log record: {e}", file=sys.stderr)

    def __repr__(self) -> str:
        return f"<Logger name={self.name!r}>"


class _InitializationState:
    """Tri-state guard: unconfigured, configuring (in_flight set), configured."""

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.is_configured = False
        self.in_flight: Optional[Future] = None


_state = _InitializationState()


def resolve_log_level(raw: Optional[str]) -> int:
    """
    Map a LOG_LEVEL value to a logging level.

    Args:
        raw: Level name as found in the environment

    Returns:
        Logging level; INFO when unset or invalid
    """
    if not raw:
        return _LOG_LEVELS[DEFAULT_LOG_LEVEL]
    level = _LOG_LEVELS.get(raw.strip().lower())
    if level is None:
        print(
            f'[Logger] Invalid LOG_LEVEL environment variable: "{raw}". '
            f'Using default: "{DEFAULT_LOG_LEVEL}"',
            file=sys.stderr,
        )
        return _LOG_LEVELS[DEFAULT_LOG_LEVEL]
    return level


def _configure_backend(stream: Optional[TextIO] = None) -> None:
    """Install the stream handler on the application root logger."""
    settings = get_settings()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if any(getattr(handler, _HANDLER_MARKER, False) for handler in root.handlers):
        raise LoggerAlreadyConfiguredError("Logger already configured")

    level = resolve_log_level(settings.log_level)
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(level)

    if settings.log_format.lower() == "text":
        formatter = TextFormatter()
    else:
        formatter = JSONFormatter()

    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_MARKER, True)
    root.setLevel(level)
    root.addHandler(handler)
    root.propagate = False


def _completed_future() -> Future:
    future: Future = Future()
    future.set_result(None)
    return future


def initialize_log_configuration() -> Future:
    """
    Configure the backend at most once at a time.

    Returns:
        Future resolved when configuration finishes. Callers arriving
        while another configuration is running get that same future.
    """
    with _state.lock:
        if _state.is_configured:
            return _completed_future()
        if _state.in_flight is not None:
            return _state.in_flight
        future: Future = Future()
        _state.in_flight = future

    failure: Optional[ConfigurationError] = None
    try:
        _configure_backend()
    except LoggerAlreadyConfiguredError:
        pass
    except Exception as e:
        failure = ConfigurationError(str(e))
        failure.__cause__ = e

    with _state.lock:
        if failure is None:
            _state.is_configured = True
        _state.in_flight = None

    if failure is None:
        future.set_result(None)
    else:
        print(f"[Logger] Failed to initialize log configuration: {failure}", file=sys.stderr)
        future.set_exception(failure)
    return future


def _category_path(category: Union[str, Sequence[str], None]) -> Tuple[str, ...]:
    if not category:
        return ()
    if isinstance(category, str):
        return (category,)
    return tuple(category)


def get_logger(category: Union[str, Sequence[str], None] = None) -> Logger:
    """
    Get logger instance.

    Triggers backend configuration without waiting for it to finish.

    Args:
        category: Category name or path below the application root

    Returns:
        Logger instance
    """
    initialize_log_configuration()
    return Logger(_category_path(category))


def run_with_context(context: Mapping[str, Any], fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """
    Run `fn` with `context` as the ambient logging context.

    When `fn` returns an awaitable (a coroutine function, or any callable
    returning a coroutine) the result is a coroutine that re-establishes
    the context when awaited, so it holds across suspension points.
    """
    context = dict(context)
    token = _log_context.set(context)
    try:
        result = fn(*args, **kwargs)
    finally:
        _log_context.reset(token)

    if inspect.isawaitable(result):
        return _await_with_context(context, result)
    return result


async def _await_with_context(context, awaitable):
    token = _log_context.set(context)
    try:
        return await awaitable
    finally:
        _log_context.reset(token)


def set_context(context: Mapping[str, Any]) -> None:
    """Merge `context` into the active ambient context; no-op outside one."""
    current = _log_context.get()
    if current is not None:
        current.update(context)


def get_context() -> Dict[str, Any]:
    """Copy of the active ambient context (empty outside one)."""
    return dict(_log_context.get() or {})


def build_error_context(error: Any = None) -> Dict[str, Any]:
    """
    Convert a raised value into structured log properties.

    Args:
        error: Exception or any other value

    Returns:
        {} for None, {"error": {name, message, stack}} for exceptions,
        {"error": str(error)} otherwise
    """
    if error is None:
        return {}
    if isinstance(error, BaseException):
        stack = None
        if error.__traceback__ is not None:
            stack = "".join(
                traceback.format_exception(type(error), error, error.__traceback__)
            )
        return {
            "error": {
                "name": type(error).__name__,
                "message": str(error),
                "stack": stack,
            }
        }
    return {"error": str(error)}


def reset_logger() -> None:
    """Forget the configuration state so the next get_logger() configures again."""
    with _state.lock:
        _state.is_configured = False
        _state.in_flight = None

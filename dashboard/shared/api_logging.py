"""Call logging for the dashboard's fetch and service layers."""

from __future__ import annotations

import functools
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "pitwall.dashboard"

_LOG_DIR = os.path.join(os.path.dirname(__file__), "..", "logs")
_LOG_FILE = os.path.join(_LOG_DIR, "api_calls.log")

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def _get_logger() -> logging.Logger:
    """Return the file logger, creating log dir and handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        os.makedirs(_LOG_DIR, exist_ok=True)

        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False

        if not logger.handlers:
            handler = logging.FileHandler(_LOG_FILE, encoding="utf-8")
            handler.setFormatter(
                logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
            )
            logger.addHandler(handler)
        _logger = logger

    return _logger


def _describe_args(args: tuple[Any, ...], kwargs: dict[str, Any], skip_self: bool) -> str:
    positional = args[1:] if skip_self else args
    parts = [repr(a) for a in positional]
    parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return ", ".join(parts)


def log_api_call(fn: F) -> F:
    """Log a backend fetch: arguments, returned item count and timing.

    Works on plain functions; the first argument is not treated as ``self``.
    """

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        arg_str = _describe_args(args, kwargs, skip_self=False)
        logger.info("CALL: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            logger.error(
                "FAIL: %s(%s) -> %s: %s (%.3fs)",
                fn.__qualname__, arg_str, type(exc).__name__, exc,
                time.monotonic() - start,
            )
            raise

        count = len(result) if isinstance(result, list) else 1
        logger.info(
            "OK: %s(%s) -> %d items (%.3fs)",
            fn.__qualname__, arg_str, count, time.monotonic() - start,
        )
        return result

    return wrapper  # type: ignore[return-value]


def log_service_call(fn: F) -> F:
    """Log a service-layer method call and its outcome."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        arg_str = _describe_args(args, kwargs, skip_self=True)
        logger.info("SERVICE CALL: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            logger.error(
                "SERVICE FAIL: %s -> %s: %s (%.3fs)",
                fn.__qualname__, type(exc).__name__, exc,
                time.monotonic() - start,
            )
            raise

        logger.info("SERVICE OK: %s -> %.3fs", fn.__qualname__, time.monotonic() - start)
        return result

    return wrapper  # type: ignore[return-value]

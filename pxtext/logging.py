"""pxtext structured logging: audit events and call tracing."""

import functools
import json
import logging
import sys
import time
import traceback
from datetime import datetime, timezone

# Custom AUDIT level (between WARNING=30 and ERROR=40)
AUDIT = 35
logging.addLevelName(AUDIT, "AUDIT")

ROOT_LOGGER = "pxtext"

# Silent until setup_logging() is called by an application
logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def _truncate(value: object, max_len: int = 80) -> str:
    """Truncate a string for safe logging."""
    s = str(value)
    if len(s) > max_len:
        return s[:max_len] + "..."
    return s


def _summarize(result: object) -> str:
    if isinstance(result, (str, int, float, bool)):
        return _truncate(repr(result), 80)
    if isinstance(result, (list, tuple)):
        return f"{type(result).__name__}[{len(result)}]"
    if isinstance(result, dict):
        return f"dict[{len(result)} keys]"
    return type(result).__name__


def _emit(log: logging.Logger, level: int, event: str, *, ctx: dict | None = None,
          duration_ms: float | None = None, exc_info=None):
    if not log.isEnabledFor(level):
        return
    record = log.makeRecord(
        name=log.name, level=level, fn="", lno=0,
        msg="", args=(), exc_info=exc_info,
    )
    record.event = event
    if duration_ms is not None:
        record.duration_ms = duration_ms
    record.ctx = ctx or {}
    log.handle(record)


class JsonFormatter(logging.Formatter):
    """Outputs one JSON object per line for machine parsing."""

    def format(self, record):
        entry = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z",
            "level": record.levelname,
            "src": record.name,
        }
        if hasattr(record, "event"):
            entry["event"] = record.event
        if hasattr(record, "duration_ms"):
            entry["duration_ms"] = round(record.duration_ms, 2)
        if hasattr(record, "ctx"):
            entry["ctx"] = record.ctx
        if record.getMessage() and not hasattr(record, "event"):
            entry["msg"] = record.getMessage()
        if record.exc_info and record.exc_info[1]:
            entry["traceback"] = traceback.format_exception(*record.exc_info)
        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Human-readable colored console output."""

    COLORS = {
        "DEBUG": "\033[36m",    # cyan
        "INFO": "\033[32m",     # green
        "AUDIT": "\033[35m",    # magenta
        "WARNING": "\033[33m",  # yellow
        "ERROR": "\033[31m",    # red
    }
    RESET = "\033[0m"

    def format(self, record):
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc).strftime("%H:%M:%S.%f")[:-3]
        color = self.COLORS.get(record.levelname, "")
        level = f"{color}{record.levelname:5s}{self.RESET}"
        parts = [ts, level, f"[{record.name}]"]

        if hasattr(record, "event"):
            parts.append(record.event)

        if hasattr(record, "duration_ms"):
            parts.append(f"({record.duration_ms:.1f}ms)")

        if hasattr(record, "ctx") and record.ctx:
            parts.append(" ".join(f"{k}={_truncate(v)}" for k, v in record.ctx.items()))
        elif record.getMessage() and not hasattr(record, "event"):
            parts.append(record.getMessage())

        if record.exc_info and record.exc_info[1]:
            parts.append(f"\n{''.join(traceback.format_exception(*record.exc_info))}")

        return " ".join(parts)


def setup_logging(level: str = "INFO", log_file: str | None = None, json_format: bool = False):
    """Configure the root pxtext logger.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR, AUDIT).
        log_file: If set, write JSON logs to this file path.
        json_format: If True, use JSON format on console too.
    """
    root = logging.getLogger(ROOT_LOGGER)
    name = level.upper()
    root.setLevel(AUDIT if name == "AUDIT" else getattr(logging, name, logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler()
    console.setFormatter(JsonFormatter() if json_format else ConsoleFormatter())
    root.addHandler(console)

    # File handler (always JSON)
    if log_file:
        fh = logging.FileHandler(log_file)
        fh.setFormatter(JsonFormatter())
        root.addHandler(fh)


def get_logger(module_name: str) -> logging.Logger:
    """Get a logger scoped under the pxtext namespace."""
    return logging.getLogger(f"{ROOT_LOGGER}.{module_name}")


def audit(event: str, logger: logging.Logger | None = None, **context):
    """Emit an AUDIT-level structured log entry.

    Args:
        event: Machine-readable event tag (e.g., "render.substituted").
        logger: Logger to use. Defaults to the pxtext root.
        **context: Key-value pairs for the event context.
    """
    _emit(logger or logging.getLogger(ROOT_LOGGER), AUDIT, event, ctx=context)


def trace(func=None, *, logger_name: str | None = None, expected: tuple = ()):
    """Decorator that auto-logs function entry/exit with timing.

    - DEBUG on entry with arguments
    - INFO on exit with duration
    - DEBUG on an ``expected`` exception (caller-facing rejection, no traceback)
    - ERROR on any other exception with traceback and duration
    """
    def decorator(fn):
        _logger_name = logger_name or fn.__module__.replace(f"{ROOT_LOGGER}.", "")
        log = get_logger(_logger_name)

        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            fn_name = fn.__name__

            # Skip arg formatting when DEBUG is off
            if log.isEnabledFor(logging.DEBUG):
                safe_args = [_truncate(repr(a), 80) for a in args]
                safe_kwargs = {k: _truncate(repr(v), 80) for k, v in kwargs.items()}
                _emit(log, logging.DEBUG, f"{fn_name}.enter",
                      ctx={"args": safe_args, "kwargs": safe_kwargs})

            start = time.perf_counter()
            try:
                result = fn(*args, **kwargs)
            except expected as exc:
                elapsed = (time.perf_counter() - start) * 1000
                _emit(log, logging.DEBUG, f"{fn_name}.rejected", duration_ms=elapsed,
                      ctx={"reason": type(exc).__name__, "detail": _truncate(exc)})
                raise
            except Exception:
                elapsed = (time.perf_counter() - start) * 1000
                _emit(log, logging.ERROR, f"{fn_name}.error", duration_ms=elapsed,
                      ctx={"function": fn_name}, exc_info=sys.exc_info())
                raise

            elapsed = (time.perf_counter() - start) * 1000
            _emit(log, logging.INFO, f"{fn_name}.done", duration_ms=elapsed,
                  ctx={"result": _summarize(result)})
            return result

        return wrapper

    if func is not None:
        return decorator(func)
    return decorator

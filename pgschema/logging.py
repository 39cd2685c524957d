# ============================================================================
# STRUCTURED LOGGING
# ============================================================================
# STATUS: Core - Structured logging with context
# PURPOSE: Tag generator log lines with the model/table/field being rendered
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: get_logger, log_context, configure_logging, formatters
# ============================================================================
"""
Structured Logging.

Generation code wraps its work in log_context(); every record emitted
inside carries the innermost model, table, field and operation, whichever
formatter is installed.

    logger = get_logger(__name__)

    with log_context(model="User", table="users"):
        with log_context(operation="generate_table"):
            logger.debug("Rendered 11 columns")

Human output (default):
    2026-10-18 09:12:44 DEBUG    pgschema.schema.sql_generator [model=User, table=users]: Rendered 11 columns

JSON output (LOG_FORMAT=json or configure_logging(json_output=True)):
    {"timestamp": "...Z", "level": "DEBUG", "logger": "...", "message": "...",
     "context": {"model": "User", "table": "users", "operation": "generate_table"}, ...}
"""

import dataclasses
import json
import logging
import os
import sys
import threading
from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List, Optional, Union


# ============================================================================
# CONTEXT
# ============================================================================

@dataclass(frozen=True)
class LogContext:
    """Fields attached to every record logged while the context is active."""
    model: Optional[str] = None
    table: Optional[str] = None
    field: Optional[str] = None
    operation: Optional[str] = None
    extra: Dict[str, Any] = dataclasses.field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Set fields only, with `extra` flattened in."""
        result = {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != "extra" and getattr(self, f.name) is not None
        }
        result.update(self.extra)
        return result

    def tags(self) -> List[str]:
        """key=value labels for human output; operation is omitted."""
        return [
            f"{name}={value}"
            for name, value in (("model", self.model), ("table", self.table), ("field", self.field))
            if value
        ]


_local = threading.local()
_EMPTY = LogContext()


def _stack() -> List[LogContext]:
    if not hasattr(_local, "contexts"):
        _local.contexts = []
    return _local.contexts


def get_current_context() -> LogContext:
    """Innermost active context for this thread."""
    stack = _stack()
    return stack[-1] if stack else _EMPTY


@contextmanager
def log_context(**kwargs) -> Iterator[LogContext]:
    """
    Push a context for the duration of the block.

    Unspecified fields inherit from the enclosing context; `extra` dicts merge.
    """
    parent = get_current_context()
    overrides = {k: v for k, v in kwargs.items() if k != "extra"}
    context = replace(parent, **overrides, extra={**parent.extra, **kwargs.get("extra", {})})

    stack = _stack()
    stack.append(context)
    try:
        yield context
    finally:
        stack.pop()


# ============================================================================
# FORMATTERS
# ============================================================================

def _record_data(record: logging.LogRecord) -> Optional[Dict[str, Any]]:
    return getattr(record, "extra", None) or None


class StructuredFormatter(logging.Formatter):
    """One JSON object per record."""

    def __init__(
        self,
        include_timestamp: bool = True,
        include_context: bool = True,
    ):
        super().__init__()
        self.include_timestamp = include_timestamp
        self.include_context = include_context

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {}
        if self.include_timestamp:
            stamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
            payload["timestamp"] = stamp.isoformat().replace("+00:00", "Z")

        payload.update(
            level=record.levelname,
            logger=record.name,
            message=record.getMessage(),
        )

        if self.include_context:
            context = get_current_context().to_dict()
            if context:
                payload["context"] = context

        data = _record_data(record)
        if data:
            payload["data"] = data
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        payload["source"] = {
            "file": record.filename,
            "line": record.lineno,
            "function": record.funcName,
        }
        return json.dumps(payload, default=str)


class HumanFormatter(logging.Formatter):
    """Single-line terminal output with context tags."""

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        tags = get_current_context().tags()
        where = f"{record.name} [{', '.join(tags)}]" if tags else record.name

        line = f"{stamp} {record.levelname:<8} {where}: {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


# ============================================================================
# LOGGER
# ============================================================================

class ContextLogger(logging.LoggerAdapter):
    """
    Adapter that snapshots the active context into each record.

    The merged caller extras and context end up on `record.extra`.
    """

    def process(self, msg, kwargs):
        merged = {**kwargs.get("extra", {}), **get_current_context().to_dict()}
        kwargs["extra"] = {"extra": merged}
        return msg, kwargs


def get_logger(name: str) -> ContextLogger:
    """Context-aware logger for a module."""
    return ContextLogger(logging.getLogger(name), {})


def configure_logging(
    level: Union[str, int] = "INFO",
    json_output: bool = False,
) -> None:
    """
    Install a single stderr handler on the root logger.

    Generated SQL goes to stdout, so logs never interleave with it.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    use_json = json_output or os.getenv("LOG_FORMAT", "").lower() == "json"

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(StructuredFormatter() if use_json else HumanFormatter())

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "LogContext",
    "StructuredFormatter",
    "HumanFormatter",
    "ContextLogger",
    "get_logger",
    "configure_logging",
    "log_context",
    "get_current_context",
]

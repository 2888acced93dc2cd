from __future__ import annotations

"""Small logging helpers to standardize hoirun logger names and configuration.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Root logger configuration for the 'hoirun' logger.
    - get_logger: Namespaced logger factory ('hoirun.*').
    - log_command: INFO trace of an external command line.

Design notes:
    - The version is resolved lazily to avoid circular imports.
    - Fallback to 'unknown' if the version cannot be imported.
"""

import logging
import os
import shlex
from typing import Mapping, Optional, Sequence, TextIO


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'hoirun.runner').
        - msg: Formatted message string.
        - version: hoirun.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            from hoirun import __version__ as _v  # type: ignore
            return str(_v)
        except ImportError:
            return os.getenv('HOIRUN_VERSION', 'unknown')

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec='milliseconds').replace('+00:00', 'Z')

        payload = {
            'ts': ts_str,
            'level': record.levelname,
            'module': record.name,
            'msg': record.getMessage(),
            'version': self._version,
        }

        ctx = getattr(record, 'context', None)
        if isinstance(ctx, dict) and ctx:
            payload['ctx'] = ctx

        return json.dumps(payload, ensure_ascii=False)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'hoirun' logger once and return it.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).

    Returns:
        The configured base logger.
    """
    base = logging.getLogger('hoirun')
    if base.handlers:
        base.setLevel(level)
        return base

    import sys as _sys

    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or _sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'hoirun'."""
    if not name or name == 'hoirun':
        return logging.getLogger('hoirun')
    if name.startswith('hoirun'):
        return logging.getLogger(name)
    return logging.getLogger(f'hoirun.{name}')


def log_command(
    logger: logging.Logger,
    argv: Sequence[str],
    *,
    env: Optional[Mapping[str, str]] = None,
) -> None:
    """Log *argv* as a copy-pasteable shell line, with extra *env* assignments."""
    prefix = ' '.join(f'{k}={shlex.quote(v)}' for k, v in (env or {}).items())
    line = shlex.join(list(argv))
    logger.info('▶ %s', f'{prefix} {line}' if prefix else line, extra={'context': {'argv': list(argv)}})

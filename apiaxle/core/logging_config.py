"""
Structured logging for the ApiAxle client.

Records are emitted as one JSON object per line so they can be shipped
as-is to a log collector. The library only configures its own ``apiaxle``
logger hierarchy and never touches the root logger.
"""

import logging
import json
import sys
import threading
import traceback
from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from typing import Dict, Any, Optional

from .config import get_settings

LIBRARY_LOGGER = "apiaxle"

# Attributes every LogRecord carries; anything else was passed via ``extra``
_RESERVED_ATTRS = {
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname',
    'filename', 'module', 'lineno', 'funcName', 'created',
    'msecs', 'relativeCreated', 'thread', 'threadName',
    'processName', 'process', 'getMessage', 'exc_info',
    'exc_text', 'stack_info', 'message', 'taskName'
}


@dataclass
class LogEntry:
    """Structured log entry"""
    timestamp: str
    level: str
    logger_name: str
    message: str
    method: Optional[str] = None
    url: Optional[str] = None
    status_code: Optional[int] = None
    duration_ms: Optional[float] = None
    extra: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        result = asdict(self)
        # Remove None values to reduce log size
        return {k: v for k, v in result.items() if v is not None}


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def __init__(self, include_extra: bool = True):
        super().__init__()
        self.include_extra = include_extra

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON"""
        extra = {}
        if self.include_extra:
            extra = {
                key: value for key, value in record.__dict__.items()
                if key not in _RESERVED_ATTRS
            }

        if record.exc_info:
            extra['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': traceback.format_exception(*record.exc_info)
            }

        log_entry = LogEntry(
            timestamp=datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            level=record.levelname,
            logger_name=record.name,
            message=record.getMessage(),
            method=extra.pop('method', None),
            url=extra.pop('url', None),
            status_code=extra.pop('status_code', None),
            duration_ms=extra.pop('duration_ms', None),
            extra=extra if extra else None
        )

        return json.dumps(log_entry.to_dict(), ensure_ascii=False, default=str)


class LoggingManager:
    """Configures the library logger once per process"""

    def __init__(self):
        self.configured = False
        self.handler: Optional[logging.Handler] = None
        self._lock = threading.Lock()

    def setup_logging(self,
                      log_level: str = "INFO",
                      json_output: bool = True,
                      stream=None) -> logging.Logger:
        """Attach a single console handler to the ``apiaxle`` logger"""
        logger = logging.getLogger(LIBRARY_LOGGER)
        with self._lock:
            logger.setLevel(getattr(logging, log_level.upper()))
            if self.configured:
                return logger

            handler = logging.StreamHandler(stream or sys.stderr)
            if json_output:
                handler.setFormatter(StructuredFormatter())
            else:
                handler.setFormatter(
                    logging.Formatter(
                        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
                    )
                )
            logger.addHandler(handler)
            self.handler = handler
            self.configured = True
        return logger

    def reset(self):
        """Detach the handler installed by setup_logging"""
        with self._lock:
            if self.handler is not None:
                logging.getLogger(LIBRARY_LOGGER).removeHandler(self.handler)
                self.handler.close()
            self.handler = None
            self.configured = False


logging_manager = LoggingManager()


def setup_logging(level: Optional[str] = None,
                  json_output: Optional[bool] = None,
                  stream=None) -> logging.Logger:
    """Setup library logging, falling back to the configured settings"""
    settings = get_settings()
    return logging_manager.setup_logging(
        log_level=level or settings.log_level,
        json_output=settings.log_json if json_output is None else json_output,
        stream=stream
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the library hierarchy"""
    if not name.startswith(LIBRARY_LOGGER):
        name = f"{LIBRARY_LOGGER}.{name}"
    return logging.getLogger(name)

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from assistants.config import ClientConfig


# Keyword context accepted by ClientLogger and written to JSONL entries
CONTEXT_FIELDS = (
    'component',
    'method',
    'url',
    'status_code',
    'attempt',
    'max_attempts',
    'delay_seconds',
    'duration_seconds',
    'error',
    'error_type',
    'error_code',
    'thread_id',
    'run_id',
    'status',
    'count',
)


class FlushingFileHandler(logging.FileHandler):
    """FileHandler that flushes after every emit for real-time log visibility."""
    def emit(self, record):
        super().emit(record)
        self.flush()


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now().astimezone().isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
        }

        for field in CONTEXT_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        return json.dumps(log_data, default=str)


class ClientLogger:
    """Keyword-context logger for client components.

    With no outputs enabled, records propagate to the standard logging
    hierarchy under "assistants.<component>" so applications keep control.
    With outputs enabled, handlers are created lazily on the first record
    and the JSONL file is a single append-only {component}.jsonl.
    """
    def __init__(
        self,
        component: str,
        log_dir: Optional[Path] = None,
        console_output: bool = False,
        level: str = "INFO",
        filename: str = None
    ):
        self.component = component
        self.log_dir = Path(log_dir) if log_dir else None
        self.console_output = console_output
        self.level = level
        self.filename = filename or f"{component}.jsonl"

        self._logger = None
        self._initialized = False
        self.log_file = None

    @property
    def owns_handlers(self) -> bool:
        return self.console_output or self.log_dir is not None

    def _ensure_initialized(self):
        if self._initialized:
            return

        if not self.owns_handlers:
            self._logger = logging.getLogger(f"assistants.{self.component}")
            self._logger.setLevel(getattr(logging, self.level.upper()))
            self._initialized = True
            return

        logger_name = f"assistants.{self.component}.{id(self)}"
        self._logger = logging.getLogger(logger_name)
        self._logger.setLevel(getattr(logging, self.level.upper()))
        self._logger.propagate = False

        if self.console_output:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
            self._logger.addHandler(console_handler)

        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            json_file = self.log_dir / self.filename
            json_handler = FlushingFileHandler(json_file, mode='a')
            json_handler.setFormatter(JSONFormatter())
            self._logger.addHandler(json_handler)
            self.log_file = json_file

        self._initialized = True

    @property
    def logger(self) -> logging.Logger:
        self._ensure_initialized()
        return self._logger

    def _log(self, level: str, message: str, **kwargs):
        reserved_params = {}
        for param in ['exc_info', 'stack_info', 'stacklevel', 'extra']:
            if param in kwargs:
                reserved_params[param] = kwargs.pop(param)

        extra = {
            'component': self.component,
            **kwargs
        }
        if 'extra' in reserved_params:
            extra.update(reserved_params.pop('extra'))

        self.logger.log(
            getattr(logging, level.upper()),
            message,
            extra=extra,
            **reserved_params
        )

    def debug(self, message: str, **kwargs):
        self._log('DEBUG', message, **kwargs)

    def info(self, message: str, **kwargs):
        self._log('INFO', message, **kwargs)

    def warning(self, message: str, **kwargs):
        self._log('WARNING', message, **kwargs)

    def error(self, message: str, **kwargs):
        self._log('ERROR', message, **kwargs)

    def close(self):
        if self._initialized and self._logger and self.owns_handlers:
            for handler in self._logger.handlers[:]:
                handler.close()
                self._logger.removeHandler(handler)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


def create_logger(component: str, config: Optional[ClientConfig] = None, **kwargs) -> ClientLogger:
    """Create a ClientLogger, taking outputs and level from config when given."""
    if config is not None:
        kwargs.setdefault('log_dir', config.log_dir)
        kwargs.setdefault('console_output', config.log_console)
        kwargs.setdefault('level', config.log_level)
    return ClientLogger(component, **kwargs)

"""
Structured logging for Numeric Edit.
Console logging by default, rotating log files when a log directory is
configured, and a mixin that prefixes messages with the owning class name.
"""
import logging
import logging.handlers
import json
from pathlib import Path
from typing import Optional, Dict, Any, Union
from enum import Enum, auto
from datetime import datetime
import uuid
class LogLevel(Enum):
    """Log levels accepted by ``set_log_level``."""
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
class LogCategory(Enum):
    """Categories attached to every record."""
    SYSTEM = auto()
    EDIT = auto()
    CONFIG = auto()
    USER_ACTION = auto()
class StructuredFormatter(logging.Formatter):
    """Formatter that appends structured context as JSON."""
    def __init__(self, include_json=True):
        super().__init__()
        self.include_json = include_json
    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat()
        basic_line = f"[{timestamp}] {record.levelname:8} {record.name}: {record.getMessage()}"
        structured_data = {}
        for key, value in record.__dict__.items():
            if key.startswith('field_') or key in ['category', 'session_id']:
                structured_data[key] = value
        structured_data['location'] = {
            'filename': record.filename,
            'line': record.lineno,
            'function': record.funcName
        }
        if structured_data and self.include_json:
            json_data = json.dumps(structured_data, default=str, ensure_ascii=False)
            return f"{basic_line} | {json_data}"
        return basic_line
class NumericEditLogger:
    """Logger wrapper that attaches a session id and category to each record."""
    def __init__(self, name: str = "numericedit", log_dir: Optional[Path] = None):
        self.name = name
        self.session_id = str(uuid.uuid4())[:8]
        self.log_dir = Path(log_dir) if log_dir is not None else None
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
        self._setup_loggers()
        self.debug("Numeric Edit logging initialized",
                   category=LogCategory.SYSTEM,
                   session_id=self.session_id,
                   log_dir=str(self.log_dir) if self.log_dir else None)
    def _setup_loggers(self):
        """Setup main logger and handlers."""
        self.logger = logging.getLogger(self.name)
        self.logger.setLevel(LogLevel.DEBUG.value)
        self.logger.handlers.clear()
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(StructuredFormatter(include_json=False))
        self.logger.addHandler(console_handler)
        if self.log_dir is None:
            return
        # File handler with rotation
        log_file = self.log_dir / f"{self.name}.log"
        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=5*1024*1024, backupCount=3, encoding="utf-8"
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(StructuredFormatter(include_json=True))
        self.logger.addHandler(file_handler)
        error_log_file = self.log_dir / f"{self.name}_errors.log"
        error_handler = logging.handlers.RotatingFileHandler(
            error_log_file, maxBytes=1024*1024, backupCount=3, encoding="utf-8"
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(StructuredFormatter(include_json=True))
        self.logger.addHandler(error_handler)
    def _log(self, level: int, message: str, category: Optional[Union[LogCategory, str]] = None,
             **kwargs):
        """Internal logging method adding session and category context."""
        if isinstance(category, LogCategory):
            category_name = category.name
        else:
            category_name = str(category).upper() if category else 'GENERAL'
        extra = {
            'session_id': self.session_id,
            'category': category_name
        }
        for key, value in kwargs.items():
            if not key.startswith('_'):
                extra[f'field_{key}'] = value
        self.logger.log(level, message, extra=extra)
    def debug(self, message: str, category: Optional[LogCategory] = None, **kwargs):
        self._log(LogLevel.DEBUG.value, message, category, **kwargs)
    def info(self, message: str, category: Optional[LogCategory] = None, **kwargs):
        self._log(LogLevel.INFO.value, message, category, **kwargs)
    def error(self, message: str, category: Optional[LogCategory] = None, **kwargs):
        self._log(LogLevel.ERROR.value, message, category, **kwargs)
    def log_edit_outcome(self, outcome: str, proposed_text: str, reason: Optional[str] = None,
                         **kwargs):
        """Log the outcome of one processed edit."""
        edit_data = {'outcome': outcome, 'proposed_text': proposed_text}
        if reason is not None:
            edit_data['reason'] = reason
        edit_data.update(kwargs)
        self._log(LogLevel.DEBUG.value, f"EDIT: {outcome}", LogCategory.EDIT, **edit_data)
    def log_user_action(self, action: str, details: Optional[Dict[str, Any]] = None):
        """Log user actions for debugging."""
        log_data = {'action': action}
        if details:
            log_data.update(details)
        self._log(LogLevel.INFO.value, f"USER ACTION: {action}",
                  LogCategory.USER_ACTION, **log_data)
    def set_log_level(self, level: Union[str, int, LogLevel]):
        """Set the logging level."""
        if isinstance(level, LogLevel):
            level = level.value
        elif isinstance(level, str):
            level = getattr(logging, level.upper())
        self.logger.setLevel(level)
        for handler in self.logger.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
                handler.setLevel(level)
        self.info(f"Log level set to: {logging.getLevelName(level)}")
# Global logger instance
_global_logger: Optional[NumericEditLogger] = None
def get_logger() -> NumericEditLogger:
    """Get the global logger instance."""
    global _global_logger
    if _global_logger is None:
        _global_logger = NumericEditLogger()
    return _global_logger
def setup_logger(name: str = "numericedit", log_dir: Optional[Path] = None) -> NumericEditLogger:
    """Set up and return the global logger."""
    global _global_logger
    _global_logger = NumericEditLogger(name, log_dir)
    return _global_logger
class LoggableMixin:
    """Mixin class to add logging capabilities to other classes."""
    def __init__(self):
        self._module_name = self.__class__.__name__
    @property
    def _logger(self) -> NumericEditLogger:
        return get_logger()
    def log_debug(self, message: str, **kwargs):
        self._logger.debug(f"[{self._module_name}] {message}", **kwargs)
    def log_user_action(self, action: str, details: Optional[Dict[str, Any]] = None):
        """Log user action tagged with the owning class."""
        action_details = {'module': self._module_name}
        if details:
            action_details.update(details)
        self._logger.log_user_action(action, action_details)

"""Structured error logging for cache and classification failures."""

import json
import logging
import logging.handlers
import traceback
import uuid
from datetime import UTC, datetime
from enum import Enum
from functools import cache
from typing import Any

from pydantic import BaseModel, Field

from addon_releases.config import Settings, get_settings


class ErrorSeverity(Enum):
    """Error severity levels."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"

    def to_log_level(self) -> int:
        """Convert severity to Python logging level."""
        return logging.getLevelName(self.value.upper())  # type: ignore[no-any-return]


class ErrorCategory(Enum):
    """Error categories for classification."""

    COMPUTE = "compute"
    STORAGE = "storage"
    SERIALIZATION = "serialization"
    CLASSIFICATION = "classification"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


class StructuredError(BaseModel):
    """Structured error model for consistent logging."""

    error_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    message: str
    category: ErrorCategory
    severity: ErrorSeverity
    cache_key: str | None = None
    addon: str | None = None
    error_code: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    traceback: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return self.model_dump(mode="json")


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        if hasattr(record, "structured_error"):
            log_data = record.structured_error
        else:
            log_data = {
                "timestamp": datetime.now(UTC).isoformat(),
                "level": record.levelname,
                "message": record.getMessage(),
                "module": record.module,
                "function": record.funcName,
                "line": record.lineno,
            }
        return json.dumps(log_data)


class StructuredLogger:
    """Logger for structured error logging."""

    def __init__(self, name: str, config: Settings | None = None) -> None:
        """Initialize structured logger."""
        self.name = name
        self.config = config or get_settings()
        self.logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        """Set up the logger with a rotating file handler."""
        logger = logging.getLogger(self.name)
        logger.setLevel(getattr(logging, self.config.logging.level))

        # Remove existing handlers to avoid duplicates
        logger.handlers.clear()

        log_dir = self.config.logging.log_dir
        log_dir.mkdir(exist_ok=True, parents=True)

        handler = logging.handlers.RotatingFileHandler(
            log_dir / f"{self.name}.log",
            maxBytes=self.config.logging.max_bytes,
            backupCount=self.config.logging.backup_count,
        )

        if self.config.logging.format == "json":
            handler.setFormatter(JSONFormatter())
        else:
            handler.setFormatter(
                logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
            )

        logger.addHandler(handler)
        return logger

    def log_error(self, error: StructuredError) -> None:
        """Log a structured error."""
        level = error.severity.to_log_level()

        if self.config.logging.format == "json":
            self.logger.log(level, error.message, extra={"structured_error": error.to_dict()})
            return

        message = (
            f"[{error.severity.value.upper()}] {error.message} | "
            f"Category: {error.category.value}"
        )
        if error.cache_key:
            message += f" | Key: {error.cache_key}"
        if error.addon:
            message += f" | Addon: {error.addon}"
        if error.error_code:
            message += f" | Code: {error.error_code}"
        if error.metadata:
            message += f" | Metadata: {json.dumps(error.metadata, default=str)}"

        self.logger.log(level, message)

    def create_error_from_exception(
        self,
        exception: BaseException,
        category: ErrorCategory,
        severity: ErrorSeverity | None = None,
        cache_key: str | None = None,
        addon: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> StructuredError:
        """Create a structured error from an exception."""
        return StructuredError(
            message=str(exception) or exception.__class__.__name__,
            category=category,
            severity=severity or ErrorSeverity.ERROR,
            cache_key=cache_key,
            addon=addon,
            error_code=exception.__class__.__name__,
            metadata=metadata or {},
            traceback="".join(traceback.format_exception(exception)),
        )

    def log_exception(
        self,
        exception: BaseException,
        category: ErrorCategory,
        severity: ErrorSeverity | None = None,
        **context: Any,
    ) -> StructuredError:
        """Build a structured error from an exception and log it."""
        error = self.create_error_from_exception(exception, category, severity, **context)
        self.log_error(error)
        return error


@cache
def get_logger(name: str = "addon_releases") -> StructuredLogger:
    """Get or create a logger instance."""
    return StructuredLogger(name)

"""
Logging for tickwindow.

structlog on top of stdlib ``logging``. Library modules bind a logger with
``structlog.get_logger(__name__)`` at import time; nothing is emitted
through stdlib handlers until LoggerFactory.configure() runs. Loading the
system config (get_system_config / reload_system_config) configures
logging from its ``logging:`` section.

Events logged by the library:
- DEBUG ``registry.registered``, ``config.defaults``, ``config.loaded``
- WARNING ``indicator.invalid_parameter``

The per-tick update path never logs.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Literal

import structlog
from pydantic import BaseModel, Field, PositiveInt

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_LOG_FILE = Path("logs/tickwindow.log")


class LoggingConfig(BaseModel):
    """``logging:`` section of the system config."""

    level: LogLevel = Field(default="INFO", description="Minimum console log level")
    format: Literal["console", "json"] = Field(default="console", description="Console output format")
    enable_file: bool = Field(default=False, description="Also write JSON lines to a rotating file")
    file_path: Path | None = Field(default=None, description="Log file (logs/tickwindow.log if None)")
    file_level: LogLevel = Field(default="WARNING", description="Minimum file log level")
    max_file_size_mb: PositiveInt = Field(default=10, description="Rotate after this many MB")
    backup_count: int = Field(default=3, ge=0, description="Rotated files to keep")


class LoggerFactory:
    """
    Configures structlog and hands out loggers.

    Example:
        LoggerFactory.configure(LoggingConfig(level="DEBUG", format="json"))
        logger = LoggerFactory.get_logger("my_app.stream")
        logger.info("stream.started", indicators=3)
    """

    _config: LoggingConfig | None = None
    _configured: bool = False

    @classmethod
    def configure(cls, config: LoggingConfig | None = None) -> None:
        """
        Route structlog through stdlib handlers.

        Args:
            config: Logging settings. If None, the ``logging`` section of the
                system config is used.
        """
        if config is None:
            # Deferred: config.py imports this module
            from tickwindow.system.config import get_system_config

            config = get_system_config().logging

        shared: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ]

        console_renderer: Any
        if config.format == "json":
            console_renderer = structlog.processors.JSONRenderer()
        else:
            console_renderer = structlog.dev.ConsoleRenderer()

        console = logging.StreamHandler(stream=sys.stdout)
        console.setLevel(config.level)
        console.setFormatter(structlog.stdlib.ProcessorFormatter(processor=console_renderer, foreign_pre_chain=shared))
        handlers: list[logging.Handler] = [console]
        root_level = logging.getLevelName(config.level)

        if config.enable_file:
            file_path = config.file_path or DEFAULT_LOG_FILE
            handlers.append(cls._file_handler(config, file_path, shared))
            root_level = min(root_level, logging.getLevelName(config.file_level))

        logging.basicConfig(level=root_level, handlers=handlers, force=True)

        processors: list[Any] = [*shared, structlog.processors.StackInfoRenderer()]
        if config.format == "json":
            processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.stdlib.ProcessorFormatter.wrap_for_formatter)

        structlog.configure(
            processors=processors,
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )

        cls._config = config
        cls._configured = True

    @staticmethod
    def _file_handler(config: LoggingConfig, file_path: Path, pre_chain: list[Any]) -> logging.Handler:
        """Rotating JSON-lines file handler."""
        file_path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            filename=str(file_path),
            maxBytes=config.max_file_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        handler.setLevel(config.file_level)
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=structlog.processors.JSONRenderer(),
                foreign_pre_chain=pre_chain,
            )
        )
        return handler

    @classmethod
    def get_logger(cls, name: str = "tickwindow") -> Any:
        """Logger bound to ``name``; configures from the system config on first use."""
        if not cls._configured:
            cls.configure()
        return structlog.get_logger(name)

    @classmethod
    def get_config(cls) -> LoggingConfig:
        """Active logging settings (defaults if not configured)."""
        return cls._config or LoggingConfig()

    @classmethod
    def is_configured(cls) -> bool:
        return cls._configured

    @classmethod
    def reset(cls) -> None:
        """Drop root handlers and structlog configuration (mainly for testing)."""
        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()
        root_logger.setLevel(logging.WARNING)
        cls._config = None
        cls._configured = False
        structlog.reset_defaults()

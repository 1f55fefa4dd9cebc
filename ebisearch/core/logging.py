"""
Centralized Logging Configuration.

All modules must use this logging setup. Do not create standalone loggers.
Configuration is loaded from config/settings/logging.yaml.

Records are written to stderr. Stdout is reserved for the results printed
by the CLI, so piping the output never mixes in diagnostics.

Structured fields in every record:
    timestamp   - ISO 8601 UTC timestamp
    level       - Log level (debug, info, warning, error, critical)
    logger      - Module path (e.g., ebisearch.client.transport)
    event       - Log message
    func_name   - Function that emitted the log
    lineno      - Line number in source file
    source      - Origin context, set explicitly (cli, internal)

Debug levels:
    Debug messages carry a numeric ``debug_level``. Only those whose level
    is at or below the --debugLevel threshold are emitted; higher ones are
    dropped by the ``debug_level_filter`` installed on the handler. The
    threshold is fixed per setup_logging call.

Usage:
    from ebisearch.core.logging import debug_message, get_logger, setup_logging

    setup_logging(level="DEBUG", debug_level=11)

    logger = get_logger(__name__)
    logger.info("Message", extra={"key": "value"})
    debug_message(logger, "fetch", "URL: http://...", 11)
"""

import logging
import sys
from collections.abc import Callable
from typing import Any

import structlog
from structlog.typing import Processor

from ebisearch.core.config import load_yaml_config

VALID_SOURCES = frozenset({
    "cli",
    "internal",
    "unknown",
})
"""
Recognized log source values, for documentation and validation.
Source is always set explicitly by the caller. Never guessed from logger names.
"""

_logging_config: dict[str, Any] | None = None


def _load_logging_config() -> dict[str, Any]:
    """
    Load logging configuration from config/settings/logging.yaml.

    Returns:
        Dictionary containing logging configuration

    Raises:
        FileNotFoundError: If logging.yaml does not exist
    """
    global _logging_config
    if _logging_config is None:
        _logging_config = load_yaml_config("logging.yaml")
    return _logging_config


def _get_logging_config() -> dict[str, Any]:
    """
    Get the cached logging configuration.

    Returns:
        Dictionary containing logging configuration
    """
    return _load_logging_config()


def level_for(output_level: int, debug_level: int = 0) -> str:
    """
    Map the CLI output and debug levels to a logging level name.

    Any positive debug level enables DEBUG. Otherwise output level 0 logs
    errors only, 1 warnings, 2 and above informational messages.
    """
    if debug_level > 0:
        return "DEBUG"
    if output_level <= 0:
        return "ERROR"
    if output_level == 1:
        return "WARNING"
    return "INFO"


def debug_level_filter(threshold: int) -> Callable[[logging.LogRecord], bool]:
    """
    Build a handler filter that drops debug events above ``threshold``.

    structlog hands its event dict to stdlib logging as the record message.
    Records without a ``debug_level`` field always pass.
    """

    def _filter(record: logging.LogRecord) -> bool:
        event = record.msg if isinstance(record.msg, dict) else {}
        level = event.get("debug_level")
        return level is None or level <= threshold

    return _filter


def setup_logging(
    level: str | None = None,
    format_type: str | None = None,
    enable_console: bool | None = None,
    debug_level: int = 0,
) -> None:
    """
    Configure structured logging for the client.

    Configuration is loaded from config/settings/logging.yaml.
    Parameters passed to this function override the YAML configuration.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Overrides config.
        format_type: Output format ('json' or 'console'). Overrides config.
        enable_console: Whether to enable stderr output. Overrides config.
        debug_level: Highest debug_level tag that is still emitted.
    """
    config = _get_logging_config()

    effective_level = level if level is not None else config["level"]
    effective_format = format_type if format_type is not None else config["format"]

    console_config = config["handlers"]["console"]
    effective_console_enabled = (
        enable_console if enable_console is not None
        else console_config["enabled"]
    )

    log_level = getattr(logging, effective_level.upper())

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
    ]

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if effective_format == "console":
        renderer: Processor = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    else:
        renderer = structlog.processors.JSONRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if effective_console_enabled:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.addFilter(debug_level_filter(debug_level))
        root_logger.addHandler(console_handler)

    logging.getLogger("httpx").setLevel(max(log_level, logging.WARNING))
    logging.getLogger("httpcore").setLevel(max(log_level, logging.WARNING))


def get_logger(name: str) -> Any:
    """
    Get a logger instance for the given name.

    Args:
        name: Logger name, typically __name__

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_with_source(logger: Any, source: str, level: str, message: str, **kwargs: Any) -> None:
    """
    Log a message with an explicit source.

    Args:
        logger: The logger instance
        source: Log source (cli, internal)
        level: Log level (debug, info, warning, error, critical)
        message: Log message
        **kwargs: Additional context fields

    Raises:
        AttributeError: If level is not a valid log level

    Example:
        log_with_source(logger, "cli", "info", "Request sent", url="http://...")
    """
    log_method = getattr(logger, level.lower())
    log_method(message, source=source, **kwargs)


def debug_message(logger: Any, function: str, message: str, level: int, **kwargs: Any) -> None:
    """
    Emit a debug message tagged with a numeric debug level.

    The message is shown only when --debugLevel is at least ``level``.

    Args:
        logger: The logger instance
        function: Name of the calling operation, shown as ``function``
        message: Log message
        level: Debug level of this message (1 = coarse, 32 = full dumps)
        **kwargs: Additional context fields
    """
    logger.debug(message, function=function, debug_level=level, **kwargs)

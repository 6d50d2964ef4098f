"""structlog setup for applications embedding the calculator.

The library itself only calls structlog.get_logger() and never configures
logging on import; applications (or tests) call configure_logging() once.
"""

import logging

import structlog


def configure_logging(level: str = "INFO", *, timestamps: bool = True) -> None:
    """Configure structlog with a console renderer.

    Args:
        level: Minimum log level name (DEBUG, INFO, WARNING, ...)
        timestamps: Prefix each line with an ISO timestamp

    Raises:
        ValueError: If level is not a known logging level name
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level}")

    processors: list[structlog.typing.Processor] = [structlog.processors.add_log_level]
    if timestamps:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
    processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )


__all__ = ["configure_logging"]

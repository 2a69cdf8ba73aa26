"""structlog configuration routed through Django's LOGGING setting.

Two output modes:
- Human (default): colored console output to stderr
- JSON (LOG_JSON=true): structured JSON lines to stderr
"""

import sys
from typing import Any

import structlog

SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def config_configure_structlog() -> None:
    """Configure structlog to hand events to the stdlib logging handlers.

    Returns:
        None: Configures structlog globally as a side effect.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    structlog.configure(
        processors=[
            *SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def config_build_logging(log_level: str, log_json: bool) -> dict[str, Any]:
    """Build the Django LOGGING dictConfig using structlog formatters.

    Args:
        log_level: Level name applied to the project loggers.
        log_json: Render JSON lines instead of console output.

    Returns:
        dict[str, Any]: Dictionary suitable for `logging.config.dictConfig`.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "structlog": {
                "()": structlog.stdlib.ProcessorFormatter,
                "processors": [
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    renderer,
                ],
                "foreign_pre_chain": SHARED_PROCESSORS,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "formatter": "structlog",
            },
        },
        "root": {"handlers": ["console"], "level": "WARNING"},
        "loggers": {
            "django": {"handlers": ["console"], "level": log_level, "propagate": False},
            "app": {"handlers": ["console"], "level": log_level, "propagate": False},
            "core": {"handlers": ["console"], "level": log_level, "propagate": False},
            "uvicorn": {"handlers": ["console"], "level": log_level, "propagate": False},
        },
    }

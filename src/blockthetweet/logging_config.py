"""Structured logging configuration using structlog.

Production renders JSON lines, development renders coloured console lines.
Prediction events carry the submitted tweet under ``text``; it is cut down
to a short preview before rendering so logs never hold full user content.
"""

import functools
import logging
import sys

import structlog
from structlog.types import EventDict, WrappedLogger

SERVICE_NAME = "blockthetweet"

# Chatty at INFO, useless per request
_QUIET_LOGGERS = ("asyncio", "httpx", "redis", "uvicorn.access")


def add_service_name(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    event_dict["app"] = SERVICE_NAME
    return event_dict


def shorten_text(
    logger: WrappedLogger, method_name: str, event_dict: EventDict, preview_chars: int = 32
) -> EventDict:
    """Replace ``text`` with a preview of at most ``preview_chars`` characters.

    The full length is kept as ``text_length``. A preview length of 0 drops
    the text entirely.
    """
    text = event_dict.get("text")
    if not isinstance(text, str):
        return event_dict

    event_dict["text_length"] = len(text)
    if preview_chars <= 0:
        del event_dict["text"]
    elif len(text) > preview_chars:
        event_dict["text"] = text[:preview_chars] + "..."
    return event_dict


def configure_logging(
    log_level: str = "INFO",
    environment: str = "development",
    text_preview_chars: int = 32,
) -> None:
    """Route structlog and stdlib logging through one stdout handler.

    Args:
        log_level: Logging level name
        environment: "production" selects JSON output
        text_preview_chars: How much of a tweet prediction events may log
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    json_output = environment.lower() == "production"

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_service_name,
        functools.partial(shorten_text, preview_chars=text_preview_chars),
    ]
    if json_output:
        processors.append(structlog.processors.format_exc_info)
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # uvicorn, redis and torch log through stdlib
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=processors)
    )
    handler.setLevel(level)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.get_logger(__name__).info(
        "Logging configured",
        log_level=log_level,
        environment=environment,
        renderer="json" if json_output else "console",
        text_preview_chars=text_preview_chars,
    )

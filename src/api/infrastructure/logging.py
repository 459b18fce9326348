"""Structlog configuration for the Podium API.

Events render as colored console lines in a terminal and as JSON lines
everywhere else. Every event carries the service name so directory events
can be told apart once logs are aggregated.
"""

import logging
import os
import sys

import structlog
from structlog.types import EventDict, Processor, WrappedLogger


def add_service_name(app_name: str) -> Processor:
    """Build a processor stamping each event with the service name.

    An explicit ``service`` key on the event wins.
    """

    def processor(
        logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        event_dict.setdefault("service", app_name)
        return event_dict

    return processor


def _wants_colors() -> bool:
    # FORCE_COLOR=1 enables colors in non-TTY environments (like Docker)
    force_color = os.environ.get("FORCE_COLOR", "").lower() in ("1", "true", "yes")
    return force_color or sys.stdout.isatty()


def configure_logging(app_name: str = "Podium API", debug: bool = False) -> None:
    """Configure structlog for the process.

    Args:
        app_name: Service name attached to every event
        debug: Emit debug-level probe events (lookups, listings) when True
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_service_name(app_name),
        structlog.processors.StackInfoRenderer(),
    ]

    if _wants_colors():
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if debug else logging.INFO
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

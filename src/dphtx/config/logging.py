"""structlog configuration for dphtx.

Two output modes:
- Human (default): console renderer to stderr, colored on a TTY
- JSON (log_json): Structured JSON lines to stderr

Output is routed through a handler on the ``dphtx`` logger, which does not
propagate. The root logger, its level and its handlers are left alone, so
an embedding host keeps its own logging setup.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "dphtx"
_HANDLER_MARK = "_dphtx_handler"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Configure structlog processors and the ``dphtx`` log handler.

    Stdlib loggers under ``dphtx`` are rendered through the same
    processor chain, so ``logging.getLogger(__name__)`` calls in the
    package come out structured too. Repeated calls replace the handler
    installed by the previous call instead of adding another.

    Args:
        verbose: Put the ``dphtx`` logger at DEBUG. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_MARK, True)

    package_logger = logging.getLogger(LOGGER_NAME)
    for existing in [h for h in package_logger.handlers if getattr(h, _HANDLER_MARK, False)]:
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    # The host owns the root logger and its handlers.
    package_logger.propagate = False

"""structlog configuration for projgen.

Two output modes:
- Human (default): colored console output to stderr
- JSON (--log-json): Structured JSON lines to stderr

Records from projgen itself and from local plugin modules (loaded as
``projgen_local_plugin_<stem>``) follow the ``-v``/``-q`` level. Everything
else, including jinja2 and pluggy, only reaches stderr at WARNING or above.
"""

from __future__ import annotations

import logging
import sys

import structlog

PROJGEN_LOGGER_PREFIX = "projgen"


class _ThirdPartyNoiseFilter(logging.Filter):
    """Drop sub-WARNING records from loggers outside projgen."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno >= logging.WARNING or record.name.startswith(
            PROJGEN_LOGGER_PREFIX
        )


def _projgen_level(*, verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_json: bool = False,
) -> None:
    """Configure structlog processors and output routing.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        quiet: Only ERROR+ from projgen. ``verbose`` wins when both are set.
        log_json: Use JSON renderer instead of console renderer. Tracebacks
            from ``exc_info`` (plugin load failures) become structured dicts.
    """
    projgen_level = _projgen_level(verbose=verbose, quiet=quiet)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    final_processors: list[structlog.types.Processor] = [
        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
    ]
    if log_json:
        final_processors += [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        final_processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

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
        processors=final_processors,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    handler.addFilter(_ThirdPartyNoiseFilter())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    # Local plugin loggers inherit from root, so root carries the projgen level.
    root_logger.setLevel(projgen_level)

    logging.getLogger(PROJGEN_LOGGER_PREFIX).setLevel(projgen_level)
    for noisy in ("jinja2", "pluggy"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

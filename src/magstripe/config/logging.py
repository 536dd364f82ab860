"""structlog configuration for magstripe.

Events go to stderr as console lines, or as JSON lines with --log-json.
Keys that could hold raw track input are stripped from every event,
whichever logger emitted it.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

RAW_DATA_KEYS = frozenset({"raw", "raw_data", "raw_service_code", "track"})


def drop_raw_data(
    _logger: Any, _method_name: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    """Remove raw card input from an event before rendering."""
    for key in RAW_DATA_KEYS.intersection(event_dict):
        del event_dict[key]
    return event_dict


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install a single stderr handler rendering structlog and stdlib records.

    Args:
        verbose: DEBUG for ``magstripe`` loggers; otherwise WARNING.
        log_json: JSON lines instead of console output.
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        drop_raw_data,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.UnicodeDecoder(),
    ]
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if log_json
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )

    structlog.configure(
        processors=[*processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=processors,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger("magstripe").setLevel(logging.DEBUG if verbose else logging.WARNING)

"""structlog configuration for dtneid.

Stdlib ``logging.getLogger(__name__)`` records from the parser, codec and
service modules are rendered by structlog on stderr, either as console
lines or (``--log-json``) as JSON objects. Every record carries the active
codec settings so a rejected or opaque payload can be read against the
encoding that produced it.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from dtneid.config.models import CodecConfig

LOGGER_NAME = "dtneid"


def _handler(shared: list[structlog.types.Processor], *, log_json: bool) -> logging.Handler:
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    return handler


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    codec: CodecConfig | None = None,
) -> None:
    """Route stdlib logging for ``dtneid.*`` through structlog.

    Args:
        verbose: DEBUG for ``dtneid.*`` (rejections, opaque pass-through);
            otherwise WARNING and above.
        log_json: JSON lines instead of console output.
        codec: Codec section bound as ``binary_format`` / ``canonical`` on
            every record.
    """
    structlog.contextvars.clear_contextvars()
    if codec is not None:
        structlog.contextvars.bind_contextvars(
            binary_format=str(codec.binary_format),
            canonical=codec.canonical,
        )

    shared: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(_handler(shared, log_json=log_json))
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)

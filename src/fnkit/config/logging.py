"""structlog rendering for fnkit's stdlib loggers.

fnkit modules log through ``logging.getLogger(__name__)`` with dotted
event names (``check.completed``) and structured fields passed via
``extra=``. :func:`configure_logging` attaches one structlog-formatted
handler to the ``fnkit`` logger; the root logger and other libraries'
handlers are left alone.

Two output modes:
- Human (default): console key=value lines
- JSON (``log_json``): one JSON object per event
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

from fnkit.config.models import LoggingConfig

PACKAGE_LOGGER = "fnkit"
HANDLER_NAME = "fnkit-structlog"

# ``extra=`` keys lifted into the event dict.
EVENT_FIELDS = ("rules", "failed", "position", "kind")


def _renderer(log_json: bool, stream: TextIO) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=stream.isatty())


def configure_logging(
    config: LoggingConfig | None = None,
    *,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Install (or replace) the fnkit handler and set the package level.

    Args:
        config: Verbosity and renderer choice. Defaults to :class:`LoggingConfig`.
        stream: Output stream. Defaults to ``sys.stderr`` at call time.

    Returns:
        The installed handler.
    """
    config = config or LoggingConfig()
    out = stream if stream is not None else sys.stderr

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.ExtraAdder(allow=EVENT_FIELDS),
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(config.log_json, out),
        ],
    )

    handler = logging.StreamHandler(out)
    handler.setFormatter(formatter)
    handler.set_name(HANDLER_NAME)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in [h for h in package_logger.handlers if h.get_name() == HANDLER_NAME]:
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if config.verbose else logging.WARNING)
    package_logger.propagate = False
    return handler

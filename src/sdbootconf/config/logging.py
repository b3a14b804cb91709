"""Log output for the sdbootconf CLI.

Library modules only call ``logging.getLogger(__name__)``; nothing is
printed until the CLI calls :func:`configure_logging`, which routes every
record through structlog to stderr:

- human (default): one console line per record
- ``--log-json``: one JSON object per record
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "sdbootconf"


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install a single structlog-formatted stderr handler on the root logger.

    ``-v`` lowers only the package logger to DEBUG (load/write traces);
    everything else stays at WARNING, which still shows timeout fallbacks.
    Calling this again replaces the handler instead of adding one.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)

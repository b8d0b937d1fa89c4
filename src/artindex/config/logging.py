"""structlog configuration for artindex.

Log events are dotted names, emitted by the layer that notices them:

- ``frontmatter.parse_failed`` (error): a file's YAML block did not decode;
  the file is skipped.
- ``source.missing`` (error): the article folder does not exist.
- ``index.write_failed`` (error): the JSON documents could not be written.
- per-file skip warnings, mirrored into ``ServiceResult.warnings``.
- ``index.written`` / ``index.built`` (debug/info): visible with ``-v``.

``IndexService.build`` binds ``source_dir`` as a context variable, so every
line logged during a run names the folder being indexed.

All output goes to stderr, as console lines by default or JSON lines with
``--log-json``.  stdout carries only the build summary.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "artindex"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Configure structlog processors and route all records to stderr.

    Args:
        verbose: Let ``artindex.*`` loggers emit DEBUG and INFO events.
            Otherwise only warnings and errors are shown.
        log_json: Render JSON lines instead of console lines.

    Calling it again replaces the previous handler.
    """
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

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    # Third-party libraries stay at WARNING even with -v.
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)

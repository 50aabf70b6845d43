"""Structured logging for fnkit.

fnkit never configures structlog globally. Each module gets a structlog
logger wrapped around a stdlib logger in the ``fnkit`` namespace, so the
host application's logging setup decides what happens to the events.
With no setup at all the stdlib default level filters out the DEBUG
events fnkit emits.

:func:`configure_logging` is a convenience for scripts and tests: it gives
the ``fnkit`` logger its own stderr handler rendering JSON or console
output through ``structlog.stdlib.ProcessorFormatter``.

Events emitted by the library:

- ``result.captured_fault``: ``capture()`` or ``@safe`` turned an
  exception into an ``Err``.
- ``result.panic``: ``Err.panic()`` is about to raise.
- ``memo.miss``: a memoized function ran for a new argument key.
"""

from __future__ import annotations

import contextlib
import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

    from structlog.typing import EventDict, Processor

__all__ = [
    'ROOT_LOGGER',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

ROOT_LOGGER = 'fnkit'

type LogHook = Callable[[dict[str, Any]], None]

_log_hooks: list[LogHook] = []


def _run_hooks(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    for hook in tuple(_log_hooks):
        with contextlib.suppress(Exception):
            hook(dict(event_dict))
    return event_dict


def _enrich() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        _run_hooks,
    ]


class _FnkitHandler(logging.StreamHandler):
    """Marks the handler installed by configure_logging."""


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Send fnkit events at ``level`` and above to stderr.

    Calling it again replaces the previous fnkit handler. Handlers added
    by the application, the root logger and other libraries are left as
    they are.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: JSON lines if True, human-readable console output if False.
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = _FnkitHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[structlog.stdlib.ExtraAdder(), *_enrich()],
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    logger = logging.getLogger(ROOT_LOGGER)
    for old in [h for h in logger.handlers if isinstance(h, _FnkitHandler)]:
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger for a module inside fnkit.

    Args:
        name: Logger name, normally ``__name__``. Defaults to ``fnkit``.
    """
    return structlog.wrap_logger(
        logging.getLogger(name or ROOT_LOGGER),
        processors=[
            structlog.stdlib.filter_by_level,
            *_enrich(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


def add_log_hook(hook: LogHook) -> None:
    """Call hook with a copy of every fnkit event that passes the level filter.

    A hook that raises is skipped for that event; logging carries on.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    _log_hooks.clear()

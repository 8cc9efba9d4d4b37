"""Structured logging for tryeither.

Every library logger is a structlog logger wrapping the stdlib logger of the
same name, so nothing is emitted until the host application (or
`configure_logging`) enables a level. tryeither itself only logs at DEBUG:

- ``try.fault_captured``: a Try computation raised and the fault was stored.
- ``either.filtered_to_bottom``: a filter rejected a payload.
- ``either.match_on_bottom``: `match` was attempted on Bottom.

Events from tryeither loggers carry a ``component`` key (``try_``,
``either``, ...). Foreign stdlib records go through the same formatter, so
the whole process renders uniformly.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any, TextIO

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

    type LogHook = Callable[[dict[str, Any]], None]

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

_PACKAGE = 'tryeither'

_log_hooks: list[LogHook] = []


def add_log_hook(hook: LogHook) -> None:
    """Register `hook` to receive a copy of every event dict that passes the level filter."""
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Unregister `hook`; unknown hooks are ignored."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    _log_hooks.clear()


def _run_hooks(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in tuple(_log_hooks):
        try:
            hook(event_dict.copy())
        except Exception:  # noqa: S112
            continue  # hooks never interrupt the processor chain
    return event_dict


def _tag_component(logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    name = getattr(logger, 'name', None) or ''
    if name.startswith(f'{_PACKAGE}.'):
        event_dict.setdefault('component', name.removeprefix(f'{_PACKAGE}.'))
    return event_dict


def _pre_chain() -> list[Any]:
    # Runs for structlog events and for foreign stdlib records alike.
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _tag_component,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _run_hooks,
    ]


def _formatter(json_output: bool) -> structlog.stdlib.ProcessorFormatter:
    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_pre_chain(),
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
    stream: TextIO | None = None,
) -> None:
    """Route structlog and stdlib logging through one root handler.

    Replaces the root logger's handlers. Hooks registered before or after
    this call keep working.

    Args:
        level: Root logging level ("DEBUG", "INFO", ...). Unknown names fall back to INFO.
        json_output: Render JSON lines; otherwise use structlog's console renderer.
        stream: Where the handler writes. Defaults to stderr.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_pre_chain(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(_formatter(json_output))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger backed by the stdlib logger `name`.

    The returned proxy binds lazily, so module-level loggers pick up a
    `configure_logging` call made after import.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )

"""Tests for logging configuration, hooks and library events."""

from __future__ import annotations

import io
import json
import logging
from typing import Any

import pytest

from tryeither import Bottom, BottomError, Right, Try
from tryeither._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)


@pytest.fixture(autouse=True)
def cleanup_hooks() -> None:
    """Clear log hooks before and after each test."""
    clear_log_hooks()
    yield
    clear_log_hooks()


@pytest.fixture(autouse=True)
def restore_root_logger() -> None:
    """Put the root logger back the way the test found it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def captured() -> list[dict[str, Any]]:
    """Configure DEBUG logging and collect every event."""
    events: list[dict[str, Any]] = []
    configure_logging(level='DEBUG', json_output=True)
    add_log_hook(events.append)
    return events


class TestLogHooks:
    """Tests for logging hooks functionality."""

    def test_hook_receives_log_events(self, captured: list[dict[str, Any]]) -> None:
        """Registered hooks receive log entry dicts."""
        get_logger('test').info('Test message', extra_field='extra_value')

        entries = [e for e in captured if e.get('event') == 'Test message']
        assert len(entries) == 1
        assert entries[0]['extra_field'] == 'extra_value'
        assert entries[0]['level'] == 'info'

    def test_remove_hook(self) -> None:
        """remove_log_hook() stops hook from being called."""
        calls: list[str] = []

        def hook(event_dict: dict[str, Any]) -> None:
            calls.append('called')

        configure_logging(level='DEBUG')
        add_log_hook(hook)

        logger = get_logger('test')
        logger.info('First')
        assert len(calls) == 1

        remove_log_hook(hook)
        logger.info('Second')
        assert len(calls) == 1

    def test_hook_exception_does_not_break_logging(self) -> None:
        """Exceptions in hooks don't prevent other hooks from running."""
        calls: list[str] = []

        def bad_hook(event_dict: dict[str, Any]) -> None:
            raise RuntimeError('Hook failed')

        def good_hook(event_dict: dict[str, Any]) -> None:
            calls.append('good')

        configure_logging(level='DEBUG', json_output=False)
        add_log_hook(bad_hook)
        add_log_hook(good_hook)

        get_logger('test').info('Test')
        assert calls == ['good']

    def test_json_output_to_stream(self) -> None:
        """Events render as JSON lines on the configured stream."""
        buf = io.StringIO()
        configure_logging(level='INFO', stream=buf)

        get_logger('tryeither.custom').info('hello', attempt=1)

        data = json.loads(buf.getvalue().strip().splitlines()[-1])
        assert data['event'] == 'hello'
        assert data['attempt'] == 1
        assert data['component'] == 'custom'

    def test_level_filters_events(self) -> None:
        """Events below the configured level never reach hooks."""
        events: list[dict[str, Any]] = []
        configure_logging(level='WARNING')
        add_log_hook(events.append)

        get_logger('test').debug('hidden')
        assert events == []


class TestLibraryEvents:
    """The library reports captured faults and Bottom transitions at DEBUG."""

    def test_fault_captured(self, captured: list[dict[str, Any]]) -> None:
        """Running a failing Try logs the captured fault."""
        Try(lambda: 1 // 0).run()

        entries = [e for e in captured if e.get('event') == 'try.fault_captured']
        assert len(entries) == 1
        assert entries[0]['error_type'] == 'ZeroDivisionError'
        assert entries[0]['component'] == 'try_'

    def test_filtered_to_bottom(self, captured: list[dict[str, Any]]) -> None:
        """A rejecting filter logs the collapse to Bottom."""
        Right(1).filter(lambda _: False)

        entries = [e for e in captured if e.get('event') == 'either.filtered_to_bottom']
        assert entries[0]['side'] == 'right'

    def test_match_on_bottom(self, captured: list[dict[str, Any]]) -> None:
        """Matching Bottom logs before raising."""
        with pytest.raises(BottomError):
            Bottom.match(right=str, left=str)

        assert any(e.get('event') == 'either.match_on_bottom' for e in captured)

"""Tests for structured logging of captured exceptions."""

from __future__ import annotations

import logging
from typing import Any

import pytest
from klaw_fx import get_logger, safe, try_catch


def _captured(caplog: pytest.LogCaptureFixture) -> list[dict[str, Any]]:
    return [
        r.msg
        for r in caplog.records
        if isinstance(r.msg, dict) and r.msg.get('event') == 'exception_captured'
    ]


class TestCaptureEvents:
    """try_catch and @safe log at DEBUG when they capture an exception."""

    def test_try_catch_logs_capture(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger='klaw_fx'):
            try_catch(int, 'abcd')

        events = _captured(caplog)
        assert len(events) == 1
        assert events[0]['exc_type'] == 'ValueError'
        assert events[0]['function'] == 'int'
        assert events[0]['level'] == 'debug'

    def test_safe_logs_capture(self, caplog: pytest.LogCaptureFixture) -> None:
        @safe
        def explode() -> None:
            raise KeyError('k')

        with caplog.at_level(logging.DEBUG, logger='klaw_fx'):
            explode()

        events = _captured(caplog)
        assert len(events) == 1
        assert events[0]['exc_type'] == 'KeyError'
        assert events[0]['function'].endswith('explode')

    def test_success_is_silent(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger='klaw_fx'):
            try_catch(int, '23')

        assert _captured(caplog) == []

    def test_silent_above_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger='klaw_fx'):
            try_catch(int, 'abcd')

        assert _captured(caplog) == []


class TestGetLogger:
    """Tests for get_logger()."""

    def test_bound_to_stdlib_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = get_logger('klaw_fx.test')
        with caplog.at_level(logging.INFO, logger='klaw_fx.test'):
            logger.info('hello', answer=42)

        records = [r.msg for r in caplog.records if isinstance(r.msg, dict)]
        assert records[-1]['event'] == 'hello'
        assert records[-1]['answer'] == 42
        assert records[-1]['logger'] == 'klaw_fx.test'

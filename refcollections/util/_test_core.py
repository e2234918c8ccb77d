import inspect
import logging

import pytest

from .core import trace, format_args, quoted, default


@trace
def _scale(x, *, factor=2):
    return x * factor

@trace
def _fail():
    raise ValueError('nope')


def test_format_args():
    sig = inspect.signature(_scale.__wrapped__)
    assert format_args(sig.bind(3, factor=4)) == '3, factor=4'
    assert format_args(sig.bind(3)) == '3'
    assert format_args(inspect.signature(_fail.__wrapped__).bind()) == ''

def test_trace_logs_calls(caplog):
    with caplog.at_level(logging.DEBUG, logger='trace'):
        assert _scale(3, factor=4) == 12

    messages = [r.getMessage() for r in caplog.records]
    assert any('entering' in m and '_scale(3, factor=4)' in m for m in messages)
    assert any('returned 12' in m for m in messages)

def test_trace_logs_exceptions(caplog):
    with caplog.at_level(logging.DEBUG, logger='trace'):
        with pytest.raises(ValueError):
            _fail()

    assert any('exception' in r.getMessage() for r in caplog.records)

def test_trace_is_silent_by_default(caplog):
    assert _scale(2) == 4
    assert not [r for r in caplog.records if r.name == 'trace']

def test_quoted():
    assert quoted('a') == '"a"'
    assert quoted(1) == '1'

def test_default():
    assert default(None, 3) == 3
    assert default(0, 3) == 0

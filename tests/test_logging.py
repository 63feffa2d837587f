"""Tests for the shared logging helpers."""
from unittest.mock import Mock
from aws_lambda_powertools import Logger

from cycle_engine.services import analytics, calendar, prediction
from cycle_engine.utils.logging import SERVICE_NAME, format_exception, log_rejected_record, logger

def _nested_failure():
    raise ValueError("bad date")

def test_format_exception_is_single_line():
    """Test that multi-frame tracebacks are flattened."""
    try:
        _nested_failure()
    except ValueError as e:
        line = format_exception(e)

    assert "\n" not in line
    assert "_nested_failure()" in line
    assert 'raise ValueError("bad date")' in line
    assert line.endswith("ValueError: bad date")

def test_format_exception_current_exception():
    """Test that True renders the exception being handled."""
    try:
        raise KeyError("startDate")
    except KeyError:
        line = format_exception(True)

    assert "\n" not in line
    assert "KeyError" in line

def test_format_exception_without_exception():
    """Test that nothing is rendered outside exception handling."""
    assert format_exception(None) is None
    assert format_exception(True) is None

def test_exception_logs_single_line_traceback(monkeypatch):
    """Test that logger.exception attaches a flattened traceback."""
    captured = {}

    def fake_exception(self, message, *args, **kwargs):
        captured["message"] = message
        captured.update(kwargs)

    monkeypatch.setattr(Logger, "exception", fake_exception)
    try:
        raise TypeError("Unsupported record type: list")
    except TypeError:
        logger.exception("Rejected period record of unsupported type")

    assert captured["message"] == "Rejected period record of unsupported type"
    assert captured["exc_info"] is False
    assert "\n" not in captured["extra"]["exception"]
    assert "TypeError: Unsupported record type: list" in captured["extra"]["exception"]

def test_service_loggers_share_service_name():
    """Test that every service logs under the engine's service name."""
    assert logger.service == SERVICE_NAME
    for module in (analytics, calendar, prediction):
        assert module.logger.service == SERVICE_NAME

def test_log_rejected_record():
    """Test the rejected record summary."""
    mock_logger = Mock()
    log_rejected_record(mock_logger, "period", iter(["Start date is required"]))

    extra = mock_logger.debug.call_args.kwargs["extra"]
    assert extra == {"record_kind": "period", "error_count": 1, "errors": ["Start date is required"]}

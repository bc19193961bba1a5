"""Tests for logging setup and the JSON log formatter."""

from __future__ import annotations

import json
import logging
import sys

from src.scripts import quote_car
from src.utils.observability import HANDLER_NAME, JSONFormatter, setup_logging


def _our_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if h.get_name() == HANDLER_NAME]


def test_cli_json_logs_go_to_stderr(monkeypatch, capsys) -> None:
    monkeypatch.delenv("QUOTE_BASE_RATE", raising=False)
    monkeypatch.delenv("QUOTE_CURRENCY", raising=False)
    monkeypatch.setenv("LOG_FORMAT", "json")
    monkeypatch.setenv("LOG_LEVEL", "INFO")

    assert quote_car.main([]) == 0
    captured = capsys.readouterr()

    assert captured.out == "The insurance for this car of the model year 2013 is: 10000\n"
    records = [json.loads(line) for line in captured.err.splitlines() if line.strip()]
    reported = [r for r in records if r["logger"] == "src.pricing.service"]
    assert len(reported) == 1
    assert reported[0]["level"] == "INFO"
    assert "10000" in reported[0]["message"]


def test_setup_logging_twice_keeps_one_handler_and_switches_format() -> None:
    setup_logging("WARNING", "text")
    setup_logging("DEBUG", "json")

    handlers = _our_handlers()
    assert len(handlers) == 1
    assert isinstance(handlers[0].formatter, JSONFormatter)
    assert logging.getLogger().level == logging.DEBUG


def test_json_formatter_includes_exception() -> None:
    try:
        raise ValueError("bad year")
    except ValueError:
        record = logging.LogRecord(
            name="src.pricing.quote",
            level=logging.ERROR,
            pathname=__file__,
            lineno=1,
            msg="pricing failed for %s",
            args=("City",),
            exc_info=sys.exc_info(),
        )

    payload = json.loads(JSONFormatter().format(record))
    assert payload["level"] == "ERROR"
    assert payload["logger"] == "src.pricing.quote"
    assert payload["message"] == "pricing failed for City"
    assert "ValueError: bad year" in payload["exception"]

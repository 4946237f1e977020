"""Test structlog configuration."""

import json

from calculator.utils.logging import get_logger, setup_logging


def test_get_logger_prefixes_name(capsys):
    """Test logger names are placed under calculator"""
    setup_logging("INFO", json_logs=True)

    get_logger("tests").info("hello")

    event = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert event["logger"] == "calculator.tests"


def test_json_logs_carry_key_values(capsys):
    """Test JSON output carries the bound key/values"""
    setup_logging("INFO", json_logs=True)

    get_logger("calculator.tests").warning("calculation failed", operation="divide", a=4, b=0)

    event = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert event["event"] == "calculation failed"
    assert event["level"] == "warning"
    assert event["operation"] == "divide"
    assert event["b"] == 0
    assert "timestamp" in event


def test_level_filters_lower_events(capsys):
    """Test events below the level are dropped"""
    setup_logging("WARNING")

    get_logger("tests").info("not shown")

    assert "not shown" not in capsys.readouterr().err

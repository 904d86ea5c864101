"""Tests for structlog setup in `core/logging.py`."""

import json
from unittest.mock import Mock

import pytest
import structlog

from core.config import LoggingConfig
from core.domain.models import Country, Location
from core.logging import configure_logging
from core.services.message_sender import MessageSender


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


def test_json_format_emits_json_lines(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(LoggingConfig(level="INFO", format="json"))
    geo = Mock()
    geo.by_ip.return_value = Location(country=Country.RUSSIA)
    localization = Mock()
    localization.locale.return_value = "Добро пожаловать"

    MessageSender(geo, localization).send({"x-real-ip": "172.0.32.11"})

    lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
    event = json.loads(lines[-1])
    assert event["event"] == "message_sent"
    assert event["country"] == "RUSSIA"
    assert event["level"] == "info"
    assert event["component"] == "message_sender"


def test_level_filters_lower_events(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(LoggingConfig(level="WARNING", format="json"))

    structlog.get_logger("test").info("should_not_appear")

    assert "should_not_appear" not in capsys.readouterr().err


def test_services_built_before_configuration_follow_it(
    capsys: pytest.CaptureFixture[str],
) -> None:
    geo = Mock()
    geo.by_ip.return_value = None
    localization = Mock()
    localization.locale.return_value = "Welcome"
    sender = MessageSender(geo, localization)

    configure_logging(LoggingConfig(level="INFO", format="json"))
    sender.send({"x-real-ip": "1"})

    captured = capsys.readouterr()
    lines = [line for line in captured.err.splitlines() if line.strip()]
    event = json.loads(lines[-1])
    assert event["event"] == "message_fallback_used"
    assert event["reason"] == "location_unresolved"
    assert event["component"] == "message_sender"
    assert "message_fallback_used" not in captured.out


def test_level_applies_to_existing_services(capsys: pytest.CaptureFixture[str]) -> None:
    sender = MessageSender(Mock(), Mock())

    configure_logging(LoggingConfig(level="WARNING", format="json"))
    sender.send({})

    captured = capsys.readouterr()
    assert "message_fallback_used" not in captured.err
    assert "message_fallback_used" not in captured.out

"""Tests for structured logging of display transitions and selection changes."""

import json
import logging
from unittest.mock import Mock

import pytest

from devex_app.logging.config import (
    configure_logging,
    get_selection_logger,
    get_state_logger,
    log_display_transition,
    log_selection_change,
)
from devex_app.models.currency import CurrencyCode
from devex_app.state.machine import eval_display
from devex_app.state.models import DisplayState, DisplayTrigger


class TestLoggingHelpers:
    """Test the standardized logging helpers against a mock logger."""

    def test_display_transition_fields(self):
        logger = Mock()

        log_display_transition(
            logger,
            from_state="hidden",
            to_state="shown",
            trigger="input",
            context={"currency": "USD"},
        )

        assert logger.bind.call_args.kwargs == {
            "from_state": "hidden",
            "to_state": "shown",
            "trigger": "input",
        }
        bound = logger.bind.return_value
        bound.bind.assert_called_once_with(context={"currency": "USD"})
        bound.bind.return_value.info.assert_called_once_with("Display state transition")

    def test_display_transition_without_context(self):
        logger = Mock()

        log_display_transition(logger, "shown", "hidden", "blur")

        logger.bind.return_value.info.assert_called_once_with("Display state transition")
        logger.bind.return_value.bind.assert_not_called()

    def test_selection_change_fields(self):
        logger = Mock()

        log_selection_change(logger, "USD", "EUR", 0.0035, recalculated=True)

        assert logger.bind.call_args.kwargs == {
            "from_code": "USD",
            "to_code": "EUR",
            "rate": 0.0035,
            "recalculated": True,
        }
        logger.bind.return_value.info.assert_called_once_with("Currency selection changed")


class TestConfiguredOutput:
    """Test the JSON output of the configured structlog pipeline."""

    @pytest.fixture(autouse=True)
    def json_logging(self, caplog):
        configure_logging(level="DEBUG", format_json=True, include_timestamp=False)
        caplog.set_level(logging.DEBUG)

    def _events(self, caplog, message):
        events = []
        for record in caplog.records:
            try:
                payload = json.loads(record.getMessage())
            except ValueError:
                continue
            if payload.get("event") == message:
                events.append(payload)
        return events

    def test_transition_logged_as_json(self, caplog, resolver):
        eval_display(
            DisplayState.HIDDEN, 100.0, CurrencyCode.USD, resolver, DisplayTrigger.ACTIVATE
        )

        events = self._events(caplog, "Display state transition")

        assert len(events) == 1
        assert events[0]["subsystem"] == "display_state"
        assert events[0]["from_state"] == "hidden"
        assert events[0]["to_state"] == "shown"
        assert events[0]["trigger"] == "activate"
        assert events[0]["context"]["currency"] == "USD"

    def test_bound_loggers(self, caplog):
        get_state_logger("tests.state").info("state probe")
        get_selection_logger("tests.selection").info("selection probe")

        assert self._events(caplog, "state probe")[0]["subsystem"] == "display_state"
        assert self._events(caplog, "selection probe")[0]["subsystem"] == "selection"

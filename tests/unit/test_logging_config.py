"""Unit tests for usbvendors.logging_config."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

import usbvendors
from usbvendors.config import LoggingSettings
from usbvendors.logging_config import ROOT_LOGGER, get_logger, setup_logging


@pytest.fixture(autouse=True)
def _reset_logging():
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
    root = logging.getLogger(ROOT_LOGGER)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
    root.propagate = True


class TestSetupLogging:
    def test_json_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(LoggingSettings(level="INFO", format="json"))
        get_logger("usbvendors.source").info("registry_loaded", vendors=3)

        captured = capsys.readouterr()
        assert captured.out == ""
        record = json.loads(captured.err.strip())
        assert record["event"] == "registry_loaded"
        assert record["vendors"] == 3
        assert record["level"] == "info"

    def test_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(LoggingSettings(level="ERROR", format="text"))
        get_logger("usbvendors.parser").warning("registry_unsorted")

        assert capsys.readouterr().err == ""


class TestUnconfigured:
    def test_info_events_are_silent(self, capsys: pytest.CaptureFixture[str]) -> None:
        get_logger("usbvendors.source").info("registry_loaded", vendors=3)
        get_logger("usbvendors.parser").debug("registry_parsed", vendors=3)

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    @pytest.mark.usefixtures("fresh_default")
    def test_first_lookup_writes_nothing_to_stdout(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert usbvendors.try_get_vendor_name(0x046D) == (True, "Logitech, Inc.")
        assert usbvendors.try_get_product_id_by_name(0x046D, "Webcam C200") == (True, 0x0802)

        assert capsys.readouterr().out == ""

"""Shared fixtures: a small in-memory registry and a file-backed copy of it."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from usbvendors.config import SourceSettings
from usbvendors.lookup import UsbIds
from usbvendors.parser import parse_usb_ids

if TYPE_CHECKING:
    from pathlib import Path

    from usbvendors.registry import UsbIdsData

SAMPLE_USB_IDS = (
    "#\n"
    "#\tList of USB ID's\n"
    "#\n"
    "# Version: 2024.01.30\n"
    "# Date:    2024-01-30 20:34:01\n"
    "#\n"
    "\n"
    "0001  Fry's Electronics\n"
    "\t7778  Counterfeit flash drive [Kingston]\n"
    "0003  Club Mac\n"
    "046d  Logitech, Inc.\n"
    "\t0802  Webcam C200\n"
    "\t\t00  Video Control\n"
    "\t0825  Webcam C270\n"
    "\tc52b  Unifying Receiver\n"
    "\tc534  Unifying Receiver\n"
    "1d6b  Linux Foundation\n"
    "\t0001  1.1 root hub\n"
    "\t0002  2.0 root hub\n"
    "\n"
    "C 00  (Defined at Interface level)\n"
    "C 01  Audio\n"
    "\t01  Control Device\n"
)


@pytest.fixture()
def sample_text() -> str:
    return SAMPLE_USB_IDS


@pytest.fixture()
def sample_data(sample_text: str) -> UsbIdsData:
    return parse_usb_ids(sample_text.splitlines())


@pytest.fixture()
def sample_path(tmp_path: Path, sample_text: str) -> Path:
    path = tmp_path / "usb.ids"
    path.write_text(sample_text, encoding="utf-8")
    return path


@pytest.fixture()
def sample_ids(sample_data: UsbIdsData) -> UsbIds:
    """UsbIds over the in-memory sample registry."""
    return UsbIds(lambda: sample_data)


@pytest.fixture(scope="session")
def bundled_ids() -> UsbIds:
    """UsbIds over the usb.ids shipped with the package."""
    return UsbIds(settings=SourceSettings())


@pytest.fixture()
def subprocess_env(tmp_path: Path) -> dict[str, str]:
    """Environment for CLI subprocesses, isolated from any user config."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("USBVENDORS__")}
    env["HOME"] = str(tmp_path)
    env["XDG_CONFIG_HOME"] = str(tmp_path / ".config")
    return env

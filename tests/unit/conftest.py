"""Unit-specific fixtures (no I/O beyond tmp_path)."""

from __future__ import annotations

import os

import pytest

import usbvendors


@pytest.fixture()
def fresh_default(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop the process-wide UsbIds so module-level calls build a new one."""
    for key in list(os.environ):
        if key.startswith("USBVENDORS__"):
            monkeypatch.delenv(key)
    monkeypatch.setattr(usbvendors, "_default", None)

"""Unit tests for the module-level functions in usbvendors."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

import usbvendors

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.usefixtures("fresh_default")


class TestModuleFunctions:
    def test_forward_lookups(self) -> None:
        assert usbvendors.try_get_vendor_name(0x046D) == (True, "Logitech, Inc.")
        assert usbvendors.try_get_product_name(0x046D, 0x0802) == (True, "Webcam C200")
        assert usbvendors.try_get_vendor_name(0x0000) == (False, "")

    def test_reverse_lookups(self) -> None:
        assert usbvendors.try_get_vendor_id_by_name("LOGITECH, INC.") == (True, 0x046D)
        assert usbvendors.try_get_product_id_by_name(0x046D, "webcam c200") == (True, 0x0802)

    def test_enumeration(self) -> None:
        vendors = list(usbvendors.get_vendors())
        assert (0x046D, "Logitech, Inc.") in vendors
        assert list(usbvendors.get_products(0x0003)) == []

    def test_metadata(self) -> None:
        assert usbvendors.version() == usbvendors.info().version
        assert usbvendors.date() is not None
        assert usbvendors.info().released_at is not None

    def test_default_is_shared(self) -> None:
        assert usbvendors.get_default() is usbvendors.get_default()

    def test_default_honours_env(self, monkeypatch: pytest.MonkeyPatch, sample_path: Path) -> None:
        monkeypatch.setenv("USBVENDORS__SOURCE__PATH", str(sample_path))
        assert usbvendors.version() == "2024.01.30"

    def test_missing_source_surfaces_error(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv("USBVENDORS__SOURCE__PATH", str(tmp_path / "nope.ids"))
        with pytest.raises(usbvendors.UsbIdsError) as exc_info:
            usbvendors.try_get_vendor_name(0x046D)
        assert exc_info.value.code == usbvendors.ErrorCode.SOURCE_UNAVAILABLE

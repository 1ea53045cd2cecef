"""USB vendor and product name lookups from the bundled usb.ids registry.

Module-level functions share one process-wide ``UsbIds``; its registry is
parsed on first use, configured from ``usbvendors.config.Settings``.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from usbvendors.config import Settings
from usbvendors.errors import ErrorCode, UsbIdsError
from usbvendors.lookup import UsbIds
from usbvendors.models import ProductEntry, RegistryInfo, VendorEntry
from usbvendors.parser import parse_usb_ids
from usbvendors.registry import UsbIdsData

if TYPE_CHECKING:
    from collections.abc import Iterator

_default: UsbIds | None = None
_default_lock = threading.Lock()


def get_default() -> UsbIds:
    """Return the process-wide ``UsbIds``, creating it on first call."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = UsbIds(settings=Settings().source)
    return _default


def version() -> str | None:
    return get_default().version()


def date() -> str | None:
    return get_default().date()


def info() -> RegistryInfo:
    return get_default().info()


def try_get_vendor_name(vendor_id: int) -> tuple[bool, str]:
    return get_default().try_get_vendor_name(vendor_id)


def try_get_product_name(vendor_id: int, product_id: int) -> tuple[bool, str]:
    return get_default().try_get_product_name(vendor_id, product_id)


def try_get_vendor_id_by_name(name: str) -> tuple[bool, int]:
    return get_default().try_get_vendor_id_by_name(name)


def try_get_product_id_by_name(vendor_id: int, name: str) -> tuple[bool, int]:
    return get_default().try_get_product_id_by_name(vendor_id, name)


def get_vendors() -> Iterator[tuple[int, str]]:
    return get_default().get_vendors()


def get_products(vendor_id: int) -> Iterator[tuple[int, str]]:
    return get_default().get_products(vendor_id)


__all__ = [
    "ErrorCode",
    "ProductEntry",
    "RegistryInfo",
    "UsbIds",
    "UsbIdsData",
    "UsbIdsError",
    "VendorEntry",
    "date",
    "get_default",
    "get_products",
    "get_vendors",
    "info",
    "parse_usb_ids",
    "try_get_product_id_by_name",
    "try_get_product_name",
    "try_get_vendor_id_by_name",
    "try_get_vendor_name",
    "version",
]

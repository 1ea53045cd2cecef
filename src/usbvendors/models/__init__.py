from __future__ import annotations

from usbvendors.models.registry import ProductEntry, RegistryInfo, VendorEntry

__all__ = [
    "VendorEntry",
    "ProductEntry",
    "RegistryInfo",
]

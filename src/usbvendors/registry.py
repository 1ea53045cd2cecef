"""Immutable indexed store built from usb.ids, plus the binary searches over it.

Vendors are kept in one flat tuple sorted by id. Products live in a second
shared tuple; each vendor owns a contiguous, id-sorted slice of it recorded as
``product_start``/``product_count``. Nothing here is mutated after the parser
hands it over, so reads need no locking.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from usbvendors.models.registry import RegistryInfo

if TYPE_CHECKING:
    from collections.abc import Sequence

    from usbvendors.models.registry import ProductEntry, VendorEntry


@dataclass(frozen=True, slots=True)
class UsbIdsData:
    vendors: tuple[VendorEntry, ...]
    products: tuple[ProductEntry, ...]
    version: str | None = None
    date: str | None = None

    @property
    def vendor_count(self) -> int:
        return len(self.vendors)

    @property
    def product_count(self) -> int:
        return len(self.products)

    def products_of(self, vendor: VendorEntry) -> tuple[ProductEntry, ...]:
        start = vendor.product_start
        return self.products[start : start + vendor.product_count]

    def info(self) -> RegistryInfo:
        return RegistryInfo(
            version=self.version,
            date=self.date,
            vendor_count=self.vendor_count,
            product_count=self.product_count,
        )


def binary_search_vendor(vendors: Sequence[VendorEntry], vendor_id: int) -> int:
    """Index of the vendor with ``vendor_id``, or -1."""
    lo, hi = 0, len(vendors) - 1
    while lo <= hi:
        mid = (lo + hi) >> 1
        mid_id = vendors[mid].id
        if mid_id == vendor_id:
            return mid
        if mid_id < vendor_id:
            lo = mid + 1
        else:
            hi = mid - 1
    return -1


def binary_search_product(
    products: Sequence[ProductEntry], start: int, count: int, product_id: int
) -> int:
    """Index into ``products`` of ``product_id`` within [start, start + count), or -1."""
    lo, hi = start, start + count - 1
    while lo <= hi:
        mid = (lo + hi) >> 1
        mid_id = products[mid].id
        if mid_id == product_id:
            return mid
        if mid_id < product_id:
            lo = mid + 1
        else:
            hi = mid - 1
    return -1

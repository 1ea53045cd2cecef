"""Thread-safe lookups over a lazily loaded usb.ids registry.

The registry is parsed on first use and shared immutably afterwards.
Reverse (name -> id) indexes are optional and only built when a reverse
lookup first needs them: one global map for vendors, one map per vendor for
products. Each scope is built exactly once, under its own lock, so building
one vendor's map never blocks another's.
"""

from __future__ import annotations

import threading
from functools import partial
from typing import TYPE_CHECKING

from usbvendors.config import SourceSettings
from usbvendors.logging_config import get_logger
from usbvendors.registry import binary_search_product, binary_search_vendor
from usbvendors.source import load_usb_ids

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from usbvendors.models.registry import RegistryInfo
    from usbvendors.registry import UsbIdsData

log = get_logger(__name__)


def _is_blank(name: str | None) -> bool:
    return name is None or not name.strip()


class UsbIds:
    """Vendor and product lookups backed by a ``UsbIdsData`` built on first access."""

    def __init__(
        self,
        loader: Callable[[], UsbIdsData] | None = None,
        *,
        settings: SourceSettings | None = None,
    ) -> None:
        if loader is None:
            loader = partial(load_usb_ids, settings or SourceSettings())
        self._loader = loader
        self._data: UsbIdsData | None = None
        self._data_lock = threading.Lock()

        self._vendor_name_to_id: dict[str, int] | None = None
        self._vendor_index_lock = threading.Lock()

        self._product_name_to_id: dict[int, dict[str, int]] = {}
        self._product_locks: dict[int, threading.Lock] = {}
        self._product_locks_guard = threading.Lock()

    # ------------------------------------------------------------------
    # Store
    # ------------------------------------------------------------------

    @property
    def data(self) -> UsbIdsData:
        """The parsed registry. The first caller loads it; racing callers wait for that load."""
        data = self._data
        if data is not None:
            return data
        with self._data_lock:
            if self._data is None:
                # A failed load leaves _data unset so a later call can retry
                self._data = self._loader()
            return self._data

    @property
    def is_loaded(self) -> bool:
        return self._data is not None

    def version(self) -> str | None:
        return self.data.version

    def date(self) -> str | None:
        return self.data.date

    def info(self) -> RegistryInfo:
        return self.data.info()

    # ------------------------------------------------------------------
    # Forward lookups
    # ------------------------------------------------------------------

    def find_vendor_name(self, vendor_id: int) -> str | None:
        vendors = self.data.vendors
        idx = binary_search_vendor(vendors, vendor_id)
        if idx < 0:
            return None
        return vendors[idx].name

    def find_product_name(self, vendor_id: int, product_id: int) -> str | None:
        data = self.data
        idx = binary_search_vendor(data.vendors, vendor_id)
        if idx < 0:
            return None
        vendor = data.vendors[idx]
        product_idx = binary_search_product(
            data.products, vendor.product_start, vendor.product_count, product_id
        )
        if product_idx < 0:
            return None
        return data.products[product_idx].name

    def try_get_vendor_name(self, vendor_id: int) -> tuple[bool, str]:
        name = self.find_vendor_name(vendor_id)
        return (name is not None, name or "")

    def try_get_product_name(self, vendor_id: int, product_id: int) -> tuple[bool, str]:
        name = self.find_product_name(vendor_id, product_id)
        return (name is not None, name or "")

    def get_vendors(self) -> Iterator[tuple[int, str]]:
        """Yield ``(vendor_id, name)`` in registry order. Each call starts over."""
        for vendor in self.data.vendors:
            yield vendor.id, vendor.name

    def get_products(self, vendor_id: int) -> Iterator[tuple[int, str]]:
        """Yield ``(product_id, name)`` for one vendor; nothing if the vendor is unknown."""
        data = self.data
        idx = binary_search_vendor(data.vendors, vendor_id)
        if idx < 0:
            return
        for product in data.products_of(data.vendors[idx]):
            yield product.id, product.name

    # ------------------------------------------------------------------
    # Reverse lookups
    # ------------------------------------------------------------------

    def _vendor_index(self) -> dict[str, int]:
        index = self._vendor_name_to_id
        if index is not None:
            return index
        with self._vendor_index_lock:
            if self._vendor_name_to_id is None:
                built: dict[str, int] = {}
                for vendor in self.data.vendors:
                    built.setdefault(vendor.name.casefold(), vendor.id)
                log.debug("reverse_index_built", scope="vendors", entries=len(built))
                self._vendor_name_to_id = built
            return self._vendor_name_to_id

    def _product_lock(self, vendor_id: int) -> threading.Lock:
        with self._product_locks_guard:
            lock = self._product_locks.get(vendor_id)
            if lock is None:
                lock = self._product_locks[vendor_id] = threading.Lock()
            return lock

    def _product_index(self, vendor_idx: int) -> dict[str, int]:
        data = self.data
        vendor = data.vendors[vendor_idx]
        index = self._product_name_to_id.get(vendor.id)
        if index is not None:
            return index
        with self._product_lock(vendor.id):
            index = self._product_name_to_id.get(vendor.id)
            if index is None:
                index = {}
                for product in data.products_of(vendor):
                    index.setdefault(product.name.casefold(), product.id)
                log.debug(
                    "reverse_index_built",
                    scope="products",
                    vendor_id=f"{vendor.id:04x}",
                    entries=len(index),
                )
                self._product_name_to_id[vendor.id] = index
            return index

    def find_vendor_id_by_name(self, name: str) -> int | None:
        """Case-insensitive vendor name lookup; the first vendor with a given name wins."""
        if _is_blank(name):
            return None
        return self._vendor_index().get(name.casefold())

    def find_product_id_by_name(self, vendor_id: int, name: str) -> int | None:
        """Case-insensitive product name lookup scoped to one vendor."""
        if _is_blank(name):
            return None
        idx = binary_search_vendor(self.data.vendors, vendor_id)
        if idx < 0:
            return None
        return self._product_index(idx).get(name.casefold())

    def try_get_vendor_id_by_name(self, name: str) -> tuple[bool, int]:
        vendor_id = self.find_vendor_id_by_name(name)
        return (vendor_id is not None, vendor_id or 0)

    def try_get_product_id_by_name(self, vendor_id: int, name: str) -> tuple[bool, int]:
        product_id = self.find_product_id_by_name(vendor_id, name)
        return (product_id is not None, product_id or 0)

"""Single-pass parser for the usb.ids text format.

Layout of the file::

    # Version: 2025.07.26
    # Date:    2025-07-26 20:34:01
    046d  Logitech, Inc.
    <TAB>0802  Webcam C200
    <TAB><TAB>01  interface line (ignored)

Only the vendor and product levels are kept. Anything that does not match is
skipped; a bad line never aborts the parse.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from usbvendors.logging_config import get_logger
from usbvendors.models.registry import ProductEntry, VendorEntry
from usbvendors.registry import UsbIdsData

if TYPE_CHECKING:
    from collections.abc import Iterable

log = get_logger(__name__)

_VERSION_MARKER = "# Version:"
_DATE_MARKER = "# Date:"
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# "hhhh<whitespace>name", optionally preceded by whitespace
_ENTRY_RE = re.compile(r"\s*([0-9A-Fa-f]{4})\s+(\S.*)")


@dataclass(slots=True)
class _VendorBuilder:
    id: int
    name: str
    product_start: int

    def close(self, product_end: int) -> VendorEntry:
        return VendorEntry(
            id=self.id,
            name=self.name,
            product_start=self.product_start,
            product_count=product_end - self.product_start,
        )


def _parse_entry(line: str, pos: int = 0) -> tuple[int, str] | None:
    match = _ENTRY_RE.match(line, pos)
    if match is None:
        return None
    return int(match.group(1), 16), match.group(2).rstrip()


def parse_usb_ids(lines: Iterable[str]) -> UsbIdsData:
    """Build a ``UsbIdsData`` from the lines of a usb.ids file."""
    vendors: list[VendorEntry] = []
    products: list[ProductEntry] = []
    version: str | None = None
    date: str | None = None
    seen_version = seen_date = False
    current: _VendorBuilder | None = None
    skipped = 0

    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line:
            continue

        if line[0] == "#":
            if not seen_version and line.startswith(_VERSION_MARKER):
                seen_version = True
                version = line[len(_VERSION_MARKER) :].strip() or None
            elif not seen_date and line.startswith(_DATE_MARKER):
                seen_date = True
                date = line[len(_DATE_MARKER) :].strip() or None
            continue

        if line[0] == "\t":
            if line[1:2] == "\t":
                continue  # interface/class detail
            if current is None:
                skipped += 1
                continue
            entry = _parse_entry(line, 1)
            if entry is None:
                skipped += 1
                continue
            products.append(ProductEntry(id=entry[0], name=entry[1]))
            continue

        if line[0] in _HEX_DIGITS and len(line) >= 6:
            entry = _parse_entry(line)
            if entry is None:
                skipped += 1
                continue
            if current is not None:
                vendors.append(current.close(len(products)))
            current = _VendorBuilder(id=entry[0], name=entry[1], product_start=len(products))

    if current is not None:
        vendors.append(current.close(len(products)))

    if not _is_sorted(vendors, products):
        log.warning("registry_unsorted", vendors=len(vendors), products=len(products))
        vendors, products = _normalize(vendors, products)

    log.debug(
        "registry_parsed",
        vendors=len(vendors),
        products=len(products),
        skipped_lines=skipped,
        version=version,
    )
    return UsbIdsData(
        vendors=tuple(vendors),
        products=tuple(products),
        version=version,
        date=date,
    )


def _is_sorted(vendors: list[VendorEntry], products: list[ProductEntry]) -> bool:
    """True if vendor ids and each vendor's product ids are strictly ascending."""
    prev_vendor = -1
    for vendor in vendors:
        if vendor.id <= prev_vendor:
            return False
        prev_vendor = vendor.id
        prev_product = -1
        for i in range(vendor.product_start, vendor.product_start + vendor.product_count):
            if products[i].id <= prev_product:
                return False
            prev_product = products[i].id
    return True


def _normalize(
    vendors: list[VendorEntry], products: list[ProductEntry]
) -> tuple[list[VendorEntry], list[ProductEntry]]:
    """Sort out-of-order input so binary search holds; first occurrence of an id wins."""
    seen: set[int] = set()
    out_vendors: list[VendorEntry] = []
    out_products: list[ProductEntry] = []

    # sorted() is stable, so equal ids keep source order and the first is kept
    for vendor in sorted(vendors, key=lambda v: v.id):
        if vendor.id in seen:
            continue
        seen.add(vendor.id)

        owned = products[vendor.product_start : vendor.product_start + vendor.product_count]
        start = len(out_products)
        seen_products: set[int] = set()
        for product in sorted(owned, key=lambda p: p.id):
            if product.id in seen_products:
                continue
            seen_products.add(product.id)
            out_products.append(product)

        out_vendors.append(
            VendorEntry(
                id=vendor.id,
                name=vendor.name,
                product_start=start,
                product_count=len(out_products) - start,
            )
        )
    return out_vendors, out_products

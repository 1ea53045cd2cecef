"""Smoke test: ``python -m usbvendors``.

Exercises each public lookup against the configured registry and prints one
``[ OK ]``/``[FAIL]`` line per check. The exit status is the failure count.
"""

from __future__ import annotations

import sys

from usbvendors.config import Settings
from usbvendors.errors import UsbIdsError
from usbvendors.logging_config import ROOT_LOGGER, get_logger, setup_logging
from usbvendors.lookup import UsbIds

log = get_logger(ROOT_LOGGER)

SMOKE_VENDOR_ID = 0x03E7
SMOKE_PRODUCT_ID = 0x2150


class _Checker:
    def __init__(self) -> None:
        self.failures = 0

    def check(self, condition: bool, message: str) -> None:
        if condition:
            print(f"[ OK ] {message}")
        else:
            print(f"[FAIL] {message}")
            self.failures += 1


def run_smoke_test(ids: UsbIds) -> int:
    """Run the checks and return the number of failures."""
    checker = _Checker()
    print(f"usb.ids Version: {ids.version() or '<unknown>'}")
    print(f"usb.ids Date:    {ids.date() or '<unknown>'}\n")

    found, vendor_name = ids.try_get_vendor_name(SMOKE_VENDOR_ID)
    checker.check(found, f"Vendor 0x{SMOKE_VENDOR_ID:04X} should exist")
    if found:
        print(f"Vendor 0x{SMOKE_VENDOR_ID:04X} = {vendor_name!r}")

    found, product_name = ids.try_get_product_name(SMOKE_VENDOR_ID, SMOKE_PRODUCT_ID)
    checker.check(
        found,
        f"Product 0x{SMOKE_PRODUCT_ID:04X} under vendor 0x{SMOKE_VENDOR_ID:04X} should exist",
    )
    if found:
        print(f"Product 0x{SMOKE_PRODUCT_ID:04X} = {product_name!r}")

    # Reverse lookups use the forward results so they track whatever names the data holds
    if vendor_name.strip():
        found, vendor_id = ids.try_get_vendor_id_by_name(vendor_name)
        checker.check(
            found and vendor_id == SMOKE_VENDOR_ID,
            f"Reverse vendor lookup should match 0x{SMOKE_VENDOR_ID:04X}",
        )
    if product_name.strip():
        found, product_id = ids.try_get_product_id_by_name(SMOKE_VENDOR_ID, product_name)
        checker.check(
            found and product_id == SMOKE_PRODUCT_ID,
            f"Reverse product lookup should match 0x{SMOKE_PRODUCT_ID:04X}",
        )

    first = next(ids.get_vendors(), None)
    if first is not None:
        next(ids.get_products(first[0]), None)
    checker.check(first is not None, "get_vendors should enumerate at least one vendor")
    return checker.failures


def main() -> int:
    settings = Settings()
    setup_logging(settings.logging)
    ids = UsbIds(settings=settings.source)

    try:
        failures = run_smoke_test(ids)
    except UsbIdsError as exc:
        log.error("smoke_test_aborted", code=exc.code.value, error=exc.message)
        print(f"Unhandled error: {exc.message}")
        failures = 1

    if failures:
        print(f"\nSmoke test completed with {failures} failure(s).")
    else:
        print("\nSmoke test passed.")
    return failures


if __name__ == "__main__":
    sys.exit(main())

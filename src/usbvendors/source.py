"""Locating and reading the usb.ids registry text."""

from __future__ import annotations

from importlib import resources
from pathlib import Path
from typing import TYPE_CHECKING

from usbvendors.errors import ErrorCode, UsbIdsError
from usbvendors.logging_config import get_logger
from usbvendors.parser import parse_usb_ids

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

    from usbvendors.config import SourceSettings
    from usbvendors.registry import UsbIdsData

log = get_logger(__name__)

BUNDLED_RESOURCE = "data/usb.ids"


def _bundled_path() -> Traversable:
    return resources.files("usbvendors").joinpath(BUNDLED_RESOURCE)


def load_usb_ids(settings: SourceSettings) -> UsbIdsData:
    """Read and parse the configured registry.

    Raises ``UsbIdsError(SOURCE_UNAVAILABLE)`` if the file is missing or
    unreadable. Nothing is returned in that case, not even a partial registry.
    The encoding name is already validated by ``SourceSettings``.
    """
    source = Path(settings.path).expanduser() if settings.path else _bundled_path()
    try:
        with source.open("r", encoding=settings.encoding, errors=settings.errors) as f:
            data = parse_usb_ids(f)
    except (OSError, UnicodeDecodeError) as exc:
        log.error("registry_source_unavailable", source=str(source), error=str(exc))
        raise UsbIdsError(
            ErrorCode.SOURCE_UNAVAILABLE,
            f"usb.ids registry could not be read from {source}: {exc}",
        ) from exc

    log.info(
        "registry_loaded",
        source=str(source),
        vendors=data.vendor_count,
        products=data.product_count,
        version=data.version,
    )
    return data

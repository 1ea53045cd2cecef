from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from pydantic import BaseModel, field_validator

# usb.ids header, e.g. "# Date:    2025-07-26 20:34:01"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True, slots=True)
class VendorEntry:
    """Single vendor line; owns products[product_start:product_start + product_count]."""

    id: int
    name: str
    product_start: int
    product_count: int


@dataclass(frozen=True, slots=True)
class ProductEntry:
    id: int
    name: str


class RegistryInfo(BaseModel):
    """Summary of a loaded registry, as reported by ``usbvendors.info()``."""

    version: str | None
    date: str | None
    vendor_count: int
    product_count: int

    @field_validator("version", "date")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v

    @property
    def released_at(self) -> datetime | None:
        """The header date as an aware UTC datetime, or None if absent or unparseable."""
        if self.date is None:
            return None
        try:
            return datetime.strptime(self.date, _DATE_FORMAT).replace(tzinfo=UTC)
        except ValueError:
            return None

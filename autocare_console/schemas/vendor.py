"""
Pydantic schemas for Vendor / Supplier.
"""
from typing import Optional, Union

from pydantic import field_validator

from autocare_console.schemas.common import CamelModel


class VendorDto(CamelModel):
    """Schema for supplier records."""
    vendor_id: Optional[int] = None
    name: str = ""
    gstno: str = ""
    address: str = ""
    mobile_number: str = ""
    pan_no: str = ""
    spare_brand: str = ""

    @field_validator("mobile_number", mode="before")
    @classmethod
    def mobile_as_text(cls, value: Union[int, str, None]) -> str:
        # Stored as a number by the backend
        return "" if value is None else str(value)

    @field_validator("spare_brand", mode="before")
    @classmethod
    def brand_or_blank(cls, value: Optional[str]) -> str:
        return value or ""

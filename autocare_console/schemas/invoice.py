"""
Pydantic schemas for invoices.
"""
from typing import Optional, Union

from autocare_console.schemas.common import CamelModel


class BillRow(CamelModel):
    id: Optional[int] = None
    s_no: int = 0
    spare_no: str = ""
    spare_name: str = ""
    manufacturer: str = ""
    quantity: Union[float, str] = 0
    rate: Union[float, str] = 0
    discount_percent: Union[float, str] = 0
    discount_amt: float = 0
    cgst_percent: float = 0
    cgst_amt: float = 0
    sgst_percent: float = 0
    sgst_amt: float = 0
    taxable: float = 0
    total: float = 0
    amount: float = 0


class InvoiceData(CamelModel):
    """Schema for invoice responses."""
    id: int
    invoice_number: str = ""
    inv_date: str = ""
    customer_name: str = ""
    customer_address: str = ""
    customer_mobile: str = ""
    adhar_no: str = ""
    gstin: str = ""
    vehicle_no: str = ""
    total_amount: float = 0
    items: list[BillRow] = []

"""
Pydantic schemas for quotations.
"""
from typing import Optional, Union

from autocare_console.schemas.common import CamelModel, FormNumber


class QuotationLine(CamelModel):
    id: Optional[int] = None
    line_no: int = 0
    quantity: FormNumber = 0
    unit_price: FormNumber = 0
    discount_percent: FormNumber = 0
    discount_amt: float = 0
    final_amount: float = 0

    def priced(self, line_no: int):
        """Copy numbered and with the discount and final amount worked out."""
        gross = float(self.quantity) * float(self.unit_price)
        discount = round(gross * float(self.discount_percent or 0) / 100, 2)
        return self.model_copy(
            update={"line_no": line_no, "discount_amt": discount, "final_amount": round(gross - discount, 2)}
        )


class PartLine(QuotationLine):
    part_name: str = ""
    part_number: Union[int, str] = ""
    manufacturer: str = ""


class LabourLine(QuotationLine):
    name: str = ""


class QuotationUpdate(CamelModel):
    """Customer details editable on a quotation."""
    quotation_number: Optional[str] = None
    quotation_date: str = ""
    customer_name: str = ""
    customer_address: str = ""
    customer_mobile: Optional[str] = None
    customer_email: Optional[str] = None
    vehicle_number: Optional[str] = None


class Quotation(QuotationUpdate):
    """Schema for quotation responses."""
    id: int
    part_lines: list[PartLine] = []
    labour_lines: list[LabourLine] = []

    @property
    def total(self) -> float:
        return sum(line.final_amount for line in self.part_lines) + sum(
            line.final_amount for line in self.labour_lines
        )

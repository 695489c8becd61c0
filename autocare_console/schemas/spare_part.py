"""
Pydantic schemas for spare parts and stock transactions.
"""
import enum
from typing import Optional, Union

from pydantic import Field

from autocare_console.schemas.common import CamelModel, FormInt, FormNumber


class TransactionType(str, enum.Enum):
    """Stock movement direction."""
    CREDIT = "CREDIT"
    DEBIT = "DEBIT"


class SparePart(CamelModel):
    """Schema for spare part records."""
    spare_part_id: Optional[Union[int, str]] = None
    part_name: str = ""
    description: str = ""
    manufacturer: str = ""
    part_number: Union[int, str] = ""
    price: FormNumber = 0
    buying_price: FormNumber = 0
    sgst: FormNumber = Field(0, alias="sGST")
    cgst: FormNumber = Field(0, alias="cGST")
    total_gst: FormNumber = Field(0, alias="totalGST")
    quantity: FormInt = 0
    update_at: Optional[str] = None
    photo: Optional[str] = None


class CreateTransaction(CamelModel):
    """Schema for recording a spare-part transaction."""
    vehicle_reg_id: Optional[FormInt] = None
    part_number: Union[int, str] = ""
    part_name: str = ""
    manufacturer: str = ""
    quantity: FormInt = 1
    amount: FormNumber = 0
    total: FormNumber = 0
    transaction_type: str = TransactionType.DEBIT.value
    bill_no: FormInt = 1
    spare_part_transaction_id: Optional[int] = None
    cgst: FormNumber = 0
    sgst: FormNumber = 0


class Transaction(CreateTransaction):
    """Schema for transaction responses."""
    description: str = ""
    price: FormNumber = 0
    update_at: Optional[str] = None


class TransactionFilter(CamelModel):
    transaction_type: Optional[TransactionType] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None

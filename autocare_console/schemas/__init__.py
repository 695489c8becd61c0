"""
Pydantic schemas for request/response validation.
"""
from autocare_console.schemas.vehicle import (
    VehicleBase, VehicleCreate, VehicleUpdate, Vehicle, VehicleFilter, VehicleStatus,
)
from autocare_console.schemas.spare_part import (
    SparePart, CreateTransaction, Transaction, TransactionFilter, TransactionType,
)
from autocare_console.schemas.vendor import VendorDto
from autocare_console.schemas.job_card import JobOptionFormData, JobCard, JobType
from autocare_console.schemas.service import ServiceFormData, Service
from autocare_console.schemas.quotation import (
    Quotation, QuotationUpdate, QuotationLine, PartLine, LabourLine,
)
from autocare_console.schemas.invoice import InvoiceData, BillRow
from autocare_console.schemas.user import (
    SignInData, SignUpData, ForgetPassword, VerifyEmail, UpdatePasswordData,
    Token, DecodedToken, ConsoleUser,
)

__all__ = [
    "VehicleBase", "VehicleCreate", "VehicleUpdate", "Vehicle", "VehicleFilter", "VehicleStatus",
    "SparePart", "CreateTransaction", "Transaction", "TransactionFilter", "TransactionType",
    "VendorDto",
    "JobOptionFormData", "JobCard", "JobType",
    "ServiceFormData", "Service",
    "Quotation", "QuotationUpdate", "QuotationLine", "PartLine", "LabourLine",
    "InvoiceData", "BillRow",
    "SignInData", "SignUpData", "ForgetPassword", "VerifyEmail", "UpdatePasswordData",
    "Token", "DecodedToken", "ConsoleUser",
]

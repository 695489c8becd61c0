"""
Submit-time form checks.

Forms are validated before anything goes to the backend. A check returns a
list of ``FieldError``; an empty list means the draft may be submitted.
"""
import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping

from autocare_console.errors import ValidationFailed
from autocare_console.schemas.spare_part import TransactionType

REQUIRED_FIELDS_MESSAGE = "Please fill in all required fields."

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MOBILE_PATTERN = re.compile(r"^\d{10}$")

TRANSACTION_TYPES = {kind.value for kind in TransactionType}


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _as_mapping(data: Any) -> Mapping:
    if hasattr(data, "model_dump"):
        return data.model_dump()
    return data


def missing_fields(data: Any, required: Iterable[str]) -> list[str]:
    values = _as_mapping(data)
    return [field for field in required if is_blank(values.get(field))]


def require(data: Any, required: Iterable[str]) -> list[FieldError]:
    return [FieldError(field, REQUIRED_FIELDS_MESSAGE) for field in missing_fields(data, required)]


def validate_record(data: Any, validators: Iterable[Callable[[Mapping], list[FieldError]]]) -> list[FieldError]:
    """Run every validator and collect their errors."""
    values = _as_mapping(data)
    errors: list[FieldError] = []
    for validator in validators:
        errors.extend(validator(values))
    return errors


def ensure_valid(errors: list[FieldError]) -> None:
    """Raise ``ValidationFailed`` with the first message when there are errors."""
    if errors:
        raise ValidationFailed(errors[0].message, errors)


def _number(value: Any):
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _whole_number(value: Any):
    number = _number(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def validate_job_option(form: Any) -> list[FieldError]:
    return require(form, ["job_name", "job_type"])


def validate_service(form: Any) -> list[FieldError]:
    values = _as_mapping(form)
    rate = _number(values.get("service_rate"))
    gst = _number(values.get("total_gst"))
    if is_blank(values.get("service_name")) or rate is None or rate <= 0 or gst is None or gst < 0:
        return [FieldError("service", "Please enter a valid service name, rate and GST.")]
    return []


def validate_vendor(form: Any) -> list[FieldError]:
    return require(form, ["name", "mobile_number"])


def validate_vehicle_registration(form: Any) -> list[FieldError]:
    return require(form, ["vehicle_number", "customer_name", "customer_mobile_number"])


def validate_transaction(form: Any) -> list[FieldError]:
    values = _as_mapping(form)
    errors = require(values, ["part_number", "part_name"])

    quantity = _whole_number(values.get("quantity"))
    if quantity is None or quantity < 1:
        errors.append(FieldError("quantity", "Quantity must be at least 1"))

    for field in ("amount", "total", "cgst", "sgst"):
        number = _number(values.get(field))
        if number is None or number < 0:
            errors.append(FieldError(field, "Amounts must be numbers of zero or more"))
            break

    if values.get("transaction_type") not in TRANSACTION_TYPES:
        errors.append(FieldError("transaction_type", "Transaction type must be CREDIT or DEBIT"))

    for field in ("vehicle_reg_id", "bill_no"):
        value = values.get(field)
        if value is not None and _whole_number(value) is None:
            errors.append(FieldError(field, "Vehicle and bill numbers must be whole numbers"))
            break

    return errors


def validate_spare_part(form: Any) -> list[FieldError]:
    values = _as_mapping(form)
    errors = require(values, ["part_name", "description", "manufacturer", "part_number"])
    for field in ("price", "buying_price", "sgst", "cgst", "total_gst"):
        number = _number(values.get(field))
        if number is None or number < 0:
            errors.append(FieldError(field, "Prices and GST must be numbers of zero or more"))
            break
    return errors


def validate_quotation_line(line: Any) -> list[FieldError]:
    values = _as_mapping(line)
    errors = require(values, ["name" if "name" in values else "part_name"])
    quantity = _number(values.get("quantity"))
    price = _number(values.get("unit_price"))
    discount = _number(values.get("discount_percent") or 0)
    if quantity is None or quantity <= 0 or price is None or price < 0:
        errors.append(FieldError("quantity", "Please enter a valid quantity and unit price."))
    if discount is None or not 0 <= discount <= 100:
        errors.append(FieldError("discount_percent", "Discount must be between 0 and 100"))
    return errors


def validate_user(user: Mapping) -> list[FieldError]:
    errors = []

    email = user.get("email")
    if not email:
        errors.append(FieldError("email", "Email is required"))
    elif not EMAIL_PATTERN.match(email):
        errors.append(FieldError("email", "Email is invalid"))

    password = user.get("password")
    if not password:
        errors.append(FieldError("password", "Password is required"))
    elif len(password) < 8:
        errors.append(FieldError("password", "Password must be at least 8 characters"))

    if "name" in user and user["name"] is not None and not user["name"].strip():
        errors.append(FieldError("name", "Name cannot be empty"))

    return errors


def validate_sign_up(form: Mapping) -> list[FieldError]:
    errors = require(form, ["fname", "lname", "address"])
    errors.extend(validate_user(form))
    if not MOBILE_PATTERN.match(form.get("mobile_number") or ""):
        errors.append(FieldError("mobile_number", "Please enter a valid 10-digit mobile number"))
    return errors

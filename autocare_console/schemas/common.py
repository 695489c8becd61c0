"""
Shared base for wire schemas.
"""
import math
from typing import Annotated, Any, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


def _parse_number(value: Any) -> Any:
    # Text that is not a finite number is kept so form validation can report it
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return value
        return number if math.isfinite(number) else value
    return value


def _parse_whole_number(value: Any) -> Any:
    number = _parse_number(value)
    if isinstance(number, float) and number.is_integer():
        return int(number)
    if isinstance(number, float):
        return value
    return number


# Numbers typed into a form; unparseable text survives until validation
FormNumber = Annotated[
    Union[float, str],
    BeforeValidator(_parse_number),
]
FormInt = Annotated[
    Union[int, str],
    BeforeValidator(_parse_whole_number),
]


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        # The backend sends null for unset columns; fall back to field defaults
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    def to_wire(self) -> dict:
        """Payload for the remote API."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")

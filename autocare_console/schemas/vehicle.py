"""
Pydantic schemas for Vehicle registration.
"""
import enum
from typing import Optional, Union

from pydantic import Field

from autocare_console.schemas.common import CamelModel


class VehicleStatus(str, enum.Enum):
    """Vehicle service status enumeration."""
    WAITING = "Waiting"
    IN_PROGRESS = "In Progress"
    COMPLETE = "Complete"


class InsuranceStatus(str, enum.Enum):
    INSURED = "Insured"
    EXPIRED = "Expired"


class VehicleBase(CamelModel):
    """Base vehicle schema with common fields."""
    appointment_id: Union[int, str] = ""
    vehicle_number: str = ""
    vehicle_brand: str = ""
    vehicle_model_name: str = ""
    engine_number: str = ""
    chasis_number: str = ""
    number_plate_colour: str = ""
    customer_id: Union[int, str] = ""
    customer_name: str = ""
    customer_address: str = ""
    customer_mobile_number: str = ""
    customer_aadhar_no: str = ""
    customer_gstin: str = ""
    email: str = ""
    superwiser: str = ""
    technician: str = ""
    worker: str = ""
    vehicle_inspection: str = ""
    job_card: str = ""
    kms_driven: Union[int, str] = ""
    # Free text: the backend also reports statuses such as "Completed"
    status: str = VehicleStatus.WAITING.value
    user_id: Union[int, str] = ""
    date: str = ""
    insurance_status: str = InsuranceStatus.INSURED.value
    insurance_from: str = Field("", alias="insuredFrom")
    insurance_to: str = Field("", alias="insuredTo")


class VehicleCreate(VehicleBase):
    """Schema for registering a vehicle."""
    pass


class VehicleUpdate(VehicleBase):
    """Schema for updating a vehicle registration."""
    vehicle_reg_id: Union[int, str]


class Vehicle(VehicleBase):
    """Schema for vehicle responses."""
    vehicle_reg_id: Optional[Union[int, str]] = None


class VehicleFilter(CamelModel):
    """Query values for the vehicle list filters."""
    vehicle_reg_id: Optional[str] = None
    appointment_id: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    status: Optional[str] = None

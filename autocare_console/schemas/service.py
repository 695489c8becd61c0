"""
Pydantic schemas for garage services (labour catalogue).
"""
from typing import Optional

from autocare_console.schemas.common import CamelModel, FormNumber


class ServiceFormData(CamelModel):
    """Schema for adding or editing a service."""
    service_name: str = ""
    service_rate: FormNumber = 0
    total_gst: FormNumber = 0


class Service(ServiceFormData):
    """Schema for service responses."""
    service_id: Optional[int] = None

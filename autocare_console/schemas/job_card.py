"""
Pydantic schemas for job cards.
"""
import enum
from typing import Optional

from autocare_console.schemas.common import CamelModel


class JobType(str, enum.Enum):
    INSPECTION = "Inspection"
    PROBLEM = "Problem"


class JobOptionFormData(CamelModel):
    """Schema for adding a job option."""
    job_name: str = ""
    job_type: str = ""


class JobCard(JobOptionFormData):
    """Schema for job card responses."""
    id: Optional[int] = None

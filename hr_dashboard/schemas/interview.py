from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class InterviewStatus(str, Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    RESCHEDULED = "rescheduled"


class Interview(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    id: int | str
    candidate_name: str
    candidate_email: str
    position: str
    interview_date: date
    interview_time: Optional[str] = None  # "10:00"
    location: Optional[str] = None
    interviewer: Optional[str] = None
    status: InterviewStatus = InterviewStatus.SCHEDULED
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

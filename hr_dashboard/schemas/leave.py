from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


class LeaveType(str, Enum):
    VACATION = "vacation"
    SICK = "sick"
    PERSONAL = "personal"
    MATERNITY = "maternity"
    PATERNITY = "paternity"


class LeaveStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


def calculate_days(start_date: date, end_date: date) -> int:
    """
    시작일/종료일을 모두 포함하는 휴가 일수.
    end_date < start_date 이면 ValueError.
    """
    if end_date < start_date:
        raise ValueError("end_date must not be before start_date")
    return (end_date - start_date).days + 1


class EmployeeReference(BaseModel):
    first_name: str
    last_name: str
    email: str
    department: Optional[str] = None
    position: Optional[str] = None


class LeaveRequest(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    id: int | str
    leave_type: LeaveType
    start_date: date
    end_date: date
    days_requested: Optional[int] = Field(None, ge=1)
    reason: Optional[str] = None
    status: LeaveStatus = LeaveStatus.PENDING
    created_at: Optional[datetime] = None
    approved_at: Optional[datetime] = None
    approved_by: Optional[str] = None
    employee: Optional[EmployeeReference] = None

    @model_validator(mode="after")
    def check_dates(self) -> "LeaveRequest":
        # 일수는 항상 날짜 기준으로 다시 계산 (서버 값과 다르면 날짜를 따른다)
        self.days_requested = calculate_days(self.start_date, self.end_date)
        return self


class LeaveRequestCreate(BaseModel):
    """
    POST /leave-requests 요청 바디.
    days_requested는 클라이언트가 보내지 않고 날짜로부터 계산한다.
    """
    model_config = ConfigDict(use_enum_values=True)

    leave_type: LeaveType
    start_date: date
    end_date: date
    reason: Optional[str] = Field(None, max_length=1000)

    @model_validator(mode="after")
    def check_dates(self) -> "LeaveRequestCreate":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self

    @computed_field
    @property
    def days_requested(self) -> int:
        return calculate_days(self.start_date, self.end_date)

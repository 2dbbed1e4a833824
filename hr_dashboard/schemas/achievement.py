from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AchievementType(str, Enum):
    AWARD = "award"
    RECOGNITION = "recognition"
    MILESTONE = "milestone"
    PERFORMANCE = "performance"


class Achievement(BaseModel):
    """
    직원 성과 기록. 상태(status)가 없으므로 상태 변경 대상이 아님.
    """
    model_config = ConfigDict(use_enum_values=True)

    id: int | str
    employee_name: str
    employee_email: str
    title: str
    description: Optional[str] = None
    achievement_type: AchievementType = AchievementType.PERFORMANCE
    points: int = Field(0, ge=0)
    awarded_date: Optional[date] = None
    awarded_by: Optional[str] = None

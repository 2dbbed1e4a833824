from typing import Dict

from pydantic import BaseModel, Field


class StatusUpdate(BaseModel):
    """
    PATCH /{kind}/{id}/status 요청 바디.
    값 검증은 상태 전이 컨트롤러가 담당 (InvalidStatus).
    """
    status: str = Field(..., min_length=1)


class StatusSummary(BaseModel):
    total: int
    by_status: Dict[str, int]
    labels: Dict[str, str] = {}


class PointsTotal(BaseModel):
    total_points: int
    count: int

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class CandidateStatus(str, Enum):
    PENDING = "pending"
    SHORTLISTED = "shortlisted"
    INTERVIEWED = "interviewed"
    HIRED = "hired"
    REJECTED = "rejected"


class JobReference(BaseModel):
    title: str
    department: Optional[str] = None


class Candidate(BaseModel):
    """
    지원자 1명. ats_score가 None이면 "unscored".
    """
    model_config = ConfigDict(use_enum_values=True, populate_by_name=True)

    id: int | str
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    ats_score: Optional[float] = Field(None, ge=0, le=100)
    status: CandidateStatus = CandidateStatus.PENDING
    resume_url: Optional[str] = None
    # 백엔드 응답은 job_descriptions(join 결과) 키로 내려온다
    job: Optional[JobReference] = Field(
        None,
        validation_alias=AliasChoices("job", "job_descriptions"),
    )
    created_at: Optional[datetime] = None

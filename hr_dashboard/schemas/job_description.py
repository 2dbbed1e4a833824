from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator


class CreatorReference(BaseModel):
    first_name: str
    last_name: str


class JobDescription(BaseModel):
    """
    채용 공고(JD). 상태가 없으므로 상태 변경 대상이 아님.
    """
    id: int | str
    title: str
    department: Optional[str] = None
    key_skills: List[str] = []
    description: Optional[str] = None
    responsibilities: Optional[str] = None
    qualifications: Optional[str] = None
    benefits: Optional[str] = None
    created_at: Optional[datetime] = None
    created_by: Optional[CreatorReference] = None


class JobDescriptionCreate(BaseModel):
    """
    POST /job-descriptions 요청 바디.
    key_skills는 리스트 또는 "a, b, c" 형태의 문자열 모두 허용.
    """
    title: str = Field(..., min_length=1, max_length=200)
    department: Optional[str] = None
    key_skills: List[str] = []
    description: Optional[str] = None
    responsibilities: Optional[str] = None
    qualifications: Optional[str] = None
    benefits: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("title must not be blank")
        return v.strip()

    @field_validator("key_skills", mode="before")
    @classmethod
    def split_skills(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.split(",")
        if isinstance(v, list):
            return [s.strip() for s in v if isinstance(s, str) and s.strip()]
        return v

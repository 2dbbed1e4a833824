from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple, Type

from pydantic import BaseModel

from hr_dashboard.schemas.achievement import Achievement, AchievementType
from hr_dashboard.schemas.candidate import Candidate, CandidateStatus
from hr_dashboard.schemas.interview import Interview, InterviewStatus
from hr_dashboard.schemas.job_description import JobDescription
from hr_dashboard.schemas.leave import LeaveRequest, LeaveStatus, LeaveType


class RecordKind(str, Enum):
    CANDIDATE = "candidate"
    LEAVE_REQUEST = "leave_request"
    INTERVIEW = "interview"
    ACHIEVEMENT = "achievement"
    JOB_DESCRIPTION = "job_description"


@dataclass(frozen=True)
class KindConfig:
    """
    목록 종류별 설정.

    - resource: 백엔드 REST 경로 (/api/<resource>)
    - list_key / item_key: 응답 JSON에서 목록 / 단건이 담기는 키
    - statuses: 허용 상태값. None이면 상태 변경 불가 (achievement / job_description)
    - search_fields: 검색어 매칭 대상 필드. "employee.email"처럼 점(.)으로 중첩 접근
    - type_field / types: type 필터가 비교하는 필드와 허용값
    - restricted_from: 이 상태에서만 전이 가능 (None이면 제한 없음)
    """
    kind: RecordKind
    model: Type[BaseModel]
    resource: str
    list_key: str
    item_key: str
    statuses: Optional[Tuple[str, ...]]
    search_fields: Tuple[str, ...]
    type_field: Optional[str] = None
    types: Tuple[str, ...] = ()
    restricted_from: Optional[str] = None


KIND_CONFIGS: Dict[RecordKind, KindConfig] = {
    RecordKind.CANDIDATE: KindConfig(
        kind=RecordKind.CANDIDATE,
        model=Candidate,
        resource="candidates",
        list_key="candidates",
        item_key="candidate",
        statuses=tuple(s.value for s in CandidateStatus),
        search_fields=("first_name", "last_name", "email"),
    ),
    RecordKind.LEAVE_REQUEST: KindConfig(
        kind=RecordKind.LEAVE_REQUEST,
        model=LeaveRequest,
        resource="leave-requests",
        list_key="leaveRequests",
        item_key="leaveRequest",
        statuses=tuple(s.value for s in LeaveStatus),
        search_fields=(
            "employee.first_name",
            "employee.last_name",
            "employee.email",
            "employee.department",
        ),
        type_field="leave_type",
        types=tuple(t.value for t in LeaveType),
        restricted_from=LeaveStatus.PENDING.value,
    ),
    RecordKind.INTERVIEW: KindConfig(
        kind=RecordKind.INTERVIEW,
        model=Interview,
        resource="interviews",
        list_key="interviews",
        item_key="interview",
        statuses=tuple(s.value for s in InterviewStatus),
        search_fields=("candidate_name", "candidate_email", "position"),
    ),
    RecordKind.ACHIEVEMENT: KindConfig(
        kind=RecordKind.ACHIEVEMENT,
        model=Achievement,
        resource="achievements",
        list_key="achievements",
        item_key="achievement",
        statuses=None,
        search_fields=("employee_name", "employee_email", "title"),
        type_field="achievement_type",
        types=tuple(t.value for t in AchievementType),
    ),
    RecordKind.JOB_DESCRIPTION: KindConfig(
        kind=RecordKind.JOB_DESCRIPTION,
        model=JobDescription,
        resource="job-descriptions",
        list_key="jobDescriptions",
        item_key="jobDescription",
        statuses=None,
        search_fields=("title", "department"),
    ),
}


def get_config(kind: RecordKind) -> KindConfig:
    return KIND_CONFIGS[RecordKind(kind)]

import asyncio
from datetime import date, datetime
from typing import Any, Dict, List, Optional

import pytest

from hr_dashboard.core.kinds import RecordKind, get_config


class FakeCollaborator:
    """
    테스트용 In-Memory collaborator.

    - update_gate / fetch_gate: 설정하면 set() 될 때까지 해당 호출이 대기
    - fail_update / fail_fetch: 설정하면 해당 예외를 던짐
    """

    def __init__(self, records: Optional[Dict[RecordKind, List[Dict[str, Any]]]] = None) -> None:
        self.records = records or {}
        self.fetch_calls: List[tuple] = []
        self.update_calls: List[tuple] = []
        self.create_calls: List[tuple] = []
        self.update_gate: Optional[asyncio.Event] = None
        self.fetch_gate: Optional[asyncio.Event] = None
        self.fail_update: Optional[Exception] = None
        self.fail_fetch: Optional[Exception] = None
        self.update_response: Dict[str, Any] = {}
        self._next_id = 1000

    async def fetch_records(self, kind, scope="all"):
        self.fetch_calls.append((kind, scope))
        if self.fetch_gate is not None:
            await self.fetch_gate.wait()
        if self.fail_fetch is not None:
            raise self.fail_fetch
        return [dict(r) for r in self.records.get(kind, [])]

    async def update_record_status(self, kind, record_id, new_status, actor):
        self.update_calls.append((kind, record_id, new_status, actor))
        if self.update_gate is not None:
            await self.update_gate.wait()
        if self.fail_update is not None:
            raise self.fail_update
        return dict(self.update_response)

    async def create_record(self, kind, payload, actor):
        self.create_calls.append((kind, payload, actor))
        if self.fail_update is not None:
            raise self.fail_update
        self._next_id += 1
        record = {
            "id": self._next_id,
            "status": "pending",
            "created_at": datetime(2025, 1, 1, 9, 0),
            **payload,
        }
        return get_config(kind).model.model_validate(record).model_dump()


def make_candidate(id, first, last, email, score=None, status="pending"):
    return {
        "id": id,
        "first_name": first,
        "last_name": last,
        "email": email,
        "phone": None,
        "ats_score": score,
        "status": status,
        "resume_url": None,
        "job": {"title": "Backend Engineer", "department": "Engineering"},
        "created_at": datetime(2025, 1, id, 10, 0),
    }


def make_leave(id, first, last, department, leave_type="vacation", status="pending"):
    return {
        "id": id,
        "leave_type": leave_type,
        "start_date": date(2025, 3, 3),
        "end_date": date(2025, 3, 5),
        "days_requested": 3,
        "reason": None,
        "status": status,
        "created_at": datetime(2025, 2, 1, 9, 0),
        "approved_at": None,
        "approved_by": None,
        "employee": {
            "first_name": first,
            "last_name": last,
            "email": f"{first.lower()}@example.com",
            "department": department,
            "position": "Staff",
        },
    }


@pytest.fixture
def candidates():
    return [
        make_candidate(1, "Jane", "Doe", "jane@x.com", score=92, status="shortlisted"),
        make_candidate(2, "John", "Smith", "john@x.com", score=79),
        make_candidate(3, "Mina", "Park", "mina@example.com", score=None, status="rejected"),
        make_candidate(4, "Alex", "Doerr", "alex@x.com", score=41),
        make_candidate(5, "Sara", "Lee", "sara@x.com", score=60, status="hired"),
    ]


@pytest.fixture
def leave_requests():
    return [
        make_leave(1, "Jane", "Doe", "Engineering"),
        make_leave(2, "Tom", "Kim", "Sales", leave_type="sick", status="approved"),
        make_leave(3, "Ann", "Choi", "Marketing", leave_type="personal", status="rejected"),
        make_leave(4, "Bob", "Han", "Engineering", leave_type="sick"),
    ]


@pytest.fixture
def interviews():
    return [
        {
            "id": 1,
            "candidate_name": "Jane Doe",
            "candidate_email": "jane@x.com",
            "position": "Backend Engineer",
            "interview_date": date(2025, 4, 1),
            "interview_time": "10:00",
            "location": "Room A",
            "interviewer": "HR Team",
            "status": "scheduled",
            "notes": None,
            "created_at": None,
        },
    ]


@pytest.fixture
def achievements():
    return [
        {
            "id": 1,
            "employee_name": "Jane Doe",
            "employee_email": "jane@x.com",
            "title": "Employee of the Month",
            "description": None,
            "achievement_type": "award",
            "points": 50,
            "awarded_date": date(2025, 1, 31),
            "awarded_by": "HR",
        },
        {
            "id": 2,
            "employee_name": "Tom Kim",
            "employee_email": "tom@x.com",
            "title": "5 Years",
            "description": None,
            "achievement_type": "milestone",
            "points": 75,
            "awarded_date": None,
            "awarded_by": "HR",
        },
    ]


@pytest.fixture
def job_descriptions():
    return [
        {
            "id": "jd-1",
            "title": "Backend Engineer",
            "department": "Engineering",
            "key_skills": ["python", "fastapi"],
            "description": "Build APIs",
            "responsibilities": None,
            "qualifications": None,
            "benefits": None,
            "created_at": datetime(2025, 1, 10, 9, 0),
            "created_by": {"first_name": "Ann", "last_name": "Choi"},
        },
        {
            "id": "jd-2",
            "title": "Account Executive",
            "department": "Sales",
            "key_skills": [],
            "description": None,
            "responsibilities": None,
            "qualifications": None,
            "benefits": None,
            "created_at": None,
            "created_by": None,
        },
    ]


@pytest.fixture
def collaborator(candidates, leave_requests, interviews, achievements, job_descriptions):
    return FakeCollaborator(
        {
            RecordKind.CANDIDATE: candidates,
            RecordKind.LEAVE_REQUEST: leave_requests,
            RecordKind.INTERVIEW: interviews,
            RecordKind.ACHIEVEMENT: achievements,
            RecordKind.JOB_DESCRIPTION: job_descriptions,
        }
    )


@pytest.fixture
def empty_collaborator():
    return FakeCollaborator()

from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from hr_dashboard.schemas.candidate import Candidate
from hr_dashboard.schemas.leave import LeaveRequest, LeaveRequestCreate, calculate_days


@pytest.mark.parametrize(
    "start, end, days",
    [
        (date(2025, 3, 3), date(2025, 3, 3), 1),
        (date(2025, 3, 3), date(2025, 3, 5), 3),
        (date(2025, 2, 27), date(2025, 3, 2), 4),
        (date(2024, 12, 31), date(2025, 1, 1), 2),
    ],
)
def test_calculate_days_is_inclusive(start, end, days):
    assert calculate_days(start, end) == days


def test_calculate_days_rejects_end_before_start():
    with pytest.raises(ValueError):
        calculate_days(date(2025, 3, 5), date(2025, 3, 4))


def test_days_requested_at_least_one_for_any_valid_range():
    start = date(2025, 1, 1)
    for offset in range(0, 60, 7):
        end = start + timedelta(days=offset)
        assert calculate_days(start, end) == offset + 1 >= 1


def test_leave_request_create_computes_days():
    payload = LeaveRequestCreate(
        leave_type="sick",
        start_date="2025-03-03",
        end_date="2025-03-07",
        reason="flu",
    )

    data = payload.model_dump()
    assert data["days_requested"] == 5
    assert data["leave_type"] == "sick"


def test_leave_request_create_rejects_end_before_start():
    with pytest.raises(ValidationError):
        LeaveRequestCreate(leave_type="vacation", start_date="2025-03-05", end_date="2025-03-01")


def test_leave_request_create_rejects_unknown_type():
    with pytest.raises(ValidationError):
        LeaveRequestCreate(leave_type="sabbatical", start_date="2025-03-01", end_date="2025-03-01")


def test_leave_request_create_requires_dates():
    with pytest.raises(ValidationError):
        LeaveRequestCreate(leave_type="vacation", start_date="2025-03-01")


def test_leave_request_days_follow_the_dates():
    mismatched = LeaveRequest(
        id=1,
        leave_type="sick",
        start_date=date(2025, 3, 3),
        end_date=date(2025, 3, 5),
        days_requested=9,
    )
    missing = LeaveRequest(id=2, leave_type="sick", start_date="2025-03-03", end_date="2025-03-03")

    assert mismatched.days_requested == 3
    assert missing.days_requested == 1
    assert mismatched.model_dump()["days_requested"] == 3


def test_leave_request_rejects_end_before_start():
    with pytest.raises(ValidationError):
        LeaveRequest(id=1, leave_type="sick", start_date="2025-03-05", end_date="2025-03-03")


def test_leave_request_rejects_unknown_status():
    with pytest.raises(ValidationError):
        LeaveRequest(
            id=1,
            leave_type="vacation",
            start_date="2025-03-01",
            end_date="2025-03-01",
            days_requested=1,
            status="archived",
        )


def test_candidate_score_range_enforced():
    with pytest.raises(ValidationError):
        Candidate(id=1, first_name="A", last_name="B", email="a@b", ats_score=101)


def test_candidate_defaults_to_pending_and_unscored():
    candidate = Candidate(id=1, first_name="A", last_name="B", email="a@b")
    assert candidate.status == "pending"
    assert candidate.ats_score is None

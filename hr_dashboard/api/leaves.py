from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from hr_dashboard.api.common import ensure_loaded, raise_http, resolve_id
from hr_dashboard.core.deps import get_actor, view_for
from hr_dashboard.core.errors import DashboardError
from hr_dashboard.core.filters import FilterCriteria
from hr_dashboard.core.kinds import RecordKind
from hr_dashboard.core.view import ListView
from hr_dashboard.schemas.common import StatusSummary, StatusUpdate
from hr_dashboard.schemas.leave import LeaveRequest, LeaveRequestCreate

router = APIRouter(
    prefix="/leave-requests",
    tags=["leave-requests"],
)

get_view = view_for(RecordKind.LEAVE_REQUEST)


@router.get(
    "",
    response_model=List[LeaveRequest],
)
async def list_leave_requests(
    q: Optional[str] = None,
    status_filter: Optional[str] = Query(None, alias="status"),
    leave_type: Optional[str] = Query(None, alias="type"),
    view: ListView = Depends(get_view),
):
    """
    휴가 신청 목록 조회.
    검색어는 신청자 이름 / 이메일 / 부서에 매칭.
    """
    await ensure_loaded(view)
    criteria = FilterCriteria(
        text_query=q,
        status_filter=status_filter,
        type_filter=leave_type,
    )
    return view.visible(criteria)


@router.get(
    "/summary",
    response_model=StatusSummary,
)
async def leave_request_summary(view: ListView = Depends(get_view)):
    await ensure_loaded(view)
    return view.summary()


@router.post(
    "",
    response_model=LeaveRequest,
    status_code=status.HTTP_201_CREATED,
)
async def submit_leave_request(
    payload: LeaveRequestCreate,
    actor: str = Depends(get_actor),
    view: ListView = Depends(get_view),
):
    """
    휴가 신청. end_date < start_date 는 스키마 검증에서 422로 거절되며 저장되지 않는다.
    """
    await ensure_loaded(view)
    try:
        return await view.add(payload.model_dump(), actor)
    except DashboardError as exc:
        raise_http(exc)


@router.patch(
    "/{request_id}/status",
    response_model=LeaveRequest,
)
async def update_leave_request_status(
    request_id: str,
    payload: StatusUpdate,
    actor: str = Depends(get_actor),
    view: ListView = Depends(get_view),
):
    """
    pending 상태의 휴가 신청을 approved / rejected 로 처리.
    """
    await ensure_loaded(view)
    try:
        return await view.transition(resolve_id(view, request_id), payload.status, actor)
    except DashboardError as exc:
        raise_http(exc)

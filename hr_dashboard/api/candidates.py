from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from hr_dashboard.api.common import ensure_loaded, raise_http, resolve_id
from hr_dashboard.core.deps import get_actor, view_for
from hr_dashboard.core.errors import DashboardError
from hr_dashboard.core.filters import FilterCriteria
from hr_dashboard.core.kinds import RecordKind
from hr_dashboard.core.view import ListView
from hr_dashboard.schemas.candidate import Candidate
from hr_dashboard.schemas.common import StatusSummary, StatusUpdate

router = APIRouter(
    prefix="/candidates",
    tags=["candidates"],
)

get_view = view_for(RecordKind.CANDIDATE)


@router.get(
    "",
    response_model=List[Candidate],
)
async def list_candidates(
    q: Optional[str] = None,
    status_filter: Optional[str] = Query(None, alias="status"),
    score: Optional[str] = None,
    view: ListView = Depends(get_view),
):
    """
    지원자 목록 조회 (이름/이메일 검색 + 상태 + ATS 점수 구간 필터).

    예: GET /candidates?q=doe&status=shortlisted&score=high
    """
    await ensure_loaded(view)
    criteria = FilterCriteria(text_query=q, status_filter=status_filter, score_filter=score)
    return view.visible(criteria)


@router.get(
    "/summary",
    response_model=StatusSummary,
)
async def candidate_summary(view: ListView = Depends(get_view)):
    await ensure_loaded(view)
    return view.summary()


@router.patch(
    "/{candidate_id}/status",
    response_model=Candidate,
)
async def update_candidate_status(
    candidate_id: str,
    payload: StatusUpdate,
    actor: str = Depends(get_actor),
    view: ListView = Depends(get_view),
):
    await ensure_loaded(view)
    try:
        return await view.transition(resolve_id(view, candidate_id), payload.status, actor)
    except DashboardError as exc:
        raise_http(exc)

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from hr_dashboard.api.common import ensure_loaded, raise_http, resolve_id
from hr_dashboard.core.deps import get_actor, view_for
from hr_dashboard.core.errors import DashboardError
from hr_dashboard.core.filters import FilterCriteria
from hr_dashboard.core.kinds import RecordKind
from hr_dashboard.core.view import ListView
from hr_dashboard.schemas.common import StatusSummary, StatusUpdate
from hr_dashboard.schemas.interview import Interview

router = APIRouter(
    prefix="/interviews",
    tags=["interviews"],
)

get_view = view_for(RecordKind.INTERVIEW)


@router.get(
    "",
    response_model=List[Interview],
)
async def list_interviews(
    q: Optional[str] = None,
    status_filter: Optional[str] = Query(None, alias="status"),
    view: ListView = Depends(get_view),
):
    await ensure_loaded(view)
    return view.visible(FilterCriteria(text_query=q, status_filter=status_filter))


@router.get(
    "/summary",
    response_model=StatusSummary,
)
async def interview_summary(view: ListView = Depends(get_view)):
    await ensure_loaded(view)
    return view.summary()


@router.patch(
    "/{interview_id}/status",
    response_model=Interview,
)
async def update_interview_status(
    interview_id: str,
    payload: StatusUpdate,
    actor: str = Depends(get_actor),
    view: ListView = Depends(get_view),
):
    await ensure_loaded(view)
    try:
        return await view.transition(resolve_id(view, interview_id), payload.status, actor)
    except DashboardError as exc:
        raise_http(exc)

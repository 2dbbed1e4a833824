from typing import List, Optional

from fastapi import APIRouter, Depends, status

from hr_dashboard.api.common import ensure_loaded, raise_http
from hr_dashboard.core.deps import get_actor, view_for
from hr_dashboard.core.errors import DashboardError
from hr_dashboard.core.filters import FilterCriteria
from hr_dashboard.core.kinds import RecordKind
from hr_dashboard.core.view import ListView
from hr_dashboard.schemas.job_description import JobDescription, JobDescriptionCreate

router = APIRouter(
    prefix="/job-descriptions",
    tags=["job-descriptions"],
)

get_view = view_for(RecordKind.JOB_DESCRIPTION)


@router.get(
    "",
    response_model=List[JobDescription],
)
async def list_job_descriptions(
    q: Optional[str] = None,
    view: ListView = Depends(get_view),
):
    """
    채용 공고 목록 조회. 검색어는 제목 / 부서에 매칭.
    """
    await ensure_loaded(view)
    return view.visible(FilterCriteria(text_query=q))


@router.post(
    "",
    response_model=JobDescription,
    status_code=status.HTTP_201_CREATED,
)
async def create_job_description(
    payload: JobDescriptionCreate,
    actor: str = Depends(get_actor),
    view: ListView = Depends(get_view),
):
    await ensure_loaded(view)
    try:
        return await view.add(payload.model_dump(), actor)
    except DashboardError as exc:
        raise_http(exc)

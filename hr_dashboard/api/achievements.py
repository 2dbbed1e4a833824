from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from hr_dashboard.api.common import ensure_loaded
from hr_dashboard.core.deps import view_for
from hr_dashboard.core.filters import FilterCriteria
from hr_dashboard.core.kinds import RecordKind
from hr_dashboard.core.view import ListView
from hr_dashboard.schemas.achievement import Achievement
from hr_dashboard.schemas.common import PointsTotal

router = APIRouter(
    prefix="/achievements",
    tags=["achievements"],
)

get_view = view_for(RecordKind.ACHIEVEMENT)


@router.get(
    "",
    response_model=List[Achievement],
)
async def list_achievements(
    q: Optional[str] = None,
    achievement_type: Optional[str] = Query(None, alias="type"),
    view: ListView = Depends(get_view),
):
    await ensure_loaded(view)
    return view.visible(FilterCriteria(text_query=q, type_filter=achievement_type))


@router.get(
    "/points",
    response_model=PointsTotal,
)
async def achievement_points(view: ListView = Depends(get_view)):
    """
    전체 성과 포인트 합계 (points 누락은 0으로 계산).
    """
    await ensure_loaded(view)
    return view.points()

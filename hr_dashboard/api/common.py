from typing import Any, NoReturn

from fastapi import HTTPException, status

from hr_dashboard.core.errors import (
    Busy,
    DashboardError,
    DuplicateRecord,
    InvalidStatus,
    InvalidTransition,
    LoadFailure,
    NotFound,
    UpdateFailure,
)
from hr_dashboard.core.view import ListView

_STATUS_CODES = {
    NotFound: status.HTTP_404_NOT_FOUND,
    InvalidStatus: 422,  # starlette 버전별로 상수 이름이 달라 숫자로 지정
    InvalidTransition: status.HTTP_409_CONFLICT,
    Busy: status.HTTP_409_CONFLICT,
    DuplicateRecord: status.HTTP_409_CONFLICT,
    LoadFailure: status.HTTP_502_BAD_GATEWAY,
    UpdateFailure: status.HTTP_502_BAD_GATEWAY,
}


def raise_http(exc: DashboardError) -> NoReturn:
    code = _STATUS_CODES.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    raise HTTPException(status_code=code, detail=str(exc)) from exc


async def ensure_loaded(view: ListView) -> None:
    """
    startup 시 조회가 실패했으면 요청 시점에 다시 시도.
    """
    if not view.is_loading:
        return
    try:
        await view.mount()
    except LoadFailure as exc:
        raise_http(exc)


def resolve_id(view: ListView, raw_id: str) -> Any:
    """
    경로 파라미터는 항상 문자열이므로 store의 실제 id(int / str)로 맞춰준다.
    """
    for record in view.store.snapshot():
        if str(record.get("id")) == raw_id:
            return record["id"]
    return raw_id

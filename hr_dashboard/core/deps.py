from typing import Callable

from fastapi import Header, Request

from hr_dashboard.core.kinds import RecordKind
from hr_dashboard.core.view import ListView


def view_for(kind: RecordKind) -> Callable[[Request], ListView]:
    """
    app.state.views에서 kind에 해당하는 ListView를 꺼내는 FastAPI 의존성.
    """
    def _get_view(request: Request) -> ListView:
        return request.app.state.views[kind]

    return _get_view


async def get_actor(x_actor_id: str = Header(..., alias="X-Actor-Id")) -> str:
    # 인증은 외부(API gateway) 담당, 여기서는 전달받은 식별자만 사용
    return x_actor_id

import logging
from typing import Any, Dict, List, Optional, Protocol

import httpx
from fastapi.encoders import jsonable_encoder
from pydantic import ValidationError

from hr_dashboard.core.errors import LoadFailure, UpdateFailure
from hr_dashboard.core.kinds import RecordKind, get_config

logger = logging.getLogger(__name__)

ACTOR_HEADER = "X-Actor-Id"


class RecordCollaborator(Protocol):
    async def fetch_records(self, kind: RecordKind, scope: str) -> List[Dict[str, Any]]:
        ...

    async def update_record_status(
        self,
        kind: RecordKind,
        record_id: Any,
        new_status: str,
        actor: str,
    ) -> Dict[str, Any]:
        ...

    async def create_record(
        self,
        kind: RecordKind,
        payload: Dict[str, Any],
        actor: str,
    ) -> Dict[str, Any]:
        ...


class HttpRecordCollaborator:
    """
    대시보드 백엔드(/api/...)를 REST로 호출하는 collaborator.

    - 조회:   GET   /api/<resource>            (leave-requests + scope=all 이면 /all)
    - 상태:   PATCH /api/<resource>/{id}       body: {"status": ...}
    - 생성:   POST  /api/<resource>
    응답 레코드는 kind별 pydantic 모델로 검증 후 dict로 반환한다.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
        )

    @staticmethod
    def _list_path(kind: RecordKind, scope: str) -> str:
        config = get_config(kind)
        if kind == RecordKind.LEAVE_REQUEST and scope == "all":
            return f"/api/{config.resource}/all"
        return f"/api/{config.resource}"

    @staticmethod
    def _validate(kind: RecordKind, raw: Dict[str, Any]) -> Dict[str, Any]:
        model = get_config(kind).model
        return model.model_validate(raw).model_dump()

    async def fetch_records(self, kind: RecordKind, scope: str = "all") -> List[Dict[str, Any]]:
        config = get_config(kind)
        path = self._list_path(kind, scope)

        try:
            async with self._client() as client:
                resp = await client.get(path)
        except httpx.HTTPError as exc:
            raise LoadFailure(f"Failed to fetch {config.resource}: {exc}") from exc

        if resp.status_code >= 400:
            raise LoadFailure(
                f"Failed to fetch {config.resource}: {resp.status_code} {resp.text}",
                status_code=resp.status_code,
            )

        try:
            data = resp.json()
            items = data.get(config.list_key) or []
            records = [self._validate(kind, item) for item in items]
        except (ValueError, AttributeError, ValidationError) as exc:
            raise LoadFailure(f"Invalid {config.resource} payload: {exc}") from exc

        logger.info("Fetched %d %s (scope=%s)", len(records), config.resource, scope)
        return records

    async def _send(
        self,
        kind: RecordKind,
        method: str,
        path: str,
        body: Dict[str, Any],
        actor: str,
    ) -> Dict[str, Any]:
        config = get_config(kind)
        try:
            async with self._client() as client:
                resp = await client.request(
                    method,
                    path,
                    json=jsonable_encoder(body),
                    headers={ACTOR_HEADER: str(actor)},
                )
        except httpx.HTTPError as exc:
            raise UpdateFailure(f"Failed to update {config.resource}: {exc}") from exc

        if resp.status_code >= 400:
            raise UpdateFailure(
                f"Failed to update {config.resource}: {resp.status_code} {resp.text}",
                status_code=resp.status_code,
            )

        try:
            data = resp.json()
        except ValueError:
            # 204 등 바디 없는 성공 응답
            return {}
        item = data.get(config.item_key) if isinstance(data, dict) else None
        return dict(item) if isinstance(item, dict) else {}

    async def update_record_status(
        self,
        kind: RecordKind,
        record_id: Any,
        new_status: str,
        actor: str,
    ) -> Dict[str, Any]:
        """
        변경된 필드(일부일 수 있음)를 반환.
        """
        config = get_config(kind)
        return await self._send(
            kind,
            "PATCH",
            f"/api/{config.resource}/{record_id}",
            {"status": new_status},
            actor,
        )

    async def create_record(
        self,
        kind: RecordKind,
        payload: Dict[str, Any],
        actor: str,
    ) -> Dict[str, Any]:
        config = get_config(kind)
        created = await self._send(kind, "POST", f"/api/{config.resource}", payload, actor)
        try:
            return self._validate(kind, created)
        except ValidationError as exc:
            raise UpdateFailure(f"Invalid {config.resource} payload: {exc}") from exc

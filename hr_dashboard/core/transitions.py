import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, Dict, FrozenSet, Set

from pydantic import TypeAdapter, ValidationError

from hr_dashboard.core.collaborator import RecordCollaborator
from hr_dashboard.core.errors import (
    Busy,
    InvalidStatus,
    InvalidTransition,
    UpdateFailure,
)
from hr_dashboard.core.kinds import RecordKind, get_config
from hr_dashboard.core.store import Record, RecordStore

logger = logging.getLogger(__name__)


class StatusTransitionController:
    """
    레코드 1건의 상태 변경을 처리.

    1) 대상 존재 / 상태값 / 처리중 여부 / 전이 가능 여부 검증
    2) processing 표시 후 collaborator에 상태 변경 요청
    3) 성공하면 store에 반영, 실패하면 store는 그대로 두고 예외 전파
    4) 결과와 무관하게 processing 표시 해제

    leave_request는 pending에서만 approved / rejected 로 전이 가능.
    candidate / interview는 허용 상태값이면 어떤 상태로든 변경 가능.
    """

    def __init__(
        self,
        kind: RecordKind,
        store: RecordStore,
        collaborator: RecordCollaborator,
    ) -> None:
        self.kind = RecordKind(kind)
        self.config = get_config(self.kind)
        self.store = store
        self.collaborator = collaborator
        self._processing: Set[Any] = set()

    @property
    def processing_ids(self) -> FrozenSet[Any]:
        return frozenset(self._processing)

    def is_processing(self, record_id: Any) -> bool:
        return record_id in self._processing

    def _check(self, record_id: Any, new_status: Any) -> Record:
        current = self.store.get(record_id)  # 없으면 NotFound

        if record_id in self._processing:
            raise Busy(record_id)

        # 종료 상태(approved / rejected)에서는 목표 상태와 무관하게 전이 불가
        restricted_from = self.config.restricted_from
        if restricted_from is not None and current.get("status") != restricted_from:
            raise InvalidTransition(record_id, current.get("status"), new_status)

        statuses = self.config.statuses
        if not statuses or new_status not in statuses:
            raise InvalidStatus(self.kind.value, new_status)

        if restricted_from is not None and new_status == restricted_from:
            raise InvalidTransition(record_id, current.get("status"), new_status)

        return current

    def _build_patch(
        self,
        new_status: str,
        actor: str,
        changed: Dict[str, Any],
    ) -> Dict[str, Any]:
        patch: Dict[str, Any] = {}
        if self.kind == RecordKind.LEAVE_REQUEST:
            patch["approved_at"] = datetime.now(timezone.utc)
            patch["approved_by"] = str(actor)
        # collaborator 응답이 우선, 단 id / status는 요청 기준으로 고정
        patch.update(changed)
        patch.pop("id", None)
        patch["status"] = new_status
        return patch

    def _validate_patch(self, patch: Dict[str, Any]) -> Dict[str, Any]:
        """
        patch의 각 필드를 모델의 필드 타입으로 검증.
        store의 레코드는 필드 일부만 가질 수 있으므로 레코드 전체가 아니라 바뀌는 필드만 본다.
        모델에 없는 필드는 조회 경로와 마찬가지로 버린다.
        """
        fields = self.config.model.model_fields
        validated: Dict[str, Any] = {"status": patch["status"]}
        for name, value in patch.items():
            field = fields.get(name)
            if name == "status" or field is None:
                continue
            annotation = field.annotation
            if field.metadata:
                annotation = Annotated[(annotation, *field.metadata)]
            adapter = TypeAdapter(annotation)
            try:
                value = adapter.dump_python(adapter.validate_python(value))
            except ValidationError as exc:
                raise UpdateFailure(
                    f"Invalid {name} in {self.config.resource} update response: {exc}"
                ) from exc
            validated[name] = value.value if isinstance(value, Enum) else value
        return validated

    async def transition(self, record_id: Any, new_status: str, actor: str) -> Record:
        self._check(record_id, new_status)

        self._processing.add(record_id)
        try:
            changed = await self.collaborator.update_record_status(
                self.kind,
                record_id,
                new_status,
                actor,
            )
            patch = self._validate_patch(self._build_patch(new_status, actor, changed or {}))
            updated = self.store.apply_update(record_id, patch)
        except UpdateFailure:
            logger.warning(
                "Status update failed: kind=%s, id=%s, status=%s",
                self.kind.value,
                record_id,
                new_status,
            )
            raise
        finally:
            self._processing.discard(record_id)

        logger.info(
            "Status updated: kind=%s, id=%s, status=%s, actor=%s",
            self.kind.value,
            record_id,
            new_status,
            actor,
        )
        return updated

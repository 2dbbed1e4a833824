import logging
from typing import Any, Dict, List, Mapping, Optional

from hr_dashboard.core.collaborator import RecordCollaborator
from hr_dashboard.core.errors import LoadFailure
from hr_dashboard.core.filters import (
    FilterCriteria,
    count_by_status,
    filter_records,
    format_label,
    total_points,
)
from hr_dashboard.core.kinds import RecordKind
from hr_dashboard.core.store import Record, RecordStore
from hr_dashboard.core.transitions import StatusTransitionController

logger = logging.getLogger(__name__)


class ListView:
    """
    목록 화면 1개 단위의 상태 (store + 필터 조건 + 상태 전이 컨트롤러).

    close() 이후 도착한 조회 결과는 generation 비교로 버린다.
    """

    def __init__(
        self,
        kind: RecordKind,
        collaborator: RecordCollaborator,
        scope: str = "all",
    ) -> None:
        self.kind = RecordKind(kind)
        self.scope = scope
        self.collaborator = collaborator
        self.store = RecordStore()
        self.controller = StatusTransitionController(self.kind, self.store, collaborator)
        self.criteria = FilterCriteria()
        self._generation = 0
        self._closed = False

    @property
    def is_loading(self) -> bool:
        return not self.store.is_ready

    @property
    def is_closed(self) -> bool:
        return self._closed

    async def mount(self) -> bool:
        """
        collaborator에서 목록을 받아 store에 적재.
        도중에 close()되면 결과를 버리고 False 반환.
        """
        generation = self._generation
        try:
            records = await self.collaborator.fetch_records(self.kind, self.scope)
        except LoadFailure:
            if self._closed or generation != self._generation:
                logger.info("Ignoring failed %s fetch for a closed or refreshed view", self.kind.value)
                return False
            logger.warning("Failed to load %s view (scope=%s)", self.kind.value, self.scope)
            raise

        if self._closed or generation != self._generation:
            logger.info("Discarding stale %s fetch result", self.kind.value)
            return False

        self.store.load(records)
        return True

    async def refresh(self) -> bool:
        self._generation += 1
        return await self.mount()

    def close(self) -> None:
        self._closed = True
        self._generation += 1

    def set_criteria(self, criteria: FilterCriteria) -> None:
        self.criteria = criteria

    def visible(self, criteria: Optional[FilterCriteria] = None) -> List[Mapping[str, Any]]:
        return filter_records(self.store.snapshot(), criteria or self.criteria, self.kind)

    async def transition(self, record_id: Any, new_status: str, actor: str) -> Record:
        return await self.controller.transition(record_id, new_status, actor)

    async def add(self, payload: Dict[str, Any], actor: str) -> Record:
        """
        collaborator로 생성 요청 후 응답 레코드를 store 끝에 추가.
        """
        created = await self.collaborator.create_record(self.kind, payload, actor)
        self.store.append(created)
        logger.info("Appended %s id=%s", self.kind.value, created.get("id"))
        return created

    def summary(self) -> Dict[str, Any]:
        records = self.store.snapshot()
        return {
            "total": len(records),
            "by_status": count_by_status(records, self.kind),
            "labels": {s: format_label(s) for s in self.controller.config.statuses or ()},
        }

    def points(self) -> Dict[str, int]:
        records = self.store.snapshot()
        return {"total_points": total_points(records), "count": len(records)}

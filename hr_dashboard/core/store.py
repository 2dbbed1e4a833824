import copy
import logging
from typing import Any, Dict, Iterable, List, Mapping, Tuple

from hr_dashboard.core.errors import DuplicateRecord, NotFound

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class RecordStore:
    """
    목록 화면 하나가 보유하는 In-Memory 레코드 저장소.

    순서는 collaborator가 내려준 순서를 그대로 유지한다.
    apply_update 안에는 await 지점이 없으므로 이벤트 루프 위에서 원자적으로 동작.
    """

    def __init__(self) -> None:
        self._records: List[Record] = []
        self._ready = False

    @property
    def is_ready(self) -> bool:
        return self._ready

    def __len__(self) -> int:
        return len(self._records)

    def load(self, records: Iterable[Mapping[str, Any]]) -> None:
        """
        전체 목록 교체 후 ready 상태로 전환. 빈 목록도 허용.
        """
        self._records = [dict(r) for r in records]
        self._ready = True
        logger.info("Loaded %d records", len(self._records))

    def _index_of(self, record_id: Any) -> int:
        for idx, record in enumerate(self._records):
            if record.get("id") == record_id:
                return idx
        raise NotFound(record_id)

    def get(self, record_id: Any) -> Record:
        return copy.deepcopy(self._records[self._index_of(record_id)])

    def apply_update(self, record_id: Any, patch: Mapping[str, Any]) -> Record:
        """
        id에 해당하는 레코드를 patch를 병합한 새 dict로 교체.
        id 자체는 바뀌지 않는다.
        """
        idx = self._index_of(record_id)
        merged = {**self._records[idx], **patch, "id": record_id}
        self._records[idx] = merged
        return copy.deepcopy(merged)

    def append(self, record: Mapping[str, Any]) -> None:
        record_id = record.get("id")
        if any(r.get("id") == record_id for r in self._records):
            raise DuplicateRecord(record_id)
        self._records.append(dict(record))

    def snapshot(self) -> Tuple[Record, ...]:
        # 호출자가 내부 리스트/dict를 직접 건드리지 못하도록 깊은 복사
        return tuple(copy.deepcopy(r) for r in self._records)

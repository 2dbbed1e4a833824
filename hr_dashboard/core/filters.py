from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Sequence

from hr_dashboard.core.kinds import KindConfig, RecordKind, get_config

ALL = "all"

SCORE_BUCKETS = ("high", "medium", "low", "unscored")


@dataclass(frozen=True)
class FilterCriteria:
    """
    목록 필터 조건. None / "all" / 빈 문자열은 "제약 없음".
    """
    text_query: Optional[str] = None
    status_filter: Optional[str] = None
    score_filter: Optional[str] = None
    type_filter: Optional[str] = None


def score_bucket(score: Any) -> str:
    if score is None or isinstance(score, bool) or not isinstance(score, (int, float)):
        return "unscored"
    if score >= 80:
        return "high"
    if score >= 60:
        return "medium"
    return "low"


def _choice(value: Any, allowed: Sequence[str]) -> Optional[str]:
    # 허용값이 아니면 제약 없음으로 정규화
    if not isinstance(value, str):
        return None
    value = value.strip().lower()
    if not value or value == ALL or value not in allowed:
        return None
    return value


def normalize(criteria: FilterCriteria, config: KindConfig) -> FilterCriteria:
    query = criteria.text_query
    # 공백만 있는 검색어만 제약 없음. 그 외에는 입력 그대로 부분 문자열 매칭
    if not isinstance(query, str) or not query.strip():
        query = None
    else:
        query = query.lower()

    score = None
    if config.kind == RecordKind.CANDIDATE:
        score = _choice(criteria.score_filter, SCORE_BUCKETS)

    return FilterCriteria(
        text_query=query,
        status_filter=_choice(criteria.status_filter, config.statuses or ()),
        score_filter=score,
        type_filter=_choice(criteria.type_filter, config.types),
    )


def _lookup(record: Mapping[str, Any], path: str) -> Any:
    value: Any = record
    for part in path.split("."):
        if not isinstance(value, Mapping):
            return None
        value = value.get(part)
    return value


def _matches(record: Mapping[str, Any], criteria: FilterCriteria, config: KindConfig) -> bool:
    if criteria.text_query is not None:
        hit = False
        for field in config.search_fields:
            value = _lookup(record, field)
            if isinstance(value, str) and criteria.text_query in value.lower():
                hit = True
                break
        if not hit:
            return False

    if criteria.status_filter is not None:
        if record.get("status") != criteria.status_filter:
            return False

    if criteria.score_filter is not None:
        if score_bucket(record.get("ats_score")) != criteria.score_filter:
            return False

    if criteria.type_filter is not None and config.type_field:
        if record.get(config.type_field) != criteria.type_filter:
            return False

    return True


def filter_records(
    records: Iterable[Mapping[str, Any]],
    criteria: Optional[FilterCriteria],
    kind: RecordKind,
) -> List[Mapping[str, Any]]:
    """
    조건을 AND로 적용한 부분 목록. 입력 순서를 유지하며 예외를 던지지 않는다.
    """
    config = get_config(kind)
    normalized = normalize(criteria or FilterCriteria(), config)
    return [r for r in records if _matches(r, normalized, config)]


def count_by_status(records: Iterable[Mapping[str, Any]], kind: RecordKind) -> dict:
    config = get_config(kind)
    counts = {status: 0 for status in config.statuses or ()}
    for record in records:
        status = record.get("status")
        if status in counts:
            counts[status] += 1
    return counts


def total_points(records: Iterable[Mapping[str, Any]]) -> int:
    return sum(r.get("points") or 0 for r in records)


def format_label(value: str) -> str:
    """
    "some_type" -> "Some type"
    """
    if not value:
        return value
    return value[:1].upper() + value[1:].replace("_", " ")

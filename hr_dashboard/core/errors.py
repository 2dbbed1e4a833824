from typing import Any, Optional


class DashboardError(Exception):
    """
    대시보드 코어에서 발생하는 모든 예외의 부모 클래스.
    """


class NotFound(DashboardError):
    def __init__(self, record_id: Any) -> None:
        super().__init__(f"Record {record_id!r} not found")
        self.record_id = record_id


class DuplicateRecord(DashboardError):
    def __init__(self, record_id: Any) -> None:
        super().__init__(f"Record {record_id!r} already exists")
        self.record_id = record_id


class InvalidStatus(DashboardError):
    def __init__(self, kind: str, status: Any) -> None:
        super().__init__(f"{status!r} is not a valid status for {kind}")
        self.kind = kind
        self.status = status


class InvalidTransition(DashboardError):
    def __init__(self, record_id: Any, current: str, target: str) -> None:
        super().__init__(
            f"Record {record_id!r} cannot move from {current!r} to {target!r}"
        )
        self.record_id = record_id
        self.current = current
        self.target = target


class Busy(DashboardError):
    def __init__(self, record_id: Any) -> None:
        super().__init__(f"Record {record_id!r} is already being processed")
        self.record_id = record_id


class _CollaboratorError(DashboardError):
    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class LoadFailure(_CollaboratorError):
    """
    collaborator에서 목록 조회가 실패한 경우.
    """


class UpdateFailure(_CollaboratorError):
    """
    collaborator에서 상태 변경 / 생성이 실패한 경우 (네트워크 / 충돌 / 권한).
    """

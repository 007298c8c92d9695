"""
Request lifecycle state machine.

    IDLE --start--> PENDING --succeed--> SUCCESS(data)
                       |
                       +-----fail-----> FAILED(error)

start() is accepted from any state, so a failed or finished request can be
retried. clear_data() returns a SUCCESS state to IDLE.
"""

from typing import Any, Generic, Optional, TypeVar

from app.exceptions import InvalidStateTransition
from domain.enums import RequestStatus

T = TypeVar("T")


class RequestState(Generic[T]):
    def __init__(self, initial_data: Optional[T] = None):
        self.status = RequestStatus.IDLE
        self.data: Optional[T] = initial_data
        self.error: Optional[str] = None

    @property
    def is_loading(self) -> bool:
        return self.status == RequestStatus.PENDING

    def start(self) -> None:
        self.status = RequestStatus.PENDING
        self.error = None

    def succeed(self, data: T) -> None:
        self._require_pending("succeed")
        self.status = RequestStatus.SUCCESS
        self.data = data

    def fail(self, error: str) -> None:
        self._require_pending("fail")
        self.status = RequestStatus.FAILED
        self.error = error

    def clear_data(self, initial_data: Optional[T] = None) -> None:
        self.data = initial_data
        if self.status == RequestStatus.SUCCESS:
            self.status = RequestStatus.IDLE

    def _require_pending(self, event: str) -> None:
        if self.status != RequestStatus.PENDING:
            raise InvalidStateTransition(self.status.value, event)

    def __repr__(self) -> str:
        detail: Any = self.error if self.status == RequestStatus.FAILED else self.data
        return f"RequestState({self.status.value}, {detail!r})"

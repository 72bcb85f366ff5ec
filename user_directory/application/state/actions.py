"""Actions dispatched to the user directory store."""

from dataclasses import dataclass
from enum import Enum

from user_directory.domain.entities import UserRecord


class Operation(str, Enum):
    """Remote operations that toggle the busy flag."""

    LOAD = "load"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class ToastKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass(frozen=True)
class RequestStarted:
    operation: Operation


@dataclass(frozen=True)
class RequestFailed:
    operation: Operation
    message: str


@dataclass(frozen=True)
class UsersLoaded:
    records: tuple[UserRecord, ...]


@dataclass(frozen=True)
class UserCreated:
    record: UserRecord


@dataclass(frozen=True)
class UserUpdated:
    user_id: str
    record: UserRecord


@dataclass(frozen=True)
class UserDeleted:
    user_id: str


@dataclass(frozen=True)
class EditingSelected:
    record: UserRecord | None


@dataclass(frozen=True)
class ErrorCleared:
    pass


@dataclass(frozen=True)
class ToastShown:
    message: str
    kind: ToastKind = ToastKind.INFO


@dataclass(frozen=True)
class ToastHidden:
    pass


Action = (
    RequestStarted
    | RequestFailed
    | UsersLoaded
    | UserCreated
    | UserUpdated
    | UserDeleted
    | EditingSelected
    | ErrorCleared
    | ToastShown
    | ToastHidden
)

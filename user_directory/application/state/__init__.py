"""Application state: actions, reducers and the dispatching store."""

from .actions import (
    Action,
    EditingSelected,
    ErrorCleared,
    Operation,
    RequestFailed,
    RequestStarted,
    ToastHidden,
    ToastKind,
    ToastShown,
    UserCreated,
    UserDeleted,
    UsersLoaded,
    UserUpdated,
)
from .reducers import AppState, ToastState, UserDirectoryState, reduce
from .store import UserDirectoryStore, log_notifications

__all__ = [
    "Action",
    "EditingSelected",
    "ErrorCleared",
    "Operation",
    "RequestFailed",
    "RequestStarted",
    "ToastHidden",
    "ToastKind",
    "ToastShown",
    "UserCreated",
    "UserDeleted",
    "UsersLoaded",
    "UserUpdated",
    "AppState",
    "ToastState",
    "UserDirectoryState",
    "reduce",
    "UserDirectoryStore",
    "log_notifications",
]

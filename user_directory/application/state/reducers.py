"""Pure state transitions for the user directory.

``reduce`` never mutates its input; it returns a new ``AppState`` (or the
same one when the action does not apply).
"""

from dataclasses import dataclass, field, replace

from user_directory.domain.entities import UserRecord
from user_directory.application.state.actions import (
    Action,
    EditingSelected,
    ErrorCleared,
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


@dataclass(frozen=True)
class UserDirectoryState:
    """Session mirror of the remote record set plus request flags."""

    records: tuple[UserRecord, ...] = ()
    loading: bool = False
    error: str | None = None
    editing: UserRecord | None = None


@dataclass(frozen=True)
class ToastState:
    message: str = ""
    kind: ToastKind = ToastKind.INFO
    visible: bool = False


@dataclass(frozen=True)
class AppState:
    users: UserDirectoryState = field(default_factory=UserDirectoryState)
    toast: ToastState = field(default_factory=ToastState)


def reduce_users(state: UserDirectoryState, action: Action) -> UserDirectoryState:
    if isinstance(action, RequestStarted):
        return replace(state, loading=True, error=None)
    if isinstance(action, RequestFailed):
        return replace(state, loading=False, error=action.message)
    if isinstance(action, UsersLoaded):
        return replace(state, loading=False, records=tuple(action.records))
    if isinstance(action, UserCreated):
        return replace(state, loading=False, records=state.records + (action.record,))
    if isinstance(action, UserUpdated):
        records = list(state.records)
        for index, existing in enumerate(records):
            if existing.id == action.user_id:
                records[index] = action.record.with_id(action.user_id)
                break
        return replace(state, loading=False, records=tuple(records), editing=None)
    if isinstance(action, UserDeleted):
        records = tuple(r for r in state.records if r.id != action.user_id)
        return replace(state, loading=False, records=records)
    if isinstance(action, EditingSelected):
        return replace(state, editing=action.record)
    if isinstance(action, ErrorCleared):
        return replace(state, error=None)
    return state


def reduce_toast(state: ToastState, action: Action) -> ToastState:
    if isinstance(action, ToastShown):
        return ToastState(message=action.message, kind=action.kind, visible=True)
    if isinstance(action, ToastHidden):
        return ToastState(kind=state.kind)
    return state


def reduce(state: AppState, action: Action) -> AppState:
    users = reduce_users(state.users, action)
    toast = reduce_toast(state.toast, action)
    if users is state.users and toast is state.toast:
        return state
    return AppState(users=users, toast=toast)

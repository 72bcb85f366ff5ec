"""Create/edit workflow for the user form.

States: IDLE -> EDITING -> SUBMITTING -> SUBMITTED_OK | SUBMITTED_ERROR.
A submit with validation errors never reaches the network. A remote failure
keeps every entered value so the user can retry.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from user_directory.application.formatting import (
    ValidationErrorSet,
    mask_date_input,
    validate,
)
from user_directory.application.interfaces import LIST_ROUTE, Navigator
from user_directory.application.services.user_record_cache import UserRecordCache
from user_directory.application.state import (
    EditingSelected,
    ErrorCleared,
    ToastKind,
    ToastShown,
    UserDirectoryStore,
)
from user_directory.domain.entities import EDITABLE_FIELDS, FormFields, UserRecord
from user_directory.domain.exceptions import RemoteStoreError

logger = logging.getLogger(__name__)

CREATE_TITLE = "User Registration Form"
EDIT_TITLE = "Edit User"


class FormStatus(str, Enum):
    IDLE = "idle"
    EDITING = "editing"
    SUBMITTING = "submitting"
    SUBMITTED_OK = "submitted_ok"
    SUBMITTED_ERROR = "submitted_error"


@dataclass
class SubmitOutcome:
    """Result of a submit attempt."""

    ok: bool
    record: UserRecord | None = None
    errors: ValidationErrorSet = field(default_factory=dict)
    remote_error: str | None = None


class FormController:
    """Drives the user form against the record cache."""

    def __init__(
        self,
        cache: UserRecordCache,
        store: UserDirectoryStore,
        navigator: Navigator,
    ):
        self._cache = cache
        self._store = store
        self._navigator = navigator
        self.fields = FormFields()
        self.errors: ValidationErrorSet = {}
        self.status = FormStatus.IDLE
        self.is_submitted = False

    # ── View state ───────────────────────────────────────────────────

    @property
    def editing(self) -> UserRecord | None:
        return self._store.state.users.editing

    @property
    def is_edit_mode(self) -> bool:
        editing = self.editing
        return editing is not None and editing.id is not None

    @property
    def title(self) -> str:
        return EDIT_TITLE if self.editing is not None else CREATE_TITLE

    @property
    def remote_error(self) -> str | None:
        return self._store.state.users.error

    @property
    def busy(self) -> bool:
        return self._cache.busy

    # ── Transitions ──────────────────────────────────────────────────

    def open(self) -> None:
        """Populate the form from the editing selection, or reset it for create."""
        editing = self.editing
        self.fields = FormFields.from_record(editing) if editing else FormFields()
        self.errors = {}
        self.is_submitted = False
        self.status = FormStatus.EDITING
        self._store.dispatch(ErrorCleared())

    def begin_create(self) -> None:
        self._store.dispatch(EditingSelected(None))
        self.open()

    def begin_edit(self, record: UserRecord) -> None:
        self._store.dispatch(EditingSelected(record))
        self.open()

    def change(self, name: str, value: str) -> str:
        """Apply a single field edit and return the stored value."""
        if name not in EDITABLE_FIELDS:
            raise KeyError(name)
        if name == "date_of_birth":
            value = mask_date_input(value)
        setattr(self.fields, name, value)

        if name in self.errors:
            del self.errors[name]
        if self.remote_error:
            self._store.dispatch(ErrorCleared())
        if self.status == FormStatus.IDLE:
            self.status = FormStatus.EDITING
        return value

    async def submit(self) -> SubmitOutcome:
        self.is_submitted = True
        self._store.dispatch(ErrorCleared())

        self.errors = validate(self.fields)
        if self.errors:
            self.status = FormStatus.SUBMITTED_ERROR
            logger.debug("Form invalid: %s", ", ".join(sorted(self.errors)))
            return SubmitOutcome(ok=False, errors=dict(self.errors))

        draft = self.fields.to_record()
        editing = self.editing
        self.status = FormStatus.SUBMITTING
        try:
            if editing is not None and editing.id is not None:
                record = await self._cache.update(editing.id, draft)
                message = "User updated successfully!"
            else:
                record = await self._cache.insert(draft)
                message = "User created successfully!"
        except RemoteStoreError as exc:
            self.status = FormStatus.SUBMITTED_ERROR
            logger.error("Form submission error: %s", exc.message)
            return SubmitOutcome(ok=False, remote_error=exc.message)

        self.status = FormStatus.SUBMITTED_OK
        self._store.dispatch(ToastShown(message, ToastKind.SUCCESS))
        self._reset()
        self._navigator.navigate(LIST_ROUTE)
        return SubmitOutcome(ok=True, record=record)

    def cancel(self) -> None:
        """Drop the editing selection and go back to the list, without any remote call."""
        self._reset()
        self.status = FormStatus.IDLE
        self._navigator.navigate(LIST_ROUTE)

    def leave(self) -> None:
        """Called when navigating away from the form."""
        self._reset()
        self.status = FormStatus.IDLE

    def _reset(self) -> None:
        self._store.dispatch(EditingSelected(None))
        self._store.dispatch(ErrorCleared())
        self.fields = FormFields()
        self.errors = {}
        self.is_submitted = False

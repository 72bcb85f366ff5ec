"""Session cache of user records, reconciled against the remote store.

The remote store always wins: the cache only changes after a successful
response, using the values the server returned. A failed call leaves the
record set untouched, records the message in the shared error slot and
re-raises. Concurrent calls are neither queued nor deduplicated; when two
overlap, whichever response lands last determines the final state.
"""

import logging
from collections.abc import Sequence

from user_directory.application.formatting import DateFormatter
from user_directory.application.interfaces import UserStore
from user_directory.application.schemas.user import UserPayload, UserWire
from user_directory.application.state import (
    Operation,
    RequestFailed,
    RequestStarted,
    UserCreated,
    UserDeleted,
    UserDirectoryStore,
    UsersLoaded,
    UserUpdated,
)
from user_directory.domain.dates import DisplayDate
from user_directory.domain.entities import UserRecord
from user_directory.domain.exceptions import FormatError, RemoteStoreError
from user_directory.infrastructure.logging.colored_logger import OperationLogger, OperationStage

logger = logging.getLogger(__name__)


class UserRecordCache:
    """Loads, inserts, updates and removes user records through the store port."""

    def __init__(
        self,
        store: UserStore,
        state: UserDirectoryStore,
        date_formatter: DateFormatter | None = None,
    ):
        self._store = store
        self._state = state
        self._dates = date_formatter or DateFormatter()
        self._log = OperationLogger("UserRecordCache")

    @property
    def records(self) -> tuple[UserRecord, ...]:
        return self._state.state.users.records

    @property
    def busy(self) -> bool:
        return self._state.state.users.loading

    @property
    def last_error(self) -> str | None:
        return self._state.state.users.error

    # ── Conversions ──────────────────────────────────────────────────

    def to_record(self, user: UserWire) -> UserRecord:
        """Convert a server user to a cache record with a display-form date."""
        try:
            date_of_birth = self._dates.to_display(user.date_of_birth)
        except FormatError:
            logger.warning(
                "User %s has an unreadable date of birth %r; keeping it as sent",
                user.id,
                user.date_of_birth,
            )
            date_of_birth = DisplayDate(user.date_of_birth)
        return UserRecord(
            id=user.id,
            full_name=user.full_name,
            mobile_number=user.mobile_number,
            email_address=user.email_address,
            date_of_birth=date_of_birth,
            address_line1=user.address_line1,
            address_line2=user.address_line2 or "",
            city=user.city,
            pin_code=user.pin_code,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def to_payload(self, draft: UserRecord) -> UserPayload:
        """Build the request body, converting the date to wire form.

        Raises FormatError when the draft's date is not a valid display date.
        """
        return UserPayload(
            full_name=draft.full_name,
            mobile_number=draft.mobile_number,
            email_address=draft.email_address,
            date_of_birth=self._dates.to_wire(draft.date_of_birth),
            address_line1=draft.address_line1,
            address_line2=draft.address_line2,
            city=draft.city,
            pin_code=draft.pin_code,
        )

    # ── Operations ───────────────────────────────────────────────────

    def _fail(self, operation: Operation, exc: RemoteStoreError) -> None:
        self._state.dispatch(RequestFailed(operation, exc.message))

    async def load(self) -> Sequence[UserRecord]:
        """Replace the local set with the store's current users."""
        self._state.dispatch(RequestStarted(Operation.LOAD))
        try:
            with self._log.timed_step(OperationStage.LOAD, "Fetching users"):
                users = await self._store.list_users()
        except RemoteStoreError as exc:
            self._fail(Operation.LOAD, exc)
            raise
        records = tuple(self.to_record(user) for user in users)
        self._state.dispatch(UsersLoaded(records))
        self._log.detail("Cache refreshed", count=len(records))
        return records

    async def insert(self, draft: UserRecord) -> UserRecord:
        """Register a draft and append the server's copy on success."""
        payload = self.to_payload(draft)
        self._state.dispatch(RequestStarted(Operation.CREATE))
        try:
            with self._log.timed_step(OperationStage.CREATE, "Registering user"):
                created = await self._store.create_user(payload)
        except RemoteStoreError as exc:
            self._fail(Operation.CREATE, exc)
            raise
        record = self.to_record(created)
        self._state.dispatch(UserCreated(record))
        return record

    async def update(self, user_id: str, draft: UserRecord) -> UserRecord:
        """Send an update and replace the matching local record on success.

        When no local record has ``user_id`` the local set is left as is.
        """
        payload = self.to_payload(draft)
        self._state.dispatch(RequestStarted(Operation.UPDATE))
        try:
            with self._log.timed_step(OperationStage.UPDATE, "Updating user", id=user_id):
                updated = await self._store.update_user(user_id, payload)
        except RemoteStoreError as exc:
            self._fail(Operation.UPDATE, exc)
            raise
        record = self.to_record(updated).with_id(user_id)
        if not any(r.id == user_id for r in self.records):
            logger.info("Updated user %s is not cached; local set unchanged", user_id)
        self._state.dispatch(UserUpdated(user_id, record))
        return record

    async def remove(self, user_id: str) -> None:
        """Delete a user remotely and drop every local record with that id."""
        self._state.dispatch(RequestStarted(Operation.DELETE))
        try:
            with self._log.timed_step(OperationStage.DELETE, "Deleting user", id=user_id):
                await self._store.delete_user(user_id)
        except RemoteStoreError as exc:
            self._fail(Operation.DELETE, exc)
            raise
        self._state.dispatch(UserDeleted(user_id))

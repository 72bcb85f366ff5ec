"""List view workflow: load, search, edit selection and confirmed delete."""

import logging

from user_directory.application.formatting import format_date_label
from user_directory.application.interfaces import FORM_ROUTE, Navigator
from user_directory.application.services.user_record_cache import UserRecordCache
from user_directory.application.state import (
    EditingSelected,
    ToastKind,
    ToastShown,
    UserDirectoryStore,
)
from user_directory.domain.entities import UserRecord
from user_directory.domain.exceptions import RemoteStoreError

logger = logging.getLogger(__name__)


def matches(record: UserRecord, term: str) -> bool:
    """Name and email match case-insensitively; mobile number literally."""
    needle = term.lower()
    return (
        needle in record.full_name.lower()
        or needle in record.email_address.lower()
        or term in record.mobile_number
    )


def initials(full_name: str) -> str:
    """Avatar initials: first and last name, or ``??`` when blank."""
    names = (full_name or "").split()
    if not names:
        return "??"
    if len(names) == 1:
        return names[0][0].upper()
    return (names[0][0] + names[-1][0]).upper()


def format_address(address_line1: str, address_line2: str, city: str, pin_code: str) -> str:
    address = address_line1 or ""
    if address_line2:
        address += f", {address_line2}"
    if city:
        address += f", {city}"
    if pin_code:
        address += f" - {pin_code}"
    return address


class ListController:
    """Drives the user list against the record cache."""

    def __init__(
        self,
        cache: UserRecordCache,
        store: UserDirectoryStore,
        navigator: Navigator,
    ):
        self._cache = cache
        self._store = store
        self._navigator = navigator
        self.search_term = ""
        self.pending_delete: str | None = None
        self.mounted = False

    @property
    def records(self) -> tuple[UserRecord, ...]:
        return self._cache.records

    @property
    def visible_records(self) -> list[UserRecord]:
        """Records matching the current search term, recomputed on every access."""
        if not self.search_term:
            return list(self.records)
        return [r for r in self.records if matches(r, self.search_term)]

    @property
    def total(self) -> int:
        return len(self.records)

    @property
    def showing(self) -> int:
        return len(self.visible_records)

    @property
    def empty_message(self) -> str:
        return "No users found" if self.search_term else "No users available"

    @property
    def error(self) -> str | None:
        return self._cache.last_error

    @property
    def busy(self) -> bool:
        return self._cache.busy

    async def mount(self) -> None:
        """Load the records; a failure is left in the shared error slot."""
        self.mounted = True
        try:
            await self._cache.load()
        except RemoteStoreError as exc:
            logger.error("Error fetching users: %s", exc.message)

    def set_search(self, term: str) -> list[UserRecord]:
        self.search_term = term
        return self.visible_records

    def edit(self, record: UserRecord) -> None:
        self._store.dispatch(EditingSelected(record))
        self._navigator.navigate(FORM_ROUTE)

    def find(self, user_id: str) -> UserRecord | None:
        for record in self.records:
            if record.id == user_id:
                return record
        return None

    def request_delete(self, user_id: str) -> None:
        """Mark a record as awaiting confirmation; nothing is sent yet."""
        self.pending_delete = user_id

    def cancel_delete(self) -> None:
        self.pending_delete = None

    async def confirm_delete(self) -> bool:
        """Delete the pending record. Returns True on success."""
        user_id = self.pending_delete
        if user_id is None:
            return False
        try:
            await self._cache.remove(user_id)
        except RemoteStoreError as exc:
            logger.error("Error deleting user %s: %s", user_id, exc.message)
            return False
        self.pending_delete = None
        self._store.dispatch(ToastShown("User deleted successfully!", ToastKind.SUCCESS))
        return True

    def row(self, record: UserRecord) -> dict[str, str | None]:
        """Display values for one table row."""
        return {
            "id": record.id,
            "initials": initials(record.full_name),
            "full_name": record.full_name,
            "mobile_number": record.mobile_number,
            "email_address": record.email_address,
            "date_of_birth": record.date_of_birth,
            "date_label": format_date_label(record.date_of_birth),
            "address": format_address(
                record.address_line1, record.address_line2, record.city, record.pin_code
            ),
        }

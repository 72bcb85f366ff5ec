"""Domain entities for the user directory: pure Python business objects."""

from dataclasses import dataclass, fields, replace
from datetime import datetime

from user_directory.domain.dates import DisplayDate

# Fields the user edits on the form, in display order.
EDITABLE_FIELDS: tuple[str, ...] = (
    "full_name",
    "mobile_number",
    "email_address",
    "date_of_birth",
    "address_line1",
    "address_line2",
    "city",
    "pin_code",
)


@dataclass(frozen=True)
class UserRecord:
    """A user as held by the session cache.

    ``id`` is assigned by the remote store and never regenerated; a record
    without one is pending creation. ``date_of_birth`` is always in display
    form (DD/MM/YYYY).
    """

    full_name: str
    mobile_number: str
    email_address: str
    date_of_birth: DisplayDate
    address_line1: str
    city: str
    pin_code: str
    address_line2: str = ""
    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def with_id(self, user_id: str) -> "UserRecord":
        return replace(self, id=user_id)


@dataclass
class FormFields:
    """Raw text values of the create/edit form."""

    full_name: str = ""
    mobile_number: str = ""
    email_address: str = ""
    date_of_birth: str = ""
    address_line1: str = ""
    address_line2: str = ""
    city: str = ""
    pin_code: str = ""
    id: str | None = None

    @classmethod
    def from_record(cls, record: UserRecord) -> "FormFields":
        values = {name: getattr(record, name) or "" for name in EDITABLE_FIELDS}
        return cls(id=record.id, **values)

    def to_record(self) -> UserRecord:
        """Build a draft record from the form values (trimming nothing)."""
        return UserRecord(
            id=self.id,
            full_name=self.full_name,
            mobile_number=self.mobile_number,
            email_address=self.email_address,
            date_of_birth=DisplayDate(self.date_of_birth),
            address_line1=self.address_line1,
            address_line2=self.address_line2,
            city=self.city,
            pin_code=self.pin_code,
        )

    def as_dict(self) -> dict[str, str | None]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

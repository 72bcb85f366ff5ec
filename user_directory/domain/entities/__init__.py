from .user_record import EDITABLE_FIELDS, FormFields, UserRecord

__all__ = [
    "EDITABLE_FIELDS",
    "FormFields",
    "UserRecord",
]

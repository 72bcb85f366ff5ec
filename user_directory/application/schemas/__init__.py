from .user import UserListData, UserListResponse, UserPayload, UserResponse, UserWire
from .views import (
    FieldChangeRequest,
    FormFieldsSchema,
    FormViewResponse,
    ListViewResponse,
    ToastSchema,
    UserRowSchema,
)

__all__ = [
    "UserListData",
    "UserListResponse",
    "UserPayload",
    "UserResponse",
    "UserWire",
    "FieldChangeRequest",
    "FormFieldsSchema",
    "FormViewResponse",
    "ListViewResponse",
    "ToastSchema",
    "UserRowSchema",
]

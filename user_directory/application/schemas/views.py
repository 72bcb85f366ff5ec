"""Pydantic DTOs for the JSON view state served to the browser front end."""

from pydantic import BaseModel, Field


class ToastSchema(BaseModel):
    message: str
    kind: str
    visible: bool


class UserRowSchema(BaseModel):
    """One row of the user table, with display-ready helpers."""

    id: str | None
    initials: str
    full_name: str
    mobile_number: str
    email_address: str
    date_of_birth: str
    date_label: str
    address: str


class ListViewResponse(BaseModel):
    route: str
    search: str = ""
    users: list[UserRowSchema] = Field(default_factory=list)
    total: int = 0
    showing: int = 0
    empty_message: str | None = None
    pending_delete: str | None = None
    loading: bool = False
    error: str | None = None
    toast: ToastSchema


class FormFieldsSchema(BaseModel):
    id: str | None = None
    full_name: str = ""
    mobile_number: str = ""
    email_address: str = ""
    date_of_birth: str = ""
    address_line1: str = ""
    address_line2: str = ""
    city: str = ""
    pin_code: str = ""


class FormViewResponse(BaseModel):
    route: str
    title: str
    status: str
    editing: bool
    fields: FormFieldsSchema
    errors: dict[str, str] = Field(default_factory=dict)
    error: str | None = None
    submitted: bool = False
    loading: bool = False
    toast: ToastSchema


class FieldChangeRequest(BaseModel):
    value: str = Field("", max_length=500)

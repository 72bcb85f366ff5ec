"""Pydantic DTOs for the remote user store's JSON contract."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class UserPayload(BaseModel):
    """Request body for register/update: the record minus id and timestamps."""

    model_config = ConfigDict(populate_by_name=True)

    full_name: str = Field(..., alias="fullName")
    mobile_number: str = Field(..., alias="mobileNumber")
    email_address: str = Field(..., alias="emailAddress")
    date_of_birth: str = Field(..., alias="dateOfBirth")
    address_line1: str = Field(..., alias="addressLine1")
    address_line2: str = Field("", alias="addressLine2")
    city: str
    pin_code: str = Field(..., alias="pinCode")


class UserWire(BaseModel):
    """A user exactly as the remote store returns it."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(..., alias="_id")
    full_name: str = Field(..., alias="fullName")
    mobile_number: str = Field(..., alias="mobileNumber")
    email_address: str = Field(..., alias="emailAddress")
    date_of_birth: str = Field(..., alias="dateOfBirth")
    address_line1: str = Field(..., alias="addressLine1")
    address_line2: str | None = Field(None, alias="addressLine2")
    city: str
    pin_code: str = Field(..., alias="pinCode")
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")


class UserListData(BaseModel):
    users: list[UserWire] = Field(default_factory=list)
    total: int | None = None
    showing: int | None = None


class UserListResponse(BaseModel):
    """Envelope of ``GET /users``."""

    success: bool = True
    message: str = ""
    data: UserListData = Field(default_factory=UserListData)


class UserResponse(BaseModel):
    """Envelope of register/update; ``data`` is the user itself."""

    success: bool = True
    message: str = ""
    data: dict[str, Any] = Field(default_factory=dict)

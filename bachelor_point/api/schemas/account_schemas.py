from datetime import datetime

from pydantic import Field

from bachelor_point.api.schemas.base import CamelModel
from bachelor_point.domain.enums.account_role import AccountRole
from bachelor_point.domain.enums.account_status import AccountStatus


# Requests. Fields are optional so missing values reach the use case and come
# back as a 400 with the usual message instead of a schema error. Lengths match
# the columns in infrastructure/database/models.py; bcrypt only reads 72 bytes.


class RegisterRequest(CamelModel):
    student_id: str | None = Field(default=None, max_length=64)
    name: str | None = Field(default=None, max_length=256)
    email: str | None = Field(default=None, max_length=320)
    password: str | None = Field(default=None, max_length=72)
    gender: str | None = Field(default=None, max_length=32)
    identity_document: str | None = None


class LoginRequest(CamelModel):
    identifier: str | None = None
    password: str | None = None


class UpdateProfileRequest(CamelModel):
    bio: str | None = None
    photo: str | None = None


# Responses


class MessageResponse(CamelModel):
    message: str


class AccountResponse(CamelModel):
    """Own profile. Never includes the password hash."""

    student_id: str
    name: str
    email: str
    gender: str
    bio: str | None = None
    photo: str | None = None
    role: AccountRole
    status: AccountStatus
    created_at: datetime


class AdminAccountResponse(AccountResponse):
    """Admin listing: adds the identity document so it can be checked before approval."""

    id_card: str
    updated_at: datetime


class RegisterResponse(MessageResponse):
    account: AccountResponse


class LoginResponse(MessageResponse):
    token: str
    token_type: str = "bearer"
    account: AccountResponse


class ModerationResponse(MessageResponse):
    account: AdminAccountResponse


class ContactResponse(CamelModel):
    name: str
    email: str
    student_id: str

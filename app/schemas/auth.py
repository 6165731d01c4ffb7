from datetime import datetime

from pydantic import Field, field_validator

from app.models.user import UserRole
from app.schemas.common import CamelModel
from app.services.auth_service import is_valid_email, is_valid_password


class LoginRequest(CamelModel):
    email: str
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        if not is_valid_email(v):
            raise ValueError('"email" must be a valid email')
        return v


class RegisterRequest(LoginRequest):
    password: str = Field(min_length=8)
    name: str = Field(min_length=2)
    role: UserRole | None = None

    @field_validator("password")
    @classmethod
    def check_password(cls, v: str) -> str:
        if not is_valid_password(v):
            raise ValueError("password needs upper and lower case letters and a number")
        return v


class RefreshRequest(CamelModel):
    refresh_token: str | None = None


class TokenPair(CamelModel):
    access_token: str
    refresh_token: str


class UserOut(CamelModel):
    id: str
    email: str
    name: str
    role: UserRole


class ProfileOut(UserOut):
    is_active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None


class LoginData(TokenPair):
    user: UserOut

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

# bcrypt only hashes the first 72 bytes and refuses longer input
BCRYPT_MAX_BYTES = 72


class SignupRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=BCRYPT_MAX_BYTES)

    @field_validator("password")
    @classmethod
    def _fits_bcrypt(cls, v: str) -> str:
        if len(v.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValueError(f"password must be at most {BCRYPT_MAX_BYTES} bytes when UTF-8 encoded")
        return v


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=BCRYPT_MAX_BYTES)


class UserRead(BaseModel):
    """User as returned to clients (never the password hash)."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    email: str
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")


class AuthResponse(BaseModel):
    token: str
    user: UserRead


class SubjectRead(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    email: str
    issued_at: datetime = Field(..., alias="issuedAt")

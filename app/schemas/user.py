# app/schemas/user.py
import uuid
from datetime import datetime
from typing import Literal

from pydantic import ConfigDict, Field, field_validator
from sqlmodel import SQLModel

Role = Literal["admin", "staff"]


class UserRegister(SQLModel):
    """
    Payload for POST /register.

    Field names follow the login form: `user`, `pass`, `role`.
    `pass` is a keyword in Python, hence the alias.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    user: str | None = None
    password: str | None = Field(default=None, alias="pass")
    role: Role | None = None

    @field_validator("user")
    @classmethod
    def normalize_user(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return v.strip() or None

    @field_validator("role", mode="before")
    @classmethod
    def blank_role(cls, v):
        # HTML forms send "" for an untouched select
        return v or None


class UserLogin(SQLModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    user: str | None = None
    password: str | None = Field(default=None, alias="pass")


class UserRead(SQLModel):
    """Response schema returned to clients (never the hash)."""

    id: uuid.UUID
    username: str
    role: Role
    created_at: datetime


class LoginResult(SQLModel):
    message: str
    role: Role
    redirect: str

# app/models/user.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class User(SQLModel, table=True):
    """
    Till operator account.

    Role:
      - "admin" | "staff"
      - admins land on the admin dashboard, staff on the ordering screen.

    Only the bcrypt hash of the password is stored.
    """

    __tablename__ = "users"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    username: str = Field(
        unique=True,
        index=True,
        description="Login name (trimmed, unique)",
    )

    password_hash: str = Field(
        description="bcrypt hash of the password",
    )

    role: str = Field(
        default="staff",
        index=True,
        description="Application role: admin | staff",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )

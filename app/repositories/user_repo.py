# app/repositories/user_repo.py
from sqlalchemy import func
from sqlmodel import Session, select

from app.models.user import User


class UserRepository:
    """
    Data access layer for User.

    Responsibilities:
      - Pure DB operations (CRUD + queries)
      - No FastAPI, no HTTP, no business logic
    """

    def get_by_username(self, session: Session, username: str) -> User | None:
        """Return a User by unique username, or None if not found."""
        stmt = select(User).where(User.username == username)
        return session.exec(stmt).first()

    def count_by_role(self, session: Session, role: str) -> int:
        stmt = select(func.count()).select_from(User).where(User.role == role)
        value = session.exec(stmt).one()
        return int(value or 0)

    def create(self, session: Session, user: User) -> User:
        """Insert a new User and return the persisted row."""
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

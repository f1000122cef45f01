# app/services/user_service.py
import logging

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.security import create_access_token, hash_password, verify_password
from app.models.user import User
from app.repositories.user_repo import UserRepository
from app.schemas.user import LoginResult, UserLogin, UserRegister

logger = logging.getLogger(__name__)

DASHBOARD_FOR_ROLE: dict[str, str] = {
    "admin": "/admindashboard",
    "staff": "/staffdashboard",
}


class UserService:
    """
    Business logic for till accounts.

    Responsibilities:
      - registration (unique username, bcrypt hash)
      - credential check and session token issuance
      - map domain errors to HTTP errors
    """

    def __init__(self, repo: UserRepository):
        self.repo = repo

    def register(self, session: Session, payload: UserRegister) -> User:
        """
        Create an account. Role defaults to "staff".

        Raises:
            HTTPException(400): username or password missing.
            HTTPException(409): username already taken.
        """
        if not payload.user or not payload.password:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Username and password required",
            )

        if self.repo.get_by_username(session, payload.user) is not None:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="User already exists",
            )

        user = User(
            username=payload.user,
            password_hash=hash_password(payload.password),
            role=payload.role or "staff",
        )
        user = self.repo.create(session, user)
        logger.info("Registered %s user %s", user.role, user.username)
        return user

    def login(self, session: Session, payload: UserLogin) -> tuple[str, LoginResult]:
        """
        Check credentials and issue a session token.

        Returns:
            (token, LoginResult) - the router puts the token in the cookie.

        Raises:
            HTTPException(404): unknown username.
            HTTPException(401): wrong password.
        """
        user = None
        if payload.user:
            user = self.repo.get_by_username(session, payload.user.strip())
        if user is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User not found",
            )

        if not payload.password or not verify_password(payload.password, user.password_hash):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid password",
            )

        token = create_access_token(
            {"id": str(user.id), "username": user.username, "role": user.role}
        )
        return token, LoginResult(
            message="Login successful",
            role=user.role,
            redirect=DASHBOARD_FOR_ROLE.get(user.role, "/staffdashboard"),
        )

# app/core/auth.py
import uuid

from fastapi import Depends, HTTPException, Request, status
from jose import JWTError
from sqlmodel import Session

from app.core.config import get_settings
from app.core.security import decode_access_token
from app.database import get_session
from app.models.user import User

settings = get_settings()


def _unauthorized(detail: str) -> HTTPException:
    """
    401 that also tells the browser to drop the stale session cookie.
    """
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={
            "set-cookie": f"{settings.AUTH_COOKIE_NAME}=; Max-Age=0; Path=/; HttpOnly; SameSite=strict",
        },
    )


def get_current_user(
    request: Request,
    session: Session = Depends(get_session),
) -> User:
    """
    Resolve the logged-in user from the session cookie.

    Flow:
      1. Read the JWT from the cookie (AUTH_COOKIE_NAME).
      2. Verify signature + expiry.
      3. Load the user row by the 'id' claim.

    Raises:
        HTTPException(401): missing/invalid token or unknown user;
        the response clears the cookie.
    """
    token = request.cookies.get(settings.AUTH_COOKIE_NAME)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )

    try:
        payload = decode_access_token(token)
        user_id = uuid.UUID(str(payload.get("id")))
    except (JWTError, ValueError):
        raise _unauthorized("Invalid or expired token")

    user = session.get(User, user_id)
    if user is None:
        raise _unauthorized("User no longer exists")
    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    """
    Enforce admin role.

    Raises:
        HTTPException(403): if role is not admin.
    """
    if user.role != "admin":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail={"message": "Admin access required", "redirect": "/staffdashboard"},
        )
    return user


def require_staff(user: User = Depends(get_current_user)) -> User:
    """
    Enforce staff role (the ordering screen).

    Admins are pointed back at their own dashboard with 403.
    """
    if user.role != "staff":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail={"message": "Staff access required", "redirect": "/admindashboard"},
        )
    return user

# app/routers/users.py
from typing import Any

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError
from sqlmodel import Session

from app.core.auth import get_current_user
from app.core.config import get_settings
from app.database import get_session
from app.models.user import User
from app.repositories.user_repo import UserRepository
from app.schemas.user import LoginResult, UserLogin, UserRead, UserRegister
from app.services.user_service import UserService

router = APIRouter(tags=["Auth"])

settings = get_settings()
repo = UserRepository()
service = UserService(repo)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def _read_body(request: Request) -> dict[str, Any]:
    """
    The login page posts an HTML form; API clients post JSON.
    Accept both.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return dict(form)
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _parse(model, data: dict[str, Any]):
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        raise RequestValidationError(exc.errors())


@router.post(
    "/register",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: Request,
    session: Session = Depends(get_session),
):
    """
    Create a till account.

    Body (form or JSON): user, pass, role (admin | staff, default staff).
    """
    payload = _parse(UserRegister, await _read_body(request))
    return await run_in_threadpool(service.register, session, payload)


@router.post("/login", response_model=LoginResult)
async def login(
    request: Request,
    response: Response,
    session: Session = Depends(get_session),
):
    """
    Check credentials and set the session cookie.

    The response names the dashboard the user should land on.
    """
    payload = _parse(UserLogin, await _read_body(request))
    token, result = await run_in_threadpool(service.login, session, payload)

    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=token,
        httponly=True,
        samesite="strict",
        max_age=60 * 60 * 24 * settings.JWT_EXPIRE_DAYS,
    )
    return result


@router.get("/logout")
def logout(response: Response):
    """
    Drop the session cookie.
    """
    response.delete_cookie(settings.AUTH_COOKIE_NAME)
    return {"message": "Logged out", "redirect": "/login"}


@router.get("/me", response_model=UserRead)
def read_me(current_user: User = Depends(get_current_user)):
    """
    Return the logged-in user's account.
    """
    return current_user

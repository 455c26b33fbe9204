from typing import Optional

from fastapi import APIRouter, Depends, Form, HTTPException, Query
from fastapi.responses import PlainTextResponse

from delivery_tracker.config.settings import Settings, get_settings
from delivery_tracker.core.auth.schemas import LoginRequest
from delivery_tracker.core.auth.service import AuthService

router = APIRouter()


def login_request(
    query_username: Optional[str] = Query(None, alias="username", description="Username (query string)"),
    query_password: Optional[str] = Query(None, alias="password", description="Password (query string)"),
    form_username: Optional[str] = Form(None, alias="username", description="Username (form body)"),
    form_password: Optional[str] = Form(None, alias="password", description="Password (form body)"),
) -> LoginRequest:
    """Credentials from the query string, or from a form body when absent there"""
    username = query_username if query_username is not None else form_username
    password = query_password if query_password is not None else form_password

    if username is None or password is None:
        raise HTTPException(status_code=422, detail="username and password are required")

    return LoginRequest(username=username, password=password)


def get_auth_service(settings: Settings = Depends(get_settings)) -> AuthService:
    return AuthService(settings)


@router.post("/login", response_class=PlainTextResponse)
async def login(
    credentials: LoginRequest = Depends(login_request),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Issue a signed token for the configured credential pair

    **Parameters** (query string or form body, both required):
    - **username**
    - **password**

    **Returns:**
    - The raw JWT (HMAC-signed, `sub` = username, expires one hour after issue)
    """
    return auth_service.login(credentials.username, credentials.password)

# portfolio_api/api/endpoints/auth.py
from fastapi import APIRouter, Depends, HTTPException, status

from portfolio_api.api.deps import get_settings
from portfolio_api.core.config import Settings
from portfolio_api.core.logging import logger
from portfolio_api.core.security import create_access_token, generate_session_token, verify_admin_password
from portfolio_api.schemas.auth import LoginRequest, LoginResponse

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(login_in: LoginRequest, settings: Settings = Depends(get_settings)):
    """
    Exchange the admin password for a bearer token.

    In "token" mode the token is signed and expires; in "presence" mode it
    is an opaque session token, like the one the browser derives itself.
    """
    if not verify_admin_password(login_in.password, settings.ADMIN_PASSWORD_HASH):
        logger.warning("Failed admin login attempt")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid password",
        )

    if settings.AUTH_MODE == "token":
        token = create_access_token(settings.SECRET_KEY, settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    else:
        token = generate_session_token()

    logger.info("Admin logged in")
    return LoginResponse(access_token=token)

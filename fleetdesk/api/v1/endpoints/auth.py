"""Authentication endpoints."""
import logging
from datetime import timedelta
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fleetdesk.core.config import get_settings
from fleetdesk.core.dependencies import get_current_user
from fleetdesk.core.security import create_access_token, verify_password
from fleetdesk.db.database import get_async_session
from fleetdesk.models.enums import UserRole
from fleetdesk.models.user import User
from fleetdesk.schemas.auth import CurrentUser, Token

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = logging.getLogger(__name__)


@router.post("/token", response_model=Token)
async def login(
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> Token:
    """Login endpoint - validates credentials and returns JWT token.

    Request (OAuth2PasswordRequestForm via form-data):
        - username: User's email
        - password: User's password

    Response:
        - access_token: JWT token carrying the user id and role
        - token_type: "bearer"
        - user: the authenticated user

    Raises:
        401 Unauthorized: If credentials are invalid
    """
    email = form_data.username.strip().lower()

    # Fetch user by email
    result = await session.execute(select(User).where(User.email == email))
    user = result.scalar_one_or_none()

    # Validate credentials
    if user is None:
        logger.warning(f"Login attempt failed: User '{email}' not found")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not verify_password(form_data.password, user.hashed_password):
        logger.warning(f"Login attempt failed: Invalid password for user '{email}'")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    # Check if user is active
    if not user.is_active:
        logger.warning(f"Login attempt failed: User '{email}' account is disabled")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User account is disabled",
        )

    # Create JWT token
    settings = get_settings()
    access_token_expires = timedelta(minutes=settings.access_token_expire_minutes)
    access_token = create_access_token(
        data={"sub": str(user.id), "role": UserRole(user.role).value},
        expires_delta=access_token_expires,
    )

    logger.info(f"User '{user.email}' logged in successfully")
    return Token(
        access_token=access_token,
        token_type="bearer",
        user=CurrentUser.model_validate(user),
    )


@router.get("/me", response_model=CurrentUser)
async def read_current_user(
    current_user: Annotated[User, Depends(get_current_user)],
) -> CurrentUser:
    """Return the user behind the bearer token."""
    return CurrentUser.model_validate(current_user)

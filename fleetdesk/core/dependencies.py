"""FastAPI dependencies for authentication and authorization."""
from typing import Annotated, Callable
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fleetdesk.core.security import decode_access_token
from fleetdesk.db.database import get_async_session
from fleetdesk.models.enums import UserRole
from fleetdesk.models.user import User

# HTTP Bearer token extractor (reads Authorization: Bearer <token>)
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> User:
    """Dependency to get current authenticated user from JWT token.

    Raises:
        HTTPException 401: If token is missing, invalid, or user not found
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    # Check if token is present
    if credentials is None:
        raise credentials_exception

    # Decode token
    claims = decode_access_token(credentials.credentials)
    if claims is None:
        raise credentials_exception

    try:
        user_id = UUID(str(claims["sub"]))
    except ValueError:
        raise credentials_exception

    # Fetch user from database
    result = await session.execute(
        select(User).where(User.id == user_id, User.is_active == True)
    )
    user = result.scalar_one_or_none()

    if user is None:
        raise credentials_exception

    return user


def require_roles(*roles: UserRole) -> Callable:
    """Dependency factory allowing only the given roles.

    Usage:
        @router.get("/drivers")
        async def list_drivers(
            current_user: Annotated[User, Depends(require_roles(UserRole.ADMIN))]
        ): ...

    Raises:
        HTTPException 403: If the user's role is not allowed
    """
    allowed = {UserRole(role) for role in roles}

    async def _check_role(
        current_user: Annotated[User, Depends(get_current_user)],
    ) -> User:
        if UserRole(current_user.role) not in allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Not enough permissions",
            )
        return current_user

    return _check_role


AdminUser = Annotated[User, Depends(require_roles(UserRole.ADMIN))]
DriverUser = Annotated[User, Depends(require_roles(UserRole.DRIVER))]

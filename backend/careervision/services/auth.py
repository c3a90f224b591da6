"""
Caller resolution.

Authentication happens upstream (gateway / auth service); requests reach this
API with the authenticated user's id in the X-User-Id header.
"""
from typing import Optional

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..models import User


async def get_current_user(
    x_user_id: Optional[str] = Header(None),
    db: AsyncSession = Depends(get_db)
) -> User:
    """Get the user the request is made on behalf of"""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
    )
    if not x_user_id or not x_user_id.strip().isdigit():
        raise credentials_exception

    user = await db.get(User, int(x_user_id))
    if user is None:
        raise credentials_exception
    return user

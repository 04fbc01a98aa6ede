"""Request-level dependencies."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header, HTTPException, status


async def get_actor_id(x_actor_id: str | None = Header(default=None)) -> str:
    """Identify the acting user.

    Authentication happens upstream; the gateway forwards the authenticated
    user's id in the X-Actor-Id header.

    Raises:
        HTTPException: 401 if the header is missing or not a UUID
    """
    if not x_actor_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    try:
        UUID(x_actor_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid X-Actor-Id header",
        )
    return x_actor_id


ActorId = Annotated[str, Depends(get_actor_id)]

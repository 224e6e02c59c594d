"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from fleet_manager.domain.entities import Actor
from fleet_manager.infrastructure.security import decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str = "Invalid credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_actor(token: str, request: Request) -> Actor:
    """Build the acting principal from a bearer token and request metadata."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _unauthorized() from exc

    username = payload.get("sub")
    if not isinstance(username, str) or not username:
        raise _unauthorized()

    raw_id = payload.get("uid")
    try:
        user_id = int(raw_id) if raw_id is not None else None
    except (TypeError, ValueError) as exc:
        raise _unauthorized() from exc

    role = payload.get("role")
    return Actor(
        id=user_id,
        username=username,
        role=role if isinstance(role, str) else None,
        ip_address=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )


def get_current_actor(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Actor:
    """Return the authenticated actor or answer 401."""

    if credentials is None or not credentials.credentials:
        raise _unauthorized("Not authenticated")
    return resolve_actor(credentials.credentials, request)


def require_admin(actor: Actor = Depends(get_current_actor)) -> Actor:
    """Ensure the authenticated actor has administrator privileges."""

    if not actor.is_admin():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized",
        )
    return actor


__all__ = ["get_current_actor", "require_admin", "resolve_actor"]

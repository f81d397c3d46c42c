"""Request authentication helpers.

Tokens are read from an `Authorization: Bearer <token>` header, falling back
to the `auth_token` cookie set by the identity service.
"""

from fastapi import Cookie, Header, HTTPException, status

from discuss.domain.service import JWTService
from discuss.domain.value import UserId


def request_token(
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> str | None:
    """FastAPI dependency returning the raw JWT of the request, if any."""
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
    return auth_token


def require_user(jwt_service: JWTService, token: str | None, action: str) -> UserId:
    """Resolve the caller or answer 401.

    Args:
        jwt_service: JWT service for token verification
        token: Raw token from `request_token`
        action: What the caller tried to do, used in the error detail

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    user_id = jwt_service.get_user_id_from_token(token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user_id

"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from folio.config import AuthSettings
from folio.domain.value import UserRole


class TokenPayload(BaseModel):
    """JWT token payload."""

    user_id: str
    role: UserRole = UserRole.USER
    exp: datetime

    @property
    def is_admin(self) -> bool:
        return self.role is UserRole.ADMIN


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str, settings: AuthSettings, role: UserRole = UserRole.USER
) -> str:
    """Create a JWT token for the user.

    Tokens are normally issued by the auth service; this is used for
    local development and tests.

    Args:
        user_id: User ID
        settings: Authentication settings
        role: User role

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "user_id": user_id,
        "role": role.value,
        "exp": expiry,
    }

    token = jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)

    return token


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

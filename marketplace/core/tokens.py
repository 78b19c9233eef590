"""
Access token handling.

Issues and verifies HS256 bearer tokens carrying the caller's user id
(`sub`) and role. Verification turns a token into a Caller.

Dependencies: python-jose, marketplace.configs
System role: Caller identity for the transport layer
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt

from marketplace.configs.auth import AuthSettings
from marketplace.configs import get_settings
from marketplace.core.access.decisions import Caller
from marketplace.core.exceptions import AuthenticationError


def create_access_token(
    user_id: UUID,
    role: str,
    expires_delta: timedelta | None = None,
    settings: AuthSettings | None = None,
) -> str:
    """
    Sign an access token for a user.

    Args:
        user_id: Subject UUID
        role: Role claim (student, instructor, admin)
        expires_delta: Lifetime override; defaults to the configured expiry
        settings: Auth settings override (tests)

    Returns:
        str: Encoded JWT
    """
    settings = settings or get_settings().auth
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(hours=settings.expiry_hours))
    claims = {
        "sub": str(user_id),
        "role": role,
        "iat": int(now.timestamp()),
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(claims, settings.secret, algorithm=settings.algorithm)


def decode_access_token(token: str, settings: AuthSettings | None = None) -> Caller:
    """
    Verify a token and extract the caller.

    Args:
        token: Encoded JWT
        settings: Auth settings override (tests)

    Returns:
        Caller: Identity carried by the token

    Raises:
        AuthenticationError: Expired token, bad signature or missing claims
    """
    settings = settings or get_settings().auth
    try:
        payload = jwt.decode(token, settings.secret, algorithms=[settings.algorithm])
    except ExpiredSignatureError as e:
        raise AuthenticationError("Session expired, please log in again") from e
    except JWTError as e:
        raise AuthenticationError("Invalid authentication credentials") from e

    subject = payload.get("sub")
    role = payload.get("role")
    if not subject or not role:
        raise AuthenticationError("Invalid token payload")

    try:
        user_id = UUID(subject)
    except ValueError as e:
        raise AuthenticationError("Invalid token subject", {"sub": subject}) from e

    return Caller(user_id=user_id, role=role)

"""JWT verification for tokens issued by the hosted auth service."""

from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from mealmash.config import get_settings

settings = get_settings()

DEFAULT_TOKEN_LIFETIME = timedelta(days=7)


def create_access_token(user_id: int, email: str, lifetime: timedelta | None = None) -> str:
    """Create a JWT access token (used by scripts and tests)."""
    expire = datetime.now(UTC) + (lifetime or DEFAULT_TOKEN_LIFETIME)
    to_encode = {
        "sub": str(user_id),
        "email": email,
        "exp": expire,
    }
    encoded_jwt = jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return encoded_jwt


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a JWT token."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        return payload
    except JWTError:
        return None

"""Supabase JWT verification and claim extraction."""

from fastapi import status
from jose import JWTError, jwt

from src.api.core.constants import JWT_ALGORITHM
from src.api.core.exceptions.base import SchoolCreditsException
from src.api.core.messages import MessageCode
from src.core.context import AuthenticatedOwnerContext
from src.utils.logger import get_logger
from src.utils.settings.auth import AuthSettings

logger = get_logger(__name__)


def extract_owner_from_jwt(payload: dict) -> AuthenticatedOwnerContext:
    """Build the caller context from verified JWT claims."""
    owner_id = payload.get("sub") or ""
    if not owner_id:
        raise SchoolCreditsException(
            MessageCode.INVALID_TOKEN,
            status.HTTP_401_UNAUTHORIZED,
            {"description": "Token has no subject"},
        )
    email = payload.get("email") or payload.get("user_metadata", {}).get("email")
    return AuthenticatedOwnerContext(
        owner_id=str(owner_id),
        email=email or None,
        role=payload.get("role"),
    )


def handle_jwt_auth(
    token: str, settings: AuthSettings | None = None
) -> AuthenticatedOwnerContext:
    settings = settings or AuthSettings()
    try:
        payload = jwt.decode(
            token,
            settings.SUPABASE_JWT_SECRET,
            algorithms=[JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
        )
    except JWTError as e:
        logger.warning("jwt_decode_failed", error=str(e))
        raise SchoolCreditsException(
            MessageCode.INVALID_TOKEN,
            status.HTTP_401_UNAUTHORIZED,
            {"description": "Invalid or expired authentication token"},
        )

    if payload.get("role") == "anon":
        raise SchoolCreditsException(
            MessageCode.AUTH_REQUIRED,
            status.HTTP_401_UNAUTHORIZED,
            {"description": "Anonymous access not permitted"},
        )

    return extract_owner_from_jwt(payload)

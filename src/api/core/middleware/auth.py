import structlog
from fastapi import Request, status

from src.api.core.constants import SKIP_AUTH_PATHS, SKIP_AUTH_PATTERNS
from src.api.core.exceptions.base import SchoolCreditsException
from src.api.core.messages import MessageCode
from src.modules.auth.jwt_auth import handle_jwt_auth
from src.utils.path_helpers import path_matches, path_matches_pattern

logger = structlog.get_logger(__name__)


async def auth_middleware(request: Request, call_next):
    """Resolve the calling owner from a Supabase bearer token.

    Errors are rendered here: exceptions raised from HTTP middleware do not
    reach the application's exception handlers.
    """
    request.state.owner = None

    if request.method == "OPTIONS" or path_matches(request.url.path, SKIP_AUTH_PATHS):
        return await call_next(request)
    if path_matches_pattern(request.url.path, SKIP_AUTH_PATTERNS, request.method):
        return await call_next(request)

    authorization = request.headers.get("Authorization", "")
    try:
        if not authorization:
            raise SchoolCreditsException(
                MessageCode.AUTH_REQUIRED,
                status.HTTP_401_UNAUTHORIZED,
                {"description": "Provide an 'Authorization: Bearer <token>' header"},
            )

        auth_parts = authorization.split(" ")
        if len(auth_parts) != 2 or auth_parts[0].lower() != "bearer":
            raise SchoolCreditsException(
                MessageCode.INVALID_TOKEN,
                status.HTTP_401_UNAUTHORIZED,
                {"description": "Authorization header must be 'Bearer <token>'"},
            )

        owner = handle_jwt_auth(auth_parts[1])
    except SchoolCreditsException as e:
        logger.info(
            "auth_rejected",
            path=request.url.path,
            message_code=e.message_code.value,
        )
        return e.to_response()

    request.state.owner = owner
    structlog.contextvars.bind_contextvars(owner_id=owner.owner_id)
    return await call_next(request)

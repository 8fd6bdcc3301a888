"""FastAPI dependency: get_caller_identity.

The embedding host authenticates callers; this service only needs the
resulting identity, passed in the header named by settings.CALLER_HEADER.

Usage in any router that acts on behalf of a participant:
    from src.em_gateway.auth.dependencies import get_caller_identity

    @router.post("/deposit")
    async def deposit(caller: str = Depends(get_caller_identity)):
        ...
"""

from fastapi import Request

from config.settings import settings
from src.em_common.errors import UnauthorizedError


async def get_caller_identity(request: Request) -> str:
    """Return the caller identity, raising HTTP 401 (UnauthorizedError) when absent."""
    identity = request.headers.get(settings.CALLER_HEADER, "").strip()
    if not identity:
        raise UnauthorizedError(f"Missing {settings.CALLER_HEADER} header")
    return identity

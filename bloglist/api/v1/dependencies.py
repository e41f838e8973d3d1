# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.use_cases.auth.resolve_caller import ResolveCallerUseCase
from ...domain.models.caller import Caller
from ...di.container import get_container


# auto_error=False: a missing or non-bearer Authorization header is not an error here
security_scheme = HTTPBearer(auto_error=False)


async def get_caller(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> Caller:
    """
    FastAPI dependency that resolves the caller identity for a request.

    Never raises: requests without a usable token get the anonymous caller
    and each use case decides whether that is acceptable.

    Args:
        credentials: HTTP Bearer token credentials, if any

    Returns:
        AuthenticatedCaller or AnonymousCaller
    """
    token = credentials.credentials if credentials is not None else None

    container = get_container()
    resolve_caller_use_case = container.get(ResolveCallerUseCase)
    return resolve_caller_use_case.execute(token)

"""Bearer token extraction for routes.

Routes declare ``credentials: BearerCredentials`` and hand the token to
ResolveActorUseCase, which decides between Guest, Authenticated and a 401.
"""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from diary.application.usecase.auth import ResolveActorRequest, ResolveActorUseCase
from diary.domain.model import Actor

bearer_scheme = HTTPBearer(auto_error=False)

BearerCredentials = Annotated[
    HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
]


async def resolve_actor(
    use_case: ResolveActorUseCase,
    credentials: HTTPAuthorizationCredentials | None,
    required: bool,
) -> Actor:
    """Resolve the request's actor from its bearer credentials.

    Args:
        use_case: Resolve actor use case from DI
        credentials: Parsed Authorization header, if any
        required: Raise AuthenticationError instead of returning Guest

    Returns:
        Guest or Authenticated actor
    """
    token = credentials.credentials if credentials else None
    return await use_case.execute(ResolveActorRequest(token=token, required=required))

"""
FastAPI Dependencies
Store handle, services and bearer authentication
"""

from typing import Annotated, Optional

from fastapi import Depends, Header, HTTPException, Request, status
from supabase import AsyncClient
import structlog

from app.config import Settings, get_settings
from app.services.auth_service import CredentialValidator
from app.services.cliente_service import ClienteService
from app.utils.exceptions import AuthenticationError
from app.utils.validators import get_profile

logger = structlog.get_logger(__name__)

UNAUTHORIZED_MESSAGE = "Token inválido ou não fornecido"
STORE_UNAVAILABLE = "Supabase client not available"


def get_supabase(request: Request) -> Optional[AsyncClient]:
    """Dependency to get the Supabase client created at startup, None when unavailable"""
    supabase = getattr(request.app.state, "supabase", None)
    if supabase is None or not supabase.is_available():
        return None
    return supabase.get_client()


def get_credential_validator(
    client: Optional[AsyncClient] = Depends(get_supabase),
    settings: Settings = Depends(get_settings)
) -> CredentialValidator:
    return CredentialValidator(
        client,
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        user_claim=settings.jwt_user_claim,
    )


def get_cliente_service(
    client: Optional[AsyncClient] = Depends(get_supabase),
    settings: Settings = Depends(get_settings)
) -> ClienteService:
    if client is None:
        logger.error("Cliente request without store client")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"message": "Erro ao acessar banco de dados", "error": STORE_UNAVAILABLE}
        )
    return ClienteService(client, get_profile(settings.validation_profile))


async def get_current_user(
    request: Request,
    authorization: Optional[str] = Header(None),
    validator: CredentialValidator = Depends(get_credential_validator)
) -> dict:
    """
    Get current authenticated user from the bearer token

    Args:
        request: Incoming request, receives the user on request.state
        authorization: Authorization header
        validator: Credential validator bound to the store

    Returns:
        dict: usuarios row of the caller

    Raises:
        HTTPException: 401 for any kind of token or user failure
    """
    try:
        user = await validator.validate(authorization)
    except AuthenticationError as e:
        logger.warning(
            "Authentication failed",
            reason=e.reason,
            error=e.message,
            path=request.url.path
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=UNAUTHORIZED_MESSAGE,
            headers={"WWW-Authenticate": "Bearer"},
        )

    request.state.user = user
    return user


# Type aliases for cleaner dependency injection
CurrentUser = Annotated[dict, Depends(get_current_user)]
ClienteServiceDep = Annotated[ClienteService, Depends(get_cliente_service)]

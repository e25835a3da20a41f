"""
Cliente management routes
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException
import structlog

from app.models.cliente import ClienteInput, ClienteResponse, MessageResponse
from app.utils.dependencies import ClienteServiceDep, get_current_user
from app.utils.exceptions import (
    ClienteError, DuplicateError, NotFoundError, ValidationError
)

logger = structlog.get_logger(__name__)

router = APIRouter(dependencies=[Depends(get_current_user)])

CLIENT_ERRORS = (ValidationError, DuplicateError, NotFoundError)


def to_http_exception(error: Exception, failure_message: str) -> HTTPException:
    """Translate a failure into the HTTP response the API promises"""
    if isinstance(error, ValidationError):
        return HTTPException(status_code=400, detail={"message": error.message, "errors": error.errors})
    if isinstance(error, DuplicateError):
        return HTTPException(status_code=400, detail={"message": error.message, "details": error.details})
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=404, detail={"message": error.message})
    return HTTPException(status_code=500, detail={"message": failure_message, "error": str(error)})


def log_failure(event: str, error: Exception, **context):
    # StoreError is logged where the query failed
    logger.error(event, error=str(error), exc_info=not isinstance(error, ClienteError), **context)


@router.get("", response_model=List[ClienteResponse])
async def list_clientes(service: ClienteServiceDep):
    """List all clientes"""
    try:
        return await service.list()
    except Exception as e:
        log_failure("Failed to list clientes", e)
        raise to_http_exception(e, "Erro ao listar clientes")


@router.get("/{cliente_id}", response_model=ClienteResponse)
async def get_cliente(cliente_id: str, service: ClienteServiceDep):
    """Get cliente details"""
    try:
        return await service.get(cliente_id)
    except NotFoundError as e:
        raise to_http_exception(e, "Erro ao buscar cliente")
    except Exception as e:
        log_failure("Failed to get cliente", e, cliente_id=cliente_id)
        raise to_http_exception(e, "Erro ao buscar cliente")


@router.post("", response_model=ClienteResponse, status_code=201)
async def create_cliente(cliente_data: ClienteInput, service: ClienteServiceDep):
    """Create a new cliente"""
    try:
        logger.info("Creating cliente", nome=cliente_data.nome)
        return await service.create(cliente_data.to_payload())
    except CLIENT_ERRORS as e:
        raise to_http_exception(e, "Erro ao criar cliente")
    except Exception as e:
        log_failure("Failed to create cliente", e)
        raise to_http_exception(e, "Erro ao criar cliente")


@router.put("/{cliente_id}", response_model=ClienteResponse)
async def update_cliente(cliente_id: str, cliente_data: ClienteInput, service: ClienteServiceDep):
    """Update cliente information"""
    try:
        return await service.update(cliente_id, cliente_data.to_payload())
    except CLIENT_ERRORS as e:
        raise to_http_exception(e, "Erro ao atualizar cliente")
    except Exception as e:
        log_failure("Failed to update cliente", e, cliente_id=cliente_id)
        raise to_http_exception(e, "Erro ao atualizar cliente")


@router.delete("/{cliente_id}", response_model=MessageResponse)
async def delete_cliente(cliente_id: str, service: ClienteServiceDep):
    """Delete cliente"""
    try:
        return await service.delete(cliente_id)
    except NotFoundError as e:
        raise to_http_exception(e, "Erro ao excluir cliente")
    except Exception as e:
        log_failure("Failed to delete cliente", e, cliente_id=cliente_id)
        raise to_http_exception(e, "Erro ao excluir cliente")

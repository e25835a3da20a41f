"""
Health check routes for the clientes API
"""

from datetime import datetime

from fastapi import APIRouter, Request
import structlog

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("/")
async def root():
    """Root endpoint"""
    return {"message": "API de Clientes do BluePay está funcionando!"}


@router.get("/health")
async def health_check(request: Request):
    """Health check endpoint"""
    supabase = getattr(request.app.state, "supabase", None)
    store_status = "connected" if supabase is not None and supabase.is_available() else "not_configured"

    if store_status != "connected":
        logger.warning("Health check without store client")

    return {
        "service": "clientes-api",
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "database": store_status,
        "version": request.app.version
    }

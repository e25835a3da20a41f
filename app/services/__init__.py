"""
Business logic services for the clientes API
"""

from .auth_service import CredentialValidator
from .cliente_service import ClienteService

__all__ = ["CredentialValidator", "ClienteService"]

"""
API routes for the clientes API
"""

from . import health, clientes

__all__ = ["health", "clientes"]

"""
Data models for the clientes API
"""

from .cliente import (
    ClienteStatus, ValidationProfileName, ClienteInput, ClienteResponse, MessageResponse
)

__all__ = [
    "ClienteStatus",
    "ValidationProfileName",
    "ClienteInput",
    "ClienteResponse",
    "MessageResponse"
]

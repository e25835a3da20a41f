"""
Cliente data models and schemas
"""

from enum import Enum
from typing import Any, Optional, Dict

from pydantic import BaseModel, Field, field_validator


class ClienteStatus(str, Enum):
    """Cliente status enumeration"""
    ATIVO = "ativo"
    INATIVO = "inativo"


class ValidationProfileName(str, Enum):
    """Which field acts as the cliente business key"""
    CRM = "crm"
    EMAIL = "email"


# Request schema (create and update share it; rules live in validators)
class ClienteInput(BaseModel):
    """Schema for cliente create/update requests"""
    nome: Optional[str] = Field(None, description="Customer name")
    codigo_crm: Optional[str] = Field(None, description="External CRM code")
    email: Optional[str] = Field(None, description="Contact email")
    telefone: Optional[str] = Field(None, description="Contact phone")
    status: Optional[str] = Field(None, description="ativo or inativo")

    @field_validator("codigo_crm", "telefone", mode="before")
    @classmethod
    def accept_numeric_codes(cls, v):
        """CRM codes and phones often arrive as JSON numbers"""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    def to_payload(self) -> Dict[str, Any]:
        """Raw field values as sent by the caller"""
        return self.model_dump()


# Response schema (store rows are passed through, extra columns included)
class ClienteResponse(BaseModel):
    """Schema for cliente API responses"""
    id: Any = Field(..., description="Store-assigned identifier")
    nome: Optional[str] = None
    codigo_crm: Optional[str] = None
    email: Optional[str] = None
    telefone: Optional[str] = None
    status: Optional[str] = None

    class Config:
        """Pydantic configuration"""
        extra = "allow"


class MessageResponse(BaseModel):
    """Plain confirmation message"""
    message: str

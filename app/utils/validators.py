"""
Validation utilities for cliente payloads
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from app.models.cliente import ClienteStatus, ValidationProfileName


EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')

VALID_STATUSES = [s.value for s in ClienteStatus]


@dataclass(frozen=True)
class ValidationProfile:
    """Business key strategy for cliente records"""
    name: ValidationProfileName
    business_key: str
    order_by: str
    required_fields: Tuple[Tuple[str, str], ...]
    duplicate_on_create: Tuple[str, str]
    duplicate_on_update: Tuple[str, str]


CRM_PROFILE = ValidationProfile(
    name=ValidationProfileName.CRM,
    business_key="codigo_crm",
    order_by="codigo",
    required_fields=(
        ("nome", "Nome é obrigatório"),
        ("codigo_crm", "Código CRM é obrigatório"),
    ),
    duplicate_on_create=("Cliente já existe", "Já existe um cliente com este código CRM"),
    duplicate_on_update=("Código CRM já existe", "Já existe outro cliente com este código CRM"),
)

EMAIL_PROFILE = ValidationProfile(
    name=ValidationProfileName.EMAIL,
    business_key="email",
    order_by="nome",
    required_fields=(
        ("nome", "Nome é obrigatório"),
        ("email", "Email é obrigatório"),
        ("telefone", "Telefone é obrigatório"),
        ("status", "Status é obrigatório"),
    ),
    duplicate_on_create=("Cliente já existe", "Já existe um cliente com este email"),
    duplicate_on_update=("Email já existe", "Já existe outro cliente com este email"),
)

PROFILES = {
    ValidationProfileName.CRM: CRM_PROFILE,
    ValidationProfileName.EMAIL: EMAIL_PROFILE,
}


def get_profile(name) -> ValidationProfile:
    """Resolve a profile by name ('crm' or 'email')"""
    return PROFILES[ValidationProfileName(name)]


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email))


def validate_cliente(cliente: Dict[str, Any], profile: ValidationProfile = CRM_PROFILE) -> List[str]:
    """
    Validate a cliente payload against a profile
    Returns list of validation errors, empty when the payload is valid
    """
    errors = []

    for field, message in profile.required_fields:
        if _is_blank(cliente.get(field)):
            errors.append(message)

    email = cliente.get("email")
    if not _is_blank(email) and not is_valid_email(str(email)):
        errors.append("Email inválido")

    status = cliente.get("status")
    if not _is_blank(status) and status not in VALID_STATUSES:
        errors.append("Status inválido")

    return errors

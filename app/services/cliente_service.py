"""
Cliente business logic service
Maps CRUD intents onto the clientes table of the Supabase store
"""

from typing import Any, Dict, List, Optional

import httpx
from postgrest.exceptions import APIError
import structlog

from app.models.cliente import ClienteStatus, ValidationProfileName
from app.utils.exceptions import DuplicateError, NotFoundError, StoreError, ValidationError
from app.utils.validators import CRM_PROFILE, ValidationProfile, validate_cliente


logger = structlog.get_logger(__name__)

CLIENTES_TABLE = "clientes"

STORE_ERRORS = (APIError, httpx.HTTPError)


def _store_message(error: Exception) -> str:
    return getattr(error, "message", None) or str(error)


class ClienteService:
    """
    CRUD over the clientes table

    Existence and business-key uniqueness are checked with separate queries
    before every mutation; the check and the write are not atomic.
    """

    def __init__(self, client, profile: ValidationProfile = CRM_PROFILE):
        self.client = client
        self.profile = profile

    def _table(self):
        return self.client.table(CLIENTES_TABLE)

    async def _execute(self, query, action: str):
        try:
            return await query.execute()
        except STORE_ERRORS as e:
            logger.error("Store query failed", action=action, error=_store_message(e))
            raise StoreError(_store_message(e)) from e

    def _build_record(self, payload: Dict[str, Any], creating: bool) -> Dict[str, Any]:
        record = {
            "nome": payload.get("nome"),
            "email": payload.get("email") or None,
            "telefone": payload.get("telefone") or None,
        }
        # codigo_crm is only a column of the CRM-keyed schema
        if self.profile.name == ValidationProfileName.CRM:
            record["codigo_crm"] = payload.get("codigo_crm")

        status = payload.get("status")
        if status:
            record["status"] = status
        elif creating:
            record["status"] = ClienteStatus.ATIVO.value
        return record

    def _validate(self, payload: Dict[str, Any]):
        errors = validate_cliente(payload, self.profile)
        if errors:
            logger.warning("Cliente validation failed", errors=errors)
            raise ValidationError(errors)

    async def _find_by_business_key(self, value: Any, exclude_id: Optional[Any] = None) -> Optional[Dict[str, Any]]:
        query = self._table().select("id").eq(self.profile.business_key, value)
        if exclude_id is not None:
            query = query.neq("id", exclude_id)
        response = await self._execute(query.limit(1), "check_business_key")
        return response.data[0] if response.data else None

    async def _ensure_exists(self, cliente_id: Any):
        query = self._table().select("id").eq("id", cliente_id).limit(1)
        response = await self._execute(query, "check_exists")
        if not response.data:
            raise NotFoundError()

    async def list(self) -> List[Dict[str, Any]]:
        """All clientes ordered by the profile's order column"""
        query = self._table().select("*").order(self.profile.order_by)
        response = await self._execute(query, "list")
        return response.data or []

    async def get(self, cliente_id: Any) -> Dict[str, Any]:
        """Get cliente by ID"""
        query = self._table().select("*").eq("id", cliente_id).limit(1)
        response = await self._execute(query, "get")
        if not response.data:
            raise NotFoundError()
        return response.data[0]

    async def create(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a new cliente

        Args:
            payload: Raw request fields

        Returns:
            dict: The inserted row including its assigned id

        Raises:
            ValidationError: Payload violates the profile rules
            DuplicateError: Business key already in use
            StoreError: Any store failure
        """
        self._validate(payload)
        record = self._build_record(payload, creating=True)

        key_value = record[self.profile.business_key]
        if await self._find_by_business_key(key_value):
            message, details = self.profile.duplicate_on_create
            logger.warning("Cliente already exists", business_key=self.profile.business_key, value=key_value)
            raise DuplicateError(message, details)

        response = await self._execute(self._table().insert(record), "create")
        if not response.data:
            raise StoreError("Insert returned no rows")

        created = response.data[0]
        logger.info("Cliente created", cliente_id=str(created.get("id")))
        return created

    async def update(self, cliente_id: Any, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Update an existing cliente

        A missing status keeps the stored one; missing email/telefone are cleared.
        """
        self._validate(payload)
        record = self._build_record(payload, creating=False)

        await self._ensure_exists(cliente_id)

        key_value = record[self.profile.business_key]
        if await self._find_by_business_key(key_value, exclude_id=cliente_id):
            message, details = self.profile.duplicate_on_update
            logger.warning(
                "Business key taken by another cliente",
                cliente_id=str(cliente_id),
                business_key=self.profile.business_key,
            )
            raise DuplicateError(message, details)

        query = self._table().update(record).eq("id", cliente_id)
        response = await self._execute(query, "update")
        if not response.data:
            # deleted between the existence check and the update
            raise NotFoundError()

        logger.info("Cliente updated", cliente_id=str(cliente_id))
        return response.data[0]

    async def delete(self, cliente_id: Any) -> Dict[str, str]:
        """Delete cliente after confirming it exists"""
        await self._ensure_exists(cliente_id)
        await self._execute(self._table().delete().eq("id", cliente_id), "delete")

        logger.info("Cliente deleted", cliente_id=str(cliente_id))
        return {"message": "Cliente excluído com sucesso"}

"""
Pytest fixtures for clientes API tests
"""

import itertools
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

import jwt
import pytest
from fastapi.testclient import TestClient
from postgrest.exceptions import APIError

from app.config import Settings, get_settings
from app.utils.dependencies import get_supabase


TEST_JWT_SECRET = "test-secret-key-with-at-least-32-bytes!!"


class FakeResponse:
    def __init__(self, data):
        self.data = data


class FakeQuery:
    """Mimics the chained postgrest request builder over in-memory rows"""

    def __init__(self, store: "FakeSupabase", table: str):
        self.store = store
        self.table = table
        self.operation = "select"
        self.columns = "*"
        self.values: Optional[Dict[str, Any]] = None
        self.filters: List = []
        self.order_by: Optional[str] = None
        self.descending = False
        self.max_rows: Optional[int] = None

    def select(self, columns: str = "*"):
        self.columns = columns
        return self

    def insert(self, values: Dict[str, Any]):
        self.operation = "insert"
        self.values = values
        return self

    def update(self, values: Dict[str, Any]):
        self.operation = "update"
        self.values = values
        return self

    def delete(self):
        self.operation = "delete"
        return self

    def eq(self, column: str, value: Any):
        self.filters.append((column, value, True))
        return self

    def neq(self, column: str, value: Any):
        self.filters.append((column, value, False))
        return self

    def order(self, column: str, desc: bool = False):
        self.order_by = column
        self.descending = desc
        return self

    def limit(self, size: int):
        self.max_rows = size
        return self

    def _matches(self, row: Dict[str, Any]) -> bool:
        for column, value, equal in self.filters:
            if (str(row.get(column)) == str(value)) != equal:
                return False
        return True

    def _project(self, row: Dict[str, Any]) -> Dict[str, Any]:
        if self.columns == "*":
            return dict(row)
        return {c.strip(): row.get(c.strip()) for c in self.columns.split(",")}

    async def execute(self) -> FakeResponse:
        self.store.calls.append((self.table, self.operation))
        error = self.store.errors.get((self.table, self.operation))
        if error is not None:
            raise error

        rows = self.store.tables.setdefault(self.table, [])

        if self.operation == "insert":
            row = dict(self.values)
            row["id"] = next(self.store.ids)
            row["codigo"] = row["id"]
            rows.append(row)
            return FakeResponse([dict(row)])

        matched = [row for row in rows if self._matches(row)]

        if self.operation == "update":
            for row in matched:
                row.update(self.values)
            return FakeResponse([dict(row) for row in matched])

        if self.operation == "delete":
            self.store.tables[self.table] = [row for row in rows if row not in matched]
            return FakeResponse([dict(row) for row in matched])

        if self.order_by:
            matched = sorted(matched, key=lambda r: str(r.get(self.order_by)), reverse=self.descending)
        if self.max_rows is not None:
            matched = matched[:self.max_rows]
        return FakeResponse([self._project(row) for row in matched])


class FakeSupabase:
    """In-memory stand-in for supabase.AsyncClient"""

    def __init__(self):
        self.tables: Dict[str, List[Dict[str, Any]]] = {"clientes": [], "usuarios": []}
        self.errors: Dict = {}
        self.calls: List = []
        self.ids = itertools.count(1)

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def fail(self, table: str, operation: str, message: str = "connection refused"):
        self.errors[(table, operation)] = APIError(
            {"message": message, "code": "XX000", "hint": None, "details": None}
        )


@pytest.fixture
def fake_store() -> FakeSupabase:
    """Store with one active and one inactive user"""
    store = FakeSupabase()
    store.tables["usuarios"] = [
        {"id": "user-1", "nome": "Operador", "status": "ativo"},
        {"id": "user-2", "nome": "Antigo", "status": "inativo"},
    ]
    return store


@pytest.fixture
def make_token():
    """Mint HS256 tokens the way the identity system does"""
    def _make(claims: Optional[Dict[str, Any]] = None, secret: str = TEST_JWT_SECRET, expires_in: int = 30):
        payload = {"id": "user-1"} if claims is None else dict(claims)
        payload["exp"] = datetime.now(timezone.utc) + timedelta(minutes=expires_in)
        return jwt.encode(payload, secret, algorithm="HS256")
    return _make


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        jwt_secret=TEST_JWT_SECRET,
        supabase_url="",
        supabase_key="",
        validation_profile="crm",
        url_frontend="http://frontend.test"
    )


@pytest.fixture
def client(fake_store, test_settings):
    """Test client with the store and settings overridden"""
    from app.main import app

    app.dependency_overrides[get_supabase] = lambda: fake_store
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(make_token) -> Dict[str, str]:
    return {"Authorization": f"Bearer {make_token()}"}

"""
Test Configuration Module
"""

from typing import AsyncGenerator, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from kvgateway.common.errors import KeyNotFoundError
from kvgateway.db.backends import Backends
from kvgateway.domain.kv_store import KeyValueModel
from kvgateway.domain.record import RecordFilter, RecordModel
from kvgateway.main import create_app
from kvgateway.repositories.kv_store_repo import KVStoreRepository
from kvgateway.repositories.memory import InMemoryKVStoreRepository
from kvgateway.repositories.record_repo import RecordRepository


class FakeKVStore(KVStoreRepository):
    """Dict-backed store that can be told to fail"""

    name = "fake"

    def __init__(self, get_error: Optional[Exception] = None, set_error: Optional[Exception] = None):
        self.data: dict[str, str] = {}
        self.get_error = get_error
        self.set_error = set_error

    async def get(self, key: str) -> KeyValueModel:
        if self.get_error is not None:
            raise self.get_error
        if key not in self.data:
            raise KeyNotFoundError("redis")
        return KeyValueModel(key=key, value=self.data[key])

    async def set(self, key: str, value: str) -> None:
        if self.set_error is not None:
            raise self.set_error
        self.data[key] = value


class FakeRecordRepository(RecordRepository):
    """Records repository returning canned records and remembering filters"""

    def __init__(self, records: Optional[list[RecordModel]] = None, error: Optional[Exception] = None):
        self.records = records if records is not None else []
        self.error = error
        self.filters: list[RecordFilter] = []

    async def fetch(self, record_filter: RecordFilter) -> list[RecordModel]:
        self.filters.append(record_filter)
        if self.error is not None:
            raise self.error
        return self.records


@pytest.fixture
def backends() -> Backends:
    """Backends wired with test doubles"""
    return Backends(
        inmemory=InMemoryKVStoreRepository().initialize(),
        redis=FakeKVStore(),
        records=FakeRecordRepository(
            records=[RecordModel(key="a", created_at="", total_count=1)],
        ),
    )


@pytest_asyncio.fixture
async def client(backends) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to an app using the fake backends"""
    app = create_app(backends=backends)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

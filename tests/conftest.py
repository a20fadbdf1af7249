# tests/conftest.py
import pytest
from httpx import ASGITransport, AsyncClient

from stock_service.core.config import Settings
from stock_service.dependencies import get_stock_manager
from stock_service.main import create_app
from stock_service.services.stock_manager import StockManager
from stock_service.store import RecordStore


@pytest.fixture
def database_url(tmp_path):
    """File-backed SQLite database unique to each test"""
    return f"sqlite+aiosqlite:///{tmp_path / 'stock.db'}"

@pytest.fixture
def settings(database_url):
    """Provide test settings"""
    return Settings(
        DATABASE_URL=database_url,
        SERVICE_ADDR_STOCK="127.0.0.1:50073",
        SHUTDOWN_GRACE_SECONDS=5,
    )

@pytest.fixture
async def store(database_url):
    """Provide a freshly initialized record store"""
    store = await RecordStore.load_or_init(database_url)
    yield store
    await store.close()

@pytest.fixture
def manager(store):
    return StockManager(store)

@pytest.fixture
async def client(settings, manager):
    """HTTP client bound to the app, with the test manager injected"""
    app = create_app(settings)
    app.dependency_overrides[get_stock_manager] = lambda: manager
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()

@pytest.fixture
def sample_stock_data():
    """Provide sample stock data for tests"""
    return {
        "name": "Warehouse A",
        "description": "Main depot",
        "created_by": 7,
    }

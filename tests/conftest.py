import os

# Point the application engine at SQLite before anything imports it
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from httpx import AsyncClient, ASGITransport

from fleetboard.config import get_settings
from fleetboard.database import Base, get_db, engine_options
from fleetboard.main import app
from fleetboard.models import Order, Driver, Vehicle, FleetItem, Payout, PricingRule
from tests.fixtures.test_data import (
    generate_orders,
    generate_drivers,
    generate_fleet,
    generate_payouts,
    timestamps,
)

TEST_DB_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


@pytest.fixture
async def test_engine():
    """Fresh database engine per test."""
    engine = create_async_engine(TEST_DB_URL, **engine_options(TEST_DB_URL))
    
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    
    yield engine
    
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    
    await engine.dispose()


@pytest.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Session inside an outer transaction that is rolled back afterwards."""
    connection = await test_engine.connect()
    transaction = await connection.begin()
    
    session_maker = async_sessionmaker(
        bind=connection,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    session = session_maker()
    
    yield session
    
    await session.close()
    await transaction.rollback()
    await connection.close()


@pytest.fixture
async def client(db_session) -> AsyncGenerator[AsyncClient, None]:
    """Test client with override for get_db."""
    async def override_get_db():
        yield db_session
    
    app.dependency_overrides[get_db] = override_get_db
    
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    
    app.dependency_overrides.clear()


@pytest.fixture
def settings():
    return get_settings()


async def _add_all(db_session, model, rows):
    records = [model(**row) for row in rows]
    db_session.add_all(records)
    await db_session.flush()
    return records


@pytest.fixture
async def seven_orders(db_session):
    """Orders O-1 .. O-7, O-7 newest."""
    return await _add_all(db_session, Order, generate_orders(7))


@pytest.fixture
async def five_orders(db_session):
    """Orders O-1 .. O-5, O-5 newest."""
    return await _add_all(db_session, Order, generate_orders(5))


@pytest.fixture
async def sample_drivers(db_session):
    return await _add_all(db_session, Driver, generate_drivers(5))


@pytest.fixture
async def sample_fleet(db_session):
    return await _add_all(db_session, FleetItem, generate_fleet(4))


@pytest.fixture
async def sample_payouts(db_session):
    return await _add_all(db_session, Payout, generate_payouts(3))


@pytest.fixture
async def sample_vehicles(db_session):
    created = timestamps(3)
    rows = [
        {
            "vehicle_id": f"VH-00{i + 1}",
            "type": "Truck" if i % 2 == 0 else "Van",
            "model": model,
            "status": "Active",
            "vin": f"VIN{i + 1:014d}",
            "year": 2019 + i,
            "fuel_level": 50 + i * 10,
            "created_at": created[i],
            "updated_at": created[i],
        }
        for i, model in enumerate(["Volvo FH16", "Ford Transit", "Scania R500"])
    ]
    return await _add_all(db_session, Vehicle, rows)


@pytest.fixture
async def sample_pricing_rules(db_session):
    created = timestamps(3)
    rows = [
        {
            "name": name,
            "type": "Fixed Fee",
            "value": value,
            "region": region,
            "status": "Active",
            "last_updated": "2024-02-10",
            "created_at": created[i],
            "updated_at": created[i],
        }
        for i, (name, value, region) in enumerate([
            ("Peak Hour Surcharge", "$5.00", "Downtown"),
            ("Weekend Multiplier", "15%", "Global"),
            ("Late Night Delivery", "$3.00", "Suburbs"),
        ])
    ]
    return await _add_all(db_session, PricingRule, rows)

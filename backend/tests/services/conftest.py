"""Service test fixtures — async DB, seeded catalogue, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB sessions
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for service and route tests
    - Seed objects attach relationships directly so nothing lazy-loads afterwards
"""

from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from trainshop.core.domain_types import Control, Epoch, LocoType, Scale
from trainshop.db.base import Base
from trainshop.infrastructure.database import get_db, DatabaseSessionManager
from trainshop.models import (
    Country, DigitalDecoder, Image, Locomotive, RailwayCompany, StockStatus, Tag,
)
import trainshop.infrastructure.database as db_module
from trainshop.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


def _locomotive(name: str, price: str, **fields) -> Locomotive:
    defaults = dict(
        description=None,
        tag=None,
        images=[],
        stock_status=None,
        scale=Scale.H0,
        epoch=Epoch.IV,
        length=200.0,
        num_of_axles=4,
        railway_company=None,
        control=Control.DIGITAL,
        loco_type=LocoType.DIESEL,
        auto_coupling=False,
        num_of_driven_axles=4,
        digital_decoder=None,
    )
    defaults.update(fields)
    return Locomotive(name=name, price=Decimal(price), **defaults)


@pytest.fixture
async def seed_catalogue(test_db):
    """Three named locomotives plus one with no tag, company or stock record.

    Returns dict of the persisted objects keyed by short names.
    """
    germany = Country(name="Germany")
    usa = Country(name="USA")
    db_company = RailwayCompany(name="DB", country=germany)
    up_company = RailwayCompany(name="UP", country=usa)
    diesel, electric, steam = Tag(id="diesel"), Tag(id="electric"), Tag(id="steam")
    decoder = DigitalDecoder(name="ESU LokSound 5")
    spare_image = Image(url="https://img.example/spare.jpg")
    spare_side_view = Image(url="https://img.example/spare-side.jpg")

    br218 = _locomotive(
        "BR 218", "189.00",
        description="Diesel-hydraulic mainline locomotive",
        tag=diesel, railway_company=db_company,
        images=[Image(url="https://img.example/br218-front.jpg")],
        stock_status=StockStatus(amount=5, next_stock=date(2026, 12, 1)),
        digital_decoder=decoder,
    )
    br110 = _locomotive(
        "BR 110", "149.00",
        tag=electric, railway_company=db_company,
        loco_type=LocoType.ELECTRIC, epoch=Epoch.III,
        stock_status=StockStatus(amount=0, next_stock=None),
    )
    big_boy = _locomotive(
        "Big Boy", "499.00",
        tag=steam, railway_company=up_company,
        loco_type=LocoType.STEAM, scale=Scale.N, control=Control.DIGITAL_SOUND,
        num_of_axles=12, num_of_driven_axles=8, length=250.5,
    )
    shunter = _locomotive(
        "Köf II", "79.00",
        control=Control.ANALOG, num_of_axles=2, num_of_driven_axles=2,
    )

    test_db.add_all([br218, br110, big_boy, shunter, spare_image, spare_side_view])
    await test_db.commit()
    return {
        "br218": br218, "br110": br110, "big_boy": big_boy, "shunter": shunter,
        "db": db_company, "up": up_company, "decoder": decoder,
        "spare_image": spare_image, "spare_side_view": spare_side_view,
    }

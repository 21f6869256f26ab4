# tests/conftest.py
import os, sys, tempfile
# project root first on sys.path so "cablequote" and "main" import from the checkout
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

# config reads the environment at import time
_DB_DIR = tempfile.mkdtemp(prefix="cablequote-tests-")
os.environ["DB_TYPE"] = "sqlite"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_DB_DIR, 'test.db')}"
os.environ.setdefault("JWT_SECRET", "test-secret")

from types import SimpleNamespace

import pytest
import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from cablequote.core.db import enable_sqlite_foreign_keys, init_models


@pytest_asyncio.fixture
async def session():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    event.listen(engine.sync_engine, "connect", enable_sqlite_foreign_keys)
    await init_models(bind=engine)
    Session = sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with Session() as db:
        yield db
    await engine.dispose()


@pytest.fixture
def admin():
    return SimpleNamespace(name="admin", role="Admin")


@pytest.fixture
def manager():
    return SimpleNamespace(name="meera", role="Management")

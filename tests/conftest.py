import os
import random
import tempfile
from datetime import date, timedelta

_TMP_DIR = tempfile.mkdtemp(prefix="euromillions-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{_TMP_DIR}/test.db")
os.environ.setdefault("LOG_DIR", os.path.join(_TMP_DIR, "logs"))
os.environ.setdefault("DEBUG", "false")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from euromillions.data.store import DataStore  # noqa: E402
from euromillions.db.engine import init_models  # noqa: E402

HISTORY_SIZE = 300


def _make_history(seed: int = 42):
    rng = random.Random(seed)
    draws = [rng.sample(range(1, 51), 5) for _ in range(HISTORY_SIZE)]
    stars = [rng.sample(range(1, 13), 2) for _ in range(HISTORY_SIZE)]
    dates = [date(2024, 12, 31) - timedelta(days=3 * i) for i in range(HISTORY_SIZE)]
    return draws, stars, dates


@pytest.fixture
def history():
    return _make_history()


@pytest.fixture
def draws(history):
    return history[0]


@pytest.fixture
def store(history):
    draws, stars, dates = history
    return DataStore(draws, stars, dates)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def csv_text(history):
    draws, stars, dates = history
    lines = ["id;date;b1;b2;b3;b4;b5;s1;s2"]
    for i, (numbers, star_numbers, day) in enumerate(zip(draws, stars, dates)):
        values = [str(HISTORY_SIZE - i), day.strftime("%d/%m/%Y")]
        values += [str(n) for n in numbers + star_numbers]
        lines.append(";".join(values))
    return "\n".join(lines)


@pytest_asyncio.fixture
async def session():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_models(engine)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
    await engine.dispose()

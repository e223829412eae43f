"""테스트 인프라 — 인메모리 SQLite DB, 세션, 4명 회원 픽스처, httpx 클라이언트.

Test infrastructure — in-memory SQLite database, session, the four-member
fixture and an httpx client bound to the FastAPI app.
Each test gets a fresh database; the session is rolled back afterwards.
"""

import os

# 테스트 프로필 — querystudy 임포트 전에 설정해야 전역 엔진/설정에 반영됨
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["PROFILE"] = "test"
os.environ["DEBUG"] = "false"
os.environ["AXIOM_API_TOKEN"] = ""
os.environ["AXIOM_DATASET"] = ""

from collections.abc import AsyncGenerator  # noqa: E402

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker  # noqa: E402

from querystudy.database import Base, build_engine, get_db  # noqa: E402
from querystudy.main import app  # noqa: E402
from querystudy.models import Member, Team  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트마다 새 인메모리 DB 엔진을 만들고 스키마를 생성합니다."""
    eng = build_engine(TEST_DATABASE_URL)
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다. 종료 시 롤백."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 팀 2개, 회원 4명
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def teams(db: AsyncSession) -> dict[str, Team]:
    """teamA, teamB를 생성합니다."""
    team_a = Team(name="teamA")
    team_b = Team(name="teamB")
    db.add_all([team_a, team_b])
    await db.flush()
    return {"teamA": team_a, "teamB": team_b}


@pytest_asyncio.fixture
async def members(db: AsyncSession, teams: dict[str, Team]) -> list[Member]:
    """member1~4 (나이 10/20/30/40), teamA={1,2}, teamB={3,4}."""
    result = [
        Member(username="member1", age=10, team=teams["teamA"]),
        Member(username="member2", age=20, team=teams["teamA"]),
        Member(username="member3", age=30, team=teams["teamB"]),
        Member(username="member4", age=40, team=teams["teamB"]),
    ]
    db.add_all(result)
    await db.flush()
    return result

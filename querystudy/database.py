"""데이터베이스 엔진 및 세션 설정 모듈.

Database engine and session configuration module.
Sets up the async SQLAlchemy engine, session factory, and ORM base class.
PostgreSQL (asyncpg) is the default target; an in-memory SQLite database
(aiosqlite) is supported for local runs and tests.
"""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from querystudy.config import settings


def _engine_options(database_url: str) -> dict[str, Any]:
    """드라이버별 엔진 옵션을 반환합니다.

    Return engine keyword arguments appropriate for the driver in the URL.
    """
    if database_url.startswith("sqlite"):
        # 인메모리 DB는 커넥션마다 별도 DB가 생기므로 단일 커넥션을 공유
        # In-memory SQLite lives per connection, so share exactly one
        return {"poolclass": StaticPool}
    return {
        "pool_pre_ping": True,
        "pool_size": 5,
        "max_overflow": 10,
        # pgbouncer 등 트랜잭션 모드 풀러에서 prepared statement 비활성화
        "connect_args": {"statement_cache_size": 0},
    }


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """주어진 URL로 비동기 엔진을 생성합니다.

    Create an async engine for the given URL.

    Args:
        database_url: 비동기 드라이버 URL (Async driver URL)
        echo: SQL 로그 출력 여부 (Whether to echo SQL statements)

    Returns:
        AsyncEngine: 생성된 엔진 (The created engine)
    """
    return create_async_engine(database_url, echo=echo, **_engine_options(database_url))


# 비동기 데이터베이스 엔진 — Async database engine
engine: AsyncEngine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)

# 비동기 세션 팩토리 — Async session factory
# expire_on_commit=False: 커밋 후에도 객체 속성 접근 가능 (Allows attribute access after commit without refresh)
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """SQLAlchemy 선언적 베이스 클래스.

    Declarative base class for all ORM models.
    All models inherit from this class to register with the metadata.
    """

    pass


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """비동기 데이터베이스 세션을 생성하고 요청 종료 시 닫습니다.

    FastAPI dependency that yields an async database session.
    The session is automatically closed after the request completes.

    Yields:
        AsyncSession: SQLAlchemy 비동기 세션 인스턴스 (Async session instance)
    """
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()

"""Alembic 마이그레이션 테스트 — 마이그레이션 결과가 ORM 메타데이터와 일치하는지 확인.

Alembic migration tests — the schema built by the migration matches the
ORM metadata, so autogenerate finds nothing to change.
"""

import importlib.util
from pathlib import Path
from types import ModuleType

from alembic.autogenerate import compare_metadata
from alembic.operations import Operations
from alembic.runtime.migration import MigrationContext
from sqlalchemy import inspect
from sqlalchemy.engine import Connection

from querystudy.database import Base, build_engine
from querystudy.models import Member

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
VERSIONS_DIR: Path = Path(__file__).resolve().parent.parent / "alembic" / "versions"


def _load_revision(filename: str) -> ModuleType:
    spec = importlib.util.spec_from_file_location(filename.removesuffix(".py"), VERSIONS_DIR / filename)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _upgrade_and_compare(connection: Connection) -> list:
    revision = _load_revision("a1c2e3b4d5f6_create_teams_and_members.py")
    with Operations.context(MigrationContext.configure(connection)):
        revision.upgrade()
    return compare_metadata(MigrationContext.configure(connection), Base.metadata)


class TestMigrations:
    """마이그레이션 스키마 테스트."""

    async def test_migration_matches_models(self):
        """마이그레이션으로 만든 스키마와 모델 사이에 차이가 없음."""
        engine = build_engine(TEST_DATABASE_URL)
        try:
            async with engine.connect() as conn:
                diff = await conn.run_sync(_upgrade_and_compare)
        finally:
            await engine.dispose()
        assert diff == []

    async def test_team_id_index(self, engine):
        """members.team_id 인덱스가 모델에 선언되어 있음."""
        assert "ix_members_team_id" in {ix.name for ix in Member.__table__.indexes}

        async with engine.connect() as conn:
            indexes = await conn.run_sync(lambda c: inspect(c).get_indexes("members"))
        assert [ix["column_names"] for ix in indexes if ix["name"] == "ix_members_team_id"] == [
            ["team_id"]
        ]

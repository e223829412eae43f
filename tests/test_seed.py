"""초기 데이터 시드 테스트.

Seed tests — sample data shape, profile gating and idempotency.
"""

from collections.abc import AsyncGenerator

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from querystudy.database import Base, engine as app_engine
from querystudy.repositories.member_query_repository import member_query_repository
from querystudy.repositories.team_repository import team_repository
from querystudy.seed import MEMBER_COUNT, init_local_data, seed, seed_members


class TestSeedMembers:
    """샘플 데이터 생성 테스트."""

    async def test_creates_members_and_teams(self, db: AsyncSession):
        """팀 2개, 회원 100명."""
        members = await seed_members(db)
        assert len(members) == MEMBER_COUNT
        assert await member_query_repository.fetch_count(db) == 100
        assert await team_repository.count(db) == 2

    async def test_alternating_teams(self, db: AsyncSession):
        """짝수 번호는 teamA, 홀수 번호는 teamB, 나이는 번호."""
        members = await seed_members(db, member_count=4)
        team_a = await team_repository.get_by_name(db, "teamA")
        team_b = await team_repository.get_by_name(db, "teamB")

        assert [m.username for m in members] == ["member0", "member1", "member2", "member3"]
        assert [m.age for m in members] == [0, 1, 2, 3]
        assert [m.team_id for m in members] == [team_a.id, team_b.id, team_a.id, team_b.id]

    async def test_team_averages(self, db: AsyncSession):
        """teamA 평균 49, teamB 평균 50."""
        await seed_members(db)
        result = await member_query_repository.average_age_by_team(db)
        assert [r.average_age for r in result] == [49.0, 50.0]


class TestInitLocalData:
    """프로필별 시드 실행 테스트 — 앱 전역 엔진 사용."""

    @pytest_asyncio.fixture(autouse=True)
    async def clean_app_db(self) -> AsyncGenerator[None, None]:
        yield
        async with app_engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        await app_engine.dispose()

    async def test_non_local_profile_skips(self):
        """local이 아니면 시드하지 않음."""
        assert await init_local_data("test") is False

    async def test_default_profile_from_settings(self):
        """프로필 미지정 시 설정값(test) 사용 — 시드하지 않음."""
        assert await init_local_data() is False

    async def test_local_profile_seeds_once(self):
        """local 프로필은 한 번만 시드."""
        assert await init_local_data("local") is True
        assert await seed() is False

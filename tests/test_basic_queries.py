"""회원 기본 조회 테스트 — 검색, 결과 조회, 정렬, 페이징, 집계.

Basic member query tests — search, result fetching, sorting, paging and
aggregation over the four-member fixture.
"""

import pytest
from sqlalchemy.exc import MultipleResultsFound
from sqlalchemy.ext.asyncio import AsyncSession

from querystudy.models import Member
from querystudy.repositories.member_query_repository import member_query_repository as repo


# ===== Search =====

class TestSearch:
    """기본 검색 테스트."""

    async def test_find_by_username_text(self, db: AsyncSession, members):
        """문자열 SQL로 member1 조회."""
        found = await repo.find_by_username_text(db, "member1")
        assert found is not None
        assert found.username == "member1"
        assert found.age == 10

    async def test_find_by_username(self, db: AsyncSession, members):
        """파라미터 바인딩으로 member1 조회."""
        found = await repo.find_by_username(db, "member1")
        assert found is not None
        assert found.id == members[0].id

    async def test_find_by_username_missing(self, db: AsyncSession, members):
        """없는 이름이면 None."""
        assert await repo.find_by_username(db, "nobody") is None

    async def test_find_named_by_age(self, db: AsyncSession, members):
        """이름이 있고 나이 10인 회원 — member1."""
        found = await repo.find_named_by_age(db, 10)
        assert found is not None
        assert found.username == "member1"

    async def test_find_named_by_age_skips_unnamed(self, db: AsyncSession, members):
        """이름이 null인 회원은 제외."""
        db.add(Member(username=None, age=99))
        await db.flush()
        assert await repo.find_named_by_age(db, 99) is None

    async def test_find_by_username_and_age(self, db: AsyncSession, members):
        """where 다중 인자 — 이름과 나이 모두 일치."""
        found = await repo.find_by_username_and_age(db, "member1", 10)
        assert found is not None
        assert found.username == "member1"
        assert await repo.find_by_username_and_age(db, "member1", 20) is None


# ===== Result fetching =====

class TestResultFetch:
    """결과 조회 방식 테스트."""

    async def test_fetch_all(self, db: AsyncSession, members):
        """전체 목록 — 4명."""
        result = await repo.fetch_all(db)
        assert [m.username for m in result] == ["member1", "member2", "member3", "member4"]

    async def test_fetch_one_raises_on_many(self, db: AsyncSession, members):
        """결과가 둘 이상이면 MultipleResultsFound."""
        with pytest.raises(MultipleResultsFound):
            await repo.fetch_one(db)

    async def test_fetch_one_empty(self, db: AsyncSession):
        """결과가 없으면 None."""
        assert await repo.fetch_one(db) is None

    async def test_fetch_one_single(self, db: AsyncSession):
        """결과가 하나면 그 회원."""
        db.add(Member(username="solo", age=1))
        await db.flush()
        found = await repo.fetch_one(db)
        assert found is not None
        assert found.username == "solo"

    async def test_fetch_first(self, db: AsyncSession, members):
        """첫 번째 회원 — member1."""
        first = await repo.fetch_first(db)
        assert first is not None
        assert first.username == "member1"

    async def test_fetch_count(self, db: AsyncSession, members):
        """회원 수 — 4."""
        assert await repo.fetch_count(db) == 4

    async def test_fetch_results(self, db: AsyncSession, members):
        """offset 1, limit 2 — 전체 개수 4와 함께 2건."""
        page = await repo.fetch_results(db, offset=1, limit=2)
        assert page.total == 4
        assert page.offset == 1
        assert page.limit == 2
        assert [m.username for m in page.results] == ["member2", "member3"]


# ===== Sorting and paging =====

class TestSortAndPaging:
    """정렬 및 페이징 테스트."""

    async def test_sort_nulls_last(self, db: AsyncSession, members):
        """나이 desc, 이름 asc, 이름 null은 마지막."""
        db.add_all([
            Member(username=None, age=100),
            Member(username="member5", age=100),
            Member(username="member6", age=100),
        ])
        await db.flush()

        result = await repo.find_by_age_sorted(db, 100)
        assert [m.username for m in result] == ["member5", "member6", None]

    async def test_find_page(self, db: AsyncSession, members):
        """이름순 offset 1부터 2건."""
        result = await repo.find_page(db, offset=1, limit=2)
        assert [m.username for m in result] == ["member2", "member3"]

    async def test_find_page_past_end(self, db: AsyncSession, members):
        """범위를 넘으면 빈 목록."""
        assert await repo.find_page(db, offset=10, limit=2) == []


# ===== Aggregation =====

class TestAggregation:
    """집계 테스트."""

    async def test_age_statistics(self, db: AsyncSession, members):
        """count 4, sum 100, avg 25, max 40, min 10."""
        stats = await repo.age_statistics(db)
        assert stats.count == 4
        assert stats.sum == 100
        assert stats.avg == pytest.approx(25)
        assert stats.max == 40
        assert stats.min == 10

    async def test_age_statistics_empty(self, db: AsyncSession):
        """회원이 없으면 count 0, 나머지 None."""
        stats = await repo.age_statistics(db)
        assert stats.count == 0
        assert stats.sum is None
        assert stats.avg is None

    async def test_average_age_by_team(self, db: AsyncSession, members):
        """teamA 평균 15, teamB 평균 35."""
        result = await repo.average_age_by_team(db)
        assert [r.team_name for r in result] == ["teamA", "teamB"]
        assert result[0].average_age == pytest.approx(15)
        assert result[1].average_age == pytest.approx(35)

    async def test_average_age_by_team_excludes_teamless(self, db: AsyncSession, members):
        """팀이 없는 회원은 그룹에 포함되지 않음."""
        db.add(Member(username="solo", age=90))
        await db.flush()
        result = await repo.average_age_by_team(db)
        assert len(result) == 2
        assert result[0].average_age == pytest.approx(15)

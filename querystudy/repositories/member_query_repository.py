"""회원 조회 레포지토리 — 필터, 정렬, 페이징, 집계, 조인, 서브쿼리.

Member Query Repository — filtering, sorting, paging, aggregation,
joins and subqueries over members and teams.

Mapped attributes (``Member.username``, ``Team.name``) are the typed
meta-model queries are composed from; ``aliased(Member)`` provides a
second, independent reference to the members table for subqueries.
"""

from typing import Any, Sequence

from sqlalchemy import Row, Select, func, inspect, select, text
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased, contains_eager

from querystudy.models.member import Member
from querystudy.models.team import Team
from querystudy.schemas.member import AgeStatistics
from querystudy.schemas.team import TeamAverageAge
from querystudy.utils.pagination import QueryResults, offset_results


def is_loaded(instance: Any, attribute: str) -> bool:
    """엔티티의 속성이 이미 로딩되었는지 확인합니다.

    Return True when ``attribute`` of a mapped instance has been loaded,
    without triggering a lazy load.
    """
    return attribute not in inspect(instance).unloaded


class MemberQueryRepository:
    """회원/팀 조회 쿼리를 담당하는 레포지토리.

    Repository of read queries over members and teams.
    """

    # === 기본 조회 (Basic search) ===

    async def find_by_username_text(
        self,
        db: AsyncSession,
        username: str,
    ) -> Member | None:
        """문자열 SQL로 회원을 조회합니다.

        Find a member with a hand-written SQL string and a named bind
        parameter, mapped back onto the Member entity.
        """
        statement = text(
            "SELECT member_id, username, age, team_id FROM members WHERE username = :username"
        ).bindparams(username=username)
        result = await db.execute(select(Member).from_statement(statement))
        return result.scalar_one_or_none()

    async def find_by_username(
        self,
        db: AsyncSession,
        username: str,
    ) -> Member | None:
        """이름으로 회원을 조회합니다 (파라미터 바인딩 자동 처리).

        Find a member by username; the value is bound as a parameter.
        """
        query: Select = select(Member).where(Member.username == username)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def find_named_by_age(
        self,
        db: AsyncSession,
        age: int,
    ) -> Member | None:
        """이름이 있고 나이가 일치하는 회원을 조회합니다 (and 체인).

        Find the member whose username is not null and whose age matches,
        with the predicate chained through ``&``.
        """
        query: Select = select(Member).where(
            Member.username.is_not(None) & (Member.age == age)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def find_by_username_and_age(
        self,
        db: AsyncSession,
        username: str,
        age: int,
    ) -> Member | None:
        """where에 조건을 여러 개 넘기면 AND로 묶입니다.

        Find by username and age passed as separate WHERE arguments.
        """
        query: Select = select(Member).where(
            Member.username == username,
            Member.age == age,
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    # === 결과 조회 방식 (Result fetching) ===

    async def fetch_all(self, db: AsyncSession) -> list[Member]:
        """전체 회원 목록 (List of all members, by id)."""
        result = await db.execute(select(Member).order_by(Member.id))
        return list(result.scalars().all())

    async def fetch_one(self, db: AsyncSession) -> Member | None:
        """단건 조회 — 결과가 둘 이상이면 MultipleResultsFound.

        Fetch exactly one member. Returns None for no rows and raises
        ``MultipleResultsFound`` when more than one row matches.
        """
        result = await db.execute(select(Member))
        return result.scalar_one_or_none()

    async def fetch_first(self, db: AsyncSession) -> Member | None:
        """첫 번째 회원 — LIMIT 1 후 단건 조회와 같음."""
        result = await db.execute(select(Member).order_by(Member.id).limit(1))
        return result.scalars().first()

    async def fetch_count(self, db: AsyncSession) -> int:
        """회원 수 (COUNT of members)."""
        result = await db.execute(select(func.count(Member.id)))
        return result.scalar_one()

    async def fetch_results(
        self,
        db: AsyncSession,
        offset: int,
        limit: int,
    ) -> QueryResults:
        """이름순 페이지와 전체 개수를 함께 조회합니다.

        Username-ordered slice plus the total count of members.
        """
        query: Select = select(Member).order_by(Member.username.asc())
        return await offset_results(db, query, offset, limit)

    # === 정렬, 페이징 (Sorting, paging) ===

    async def find_by_age_sorted(
        self,
        db: AsyncSession,
        age: int,
    ) -> list[Member]:
        """회원 정렬 순서.

        1. 회원 나이 내림차순(desc)
        2. 회원 이름 올림차순(asc)
        단 2에서 회원 이름이 없으면 마지막에 출력(nulls last)
        """
        query: Select = (
            select(Member)
            .where(Member.age == age)
            .order_by(Member.age.desc(), Member.username.asc().nulls_last())
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_page(
        self,
        db: AsyncSession,
        offset: int,
        limit: int,
    ) -> list[Member]:
        """이름순으로 offset부터 limit개를 조회합니다.

        Fetch ``limit`` members ordered by username, skipping ``offset``.
        """
        query: Select = (
            select(Member)
            .order_by(Member.username.asc())
            .offset(offset)
            .limit(limit)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    # === 집계 (Aggregation) ===

    async def age_statistics(self, db: AsyncSession) -> AgeStatistics:
        """회원 나이의 count/sum/avg/max/min을 한 번에 집계합니다.

        Aggregate count, sum, avg, max and min over member ages.
        """
        query: Select = select(
            func.count(Member.id),
            func.sum(Member.age),
            func.avg(Member.age),
            func.max(Member.age),
            func.min(Member.age),
        )
        row: Row[Any] = (await db.execute(query)).one()
        return AgeStatistics(count=row[0], sum=row[1], avg=row[2], max=row[3], min=row[4])

    async def average_age_by_team(self, db: AsyncSession) -> list[TeamAverageAge]:
        """팀의 이름과 각 팀의 평균 연령을 구합니다.

        Team name with the average age of its members, ordered by team name.
        """
        query: Select = (
            select(Team.name, func.avg(Member.age))
            .select_from(Member)
            .join(Member.team)
            .group_by(Team.name)
            .order_by(Team.name)
        )
        result = await db.execute(query)
        return [TeamAverageAge(team_name=name, average_age=avg) for name, avg in result.all()]

    # === 조인 (Joins) ===

    async def find_by_team_name(
        self,
        db: AsyncSession,
        team_name: str,
    ) -> list[Member]:
        """팀에 소속된 모든 회원을 찾습니다 (연관관계 내부 조인).

        Inner join along the Member.team relationship, filtered by team name.
        """
        query: Select = (
            select(Member)
            .join(Member.team)
            .where(Team.name == team_name)
            .order_by(Member.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_username_matching_team_name(self, db: AsyncSession) -> list[Member]:
        """세타 조인 — 회원의 이름이 팀의 이름과 같은 회원 조회.

        Theta join: members and teams both in FROM, joined only by
        ``member.username = team.name``; no relationship is needed.
        """
        query: Select = (
            select(Member)
            .where(Member.username == Team.name)
            .order_by(Member.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_with_team_filtered_on_join(
        self,
        db: AsyncSession,
        team_name: str,
    ) -> Sequence[Row[tuple[Member, Team | None]]]:
        """회원과 팀을 조인하면서 팀 이름이 일치하는 팀만 조인, 회원은 모두 조회.

        Left outer join along the relationship with an extra ON condition.
        Every member is returned; the team is None where ON fails.
        """
        query: Select = (
            select(Member, Team)
            .outerjoin(Member.team.and_(Team.name == team_name))
            .order_by(Member.id)
        )
        result = await db.execute(query)
        return result.all()

    async def find_with_team_by_name(
        self,
        db: AsyncSession,
    ) -> Sequence[Row[tuple[Member, Team | None]]]:
        """연관관계 없는 엔티티 외부 조인 — 회원 이름과 팀 이름이 같은 팀.

        Left outer join to teams on an ad hoc condition, with no
        relationship involved: ``member.username = team.name``.
        """
        query: Select = (
            select(Member, Team)
            .outerjoin(Team, Member.username == Team.name)
            .order_by(Member.id)
        )
        result = await db.execute(query)
        return result.all()

    # === 페치 조인 (Fetch join) ===

    async def find_by_username_lazy(
        self,
        db: AsyncSession,
        username: str,
    ) -> Member | None:
        """페치 조인 미적용 — 팀은 로딩되지 않은 상태로 반환.

        Plain lookup; the team stays unloaded until accessed.
        """
        return await self.find_by_username(db, username)

    async def find_by_username_fetch_join(
        self,
        db: AsyncSession,
        username: str,
    ) -> Member | None:
        """페치 조인 적용 — 회원 조회할 때 연관된 팀도 같이 조회.

        Join the team and populate ``Member.team`` from the same row.
        """
        query: Select = (
            select(Member)
            .join(Member.team)
            .options(contains_eager(Member.team))
            .where(Member.username == username)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    # === 서브쿼리 (Subqueries) ===

    async def find_oldest(self, db: AsyncSession) -> list[Member]:
        """나이가 가장 많은 회원 조회."""
        member_sub = aliased(Member, name="member_sub")
        query: Select = select(Member).where(
            Member.age == select(func.max(member_sub.age)).scalar_subquery()
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_at_least_average_age(self, db: AsyncSession) -> list[Member]:
        """나이가 평균 이상인 회원 조회."""
        member_sub = aliased(Member, name="member_sub")
        query: Select = (
            select(Member)
            .where(Member.age >= select(func.avg(member_sub.age)).scalar_subquery())
            .order_by(Member.age)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_by_age_in_older_than(
        self,
        db: AsyncSession,
        age: int,
    ) -> list[Member]:
        """IN 서브쿼리 — 나이가 기준보다 많은 회원들의 나이에 속하는 회원.

        Members whose age is IN the ages of members older than ``age``.
        """
        member_sub = aliased(Member, name="member_sub")
        query: Select = (
            select(Member)
            .where(Member.age.in_(select(member_sub.age).where(member_sub.age > age)))
            .order_by(Member.age)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_usernames_with_average_age(
        self,
        db: AsyncSession,
    ) -> Sequence[Row[tuple[str | None, float]]]:
        """SELECT 절 서브쿼리 — 회원 이름과 전체 평균 나이."""
        member_sub = aliased(Member, name="member_sub")
        query: Select = select(
            Member.username,
            select(func.avg(member_sub.age)).scalar_subquery().label("average_age"),
        ).order_by(Member.id)
        result = await db.execute(query)
        return result.all()


# 싱글턴 인스턴스 — Singleton instance
member_query_repository: MemberQueryRepository = MemberQueryRepository()

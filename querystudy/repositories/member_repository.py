"""회원 레포지토리 — 동적 검색, 페이징 검색, 벌크 연산.

Member Repository — dynamic search, paged search and bulk operations.
Extends BaseRepository with predicates assembled from optional inputs:
every helper returns None for a missing input and None clauses are dropped.
"""

from typing import Any, Sequence

from sqlalchemy import Select, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from querystudy.models.member import Member
from querystudy.models.team import Team
from querystudy.repositories.base import BaseRepository
from querystudy.schemas.member import MemberSearchCondition, MemberTeamDto
from querystudy.utils.conditions import ConditionBuilder, all_of, has_text, where_all
from querystudy.utils.pagination import page_offset, paginate, resolve_total
from querystudy.utils.projections import Projections

_to_member_team = Projections.fields(MemberTeamDto)


# === 조건 헬퍼 (Predicate helpers) ===

def username_eq(username: str | None) -> ColumnElement[bool] | None:
    return Member.username == username if has_text(username) else None


def team_name_eq(team_name: str | None) -> ColumnElement[bool] | None:
    return Team.name == team_name if has_text(team_name) else None


def age_eq(age: int | None) -> ColumnElement[bool] | None:
    return Member.age == age if age is not None else None


def age_goe(age: int | None) -> ColumnElement[bool] | None:
    return Member.age >= age if age is not None else None


def age_loe(age: int | None) -> ColumnElement[bool] | None:
    return Member.age <= age if age is not None else None


def all_eq(username: str | None, age: int | None) -> ColumnElement[bool] | None:
    """조건 조립 — 이름과 나이 조건을 하나로 묶습니다. 한쪽이 None이어도 안전.

    Compose the username and age helpers; either side may be None.
    """
    return all_of(username_eq(username), age_eq(age))


def age_between(goe: int | None, loe: int | None) -> ColumnElement[bool] | None:
    return all_of(age_goe(goe), age_loe(loe))


def search_conditions(condition: MemberSearchCondition) -> list[ColumnElement[bool] | None]:
    """검색 조건 객체를 WHERE 절 조건 목록으로 변환합니다.

    Translate a search condition into WHERE clauses (None for unset fields).
    """
    return [
        username_eq(condition.username),
        team_name_eq(condition.team_name),
        age_between(condition.age_goe, condition.age_loe),
    ]


class MemberRepository(BaseRepository[Member]):
    """회원 테이블에 대한 검색/벌크 쿼리를 담당하는 레포지토리.

    Repository handling search and bulk queries for the members table.
    """

    def __init__(self) -> None:
        super().__init__(Member)

    @staticmethod
    def _member_team_query() -> Select:
        """회원 + 팀 컬럼을 MemberTeamDto 필드 이름으로 조회하는 기본 쿼리."""
        return (
            select(
                Member.id.label("member_id"),
                Member.username,
                Member.age,
                Team.id.label("team_id"),
                Team.name.label("team_name"),
            )
            .outerjoin(Member.team)
        )

    # === 동적 쿼리 (Dynamic queries) ===

    async def search_with_builder(
        self,
        db: AsyncSession,
        username: str | None,
        age: int | None,
    ) -> list[Member]:
        """빌더에 조건을 누적하는 방식의 동적 쿼리.

        Dynamic query accumulating clauses in a ConditionBuilder;
        None parameters add no clause.
        """
        builder = ConditionBuilder()
        if username is not None:
            builder.and_(Member.username == username)
        if age is not None:
            builder.and_(Member.age == age)

        query: Select = builder.apply(select(Member)).order_by(Member.id)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def search_with_where_params(
        self,
        db: AsyncSession,
        username: str | None,
        age: int | None,
    ) -> list[Member]:
        """where 다중 파라미터 방식의 동적 쿼리 — None 조건은 무시됩니다.

        Dynamic query passing one helper per field; None helpers are dropped.
        """
        query: Select = where_all(select(Member), username_eq(username), age_eq(age))
        result = await db.execute(query.order_by(Member.id))
        return list(result.scalars().all())

    async def search_all_eq(
        self,
        db: AsyncSession,
        username: str | None,
        age: int | None,
    ) -> list[Member]:
        """조립된 조건(all_eq) 하나로 검색합니다."""
        query: Select = where_all(select(Member), all_eq(username, age))
        result = await db.execute(query.order_by(Member.id))
        return list(result.scalars().all())

    # === 검색 (Search) ===

    async def search(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
    ) -> list[MemberTeamDto]:
        """검색 조건으로 회원과 소속 팀을 조회합니다.

        Search members (left-joined with their team) by the condition.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            condition: 검색 조건 (Search condition)

        Returns:
            list[MemberTeamDto]: 검색 결과 (Search rows, ordered by member id)
        """
        query: Select = where_all(self._member_team_query(), *search_conditions(condition))
        result = await db.execute(query.order_by(Member.id))
        return [_to_member_team(row) for row in result.all()]

    async def search_page_simple(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
        page: int = 1,
        per_page: int = 20,
    ) -> tuple[list[MemberTeamDto], int]:
        """내용과 전체 개수를 한 번에 조회하는 페이징 검색.

        Paged search; the total is counted over the same query as a subquery.

        Returns:
            tuple[list[MemberTeamDto], int]: (현재 페이지, 전체 개수)
        """
        query: Select = where_all(
            self._member_team_query(), *search_conditions(condition)
        ).order_by(Member.id)
        rows, total = await paginate(db, query, page, per_page, scalars=False)
        return [_to_member_team(row) for row in rows], total

    async def search_page_complex(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
        page: int = 1,
        per_page: int = 20,
    ) -> tuple[list[MemberTeamDto], int]:
        """데이터 조회와 COUNT 쿼리를 분리한 페이징 검색.

        Paged search with a dedicated count query. The count is skipped when
        the fetched page already determines the total (see resolve_total).
        A page number below 1 reads as the first page.

        Returns:
            tuple[list[MemberTeamDto], int]: (현재 페이지, 전체 개수)
        """
        conditions = search_conditions(condition)
        offset: int = page_offset(page, per_page)

        content_query: Select = (
            where_all(self._member_team_query(), *conditions)
            .order_by(Member.id)
            .offset(offset)
            .limit(per_page)
        )
        rows: Sequence[Any] = (await db.execute(content_query)).all()
        content: list[MemberTeamDto] = [_to_member_team(row) for row in rows]

        async def count() -> int:
            count_query: Select = where_all(
                select(func.count(Member.id)).select_from(Member).outerjoin(Member.team),
                *conditions,
            )
            return (await db.execute(count_query)).scalar_one()

        total: int = await resolve_total(len(content), offset, per_page, count)
        return content, total

    async def find_detail(
        self,
        db: AsyncSession,
        member_id: int,
    ) -> MemberTeamDto | None:
        """회원 한 명을 소속 팀 정보와 함께 조회합니다."""
        query: Select = self._member_team_query().where(Member.id == member_id)
        row = (await db.execute(query)).one_or_none()
        return _to_member_team(row) if row is not None else None

    # === 벌크 연산 (Bulk operations) ===

    async def bulk_rename_younger_than(
        self,
        db: AsyncSession,
        age: int,
        username: str,
    ) -> int:
        """나이가 기준 미만인 회원들의 이름을 일괄 변경합니다.

        Bulk UPDATE without loading entities. Instances already in the
        session are synchronised with the new values.

        Returns:
            int: 변경된 행 수 (Number of affected rows)
        """
        result = await db.execute(
            update(Member).where(Member.age < age).values(username=username)
        )
        return result.rowcount

    async def bulk_add_age(
        self,
        db: AsyncSession,
        amount: int,
    ) -> int:
        """모든 회원의 나이에 amount를 더합니다."""
        result = await db.execute(update(Member).values(age=Member.age + amount))
        return result.rowcount

    async def bulk_delete_older_than(
        self,
        db: AsyncSession,
        age: int,
    ) -> int:
        """나이가 기준 초과인 회원을 일괄 삭제합니다."""
        result = await db.execute(delete(Member).where(Member.age > age))
        return result.rowcount


# 싱글턴 인스턴스 — Singleton instance
member_repository: MemberRepository = MemberRepository()

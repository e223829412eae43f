"""회원 서비스 — 회원 검색 비즈니스 로직.

Member Service — business logic behind the member search endpoints.
Wraps repository results into response shapes and translates a missing
member into a 404.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from querystudy.repositories.member_query_repository import member_query_repository
from querystudy.repositories.member_repository import member_repository
from querystudy.schemas.member import MemberSearchCondition, MemberTeamDto
from querystudy.schemas.team import TeamAverageAge
from querystudy.utils.exceptions import NotFoundError
from querystudy.utils.pagination import Page


class MemberService:
    """회원 검색 관련 비즈니스 로직을 처리하는 서비스.

    Service handling member search.
    """

    async def search_members(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
    ) -> list[MemberTeamDto]:
        """검색 조건에 맞는 회원 전체를 조회합니다.

        Return every member matching the condition.
        """
        return await member_repository.search(db, condition)

    async def search_members_page(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
        page: int,
        per_page: int,
    ) -> Page:
        """검색 결과를 페이지 단위로 조회합니다 (단순 COUNT).

        Paged search; content and count come from the same query.
        """
        items, total = await member_repository.search_page_simple(
            db, condition, page, per_page
        )
        return Page.of(items, total, page, per_page)

    async def search_members_page_optimized(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
        page: int,
        per_page: int,
    ) -> Page:
        """검색 결과를 페이지 단위로 조회합니다 (COUNT 쿼리 분리, 생략 가능).

        Paged search with a separate count query that is skipped when the
        page itself determines the total.
        """
        items, total = await member_repository.search_page_complex(
            db, condition, page, per_page
        )
        return Page.of(items, total, page, per_page)

    async def get_member(
        self,
        db: AsyncSession,
        member_id: int,
    ) -> MemberTeamDto:
        """회원 한 명을 팀 정보와 함께 조회합니다.

        Raises:
            NotFoundError: 회원을 찾을 수 없을 때 (Member not found)
        """
        member: MemberTeamDto | None = await member_repository.find_detail(db, member_id)
        if member is None:
            raise NotFoundError("Member not found")
        return member

    async def team_average_ages(self, db: AsyncSession) -> list[TeamAverageAge]:
        """팀별 평균 나이 (Average age per team)."""
        return await member_query_repository.average_age_by_team(db)


# 싱글턴 인스턴스 — Singleton instance
member_service: MemberService = MemberService()

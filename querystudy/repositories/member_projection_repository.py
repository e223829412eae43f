"""회원 프로젝션 레포지토리 — CASE, 상수, 문자열 연결, DTO 조회, SQL 함수.

Member Projection Repository — CASE expressions, constants, string
concatenation, scalar/tuple/DTO projections and SQL function calls.

Tuples are best kept inside the repository; callers outside it should
receive DTOs so the query layer can change without touching them.
"""

from typing import Literal, Sequence

from sqlalchemy import Row, Select, String, case, cast, func, literal, select, text
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from querystudy.models.member import Member
from querystudy.schemas.member import MemberDto, UserDto
from querystudy.utils.projections import DtoBundle, Projections

ProjectionStrategy = Literal["bean", "fields", "constructor"]


class MemberProjectionRepository:
    """결과 형태(프로젝션)를 다루는 회원 쿼리 레포지토리.

    Repository of member queries that shape their results.
    """

    # === CASE 식 (CASE expressions) ===

    async def describe_ages(self, db: AsyncSession) -> list[str]:
        """단순 CASE — 나이 값에 따라 문자열로 변환합니다.

        Simple CASE on age: 10 → "열살", 20 → "스무살", otherwise "기타".
        """
        age_label = case(
            {10: "열살", 20: "스무살"},
            value=Member.age,
            else_="기타",
        )
        result = await db.execute(select(age_label).order_by(Member.id))
        return list(result.scalars().all())

    async def describe_age_ranges(self, db: AsyncSession) -> list[str]:
        """검색 CASE — 나이 구간별 문자열로 변환합니다.

        Searched CASE with BETWEEN ranges.
        """
        range_label = case(
            (Member.age.between(0, 20), "0살~20살"),
            (Member.age.between(21, 30), "21살~30살"),
            else_="기타",
        )
        result = await db.execute(select(range_label).order_by(Member.id))
        return list(result.scalars().all())

    # === 상수, 문자열 연결 (Constants, concatenation) ===

    async def find_usernames_with_constant(
        self,
        db: AsyncSession,
        value: str,
    ) -> Sequence[Row[tuple[str | None, str]]]:
        """회원 이름 옆에 상수 문자열을 붙여 조회합니다."""
        query: Select = select(
            Member.username,
            literal(value, String).label("constant"),
        ).order_by(Member.id)
        result = await db.execute(query)
        return result.all()

    async def find_username_age_labels(
        self,
        db: AsyncSession,
        username: str,
    ) -> list[str]:
        """이름_나이 형태로 연결한 문자열을 조회합니다.

        ``username || '_' || CAST(age AS VARCHAR)``, e.g. ``member1_10``.
        Non-string columns must be cast before concatenation.
        """
        label = Member.username.concat("_").concat(cast(Member.age, String))
        query: Select = select(label).where(Member.username == username)
        result = await db.execute(query)
        return list(result.scalars().all())

    # === 기본 프로젝션 (Scalar and tuple projection) ===

    async def find_usernames(self, db: AsyncSession) -> list[str | None]:
        """프로젝션 대상이 하나 — 회원 이름만 조회합니다."""
        result = await db.execute(select(Member.username).order_by(Member.id))
        return list(result.scalars().all())

    async def find_username_age_pairs(
        self,
        db: AsyncSession,
    ) -> Sequence[Row[tuple[str | None, int]]]:
        """프로젝션 대상이 둘 이상 — 이름과 나이를 튜플로 조회합니다."""
        result = await db.execute(select(Member.username, Member.age).order_by(Member.id))
        return result.all()

    # === DTO 프로젝션 (DTO projection) ===

    async def find_member_dtos_by_text(self, db: AsyncSession) -> list[MemberDto]:
        """문자열 SQL 결과를 MemberDto로 변환합니다."""
        result = await db.execute(
            text("SELECT username, age FROM members ORDER BY member_id")
        )
        to_dto = Projections.fields(MemberDto)
        return [to_dto(row) for row in result.all()]

    async def find_member_dtos(
        self,
        db: AsyncSession,
        strategy: ProjectionStrategy = "fields",
    ) -> list[MemberDto]:
        """이름과 나이를 MemberDto로 조회합니다.

        Project username and age into MemberDto with the given strategy:
        ``bean`` (row attributes), ``fields`` (column labels) or
        ``constructor`` (column positions).
        """
        converters = {
            "bean": Projections.bean,
            "fields": Projections.fields,
            "constructor": Projections.constructor,
        }
        to_dto = converters[strategy](MemberDto)
        result = await db.execute(select(Member.username, Member.age).order_by(Member.id))
        return [to_dto(row) for row in result.all()]

    async def find_user_dtos_with_max_age(self, db: AsyncSession) -> list[UserDto]:
        """프로퍼티 명이 다를 때 label로 이름을 맞춰 UserDto로 조회합니다.

        ``username`` is labelled ``name``; the age column is a subquery
        (the oldest member's age) labelled ``age``.
        """
        member_sub = aliased(Member, name="member_sub")
        query: Select = select(
            Member.username.label("name"),
            select(func.max(member_sub.age)).scalar_subquery().label("age"),
        ).order_by(Member.id)
        result = await db.execute(query)
        to_dto = Projections.fields(UserDto)
        return [to_dto(row) for row in result.all()]

    async def find_user_dtos_by_constructor(self, db: AsyncSession) -> list[UserDto]:
        """위치 기반 생성 — 컬럼 이름이 달라도 순서만 맞으면 됩니다."""
        result = await db.execute(select(Member.username, Member.age).order_by(Member.id))
        to_dto = Projections.constructor(UserDto)
        return [to_dto(row) for row in result.all()]

    async def find_member_dtos_by_bundle(self, db: AsyncSession) -> list[MemberDto]:
        """쿼리가 직접 MemberDto를 반환합니다 (타입 안전 프로젝션).

        The SELECT itself yields MemberDto instances through a DtoBundle.
        """
        query: Select = select(DtoBundle(MemberDto, Member.username, Member.age)).order_by(
            Member.id
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    # === SQL 함수 (SQL functions) ===

    async def replace_in_usernames(
        self,
        db: AsyncSession,
        old: str,
        new: str,
    ) -> list[str]:
        """DB의 replace 함수로 회원 이름의 일부를 치환합니다.

        Call the database ``replace()`` function on every username.
        """
        query: Select = select(func.replace(Member.username, old, new)).order_by(Member.id)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_lowercase_usernames(self, db: AsyncSession) -> list[str]:
        """이름이 모두 소문자인 회원의 이름을 조회합니다.

        Usernames equal to ``lower(username)``.
        """
        query: Select = (
            select(Member.username)
            .where(Member.username == func.lower(Member.username))
            .order_by(Member.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())


# 싱글턴 인스턴스 — Singleton instance
member_projection_repository: MemberProjectionRepository = MemberProjectionRepository()

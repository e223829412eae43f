"""회원 관련 Pydantic 스키마 정의.

Member-related Pydantic schema definitions.
Covers the DTO shapes that queries project into and the optional
search condition used to assemble dynamic predicates.
"""

from pydantic import BaseModel, ConfigDict


# === 프로젝션 (Projection) DTO ===

class MemberDto(BaseModel):
    """회원 이름과 나이만 담는 DTO.

    Member projection with only username and age.

    Attributes:
        username: 회원 이름 (Username, may be null)
        age: 나이 (Age)
    """

    model_config = ConfigDict(from_attributes=True)

    username: str | None = None
    age: int | None = None


class UserDto(BaseModel):
    """MemberDto와 같은 데이터, 다른 프로퍼티 이름.

    Same data as MemberDto under different property names; queries must
    alias ``username`` to ``name`` to fill it by name.

    Attributes:
        name: 회원 이름 (Username)
        age: 나이 (Age)
    """

    model_config = ConfigDict(from_attributes=True)

    name: str | None = None
    age: int | None = None


class MemberTeamDto(BaseModel):
    """회원 검색 결과 — 회원과 소속 팀 정보.

    Member search row: member columns plus the owning team's columns.
    Team columns are null for members without a team.
    """

    model_config = ConfigDict(from_attributes=True)

    member_id: int
    username: str | None = None
    age: int | None = None
    team_id: int | None = None
    team_name: str | None = None


# === 검색 조건 (Search condition) ===

class MemberSearchCondition(BaseModel):
    """회원 검색 조건 — 회원명, 팀명, 나이(ageGoe, ageLoe).

    Optional filter fields for member search. A field that is None
    (or blank text) contributes no predicate.

    Attributes:
        username: 회원 이름 일치 (Exact username)
        team_name: 팀 이름 일치 (Exact team name)
        age_goe: 나이 하한, 이상 (Age lower bound, inclusive)
        age_loe: 나이 상한, 이하 (Age upper bound, inclusive)
    """

    username: str | None = None
    team_name: str | None = None
    # int가 아니라 Optional인 이유는 나이 조건이 없을 수 있기 때문
    age_goe: int | None = None
    age_loe: int | None = None


# === 집계 (Aggregation) ===

class AgeStatistics(BaseModel):
    """회원 나이 집계 결과.

    Aggregate over member ages: count, sum, avg, max, min.
    """

    count: int
    sum: int | None
    avg: float | None
    max: int | None
    min: int | None

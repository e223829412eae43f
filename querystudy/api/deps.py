"""FastAPI 의존성 주입 모듈 — 검색 조건 및 페이징 파라미터.

FastAPI dependency injection module — search condition and paging
parameters parsed from the query string.
"""

from typing import Annotated

from fastapi import Query

from querystudy.schemas.common import PageParams
from querystudy.schemas.member import MemberSearchCondition


def get_search_condition(
    username: Annotated[str | None, Query()] = None,
    team_name: Annotated[str | None, Query()] = None,
    age_goe: Annotated[int | None, Query()] = None,
    age_loe: Annotated[int | None, Query()] = None,
) -> MemberSearchCondition:
    """쿼리 스트링에서 회원 검색 조건을 만듭니다.

    Build a MemberSearchCondition from query parameters; absent
    parameters stay None and add no predicate.
    """
    return MemberSearchCondition(
        username=username,
        team_name=team_name,
        age_goe=age_goe,
        age_loe=age_loe,
    )


def get_page_params(
    page: Annotated[int, Query(ge=1)] = 1,
    per_page: Annotated[int, Query(ge=1, le=100)] = 20,
) -> PageParams:
    """쿼리 스트링에서 페이지 파라미터를 검증해 만듭니다.

    Validate paging parameters; out-of-range values yield a 422.
    """
    return PageParams(page=page, per_page=per_page)

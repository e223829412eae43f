"""회원 라우터 — 회원 검색 엔드포인트.

Member Router — member search endpoints.

    - v1: 조건 검색 전체 조회 (Search, all rows)
    - v2: 페이징 검색, 단순 COUNT (Paged search, simple count)
    - v3: 페이징 검색, COUNT 분리/생략 (Paged search, separate count)
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from querystudy.api.deps import get_page_params, get_search_condition
from querystudy.database import get_db
from querystudy.schemas.common import PageParams
from querystudy.schemas.member import MemberSearchCondition, MemberTeamDto
from querystudy.services.member_service import member_service
from querystudy.utils.pagination import Page

router: APIRouter = APIRouter()


@router.get("/v1/members", response_model=list[MemberTeamDto])
async def search_members(
    db: Annotated[AsyncSession, Depends(get_db)],
    condition: Annotated[MemberSearchCondition, Depends(get_search_condition)],
) -> list[MemberTeamDto]:
    """조건에 맞는 회원 전체를 조회합니다.

    Search members by the optional condition.
    """
    return await member_service.search_members(db, condition)


@router.get("/v1/members/{member_id}", response_model=MemberTeamDto)
async def get_member(
    member_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MemberTeamDto:
    """회원 한 명을 팀 정보와 함께 조회합니다. 없으면 404."""
    return await member_service.get_member(db, member_id)


@router.get("/v2/members", response_model=Page)
async def search_members_page(
    db: Annotated[AsyncSession, Depends(get_db)],
    condition: Annotated[MemberSearchCondition, Depends(get_search_condition)],
    paging: Annotated[PageParams, Depends(get_page_params)],
) -> Page:
    """회원 검색 결과를 페이지 단위로 조회합니다 (단순 COUNT).

    Paged member search.
    """
    return await member_service.search_members_page(
        db, condition, paging.page, paging.per_page
    )


@router.get("/v3/members", response_model=Page)
async def search_members_page_optimized(
    db: Annotated[AsyncSession, Depends(get_db)],
    condition: Annotated[MemberSearchCondition, Depends(get_search_condition)],
    paging: Annotated[PageParams, Depends(get_page_params)],
) -> Page:
    """회원 검색 결과를 페이지 단위로 조회합니다 (COUNT 분리, 생략 가능).

    Paged member search whose count query may be skipped.
    """
    return await member_service.search_members_page_optimized(
        db, condition, paging.page, paging.per_page
    )

"""페이지네이션 유틸리티 모듈.

Pagination utility module for SQLAlchemy async queries.
Provides page-number pagination (``Page``/``paginate``) for the HTTP layer
and offset/limit results with a total count (``QueryResults``) for the
query layer, plus the count-skipping rule used by the optimised search.
"""

import math
from typing import Any, Awaitable, Callable, Sequence

from pydantic import BaseModel
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession


class Page(BaseModel):
    """페이지네이션 결과 모델.

    Pagination result model for typed responses.

    Attributes:
        items: 현재 페이지 항목 목록 (Items for the current page)
        total: 전체 항목 수 (Total count across all pages)
        page: 현재 페이지 번호 (Current page number, 1-based)
        per_page: 페이지당 항목 수 (Items per page)
        pages: 전체 페이지 수 (Total number of pages)
    """

    items: list[Any]
    total: int
    page: int
    per_page: int
    pages: int  # ceil(total / per_page)

    @classmethod
    def of(cls, items: Sequence[Any], total: int, page: int, per_page: int) -> "Page":
        """항목과 전체 개수로 Page를 만듭니다.

        Build a Page, computing the page count from total and per_page.
        """
        pages: int = math.ceil(total / per_page) if per_page > 0 else 0
        return cls(items=list(items), total=total, page=page, per_page=per_page, pages=pages)


class QueryResults(BaseModel):
    """오프셋/리밋 조회 결과와 전체 개수.

    Offset/limit results together with the total row count of the
    unpaged query.

    Attributes:
        results: 조회된 항목 (Fetched rows)
        total: 페이징 전 전체 개수 (Total count before paging)
        offset: 적용된 오프셋 (Applied offset)
        limit: 적용된 리밋 (Applied limit)
    """

    results: list[Any]
    total: int
    offset: int
    limit: int


def page_offset(page: int, per_page: int) -> int:
    """1부터 시작하는 페이지 번호를 OFFSET으로 변환합니다. 1 미만은 1페이지로 취급.

    Convert a 1-based page number to an OFFSET; pages below 1 are treated
    as the first page.
    """
    return (max(page, 1) - 1) * per_page


async def count_rows(db: AsyncSession, query: Select[Any]) -> int:
    """쿼리 결과 행 수를 서브쿼리 COUNT로 계산합니다.

    Count the rows a query would return by wrapping it in a subquery.
    ORDER BY/LIMIT/OFFSET are stripped first.
    """
    count_query = select(func.count()).select_from(
        query.order_by(None).limit(None).offset(None).subquery()
    )
    return (await db.execute(count_query)).scalar() or 0


async def paginate(
    db: AsyncSession,
    query: Select[Any],
    page: int = 1,
    per_page: int = 20,
    scalars: bool = True,
) -> tuple[Sequence[Any], int]:
    """SQLAlchemy 쿼리에 대한 페이지네이션을 수행합니다.

    Execute a paginated SQLAlchemy query, returning items and total count.
    Runs two queries: one for the total count (via subquery) and one for
    the actual page of results with OFFSET/LIMIT.

    Args:
        db: 비동기 DB 세션 (Async database session)
        query: SQLAlchemy Select 쿼리 (Base query to paginate)
        page: 요청 페이지 번호, 1부터 시작 (Page number, 1-indexed, default: 1;
              values below 1 read as 1)
        per_page: 페이지당 항목 수 (Items per page, default: 20)
        scalars: True면 첫 컬럼만, False면 행 전체 반환
                 (Return first-column scalars when True, whole rows otherwise)

    Returns:
        tuple[Sequence[Any], int]: (항목 목록, 전체 개수) 튜플
    """
    total: int = await count_rows(db, query)

    offset: int = page_offset(page, per_page)
    result = await db.execute(query.offset(offset).limit(per_page))
    items: Sequence[Any] = result.scalars().all() if scalars else result.all()

    return items, total


async def offset_results(
    db: AsyncSession,
    query: Select[Any],
    offset: int,
    limit: int,
) -> QueryResults:
    """오프셋/리밋을 적용한 결과와 전체 개수를 함께 조회합니다.

    Fetch an offset/limit slice of entities together with the total count.
    """
    total: int = await count_rows(db, query)
    result = await db.execute(query.offset(offset).limit(limit))
    return QueryResults(
        results=list(result.scalars().all()),
        total=total,
        offset=offset,
        limit=limit,
    )


async def resolve_total(
    content_size: int,
    offset: int,
    per_page: int,
    count: Callable[[], Awaitable[int]],
) -> int:
    """조회된 페이지로 전체 개수가 확정되면 COUNT 쿼리를 생략합니다.

    Return the total row count, running ``count`` only when the fetched
    page cannot determine it:

    - 첫 페이지가 페이지 크기보다 작으면 그 크기가 전체 개수
      (First page shorter than per_page: its size is the total)
    - 마지막 페이지(비어 있지 않고 페이지 크기보다 작음)면 offset + 크기
      (Non-empty last page shorter than per_page: offset + its size)
    """
    if content_size < per_page:
        if offset == 0:
            return content_size
        if content_size > 0:
            return offset + content_size
    return await count()

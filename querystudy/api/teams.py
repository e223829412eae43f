"""팀 라우터 — 팀 통계 엔드포인트.

Team Router — team statistics endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from querystudy.database import get_db
from querystudy.schemas.team import TeamAverageAge
from querystudy.services.member_service import member_service

router: APIRouter = APIRouter()


@router.get("/v1/teams/average-ages", response_model=list[TeamAverageAge])
async def team_average_ages(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[TeamAverageAge]:
    """팀 이름과 각 팀의 평균 연령을 조회합니다."""
    return await member_service.team_average_ages(db)

"""팀 레포지토리 — 팀 CRUD 및 이름 조회.

Team Repository — CRUD and lookup-by-name queries for teams.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from querystudy.models.team import Team
from querystudy.repositories.base import BaseRepository


class TeamRepository(BaseRepository[Team]):
    """팀 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the teams table.
    """

    def __init__(self) -> None:
        super().__init__(Team)

    async def get_by_name(
        self,
        db: AsyncSession,
        name: str,
    ) -> Team | None:
        """이름으로 팀을 조회합니다.

        Retrieve a team by its name.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            name: 팀 이름 (Team name)

        Returns:
            Team | None: 조회된 팀 또는 None (Found team or None)
        """
        query: Select = select(Team).where(Team.name == name).order_by(Team.id).limit(1)
        result = await db.execute(query)
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
team_repository: TeamRepository = TeamRepository()

"""초기 데이터 시드 스크립트 — local 프로필용 팀 2개, 회원 100명 생성.

Seed script — creates sample teams and members for the ``local`` profile.
Runs on application start-up when ``PROFILE == "local"`` and can be run
by hand.

Usage:
    python -m querystudy.seed

Creates:
    - 2개 팀: teamA, teamB (2 teams)
    - 100명 회원: member0 ~ member99, 나이 = 번호, 짝수는 teamA / 홀수는 teamB
      (100 members: age equals index, even → teamA, odd → teamB)
"""

import asyncio

from sqlalchemy.ext.asyncio import AsyncSession

from querystudy.config import settings
from querystudy.database import async_session, engine, Base
from querystudy.models import Member, Team
from querystudy.repositories.team_repository import team_repository

LOCAL_PROFILE: str = "local"
TEAM_NAMES: tuple[str, str] = ("teamA", "teamB")
MEMBER_COUNT: int = 100


async def seed_members(db: AsyncSession, member_count: int = MEMBER_COUNT) -> list[Member]:
    """팀 2개와 회원을 세션에 저장합니다 (커밋은 호출자 몫).

    Persist both teams and ``member_count`` members into the session and
    flush. Committing is left to the caller.

    Args:
        db: 비동기 데이터베이스 세션 (Async database session)
        member_count: 생성할 회원 수 (Number of members to create)

    Returns:
        list[Member]: 생성된 회원 목록 (Created members, index order)
    """
    team_a: Team = await team_repository.create(db, {"name": TEAM_NAMES[0]})
    team_b: Team = await team_repository.create(db, {"name": TEAM_NAMES[1]})

    members: list[Member] = []
    for i in range(member_count):
        selected_team: Team = team_a if i % 2 == 0 else team_b
        members.append(Member(username=f"member{i}", age=i, team=selected_team))

    db.add_all(members)
    await db.flush()
    return members


async def seed() -> bool:
    """데이터베이스를 초기 데이터로 시드합니다.

    Create tables if they don't exist, then insert the sample data.

    Idempotent: 팀이 이미 있으면 건너뜁니다 (Skips if any team exists).

    Returns:
        bool: 새로 시드했으면 True (True when data was inserted)
    """
    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        if await team_repository.exists(db):
            print("Already seeded. Skipping.")
            return False

        members: list[Member] = await seed_members(db)
        await db.commit()
        print(f"Seeded: teams={len(TEAM_NAMES)}, members={len(members)}")
        return True


async def init_local_data(profile: str | None = None) -> bool:
    """local 프로필일 때만 초기 데이터를 적재합니다.

    Seed sample data only under the ``local`` profile.

    Args:
        profile: 실행 프로필, None이면 설정값 사용 (Profile; defaults to settings.PROFILE)

    Returns:
        bool: 시드가 수행되었으면 True (True when data was inserted)
    """
    active: str = profile if profile is not None else settings.PROFILE
    if active != LOCAL_PROFILE:
        return False
    return await seed()


if __name__ == "__main__":
    asyncio.run(seed())

"""기본 CRUD 레포지토리 및 팀 레포지토리 테스트.

Base CRUD repository and team repository tests.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from querystudy.models import Member, Team
from querystudy.repositories.member_repository import member_repository
from querystudy.repositories.team_repository import team_repository


class TestTeamRepository:
    """팀 레포지토리 테스트."""

    async def test_get_by_name(self, db: AsyncSession, teams):
        """이름으로 팀 조회."""
        team = await team_repository.get_by_name(db, "teamB")
        assert team is teams["teamB"]
        assert await team_repository.get_by_name(db, "teamZ") is None

    async def test_exists(self, db: AsyncSession):
        """팀이 생기면 exists True."""
        assert await team_repository.exists(db) is False
        await team_repository.create(db, {"name": "teamA"})
        assert await team_repository.exists(db) is True
        assert await team_repository.exists(db, {"name": "teamA"}) is True
        assert await team_repository.exists(db, {"name": "teamB"}) is False


class TestBaseRepository:
    """공통 CRUD 테스트 — 회원 레포지토리로 확인."""

    async def test_get_by_id(self, db: AsyncSession, members):
        """ID로 조회."""
        found = await member_repository.get_by_id(db, members[1].id)
        assert found is members[1]
        assert await member_repository.get_by_id(db, 9999) is None

    async def test_get_all_with_filters(self, db: AsyncSession, members, teams):
        """필터와 정렬 — None 필터와 없는 컬럼은 무시."""
        result = await member_repository.get_all(
            db,
            filters={"team_id": teams["teamB"].id, "username": None, "unknown": 1},
            order_by=Member.age.desc(),
        )
        assert [m.username for m in result] == ["member4", "member3"]

    async def test_create_and_count(self, db: AsyncSession, members):
        """생성 후 ID 부여, 개수 증가."""
        created = await member_repository.create(db, {"username": "member5", "age": 50})
        assert created.id is not None
        assert await member_repository.count(db) == 5

    async def test_delete(self, db: AsyncSession, members):
        """삭제 후 조회되지 않음."""
        target_id = members[3].id
        assert await member_repository.delete(db, target_id) is True
        assert await member_repository.get_by_id(db, target_id) is None
        assert await member_repository.delete(db, target_id) is False


class TestModels:
    """엔티티 연관관계 테스트 — 세션 없이 메모리에서 확인."""

    def test_change_team_syncs_both_sides(self):
        """팀 변경 시 양쪽 컬렉션이 함께 갱신됨."""
        team_a = Team(name="teamA")
        team_b = Team(name="teamB")
        member = Member(username="member1", age=10, team=team_a)
        assert member in team_a.members

        member.change_team(team_b)
        assert member.team is team_b
        assert member in team_b.members
        assert member not in team_a.members

    def test_repr_does_not_walk_association(self):
        """repr에는 팀이 포함되지 않음."""
        member = Member(username="member1", age=10, team=Team(name="teamA"))
        assert repr(member) == "Member(id=None, username='member1', age=10)"
        assert repr(Team(name="teamA")) == "Team(id=None, name='teamA')"

"""회원 SQLAlchemy ORM 모델 정의.

Member SQLAlchemy ORM model definition.
A member optionally belongs to one team (many-to-one, lazily loaded).

Tables:
    - members: 회원 (Members, FK team_id -> teams.team_id)
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from querystudy.database import Base
from querystudy.models.team import Team


class Member(Base):
    """회원 모델 — 팀과의 연관관계 주인.

    Member model — owning side of the Member/Team association.

    Attributes:
        id: 회원 식별자 (Surrogate key, column ``member_id``)
        username: 회원 이름, NULL 허용 (Username, nullable)
        age: 나이 (Age, defaults to 0)
        team_id: 소속 팀 FK, 팀 없는 회원 허용 (Team foreign key, nullable)

    Relationships:
        team: 소속 팀 — 지연 로딩 (Owning team, lazy loaded)
    """

    __tablename__ = "members"

    # 회원 식별자 — 컬럼명은 member_id (Surrogate key stored as member_id)
    id: Mapped[int] = mapped_column("member_id", Integer, primary_key=True, autoincrement=True)
    # 회원 이름 — 정렬 테스트를 위해 NULL 허용 (Nullable for nulls-last sorting)
    username: Mapped[str | None] = mapped_column(String(255), nullable=True)
    age: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # 소속 팀 FK — 세타 조인 예제에서는 팀 없는 회원도 존재
    team_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("teams.team_id"), nullable=True, index=True
    )

    # 기본 lazy="select" — 접근 전까지 팀을 로딩하지 않음 (Not loaded until accessed)
    team = relationship("Team", back_populates="members")

    def change_team(self, team: Team) -> None:
        """소속 팀을 변경합니다.

        Move the member to another team. ``back_populates`` keeps
        ``team.members`` in sync on both sides.
        """
        self.team = team

    def __repr__(self) -> str:
        # 팀은 출력하지 않음 — 양방향 연관관계 순환 방지
        return f"Member(id={self.id!r}, username={self.username!r}, age={self.age!r})"

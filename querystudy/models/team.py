"""팀 SQLAlchemy ORM 모델 정의.

Team SQLAlchemy ORM model definition.

Tables:
    - teams: 회원이 소속되는 팀 (Team that members belong to)
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from querystudy.database import Base


class Team(Base):
    """팀 모델 — 회원과 일대다 관계의 주인이 아닌 쪽.

    Team model — inverse (non-owning) side of the one-to-many
    association with Member. The foreign key lives on ``members.team_id``.

    Attributes:
        id: 팀 식별자 (Surrogate key, column ``team_id``)
        name: 팀 이름 (Team name)

    Relationships:
        members: 소속 회원 목록 (Members of this team)
    """

    __tablename__ = "teams"

    # 팀 식별자 — 컬럼명은 team_id (Surrogate key stored as team_id)
    id: Mapped[int] = mapped_column("team_id", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    members = relationship("Member", back_populates="team")

    def __repr__(self) -> str:
        return f"Team(id={self.id!r}, name={self.name!r})"

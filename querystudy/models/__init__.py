"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
relationship resolution.

Modules:
    team: 팀 (Team)
    member: 회원 (Member, many-to-one to Team)
"""

from querystudy.models.team import Team
from querystudy.models.member import Member

__all__ = ["Team", "Member"]

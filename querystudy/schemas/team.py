"""팀 관련 Pydantic 스키마 정의.

Team-related Pydantic schema definitions.
"""

from pydantic import BaseModel


class TeamAverageAge(BaseModel):
    """팀별 평균 나이.

    Team name with the average age of its members.
    """

    team_name: str | None
    average_age: float

"""회원 SQLAlchemy ORM 모델 정의.

Member SQLAlchemy ORM model definition.

Tables:
    - member: 회원 (Member, optionally assigned to one team)
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from querystudy.database import Base
from querystudy.models.team import ID_TYPE, Team


class Member(Base):
    """회원 모델.

    Member model. Belongs to at most one Team. Construction does not persist
    the member; use a repository ``save`` for that.

    Attributes:
        id: 고유 식별자, 컬럼명 member_id (Surrogate integer key, column member_id)
        username: 회원 이름 (Username, nullable)
        age: 나이 (Age)
        team_id: 소속 팀 FK (Team foreign key, nullable)

    Relationships:
        team: 소속 팀 (Assigned team, back-populates Team.members)
    """

    __tablename__ = "member"

    id: Mapped[int] = mapped_column("member_id", ID_TYPE, primary_key=True, autoincrement=True)
    username: Mapped[str | None] = mapped_column(String(255), nullable=True)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    # 팀 FK — 팀 삭제와 무관하게 회원은 유지 (Team does not own members)
    team_id: Mapped[int | None] = mapped_column(ID_TYPE, ForeignKey("team.id"), nullable=True, index=True)

    team = relationship("Team", back_populates="members")

    def __init__(self, username: str | None, age: int, team: Team | None = None) -> None:
        self.username = username
        self.age = age
        if team is not None:
            self.change_team(team)

    def change_team(self, team: Team) -> None:
        """소속 팀을 변경합니다.

        Reassign the member to ``team``. A single assignment on the
        many-to-one side; the back_populates events remove the member from the
        previous team's ``members`` and append it to the new one, so both
        sides agree in memory before any flush.
        """
        self.team = team

    def __repr__(self) -> str:
        return f"Member(id={self.id!r}, username={self.username!r}, age={self.age!r})"

"""팀 SQLAlchemy ORM 모델 정의.

Team SQLAlchemy ORM model definition.

Tables:
    - team: 회원이 소속되는 팀 (Team that members belong to)
"""

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from querystudy.database import Base

# SQLite autoincrement는 INTEGER PRIMARY KEY에서만 동작
# SQLite only autoincrements an INTEGER PRIMARY KEY
ID_TYPE = BigInteger().with_variant(Integer, "sqlite")


class Team(Base):
    """팀 모델.

    Team model. Holds a back-reference collection of its members but does
    not own their lifecycle: deleting a team never deletes members.

    Attributes:
        id: 고유 식별자 (Surrogate integer key)
        name: 팀 이름 (Team name)

    Relationships:
        members: 소속 회원 목록 (Members assigned to this team, back-populates Member.team)
    """

    __tablename__ = "team"

    id: Mapped[int] = mapped_column(ID_TYPE, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    members = relationship("Member", back_populates="team")

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"Team(id={self.id!r}, name={self.name!r})"

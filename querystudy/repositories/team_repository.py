"""팀 레포지토리 — 팀 조회 및 나이 집계 쿼리.

Team Repository — Team lookups and age aggregation queries.
"""

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from querystudy.models.member import Member
from querystudy.models.team import Team
from querystudy.repositories.base import BaseRepository
from querystudy.schemas.member import MemberAgeSummary, TeamAgeStats


class TeamRepository(BaseRepository[Team]):
    """팀 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the team table.
    """

    def __init__(self) -> None:
        super().__init__(Team)

    async def find_by_name(
        self,
        db: AsyncSession,
        name: str,
    ) -> Team | None:
        """이름으로 팀을 조회합니다 (Team with exactly this name, or None)."""
        query: Select = select(Team).where(Team.name == name)
        result = await db.execute(query)
        return result.scalars().first()

    async def get_with_members(
        self,
        db: AsyncSession,
        team_id: int,
    ) -> Team | None:
        """팀과 소속 회원 목록을 함께 조회합니다.

        Retrieve a team with its ``members`` collection eagerly loaded.
        """
        query: Select = (
            select(Team)
            .options(selectinload(Team.members))
            .where(Team.id == team_id)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def age_stats(
        self,
        db: AsyncSession,
        max_age: int | None = None,
    ) -> list[TeamAgeStats]:
        """팀별 평균/최대 나이를 조회합니다.

        Average and maximum member age per team name (inner join, so
        members without a team are left out). When ``max_age`` is given only
        teams whose oldest member is exactly that age are returned.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            max_age: HAVING max(age) = max_age 조건 (Optional HAVING filter)

        Returns:
            list[TeamAgeStats]: 팀 이름 순 통계 (Stats ordered by team name)
        """
        query: Select = (
            select(
                Team.name.label("team_name"),
                func.avg(Member.age).label("avg_age"),
                func.max(Member.age).label("max_age"),
            )
            .select_from(Member)
            .join(Team, Member.team_id == Team.id)
            .group_by(Team.name)
            .order_by(Team.name)
        )
        if max_age is not None:
            query = query.having(func.max(Member.age) == max_age)

        result = await db.execute(query)
        return [TeamAgeStats.model_validate(row) for row in result.all()]

    async def age_summary(self, db: AsyncSession) -> MemberAgeSummary:
        """전체 회원의 나이 집계 (count/max/min/avg/sum over every member)."""
        query: Select = select(
            func.count(Member.id).label("count"),
            func.max(Member.age).label("max"),
            func.min(Member.age).label("min"),
            func.avg(Member.age).label("avg"),
            func.sum(Member.age).label("sum"),
        )
        result = await db.execute(query)
        # Row.count는 튜플 메서드이므로 매핑으로 변환 (Row.count is the tuple method)
        return MemberAgeSummary.model_validate(dict(result.one()._mapping))


# 싱글턴 인스턴스 — Singleton instance
team_repository: TeamRepository = TeamRepository()

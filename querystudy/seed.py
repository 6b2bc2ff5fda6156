"""초기 데이터 시드 스크립트 — 팀 2개와 회원 생성.

Seed script — Creates two teams and a run of members for local querying.

Usage:
    python -m querystudy.seed

Creates:
    - 2개 팀: teamA, teamB (2 teams)
    - SEED_MEMBER_COUNT명 회원: member{i}, 나이 i, 짝수는 teamA / 홀수는 teamB
      (Members member{i} aged i, even i in teamA, odd i in teamB)
"""

import asyncio

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from querystudy.config import settings
from querystudy.database import Base, async_session, engine
from querystudy.models import Member, Team
from querystudy.utils.logging import get_logger

logger = get_logger(__name__)


async def seed(
    db_engine: AsyncEngine | None = None,
    session_factory: async_sessionmaker[AsyncSession] | None = None,
    member_count: int | None = None,
) -> bool:
    """데이터베이스를 초기 데이터로 시드합니다.

    Seed the database with initial data.
    Creates tables if they don't exist, then inserts the teams and members.

    Idempotent: 이미 시드된 경우 건너뜁니다 (Skips if any team exists).

    Args:
        db_engine: 스키마 생성용 엔진 (Engine used for DDL; defaults to the global engine)
        session_factory: 세션 팩토리 (Session factory; defaults to the global factory)
        member_count: 생성할 회원 수 (Members to create; defaults to settings)

    Returns:
        bool: 데이터를 삽입했으면 True (True when data was inserted)
    """
    db_engine = db_engine or engine
    session_factory = session_factory or async_session
    count: int = settings.SEED_MEMBER_COUNT if member_count is None else member_count

    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with db_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with session_factory() as db:
        result = await db.execute(select(Team).limit(1))
        if result.scalar_one_or_none():
            logger.info("already seeded, skipping")
            return False

        team_a: Team = Team("teamA")
        team_b: Team = Team("teamB")
        db.add_all([team_a, team_b])

        for i in range(count):
            selected_team: Team = team_a if i % 2 == 0 else team_b
            db.add(Member(f"member{i}", i, selected_team))

        await db.commit()

    logger.info("seeded 2 teams and %d members", count)
    return True


if __name__ == "__main__":
    asyncio.run(seed())

"""테스트 인프라 — 임시 DB 엔진, 세션, 테스트 데이터 픽스처.

Test infrastructure — Temporary database engine, session, and data fixtures.
Defaults to an in-memory SQLite database (aiosqlite); set TEST_DATABASE_URL
to run against PostgreSQL. The schema is created and dropped per test.
"""

import os
from collections.abc import AsyncGenerator

import pytest_asyncio
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from querystudy.database import Base, engine_options
from querystudy.models import Member, Team

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite://")


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 스키마를 생성하고 종료 시 삭제합니다."""
    options = engine_options(TEST_DATABASE_URL)
    if TEST_DATABASE_URL.startswith("sqlite"):
        # 인메모리 DB는 연결 하나를 공유해야 유지됨 (in-memory DB lives on one connection)
        options["poolclass"] = StaticPool
    eng = create_async_engine(TEST_DATABASE_URL, echo=False, **options)

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await eng.dispose()


@pytest_asyncio.fixture
async def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    async with session_factory() as session:
        yield session
        await session.rollback()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def teams(db: AsyncSession) -> dict[str, Team]:
    """teamA, teamB를 생성합니다."""
    team_a = Team("teamA")
    team_b = Team("teamB")
    db.add_all([team_a, team_b])
    await db.flush()
    return {"teamA": team_a, "teamB": team_b}


@pytest_asyncio.fixture
async def members(db: AsyncSession, teams: dict[str, Team]) -> list[Member]:
    """회원 4명: member1(10)/member2(20)는 teamA, member3(30)/member4(40)는 teamB."""
    result = [
        Member("member1", 10, teams["teamA"]),
        Member("member2", 20, teams["teamA"]),
        Member("member3", 30, teams["teamB"]),
        Member("member4", 40, teams["teamB"]),
    ]
    db.add_all(result)
    await db.flush()
    return result


@pytest_asyncio.fixture
async def thirty_members(db: AsyncSession, teams: dict[str, Team]) -> list[Member]:
    """회원 30명: 나이 1..30, 홀수 나이는 teamA, 짝수 나이는 teamB."""
    result = [
        Member(f"member{age}", age, teams["teamA"] if age % 2 == 1 else teams["teamB"])
        for age in range(1, 31)
    ]
    db.add_all(result)
    await db.flush()
    return result

"""프로젝션 레포지토리 — select 절 구성 예제.

Projection Repository — selecting columns instead of whole entities.
"""

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from querystudy.models.member import Member
from querystudy.schemas.member import MemberResponse, UserResponse


class ProjectionRepository:
    """회원 프로젝션 조회 레포지토리 (Member projection queries, ordered by id)."""

    async def usernames(self, db: AsyncSession) -> list[str | None]:
        """단일 컬럼 프로젝션 (Single-column projection)."""
        query: Select = select(Member.username).order_by(Member.id)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def username_age_tuples(self, db: AsyncSession) -> list[tuple[str | None, int]]:
        """튜플 프로젝션 (Tuple projection of username and age)."""
        query: Select = select(Member.username, Member.age).order_by(Member.id)
        result = await db.execute(query)
        return [tuple(row) for row in result.all()]

    async def member_dtos(self, db: AsyncSession) -> list[MemberResponse]:
        query: Select = select(Member.username, Member.age).order_by(Member.id)
        result = await db.execute(query)
        return [MemberResponse.model_validate(row) for row in result.all()]

    async def user_dtos(self, db: AsyncSession) -> list[UserResponse]:
        """별칭 프로젝션 — username을 name으로 조회 (username selected as name)."""
        query: Select = select(Member.username.label("name"), Member.age).order_by(Member.id)
        result = await db.execute(query)
        return [UserResponse.model_validate(row) for row in result.all()]

    async def user_dtos_with_max_age(self, db: AsyncSession) -> list[UserResponse]:
        """서브쿼리 프로젝션 — 나이 대신 전체 최대 나이를 조회.

        Scalar subquery projection: every row carries the overall maximum
        age in place of the member's own age.
        """
        # 별칭으로 바깥 쿼리와 상관되지 않게 함 (alias keeps the subquery uncorrelated)
        member_sub = aliased(Member)
        max_age = select(func.max(member_sub.age)).scalar_subquery()
        query: Select = (
            select(Member.username.label("name"), max_age.label("age"))
            .order_by(Member.id)
        )
        result = await db.execute(query)
        return [UserResponse.model_validate(row) for row in result.all()]


# 싱글턴 인스턴스 — Singleton instance
projection_repository: ProjectionRepository = ProjectionRepository()

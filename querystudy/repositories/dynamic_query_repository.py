"""동적 쿼리 레포지토리 — 조건 조립 방식 비교.

Dynamic Query Repository — two ways of assembling optional conditions.

- 빌더 방식: 조건을 하나씩 AND로 누적 (Builder style: accumulate with AND)
- where 파라미터 방식: 조건 함수를 where()에 나열, None은 무시
  (Where-parameter style: list condition functions, absent ones dropped)

Here only None counts as absent; an empty username is still compared.
"""

from sqlalchemy import ColumnElement, Select, select, true
from sqlalchemy.ext.asyncio import AsyncSession

from querystudy.models.member import Member
from querystudy.repositories.predicates import age_eq, combine, present
from querystudy.schemas.member import MemberResponse


def username_is(username: str | None) -> ColumnElement[bool] | None:
    if username is not None:
        return Member.username == username
    return None


class DynamicQueryRepository:
    """동적 조건 조립 예제 레포지토리 (Dynamic condition assembly examples)."""

    async def search_member_builder(
        self,
        db: AsyncSession,
        username: str | None,
        age: int | None,
    ) -> list[Member]:
        """조건을 누적 결합하여 회원을 조회합니다.

        Build the where clause incrementally, starting from TRUE and AND-ing
        each supplied condition.
        """
        builder: ColumnElement[bool] = true()
        if username is not None:
            builder = builder & (Member.username == username)
        if age is not None:
            builder = builder & (Member.age == age)

        query: Select = select(Member).where(builder).order_by(Member.id)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def search_member_where_param(
        self,
        db: AsyncSession,
        username: str | None,
        age: int | None,
    ) -> list[Member]:
        """where 파라미터 방식으로 회원을 조회합니다 (Where-parameter style)."""
        query: Select = (
            select(Member)
            .where(*present(username_is(username), age_eq(age)))
            .order_by(Member.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def search_member_where_param_all(
        self,
        db: AsyncSession,
        username: str | None,
        age: int | None,
    ) -> list[Member]:
        """결합된 단일 조건을 재사용하여 회원을 조회합니다.

        Same filter as ``search_member_where_param`` expressed as one combined
        condition, reusable in other queries.
        """
        query: Select = select(Member).where(self.all_eq(username, age)).order_by(Member.id)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def search_member_dto(
        self,
        db: AsyncSession,
        username: str | None,
        age: int | None,
    ) -> list[MemberResponse]:
        """결합 조건을 재사용하여 이름/나이 프로젝션을 조회합니다.

        Reuse the combined condition with a different projection.
        """
        query: Select = (
            select(Member.username, Member.age)
            .where(self.all_eq(username, age))
            .order_by(Member.id)
        )
        result = await db.execute(query)
        return [MemberResponse.model_validate(row) for row in result.all()]

    @staticmethod
    def all_eq(username: str | None, age: int | None) -> ColumnElement[bool]:
        return combine(username_is(username), age_eq(age))


# 싱글턴 인스턴스 — Singleton instance
dynamic_query_repository: DynamicQueryRepository = DynamicQueryRepository()

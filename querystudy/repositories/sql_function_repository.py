"""SQL 함수 레포지토리 — 데이터베이스 함수 호출 예제.

SQL Function Repository — calling database functions through ``func``.
"""

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from querystudy.models.member import Member


class SqlFunctionRepository:
    """SQL 함수 사용 예제 레포지토리 (Examples using SQL functions)."""

    async def replace_username(
        self,
        db: AsyncSession,
        old: str,
        new: str,
    ) -> list[str | None]:
        """회원 이름의 old 문자열을 new로 치환해 조회합니다.

        Select every username with ``old`` replaced by ``new`` via SQL
        ``replace``. Stored rows are unchanged.
        """
        query: Select = select(func.replace(Member.username, old, new)).order_by(Member.id)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def lowercase_usernames(self, db: AsyncSession) -> list[str | None]:
        """이미 소문자인 회원 이름만 조회합니다 (Usernames equal to their lower())."""
        query: Select = (
            select(Member.username)
            .where(Member.username == func.lower(Member.username))
            .order_by(Member.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())


# 싱글턴 인스턴스 — Singleton instance
sql_function_repository: SqlFunctionRepository = SqlFunctionRepository()

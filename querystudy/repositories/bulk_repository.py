"""벌크 연산 레포지토리 — 회원 일괄 수정/삭제.

Bulk Repository — Set-based UPDATE/DELETE statements on members.

These statements run directly against the database and do not touch
entities already loaded in the session (``synchronize_session=False``).
After one runs, previously loaded members are stale. With ``clear=True``
(the default) the session is flushed beforehand and expunged afterwards, so
the next read in the same unit of work loads fresh rows. References the
caller still holds are detached and keep their old values.
"""

from sqlalchemy import Delete, Update, delete, update
from sqlalchemy.ext.asyncio import AsyncSession

from querystudy.models.member import Member
from querystudy.utils.logging import get_logger

logger = get_logger(__name__)


class BulkRepository:
    """회원 테이블 벌크 연산 레포지토리 (Bulk statements against the member table)."""

    async def _execute(
        self,
        db: AsyncSession,
        statement: Update | Delete,
        clear: bool,
    ) -> int:
        # 대기 중인 변경을 먼저 반영 — Push pending changes before the statement
        await db.flush()
        result = await db.execute(
            statement.execution_options(synchronize_session=False)
        )
        if clear:
            # 영속성 컨텍스트 초기화 — Identity map no longer matches the database
            db.expunge_all()
        return result.rowcount

    async def bulk_update_username(
        self,
        db: AsyncSession,
        change_name: str,
        age_lt: int,
        clear: bool = True,
    ) -> int:
        """나이가 age_lt 미만인 회원의 이름을 일괄 변경합니다.

        Set ``username`` to ``change_name`` for every member younger than
        ``age_lt``.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            change_name: 변경할 이름 (New username)
            age_lt: 나이 상한, 미포함 (Exclusive upper age bound)
            clear: 실행 후 세션 초기화 여부 (Expunge the session afterwards)

        Returns:
            int: 변경된 행 수 (Affected row count)
        """
        statement = (
            update(Member)
            .where(Member.age < age_lt)
            .values(username=change_name)
        )
        count: int = await self._execute(db, statement, clear)
        logger.info("bulk username update: %d rows (age < %d)", count, age_lt)
        return count

    async def bulk_add_age(
        self,
        db: AsyncSession,
        add_age: int,
        clear: bool = True,
    ) -> int:
        """모든 회원의 나이에 add_age를 더합니다 (Add ``add_age`` to every member's age)."""
        statement = update(Member).values(age=Member.age + add_age)
        count: int = await self._execute(db, statement, clear)
        logger.info("bulk age increment: %d rows (+%d)", count, add_age)
        return count

    async def bulk_delete(
        self,
        db: AsyncSession,
        age_lt: int,
        clear: bool = True,
    ) -> int:
        """나이가 age_lt 미만인 회원을 일괄 삭제합니다 (Delete members younger than ``age_lt``)."""
        statement = delete(Member).where(Member.age < age_lt)
        count: int = await self._execute(db, statement, clear)
        logger.info("bulk delete: %d rows (age < %d)", count, age_lt)
        return count


# 싱글턴 인스턴스 — Singleton instance
bulk_repository: BulkRepository = BulkRepository()

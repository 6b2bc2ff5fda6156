"""회원 레포지토리 — 회원 조회 및 동적 검색 쿼리.

Member Repository — Member lookups and dynamic search queries.
Extends BaseRepository with username lookups and the member-team search:
Member LEFT OUTER JOIN Team, filtered by the optional predicates from
``predicates``, projected into ``MemberTeamResponse`` rows.
"""

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from querystudy.models.member import Member
from querystudy.models.team import Team
from querystudy.repositories.base import BaseRepository
from querystudy.repositories.predicates import present, search_conditions
from querystudy.schemas.member import MemberSearchCondition, MemberTeamResponse
from querystudy.utils.pagination import Page, PageRequest, build_page


class MemberRepository(BaseRepository[Member]):
    """회원 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the member table.
    """

    def __init__(self) -> None:
        """MemberRepository를 초기화합니다.

        Initialize the MemberRepository with the Member model.
        """
        super().__init__(Member)

    async def find_all(self, db: AsyncSession) -> list[Member]:
        """모든 회원을 ID 순으로 조회합니다 (All members ordered by id)."""
        return list(await self.get_all(db, order_by=Member.id))

    async def find_by_username(
        self,
        db: AsyncSession,
        username: str,
    ) -> list[Member]:
        """회원 이름으로 조회합니다.

        Retrieve members with exactly the given username.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            username: 회원 이름 (Username to match)

        Returns:
            list[Member]: 회원 목록 (Matching members)
        """
        query: Select = select(Member).where(Member.username == username).order_by(Member.id)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_sorted_by_age(
        self,
        db: AsyncSession,
        age: int,
    ) -> list[Member]:
        """특정 나이 회원을 나이 내림차순, 이름 오름차순으로 조회합니다.

        Members of the given age ordered by age descending, then username
        ascending with members lacking a username last.
        """
        query: Select = (
            select(Member)
            .where(Member.age == age)
            .order_by(Member.age.desc(), Member.username.asc().nulls_last())
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    def _member_team_query(self, condition: MemberSearchCondition) -> Select:
        """회원-팀 프로젝션 기본 쿼리 (Base projection query with the left join and filters)."""
        return (
            select(
                Member.id.label("member_id"),
                Member.username,
                Member.age,
                Team.id.label("team_id"),
                Team.name.label("team_name"),
            )
            .select_from(Member)
            .outerjoin(Team, Member.team_id == Team.id)
            .where(*present(*search_conditions(condition)))
        )

    async def search(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
    ) -> list[MemberTeamResponse]:
        """검색 조건으로 회원-팀 목록을 조회합니다.

        Search members left-joined to their team. Absent or blank condition
        fields add no constraint; members without a team are included with
        null team fields.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            condition: 검색 조건 (Search condition)

        Returns:
            list[MemberTeamResponse]: 검색 결과 (Matching rows)
        """
        result = await db.execute(self._member_team_query(condition))
        return [MemberTeamResponse.model_validate(row) for row in result.all()]

    async def search_page(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
        page_request: PageRequest,
    ) -> Page[MemberTeamResponse]:
        """검색 조건으로 회원-팀 페이지를 조회합니다.

        Search one page of members ordered by member id ascending.
        The count query runs only when the total cannot be derived from the
        fetched rows (see ``querystudy.utils.pagination``).

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            condition: 검색 조건 (Search condition)
            page_request: 페이지 요청 (Page request)

        Returns:
            Page[MemberTeamResponse]: 페이지 결과 (Page of rows)
        """
        query: Select = (
            self._member_team_query(condition)
            .order_by(Member.id.asc())
            .offset(page_request.offset)
            .limit(page_request.size)
        )
        result = await db.execute(query)
        items = [MemberTeamResponse.model_validate(row) for row in result.all()]

        async def count() -> int:
            return await self.count(db, condition)

        return await build_page(items, page_request, count)

    async def count(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
    ) -> int:
        """검색 조건에 맞는 회원 수를 조회합니다.

        Count query over the same join and filters as ``search``.
        """
        query: Select = (
            select(func.count(Member.id))
            .select_from(Member)
            .outerjoin(Team, Member.team_id == Team.id)
            .where(*present(*search_conditions(condition)))
        )
        return (await db.execute(query)).scalar() or 0


# 싱글턴 인스턴스 — Singleton instance
member_repository: MemberRepository = MemberRepository()

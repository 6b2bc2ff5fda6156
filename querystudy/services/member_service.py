"""회원 서비스 — 회원/팀 등록, 팀 변경, 검색 비즈니스 로직.

Member Service — Business logic for registering members and teams,
reassigning teams, searching, and bulk maintenance.
The caller owns the session and its transaction; nothing here commits.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from querystudy.models.member import Member
from querystudy.models.team import Team
from querystudy.repositories.bulk_repository import bulk_repository
from querystudy.repositories.member_repository import member_repository
from querystudy.repositories.team_repository import team_repository
from querystudy.schemas.member import MemberSearchCondition, MemberTeamResponse
from querystudy.utils.exceptions import DuplicateError, NotFoundError
from querystudy.utils.logging import get_logger
from querystudy.utils.pagination import Page, PageRequest

logger = get_logger(__name__)


class MemberService:
    """회원 관련 비즈니스 로직을 처리하는 서비스.

    Service handling member and team business logic.
    """

    async def create_team(
        self,
        db: AsyncSession,
        name: str,
    ) -> Team:
        """새 팀을 생성합니다.

        Create a new team.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            name: 팀 이름 (Team name)

        Returns:
            Team: 생성된 팀 (Created team)

        Raises:
            DuplicateError: 같은 이름의 팀이 이미 존재할 때
                            (When a team with the same name already exists)
        """
        if await team_repository.exists(db, {"name": name}):
            raise DuplicateError("A team with this name already exists")
        return await team_repository.save(db, Team(name))

    async def register_member(
        self,
        db: AsyncSession,
        username: str | None,
        age: int,
        team_id: int | None = None,
    ) -> Member:
        """새 회원을 등록합니다.

        Register a new member, optionally assigned to an existing team.

        Raises:
            NotFoundError: 팀을 찾을 수 없을 때 (Team not found)
        """
        team: Team | None = None
        if team_id is not None:
            team = await team_repository.get_with_members(db, team_id)
            if team is None:
                raise NotFoundError("Team not found")
        return await member_repository.save(db, Member(username, age, team))

    async def change_team(
        self,
        db: AsyncSession,
        member_id: int,
        team_id: int,
    ) -> Member:
        """회원의 소속 팀을 변경합니다.

        Move a member to another team. The member, its current team and the
        target team are loaded with their member collections so both sides of
        the relationship are updated in memory by one reassignment.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            member_id: 회원 ID (Member identifier)
            team_id: 새 팀 ID (Target team identifier)

        Returns:
            Member: 팀이 변경된 회원 (Reassigned member)

        Raises:
            NotFoundError: 회원 또는 팀을 찾을 수 없을 때 (Member or team not found)
        """
        member: Member | None = await db.get(
            Member,
            member_id,
            options=[selectinload(Member.team).selectinload(Team.members)],
            populate_existing=True,
        )
        if member is None:
            raise NotFoundError("Member not found")

        team: Team | None = await team_repository.get_with_members(db, team_id)
        if team is None:
            raise NotFoundError("Team not found")

        member.change_team(team)
        await db.flush()
        logger.info("member %d moved to team %d", member_id, team_id)
        return member

    async def search(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
    ) -> list[MemberTeamResponse]:
        """검색 조건으로 회원을 조회합니다 (Search members by condition)."""
        rows: list[MemberTeamResponse] = await member_repository.search(db, condition)
        logger.debug("member search %s -> %d rows", condition.model_dump(exclude_none=True), len(rows))
        return rows

    async def search_page(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
        page: int,
        size: int,
    ) -> Page[MemberTeamResponse]:
        """검색 조건으로 회원 페이지를 조회합니다.

        Search one page of members. The page request is validated before
        any query runs.

        Raises:
            BadRequestError: 잘못된 페이지 요청 (Invalid page or size)
        """
        page_request: PageRequest = PageRequest.of(page, size)
        result: Page[MemberTeamResponse] = await member_repository.search_page(
            db, condition, page_request
        )
        logger.debug(
            "member page %d/%d (size %d, total %d)",
            result.page, result.pages, result.per_page, result.total,
        )
        return result

    async def rename_younger_than(
        self,
        db: AsyncSession,
        change_name: str,
        age_lt: int,
    ) -> int:
        """나이 조건 회원 이름 일괄 변경 (Bulk rename members younger than ``age_lt``)."""
        return await bulk_repository.bulk_update_username(db, change_name, age_lt)

    async def add_age_to_all(self, db: AsyncSession, add_age: int) -> int:
        return await bulk_repository.bulk_add_age(db, add_age)

    async def delete_younger_than(self, db: AsyncSession, age_lt: int) -> int:
        return await bulk_repository.bulk_delete(db, age_lt)


# 싱글턴 인스턴스 — Singleton instance
member_service: MemberService = MemberService()

"""회원 서비스 테스트.

Member service tests — registration, team reassignment, validated paged
search, and bulk maintenance through the service.
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from querystudy.repositories.member_repository import member_repository
from querystudy.schemas.member import MemberSearchCondition
from querystudy.services.member_service import member_service
from querystudy.utils.exceptions import BadRequestError, DuplicateError, NotFoundError


class TestRegistration:
    """회원/팀 등록."""

    async def test_create_team(self, db: AsyncSession):
        team = await member_service.create_team(db, "teamC")
        assert team.id is not None
        assert team.name == "teamC"

    async def test_create_duplicate_team(self, db: AsyncSession, teams):
        with pytest.raises(DuplicateError):
            await member_service.create_team(db, "teamA")

    async def test_register_member_with_team(self, db: AsyncSession, teams):
        member = await member_service.register_member(db, "newbie", 21, teams["teamB"].id)
        assert member.id is not None
        assert member.team_id == teams["teamB"].id
        rows = await member_service.search(db, MemberSearchCondition(username="newbie"))
        assert rows[0].team_name == "teamB"

    async def test_register_member_without_team(self, db: AsyncSession):
        member = await member_service.register_member(db, "solo", 33)
        rows = await member_service.search(db, MemberSearchCondition(username="solo"))
        assert rows[0].member_id == member.id
        assert rows[0].team_id is None

    async def test_register_member_unknown_team(self, db: AsyncSession):
        with pytest.raises(NotFoundError):
            await member_service.register_member(db, "lost", 1, team_id=999)


class TestChangeTeam:
    """팀 변경."""

    async def test_change_team(self, db: AsyncSession, members, teams):
        member = await member_service.change_team(db, members[0].id, teams["teamB"].id)
        assert member.team is teams["teamB"]
        assert member in teams["teamB"].members
        assert member not in teams["teamA"].members

        rows = await member_service.search(db, MemberSearchCondition(team_name="teamB"))
        assert sorted(r.username for r in rows) == ["member1", "member3", "member4"]

    async def test_change_team_from_none(self, db: AsyncSession, teams):
        member = await member_service.register_member(db, "solo", 33)
        moved = await member_service.change_team(db, member.id, teams["teamA"].id)
        assert moved.team_id == teams["teamA"].id

    async def test_change_team_unknown_member(self, db: AsyncSession, teams):
        with pytest.raises(NotFoundError, match="Member"):
            await member_service.change_team(db, 999, teams["teamA"].id)

    async def test_change_team_unknown_team(self, db: AsyncSession, members):
        with pytest.raises(NotFoundError, match="Team"):
            await member_service.change_team(db, members[0].id, 999)


class TestSearchPage:
    """서비스 페이지 검색."""

    async def test_search_page(self, db: AsyncSession, thirty_members):
        page = await member_service.search_page(db, MemberSearchCondition(age_goe=1, age_loe=15), 0, 5)
        assert [r.age for r in page.items] == [1, 2, 3, 4, 5]
        assert page.pages == 3

    @pytest.mark.parametrize("page,size", [(-1, 5), (0, 0), (0, -1)])
    async def test_invalid_page_fails_before_query(self, page, size):
        """잘못된 페이지 요청은 쿼리 실행 전에 거부."""
        db = AsyncMock()
        with pytest.raises(BadRequestError):
            await member_service.search_page(db, MemberSearchCondition(), page, size)
        db.execute.assert_not_called()


class TestBulkThroughService:
    """서비스를 통한 벌크 연산."""

    async def test_rename_younger_than(self, db: AsyncSession, members):
        assert await member_service.rename_younger_than(db, "junior", 28) == 2
        rows = await member_service.search(db, MemberSearchCondition(username="junior"))
        assert sorted(r.age for r in rows) == [10, 20]

    async def test_add_age_to_all(self, db: AsyncSession, members):
        assert await member_service.add_age_to_all(db, 5) == 4
        assert [m.age for m in await member_repository.find_all(db)] == [15, 25, 35, 45]

    async def test_delete_younger_than(self, db: AsyncSession, members):
        assert await member_service.delete_younger_than(db, 35) == 3
        assert [m.username for m in await member_repository.find_all(db)] == ["member4"]

"""검색 조건식 유닛 테스트.

Predicate composer unit tests — absent/present handling and composition.
"""

from sqlalchemy import select

from querystudy.models import Member
from querystudy.repositories.predicates import (
    age_goe,
    age_loe,
    combine,
    has_text,
    present,
    search_conditions,
    team_name_eq,
    username_eq,
)
from querystudy.schemas.member import MemberSearchCondition


def sql(expr) -> str:
    return str(expr.compile(compile_kwargs={"literal_binds": True}))


class TestHasText:
    """문자열 유효성 판단."""

    def test_blank_values(self):
        assert has_text(None) is False
        assert has_text("") is False
        assert has_text("   ") is False
        assert has_text("\t\n") is False

    def test_text(self):
        assert has_text("member1") is True
        assert has_text(" a ") is True


class TestConditions:
    """개별 조건 함수."""

    def test_username_eq(self):
        assert sql(username_eq("member1")) == "member.username = 'member1'"

    def test_username_blank_is_absent(self):
        assert username_eq(None) is None
        assert username_eq("") is None
        assert username_eq("  ") is None

    def test_team_name_eq(self):
        assert sql(team_name_eq("teamB")) == "team.name = 'teamB'"
        assert team_name_eq(" ") is None

    def test_age_bounds_inclusive(self):
        assert sql(age_goe(35)) == "member.age >= 35"
        assert sql(age_loe(40)) == "member.age <= 40"

    def test_age_zero_is_present(self):
        assert age_goe(0) is not None
        assert age_loe(0) is not None

    def test_age_none_is_absent(self):
        assert age_goe(None) is None
        assert age_loe(None) is None


class TestCombine:
    """조건 결합."""

    def test_present_drops_absent(self):
        conditions = present(username_eq(""), age_goe(10), None, age_loe(None))
        assert len(conditions) == 1
        assert sql(conditions[0]) == "member.age >= 10"

    def test_combine_all_present(self):
        expr = combine(age_goe(10), age_loe(20))
        assert sql(expr) == "member.age >= 10 AND member.age <= 20"

    def test_combine_skips_absent(self):
        expr = combine(None, age_goe(10), username_eq("  "))
        assert sql(expr) == "member.age >= 10"

    def test_combine_nothing_matches_all(self):
        query = select(Member.id).where(combine(None, None))
        compiled = sql(query)
        assert "member.age" not in compiled
        assert "member.username" not in compiled


class TestSearchConditions:
    """검색 조건 객체 변환."""

    def test_empty_condition(self):
        assert present(*search_conditions(MemberSearchCondition())) == []

    def test_order_and_values(self):
        condition = MemberSearchCondition(
            username="member1", team_name="teamA", age_goe=10, age_loe=20
        )
        compiled = [sql(c) for c in search_conditions(condition)]
        assert compiled == [
            "member.username = 'member1'",
            "team.name = 'teamA'",
            "member.age >= 10",
            "member.age <= 20",
        ]

    def test_blank_strings_equal_absent(self):
        blank = MemberSearchCondition(username=" ", team_name="", age_goe=30)
        absent = MemberSearchCondition(age_goe=30)
        assert [sql(c) for c in present(*search_conditions(blank))] == [
            sql(c) for c in present(*search_conditions(absent))
        ]

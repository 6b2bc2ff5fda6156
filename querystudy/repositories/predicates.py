"""회원 검색 조건식 — 재사용 가능한 where 조건 함수 모음.

Member search predicates — reusable where-clause building blocks.
Each function returns a SQLAlchemy boolean expression, or None when its input
is absent. None contributes no constraint: ``present`` and ``combine``
skip it. Because each condition is a standalone value, any
subset can be reused by other queries (list, page, count, projections).

Usage:
    query = select(Member).where(*present(username_eq(name), age_goe(20)))
"""

from sqlalchemy import ColumnElement, and_, true

from querystudy.models.member import Member
from querystudy.models.team import Team
from querystudy.schemas.member import MemberSearchCondition

Condition = ColumnElement[bool] | None


def has_text(value: str | None) -> bool:
    """None, 빈 문자열, 공백 문자열이 아니면 True (True unless None, empty or whitespace-only)."""
    return value is not None and value.strip() != ""


def username_eq(username: str | None) -> Condition:
    """회원 이름 일치 조건. 빈 값이면 None (Exact username match; None when blank)."""
    if has_text(username):
        return Member.username == username
    return None


def team_name_eq(team_name: str | None) -> Condition:
    """팀 이름 일치 조건. Team 조인이 필요합니다 (Exact team name match; requires the Team join)."""
    if has_text(team_name):
        return Team.name == team_name
    return None


def age_goe(age: int | None) -> Condition:
    """나이 하한 조건, 경계 포함 (Inclusive lower age bound)."""
    if age is not None:
        return Member.age >= age
    return None


def age_loe(age: int | None) -> Condition:
    """나이 상한 조건, 경계 포함 (Inclusive upper age bound)."""
    if age is not None:
        return Member.age <= age
    return None


def age_eq(age: int | None) -> Condition:
    if age is not None:
        return Member.age == age
    return None


def present(*conditions: Condition) -> list[ColumnElement[bool]]:
    """None이 아닌 조건만 남깁니다 (Drop absent conditions)."""
    return [condition for condition in conditions if condition is not None]


def combine(*conditions: Condition) -> ColumnElement[bool]:
    """존재하는 조건을 AND로 결합합니다.

    AND together every present condition. With nothing present the result
    is SQL TRUE, which matches every row.
    """
    return and_(true(), *present(*conditions))


def search_conditions(condition: MemberSearchCondition) -> tuple[Condition, ...]:
    """검색 조건 객체를 개별 조건식으로 변환합니다.

    Translate a search condition into its four independent predicates, in
    the order username, team name, lower age bound, upper age bound.
    """
    return (
        username_eq(condition.username),
        team_name_eq(condition.team_name),
        age_goe(condition.age_goe),
        age_loe(condition.age_loe),
    )

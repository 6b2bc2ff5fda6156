"""회원 검색/프로젝션 Pydantic 스키마 정의.

Member search and projection Pydantic schema definitions.
Includes the search condition, the flat member-team projection row, and the
smaller projections used by the projection and aggregation queries.
"""

from pydantic import BaseModel, ConfigDict


class MemberSearchCondition(BaseModel):
    """회원 검색 조건 스키마.

    Member search condition. Every field is optional; an absent (None) or
    blank field adds no constraint.

    Attributes:
        username: 회원 이름 일치 (Exact username match)
        team_name: 팀 이름 일치 (Exact team name match)
        age_goe: 최소 나이, 포함 (Inclusive lower age bound)
        age_loe: 최대 나이, 포함 (Inclusive upper age bound)
    """

    username: str | None = None
    team_name: str | None = None
    age_goe: int | None = None
    age_loe: int | None = None


class MemberTeamResponse(BaseModel):
    """회원-팀 평면 프로젝션 스키마.

    Flat projection of a member left-joined to its team.
    Team fields are None for members without a team.

    Attributes:
        member_id: 회원 ID (Member identifier)
        username: 회원 이름 (Username, nullable)
        age: 나이 (Age)
        team_id: 팀 ID (Team identifier, nullable)
        team_name: 팀 이름 (Team name, nullable)
    """

    model_config = ConfigDict(from_attributes=True)

    member_id: int
    username: str | None
    age: int
    team_id: int | None = None
    team_name: str | None = None


class MemberResponse(BaseModel):
    """회원 이름/나이 프로젝션 스키마 (Username and age projection)."""

    model_config = ConfigDict(from_attributes=True)

    username: str | None
    age: int


class UserResponse(BaseModel):
    """별칭 프로젝션 스키마 — username 컬럼을 name으로 조회.

    Alias projection: the username column is selected as ``name``.
    """

    model_config = ConfigDict(from_attributes=True)

    name: str | None
    age: int


class TeamAgeStats(BaseModel):
    """팀별 나이 통계 스키마 (Per-team age statistics)."""

    model_config = ConfigDict(from_attributes=True)

    team_name: str
    avg_age: float
    max_age: int


class MemberAgeSummary(BaseModel):
    """전체 회원 나이 집계 스키마 (Aggregates over all member ages)."""

    model_config = ConfigDict(from_attributes=True)

    count: int
    max: int | None
    min: int | None
    avg: float | None
    sum: int | None

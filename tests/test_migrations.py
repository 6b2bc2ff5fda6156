"""마이그레이션 테스트.

Migration tests — the team/member revision applied and reverted on an
in-memory SQLite database through Alembic's operations context.
"""

import importlib.util
from pathlib import Path

import pytest
from alembic.migration import MigrationContext
from alembic.operations import Operations
from sqlalchemy import create_engine, inspect

MIGRATION = (
    Path(__file__).resolve().parent.parent
    / "alembic" / "versions" / "7c3e9f1b2d84_create_team_and_member.py"
)


@pytest.fixture
def migration():
    spec = importlib.util.spec_from_file_location("create_team_and_member", MIGRATION)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def connection():
    eng = create_engine("sqlite://")
    with eng.begin() as conn:
        yield conn
    eng.dispose()


def run(connection, step) -> None:
    ctx = MigrationContext.configure(connection)
    with Operations.context(ctx):
        step()


class TestCreateTeamAndMember:
    """team/member 테이블 생성 리비전."""

    def test_revision_is_root(self, migration):
        assert migration.revision == "7c3e9f1b2d84"
        assert migration.down_revision is None

    def test_upgrade_creates_tables(self, migration, connection):
        run(connection, migration.upgrade)

        inspector = inspect(connection)
        assert set(inspector.get_table_names()) == {"team", "member"}
        columns = {c["name"]: c for c in inspector.get_columns("member")}
        assert set(columns) == {"member_id", "username", "age", "team_id"}
        assert columns["username"]["nullable"] is True
        assert columns["team_id"]["nullable"] is True
        assert [fk["referred_table"] for fk in inspector.get_foreign_keys("member")] == ["team"]
        assert [ix["name"] for ix in inspector.get_indexes("member")] == ["ix_member_team_id"]

    def test_downgrade_drops_tables(self, migration, connection):
        run(connection, migration.upgrade)
        run(connection, migration.downgrade)
        assert inspect(connection).get_table_names() == []

import importlib.util
from pathlib import Path

import pytest
from alembic.operations import Operations
from alembic.runtime.migration import MigrationContext
from sqlalchemy import inspect
from sqlalchemy.pool import StaticPool

from travelhub.core.database import Base, create_db_engine, init_schema, session_scope
from travelhub.models import models  # noqa: F401
from travelhub.seed.data import build_seed_plan
from travelhub.seed.loader import SeedLoader

MIGRATION = Path(__file__).resolve().parents[1] / "alembic" / "versions" / "001_initial_schema.py"


def _load_migration():
    spec = importlib.util.spec_from_file_location("initial_schema", MIGRATION)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _apply(engine, fn):
    with engine.begin() as conn:
        with Operations.context(MigrationContext.configure(conn)):
            fn()


@pytest.fixture
def migrated_engine():
    engine = create_db_engine("sqlite://", poolclass=StaticPool)
    migration = _load_migration()
    _apply(engine, migration.upgrade)
    yield engine, migration
    engine.dispose()


def test_upgrade_creates_model_tables(migrated_engine):
    engine, _ = migrated_engine
    inspector = inspect(engine)
    assert set(inspector.get_table_names()) == set(Base.metadata.tables)

    for name, table in Base.metadata.tables.items():
        columns = {c["name"] for c in inspector.get_columns(name)}
        assert columns == set(table.columns.keys()), name


def _constraints(engine, table):
    inspector = inspect(engine)
    return {
        "unique": sorted(
            (c["name"], tuple(c["column_names"])) for c in inspector.get_unique_constraints(table)
        ),
        "check": sorted(c["name"] for c in inspector.get_check_constraints(table)),
        "foreign_keys": sorted(
            (tuple(fk["constrained_columns"]), fk["referred_table"], tuple(fk["referred_columns"]))
            for fk in inspector.get_foreign_keys(table)
        ),
        "indexes": sorted(
            (ix["name"], bool(ix["unique"]), tuple(ix["column_names"]))
            for ix in inspector.get_indexes(table)
        ),
    }


def test_upgrade_matches_model_constraints(migrated_engine):
    engine, _ = migrated_engine
    reference = create_db_engine("sqlite://", poolclass=StaticPool)
    init_schema(reference)
    try:
        for name in Base.metadata.tables:
            assert _constraints(engine, name) == _constraints(reference, name), name
    finally:
        reference.dispose()


def test_upgrade_creates_named_constraints(migrated_engine):
    engine, _ = migrated_engine
    inspector = inspect(engine)

    assert [c["name"] for c in inspector.get_unique_constraints("oauth_accounts")] == [
        "uq_oauth_provider_user"
    ]
    assert [c["name"] for c in inspector.get_check_constraints("users")] == [
        "ck_users_consent_timestamp"
    ]
    assert [c["name"] for c in inspector.get_check_constraints("booking_items")] == [
        "ck_booking_items_detail_ref"
    ]
    assert {fk["referred_table"] for fk in inspector.get_foreign_keys("booking_items")} == {
        "bookings", "flight_bookings", "hotel_bookings"
    }


def test_sample_data_loads_into_migrated_schema(migrated_engine):
    engine, _ = migrated_engine
    with session_scope(engine) as db:
        report = SeedLoader(db, build_seed_plan(), echo=None).run()
    assert report.total() == 20


def test_downgrade_drops_everything(migrated_engine):
    engine, migration = migrated_engine
    _apply(engine, migration.downgrade)
    assert inspect(engine).get_table_names() == []

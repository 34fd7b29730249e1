import pytest
from sqlalchemy import event
from sqlalchemy.pool import StaticPool

from travelhub.core.database import create_db_engine, init_schema, session_scope
from travelhub.seed.data import build_seed_plan
from travelhub.seed.loader import SeedLoader


def enable_sqlite_foreign_keys(engine):
    @event.listens_for(engine, "connect")
    def _fk_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://", poolclass=StaticPool)
    enable_sqlite_foreign_keys(engine)
    init_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    with session_scope(engine) as session:
        yield session


@pytest.fixture
def seeded(db):
    """Database session with the sample data loaded, plus the run's report."""
    lines = []
    report = SeedLoader(db, build_seed_plan(), echo=lines.append).run()
    return db, report, lines

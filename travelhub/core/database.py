from contextlib import contextmanager
from datetime import datetime, timezone

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

Base = declarative_base()


def utcnow() -> datetime:
    """Naive UTC timestamp, matching the DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def create_db_engine(database_url: str, echo: bool = False, **overrides):
    engine_args = {
        "pool_pre_ping": True,
        "echo": echo,
    }

    if database_url.startswith("sqlite"):
        engine_args["connect_args"] = {"check_same_thread": False}
    else:
        engine_args["pool_size"] = 5
        engine_args["max_overflow"] = 10
        if "supabase" in database_url:
            engine_args["connect_args"] = {"sslmode": "require"}

    engine_args.update(overrides)
    return create_engine(database_url, **engine_args)


def init_schema(engine) -> None:
    # models must be imported so their tables are registered on Base
    from travelhub.models import models  # noqa: F401

    Base.metadata.create_all(bind=engine)


@contextmanager
def session_scope(engine):
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

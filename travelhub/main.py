"""
Seed the GlobalTravelHub database with sample data.

Usage: python -m travelhub.main   (or the ``travelhub-seed`` console script)
"""
import sys
import traceback

from travelhub.core.config import get_settings
from travelhub.core.database import create_db_engine, init_schema, session_scope
from travelhub.seed.data import build_seed_plan
from travelhub.seed.loader import SeedLoader


def main() -> int:
    engine = None

    try:
        settings = get_settings()
        engine = create_db_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)

        if settings.SEED_CREATE_SCHEMA:
            init_schema(engine)

        with session_scope(engine) as db:
            loader = SeedLoader(db, build_seed_plan(), atomic=settings.SEED_ATOMIC)
            report = loader.run()

        print(f"Created {report.total()} rows across {len(report.created)} tables")
        return 0

    except Exception as e:
        print(f"❌ Seeding failed: {e}", file=sys.stderr)
        traceback.print_exc()
        return 1
    finally:
        if engine is not None:
            engine.dispose()


if __name__ == "__main__":
    sys.exit(main())

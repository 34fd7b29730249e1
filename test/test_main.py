import pytest

from travelhub.core.config import get_settings
from travelhub.main import main


@pytest.fixture
def sqlite_settings(tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'seed.db'}")
    monkeypatch.setenv("SEED_CREATE_SCHEMA", "true")
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


def test_settings_read_from_environment(sqlite_settings):
    assert sqlite_settings.DATABASE_URL.startswith("sqlite:///")
    assert sqlite_settings.SEED_CREATE_SCHEMA is True
    assert sqlite_settings.SEED_ATOMIC is True


def test_main_seeds_empty_database(sqlite_settings, capsys):
    assert main() == 0

    out = capsys.readouterr().out
    assert out.startswith("Start seeding...")
    assert "Seeding finished." in out
    assert "Created 20 rows across 11 tables" in out


def test_main_fails_when_run_twice(sqlite_settings, capsys):
    assert main() == 0
    capsys.readouterr()

    assert main() == 1
    err = capsys.readouterr().err
    assert "constraint_violation" in err
    assert "UNIQUE constraint failed: users." in err


def test_main_reports_unreachable_database(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'missing' / 'seed.db'}")
    monkeypatch.setenv("SEED_CREATE_SCHEMA", "false")
    get_settings.cache_clear()
    try:
        assert main() == 1
    finally:
        get_settings.cache_clear()

    err = capsys.readouterr().err
    assert "Seeding failed" in err
    assert "connectivity" in err


def test_main_returns_1_on_invalid_setting(monkeypatch, capsys):
    monkeypatch.setenv("SEED_ATOMIC", "maybe")
    get_settings.cache_clear()
    try:
        assert main() == 1
    finally:
        get_settings.cache_clear()

    err = capsys.readouterr().err
    assert "Seeding failed" in err
    assert "SEED_ATOMIC" in err


def test_main_returns_1_on_malformed_database_url(monkeypatch, capsys):
    monkeypatch.setenv("DATABASE_URL", "not a database url")
    get_settings.cache_clear()
    try:
        assert main() == 1
    finally:
        get_settings.cache_clear()

    assert "Seeding failed" in capsys.readouterr().err

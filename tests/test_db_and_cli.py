import sqlite3

from social_media_api.app.core import db as db_module
from social_media_api.app.core.config import settings
from social_media_api.app.repositories.account_repository import AccountRepository
from social_media_api.app.repositories.message_repository import MessageRepository
from social_media_api.cli import main


def table_names(path):
    conn = sqlite3.connect(path)
    try:
        rows = conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'").fetchall()
        return {row[0] for row in rows}
    finally:
        conn.close()


def test_init_db_creates_tables_and_records_version(db):
    assert {"account", "message", "migrations"} <= table_names(db)
    conn = sqlite3.connect(db)
    try:
        version = conn.execute("SELECT MAX(version) FROM migrations").fetchone()[0]
    finally:
        conn.close()
    assert version == db_module.MIGRATIONS[-1][0]


def test_init_db_is_idempotent(db):
    AccountRepository.create("bob", "pass1")

    db_module.init_db()

    assert AccountRepository.get_by_username("bob") is not None


def test_reset_db_clears_data_and_restarts_ids(db):
    account = AccountRepository.create("bob", "pass1")
    MessageRepository.create(account.account_id, "hi", 1)

    db_module.reset_db()

    assert MessageRepository.list_all() == []
    assert AccountRepository.get_by_id(account.account_id) is None
    assert AccountRepository.create("alice", "pass1").account_id == 1


def test_relative_database_path_resolves_inside_package(monkeypatch):
    monkeypatch.setattr(settings, "database_url", "relative.db")

    path = db_module.get_database_path()

    assert path.endswith("social_media_api/relative.db")


def test_cli_init_db(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(settings, "database_url", settings.database_url)
    target = tmp_path / "cli.db"

    assert main(["init-db", "--db", str(target)]) == 0

    assert "Database ready" in capsys.readouterr().out
    assert {"account", "message"} <= table_names(target)


def test_cli_init_db_reset(db, monkeypatch, capsys):
    monkeypatch.setattr(settings, "database_url", settings.database_url)
    AccountRepository.create("bob", "pass1")

    assert main(["init-db", "--db", str(db), "--reset"]) == 0

    assert "Database reset" in capsys.readouterr().out
    assert AccountRepository.get_by_username("bob") is None

import logging

from social_media_api.app.core.logging_config import setup_logging


def test_setup_logging_adds_console_and_file_handlers(tmp_path, monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    logfile = tmp_path / "api.log"

    setup_logging("debug", str(logfile))
    try:
        assert root.level == logging.DEBUG
        assert [type(h) for h in root.handlers] == [logging.StreamHandler, logging.FileHandler]

        logging.getLogger("social_media_api.test").info("Registration rejected: username is empty")
        root.handlers[1].flush()
        assert "[INFO] social_media_api.test: Registration rejected: username is empty" in logfile.read_text()
    finally:
        for handler in root.handlers:
            handler.close()


def test_setup_logging_runs_once(monkeypatch):
    root = logging.getLogger()
    existing = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [existing])

    setup_logging("DEBUG")

    assert root.handlers == [existing]


def test_unknown_level_falls_back_to_info(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    setup_logging("chatty")

    assert root.level == logging.INFO

import logging
from pathlib import Path

from quizgen import config

ROOT = Path(__file__).resolve().parent


def test_log_level_accepts_known_names(monkeypatch):
    monkeypatch.setenv("QUIZ_LOG_LEVEL", " debug ")
    assert config._level_env("QUIZ_LOG_LEVEL") == "DEBUG"


def test_log_level_typo_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("QUIZ_LOG_LEVEL", "verbose")
    with caplog.at_level(logging.WARNING, logger="quizgen.config"):
        assert config._level_env("QUIZ_LOG_LEVEL") == "INFO"
    assert "not a logging level" in caplog.text


def test_log_level_unset(monkeypatch):
    monkeypatch.delenv("QUIZ_LOG_LEVEL", raising=False)
    assert config._level_env("QUIZ_LOG_LEVEL", "WARNING") == "WARNING"


def test_int_setting_falls_back(monkeypatch):
    monkeypatch.setenv("QUIZ_HTTP_TIMEOUT", "soon")
    assert config._int_env("QUIZ_HTTP_TIMEOUT", 15) == 15
    monkeypatch.setenv("QUIZ_HTTP_TIMEOUT", "0")
    assert config._int_env("QUIZ_HTTP_TIMEOUT", 15) == 15


def test_default_csv_source_does_not_depend_on_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = Path(config.DEFAULT_CSV_SOURCE)
    assert path.is_absolute()
    assert path.is_file()


def test_env_example_leaves_csv_source_at_default():
    lines = (ROOT / ".env.example").read_text(encoding="utf-8").splitlines()
    active = [line for line in lines if line.strip() and not line.lstrip().startswith("#")]
    assert not any(line.startswith("QUIZ_CSV_SOURCE=") for line in active)
    assert "QUIZ_LOG_LEVEL=INFO" in active

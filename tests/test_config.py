from oklab_mixer.config import LOG_LEVEL_ENV, default_log_level


def test_log_level_from_env(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    assert default_log_level() == "DEBUG"


def test_log_level_default(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    assert default_log_level() == "WARNING"

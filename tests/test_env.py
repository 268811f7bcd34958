"""Tests for prd_kanban.utils.env."""

from prd_kanban.utils.env import (
    API_KEY_ENV,
    CORS_ORIGINS_ENV,
    get_api_key,
    get_cors_origins,
    load_env,
)


class TestCorsOrigins:
    def test_defaults_to_all(self):
        assert get_cors_origins() == ["*"]

    def test_splits_and_trims(self, monkeypatch):
        monkeypatch.setenv(CORS_ORIGINS_ENV, "http://a.test, http://b.test ,")
        assert get_cors_origins() == ["http://a.test", "http://b.test"]

    def test_blank_value_falls_back_to_all(self, monkeypatch):
        monkeypatch.setenv(CORS_ORIGINS_ENV, " , ")
        assert get_cors_origins() == ["*"]


class TestApiKey:
    def test_unset_disables_auth(self):
        assert get_api_key() is None

    def test_empty_disables_auth(self, monkeypatch):
        monkeypatch.setenv(API_KEY_ENV, "")
        assert get_api_key() is None

    def test_change_is_seen_on_next_call(self, monkeypatch):
        monkeypatch.setenv(API_KEY_ENV, "one")
        assert get_api_key() == "one"
        monkeypatch.setenv(API_KEY_ENV, "two")
        assert get_api_key() == "two"


class TestLoadEnv:
    def test_loads_dotenv_from_cwd(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text(f"{API_KEY_ENV}=from-file\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        # Register the variable so the value load_dotenv writes is undone after the test
        monkeypatch.setenv(API_KEY_ENV, "")
        monkeypatch.delenv(API_KEY_ENV)
        assert load_env() == tmp_path / ".env"
        assert get_api_key() == "from-file"

    def test_no_dotenv_returns_none(self, tmp_path, monkeypatch):
        workdir = tmp_path / "a" / "b"
        workdir.mkdir(parents=True)
        monkeypatch.chdir(workdir)
        assert load_env() is None

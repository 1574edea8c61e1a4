"""Tests de los settings y del .env de usuario."""

from core.config import DEFAULT_BASE_URL, SANDBOX_BASE_URL, AppSettings, write_user_env_vars


class TestAppSettings:
    def test_defaults(self):
        settings = AppSettings(_env_file=None)
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.resolve_base_url(sandbox=True) == SANDBOX_BASE_URL
        assert settings.proxy_configuration().is_active is False

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("SMARTLING_API_KEY", "from-env")
        monkeypatch.setenv("SMARTLING_PROXY_HOST", "proxy.local")
        monkeypatch.setenv("SMARTLING_PROXY_PORT", "3128")

        settings = AppSettings(_env_file=None)

        assert settings.api_key == "from-env"
        proxy = settings.proxy_configuration()
        assert proxy.is_active is True
        assert (proxy.host, proxy.port) == ("proxy.local", 3128)
        assert proxy.has_credentials is False

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("SMARTLING_PROJECT_ID=abc123\n", encoding="utf-8")

        assert AppSettings(_env_file=env_file).project_id == "abc123"


class TestWriteUserEnvVars:
    def test_merges_and_skips_none(self, tmp_path):
        env_path = tmp_path / "cfg" / ".env"
        env_path.parent.mkdir()
        env_path.write_text('SMARTLING_API_KEY="old"\nSMARTLING_PROJECT_ID=p1\n', encoding="utf-8")

        write_user_env_vars({"SMARTLING_API_KEY": "new", "SMARTLING_PROXY_HOST": None}, env_path=env_path)

        lines = env_path.read_text(encoding="utf-8").splitlines()
        assert "SMARTLING_API_KEY=new" in lines
        assert "SMARTLING_PROJECT_ID=p1" in lines
        assert not any(line.startswith("SMARTLING_PROXY_HOST") for line in lines)

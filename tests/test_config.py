import pytest

from config.base import _coerce_bool, _coerce_int
from config.validation import validate_and_exit, validate_environment


class TestCoercion:
    """Test environment value parsing"""

    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_truthy(self, value):
        assert _coerce_bool(value) is True

    @pytest.mark.parametrize("value", ["0", "false", "No", "off"])
    def test_falsey(self, value):
        assert _coerce_bool(value, default=True) is False

    def test_bool_default(self):
        assert _coerce_bool(None, default=True) is True
        assert _coerce_bool("maybe") is False

    def test_int(self):
        assert _coerce_int("12", 6) == 12
        assert _coerce_int(None, 6) == 6
        assert _coerce_int("abc", 6) == 6
        assert _coerce_int("0", 6, minimum=1) == 6


class TestValidation:
    """Test startup environment validation"""

    def test_non_production_always_valid(self, monkeypatch):
        monkeypatch.delenv("SECRET_KEY", raising=False)
        assert validate_environment("development") == (True, [])
        assert validate_environment("testing") == (True, [])

    def test_production_requires_secret_and_database(self, monkeypatch):
        monkeypatch.delenv("SECRET_KEY", raising=False)
        monkeypatch.delenv("DATABASE_URL", raising=False)
        is_valid, errors = validate_environment("production")
        assert is_valid is False
        assert any("SECRET_KEY" in error for error in errors)
        assert any("DATABASE_URL" in error for error in errors)

    def test_production_rejects_default_secret(self, monkeypatch):
        monkeypatch.setenv("SECRET_KEY", "your-secret-key")
        monkeypatch.setenv("DATABASE_URL", "postgresql://localhost/volunteerhub")
        is_valid, errors = validate_environment("production")
        assert is_valid is False
        assert len(errors) == 1

    def test_production_valid(self, monkeypatch):
        monkeypatch.setenv("SECRET_KEY", "a" * 64)
        monkeypatch.setenv("DATABASE_URL", "postgresql://localhost/volunteerhub")
        monkeypatch.delenv("LOG_FORMAT", raising=False)
        assert validate_environment("production") == (True, [])

    def test_log_format_checked(self, monkeypatch):
        monkeypatch.setenv("SECRET_KEY", "a" * 64)
        monkeypatch.setenv("DATABASE_URL", "postgresql://localhost/volunteerhub")
        monkeypatch.setenv("LOG_FORMAT", "xml")
        is_valid, errors = validate_environment("production")
        assert is_valid is False
        assert "LOG_FORMAT" in errors[0]

    def test_validate_and_exit(self, monkeypatch):
        monkeypatch.delenv("SECRET_KEY", raising=False)
        monkeypatch.delenv("DATABASE_URL", raising=False)
        with pytest.raises(SystemExit):
            validate_and_exit("production")


class TestAppConfig:
    """Test the configuration loaded for tests"""

    def test_testing_config(self, app):
        assert app.config["TESTING"] is True
        assert app.config["CATALOG_FEATURED_LIMIT"] == 6
        assert app.config["DASHBOARD_PAST_EVENTS_LIMIT"] == 5
        assert app.config["MIN_PASSWORD_LENGTH"] == 6

"""Settings validation tests."""

import pytest

from src.utils.settings.app import AppSettings
from src.utils.settings.auth import AuthSettings


class TestProductionValidation:
    def test_empty_jwt_secret_rejected_in_production(self):
        settings = AppSettings(ENVIRONMENT="PROD")

        with pytest.raises(ValueError, match="SUPABASE_JWT_SECRET"):
            settings.validate_prod(AuthSettings(SUPABASE_JWT_SECRET=""))

    def test_blank_jwt_secret_rejected_in_production(self):
        settings = AppSettings(ENVIRONMENT="prod")

        with pytest.raises(ValueError, match="SUPABASE_JWT_SECRET"):
            settings.validate_prod(AuthSettings(SUPABASE_JWT_SECRET="   "))

    def test_secret_read_from_environment(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_JWT_SECRET", "")

        with pytest.raises(ValueError, match="SUPABASE_JWT_SECRET"):
            AppSettings(ENVIRONMENT="PROD").validate_prod()

    def test_production_with_secret_passes(self):
        settings = AppSettings(ENVIRONMENT="PROD")

        settings.validate_prod(AuthSettings(SUPABASE_JWT_SECRET="project-secret"))

    def test_empty_cors_origins_rejected_in_production(self):
        settings = AppSettings(ENVIRONMENT="PROD", CORS_ORIGINS=[])

        with pytest.raises(ValueError, match="CORS_ORIGINS"):
            settings.validate_prod(AuthSettings(SUPABASE_JWT_SECRET="project-secret"))

    def test_development_allows_empty_secret(self):
        AppSettings(ENVIRONMENT="DEV").validate_prod(
            AuthSettings(SUPABASE_JWT_SECRET="")
        )

"""Tests for operator settings."""

import pytest

from argocd_endpoint.domain.value_objects import SecretKeySelector
from argocd_endpoint.infrastructure.config import Settings, load_settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Defaults apply when no environment is set."""
        for key in ("API_GROUP", "ARGOCD_NAMESPACE", "ARGOCD_ADMIN_USERNAME", "MAX_WORKERS", "STANDALONE"):
            monkeypatch.delenv(key, raising=False)

        settings = Settings()

        assert settings.api_group == "argocd.krateo.io"
        assert settings.admin_username == "admin"
        assert settings.max_workers == 4
        assert settings.standalone is True
        assert settings.default_admin_secret == SecretKeySelector(
            name="argocd-initial-admin-secret", namespace="argocd", key="password"
        )

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment variables override defaults."""
        monkeypatch.setenv("ARGOCD_NAMESPACE", "gitops")
        monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "2.5")
        monkeypatch.setenv("WATCH_NAMESPACE", "team-a")
        monkeypatch.setenv("STANDALONE", "false")

        settings = Settings()

        assert settings.http_timeout_seconds == 2.5
        assert settings.watch_namespace == "team-a"
        assert settings.standalone is False
        assert settings.default_admin_secret.namespace == "gitops"

    def test_validate_collects_errors(self) -> None:
        """All invalid values are reported together."""
        settings = Settings(api_group="", max_workers=0, http_timeout_seconds=0)

        with pytest.raises(ValueError, match="Invalid settings") as exc_info:
            settings.validate()

        message = str(exc_info.value)
        assert "API_GROUP" in message
        assert "MAX_WORKERS" in message
        assert "HTTP_TIMEOUT_SECONDS" in message

    def test_load_settings_validates(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """load_settings rejects invalid environment values."""
        monkeypatch.setenv("POLL_INTERVAL_SECONDS", "0")

        with pytest.raises(ValueError, match="POLL_INTERVAL_SECONDS"):
            load_settings()

"""Operator settings loaded from environment variables."""

import os
from dataclasses import dataclass, field
from functools import cached_property

from ...domain.services import BASIC_AUTH_PASSWORD_KEY, INITIAL_ADMIN_SECRET_NAME
from ...domain.value_objects import SecretKeySelector


def _env_bool(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable."""
    return os.environ.get(key, str(default)).lower() in ("true", "1", "yes")


def _env_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    return int(os.environ.get(key, str(default)))


def _env_float(key: str, default: float) -> float:
    """Get float from environment variable."""
    return float(os.environ.get(key, str(default)))


def _env_str(key: str, default: str = "") -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


@dataclass
class Settings:
    """Operator settings container."""

    # Custom resources
    api_group: str = field(default_factory=lambda: _env_str("API_GROUP", "argocd.krateo.io"))
    api_version: str = field(default_factory=lambda: _env_str("API_VERSION", "v1alpha1"))
    endpoint_plural: str = field(default_factory=lambda: _env_str("ENDPOINT_PLURAL", "endpoints"))
    provider_config_plural: str = field(
        default_factory=lambda: _env_str("PROVIDER_CONFIG_PLURAL", "providerconfigs")
    )

    # Kubernetes
    watch_namespace: str = field(default_factory=lambda: _env_str("WATCH_NAMESPACE"))
    kubeconfig_context: str = field(default_factory=lambda: _env_str("KUBECONFIG_CONTEXT"))
    finalizer: str = field(default_factory=lambda: _env_str("FINALIZER", "argocd.krateo.io/finalizer"))

    # ArgoCD
    admin_username: str = field(default_factory=lambda: _env_str("ARGOCD_ADMIN_USERNAME", "admin"))
    admin_secret_namespace: str = field(default_factory=lambda: _env_str("ARGOCD_NAMESPACE", "argocd"))
    http_timeout_seconds: float = field(default_factory=lambda: _env_float("HTTP_TIMEOUT_SECONDS", 30.0))

    # Reconciliation
    max_workers: int = field(default_factory=lambda: _env_int("MAX_WORKERS", 4))
    poll_interval_seconds: int = field(default_factory=lambda: _env_int("POLL_INTERVAL_SECONDS", 60))
    retry_delay_seconds: int = field(default_factory=lambda: _env_int("RETRY_DELAY_SECONDS", 30))

    # Runtime
    log_level: str = field(default_factory=lambda: _env_str("LOG_LEVEL", "INFO"))
    liveness_endpoint: str = field(default_factory=lambda: _env_str("LIVENESS_ENDPOINT"))
    standalone: bool = field(default_factory=lambda: _env_bool("STANDALONE", default=True))

    def validate(self) -> None:
        """Validate settings."""
        errors: list[str] = []

        if not self.api_group:
            errors.append("API_GROUP must not be empty")
        if not self.api_version:
            errors.append("API_VERSION must not be empty")
        if self.max_workers < 1:
            errors.append(f"MAX_WORKERS must be at least 1, got {self.max_workers}")
        if self.poll_interval_seconds < 1:
            errors.append(f"POLL_INTERVAL_SECONDS must be at least 1, got {self.poll_interval_seconds}")
        if self.retry_delay_seconds < 0:
            errors.append(f"RETRY_DELAY_SECONDS must not be negative, got {self.retry_delay_seconds}")
        if self.http_timeout_seconds <= 0:
            errors.append(f"HTTP_TIMEOUT_SECONDS must be positive, got {self.http_timeout_seconds}")

        if errors:
            msg = f"Invalid settings: {'; '.join(errors)}"
            raise ValueError(msg)

    @cached_property
    def default_admin_secret(self) -> SecretKeySelector:
        """Admin password secret used when a ProviderConfig does not override it."""
        return SecretKeySelector(
            name=INITIAL_ADMIN_SECRET_NAME,
            namespace=self.admin_secret_namespace,
            key=BASIC_AUTH_PASSWORD_KEY,
        )


def load_settings() -> Settings:
    """Load and validate settings from environment."""
    settings = Settings()
    settings.validate()
    return settings

"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from argocd_endpoint.domain.entities import ConnectionProfile, Endpoint, ProviderCredentials
from argocd_endpoint.domain.value_objects import BEARER_TOKEN_KEY, CredentialSource, SecretKeySelector

from .fakes import (
    ADMIN_PASSWORD,
    SERVER_URL,
    FakeArgoCD,
    FakeProfileRepository,
    InMemorySecretStore,
    RecordingEventRecorder,
)


@pytest.fixture
def secret_store() -> InMemorySecretStore:
    """Secret store holding the default ArgoCD admin secret."""
    store = InMemorySecretStore()
    store.put("argocd", "argocd-initial-admin-secret", {"password": ADMIN_PASSWORD})
    return store


@pytest.fixture
def profile() -> ConnectionProfile:
    """A ProviderConfig using the default admin secret."""
    return ConnectionProfile(name="argocd", server_url=SERVER_URL)


@pytest.fixture
def profiles(profile: ConnectionProfile) -> FakeProfileRepository:
    """Repository holding the default profile."""
    return FakeProfileRepository(profile)


@pytest.fixture
def argocd() -> FakeArgoCD:
    """Fake ArgoCD server issuing session ``abc`` and account token ``xyz``."""
    return FakeArgoCD()


@pytest.fixture
def recorder() -> RecordingEventRecorder:
    """Event recorder fake."""
    return RecordingEventRecorder()


@pytest.fixture
def endpoint() -> Endpoint:
    """An endpoint for account ``svc1`` writing into ``x/tok-a``."""
    return Endpoint(
        name="svc1-endpoint",
        account="svc1",
        write_secret_to_ref=SecretKeySelector(name="tok-a", namespace="x", key=BEARER_TOKEN_KEY),
        provider_config_name="argocd",
    )


@pytest.fixture
def secret_profile() -> ConnectionProfile:
    """A ProviderConfig overriding only the admin secret namespace."""
    return ConnectionProfile(
        name="custom",
        server_url=SERVER_URL,
        credentials=ProviderCredentials(
            source=CredentialSource.SECRET,
            secret_ref=SecretKeySelector(namespace="gitops"),
        ),
    )

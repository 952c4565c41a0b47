"""Tests for the Kubernetes secret store adapter."""

from __future__ import annotations

import base64
from unittest.mock import MagicMock

import pytest
from kubernetes import client
from kubernetes.client.exceptions import ApiException

from argocd_endpoint.application.exceptions import (
    SecretCreateFailedError,
    SecretDeleteFailedError,
    SecretFetchFailedError,
    SecretNotFoundError,
)
from argocd_endpoint.domain.exceptions import NoSecretReferenceError
from argocd_endpoint.domain.value_objects import SecretKeySelector
from argocd_endpoint.infrastructure.adapters.kubernetes import KubernetesSecretStore

REF = SecretKeySelector(name="tok-a", namespace="x", key="bearer")


def _secret(data: dict[str, str] | None) -> client.V1Secret:
    encoded = {k: base64.b64encode(v.encode()).decode() for k, v in data.items()} if data is not None else None
    return client.V1Secret(metadata=client.V1ObjectMeta(name="tok-a", namespace="x"), data=encoded)


@pytest.fixture
def core_api() -> MagicMock:
    """Mock CoreV1 API client."""
    return MagicMock(spec=client.CoreV1Api)


@pytest.fixture
def store(core_api: MagicMock) -> KubernetesSecretStore:
    """Secret store over the mock API."""
    return KubernetesSecretStore(core_api)


class TestGet:
    """Tests for get."""

    @pytest.mark.asyncio
    async def test_returns_bearer_token(self, store: KubernetesSecretStore, core_api: MagicMock) -> None:
        """The decoded bearer value is returned."""
        core_api.read_namespaced_secret.return_value = _secret({"bearer": "xyz", "target": "https://argocd.example"})

        assert await store.get(REF) == "xyz"
        core_api.read_namespaced_secret.assert_called_once_with(name="tok-a", namespace="x")

    @pytest.mark.asyncio
    async def test_not_found_is_empty(self, store: KubernetesSecretStore, core_api: MagicMock) -> None:
        """A missing secret is an empty value, not an error."""
        core_api.read_namespaced_secret.side_effect = ApiException(status=404, reason="Not Found")

        assert await store.get(REF) == ""

    @pytest.mark.asyncio
    async def test_secret_without_data(self, store: KubernetesSecretStore, core_api: MagicMock) -> None:
        """A secret without data has no token."""
        core_api.read_namespaced_secret.return_value = _secret(None)

        assert await store.get(REF) == ""

    @pytest.mark.asyncio
    async def test_other_errors_are_wrapped(self, store: KubernetesSecretStore, core_api: MagicMock) -> None:
        """Errors other than not-found become SecretFetchFailedError."""
        core_api.read_namespaced_secret.side_effect = ApiException(status=403, reason="Forbidden")

        with pytest.raises(SecretFetchFailedError, match="403 Forbidden"):
            await store.get(REF)

    @pytest.mark.asyncio
    async def test_non_utf8_value_is_fetch_failure(self, store: KubernetesSecretStore, core_api: MagicMock) -> None:
        """Bytes that are not UTF-8 text surface as SecretFetchFailedError."""
        secret = _secret({})
        secret.data = {"bearer": base64.b64encode(b"\xff\xfe").decode()}
        core_api.read_namespaced_secret.return_value = secret

        with pytest.raises(SecretFetchFailedError, match="x/tok-a"):
            await store.get(REF)

    @pytest.mark.asyncio
    async def test_malformed_base64_is_fetch_failure(self, store: KubernetesSecretStore, core_api: MagicMock) -> None:
        """Data that is not valid base64 surfaces as SecretFetchFailedError."""
        secret = _secret({})
        secret.data = {"bearer": "not*base64"}
        core_api.read_namespaced_secret.return_value = secret

        with pytest.raises(SecretFetchFailedError, match="cannot decode key bearer"):
            await store.get(REF)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "ref",
        [None, SecretKeySelector(namespace="x"), SecretKeySelector(name="tok-a")],
    )
    async def test_requires_reference(
        self, store: KubernetesSecretStore, core_api: MagicMock, ref: SecretKeySelector | None
    ) -> None:
        """Missing or incomplete references are rejected without an API call."""
        with pytest.raises(NoSecretReferenceError):
            await store.get(ref)
        core_api.read_namespaced_secret.assert_not_called()


class TestReadKey:
    """Tests for read_key."""

    @pytest.mark.asyncio
    async def test_reads_selected_key(self, store: KubernetesSecretStore, core_api: MagicMock) -> None:
        """The selected key is decoded and returned."""
        core_api.read_namespaced_secret.return_value = _secret({"password": "s3cr3t"})
        selector = SecretKeySelector(name="argocd-initial-admin-secret", namespace="argocd", key="password")

        assert await store.read_key(selector) == "s3cr3t"

    @pytest.mark.asyncio
    async def test_not_found_raises(self, store: KubernetesSecretStore, core_api: MagicMock) -> None:
        """A missing admin secret is reported as not found."""
        core_api.read_namespaced_secret.side_effect = ApiException(status=404, reason="Not Found")
        selector = SecretKeySelector(name="argocd-initial-admin-secret", namespace="argocd", key="password")

        with pytest.raises(SecretNotFoundError):
            await store.read_key(selector)


class TestCreate:
    """Tests for create."""

    @pytest.mark.asyncio
    async def test_creates_labelled_secret(self, store: KubernetesSecretStore, core_api: MagicMock) -> None:
        """The secret holds the token and target and carries the provenance labels."""
        await store.create(REF, "xyz", "https://argocd.example")

        kwargs = core_api.create_namespaced_secret.call_args.kwargs
        body: client.V1Secret = kwargs["body"]
        assert kwargs["namespace"] == "x"
        assert body.metadata.name == "tok-a"
        assert body.metadata.namespace == "x"
        assert body.string_data == {"bearer": "xyz", "target": "https://argocd.example"}
        assert body.metadata.labels == {
            "app.kubernetes.io/created-by": "krateo",
            "category": "delivery",
            "group": "endpoint",
            "icon": "fa-solid_fa-truck",
            "type": "argocd",
        }

    @pytest.mark.asyncio
    async def test_existing_secret_fails(self, store: KubernetesSecretStore, core_api: MagicMock) -> None:
        """Creating over an existing secret fails; there is no upsert."""
        core_api.create_namespaced_secret.side_effect = ApiException(status=409, reason="Conflict")

        with pytest.raises(SecretCreateFailedError, match="409 Conflict"):
            await store.create(REF, "xyz", "https://argocd.example")
        core_api.replace_namespaced_secret.assert_not_called()

    @pytest.mark.asyncio
    async def test_requires_reference(self, store: KubernetesSecretStore, core_api: MagicMock) -> None:
        """A missing reference is rejected."""
        with pytest.raises(NoSecretReferenceError):
            await store.create(None, "xyz", "https://argocd.example")
        core_api.create_namespaced_secret.assert_not_called()


class TestDelete:
    """Tests for delete."""

    @pytest.mark.asyncio
    async def test_deletes_secret(self, store: KubernetesSecretStore, core_api: MagicMock) -> None:
        """The referenced secret is deleted."""
        await store.delete(REF)

        core_api.delete_namespaced_secret.assert_called_once_with(name="tok-a", namespace="x")

    @pytest.mark.asyncio
    async def test_absent_secret_raises_not_found(self, store: KubernetesSecretStore, core_api: MagicMock) -> None:
        """Deleting a missing secret surfaces the not-found outcome."""
        core_api.delete_namespaced_secret.side_effect = ApiException(status=404, reason="Not Found")

        with pytest.raises(SecretNotFoundError):
            await store.delete(REF)

    @pytest.mark.asyncio
    async def test_other_errors_are_wrapped(self, store: KubernetesSecretStore, core_api: MagicMock) -> None:
        """Other API failures become SecretDeleteFailedError."""
        core_api.delete_namespaced_secret.side_effect = ApiException(status=500, reason="Internal Server Error")

        with pytest.raises(SecretDeleteFailedError):
            await store.delete(REF)

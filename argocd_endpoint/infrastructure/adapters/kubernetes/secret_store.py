"""Kubernetes secret store adapter."""

from __future__ import annotations

import asyncio
import base64
import binascii
import logging
from typing import ClassVar

from kubernetes import client
from kubernetes.client.exceptions import ApiException

from ....application.exceptions import (
    SecretCreateFailedError,
    SecretDeleteFailedError,
    SecretFetchFailedError,
    SecretNotFoundError,
)
from ....domain.exceptions import NoSecretReferenceError
from ....domain.value_objects import BEARER_TOKEN_KEY, TARGET_URL_KEY, SecretKeySelector

logger = logging.getLogger(__name__)

HTTP_NOT_FOUND = 404


class KubernetesSecretStore:
    """
    Secret store implementation on top of the CoreV1 API.

    Implements both the SecretReader and the EndpointSecretStore ports. The
    Kubernetes client is blocking, so every call runs in a worker thread.
    """

    LABELS: ClassVar[dict[str, str]] = {
        "app.kubernetes.io/created-by": "krateo",
        "category": "delivery",
        "group": "endpoint",
        "icon": "fa-solid_fa-truck",
        "type": "argocd",
    }

    def __init__(self, core_api: client.CoreV1Api) -> None:
        """
        Initialize the store.

        Args:
            core_api: CoreV1 API client.
        """
        self._core_api = core_api

    async def read_key(self, selector: SecretKeySelector) -> str:
        """
        Read a single key from a secret.

        Returns:
            The decoded value, or an empty string if the key is missing.

        Raises:
            NoSecretReferenceError: If the selector is incomplete.
            SecretNotFoundError: If the secret does not exist.
            SecretFetchFailedError: If the read fails for any other reason.
        """
        self._require(selector)
        secret = await self._read(selector)
        if secret is None:
            msg = f"secret {selector.namespace}/{selector.name} not found"
            raise SecretNotFoundError(msg)

        return self._decode(secret, selector.key)

    async def get(self, ref: SecretKeySelector | None) -> str:
        """
        Read the endpoint token.

        Returns:
            The stored token, or an empty string if the secret does not exist.
        """
        ref = self._require(ref)
        secret = await self._read(ref)
        if secret is None:
            return ""

        return self._decode(secret, BEARER_TOKEN_KEY)

    async def create(self, ref: SecretKeySelector | None, token: str, server_url: str) -> None:
        """Create the endpoint secret. Existing secrets are never overwritten."""
        ref = self._require(ref)
        body = client.V1Secret(
            api_version="v1",
            kind="Secret",
            metadata=client.V1ObjectMeta(
                name=ref.name,
                namespace=ref.namespace,
                labels=dict(self.LABELS),
            ),
            type="Opaque",
            string_data={
                BEARER_TOKEN_KEY: token,
                TARGET_URL_KEY: server_url,
            },
        )

        try:
            await asyncio.to_thread(
                self._core_api.create_namespaced_secret,
                namespace=ref.namespace,
                body=body,
            )
        except Exception as e:
            msg = f"cannot create {ref.name} secret in namespace {ref.namespace}: {self._reason(e)}"
            raise SecretCreateFailedError(msg) from e

        logger.info("Created secret %s/%s", ref.namespace, ref.name)

    async def delete(self, ref: SecretKeySelector | None) -> None:
        """Delete the endpoint secret."""
        ref = self._require(ref)
        try:
            await asyncio.to_thread(
                self._core_api.delete_namespaced_secret,
                name=ref.name,
                namespace=ref.namespace,
            )
        except ApiException as e:
            if e.status == HTTP_NOT_FOUND:
                msg = f"secret {ref.namespace}/{ref.name} not found"
                raise SecretNotFoundError(msg) from e
            msg = f"cannot delete {ref.name} secret in namespace {ref.namespace}: {self._reason(e)}"
            raise SecretDeleteFailedError(msg) from e
        except Exception as e:
            msg = f"cannot delete {ref.name} secret in namespace {ref.namespace}: {e}"
            raise SecretDeleteFailedError(msg) from e

        logger.info("Deleted secret %s/%s", ref.namespace, ref.name)

    async def _read(self, ref: SecretKeySelector) -> client.V1Secret | None:
        """Read a secret, returning None when it does not exist."""
        try:
            return await asyncio.to_thread(
                self._core_api.read_namespaced_secret,
                name=ref.name,
                namespace=ref.namespace,
            )
        except ApiException as e:
            if e.status == HTTP_NOT_FOUND:
                return None
            msg = f"cannot get {ref.name} secret in namespace {ref.namespace}: {self._reason(e)}"
            raise SecretFetchFailedError(msg) from e
        except Exception as e:
            msg = f"cannot get {ref.name} secret in namespace {ref.namespace}: {e}"
            raise SecretFetchFailedError(msg) from e

    @staticmethod
    def _require(ref: SecretKeySelector | None) -> SecretKeySelector:
        if ref is None or not ref.name or not ref.namespace:
            msg = f"no secret referenced (got {ref})"
            raise NoSecretReferenceError(msg)
        return ref

    @staticmethod
    def _decode(secret: client.V1Secret, key: str) -> str:
        data = secret.data or {}
        value = data.get(key)
        if not value:
            return ""

        try:
            return base64.b64decode(value, validate=True).decode()
        except (binascii.Error, UnicodeDecodeError) as e:
            meta = secret.metadata
            location = f"{meta.namespace}/{meta.name}" if meta else "unknown"
            msg = f"cannot decode key {key} of secret {location}: {e}"
            raise SecretFetchFailedError(msg) from e

    @staticmethod
    def _reason(error: Exception) -> str:
        if isinstance(error, ApiException):
            return f"{error.status} {error.reason}"
        return str(error)

"""Ports for the cluster secret store - driven/secondary ports."""

from typing import Protocol

from ...domain.value_objects import SecretKeySelector


class SecretReader(Protocol):
    """Reads individual keys from secrets."""

    async def read_key(self, selector: SecretKeySelector) -> str:
        """
        Return the value stored under ``selector.key``.

        Raises:
            SecretNotFoundError: If the secret does not exist.
            SecretFetchFailedError: If the read fails for any other reason.
        """
        ...


class EndpointSecretStore(Protocol):
    """
    Port for the secret that materialises an issued endpoint token.

    Existence of this secret is what the lifecycle controller observes.
    """

    async def get(self, ref: SecretKeySelector | None) -> str:
        """
        Return the stored token, or an empty string if the secret is absent.

        Raises:
            NoSecretReferenceError: If ``ref`` is missing.
            SecretFetchFailedError: If the read fails for another reason.
        """
        ...

    async def create(self, ref: SecretKeySelector | None, token: str, server_url: str) -> None:
        """
        Create the secret. Fails if it already exists.

        Raises:
            NoSecretReferenceError: If ``ref`` is missing.
            SecretCreateFailedError: If the secret cannot be created.
        """
        ...

    async def delete(self, ref: SecretKeySelector | None) -> None:
        """
        Delete the secret.

        Raises:
            NoSecretReferenceError: If ``ref`` is missing.
            SecretNotFoundError: If the secret does not exist.
            SecretDeleteFailedError: If the delete fails for another reason.
        """
        ...

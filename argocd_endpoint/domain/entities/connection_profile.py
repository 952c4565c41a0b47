"""Connection profile entity describing how to reach an ArgoCD server."""

from dataclasses import dataclass

from ..value_objects import CredentialSource, SecretKeySelector


@dataclass(frozen=True, slots=True)
class ProviderCredentials:
    """Where the ArgoCD admin password comes from."""

    source: CredentialSource
    secret_ref: SecretKeySelector | None = None


@dataclass(frozen=True, slots=True)
class ConnectionProfile:
    """A ProviderConfig: server address and admin credentials."""

    name: str
    server_url: str
    user_agent: str = ""
    debug_client: bool = False
    credentials: ProviderCredentials | None = None

"""Application ports - Interfaces for external adapters."""

from .accounts_client import AccountsClient, AccountsClientFactory
from .event_recorder import EventRecorder
from .profile_repository import ConnectionProfileRepository
from .secret_store import EndpointSecretStore, SecretReader

__all__ = [
    "AccountsClient",
    "AccountsClientFactory",
    "ConnectionProfileRepository",
    "EndpointSecretStore",
    "EventRecorder",
    "SecretReader",
]

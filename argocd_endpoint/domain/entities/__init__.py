"""Domain entities - Objects with identity and lifecycle."""

from .connection_profile import ConnectionProfile, ProviderCredentials
from .endpoint import Endpoint
from .session import DEFAULT_USER_AGENT, Session

__all__ = [
    "DEFAULT_USER_AGENT",
    "ConnectionProfile",
    "Endpoint",
    "ProviderCredentials",
    "Session",
]

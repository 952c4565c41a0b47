"""Application use cases."""

from .endpoint_lifecycle import EndpointConnector, EndpointExternal
from .resolve_connection import ConnectionResolver

__all__ = [
    "ConnectionResolver",
    "EndpointConnector",
    "EndpointExternal",
]

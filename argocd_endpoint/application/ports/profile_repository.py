"""Port for connection profiles - driven/secondary port."""

from typing import Protocol

from ...domain.entities import ConnectionProfile


class ConnectionProfileRepository(Protocol):
    """Looks up ProviderConfig resources by name."""

    async def get(self, name: str) -> ConnectionProfile:
        """
        Fetch a connection profile.

        Raises:
            ProfileFetchFailedError: If the profile cannot be fetched or parsed.
        """
        ...

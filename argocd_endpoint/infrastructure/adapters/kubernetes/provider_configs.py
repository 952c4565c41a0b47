"""Kubernetes ProviderConfig repository adapter."""

from __future__ import annotations

import asyncio
import logging

from kubernetes import client
from pydantic import ValidationError

from ....application.exceptions import ProfileFetchFailedError
from ....domain.entities import ConnectionProfile
from .models import ProviderConfigResource

logger = logging.getLogger(__name__)


class KubernetesConnectionProfileRepository:
    """
    Reads cluster-scoped ProviderConfig resources.

    Implements the ConnectionProfileRepository port. Profiles are fetched on
    every call.
    """

    def __init__(
        self,
        custom_api: client.CustomObjectsApi,
        *,
        group: str,
        version: str,
        plural: str = "providerconfigs",
    ) -> None:
        """
        Initialize the repository.

        Args:
            custom_api: Custom objects API client.
            group: API group of the ProviderConfig resource.
            version: API version of the ProviderConfig resource.
            plural: Plural resource name.
        """
        self._custom_api = custom_api
        self._group = group
        self._version = version
        self._plural = plural

    async def get(self, name: str) -> ConnectionProfile:
        """
        Fetch and parse a ProviderConfig.

        Raises:
            ProfileFetchFailedError: If the object cannot be fetched or parsed.
        """
        try:
            raw = await asyncio.to_thread(
                self._custom_api.get_cluster_custom_object,
                group=self._group,
                version=self._version,
                plural=self._plural,
                name=name,
            )
        except Exception as e:
            msg = f"cannot get referenced ProviderConfig {name}: {e}"
            raise ProfileFetchFailedError(msg) from e

        try:
            profile = ProviderConfigResource.model_validate(raw).to_domain()
        except ValidationError as e:
            msg = f"invalid ProviderConfig {name}: {e}"
            raise ProfileFetchFailedError(msg) from e

        logger.debug("Loaded ProviderConfig %s (server: %s)", name, profile.server_url)
        return profile

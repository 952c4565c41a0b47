#!/usr/bin/env python3
"""
ArgoCD Endpoint Provider

Composition root and application entry point.
Wires together all layers and runs the kopf operator.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from functools import cached_property, partial
from typing import TYPE_CHECKING

import kopf

from .application.use_cases import ConnectionResolver, EndpointConnector
from .domain.services import AdminSecretSelector
from .infrastructure.adapters.argocd import ArgoCDAccountsClient
from .infrastructure.adapters.kubernetes import (
    KubernetesConnectionProfileRepository,
    KubernetesSecretStore,
    create_core_api,
    create_custom_objects_api,
    load_kube_config,
)
from .infrastructure.adapters.operator import register_handlers
from .infrastructure.config import Settings, load_settings

if TYPE_CHECKING:
    from .application.ports import AccountsClientFactory, EventRecorder

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

# Application version
__version__ = "0.1.0"


class ApplicationContainer:
    """
    Dependency injection container.

    Responsible for creating and wiring all application components. Kubernetes
    API clients are shared; everything holding ArgoCD state is built per pass.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize container with settings."""
        self._settings = settings

    @cached_property
    def secret_store(self) -> KubernetesSecretStore:
        """Secret store adapter over the CoreV1 API."""
        return KubernetesSecretStore(create_core_api())

    @cached_property
    def profile_repository(self) -> KubernetesConnectionProfileRepository:
        """ProviderConfig repository over the custom objects API."""
        return KubernetesConnectionProfileRepository(
            create_custom_objects_api(),
            group=self._settings.api_group,
            version=self._settings.api_version,
            plural=self._settings.provider_config_plural,
        )

    def create_client_factory(self) -> AccountsClientFactory:
        """Create the factory for ArgoCD accounts clients."""
        return partial(
            ArgoCDAccountsClient,
            timeout=self._settings.http_timeout_seconds,
        )

    def create_resolver(self) -> ConnectionResolver:
        """Create the connection resolver."""
        return ConnectionResolver(
            profiles=self.profile_repository,
            secrets=self.secret_store,
            client_factory=self.create_client_factory(),
            selector=AdminSecretSelector(self._settings.default_admin_secret),
            username=self._settings.admin_username,
        )

    def create_connector(self, recorder: EventRecorder) -> EndpointConnector:
        """Create the lifecycle connector for one reconciliation pass."""
        return EndpointConnector(
            resolver=self.create_resolver(),
            secrets=self.secret_store,
            client_factory=self.create_client_factory(),
            recorder=recorder,
        )


class Application:
    """
    Main application orchestrator.

    Registers the handlers and runs the operator until it is stopped.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize application with settings."""
        self._settings = settings
        self._container = ApplicationContainer(settings)

    def create_registry(self) -> kopf.OperatorRegistry:
        """Create a registry holding all operator handlers."""
        registry = kopf.OperatorRegistry()
        register_handlers(registry, self._settings, self._container.create_connector)
        return registry

    async def run(self) -> int:
        """
        Run the operator.

        Returns:
            Exit code (0 for success, 1 for failure).
        """
        load_kube_config(self._settings.kubeconfig_context or None)

        namespace = self._settings.watch_namespace
        logger.info(
            "Watching %s.%s/%s in %s",
            self._settings.endpoint_plural,
            self._settings.api_group,
            self._settings.api_version,
            f"namespace {namespace}" if namespace else "all namespaces",
        )

        await kopf.operator(
            registry=self.create_registry(),
            clusterwide=not namespace,
            namespaces=[namespace] if namespace else [],
            standalone=self._settings.standalone,
            liveness_endpoint=self._settings.liveness_endpoint or None,
        )
        return 0


async def async_main() -> int:
    """Async entry point."""
    try:
        logger.info("ArgoCD Endpoint Provider %s starting...", __version__)

        settings = load_settings()
        logging.getLogger().setLevel(settings.log_level.upper())

        app = Application(settings)
        return await app.run()

    except ValueError as e:
        logger.error("Configuration error: %s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        return 0
    except Exception:
        logger.exception("Unexpected error")
        return 1


def main() -> None:
    """Main entry point."""
    exit_code = asyncio.run(async_main())
    sys.exit(exit_code)


if __name__ == "__main__":
    main()

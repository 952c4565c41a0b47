"""kopf handlers driving endpoint reconciliation passes.

The handlers are the scheduler side of the lifecycle: kopf decides when a
pass runs and retries failed passes; each pass only calls Connect, Observe
and then Create, Update or Delete.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

import kopf

from ....application.exceptions import ApplicationError
from ....application.use_cases import EndpointConnector
from ....domain.exceptions import ConfigError
from ..kubernetes import parse_endpoint
from .events import KopfEventRecorder

if TYPE_CHECKING:
    from ....domain.entities import Endpoint
    from ...config import Settings

logger = logging.getLogger(__name__)

ConnectorFactory = Callable[[KopfEventRecorder], EndpointConnector]


@asynccontextmanager
async def reconciliation_pass(
    endpoint: Endpoint,
    patch: kopf.Patch,
    *,
    retry_delay: float,
) -> AsyncIterator[None]:
    """
    Run one pass, publishing conditions and mapping errors for kopf.

    Configuration errors are permanent; everything else is retried after
    ``retry_delay`` seconds.
    """
    try:
        yield
    except ConfigError as e:
        logger.error("Endpoint %s is misconfigured: %s", endpoint.name, e)
        raise kopf.PermanentError(str(e)) from e
    except ApplicationError as e:
        logger.warning("Reconciling endpoint %s failed, will retry: %s", endpoint.name, e)
        raise kopf.TemporaryError(str(e), delay=retry_delay) from e
    finally:
        if endpoint.conditions:
            patch.status["conditions"] = [c.to_dict() for c in endpoint.conditions]


async def reconcile(
    body: kopf.Body,
    patch: kopf.Patch,
    connector_factory: ConnectorFactory,
    *,
    retry_delay: float,
) -> None:
    """Connect, Observe, then Create or Update the endpoint token."""
    try:
        endpoint = parse_endpoint(dict(body))
    except ConfigError as e:
        raise kopf.PermanentError(str(e)) from e

    connector = connector_factory(KopfEventRecorder(body))

    async with reconciliation_pass(endpoint, patch, retry_delay=retry_delay):
        external = await connector.connect(endpoint)
        observation = await external.observe(endpoint)

        if not observation.resource_exists:
            await external.create(endpoint)
        elif not observation.resource_up_to_date:
            await external.update(endpoint)


async def finalize(
    body: kopf.Body,
    patch: kopf.Patch,
    connector_factory: ConnectorFactory,
    *,
    retry_delay: float,
) -> None:
    """Connect, Observe, then Delete the endpoint token if it exists."""
    try:
        endpoint = parse_endpoint(dict(body))
    except ConfigError as e:
        raise kopf.PermanentError(str(e)) from e

    connector = connector_factory(KopfEventRecorder(body))

    async with reconciliation_pass(endpoint, patch, retry_delay=retry_delay):
        external = await connector.connect(endpoint)
        observation = await external.observe(endpoint)

        if observation.resource_exists:
            await external.delete(endpoint)
        else:
            logger.info("Endpoint %s has no token secret, nothing to delete", endpoint.name)


def register_handlers(
    registry: kopf.OperatorRegistry,
    settings: Settings,
    connector_factory: ConnectorFactory,
) -> None:
    """
    Register the operator's handlers on ``registry``.

    Args:
        registry: Registry passed to ``kopf.operator``.
        settings: Operator settings.
        connector_factory: Builds a connector bound to an event recorder.
    """
    resource = (settings.api_group, settings.api_version, settings.endpoint_plural)
    retry_delay = settings.retry_delay_seconds
    finalizer = settings.finalizer
    max_workers = settings.max_workers

    @kopf.on.startup(registry=registry)
    def configure(settings: kopf.OperatorSettings, **_: Any) -> None:
        settings.persistence.finalizer = finalizer
        settings.execution.max_workers = max_workers
        settings.posting.level = logging.INFO

    @kopf.on.login(registry=registry)
    def login(**kwargs: Any) -> kopf.ConnectionInfo | None:
        return kopf.login_via_client(**kwargs)

    @kopf.on.resume(*resource, registry=registry)
    @kopf.on.create(*resource, registry=registry)
    @kopf.on.update(*resource, registry=registry)
    async def reconcile_endpoint(body: kopf.Body, patch: kopf.Patch, **_: Any) -> None:
        await reconcile(body, patch, connector_factory, retry_delay=retry_delay)

    @kopf.timer(
        *resource,
        interval=settings.poll_interval_seconds,
        initial_delay=settings.poll_interval_seconds,
        registry=registry,
    )
    async def poll_endpoint(body: kopf.Body, patch: kopf.Patch, **_: Any) -> None:
        await reconcile(body, patch, connector_factory, retry_delay=retry_delay)

    @kopf.on.delete(*resource, registry=registry)
    async def delete_endpoint(body: kopf.Body, patch: kopf.Patch, **_: Any) -> None:
        await finalize(body, patch, connector_factory, retry_delay=retry_delay)

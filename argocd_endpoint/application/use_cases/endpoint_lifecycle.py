"""Use case driving an endpoint's external token through its lifecycle."""

from __future__ import annotations

import logging

from ...domain.entities import Endpoint, Session
from ...domain.value_objects import Condition, ExternalObservation
from ..exceptions import SecretNotFoundError
from ..ports import AccountsClientFactory, EndpointSecretStore, EventRecorder
from .resolve_connection import ConnectionResolver

logger = logging.getLogger(__name__)

NO_EXPIRATION = 0


class EndpointConnector:
    """Connect step: opens a per-pass external client for an endpoint."""

    def __init__(
        self,
        resolver: ConnectionResolver,
        secrets: EndpointSecretStore,
        client_factory: AccountsClientFactory,
        recorder: EventRecorder,
    ) -> None:
        """
        Initialize the connector.

        Args:
            resolver: Produces an authenticated session.
            secrets: Store for the endpoint token secret.
            client_factory: Builds accounts clients for the session's server.
            recorder: Sink for observability events.
        """
        self._resolver = resolver
        self._secrets = secrets
        self._client_factory = client_factory
        self._recorder = recorder

    async def connect(self, endpoint: Endpoint) -> EndpointExternal:
        """
        Resolve a session for this pass.

        Any error aborts the pass and is handed back to the scheduler.
        """
        session = await self._resolver.resolve(endpoint)
        return EndpointExternal(
            session=session,
            secrets=self._secrets,
            client_factory=self._client_factory,
            recorder=self._recorder,
        )


class EndpointExternal:
    """
    Observes, then creates, updates or deletes the token secret of an endpoint.

    Bound to the session of a single reconciliation pass.
    """

    def __init__(
        self,
        *,
        session: Session,
        secrets: EndpointSecretStore,
        client_factory: AccountsClientFactory,
        recorder: EventRecorder,
    ) -> None:
        self._session = session
        self._secrets = secrets
        self._client_factory = client_factory
        self._recorder = recorder

    @property
    def session(self) -> Session:
        """Session resolved at connect time."""
        return self._session

    async def observe(self, endpoint: Endpoint) -> ExternalObservation:
        """The token exists if its secret holds a non-empty value."""
        token = await self._secrets.get(endpoint.write_secret_to_ref)

        if token:
            endpoint.set_conditions(Condition.available())
            return ExternalObservation(resource_exists=True, resource_up_to_date=True)

        return ExternalObservation(resource_exists=False, resource_up_to_date=True)

    async def create(self, endpoint: Endpoint) -> None:
        """Mint a non-expiring token and store it in the endpoint secret."""
        endpoint.set_conditions(Condition.creating())
        ref = endpoint.write_secret_to_ref

        logger.info("No token secret found for endpoint %s, generating one", endpoint.name)
        client = self._client_factory(
            server_url=self._session.server_url,
            user_agent=self._session.user_agent,
            debug=self._session.debug,
        )
        token = await client.create_token_for_account(
            self._session.auth_token,
            endpoint.account,
            NO_EXPIRATION,
        )
        logger.debug("Generated argocd token for account %s", endpoint.account)
        self._recorder.normal(
            endpoint,
            "TokenCreated",
            f"Generated argocd token for account: {endpoint.account}",
        )

        try:
            await self._secrets.create(ref, token, self._session.server_url)
        except Exception:
            # The minted token is not revoked and stays on the ArgoCD server.
            logger.error(
                "Token for account %s was generated but could not be saved",
                endpoint.account,
            )
            raise

        secret_name = ref.name if ref else ""
        logger.debug("Saved argocd token for account %s into secret %s", endpoint.account, secret_name)
        self._recorder.normal(
            endpoint,
            "TokenSaved",
            f"Saved argocd token for account '{endpoint.account}' into '{secret_name}' secret",
        )

    async def update(self, endpoint: Endpoint) -> None:
        """Endpoints have no mutable fields once created."""

    async def delete(self, endpoint: Endpoint) -> None:
        """
        Delete the token secret.

        Idempotent: a secret that is already gone counts as deleted. The token
        is not revoked on the ArgoCD server.
        """
        endpoint.set_conditions(Condition.deleting())
        ref = endpoint.write_secret_to_ref

        secret_name = ref.name if ref else ""
        logger.debug("Deleting argocd token secret %s for account %s", secret_name, endpoint.account)
        try:
            await self._secrets.delete(ref)
        except SecretNotFoundError:
            logger.info("Token secret %s for endpoint %s is already gone", secret_name, endpoint.name)
            return

        self._recorder.normal(
            endpoint,
            "TokenDeleted",
            f"Deleted argocd token for account '{endpoint.account}' into '{secret_name}' secret",
        )

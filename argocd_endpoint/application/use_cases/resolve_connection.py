"""Use case resolving an authenticated ArgoCD session for an endpoint."""

import logging

from ...domain.entities import DEFAULT_USER_AGENT, Endpoint, Session
from ...domain.exceptions import NoProviderConfigError
from ...domain.services import AdminSecretSelector
from ..ports import AccountsClientFactory, ConnectionProfileRepository, SecretReader

logger = logging.getLogger(__name__)

ADMIN_USERNAME = "admin"


class ConnectionResolver:
    """
    Turns an endpoint into a fresh ArgoCD session.

    Runs once per reconciliation pass; sessions are never cached.
    """

    def __init__(
        self,
        profiles: ConnectionProfileRepository,
        secrets: SecretReader,
        client_factory: AccountsClientFactory,
        *,
        selector: AdminSecretSelector | None = None,
        username: str = ADMIN_USERNAME,
    ) -> None:
        """
        Initialize the resolver.

        Args:
            profiles: Repository of ProviderConfig resources.
            secrets: Reader for the admin password secret.
            client_factory: Builds an accounts client for the profile's server.
            selector: Admin secret selection rules.
            username: ArgoCD user to log in as.
        """
        self._profiles = profiles
        self._secrets = secrets
        self._client_factory = client_factory
        self._selector = selector or AdminSecretSelector()
        self._username = username

    async def resolve(self, endpoint: Endpoint) -> Session:
        """
        Log in to the ArgoCD server the endpoint's ProviderConfig points at.

        Returns:
            Session holding the server address and bearer token.

        Raises:
            NoProviderConfigError: If the endpoint has no provider config reference.
            ProfileFetchFailedError: If the ProviderConfig cannot be fetched.
            UnsupportedCredentialSourceError: If credentials are not secret based.
            SecretNotFoundError: If the admin password secret does not exist.
            MissingServerURLError: If the profile has no server URL.
            AuthFailedError: If the login is rejected.
        """
        if not endpoint.provider_config_name:
            msg = f"providerConfigRef is not given for endpoint {endpoint.name}"
            raise NoProviderConfigError(msg)

        profile = await self._profiles.get(endpoint.provider_config_name)
        selector = self._selector.select(profile)
        logger.debug("Reading admin password from secret %s", selector)
        password = await self._secrets.read_key(selector)

        user_agent = profile.user_agent or DEFAULT_USER_AGENT
        client = self._client_factory(
            server_url=profile.server_url,
            user_agent=user_agent,
            debug=profile.debug_client,
        )
        token = await client.create_session(self._username, password)
        logger.info("Created ArgoCD session on %s for endpoint %s", profile.server_url, endpoint.name)

        return Session(
            server_url=profile.server_url,
            user_agent=user_agent,
            auth_token=token,
            debug=profile.debug_client,
        )

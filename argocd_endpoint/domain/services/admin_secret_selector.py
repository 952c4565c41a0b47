"""Selection of the secret that holds the ArgoCD admin password."""

from ..entities import ConnectionProfile
from ..exceptions import UnsupportedCredentialSourceError
from ..value_objects import SecretKeySelector

INITIAL_ADMIN_SECRET_NAME = "argocd-initial-admin-secret"
INITIAL_ADMIN_SECRET_NAMESPACE = "argocd"
BASIC_AUTH_PASSWORD_KEY = "password"


class AdminSecretSelector:
    """Domain service resolving a profile's admin password secret."""

    def __init__(self, default: SecretKeySelector | None = None) -> None:
        self._default = default or SecretKeySelector(
            name=INITIAL_ADMIN_SECRET_NAME,
            namespace=INITIAL_ADMIN_SECRET_NAMESPACE,
            key=BASIC_AUTH_PASSWORD_KEY,
        )

    @property
    def default(self) -> SecretKeySelector:
        """Selector used when the profile does not override anything."""
        return self._default

    def select(self, profile: ConnectionProfile) -> SecretKeySelector:
        """
        Work out which secret key holds the admin password.

        Args:
            profile: The connection profile being resolved.

        Returns:
            The default selector with the profile's non-blank overrides applied.

        Raises:
            UnsupportedCredentialSourceError: If the profile's credentials do
                not come from a secret.
        """
        credentials = profile.credentials
        if credentials is None:
            return self._default

        if not credentials.source.is_supported:
            msg = f"credentials source {credentials.source} is not currently supported"
            raise UnsupportedCredentialSourceError(msg)

        return self._default.with_overrides(credentials.secret_ref)

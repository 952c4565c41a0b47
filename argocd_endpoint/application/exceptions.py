"""Application layer exceptions.

Everything here is retryable: the scheduler is expected to run the pass again
on its normal backoff.
"""


class ApplicationError(Exception):
    """Base exception for application errors."""


class AuthError(ApplicationError):
    """Raised when talking to the ArgoCD server fails."""


class AuthFailedError(AuthError):
    """Raised when the admin login is rejected or cannot be performed."""


class MintFailedError(AuthError):
    """Raised when an account token cannot be generated."""


class StoreError(ApplicationError):
    """Raised when the cluster state store fails."""


class SecretFetchFailedError(StoreError):
    """Raised when reading a secret fails for a reason other than not-found."""


class SecretCreateFailedError(StoreError):
    """Raised when the endpoint secret cannot be created."""


class SecretDeleteFailedError(StoreError):
    """Raised when the endpoint secret cannot be deleted."""


class ProfileFetchFailedError(StoreError):
    """Raised when the referenced ProviderConfig cannot be fetched."""


class SecretNotFoundError(ApplicationError):
    """Raised when a secret does not exist."""

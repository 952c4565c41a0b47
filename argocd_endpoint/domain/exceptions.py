"""Domain exceptions.

Configuration problems are fatal: retrying a pass will not fix them until an
operator edits the offending resource.
"""


class DomainError(Exception):
    """Base exception for domain errors."""


class ConfigError(DomainError):
    """Raised when a resource or profile is misconfigured."""


class MissingServerURLError(ConfigError):
    """Raised when no ArgoCD server URL is configured."""


class NoProviderConfigError(ConfigError):
    """Raised when an endpoint does not reference a ProviderConfig."""


class UnsupportedCredentialSourceError(ConfigError):
    """Raised when a ProviderConfig uses a credential source other than Secret."""


class NoSecretReferenceError(ConfigError):
    """Raised when an endpoint secret reference is missing or incomplete."""


class InvalidEndpointError(ConfigError):
    """Raised when a resource payload cannot be turned into a domain entity."""

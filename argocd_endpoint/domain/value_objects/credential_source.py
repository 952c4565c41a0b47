"""Credential source value object."""

from enum import StrEnum


class CredentialSource(StrEnum):
    """Where a ProviderConfig takes its admin credentials from."""

    NONE = "None"
    SECRET = "Secret"
    ENVIRONMENT = "Environment"

    def __str__(self) -> str:
        return self.value

    @property
    def is_supported(self) -> bool:
        """Only secrets can currently back the admin password."""
        match self:
            case CredentialSource.SECRET:
                return True
            case CredentialSource.NONE | CredentialSource.ENVIRONMENT:
                return False

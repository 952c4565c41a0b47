"""Domain services - Stateless operations on domain objects."""

from .admin_secret_selector import (
    BASIC_AUTH_PASSWORD_KEY,
    INITIAL_ADMIN_SECRET_NAME,
    INITIAL_ADMIN_SECRET_NAMESPACE,
    AdminSecretSelector,
)

__all__ = [
    "BASIC_AUTH_PASSWORD_KEY",
    "INITIAL_ADMIN_SECRET_NAME",
    "INITIAL_ADMIN_SECRET_NAMESPACE",
    "AdminSecretSelector",
]

"""Infrastructure adapters - Implementations of application ports."""

from .argocd import ArgoCDAccountsClient
from .kubernetes import KubernetesConnectionProfileRepository, KubernetesSecretStore
from .operator import KopfEventRecorder

__all__ = [
    "ArgoCDAccountsClient",
    "KopfEventRecorder",
    "KubernetesConnectionProfileRepository",
    "KubernetesSecretStore",
]

"""Kubernetes adapters."""

from .client import create_core_api, create_custom_objects_api, load_kube_config
from .models import EndpointResource, ProviderConfigResource, parse_endpoint
from .provider_configs import KubernetesConnectionProfileRepository
from .secret_store import KubernetesSecretStore

__all__ = [
    "EndpointResource",
    "KubernetesConnectionProfileRepository",
    "KubernetesSecretStore",
    "ProviderConfigResource",
    "create_core_api",
    "create_custom_objects_api",
    "load_kube_config",
    "parse_endpoint",
]

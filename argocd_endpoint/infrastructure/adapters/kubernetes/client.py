"""Kubernetes API client bootstrap."""

import logging

from kubernetes import client, config

logger = logging.getLogger(__name__)


def load_kube_config(context: str | None = None) -> None:
    """Load in-cluster configuration, falling back to the local kubeconfig."""
    try:
        config.load_incluster_config()
        logger.info("Loaded in-cluster Kubernetes config")
    except config.ConfigException:
        config.load_kube_config(context=context)
        logger.info("Loaded kubeconfig (context: %s)", context or "current")


def create_core_api() -> client.CoreV1Api:
    """Create a CoreV1 API client from the loaded configuration."""
    return client.CoreV1Api()


def create_custom_objects_api() -> client.CustomObjectsApi:
    """Create a custom objects API client from the loaded configuration."""
    return client.CustomObjectsApi()

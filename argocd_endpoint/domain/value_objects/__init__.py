"""Domain value objects - Immutable objects defined by their attributes."""

from .condition import Condition, ConditionReason, ConditionStatus, ConditionType
from .credential_source import CredentialSource
from .observation import ExternalObservation
from .secret_reference import BEARER_TOKEN_KEY, TARGET_URL_KEY, SecretKeySelector

__all__ = [
    "BEARER_TOKEN_KEY",
    "TARGET_URL_KEY",
    "Condition",
    "ConditionReason",
    "ConditionStatus",
    "ConditionType",
    "CredentialSource",
    "ExternalObservation",
    "SecretKeySelector",
]

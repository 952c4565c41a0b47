"""Pydantic models for the Endpoint and ProviderConfig custom resources."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ....domain.entities import ConnectionProfile, Endpoint, ProviderCredentials
from ....domain.exceptions import InvalidEndpointError, UnsupportedCredentialSourceError
from ....domain.value_objects import (
    BEARER_TOKEN_KEY,
    Condition,
    ConditionReason,
    ConditionStatus,
    ConditionType,
    CredentialSource,
    SecretKeySelector,
)

logger = logging.getLogger(__name__)


def _credential_source(value: str) -> CredentialSource:
    try:
        return CredentialSource(value)
    except ValueError as e:
        msg = f"credentials source {value} is not currently supported"
        raise UnsupportedCredentialSourceError(msg) from e


class ResourceModel(BaseModel):
    """Base model accepting camelCase keys and ignoring unknown fields."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ObjectMetaModel(ResourceModel):
    """The subset of ``metadata`` the operator reads."""

    name: str
    namespace: str | None = None
    uid: str | None = None


class SecretKeySelectorModel(ResourceModel):
    """A ``{name, namespace, key}`` secret reference."""

    name: str = ""
    namespace: str = ""
    key: str = ""

    def to_domain(self, *, default_key: str = "") -> SecretKeySelector:
        return SecretKeySelector(
            name=self.name,
            namespace=self.namespace,
            key=self.key or default_key,
        )


class ProviderCredentialsModel(ResourceModel):
    source: str
    secret_ref: SecretKeySelectorModel | None = Field(default=None, alias="secretRef")


class ProviderConfigSpecModel(ResourceModel):
    server_url: str = Field(default="", alias="serverUrl")
    user_agent: str = Field(default="", alias="userAgent")
    debug_client: bool | None = Field(default=None, alias="debugClient")
    credentials: ProviderCredentialsModel | None = None


class ProviderConfigResource(ResourceModel):
    """A ``ProviderConfig`` object as returned by the API server."""

    metadata: ObjectMetaModel
    spec: ProviderConfigSpecModel

    def to_domain(self) -> ConnectionProfile:
        """Convert to a connection profile."""
        credentials = None
        if self.spec.credentials is not None:
            secret_ref = self.spec.credentials.secret_ref
            credentials = ProviderCredentials(
                source=_credential_source(self.spec.credentials.source),
                secret_ref=secret_ref.to_domain() if secret_ref else None,
            )

        return ConnectionProfile(
            name=self.metadata.name,
            server_url=self.spec.server_url,
            user_agent=self.spec.user_agent,
            debug_client=self.spec.debug_client is True,
            credentials=credentials,
        )


class EndpointParametersModel(ResourceModel):
    id: str | None = None
    account: str
    write_secret_to_ref: SecretKeySelectorModel | None = Field(default=None, alias="writeSecretToRef")


class ProviderConfigReferenceModel(ResourceModel):
    name: str = ""


class EndpointSpecModel(ResourceModel):
    for_provider: EndpointParametersModel = Field(alias="forProvider")
    provider_config_ref: ProviderConfigReferenceModel | None = Field(default=None, alias="providerConfigRef")


class ConditionModel(ResourceModel):
    type: str
    status: str
    reason: str = ""
    last_transition_time: datetime | None = Field(default=None, alias="lastTransitionTime")

    def to_domain(self) -> Condition | None:
        """Convert to a domain condition; foreign conditions yield None."""
        try:
            return Condition(
                type=ConditionType(self.type),
                status=ConditionStatus(self.status),
                reason=ConditionReason(self.reason),
                last_transition_time=self.last_transition_time or datetime.now(UTC),
            )
        except ValueError:
            logger.debug("Ignoring unrecognised condition %s/%s", self.type, self.reason)
            return None


class EndpointStatusModel(ResourceModel):
    conditions: list[ConditionModel] = Field(default_factory=list)


class EndpointResource(ResourceModel):
    """An ``Endpoint`` object as delivered by the operator framework."""

    metadata: ObjectMetaModel
    spec: EndpointSpecModel
    status: EndpointStatusModel = Field(default_factory=EndpointStatusModel)

    def to_domain(self) -> Endpoint:
        """Convert to an endpoint entity."""
        params = self.spec.for_provider
        ref = params.write_secret_to_ref
        provider_ref = self.spec.provider_config_ref

        endpoint = Endpoint(
            name=self.metadata.name,
            account=params.account,
            write_secret_to_ref=ref.to_domain(default_key=BEARER_TOKEN_KEY) if ref else None,
            provider_config_name=provider_ref.name if provider_ref and provider_ref.name else None,
        )
        if params.id:
            endpoint.id = params.id

        conditions = (c.to_domain() for c in self.status.conditions)
        endpoint.conditions = [c for c in conditions if c is not None]
        return endpoint


def parse_endpoint(body: dict[str, Any]) -> Endpoint:
    """
    Build an endpoint entity from a raw resource body.

    Raises:
        InvalidEndpointError: If the body does not match the Endpoint schema.
    """
    try:
        return EndpointResource.model_validate(body).to_domain()
    except ValidationError as e:
        name = body.get("metadata", {}).get("name", "unknown")
        msg = f"invalid Endpoint {name}: {e}"
        raise InvalidEndpointError(msg) from e

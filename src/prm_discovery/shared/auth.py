from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ProtectedResourceMetadata(BaseModel):
    """RFC 9728 OAuth 2.0 Protected Resource Metadata.
    See https://datatracker.ietf.org/doc/html/rfc9728#section-2

    ``resource`` is kept as the exact string the server sent so it can be
    compared byte-for-byte with the identifier the client expects. Fields that
    are not part of the registry below are preserved as extras.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    resource: str
    authorization_servers: list[str] = Field(default_factory=list)
    jwks_uri: str | None = None
    scopes_supported: list[str] | None = None
    bearer_methods_supported: list[str] | None = None
    resource_signing_alg_values_supported: list[str] | None = None
    resource_name: str | None = None
    resource_documentation: str | None = None
    resource_policy_uri: str | None = None
    resource_tos_uri: str | None = None
    # tls_client_certificate_bound_access_tokens default is False, but ommited here for clarity
    tls_client_certificate_bound_access_tokens: bool | None = None
    # see RFC9396 for the shape of each entry
    authorization_details_types_supported: list[Any] | None = None
    dpop_signing_alg_values_supported: list[str] | None = None
    # dpop_bound_access_tokens_required default is False, but ommited here for clarity
    dpop_bound_access_tokens_required: bool | None = None

"""
OAuth 2.0 Protected Resource Metadata discovery for HTTPX.

Locates and validates the metadata a resource server advertises in its
WWW-Authenticate challenge or at its RFC 9728 well-known location.
"""

from prm_discovery.client.auth.discovery import (
    fetch_protected_resource_metadata,
    get_protected_resource_metadata_from_header,
    get_protected_resource_metadata_from_id,
)
from prm_discovery.client.auth.www_authenticate import (
    Challenge,
    extract_field_from_www_auth,
    extract_resource_metadata_from_www_auth,
    extract_scope_from_www_auth,
    parse_www_authenticate,
)

__all__ = [
    "Challenge",
    "extract_field_from_www_auth",
    "extract_resource_metadata_from_www_auth",
    "extract_scope_from_www_auth",
    "fetch_protected_resource_metadata",
    "get_protected_resource_metadata_from_header",
    "get_protected_resource_metadata_from_id",
    "parse_www_authenticate",
]

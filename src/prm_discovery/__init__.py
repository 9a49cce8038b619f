"""Discovery and validation of OAuth 2.0 Protected Resource Metadata ([RFC 9728](https://datatracker.ietf.org/doc/html/rfc9728)).

A client that receives a 401 from a protected resource can use this package to
find out which authorization servers issue tokens for that resource:

```python
import httpx

from prm_discovery import get_protected_resource_metadata_from_header

async with httpx.AsyncClient() as client:
    response = await client.get("https://api.example.com/mcp")
    if response.status_code == 401:
        prm = await get_protected_resource_metadata_from_header(
            response, client, expected_resource="https://api.example.com/mcp"
        )
        if prm is not None:
            print(prm.authorization_servers)
```

A metadata URL that is already known can be checked directly with
[`fetch_protected_resource_metadata`][prm_discovery.fetch_protected_resource_metadata].
"""

from prm_discovery.client.auth import (
    Challenge,
    extract_field_from_www_auth,
    extract_resource_metadata_from_www_auth,
    extract_scope_from_www_auth,
    fetch_protected_resource_metadata,
    get_protected_resource_metadata_from_header,
    get_protected_resource_metadata_from_id,
    parse_www_authenticate,
)
from prm_discovery.settings import DiscoverySettings, get_settings
from prm_discovery.shared._httpx_utils import create_prm_http_client
from prm_discovery.shared.auth import ProtectedResourceMetadata
from prm_discovery.shared.exceptions import (
    InsecureTransportError,
    InvalidAuthServerURLError,
    MalformedDocumentError,
    ResourceMetadataError,
    ResourceMismatchError,
    TransportFailureError,
    UnexpectedContentTypeError,
    UnexpectedStatusError,
)
from prm_discovery.utilities.logging import configure_logging

__all__ = [
    "Challenge",
    "DiscoverySettings",
    "InsecureTransportError",
    "InvalidAuthServerURLError",
    "MalformedDocumentError",
    "ProtectedResourceMetadata",
    "ResourceMetadataError",
    "ResourceMismatchError",
    "TransportFailureError",
    "UnexpectedContentTypeError",
    "UnexpectedStatusError",
    "configure_logging",
    "create_prm_http_client",
    "extract_field_from_www_auth",
    "extract_resource_metadata_from_www_auth",
    "extract_scope_from_www_auth",
    "fetch_protected_resource_metadata",
    "get_protected_resource_metadata_from_header",
    "get_protected_resource_metadata_from_id",
    "get_settings",
    "parse_www_authenticate",
]

"""OAuth 2.0 Protected Resource Metadata discovery (RFC 9728).

The metadata document is served by the resource and referenced from a header
the resource controls, so nothing in it is trusted until every check below has
passed. Checks run in a fixed order and the first failure is raised; callers
never receive partially validated metadata.
"""

import logging

import httpx
from pydantic import ValidationError

from prm_discovery.client.auth.www_authenticate import HeaderSource, extract_resource_metadata_from_www_auth
from prm_discovery.settings import get_settings
from prm_discovery.shared._httpx_utils import create_prm_http_client
from prm_discovery.shared.auth import ProtectedResourceMetadata
from prm_discovery.shared.auth_utils import check_url_scheme, get_well_known_url, is_secure_transport
from prm_discovery.shared.exceptions import (
    InsecureTransportError,
    MalformedDocumentError,
    ResourceMismatchError,
    TransportFailureError,
    UnexpectedContentTypeError,
    UnexpectedStatusError,
)

logger = logging.getLogger(__name__)


def _is_json_media_type(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type == "application/json":
        return True
    # structured syntax suffix, RFC 6839
    return media_type.startswith("application/") and media_type.endswith("+json")


async def _read_body(response: httpx.Response, limit: int) -> bytes:
    body = bytearray()
    async for chunk in response.aiter_bytes():
        body.extend(chunk)
        if len(body) > limit:
            raise MalformedDocumentError(f"response body exceeds {limit} bytes")
    return bytes(body)


async def _get_metadata_document(
    metadata_url: str,
    http_client: httpx.AsyncClient,
    max_body_bytes: int,
) -> ProtectedResourceMetadata:
    try:
        async with http_client.stream("GET", metadata_url) as response:
            if response.status_code != 200:
                raise UnexpectedStatusError(response.status_code, response.reason_phrase)

            content_type = response.headers.get("content-type", "")
            if not _is_json_media_type(content_type):
                raise UnexpectedContentTypeError(content_type)

            content = await _read_body(response, max_body_bytes)
    except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as e:
        # UnicodeError: host fails IDNA encoding
        raise TransportFailureError(metadata_url, e) from e

    try:
        return ProtectedResourceMetadata.model_validate_json(content)
    except ValidationError as e:
        raise MalformedDocumentError(str(e)) from e


async def fetch_protected_resource_metadata(
    metadata_url: str,
    http_client: httpx.AsyncClient | None,
    expected_resource: str,
    *,
    max_body_bytes: int | None = None,
) -> ProtectedResourceMetadata:
    """Fetch and validate the protected resource metadata at ``metadata_url``.

    Args:
        metadata_url: URL of the metadata document; must use https
        http_client: Client used for the single GET. When None, a client from
            create_prm_http_client() is opened for the request and closed afterwards.
        expected_resource: Resource identifier the caller already trusts, usually
            the URL it originally requested. The document's ``resource`` must be
            exactly this string.
        max_body_bytes: Largest accepted document; defaults to PRM_MAX_BODY_BYTES.

    Returns:
        Validated metadata

    Raises:
        InsecureTransportError: metadata_url is not https; no request is made
        TransportFailureError: The request failed (connection, DNS, TLS, timeout)
        UnexpectedStatusError: The response status is not 200
        UnexpectedContentTypeError: The response is not JSON
        MalformedDocumentError: The body is too large, not JSON, or not a metadata object
        ResourceMismatchError: The document describes a different resource
        InvalidAuthServerURLError: An authorization server URL is unparseable or not https
    """
    if not is_secure_transport(metadata_url):
        raise InsecureTransportError(metadata_url)

    if max_body_bytes is None:
        max_body_bytes = get_settings().max_body_bytes

    logger.debug("Fetching protected resource metadata: %s", metadata_url)
    if http_client is None:
        async with create_prm_http_client() as client:
            prm = await _get_metadata_document(metadata_url, client, max_body_bytes)
    else:
        prm = await _get_metadata_document(metadata_url, http_client, max_body_bytes)

    if prm.resource != expected_resource:
        raise ResourceMismatchError(prm.resource, expected_resource)

    # first non-https entry fails
    for url in prm.authorization_servers:
        check_url_scheme(url)

    logger.debug("Protected resource metadata validated for %s", prm.resource)
    return prm


async def get_protected_resource_metadata_from_header(
    headers: HeaderSource,
    http_client: httpx.AsyncClient | None,
    expected_resource: str | None = None,
) -> ProtectedResourceMetadata | None:
    """Discover metadata from the WWW-Authenticate challenge of a 401 response.

    Args:
        headers: The 401 response, its headers, or a plain header mapping
        http_client: Client used to fetch the document
        expected_resource: Resource identifier the document must name. Defaults
            to the advertised metadata URL itself.

    Returns:
        The validated metadata, or None when no Bearer challenge advertises a
        ``resource_metadata`` URL. A URL that is advertised but fails validation
        raises instead of returning None.
    """
    metadata_url = extract_resource_metadata_from_www_auth(headers)
    if metadata_url is None:
        logger.debug("No resource_metadata in WWW-Authenticate")
        return None

    if expected_resource is None:
        expected_resource = metadata_url
    return await fetch_protected_resource_metadata(metadata_url, http_client, expected_resource)


async def get_protected_resource_metadata_from_id(
    resource_id: str,
    http_client: httpx.AsyncClient | None,
) -> ProtectedResourceMetadata:
    """Fetch metadata from the well-known location of ``resource_id`` (RFC 9728 Section 3.1).

    The document must name ``resource_id`` as its resource.
    """
    metadata_url = get_well_known_url(resource_id)
    return await fetch_protected_resource_metadata(metadata_url, http_client, resource_id)

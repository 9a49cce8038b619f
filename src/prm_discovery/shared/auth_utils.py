"""URL utilities for OAuth 2.0 Protected Resource Metadata (RFC 9728)."""

from urllib.parse import urlsplit, urlunsplit

from prm_discovery.shared.exceptions import InvalidAuthServerURLError

WELL_KNOWN_SUFFIX = "oauth-protected-resource"


def is_secure_transport(url: str) -> bool:
    """Return True if ``url`` is an absolute https URL with a host.

    The scheme comparison is case-insensitive. Unparseable URLs are not secure.
    """
    try:
        parsed = urlsplit(url)
    except ValueError:
        return False
    return parsed.scheme.lower() == "https" and bool(parsed.netloc)


def check_url_scheme(url: str) -> None:
    """Ensure a URL advertised in metadata is safe to hand to a user agent.

    Only https is allowed; anything else (``javascript:``, ``data:``, plain
    http, relative references) is rejected.

    Raises:
        InvalidAuthServerURLError: If the URL cannot be parsed or has another scheme
    """
    try:
        parsed = urlsplit(url)
    except ValueError as e:
        raise InvalidAuthServerURLError(url, detail=str(e)) from e

    if parsed.scheme.lower() != "https":
        raise InvalidAuthServerURLError(url, scheme=parsed.scheme)
    if not parsed.netloc:
        raise InvalidAuthServerURLError(url, detail="missing host")


def get_well_known_url(resource: str, external: bool = True, suffix: str = WELL_KNOWN_SUFFIX) -> str:
    """Get the metadata URL for a resource identifier via RFC 9728 Section 3.1.

    The well-known segment goes between the host and any path component:
    ``https://api.example.com/v1`` becomes
    ``https://api.example.com/.well-known/oauth-protected-resource/v1``.

    Args:
        resource: Resource identifier
        external: Return the full URL, or only the path when False
        suffix: Well-known URI suffix

    Returns:
        Metadata URL (query and fragment are dropped)
    """
    parsed = urlsplit(resource)
    path = parsed.path
    if path and path != "/":
        url_path = f"/.well-known/{suffix}{path}"
    else:
        url_path = f"/.well-known/{suffix}"
    if not external:
        return url_path
    return urlunsplit((parsed.scheme, parsed.netloc, url_path, "", ""))

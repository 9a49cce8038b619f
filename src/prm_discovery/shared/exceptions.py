"""Errors raised while discovering protected resource metadata.

Every error carries the offending value both as an attribute and inside its
message so callers can branch on the type and still log something useful.
"""


class ResourceMetadataError(Exception):
    """Base class for all protected resource metadata discovery failures."""


class InsecureTransportError(ResourceMetadataError):
    """The metadata URL does not use the ``https`` scheme."""

    def __init__(self, url: str):
        super().__init__(f'resource URL "{url}" does not use HTTPS')
        self.url = url


class TransportFailureError(ResourceMetadataError):
    """The GET request failed before a response was received.

    Covers connection, DNS, TLS and timeout failures reported by the HTTP
    client. The original exception is available as ``cause`` and as
    ``__cause__``.
    """

    def __init__(self, url: str, cause: BaseException):
        super().__init__(f'Get "{url}": {cause}')
        self.url = url
        self.cause = cause


class UnexpectedStatusError(ResourceMetadataError):
    def __init__(self, status_code: int, reason_phrase: str):
        super().__init__(f"bad status {status_code} {reason_phrase}".rstrip())
        self.status_code = status_code
        self.reason_phrase = reason_phrase


class UnexpectedContentTypeError(ResourceMetadataError):
    def __init__(self, content_type: str):
        super().__init__(f'bad content type "{content_type}"')
        self.content_type = content_type


class MalformedDocumentError(ResourceMetadataError):
    """The response body is not a valid metadata document."""

    def __init__(self, detail: str):
        super().__init__(f"decoding ProtectedResourceMetadata: {detail}")
        self.detail = detail


class ResourceMismatchError(ResourceMetadataError):
    """The document describes a different resource than the one requested."""

    def __init__(self, got: str, want: str):
        super().__init__(f'got metadata resource "{got}", want "{want}"')
        self.got = got
        self.want = want


class InvalidAuthServerURLError(ResourceMetadataError):
    """An ``authorization_servers`` entry is unparseable or not https."""

    def __init__(self, url: str, scheme: str | None = None, detail: str | None = None):
        if detail is not None:
            message = f'invalid authorization server URL "{url}": {detail}'
        else:
            message = f'URL has disallowed scheme "{scheme}"'
        super().__init__(message)
        self.url = url
        self.scheme = scheme
        self.detail = detail

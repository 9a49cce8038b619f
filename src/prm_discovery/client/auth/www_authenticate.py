"""WWW-Authenticate challenge parsing (RFC 7235 Section 4.1, RFC 6750 Section 3).

A header value holds one or more challenges, each an auth-scheme followed by
either a token68 credential or a comma-separated list of ``name=value``
parameters. Parameter values may be quoted strings containing commas, ``=``
and backslash escapes, so the value is walked with a small scanner instead of
being split on commas.

The parser is lenient: characters that cannot start a token are skipped and an
unterminated quoted string runs to the end of the value. An unquoted value runs
to the next comma or whitespace, so bare URLs survive intact. It never raises.
"""

import enum
import string
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import TypeAlias

import httpx

__all__ = [
    "Challenge",
    "HeaderSource",
    "extract_field_from_www_auth",
    "extract_resource_metadata_from_www_auth",
    "extract_scope_from_www_auth",
    "parse_www_authenticate",
    "www_authenticate_values",
]

HeaderSource: TypeAlias = httpx.Response | httpx.Headers | Mapping[str, str] | None

_TCHARS = frozenset("!#$%&'*+-.^_`|~" + string.ascii_letters + string.digits)
_TOKEN68_CHARS = frozenset("-._~+/" + string.ascii_letters + string.digits)
_WHITESPACE = " \t"


@dataclass(frozen=True)
class Challenge:
    """A single authentication challenge.

    ``params`` keys are lower-cased; when a parameter repeats, the first value wins.
    """

    scheme: str
    params: dict[str, str] = field(default_factory=dict)
    token68: str | None = None

    def is_scheme(self, scheme: str) -> bool:
        return self.scheme.lower() == scheme.lower()


class _State(enum.Enum):
    SCHEME = "scheme"
    KEY = "key"
    VALUE = "value"
    QUOTED_VALUE = "quoted_value"


class _Scanner:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return "" if self.at_end() else self.text[self.pos]

    def skip(self, chars: str) -> None:
        while not self.at_end() and self.text[self.pos] in chars:
            self.pos += 1

    def read_while(self, chars: frozenset[str] | str) -> str:
        start = self.pos
        while not self.at_end() and self.text[self.pos] in chars:
            self.pos += 1
        return self.text[start : self.pos]

    def read_until(self, chars: str) -> str:
        start = self.pos
        while not self.at_end() and self.text[self.pos] not in chars:
            self.pos += 1
        return self.text[start : self.pos]

    def read_quoted(self) -> str:
        self.pos += 1  # opening quote
        chars: list[str] = []
        while not self.at_end():
            ch = self.text[self.pos]
            self.pos += 1
            if ch == "\\" and not self.at_end():
                chars.append(self.text[self.pos])
                self.pos += 1
            elif ch == '"':
                break
            else:
                chars.append(ch)
        return "".join(chars)

    def read_token68(self) -> str | None:
        """Read a token68 credential if one is the whole challenge body."""
        start = self.pos
        body = self.read_while(_TOKEN68_CHARS)
        if not body:
            return None
        padding = self.read_while("=")
        end = self.pos
        self.skip(_WHITESPACE)
        if self.at_end() or self.peek() == ",":
            self.pos = end
            return body + padding
        self.pos = start
        return None


def _parse_value(value: str) -> list[Challenge]:
    scanner = _Scanner(value)
    challenges: list[Challenge] = []
    scheme: str | None = None
    params: dict[str, str] = {}
    token68: str | None = None
    key = ""
    state = _State.SCHEME

    def flush() -> None:
        if scheme is not None:
            challenges.append(Challenge(scheme=scheme, params=params, token68=token68))

    while True:
        if state in (_State.SCHEME, _State.KEY):
            scanner.skip(_WHITESPACE + ",")
            if scanner.at_end():
                break

        if state is _State.SCHEME:
            name = scanner.read_while(_TCHARS)
            if not name:
                scanner.pos += 1
                continue
            flush()
            scheme, params, token68 = name, {}, None
            scanner.skip(_WHITESPACE)
            token68 = scanner.read_token68()
            state = _State.KEY

        elif state is _State.KEY:
            start = scanner.pos
            name = scanner.read_while(_TCHARS)
            if not name:
                scanner.pos += 1
                continue
            scanner.skip(_WHITESPACE)
            if scanner.peek() != "=":
                # a bare token after the parameters opens the next challenge
                scanner.pos = start
                state = _State.SCHEME
                continue
            scanner.pos += 1
            scanner.skip(_WHITESPACE)
            key = name.lower()
            state = _State.QUOTED_VALUE if scanner.peek() == '"' else _State.VALUE

        elif state is _State.VALUE:
            params.setdefault(key, scanner.read_until(_WHITESPACE + ","))
            state = _State.KEY

        else:
            params.setdefault(key, scanner.read_quoted())
            state = _State.KEY

    flush()
    return challenges


def parse_www_authenticate(values: Iterable[str]) -> list[Challenge]:
    """Parse WWW-Authenticate header values into challenges, in header order.

    Args:
        values: Raw header values; a response may carry the header more than once

    Returns:
        Every challenge found, possibly empty
    """
    challenges: list[Challenge] = []
    for value in values:
        challenges.extend(_parse_value(value))
    return challenges


def www_authenticate_values(headers: HeaderSource) -> list[str]:
    """Collect the raw WWW-Authenticate values from a response or header mapping."""
    if headers is None:
        return []
    if isinstance(headers, httpx.Response):
        headers = headers.headers
    if isinstance(headers, httpx.Headers):
        return headers.get_list("www-authenticate")
    return [value for name, value in headers.items() if name.lower() == "www-authenticate"]


def extract_field_from_www_auth(headers: HeaderSource, field_name: str, auth_scheme: str = "Bearer") -> str | None:
    """Return a parameter of the first ``auth_scheme`` challenge that carries it."""
    field_name = field_name.lower()
    for challenge in parse_www_authenticate(www_authenticate_values(headers)):
        if challenge.is_scheme(auth_scheme) and field_name in challenge.params:
            return challenge.params[field_name]
    return None


def extract_resource_metadata_from_www_auth(headers: HeaderSource) -> str | None:
    """Extract the RFC 9728 ``resource_metadata`` URL from a Bearer challenge."""
    return extract_field_from_www_auth(headers, "resource_metadata") or None


def extract_scope_from_www_auth(headers: HeaderSource) -> str | None:
    """Extract the space-delimited ``scope`` of a Bearer challenge (RFC 6750 Section 3)."""
    return extract_field_from_www_auth(headers, "scope")

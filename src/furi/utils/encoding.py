"""Percent-encoding helpers for file URI pathnames.

The character sets follow the WHATWG URL standard and the ECMAScript
``encodeURI``/``encodeURIComponent`` functions so that URIs produced here
are byte-identical to the ones produced by browsers and Node.js.
"""

import re
from urllib.parse import quote, unquote

# encodeURIComponent: everything except unreserved marks is escaped
_COMPONENT_SAFE = "!~*'()"

# encodeURI without "?" and "#": both are escaped by the pathname setter
_URI_PATH_SAFE = ";,/:@&=+$!*'()"

# Complement of the WHATWG path percent-encode set (printable ASCII only).
# "%" is kept so existing escapes survive canonicalization.
_PATHNAME_SAFE = "!$%&'()*+,-./:;=@[]^_|~"

# Complement of the WHATWG query/fragment percent-encode sets
_QUERY_SAFE = "!$%&'()*+,-./:;=?@[]\\^_`{|}~"

_SLASH_RUN_RE = re.compile(r"/{2,}")
_DRIVE_LETTER_RE = re.compile(r"^[A-Za-z]:$")

_SINGLE_DOT_SEGMENTS = frozenset({".", "%2e"})
_DOUBLE_DOT_SEGMENTS = frozenset({"..", ".%2e", "%2e.", "%2e%2e"})


def encode_uri_component(component: str) -> str:
    """Percent-encode a single path component.

    Every reserved character, including ``/`` and ``%``, is escaped, so the
    result can never be interpreted as more than one segment.

    Example:
        >>> encode_uri_component("a/b c")
        'a%2Fb%20c'
    """
    return quote(component, safe=_COMPONENT_SAFE)


def encode_uri_path(path: str) -> str:
    """Percent-encode a ``/``-separated native path for use as a pathname.

    ``/`` is kept as the separator; ``%``, ``?``, ``#`` and control
    characters are escaped.

    Example:
        >>> encode_uri_path("/foo?bar/100%")
        '/foo%3Fbar/100%25'
    """
    return quote(path, safe=_URI_PATH_SAFE)


def decode_uri_component(component: str) -> str:
    """Decode percent escapes in a single segment.

    Raises:
        UnicodeDecodeError: If the escapes do not form valid UTF-8
    """
    return unquote(component, encoding="utf-8", errors="strict")


def encode_query(value: str) -> str:
    """Escape the characters of a query or fragment that a URI cannot hold."""
    return quote(value, safe=_QUERY_SAFE)


def collapse_slashes(pathname: str) -> str:
    """Collapse every run of ``/`` into a single ``/``."""
    if "//" not in pathname:
        return pathname
    return _SLASH_RUN_RE.sub("/", pathname)


def canonicalize_pathname(pathname: str) -> str:
    """Bring a raw pathname into the form the URL parser would serialize.

    - ``\\`` is a separator, as for every special URL scheme
    - a missing leading ``/`` is added
    - characters of the path percent-encode set are escaped, existing
      ``%XX`` escapes are left alone
    - ``.`` and ``..`` segments (including ``%2e`` spellings) are resolved

    Runs of ``/`` are NOT collapsed here; see ``collapse_slashes``.
    """
    pathname = pathname.replace("\\", "/")
    if not pathname.startswith("/"):
        pathname = f"/{pathname}"
    pathname = quote(pathname, safe=_PATHNAME_SAFE)
    return _remove_dot_segments(pathname)


def _remove_dot_segments(pathname: str) -> str:
    segments = pathname.split("/")[1:]
    output: list[str] = []
    last_index = len(segments) - 1
    for index, segment in enumerate(segments):
        lowered = segment.lower()
        if lowered in _DOUBLE_DOT_SEGMENTS:
            # A drive letter is the root of a file path and cannot be left
            if output and not (len(output) == 1 and _DRIVE_LETTER_RE.match(output[0])):
                output.pop()
            if index == last_index:
                output.append("")
        elif lowered in _SINGLE_DOT_SEGMENTS:
            if index == last_index:
                output.append("")
        else:
            output.append(segment)
    return "/" + "/".join(output)

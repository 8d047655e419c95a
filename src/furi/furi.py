"""Normalized absolute ``file:`` URIs.

``FileUri`` wraps a ``urllib.parse.SplitResult`` and enforces the invariants
of a file URI:

- the protocol is ``file:``
- the pathname never contains consecutive slashes (``a//b``)
- the pathname does not contain ``.`` or ``..`` segments
- the username, password and port are always empty

A single trailing slash is allowed and marks a directory. A non-empty host
names a network share (Windows UNC paths), an empty host means the local
machine. Hosts are lower-cased, and one holding a forbidden code point
(space, ``<``, ``%``, ...) is rejected. A drive letter in the host position
(``file://C:/foo``) is read as the first path segment.

The search and hash can hold any value. An empty query or fragment is the
same as none: ``file:///a?#`` serializes as ``file:///a``.

Instances are immutable. Operations that "modify" a URI return a new one.
"""

import re
from typing import TYPE_CHECKING, Union
from urllib.parse import SplitResult, urlsplit

from .errors import InvalidFileUriError
from .utils.encoding import (
    canonicalize_pathname,
    collapse_slashes,
    decode_uri_component,
    encode_query,
)

if TYPE_CHECKING:
    from .system import Platform

FILE_PROTOCOL = "file:"

UriLike = Union[str, "FileUri", SplitResult]

_DRIVE_HOST_REGEX = re.compile(r"^[A-Za-z][:|]$")
_DRIVE_PIPE_REGEX = re.compile(r"^/([A-Za-z])\|(?=/|$)")

# Forbidden domain code points of the WHATWG URL standard
_FORBIDDEN_HOST_REGEX = re.compile(r"[\x00-\x20#%/:<>?@\[\\\]^|\x7f]")
_IPV6_HOST_REGEX = re.compile(r"^\[[0-9a-f:.]+\]$")


def canonicalize_host(host: str, input: str | None = None) -> str:
    """Percent-decode, lower-case and validate a file URI host.

    ``""`` is the local machine. Bracketed IPv6 literals are accepted as-is.

    Args:
        host: Raw host, possibly percent-encoded
        input: Text reported in the error (default: ``host``)

    Raises:
        InvalidFileUriError: If the host holds a forbidden code point or
            an escape that is not valid UTF-8
    """
    input = host if input is None else input
    if _IPV6_HOST_REGEX.match(host.lower()):
        return host.lower()
    try:
        decoded = decode_uri_component(host).lower()
    except UnicodeDecodeError as e:
        raise InvalidFileUriError(input, f"malformed percent-encoding in host: {e}") from e
    match = _FORBIDDEN_HOST_REGEX.search(decoded)
    if match is not None:
        raise InvalidFileUriError(input, f"forbidden host code point {match.group(0)!r}")
    return decoded


def parse_file_uri(input: UriLike) -> SplitResult:
    """Parse an absolute file URI into canonical parts.

    The scheme and host are lower-cased, the path is percent-encoded and its
    dot segments are resolved. Runs of ``/`` are kept as-is: collapsing is
    the job of ``FileUri``.

    Args:
        input: Absolute URI string, ``FileUri`` or ``SplitResult``

    Returns:
        ``SplitResult`` with scheme ``"file"``

    Raises:
        InvalidFileUriError: If the input is not an absolute ``file:`` URI
    """
    if isinstance(input, FileUri):
        return input.parts
    text = input.geturl() if isinstance(input, SplitResult) else input
    if not isinstance(text, str):
        raise InvalidFileUriError(repr(text), "expected a string")

    try:
        parts = urlsplit(text)
        port = parts.port
    except ValueError as e:
        raise InvalidFileUriError(text, str(e)) from e

    if parts.scheme != "file":
        raise InvalidFileUriError(text)
    if parts.username is not None or parts.password is not None or port is not None:
        raise InvalidFileUriError(text, "file URIs cannot have credentials or a port")

    host = parts.netloc
    path = parts.path
    if _DRIVE_HOST_REGEX.match(host):
        # "file://C:/foo" names drive C:, not a server called "c"
        path = f"/{host[0]}:{path}"
        host = ""
    path = _DRIVE_PIPE_REGEX.sub(r"/\1:", path)

    return SplitResult(
        scheme="file",
        netloc=canonicalize_host(host, text),
        path=canonicalize_pathname(path),
        query=encode_query(parts.query),
        fragment=encode_query(parts.fragment),
    )


class FileUri:
    """A normalized absolute ``file://`` URI.

    Example:
        >>> uri = FileUri("file:///home//user/./project/")
        >>> uri.pathname
        '/home/user/project/'
        >>> uri.has_trailing_slash()
        True
    """

    __slots__ = ("_parts",)

    _parts: SplitResult

    def __init__(self, input: UriLike) -> None:
        """
        Parse and normalize a file URI.

        Args:
            input: Absolute URI string, ``FileUri`` or ``SplitResult``

        Raises:
            InvalidFileUriError: If the input is not an absolute ``file:`` URI
        """
        parts = parse_file_uri(input)
        self._parts = parts._replace(path=collapse_slashes(parts.path))

    @classmethod
    def _from_parts(cls, parts: SplitResult) -> "FileUri":
        instance = cls.__new__(cls)
        instance._parts = parts._replace(path=collapse_slashes(parts.path))
        return instance

    @property
    def protocol(self) -> str:
        return FILE_PROTOCOL

    @property
    def host(self) -> str:
        return self._parts.netloc

    @property
    def hostname(self) -> str:
        return self._parts.netloc

    @property
    def pathname(self) -> str:
        return self._parts.path

    @property
    def search(self) -> str:
        """``"?"`` followed by the query, or ``""`` when the query is empty."""
        query = self._parts.query
        return f"?{query}" if query else ""

    @property
    def hash(self) -> str:
        fragment = self._parts.fragment
        return f"#{fragment}" if fragment else ""

    @property
    def parts(self) -> SplitResult:
        """The underlying ``urllib.parse`` representation."""
        return self._parts

    @property
    def href(self) -> str:
        return f"file://{self.host}{self.pathname}{self.search}{self.hash}"

    def __str__(self) -> str:
        return self.href

    def __repr__(self) -> str:
        return f"FileUri({self.href!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileUri):
            return NotImplemented
        return self._parts == other._parts

    def __hash__(self) -> int:
        return hash(self._parts)

    def has_trailing_slash(self) -> bool:
        """Return True if the pathname ends with a directory marker.

        The root ``/`` does not count as a trailing slash.
        """
        return self.pathname != "/" and self.pathname.endswith("/")

    def with_trailing_slash(self, has_trailing_slash: bool) -> "FileUri":
        """Return a copy with the trailing slash added or removed.

        The root pathname is never changed.
        """
        pathname = self.pathname
        if pathname == "/":
            return self
        if pathname.endswith("/"):
            if not has_trailing_slash:
                return self.replace(pathname=pathname[:-1])
        elif has_trailing_slash:
            return self.replace(pathname=f"{pathname}/")
        return self

    def replace(
        self,
        *,
        protocol: str | None = None,
        host: str | None = None,
        pathname: str | None = None,
        search: str | None = None,
        hash: str | None = None,
    ) -> "FileUri":
        """Return a copy with the given components replaced.

        A ``protocol`` other than ``file:`` is ignored. A new ``pathname`` is
        canonicalized and its runs of ``/`` are collapsed.
        """
        # The only representable protocol is "file:", so `protocol` never
        # changes anything
        parts = self._parts
        if host is not None:
            parts = parts._replace(netloc=canonicalize_host(host))
        if pathname is not None:
            parts = parts._replace(path=canonicalize_pathname(collapse_slashes(pathname)))
        if search is not None:
            parts = parts._replace(query=encode_query(search.removeprefix("?")))
        if hash is not None:
            parts = parts._replace(fragment=encode_query(hash.removeprefix("#")))
        return FileUri._from_parts(parts)

    def decoded_segments(self) -> list[str]:
        """Split the pathname on ``/`` and percent-decode every segment.

        Raises:
            InvalidFileUriError: If an escape sequence is not valid UTF-8
        """
        try:
            return [decode_uri_component(segment) for segment in self.pathname.split("/")]
        except UnicodeDecodeError as e:
            raise InvalidFileUriError(self.href, f"malformed percent-encoding: {e}") from e

    def to_posix_path(self) -> str:
        from .posix import to_posix_path

        return to_posix_path(self)

    def to_windows_short_path(self) -> str:
        from .windows import to_windows_short_path

        return to_windows_short_path(self)

    def to_windows_long_path(self) -> str:
        from .windows import to_windows_long_path

        return to_windows_long_path(self)

    def to_sys_path(
        self,
        windows_long_path: bool = False,
        platform: "Platform | None" = None,
    ) -> str:
        from .system import to_sys_path

        return to_sys_path(self, windows_long_path, platform=platform)


def as_furi(input: UriLike) -> FileUri:
    """Normalize the input to a ``FileUri``.

    Args:
        input: URI string or instance to normalize

    Returns:
        ``FileUri`` instance

    Raises:
        InvalidFileUriError: If the input is not an absolute ``file:`` URI
    """
    if isinstance(input, FileUri):
        return input
    return FileUri(input)

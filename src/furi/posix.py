"""Conversion between file URIs and POSIX paths."""

from .errors import InvalidHostError, InvalidPathError
from .furi import FileUri, UriLike, as_furi
from .utils.encoding import encode_uri_path

_LOCAL_HOSTS = frozenset({"", "localhost"})

_ROOT = FileUri("file:///")


def to_posix_path(furi: UriLike) -> str:
    """Convert a file URI to a POSIX path.

    Requires the host to be either an empty string or ``"localhost"``.

    Args:
        furi: File URI to convert

    Returns:
        POSIX path

    Raises:
        InvalidHostError: If the URI names a remote host
        InvalidFileUriError: If the input is not a file URI

    Example:
        >>> to_posix_path("file:///dir/foo%20bar")
        '/dir/foo bar'
    """
    uri = as_furi(furi)
    if uri.host not in _LOCAL_HOSTS:
        raise InvalidHostError(uri.href, uri.host)
    return "/".join(uri.decoded_segments())


def from_posix_path(abs_path: str) -> FileUri:
    """Convert an absolute POSIX path to a file URI.

    Raises:
        InvalidPathError: If the path holds characters that have no UTF-8
            encoding (lone surrogates from undecodable file names)

    Example:
        >>> str(from_posix_path("/dir/foo?bar"))
        'file:///dir/foo%3Fbar'
    """
    try:
        pathname = encode_uri_path(abs_path)
    except UnicodeEncodeError as e:
        raise InvalidPathError(abs_path, f"not encodable as UTF-8: {e.reason}") from e
    return _ROOT.replace(pathname=pathname)

"""Path algebra on file URIs.

Every function accepts a URI string, a ``FileUri`` or a ``SplitResult``,
never mutates its inputs and returns a new value. Errors raised while
normalizing an input propagate unchanged.
"""

from collections.abc import Sequence

from .furi import FileUri, UriLike, as_furi, parse_file_uri
from .utils.encoding import encode_uri_component

_LOCAL_HOST_ALIASES = frozenset({"", "localhost"})


def join(base: UriLike, components: Sequence[str]) -> FileUri:
    """Append path components to the pathname of ``base``.

    Each component is a raw name: it is percent-encoded on its own, so a
    ``/`` or ``%`` inside a component is escaped and never acts as a
    separator. Use ``append`` for pre-encoded, ``/``-separated paths.

    If the component list is non-empty, the search and hash are cleared.

    Args:
        base: Base URI
        components: Raw path components to append

    Returns:
        Joined URI

    Example:
        >>> str(join("file:///foo/", ["bar", "a/b"]))
        'file:///foo/bar/a%2Fb'
    """
    result = as_furi(base)
    if len(components) == 0:
        return result
    result = result.with_trailing_slash(False)
    encoded = "/".join(encode_uri_component(component) for component in components)
    return result.replace(pathname=f"{result.pathname}/{encoded}", search="", hash="")


def append(base: UriLike, *uri_paths: str) -> FileUri:
    """Join a file URI with relative URI paths.

    The special characters of each path must already be percent-encoded;
    ``/`` inside a path is a separator. Empty paths are ignored. The result
    has a trailing slash iff the last non-empty path has one.

    If at least one non-empty path is appended, the search and hash are
    cleared.

    Example:
        >>> str(append("file:///foo/", "bar", "/baz/"))
        'file:///foo/bar/baz/'
    """
    result = as_furi(base)
    paths = [uri_path for uri_path in uri_paths if uri_path != ""]
    if not paths:
        return result

    segments = result.pathname.split("/")
    has_trailing_slash = False
    for uri_path in paths:
        for segment in uri_path.split("/"):
            segments.append(segment)
            has_trailing_slash = segment == ""
    result = result.replace(pathname="/".join(segments), search="", hash="")
    return result.with_trailing_slash(has_trailing_slash)


def parent(input: UriLike) -> FileUri:
    """Return the parent URI.

    If ``input`` is the root, it is returned unchanged (saturation). A
    trailing separator is removed first, but only one: ``file:///foo//`` is
    a ``foo`` directory entry with an empty name, so its parent is
    ``file:///foo``.

    The search and hash are kept.

    Example:
        >>> str(parent("file:///foo/bar/"))
        'file:///foo'
    """
    parts = parse_file_uri(input)
    segments = parts.path.split("/")
    if segments[-1] == "":
        segments.pop()
    if segments:
        segments.pop()
    return FileUri._from_parts(parts._replace(path="/".join(segments) or "/"))


def relative(from_: UriLike, to: UriLike) -> str:
    """Return the relative URI reference leading from ``from_`` to ``to``.

    ``from_`` is treated as a directory. An empty host and ``localhost``
    name the same machine. When the hosts differ, no relative reference
    exists and ``to`` is returned as an absolute URI string.

    Returns:
        Percent-encoded relative reference, ``""`` for equal paths

    Example:
        >>> relative("file:///var/lib", "file:///var/log/syslog")
        '../log/syslog'
        >>> relative("file:///var", "file:///var/lib/")
        './lib/'
    """
    from_uri = as_furi(from_)
    to_uri = as_furi(to)
    if not _same_host(from_uri.host, to_uri.host):
        return to_uri.href

    from_segments = _non_empty_segments(from_uri.pathname)
    to_segments = _non_empty_segments(to_uri.pathname)

    common = 0
    for from_segment, to_segment in zip(from_segments, to_segments):
        if from_segment != to_segment:
            break
        common += 1

    ups = [".."] * (len(from_segments) - common)
    downs = to_segments[common:]
    if not ups and not downs:
        return ""

    result = "/".join(ups + downs)
    if not ups:
        result = f"./{result}"
    if to_uri.has_trailing_slash():
        result = f"{result}/"
    return result


def basename(furi: UriLike, ext: str | None = None) -> str:
    """Return the basename of the file URI.

    Similar to ``os.path.basename`` followed by suffix removal: ``ext`` is
    removed only when it is non-empty, strictly shorter than the basename
    and a suffix of it.

    Args:
        furi: Absolute file URI
        ext: Extension to remove

    Returns:
        Percent-encoded basename

    Example:
        >>> basename("file:///dir/main.py", ".py")
        'main'
    """
    segments = _non_empty_segments(as_furi(furi).pathname)
    name = segments[-1] if segments else ""
    if ext and len(ext) < len(name) and name.endswith(ext):
        return name[: len(name) - len(ext)]
    return name


def _same_host(left: str, right: str) -> bool:
    if left in _LOCAL_HOST_ALIASES and right in _LOCAL_HOST_ALIASES:
        return True
    return left == right


def _non_empty_segments(pathname: str) -> list[str]:
    return [segment for segment in pathname.split("/") if segment != ""]

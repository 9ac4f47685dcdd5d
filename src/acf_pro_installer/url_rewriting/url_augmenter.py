"""
Merging of query parameters into urls.
"""

from typing import List
from urllib.parse import quote, unquote_plus, urlsplit, urlunsplit

from acf_pro_installer.acf_installer_exceptions import MalformedUrlError


def _split_url(url: str):
    if not isinstance(url, str):
        raise MalformedUrlError(url, "url must be a string")
    try:
        parts = urlsplit(url)
        # Accessing the port validates it
        parts.port
    except ValueError as e:
        raise MalformedUrlError(url, str(e)) from e

    if not parts.scheme:
        raise MalformedUrlError(url, "missing scheme")
    if not parts.netloc:
        raise MalformedUrlError(url, "missing host")
    return parts


def _segment_name(segment: str) -> str:
    return unquote_plus(segment.split("=", 1)[0])


def add_query_param(url: str, key: str, value: str) -> str:
    """
    Merge key=value into the query string of a url.

    Segments of the existing query with a different name are kept as they
    are, in their original order. The first segment named ``key`` is replaced
    in place and any later duplicates are dropped; if there is none, the pair
    is appended. Calling this twice with the same key and value gives the
    same url as calling it once.

    Args:
        url: Absolute url to augment
        key: Name of the query parameter
        value: Value of the query parameter

    Returns:
        The augmented url

    Raises:
        MalformedUrlError: If the url cannot be parsed
    """
    parts = _split_url(url)
    pair = f"{quote(key, safe='')}={quote(str(value), safe='')}"

    segments: List[str] = []
    replaced = False
    for segment in parts.query.split("&"):
        if not segment:
            continue
        if _segment_name(segment) == key:
            if not replaced:
                segments.append(pair)
                replaced = True
            continue
        segments.append(segment)

    if not replaced:
        segments.append(pair)

    return urlunsplit(
        (parts.scheme, parts.netloc, parts.path, "&".join(segments), parts.fragment)
    )

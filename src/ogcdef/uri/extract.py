"""Lightweight code extraction and HTTP URL recognition.

:func:`code_of` returns only the code of an identifier whose object type
and authority are known in advance. It accepts all the following forms:

- ``"4326"`` (code alone, authority inferred by the caller)
- ``"EPSG:4326"`` and ``"EPSG::4326"``
- ``"urn:ogc:def:crs:EPSG::4326"``, with or without a version, and with
  ``"x-ogc"`` in place of ``"ogc"``
- ``"http://www.opengis.net/gml/srs/epsg.xml#4326"``
"""

from ogcdef.exceptions import ensure_text
from ogcdef.uri.matcher import (
    DEFINITION,
    HTTP_SCHEME,
    NAMESPACES,
    SEPARATOR,
    URN_SCHEME,
    matches_any,
    region_matches,
    skip_identifier_part,
    skip_leading_whitespace,
    skip_trailing_whitespace,
    trim_range,
)
from ogcdef.uri.registry import DEFAULT_PATHS, PathRegistry

__all__ = ["code_of", "code_for_http"]


def code_of(
    type_: str,
    authority: str,
    uri: str,
    *,
    registry: PathRegistry = DEFAULT_PATHS,
) -> str | None:
    """Return the code of ``uri`` if it matches the given type and authority.

    The version number is ignored. Codes followed by parameters are not
    supported by this method.

    Parameters
    ----------
    type_ : str
        Expected object type (e.g. "crs").
    authority : str
        Expected authority (e.g. "EPSG"), compared ignoring case.
    uri : str
        Identifier in any of the supported forms.
    registry : PathRegistry, optional
        HTTP path templates, by default :data:`DEFAULT_PATHS`.

    Returns
    -------
    str | None
        The code, or None if the type or authority does not match, the code
        is empty, or the code is followed by parameters.

    Raises
    ------
    ArgumentError
        If any argument is None.

    Examples
    --------
        >>> code_of("crs", "EPSG", "urn:ogc:def:crs:EPSG:8.2:4326")
        '4326'
        >>> code_of("crs", "EPSG", "urn:ogc:def:datum:EPSG::6326") is None
        True
    """
    ensure_text("type", type_)
    ensure_text("authority", authority)
    ensure_text("uri", uri)

    upper = uri.find(SEPARATOR)
    if upper < 0:
        return uri.strip() or None

    if region_matches(authority, uri, 0, upper):
        return _code_ignore_version(uri, upper + 1)

    if region_matches(HTTP_SCHEME, uri, 0, upper):
        found = code_for_http(type_, authority, uri, upper + 1, registry=registry)
        if found is None or SEPARATOR in found[2]:
            return None
        return found[2]

    if not region_matches(URN_SCHEME, uri, 0, upper):
        return None

    # After "urn": "ogc" (or "x-ogc"), "def", then the expected type and authority
    for expected in (NAMESPACES, (DEFINITION,), (type_,), (authority,)):
        lower = upper + 1
        upper = uri.find(SEPARATOR, lower)
        if upper < 0:
            return None
        if not matches_any(expected, uri, lower, upper):
            return None
    return _code_ignore_version(uri, upper + 1)


def _code_ignore_version(uri: str, start: int) -> str | None:
    """Return the code found at ``start``, skipping an optional version.

    Everything up to a single ``':'`` is taken as the version without
    verification. Returns None if the code is empty or followed by
    parameters.
    """
    length = len(uri)
    start = skip_leading_whitespace(uri, start, length)
    if start >= length:
        return None
    separator = uri.find(SEPARATOR, start)
    if separator >= 0:
        start = skip_leading_whitespace(uri, separator + 1, length)
        if start >= length or uri.find(SEPARATOR, start) >= 0:
            return None
    return uri[start : skip_trailing_whitespace(uri, start, length)]


def code_for_http(
    type_: str | None,
    authority: str | None,
    url: str,
    start: int = 0,
    *,
    registry: PathRegistry = DEFAULT_PATHS,
) -> tuple[str, str, str] | None:
    """Recognize the HTTP form of an identifier.

    The URL must continue at ``start`` (just after ``"http:"``) with one of
    the registered path templates, followed by the authority, an optional
    ``'.'`` and filename extension, then ``'#'`` and the code. Templates are
    tried in registration order and the first match wins.

    Parameters
    ----------
    type_ : str | None
        Expected object type, or None for any registered type.
    authority : str | None
        Expected authority, compared ignoring case against the text that
        follows the path. If None, the run of identifier characters after
        the path is taken verbatim.
    url : str
        URL to parse.
    start : int, optional
        Index of the first character after the scheme separator.
    registry : PathRegistry, optional
        HTTP path templates, by default :data:`DEFAULT_PATHS`.

    Returns
    -------
    tuple[str, str, str] | None
        ``(type, authority, code)``, or None if no template matches.
    """
    ensure_text("url", url)
    if type_ is not None and type_ not in registry:
        return None

    length = len(url)
    for entry_type, path in registry.items():
        if type_ is not None and entry_type.lower() != type_.lower():
            continue
        end = start + len(path)
        if end > length or url[start:end].lower() != path.lower():
            continue

        if authority is None:
            authority_end = skip_identifier_part(url, end)
        else:
            # Authorities may contain non-identifier characters, e.g. "IGN-F"
            authority_end = end + len(authority)
            if url[end:authority_end].lower() != authority.lower():
                continue
        found = url[end:authority_end]
        if not found:
            continue

        if authority_end < length and url[authority_end] == ".":
            # Any extension is accepted, typically ".xml"
            anchor = url.find("#", authority_end + 1)
        elif authority_end < length and url[authority_end] == "#":
            anchor = authority_end
        else:
            continue
        if anchor < 0:
            continue

        code = trim_range(url, anchor + 1, length)
        if not code:
            continue
        return entry_type, authority if authority is not None else found, code
    return None

"""Canonical URN and URL rendering."""

from typing import TYPE_CHECKING

from ogcdef.exceptions import ArgumentError
from ogcdef.uri.matcher import PREFIX, SEPARATOR, is_identifier_part
from ogcdef.uri.registry import DEFAULT_PATHS, PathRegistry

if TYPE_CHECKING:
    from ogcdef.models import AuthorityCode, DefinitionURI

__all__ = ["format_urn", "format_authority_code", "to_urn", "to_string"]

# Accepted in addition to Unicode identifier characters
_EXTRA_CHARACTERS = frozenset(".-")

# Index of the only optional component among type, codespace, version, code
_VERSION_POSITION = 2


def _identifier_chars(component: str | None) -> str:
    if not component:
        return ""
    return "".join(c for c in component if c in _EXTRA_CHARACTERS or is_identifier_part(c))


def format_authority_code(
    type_: str | None,
    codespace: str | None,
    version: str | None,
    code: str | None,
) -> str | None:
    """Format the given components using the ``"urn:ogc:def"`` syntax.

    Characters that are not valid in a Unicode identifier (other than
    ``'.'`` and ``'-'``) are omitted.

    Parameters
    ----------
    type_ : str | None
        Object type (e.g. "crs").
    codespace : str | None
        Authority (e.g. "EPSG").
    version : str | None
        Authority version. Optional.
    code : str | None
        Object code.

    Returns
    -------
    str | None
        The URN, or None if type, codespace or code is empty after
        filtering.
    """
    parts = [PREFIX]
    for position, component in enumerate((type_, codespace, version, code)):
        filtered = _identifier_chars(component)
        if not filtered and position != _VERSION_POSITION:
            return None
        parts.append(filtered)
    return SEPARATOR.join(parts)


def format_urn(type_: str | None, identifier: "AuthorityCode") -> str | None:
    """Format an authority code using the ``"urn:ogc:def"`` syntax.

    Parameters
    ----------
    type_ : str | None
        Object type (e.g. "crs").
    identifier : AuthorityCode
        Object exposing ``codespace``, ``version`` and ``code``.

    Returns
    -------
    str | None
        The URN, or None if a mandatory component is missing.

    Raises
    ------
    ArgumentError
        If ``identifier`` is None.

    Examples
    --------
        >>> format_urn("crs", Identifier("EPSG", "4326"))
        'urn:ogc:def:crs:EPSG::4326'
    """
    if identifier is None:
        raise ArgumentError("identifier")
    return format_authority_code(
        type_,
        identifier.codespace,
        identifier.version,
        identifier.code,
    )


def to_urn(definition: "DefinitionURI") -> str:
    """Return the URN of a parsed identifier.

    Missing components are rendered as empty strings, so the result is
    always syntactically complete.
    """
    components = [definition.type, definition.authority, definition.version, definition.code]
    if definition.parameters is not None:
        components.extend(definition.parameters)
    return SEPARATOR.join([PREFIX] + [c if c is not None else "" for c in components])


def to_string(definition: "DefinitionURI", registry: PathRegistry = DEFAULT_PATHS) -> str:
    """Return the HTTP form if ``definition`` was parsed from a URL, else the URN."""
    if definition.is_http and definition.type is not None:
        path = registry.get(definition.type)
        if path is not None:
            return f"http:{path}{definition.authority or ''}.xml#{definition.code or ''}"
    return to_urn(definition)

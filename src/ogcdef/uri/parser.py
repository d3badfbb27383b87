"""Full decomposition of OGC definition identifiers.

A URN begins with ``"urn:ogc:def:"`` (formerly ``"urn:x-ogc:def:"``)
followed by an object type, an authority, an optional version, the code
and an arbitrary number of parameters::

    urn:ogc:def:crs:EPSG::4326
    urn:ogc:def:crs:EPSG:8.2:4326
    urn:ogc:def:crs:OGC:1.3:AUTO42003:1:-100:45

HTTP URLs registered in :data:`ogcdef.uri.registry.DEFAULT_PATHS` are
recognized too. Combined URNs such as
``"urn:ogc:def:crs,crs:EPSG:6.3:27700,crs:EPSG:6.3:5701"`` are not split into
their parts; they are read as a single URN with a type of ``"crs,crs"``.
"""

from enum import Enum

from ogcdef.exceptions import ensure_text
from ogcdef.models import DefinitionURI
from ogcdef.uri.extract import code_for_http
from ogcdef.uri.matcher import (
    DEFINITION,
    HTTP_SCHEME,
    NAMESPACES,
    SEPARATOR,
    URN_SCHEME,
    matches_any,
    region_matches,
    trim_range,
)
from ogcdef.uri.registry import DEFAULT_PATHS, PathRegistry

__all__ = ["parse"]


class _Component(Enum):
    """Expected URN components, in order.

    Components with literals are fixed tokens that are verified and
    discarded. The others are data stored in the result.
    """

    SCHEME = (0, (URN_SCHEME,))
    NAMESPACE = (1, NAMESPACES)
    DEF = (2, (DEFINITION,))
    TYPE = (3, ())
    AUTHORITY = (4, ())
    VERSION = (5, ())
    CODE = (6, ())

    def __init__(self, position: int, literals: tuple[str, ...]) -> None:
        self.position = position
        self.literals = literals

    @property
    def field_name(self) -> str:
        return self.name.lower()


def parse(uri: str, *, registry: PathRegistry = DEFAULT_PATHS) -> DefinitionURI | None:
    """Parse a URN or HTTP URL into its components.

    Parameters
    ----------
    uri : str
        The identifier to parse.
    registry : PathRegistry, optional
        HTTP path templates, by default :data:`DEFAULT_PATHS`.

    Returns
    -------
    DefinitionURI | None
        The parsed identifier, or None if ``uri`` is not recognized.

    Raises
    ------
    ArgumentError
        If ``uri`` is None or not a string.

    Examples
    --------
        >>> parse("urn:ogc:def:crs:EPSG:8.2:4326").code
        '4326'
        >>> parse("not:a:urn") is None
        True
    """
    ensure_text("uri", uri)

    values: dict[str, str | None] = {}
    upper = -1
    for component in _Component:
        lower = upper + 1
        upper = uri.find(SEPARATOR, lower)
        if upper < 0:
            if component is not _Component.CODE:
                return None
            upper = len(uri)

        if component is _Component.SCHEME and region_matches(HTTP_SCHEME, uri, lower, upper):
            return _parse_http(uri, upper + 1, registry)

        if component.literals:
            if not matches_any(component.literals, uri, lower, upper):
                return None
        else:
            values[component.field_name] = trim_range(uri, lower, upper) or None

    if values["code"] is None:
        return None

    # Parameters keep their exact characters, e.g. "-100"
    parameters = None
    upper += 1
    if upper < len(uri):
        parameters = tuple(uri[upper:].split(SEPARATOR))

    return DefinitionURI(parameters=parameters, **values)


def _parse_http(url: str, start: int, registry: PathRegistry) -> DefinitionURI | None:
    found = code_for_http(None, None, url, start, registry=registry)
    if found is None:
        return None
    type_, authority, code = found
    return DefinitionURI(is_http=True, type=type_, authority=authority, code=code)

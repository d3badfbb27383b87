"""Parsed OGC definition identifier.

A :class:`DefinitionURI` is the structural record produced by
:func:`ogcdef.uri.parse`. It is immutable and carries no identity beyond
value equality.
"""

from dataclasses import dataclass
from typing import Any

__all__ = ["DefinitionURI"]


@dataclass(frozen=True)
class DefinitionURI:
    """Components of a ``urn:ogc:def`` URN or of an equivalent HTTP URL.

    For example ``"urn:ogc:def:crs:EPSG:8.2:4326"`` has type ``"crs"``,
    authority ``"EPSG"``, version ``"8.2"`` and code ``"4326"``.

    Attributes
    ----------
    is_http : bool
        True if the identifier was parsed from the
        ``"http://www.opengis.net/gml/..."`` syntax.
    type : str | None
        Object type (e.g. ``"crs"``), or None if the component was empty.
    authority : str | None
        Authority (e.g. ``"EPSG"``), or None if the component was empty.
    version : str | None
        Authority version (e.g. ``"8.2"``), or None if omitted.
    code : str | None
        Object code. Never empty on records returned by the parser; only
        records built by hand may hold None.
    parameters : tuple[str, ...] | None
        Components following the code, e.g. ``("1", "-100", "45")`` in
        ``"urn:ogc:def:crs:OGC:1.3:AUTO42003:1:-100:45"``. None if absent.
    """

    is_http: bool = False
    type: str | None = None
    authority: str | None = None
    version: str | None = None
    code: str | None = None
    parameters: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        """Store parameters as a tuple, collapsing an empty sequence to None."""
        if self.parameters is not None:
            params = tuple(self.parameters)
            object.__setattr__(self, "parameters", params or None)

    def to_urn(self) -> str:
        """Return the URN representation of this identifier."""
        from ogcdef.uri.formatter import to_urn

        return to_urn(self)

    def __str__(self) -> str:
        """Return the HTTP form if parsed from one, otherwise the URN."""
        from ogcdef.uri.formatter import to_string

        return to_string(self)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "is_http": self.is_http,
            "type": self.type,
            "authority": self.authority,
            "version": self.version,
            "code": self.code,
            "parameters": list(self.parameters) if self.parameters is not None else None,
            "urn": self.to_urn(),
        }

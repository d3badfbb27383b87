"""Read-only registries used by the URI recognizers.

:data:`DEFAULT_PATHS` maps object types to the server and path portion of
their HTTP URL, starting after the ``"http:"`` scheme and ending before the
authority filename. For example the ``crs`` entry recognizes
``"http://www.opengis.net/gml/srs/epsg.xml#4326"``.

:data:`OBJECT_TYPES` and :data:`AUTHORITIES` list well-known tokens with a
short description. They are informational only; parsing never rejects a
token because it is missing from these tables.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

__all__ = [
    "PathRegistry",
    "DEFAULT_PATHS",
    "OBJECT_TYPES",
    "AUTHORITIES",
    "describe_type",
    "describe_authority",
]


@dataclass(frozen=True, eq=False)
class PathRegistry:
    """Immutable mapping from object type to HTTP path template.

    Entries are tried in insertion order. Type lookups ignore case.

    Attributes
    ----------
    paths : Mapping[str, str]
        Object type (e.g. "crs") to path (e.g. "//www.opengis.net/gml/srs/").
    """

    paths: Mapping[str, str]

    def __post_init__(self) -> None:
        """Freeze a private copy of the paths and validate them."""
        frozen = MappingProxyType(dict(self.paths))
        for type_, path in frozen.items():
            if not type_ or not path:
                raise ValueError(f"Registry entries must be non-empty, got {type_!r}: {path!r}")
        object.__setattr__(self, "paths", frozen)

    def get(self, type_: str) -> str | None:
        """Return the path template for ``type_``, or None if not registered."""
        path = self.paths.get(type_)
        if path is not None:
            return path
        folded = type_.lower()
        for key, value in self.paths.items():
            if key.lower() == folded:
                return value
        return None

    def items(self) -> Iterator[tuple[str, str]]:
        """Iterate over ``(type, path)`` entries in registration order."""
        return iter(self.paths.items())

    def __contains__(self, type_: object) -> bool:
        return isinstance(type_, str) and self.get(type_) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths)

    def __len__(self) -> int:
        return len(self.paths)


DEFAULT_PATHS = PathRegistry({"crs": "//www.opengis.net/gml/srs/"})

OBJECT_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "axis": "Coordinate system axis definition",
        "axisDirection": "Axis direction code definition",
        "coordinateOperation": "Coordinate operation definition",
        "crs": "Coordinate reference system definition",
        "cs": "Coordinate system definition",
        "datum": "Datum definition",
        "dataType": "Data type definition",
        "derivedCRSType": "Derived CRS type code definition",
        "documentType": "Document type definition",
        "ellipsoid": "Ellipsoid definition",
        "featureType": "Feature type definition",
        "group": "Operation parameter group definition",
        "meaning": "Parameter meaning definition",
        "meridian": "Prime meridian definition",
        "method": "Operation method definition",
        "nil": "Explanations for missing information",
        "parameter": "Operation parameter definition",
        "phenomenon": "Observable property definition",
        "pixelInCell": "Pixel in cell code definition",
        "rangeMeaning": "Range meaning code definition",
        "referenceSystem": "Value reference system definition",
        "uom": "Unit of measure definition",
        "verticalDatumType": "Vertical datum type code definition",
    }
)

AUTHORITIES: Mapping[str, str] = MappingProxyType(
    {
        "OGC": "Objects defined by the Open Geospatial Consortium",
        "EPSG": "Referencing objects defined in the EPSG database",
        "EDCS": "Environmental Data Coding Specification",
        "SI": "International System of Units",
        "UCUM": "Unified Code for Units of Measure",
    }
)


def _lookup(table: Mapping[str, str], token: str) -> str | None:
    folded = token.strip().lower()
    for key, description in table.items():
        if key.lower() == folded:
            return description
    return None


def describe_type(token: str) -> str | None:
    """Return the description of a well-known object type, ignoring case."""
    return _lookup(OBJECT_TYPES, token)


def describe_authority(token: str) -> str | None:
    """Return the description of a well-known authority, ignoring case."""
    return _lookup(AUTHORITIES, token)

"""Parsing and formatting of OGC definition URIs.

The same object may be referenced in many ways:

- ``"4326"`` (codespace inferred by the caller)
- ``"EPSG:4326"`` (older format)
- ``"EPSG::4326"`` (often seen for similarity with the URN below)
- ``"urn:ogc:def:crs:EPSG::4326"`` (version number omitted)
- ``"urn:ogc:def:crs:EPSG:8.2:4326"`` (explicit version number)
- ``"urn:x-ogc:def:crs:EPSG::4326"`` (prior registration of "ogc" to IANA)
- ``"http://www.opengis.net/gml/srs/epsg.xml#4326"``

Main entry points:
- parse: decompose a URN or URL into a DefinitionURI
- code_of: extract the code for a known type and authority
- format_urn: build the canonical URN of an authority code
"""

from ogcdef.uri.extract import code_for_http, code_of
from ogcdef.uri.formatter import format_authority_code, format_urn, to_string, to_urn
from ogcdef.uri.matcher import PREFIX, SEPARATOR, region_matches
from ogcdef.uri.parser import parse
from ogcdef.uri.registry import (
    AUTHORITIES,
    DEFAULT_PATHS,
    OBJECT_TYPES,
    PathRegistry,
    describe_authority,
    describe_type,
)

__all__ = [
    "parse",
    "code_of",
    "code_for_http",
    "format_urn",
    "format_authority_code",
    "to_urn",
    "to_string",
    "region_matches",
    "PREFIX",
    "SEPARATOR",
    "PathRegistry",
    "DEFAULT_PATHS",
    "OBJECT_TYPES",
    "AUTHORITIES",
    "describe_type",
    "describe_authority",
]

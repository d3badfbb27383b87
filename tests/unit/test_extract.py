"""Tests for lightweight code extraction."""

import pytest

from ogcdef.exceptions import ArgumentError
from ogcdef.uri import PathRegistry, code_for_http, code_of

# ---------------------------------------------------------------------------
# code_of: accepted forms
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize(
    "uri",
    [
        "4326",
        "  4326 ",
        "EPSG:4326",
        "epsg:4326",
        " EPSG : 4326 ",
        "EPSG::4326",
        "EPSG:8.2:4326",
        "urn:ogc:def:crs:EPSG::4326",
        "urn:ogc:def:crs:EPSG:4326",
        "urn:ogc:def:crs:EPSG:8.2:4326",
        "urn:x-ogc:def:crs:EPSG::4326",
        "URN:OGC:DEF:CRS:epsg::4326",
        " urn : ogc : def : crs : EPSG : : 4326 ",
        "http://www.opengis.net/gml/srs/epsg.xml#4326",
        "http://www.opengis.net/gml/srs/EPSG.gml#4326",
    ],
)
def test_code_of_accepted_forms(uri: str) -> None:
    """Test every supported form yields the same code."""
    assert code_of("crs", "EPSG", uri) == "4326"


@pytest.mark.unit
@pytest.mark.parametrize("code", ["4326", "AUTO42003", "9001", "CRS84", "1.0-beta"])
def test_code_of_bare_code_for_any_type_and_authority(code: str) -> None:
    """Test a code without ':' is returned for any type and authority."""
    assert code_of("crs", "EPSG", code) == code
    assert code_of("uom", "UCUM", code) == code
    assert code_of("anything", "ELSE", code) == code


@pytest.mark.unit
@pytest.mark.parametrize(
    ("authority", "code"),
    [("EPSG", "4326"), ("OGC", "CRS84"), ("IGNF", "LAMB93"), ("ucum", "m")],
)
def test_code_of_authority_prefix(authority: str, code: str) -> None:
    """Test AUTHORITY:CODE yields the code, authority matched ignoring case."""
    assert code_of("crs", authority, f"{authority}:{code}") == code
    assert code_of("crs", authority.lower(), f"{authority.upper()}:{code}") == code
    assert code_of("crs", authority.upper(), f"{authority.lower()}:{code}") == code


# ---------------------------------------------------------------------------
# code_of: rejections
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize(
    "uri",
    [
        "",
        "   ",
        "urn:ogc:def:cs:EPSG::4326",
        "urn:ogc:def:crs:OGC::CRS84",
        "urn:ogc:def:crs:EPSG::",
        "urn:ogc:def:crs:EPSG",
        "urn:ogc:def:crs",
        "urn:ietf:def:crs:EPSG::4326",
        "urn:ogc:ref:crs:EPSG::4326",
        "urn:ogc:def:crs:OGC:1.3:AUTO42003:1:-100:45",
        "urn:ogc:def:crs:EPSG:8.2:4326:1",
        "EPSG:",
        "EPSG:8.2:",
        "EPSG:8.2:4326:1",
        "OGC:CRS84",
        "IGNF:LAMB93",
        "ftp://www.opengis.net/gml/srs/epsg.xml#4326",
        "https://www.opengis.net/gml/srs/epsg.xml#4326",
        "http://www.opengis.net/gml/srs/ignf.xml#LAMB93",
        "http://www.opengis.net/gml/srs/epsg.xml",
        "http://example.com/epsg.xml#4326",
    ],
)
def test_code_of_rejects(uri: str) -> None:
    """Test mismatching or unsupported identifiers yield None."""
    assert code_of("crs", "EPSG", uri) is None


@pytest.mark.unit
def test_code_of_http_requires_registered_type() -> None:
    """Test the HTTP form is only recognized for registered types."""
    url = "http://www.opengis.net/gml/srs/epsg.xml#4326"

    assert code_of("datum", "EPSG", url) is None
    assert code_of("CRS", "EPSG", url) == "4326"


@pytest.mark.unit
def test_code_of_with_custom_registry() -> None:
    """Test the registry argument is used for the HTTP form."""
    registry = PathRegistry({"uom": "//www.opengis.net/gml/uom/"})
    url = "http://www.opengis.net/gml/uom/epsg.xml#9001"

    assert code_of("uom", "EPSG", url, registry=registry) == "9001"
    assert code_of("uom", "EPSG", url) is None


@pytest.mark.unit
@pytest.mark.parametrize(
    ("type_", "authority", "uri", "argument"),
    [
        (None, "EPSG", "4326", "type"),
        ("crs", None, "4326", "authority"),
        ("crs", "EPSG", None, "uri"),
    ],
)
def test_code_of_none_argument_raises(type_, authority, uri, argument: str) -> None:
    """Test every argument is required."""
    with pytest.raises(ArgumentError) as excinfo:
        code_of(type_, authority, uri)

    assert excinfo.value.argument == argument


# ---------------------------------------------------------------------------
# code_for_http
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_code_for_http_returns_components() -> None:
    """Test type, authority and code are returned."""
    url = "http://www.opengis.net/gml/srs/epsg.xml#4326"

    assert code_for_http(None, None, url, 5) == ("crs", "epsg", "4326")
    assert code_for_http("crs", "EPSG", url, 5) == ("crs", "EPSG", "4326")


@pytest.mark.unit
def test_code_for_http_skips_mismatching_authority() -> None:
    """Test a fixed authority that differs from the URL is rejected."""
    url = "http://www.opengis.net/gml/srs/epsg.xml#4326"

    assert code_for_http(None, "EPSG", url, 5) is not None
    assert code_for_http(None, "EPS", url, 5) is None
    assert code_for_http(None, "EPSGX", url, 5) is None


@pytest.mark.unit
def test_code_for_http_accepts_any_extension() -> None:
    """Test the extension between the authority and '#' is ignored."""
    url = "http://www.opengis.net/gml/srs/epsg.some.ext#4326"

    assert code_for_http(None, None, url, 5) == ("crs", "epsg", "4326")


@pytest.mark.unit
def test_code_for_http_trims_code() -> None:
    """Test whitespace around the code is removed."""
    url = "http://www.opengis.net/gml/srs/epsg.xml# 4326 "

    assert code_for_http(None, None, url, 5) == ("crs", "epsg", "4326")


@pytest.mark.unit
def test_code_for_http_unregistered_type() -> None:
    """Test an unregistered type fails before any template is tried."""
    assert code_for_http("datum", None, "http://www.opengis.net/gml/srs/epsg.xml#4326", 5) is None


@pytest.mark.unit
@pytest.mark.parametrize(
    "uri",
    [
        "IGN-F:LAMB93",
        "urn:ogc:def:crs:IGN-F::LAMB93",
        "http://www.opengis.net/gml/srs/ign-f.xml#LAMB93",
        "http://www.opengis.net/gml/srs/IGN-F#LAMB93",
    ],
)
def test_code_of_authority_with_hyphen(uri: str) -> None:
    """Test an authority containing '-' matches in every form."""
    assert code_of("crs", "IGN-F", uri) == "LAMB93"


@pytest.mark.unit
def test_code_for_http_authority_with_hyphen() -> None:
    """Test the expected authority is compared literally after the path."""
    url = "http://www.opengis.net/gml/srs/ign-f.xml#LAMB93"

    assert code_for_http("crs", "IGN-F", url, 5) == ("crs", "IGN-F", "LAMB93")
    assert code_for_http("crs", "IGN", url, 5) is None


@pytest.mark.unit
def test_code_of_http_code_with_parameters() -> None:
    """Test an HTTP fragment followed by parameters is rejected like other forms."""
    assert code_of("crs", "EPSG", "http://www.opengis.net/gml/srs/epsg.xml#4326:1") is None

"""Tests for the public API."""

import json
from pathlib import Path

import pytest

import ogcdef
from ogcdef import BatchConfig, LineResult, format_identifier, parse_file, parse_lines, write_jsonl
from ogcdef.audit import AuditLogger
from ogcdef.uri import PathRegistry


@pytest.mark.unit
def test_package_exports() -> None:
    """Test the core operations are available at package level."""
    assert ogcdef.parse("urn:ogc:def:crs:EPSG::4326").code == "4326"
    assert ogcdef.code_of("crs", "EPSG", "EPSG:4326") == "4326"
    assert ogcdef.format_urn("crs", ogcdef.Identifier("EPSG", "4326")) == "urn:ogc:def:crs:EPSG::4326"
    assert ogcdef.__version__


# ---------------------------------------------------------------------------
# BatchConfig
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_batch_config_defaults() -> None:
    """Test default configuration."""
    config = BatchConfig()

    assert config.skip_blank is True
    assert config.comment_prefix == "#"
    assert config.to_dict() == {
        "skip_blank": True,
        "comment_prefix": "#",
        "registry": {"crs": "//www.opengis.net/gml/srs/"},
    }


@pytest.mark.unit
@pytest.mark.parametrize(
    "kwargs",
    [
        {"comment_prefix": ""},
        {"comment_prefix": "  "},
        {"registry": {"crs": "//www.opengis.net/gml/srs/"}},
    ],
)
def test_batch_config_validation(kwargs: dict) -> None:
    """Test invalid values are rejected."""
    with pytest.raises(ValueError):
        BatchConfig(**kwargs)


# ---------------------------------------------------------------------------
# parse_lines / parse_file
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_parse_lines_mixed_input() -> None:
    """Test recognized and unrecognized lines are both reported."""
    results = parse_lines(
        [
            "urn:ogc:def:crs:EPSG::4326\n",
            "# comment\n",
            "\n",
            "EPSG:4326\r\n",
            "http://www.opengis.net/gml/srs/epsg.xml#4258",
        ]
    )

    assert [r.line for r in results] == [1, 4, 5]
    assert [r.recognized for r in results] == [True, False, True]
    assert results[1].input == "EPSG:4326"
    assert results[2].definition.is_http


@pytest.mark.unit
def test_parse_lines_keeps_blank_and_comment_lines_when_configured() -> None:
    """Test skip_blank=False and comment_prefix=None process every line."""
    config = BatchConfig(skip_blank=False, comment_prefix=None)

    results = parse_lines(["", "# urn:ogc:def:crs:EPSG::4326"], config=config)

    assert [r.recognized for r in results] == [False, False]


@pytest.mark.unit
def test_parse_lines_uses_configured_registry() -> None:
    """Test the configured registry is used for URLs."""
    config = BatchConfig(registry=PathRegistry({"uom": "//www.opengis.net/gml/uom/"}))

    results = parse_lines(["http://www.opengis.net/gml/uom/epsg.xml#9001"], config=config)

    assert results[0].definition.type == "uom"


@pytest.mark.unit
def test_parse_lines_logs_unrecognized(tmp_path: Path) -> None:
    """Test unrecognized lines are written to the audit log."""
    log_path = tmp_path / "events.jsonl"
    with AuditLogger(run_id="r", log_path=log_path) as logger:
        parse_lines(["urn:ogc:def:crs:EPSG::4326", "not:a:urn"], logger=logger)

    events = [json.loads(line) for line in log_path.read_text().splitlines()]

    assert len(events) == 1
    assert events[0]["event"] == "line_unrecognized"
    assert events[0]["line"] == 2
    assert events[0]["stage"] == "parse"


@pytest.mark.unit
def test_parse_file(fixtures_dir: Path) -> None:
    """Test parsing the sample identifier file."""
    results = parse_file(fixtures_dir / "identifiers.txt")

    assert len(results) == 8
    assert sum(r.recognized for r in results) == 6
    assert [r.line for r in results if not r.recognized] == [8, 10]


@pytest.mark.unit
def test_parse_file_missing(tmp_path: Path) -> None:
    """Test a missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        parse_file(tmp_path / "missing.txt")


# ---------------------------------------------------------------------------
# write_jsonl / format_identifier
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_write_jsonl(tmp_path: Path) -> None:
    """Test one JSON object is written per result."""
    results = parse_lines(["urn:ogc:def:crs:EPSG:8.2:4326", "4326"])
    output = tmp_path / "nested" / "out.jsonl"

    count = write_jsonl(results, output)

    rows = [json.loads(line) for line in output.read_text(encoding="utf-8").splitlines()]
    assert count == 2
    assert rows[0]["recognized"] is True
    assert rows[0]["definition"]["version"] == "8.2"
    assert rows[1] == {"line": 2, "input": "4326", "recognized": False, "definition": None}


@pytest.mark.unit
def test_line_result_to_dict() -> None:
    """Test unrecognized results serialize with a null definition."""
    assert LineResult(line=1, input="x", definition=None).to_dict()["definition"] is None


@pytest.mark.unit
def test_format_identifier() -> None:
    """Test formatting from plain strings."""
    assert format_identifier("crs", "EPSG", "4326") == "urn:ogc:def:crs:EPSG::4326"
    assert format_identifier("crs", "EPSG", "4326", version="8.2") == "urn:ogc:def:crs:EPSG:8.2:4326"
    assert format_identifier("crs", "EPSG", "") is None

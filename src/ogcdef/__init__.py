"""Parsing and formatting of OGC definition identifiers.

This package provides:
- Data models (ogcdef.models) — DefinitionURI and authority codes
- URI handling (ogcdef.uri) — parsing, code extraction, URN formatting
- Audit (ogcdef.audit) — JSONL event logging for batch runs
- CLI (ogcdef.cli) — command-line interface
- Public API (ogcdef.api) — batch processing helpers
"""

__version__ = "0.4.0"
__license__ = "MIT"

from ogcdef.api import (
    BatchConfig,
    LineResult,
    format_identifier,
    parse_file,
    parse_lines,
    write_jsonl,
)
from ogcdef.exceptions import ArgumentError
from ogcdef.models import AuthorityCode, DefinitionURI, Identifier
from ogcdef.uri import code_of, format_urn, parse

__all__ = [
    "__version__",
    "__license__",
    "DefinitionURI",
    "AuthorityCode",
    "Identifier",
    "ArgumentError",
    "parse",
    "code_of",
    "format_urn",
    "format_identifier",
    "BatchConfig",
    "LineResult",
    "parse_lines",
    "parse_file",
    "write_jsonl",
]

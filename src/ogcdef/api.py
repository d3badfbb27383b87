"""Public API for batch identifier processing.

This module provides high-level convenience functions on top of
:mod:`ogcdef.uri`:
- Parsing sequences of lines or text files into DefinitionURI objects
- Exporting results to JSONL format
- Formatting authority codes as URNs
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ogcdef.models import DefinitionURI, Identifier
from ogcdef.uri import DEFAULT_PATHS, PathRegistry, format_urn, parse

if TYPE_CHECKING:
    from ogcdef.audit import AuditLogger

__all__ = [
    "BatchConfig",
    "LineResult",
    "parse_lines",
    "parse_file",
    "write_jsonl",
    "format_identifier",
]

PARSE_STAGE = "parse"


@dataclass
class BatchConfig:
    """Configuration for batch parsing.

    Attributes
    ----------
    skip_blank : bool
        Ignore lines containing only whitespace (default: True).
    comment_prefix : str | None
        Ignore lines starting with this prefix after leading whitespace
        (default: "#"). None disables comment handling.
    registry : PathRegistry
        HTTP path templates used to recognize URLs.
    """

    skip_blank: bool = True
    comment_prefix: str | None = "#"
    registry: PathRegistry = DEFAULT_PATHS

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.comment_prefix is not None and not self.comment_prefix.strip():
            raise ValueError("comment_prefix must be None or a non-blank string")

        if not isinstance(self.registry, PathRegistry):
            raise ValueError(f"registry must be a PathRegistry, got {type(self.registry).__name__}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "skip_blank": self.skip_blank,
            "comment_prefix": self.comment_prefix,
            "registry": dict(self.registry.paths),
        }


@dataclass(frozen=True)
class LineResult:
    """Outcome of parsing one input line.

    Attributes
    ----------
    line : int
        1-based line number.
    input : str
        Line content without the line terminator.
    definition : DefinitionURI | None
        Parsed identifier, or None if not recognized.
    """

    line: int
    input: str
    definition: DefinitionURI | None

    @property
    def recognized(self) -> bool:
        return self.definition is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "line": self.line,
            "input": self.input,
            "recognized": self.recognized,
            "definition": self.definition.to_dict() if self.definition is not None else None,
        }


def parse_lines(
    lines: Iterable[str],
    config: BatchConfig | None = None,
    logger: AuditLogger | None = None,
) -> list[LineResult]:
    """Parse one identifier per line.

    Unrecognized lines are kept in the result with ``definition=None`` and
    reported to ``logger`` as ``line_unrecognized`` events.

    Parameters
    ----------
    lines : Iterable[str]
        Input lines, with or without line terminators.
    config : BatchConfig | None, optional
        Batch configuration, by default ``BatchConfig()``.
    logger : AuditLogger | None, optional
        Audit logger. If None, no logging.

    Returns
    -------
    list[LineResult]
        One result per non-skipped line, in input order.

    Examples
    --------
        >>> results = parse_lines(["urn:ogc:def:crs:EPSG::4326", "EPSG:4326"])
        >>> [r.recognized for r in results]
        [True, False]
    """
    if config is None:
        config = BatchConfig()

    results: list[LineResult] = []
    for number, raw in enumerate(lines, start=1):
        text = raw.rstrip("\r\n")
        stripped = text.strip()
        if config.skip_blank and not stripped:
            continue
        if config.comment_prefix is not None and stripped.startswith(config.comment_prefix):
            continue

        definition = parse(text, registry=config.registry)
        if definition is None and logger is not None:
            logger.line_unrecognized(number, text, stage=PARSE_STAGE)
        results.append(LineResult(line=number, input=text, definition=definition))

    return results


def parse_file(
    path: str | Path,
    config: BatchConfig | None = None,
    logger: AuditLogger | None = None,
) -> list[LineResult]:
    """Parse a UTF-8 text file containing one identifier per line.

    Parameters
    ----------
    path : str | Path
        Path to the input file.
    config : BatchConfig | None, optional
        Batch configuration.
    logger : AuditLogger | None, optional
        Audit logger. If None, no logging.

    Returns
    -------
    list[LineResult]
        Results in file order.

    Raises
    ------
    FileNotFoundError
        If file does not exist.
    """
    file_path = Path(path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with file_path.open(encoding="utf-8-sig") as f:
        return parse_lines(f, config=config, logger=logger)


def write_jsonl(results: Iterable[LineResult], path: str | Path) -> int:
    """Write line results to a JSONL file.

    Parameters
    ----------
    results : Iterable[LineResult]
        Results to write.
    path : str | Path
        Output file path. Parent directories are created.

    Returns
    -------
    int
        Number of lines written.
    """
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    count = 0
    with output_path.open("w", encoding="utf-8") as f:
        for result in results:
            json.dump(result.to_dict(), f, ensure_ascii=False, separators=(",", ":"))
            f.write("\n")
            count += 1
    return count


def format_identifier(
    type_: str,
    codespace: str,
    code: str,
    version: str | None = None,
) -> str | None:
    """Format an authority code as a ``urn:ogc:def`` URN.

    Examples
    --------
        >>> format_identifier("crs", "EPSG", "4326", version="8.2")
        'urn:ogc:def:crs:EPSG:8.2:4326'
    """
    return format_urn(type_, Identifier(codespace=codespace, code=code, version=version))

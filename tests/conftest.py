"""Pytest configuration and fixtures for test suite."""

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from ogcdef.models import DefinitionURI  # noqa: E402

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def make_definition() -> Callable[..., DefinitionURI]:
    """Factory for DefinitionURI values with EPSG:4326 defaults."""

    def _factory(
        *,
        type_: str | None = "crs",
        authority: str | None = "EPSG",
        version: str | None = None,
        code: str | None = "4326",
        parameters: tuple[str, ...] | None = None,
        is_http: bool = False,
    ) -> DefinitionURI:
        return DefinitionURI(
            is_http=is_http,
            type=type_,
            authority=authority,
            version=version,
            code=code,
            parameters=parameters,
        )

    return _factory


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding test input files."""
    return FIXTURES_DIR

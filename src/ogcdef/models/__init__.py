"""Shared data types for ogcdef.

- DefinitionURI: parsed ``urn:ogc:def`` identifier
- AuthorityCode / Identifier: authority codes accepted by the formatter
"""

from ogcdef.models.definition import DefinitionURI
from ogcdef.models.identifiers import AuthorityCode, Identifier

__all__ = [
    "DefinitionURI",
    "AuthorityCode",
    "Identifier",
]

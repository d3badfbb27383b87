"""Authority codes consumed by the URN formatter.

Any object exposing ``codespace``, ``version`` and ``code`` attributes can
be formatted as a URN. :class:`Identifier` is a ready-made implementation.
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

__all__ = ["AuthorityCode", "Identifier"]


@runtime_checkable
class AuthorityCode(Protocol):
    """Identifier assigned by an authority, such as ``EPSG:4326``."""

    @property
    def codespace(self) -> str | None: ...

    @property
    def version(self) -> str | None: ...

    @property
    def code(self) -> str | None: ...


@dataclass(frozen=True)
class Identifier:
    """Plain authority code.

    Attributes
    ----------
    codespace : str | None
        Authority token (e.g. "EPSG").
    code : str | None
        Code within the authority (e.g. "4326").
    version : str | None
        Version of the authority database, if any.
    """

    codespace: str | None
    code: str | None
    version: str | None = None

"""Component matching shared by every URI recognizer.

All recognizers decide whether a segment "says X" through
:func:`region_matches`, so case and whitespace tolerance is the same
everywhere.
"""

__all__ = [
    "SEPARATOR",
    "PREFIX",
    "URN_SCHEME",
    "HTTP_SCHEME",
    "NAMESPACES",
    "DEFINITION",
    "skip_leading_whitespace",
    "skip_trailing_whitespace",
    "trim_range",
    "region_matches",
    "matches_any",
    "is_identifier_part",
    "skip_identifier_part",
]

SEPARATOR = ":"
PREFIX = "urn:ogc:def"

URN_SCHEME = "urn"
HTTP_SCHEME = "http"
# "ogc" first: "x-ogc" is the registration that predates the IANA one
NAMESPACES = ("ogc", "x-ogc")
DEFINITION = "def"


def skip_leading_whitespace(text: str, lower: int, upper: int) -> int:
    """Return the index of the first non-whitespace character in ``text[lower:upper]``.

    Returns ``upper`` if the range is blank.
    """
    while lower < upper and text[lower].isspace():
        lower += 1
    return lower


def skip_trailing_whitespace(text: str, lower: int, upper: int) -> int:
    """Return the index after the last non-whitespace character in ``text[lower:upper]``.

    Returns ``lower`` if the range is blank.
    """
    while upper > lower and text[upper - 1].isspace():
        upper -= 1
    return upper


def trim_range(text: str, lower: int, upper: int) -> str:
    """Return ``text[lower:upper]`` without leading and trailing whitespace."""
    lower = skip_leading_whitespace(text, lower, upper)
    upper = skip_trailing_whitespace(text, lower, upper)
    return text[lower:upper]


def region_matches(component: str, text: str, lower: int, upper: int) -> bool:
    """Check whether a sub-range of ``text`` is the given component.

    The comparison ignores case and leading/trailing whitespace. Whitespace
    inside the range is significant.

    Parameters
    ----------
    component : str
        Expected component ("urn", "ogc", "def", an authority, etc.).
    text : str
        Full text being parsed.
    lower : int
        Index of the first character of the range.
    upper : int
        Index after the last character of the range.

    Returns
    -------
    bool
        True if the trimmed range equals ``component`` ignoring case.
    """
    lower = skip_leading_whitespace(text, lower, upper)
    upper = skip_trailing_whitespace(text, lower, upper)
    if upper - lower != len(component):
        return False
    return text[lower:upper].lower() == component.lower()


def matches_any(components: tuple[str, ...], text: str, lower: int, upper: int) -> bool:
    """Return True if the range matches at least one of ``components``."""
    return any(region_matches(component, text, lower, upper) for component in components)


def is_identifier_part(char: str) -> bool:
    """Return True if ``char`` may appear inside a Unicode identifier.

    Letters, digits and connector punctuation such as ``_`` qualify.
    """
    return ("_" + char).isidentifier()


def skip_identifier_part(text: str, index: int) -> int:
    """Return the index after the run of identifier characters starting at ``index``."""
    length = len(text)
    while index < length and is_identifier_part(text[index]):
        index += 1
    return index

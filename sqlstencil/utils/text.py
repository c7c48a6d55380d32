"""Naming-convention helpers used to turn field names into parameter names."""

import re
from functools import lru_cache

# Compiled regex for snake_case
# Handles sequences like "HTTPRequest" -> "HTTP_Request" or "SSLError" -> "SSL_Error"
_SNAKE_CASE_RE_ACRONYM_SEQUENCE = re.compile(r"([A-Z\d]+)([A-Z][a-z])")
# Handles transitions like "camelCase" -> "camel_Case" or "PascalCase" -> "Pascal_Case" (partially)
_SNAKE_CASE_RE_LOWER_UPPER_TRANSITION = re.compile(r"([a-z\d])([A-Z])")
# Replaces hyphens, spaces, and dots with a single underscore
_SNAKE_CASE_RE_REPLACE_SEP = re.compile(r"[-\s.]+")
# Cleans up multiple consecutive underscores
_SNAKE_CASE_RE_CLEAN_MULTIPLE_UNDERSCORE = re.compile(r"__+")

__all__ = (
    "camel_case",
    "snake_case",
)


@lru_cache(maxsize=256)
def camel_case(string: str) -> str:
    """Lower-case the first character of a field name.

    ``ApplicationID`` becomes ``applicationID``; the rest of the name is untouched.

    Args:
        string: The field name to convert.

    Returns:
        The converted name.
    """
    if not string:
        return string
    return string[0].lower() + string[1:]


@lru_cache(maxsize=100)
def snake_case(string: str) -> str:
    """Convert a string to snake_case.

    Handles CamelCase, PascalCase, strings with spaces, hyphens, or dots
    as separators, and ensures single underscores. Acronyms are kept
    together (``ApplicationID`` becomes ``application_id``).

    Args:
        string: The string to convert.

    Returns:
        The snake_case version of the string.
    """
    if not string:
        return ""
    s = string.strip()
    s = _SNAKE_CASE_RE_REPLACE_SEP.sub("_", s)
    s = _SNAKE_CASE_RE_ACRONYM_SEQUENCE.sub(r"\1_\2", s)
    s = _SNAKE_CASE_RE_LOWER_UPPER_TRANSITION.sub(r"\1_\2", s)
    s = re.sub(r"[^\w_]", "", s, flags=re.UNICODE)
    s = _SNAKE_CASE_RE_CLEAN_MULTIPLE_UNDERSCORE.sub("_", s)
    return s.lower().strip("_")

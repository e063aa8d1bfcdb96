"""Derive machine-safe identifiers from human-readable labels."""

import re

__all__ = ["to_camel_case"]

# A run of non-alphanumerics and the character that follows it, if any.
_SEPARATOR_RUN = re.compile(r"[^a-zA-Z0-9]+(.)?")


def to_camel_case(label: str) -> str:
    """Convert a label to a camelCase identifier.

    Every run of characters outside ``[A-Za-z0-9]`` is dropped and the
    character after it is upper-cased; the first character of the result is
    then lower-cased. Labels with no alphanumerics produce an empty string,
    and callers supply their own fallback.

    Example:
        >>> to_camel_case("New dropdown")
        'newDropdown'
        >>> to_camel_case("E-mail address (work)")
        'eMailAddressWork'
    """
    joined = _SEPARATOR_RUN.sub(
        lambda match: match.group(1).upper() if match.group(1) else "",
        label,
    )
    return joined[:1].lower() + joined[1:]

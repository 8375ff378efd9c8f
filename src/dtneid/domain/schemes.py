"""URI scheme registry for endpoint identifiers.

Scheme codes are the integers carried on the wire. Scheme names are the
text prefixes accepted by the parser and produced by the renderer.
"""

from __future__ import annotations

from enum import IntEnum


class SchemeCode(IntEnum):
    """Known endpoint naming schemes."""

    DTN = 1
    IPN = 2


SCHEME_NAMES: dict[SchemeCode, str] = {
    SchemeCode.DTN: "dtn",
    SchemeCode.IPN: "ipn",
}

SCHEMES_BY_NAME: dict[str, SchemeCode] = {name: code for code, name in SCHEME_NAMES.items()}

# Literal SSP of the "dtn:none" endpoint and the integer it is carried as.
DTN_NONE_SSP = "none"
DTN_NONE_VALUE = 0

UINT64_MAX = 2**64 - 1


def scheme_name(code: int) -> str:
    """Return the text prefix for *code*, or ``unknown_<code>``.

    Examples:
        >>> scheme_name(1)
        'dtn'
        >>> scheme_name(7)
        'unknown_7'
    """
    try:
        return SCHEME_NAMES[SchemeCode(code)]
    except ValueError:
        return f"unknown_{code}"

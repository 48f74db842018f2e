"""
Identifiers embedded in generated markup.

An element id is used twice by the table view: as the ``id`` attribute of
the table and as the suffix of its ``todoSort_<id>`` script function, so it
has to be a valid JavaScript identifier fragment as well as an HTML id.
"""

import re
import secrets

from todofiles.errors import UsageError

ELEMENT_ID_RE = re.compile(r"^[A-Za-z0-9_]+$")


def generate_element_id(length: int = 8) -> str:
    """Random lowercase hex id, e.g. "a7f3c2d1"."""
    return secrets.token_hex((length + 1) // 2)[:length]


def check_element_id(element_id: str) -> str:
    """
    Validate a caller-supplied element id.

    Raises:
        UsageError: empty, or contains characters other than letters, digits and "_"
    """
    if not ELEMENT_ID_RE.match(element_id or ""):
        raise UsageError(f"Invalid element id {element_id!r}; use letters, digits and '_' only")
    return element_id

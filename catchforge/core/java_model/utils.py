"""Java model utilities.

Identifier validation and name helpers shared by the model, the
reader and the synthesis engine.
"""

import re
from typing import Tuple

from ..constants import JAVA_KEYWORDS
from ..errors import InvalidIdentifierError

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

JAVA_EXTENSION = ".java"


def is_java_identifier(name: str) -> bool:
    """Check if a string is a legal Java identifier.

    Args:
        name: Candidate identifier

    Returns:
        True if the name matches the identifier grammar and is not a keyword
    """
    return bool(name) and bool(_IDENTIFIER_RE.match(name)) and name not in JAVA_KEYWORDS


def is_qualified_name(name: str) -> bool:
    """Check if a string is a dotted path of Java identifiers (``a.b.C``)."""
    if not name:
        return False
    return all(is_java_identifier(part) for part in name.split("."))


def require_identifier(name: str, what: str = "identifier") -> str:
    """Return ``name`` unchanged or raise InvalidIdentifierError."""
    if not is_java_identifier(name):
        raise InvalidIdentifierError(f"Invalid Java {what}: {name!r}")
    return name


def require_qualified_name(name: str, what: str = "type name") -> str:
    """Return ``name`` unchanged or raise InvalidIdentifierError."""
    if not is_qualified_name(name):
        raise InvalidIdentifierError(f"Invalid Java {what}: {name!r}")
    return name


def split_qualified_name(qualified_name: str) -> Tuple[str, str]:
    """Split ``com.example.Foo`` into ``("com.example", "Foo")``.

    Unqualified names return an empty package.
    """
    package, _, name = qualified_name.rpartition(".")
    return package, name

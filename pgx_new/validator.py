"""Extension name validation.

Extension names become a directory name, a ``.control`` file name, a crate
name and part of generated Rust identifiers, so they are restricted to
lowercase ASCII letters, digits and underscores.
"""

from __future__ import annotations

import string

ALLOWED_CHARACTERS: frozenset[str] = frozenset(
    string.ascii_lowercase + string.digits + "_"
)


class ExtensionNameError(ValueError):
    """Raised when a proposed extension name contains a disallowed character."""

    def __init__(self, name: str, character: str | None = None) -> None:
        self.name = name
        self.character = character
        super().__init__("Extension name must be in the set of [a-z0-9_]")


def validate_extension_name(name: str) -> str:
    """Return *name* unchanged if it is a valid extension name.

    Every character must be a member of ``[a-z0-9_]``.  The empty string is
    rejected as well.

    Raises:
        ExtensionNameError: On the first disallowed character (or an empty
            name).
    """
    if not name:
        raise ExtensionNameError(name)
    for char in name:
        if char not in ALLOWED_CHARACTERS:
            raise ExtensionNameError(name, char)
    return name


def is_valid_extension_name(name: str) -> bool:
    """Return ``True`` if *name* passes :func:`validate_extension_name`."""
    try:
        validate_extension_name(name)
    except ExtensionNameError:
        return False
    return True

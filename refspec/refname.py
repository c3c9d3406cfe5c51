"""Syntax checks for reference names.

The rules follow git-check-ref-format(1), with two relaxations needed by
refspecs: one-level names (``main``, ``HEAD``) are accepted, and a single
``*`` may appear anywhere in the name.
"""
import re
import typing as t

NameValidator = t.Callable[[bytes], bool]

BAD_REF_CHARS = set(b"\177 ~^:?[\\")

# Suffixes understood by rev-parse, e.g. `HEAD~2`, `v1.0^{commit}`, `main@{upstream}`
_REVISION_SUFFIX = re.compile(rb"(?:~\d*|\^\d*|\^\{[^}]*\}|@\{[^}]*\})+$")

_HEX_DIGITS = set(b"0123456789abcdef")
OBJECT_ID_LENGTHS = (40, 64)


def is_valid_name(name: bytes) -> bool:
    """Check if `name` is a well-formed reference name or pattern."""
    if not name or name == b"@":
        return False
    if name.count(b"*") > 1:
        return False
    if name.startswith(b"/") or name.endswith(b"/") or b"//" in name:
        return False
    if name.startswith(b".") or b"/." in name or b".." in name:
        return False
    if name.endswith(b"."):
        return False
    if b"@{" in name:
        return False
    for c in name:
        if c < 0o40 or c in BAD_REF_CHARS:
            return False
    return not any(component.endswith(b".lock") for component in name.split(b"/"))


def is_valid_revision(name: bytes, validate_name: NameValidator = is_valid_name):
    """Check if `name` is a reference name, optionally followed by rev-parse suffixes.

    A bare suffix (`@{-1}`) and `@` are accepted, as they refer to `HEAD`.
    """
    if b"*" in name:
        return False
    base = _REVISION_SUFFIX.sub(b"", name)
    if not base:
        return name.startswith(b"@{")
    if base == b"@":
        return base != name
    return validate_name(base)


def is_object_id(name: bytes):
    return len(name) in OBJECT_ID_LENGTHS and all(c in _HEX_DIGITS for c in name)

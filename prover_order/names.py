"""Source-name resolution.

One compilation unit can be reported under several file names: the spec
(pkg.ads), the body (pkg.adb) and separate subunits (pkg-child.adb). The
resolver folds those spellings into one display name, preferring shorter
names and then specs.

Only the incoming candidate is checked. A spec that was adopted earlier can
still be replaced by a later candidate that is merely shorter; folding the
same names in a different order can therefore pick a different winner.
"""

from __future__ import annotations

from pathlib import PurePath
from typing import Iterable

SPEC_EXTENSION = ".ads"


def is_spec_file(name: str) -> bool:
    """True if `name` has an Ada spec extension (any letter case)."""
    return PurePath(name).suffix.lower() == SPEC_EXTENSION


def resolve_source_name(current: str, candidate: str) -> str:
    """Return the name to keep after seeing `candidate`."""
    if not current:
        return candidate
    if len(candidate) < len(current):
        return candidate
    if is_spec_file(candidate):
        return candidate
    return current


def representative_name(candidates: Iterable[str]) -> str:
    """Fold `candidates`, in order, into a single display name."""
    name = ""
    for candidate in candidates:
        name = resolve_source_name(name, candidate)
    return name

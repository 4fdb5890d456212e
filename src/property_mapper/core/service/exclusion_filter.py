"""
Removal of always-skipped property names.
"""

from typing import AbstractSet, Iterable, List

# Object meta names with no sensible counterpart on a target
DEFAULT_EXCLUSIONS: frozenset = frozenset({"__class__", "__dict__", "__weakref__"})


def apply_exclusions(names: Iterable[str], exclusions: AbstractSet[str]) -> List[str]:
    """Return ``names`` without any excluded name, keeping the original order."""
    return [name for name in names if name not in exclusions]

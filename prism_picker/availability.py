"""
PRISM — Availability Filter
"""

from __future__ import annotations

from collections.abc import Callable, Sequence


def filter_loadable(catalog: Sequence[str], is_loadable: Callable[[str], bool]) -> list[str]:
    """Return the catalog entries the predicate accepts, in catalog order.

    Duplicates are kept as they appear.
    """
    return [theme for theme in catalog if is_loadable(theme)]

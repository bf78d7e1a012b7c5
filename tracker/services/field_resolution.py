"""
Field resolution for loosely-typed spreadsheet rows.

Remote sheets name their columns freely ("Student Name", "Intern ID #",
"hours_logged"). A FieldResolver picks the value for a logical field from
a raw row given one or more candidate column names, tried in order.
"""
from __future__ import annotations

import re
from typing import Any, Mapping, Optional, Protocol

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def normalize_key(key: str) -> str:
    """Lower-case and drop everything but [a-z0-9]."""
    return _NON_ALNUM.sub("", str(key).lower())


class FieldResolver(Protocol):
    def resolve(self, row: Mapping[str, Any], *candidates: str) -> Optional[Any]:
        ...


class ExactFieldResolver:
    """Only exact column names match."""

    def resolve(self, row: Mapping[str, Any], *candidates: str) -> Optional[Any]:
        for candidate in candidates:
            if candidate in row:
                return row[candidate]
        return None


class FuzzyFieldResolver:
    """
    A column matches when its normalized name contains the normalized
    candidate, so "Intern ID #" answers for "intern id". The first
    matching column in row order wins for each candidate.
    """

    def resolve(self, row: Mapping[str, Any], *candidates: str) -> Optional[Any]:
        normalized = [(normalize_key(k), k) for k in row.keys()]
        for candidate in candidates:
            target = normalize_key(candidate)
            if not target:
                continue
            for norm, key in normalized:
                if target in norm:
                    return row[key]
        return None

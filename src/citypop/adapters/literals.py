"""Quoting for names embedded in SPARQL and Overpass QL string literals."""

from __future__ import annotations


def escape_literal(value: str) -> str:
    """Backslash-escape ``\\`` and ``"``; both query languages share these rules."""

    return value.replace("\\", "\\\\").replace('"', '\\"')

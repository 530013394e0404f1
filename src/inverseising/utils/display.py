from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def format_mapping(mapping: Mapping[Any, Any], reorder: bool = False) -> str:
    """Render one ``key => value`` line per entry."""

    items = sorted(mapping.items(), key=lambda kv: kv[0]) if reorder else list(mapping.items())
    return "\n".join(f"{key} => {value}" for key, value in items)


def dprint(mapping: Mapping[Any, Any], reorder: bool = False) -> None:
    """Print a mapping, optionally sorted by key."""

    text = format_mapping(mapping, reorder=reorder)
    if text:
        print(text)

"""
Stripe's bracket form encoding for request bodies and query strings.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Mapping, Tuple

__all__ = ["encode_params", "stringify"]

Pairs = List[Tuple[str, str]]


def stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return stringify(value.value)
    return str(value)


def _flatten(pairs: Pairs, key: str, value: Any) -> None:
    if isinstance(value, Mapping):
        if not value:
            # An empty mapping is how the API is told to clear it.
            pairs.append((key, ""))
            return
        for sub_key, sub_value in value.items():
            _flatten(pairs, f"{key}[{sub_key}]", sub_value)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _flatten(pairs, f"{key}[{index}]", item)
    else:
        pairs.append((key, stringify(value)))


def encode_params(payload: Mapping[str, Any]) -> Pairs:
    """
    Flatten ``payload`` into ordered ``(key, value)`` pairs.

    Example::

        {"metadata": {"order": "42"}, "items": [{"plan": "gold"}]}

    becomes::

        [("metadata[order]", "42"), ("items[0][plan]", "gold")]
    """
    pairs: Pairs = []
    for key, value in payload.items():
        _flatten(pairs, key, value)
    return pairs

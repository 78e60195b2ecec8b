"""Rewrite policy for injecting a resolved schema into a property definition."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any


def is_pure_choice(body: Mapping[str, Any]) -> bool:
    """Return True for schemas that only say "match one of these alternatives"."""
    return _has(body, "anyOf") and not _has(body, "type")


def rewrite_field_schema(body: Mapping[str, Any]) -> dict[str, Any]:
    """Build the property definition that replaces the generated one.

    A pure-choice body keeps only ``description`` and ``anyOf``. Any other
    body becomes a typed object with defaults for the missing keys, and keeps
    its ``anyOf`` alongside when it has one.
    """
    if is_pure_choice(body):
        return {
            "description": _value(body, "description", ""),
            "anyOf": copy.deepcopy(body["anyOf"]),
        }

    rewritten = {
        "type": _value(body, "type", "object"),
        "description": _value(body, "description", ""),
        "properties": _value(body, "properties", {}),
        "required": _value(body, "required", []),
        "additionalProperties": _value(body, "additionalProperties", False),
    }
    if _has(body, "anyOf"):
        rewritten["anyOf"] = copy.deepcopy(body["anyOf"])
    return rewritten


def _has(body: Mapping[str, Any], key: str) -> bool:
    return body.get(key) is not None


def _value(body: Mapping[str, Any], key: str, default: Any) -> Any:
    value = body.get(key)
    return copy.deepcopy(value) if value is not None else default

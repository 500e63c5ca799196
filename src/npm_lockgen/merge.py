"""Merge a freshly generated lockfile into the previously committed one.

The merge keeps the prior document's key order and any keys this tool does not
produce, so regenerating a lockfile yields a minimal diff. Keys this tool owns
are taken from the new document and dropped when the new document omits them.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

DOCUMENT_KEYS = frozenset({"name", "version", "lockfileVersion", "requires", "dependencies"})
ENTRY_KEYS = frozenset({"version", "requires", "dev", "optional", "dependencies"})
# Only carried over from the prior entry when the installed version is unchanged.
METADATA_KEYS = ("integrity", "resolved")

Merger = Callable[[Any, Any], Any]


def _ordered_keys(original: dict[str, Any], update: dict[str, Any]) -> list[str]:
    keys = [key for key in original if key in update]
    keys.extend(key for key in update if key not in original)
    return keys


def _merge_object(
    original: dict[str, Any],
    update: dict[str, Any],
    owned: frozenset[str],
    mergers: dict[str, Merger],
) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key in original:
        if key in update:
            merger = mergers.get(key)
            result[key] = merger(original[key], update[key]) if merger else update[key]
        elif key not in owned:
            result[key] = original[key]
    for key in update:
        if key not in original:
            result[key] = update[key]
    return result


def _merge_name_map(original: Any, update: Any, merger: Merger | None = None) -> Any:
    """Merge maps keyed by package name; membership comes from ``update``."""
    if not isinstance(update, dict) or not isinstance(original, dict):
        return update
    result: dict[str, Any] = {}
    for key in _ordered_keys(original, update):
        if merger is not None and key in original:
            result[key] = merger(original[key], update[key])
        else:
            result[key] = update[key]
    return result


def _merge_entry(original: Any, update: Any) -> Any:
    if not isinstance(original, dict) or not isinstance(update, dict):
        return update

    merged = _merge_object(
        original,
        update,
        ENTRY_KEYS,
        {"requires": _merge_name_map, "dependencies": _merge_dependencies},
    )
    if original.get("version") != update.get("version"):
        for key in METADATA_KEYS:
            if key not in update:
                merged.pop(key, None)
    return merged


def _merge_dependencies(original: Any, update: Any) -> Any:
    return _merge_name_map(original, update, _merge_entry)


def transform_into(original: Any, update: dict[str, Any]) -> dict[str, Any]:
    """Return ``update`` laid over the prior lockfile document ``original``."""
    if not isinstance(original, dict):
        return dict(update)
    return _merge_object(original, update, DOCUMENT_KEYS, {"dependencies": _merge_dependencies})

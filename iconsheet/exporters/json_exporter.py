"""Export a Collection as an icon set JSON document.

Schema:
    {
      "prefix"?: str, "width"?: num, "height"?: num,
      "icons": {keyword: {"body", "width"?, "height"?, "rotate"?, "hFlip"?, "vFlip"?}},
      "aliases"?: {name: {"parent", "rotate"?, "hFlip"?, "vFlip"?}}
    }

Prefix detection rewrites the exported Collection in place: when it has no
prefix and every key starts with the same "segment-" or "segment:", the
segment becomes ``collection.prefix`` and is stripped from the keys.
"""

from __future__ import annotations

import logging
import os
import re
from collections import Counter
from typing import Any, Awaitable, Callable, Iterable

from iconsheet.models.collection import Collection
from iconsheet.models.icon import AliasSpec
from iconsheet.svg.parser import format_number
from iconsheet.svg.writer import write_json

logger = logging.getLogger(__name__)

Writer = Callable[[Any, dict[str, Any]], Awaitable[None]]

_DIMENSIONS = ("width", "height")
_SET_KEY_ORDER = ("prefix", "width", "height", "icons", "aliases")
_ICON_KEY_ORDER = ("body", "width", "height", "rotate", "hFlip", "vFlip")
_SEPARATORS = ("-", ":")

# Leading segment up to the first separator, then a non-empty remainder
_PREFIXED_KEY_RE = re.compile(r"^([^:-]+)[:-](.+)$")


# ── Prefix detection ──────────────────────────────────────────────────────


def detect_prefix(keys: Iterable[str]) -> str | None:
    """Shared leading segment of all keys, or None when keys don't agree."""
    prefix: str | None = None
    remainders: set[str] = set()
    count = 0

    for key in keys:
        match = _PREFIXED_KEY_RE.match(key)
        if match is None:
            return None
        if prefix is None:
            prefix = match.group(1)
        elif match.group(1) != prefix:
            return None
        remainders.add(match.group(2))
        count += 1

    # Stripping must not merge two keys
    if prefix is None or len(remainders) != count:
        return None
    return prefix


def _strip_prefix(name: str, prefix: str) -> str:
    if name.startswith(prefix) and name[len(prefix):len(prefix) + 1] in _SEPARATORS:
        return name[len(prefix) + 1:] or name
    return name


def apply_prefix(collection: Collection) -> str | None:
    """Detect a prefix for an unprefixed collection and rewrite its keys.

    Mutates ``collection``: keys and alias names lose the prefix and
    ``collection.prefix`` is set. Returns the effective prefix.
    """
    if collection.prefix:
        return collection.prefix

    prefix = detect_prefix(collection.items)
    if prefix is None:
        return None

    collection.items = {_strip_prefix(key, prefix): icon for key, icon in collection.items.items()}
    for icon in collection.items.values():
        icon.aliases = [
            alias.model_copy(update={"name": _strip_prefix(alias.name, prefix)})
            if isinstance(alias, AliasSpec)
            else _strip_prefix(alias, prefix)
            for alias in icon.aliases
        ]
    collection.prefix = prefix
    logger.debug("Detected prefix %r for %d icons", prefix, collection.length())
    return prefix


# ── Building ──────────────────────────────────────────────────────────────


def _ordered(record: dict[str, Any], order: tuple[str, ...]) -> dict[str, Any]:
    known = {key: record[key] for key in order if key in record}
    known.update((key, value) for key, value in record.items() if key not in known)
    return known


def build_icon_set(collection: Collection) -> dict[str, Any]:
    """Non-optimized document. Does not touch the collection."""
    data: dict[str, Any] = {}
    if collection.prefix:
        data["prefix"] = collection.prefix

    icons: dict[str, Any] = {}
    aliases: dict[str, Any] = {}
    for keyword, icon in collection.items.items():
        record: dict[str, Any] = {
            "body": icon.body,
            "width": format_number(icon.width),
            "height": format_number(icon.height),
        }
        record.update(icon.transform_hints())
        icons[keyword] = record

        # Alias hints are the alias's own, never inherited from the parent
        for alias in icon.aliases:
            if isinstance(alias, AliasSpec):
                aliases[alias.name] = {"parent": keyword, **alias.transform_hints()}
            else:
                aliases[alias] = {"parent": keyword}

    data["icons"] = icons
    if aliases:
        data["aliases"] = aliases
    return data


# ── Optimization ──────────────────────────────────────────────────────────


def expand_icon_set(data: dict[str, Any]) -> dict[str, Any]:
    """Copy of ``data`` with top-level width/height pushed back into the icons."""
    result = {key: value for key, value in data.items() if key not in _DIMENSIONS and key != "icons"}

    icons: dict[str, Any] = {}
    for keyword, record in data["icons"].items():
        icon = dict(record)
        for dim in _DIMENSIONS:
            if dim not in icon and dim in data:
                icon[dim] = data[dim]
        icons[keyword] = _ordered(icon, _ICON_KEY_ORDER)

    result["icons"] = icons
    return _ordered(result, _SET_KEY_ORDER)


def _dominant_value(values: list[Any]) -> Any | None:
    """Strictly most frequent value shared by 2+ icons; None on ties."""
    ranked = Counter(values).most_common(2)
    if not ranked:
        return None
    value, count = ranked[0]
    if count < 2:
        return None
    if len(ranked) > 1 and ranked[1][1] == count:
        return None
    return value


def optimize_icon_set(data: dict[str, Any]) -> dict[str, Any]:
    """Hoist the dominant width and height to the top level.

    Works on expanded or already optimized documents; applying it twice gives
    the same result.
    """
    result = expand_icon_set(data)
    icons = result["icons"]

    for dim in _DIMENSIONS:
        value = _dominant_value([record[dim] for record in icons.values() if dim in record])
        if value is None:
            continue
        result[dim] = value
        for record in icons.values():
            if dim in record and record[dim] == value:
                del record[dim]

    return _ordered(result, _SET_KEY_ORDER)


# ── Export ────────────────────────────────────────────────────────────────


async def export_json(
    collection: Collection,
    destination: str | os.PathLike[str] | None = None,
    *,
    optimize: bool = False,
    writer: Writer = write_json,
) -> dict[str, Any]:
    """Export ``collection``, optionally writing it to ``destination``.

    May rewrite the collection's keys and prefix (see ``apply_prefix``).
    Returns the exact document that was written.
    """
    apply_prefix(collection)
    data = build_icon_set(collection)
    if optimize:
        data = optimize_icon_set(data)

    if destination is not None:
        await writer(destination, data)

    logger.info(
        "Exported %d icons (prefix=%s, optimized=%s)",
        len(data["icons"]),
        data.get("prefix"),
        optimize,
    )
    return data

"""Structural helpers for the nested chart options tree.

Every builder component writes through these helpers so that intermediate
mappings always exist before a value lands on them, and so that partial
option fragments merge into the tree instead of replacing whole sub-trees.

Missing (or `None`) children are the only values these helpers create.
Existing non-mapping values, such as the `series` list or a multi-axis
`yaxis` list, are never replaced by path traversal or scaffolding.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Mapping, MutableMapping, Sequence
from typing import Any

logger = logging.getLogger(__name__)

OptionPath = str | Sequence[str]


def split_path(path: OptionPath) -> tuple[str, ...]:
    """Normalize a dotted path or a sequence of segments into a tuple of strings.

    Raises:
        ValueError: If the path has no segments.
    """

    segments = tuple(path.split(".")) if isinstance(path, str) else tuple(str(segment) for segment in path)
    if not segments or any(segment == "" for segment in segments):
        raise ValueError(f"Option path must contain non-empty segments: {path!r}")
    return segments


def ensure_mapping(parent: MutableMapping[str, Any], key: str) -> MutableMapping[str, Any]:
    """Return `parent[key]` as a mapping for a setter that writes into it.

    A child that is absent or `None` becomes an empty dict. This is the write
    path of explicit setters (e.g. `Legend.labels`): a stored value that is
    not a mapping is replaced, because the caller asked to configure that
    field as a mapping. Scaffolding uses `scaffold_path` instead, which never
    replaces existing values.
    """

    child = parent.get(key)
    if not isinstance(child, MutableMapping):
        child = {}
        parent[key] = child
    return child


def scaffold_path(tree: MutableMapping[str, Any], path: OptionPath) -> None:
    """Create empty mappings along `path` where children are absent or `None`.

    Existing values are left untouched. Descent stops at the first existing
    value that is not a mapping (for example a per-series list), so that value
    and everything below it stay exactly as they are.
    """

    node = tree
    for segment in split_path(path):
        child = node.get(segment)
        if child is None:
            child = {}
            node[segment] = child
        elif not isinstance(child, MutableMapping):
            return
        node = child


def set_path(tree: MutableMapping[str, Any], path: OptionPath, value: Any) -> bool:
    """Assign `value` at `path`, creating missing intermediate mappings.

    A segment that is absent or `None` becomes an empty mapping. A list is
    descended into when the next segment is a valid index ("series.0.name").
    Any other existing value is left alone and nothing is written.

    Args:
        tree: Root mapping that is mutated in place.
        path: Dot-separated path (e.g. "xaxis.labels.style.fontSize") or a
            sequence of key segments.
        value: Value stored at the final segment. Any existing value there is
            overwritten, never merged, and the value is stored by reference.

    Returns:
        True when the value was stored, False when an existing non-mapping
        value blocked the path.
    """

    segments = split_path(path)
    node: Any = tree
    for segment in segments[:-1]:
        node = _descend(node, segment)
        if node is None:
            logger.debug("Not setting %s: %r is blocked by a non-mapping value", ".".join(segments), segment)
            return False
    if _store(node, segments[-1], value):
        return True
    logger.debug("Not setting %s: final segment does not address the stored value", ".".join(segments))
    return False


def _descend(node: Any, segment: str) -> Any:
    """Return the child container for `segment`, or None when it cannot be entered."""

    if isinstance(node, MutableMapping):
        child = node.get(segment)
        if child is None:
            child = {}
            node[segment] = child
    elif isinstance(node, list) and segment.isdigit() and int(segment) < len(node):
        index = int(segment)
        child = node[index]
        if child is None:
            child = {}
            node[index] = child
    else:
        return None
    return child if isinstance(child, (MutableMapping, list)) else None


def _store(node: Any, leaf: str, value: Any) -> bool:
    if isinstance(node, MutableMapping):
        node[leaf] = value
        return True
    if isinstance(node, list) and leaf.isdigit():
        index = int(leaf)
        if index < len(node):
            node[index] = value
            return True
        if index == len(node):
            node.append(value)
            return True
    return False


def merge_mapping(
    parent: MutableMapping[str, Any],
    key: str,
    partial: Mapping[str, Any],
    *,
    deep: Iterable[str] = (),
) -> MutableMapping[str, Any]:
    """Shallow-merge `partial` into `parent[key]` in place.

    Keys present in `partial` overwrite stored keys of the same name, all other
    stored keys survive. Names listed in `deep` (dotted for deeper levels, e.g.
    "labels" then "labels.name") are merged one level further against the
    previously stored mapping instead of being replaced wholesale.

    Args:
        parent: Mapping that owns the merged sub-mapping.
        key: Key of the sub-mapping; created when missing.
        partial: Fragment supplied by the caller. Merged levels are updated
            key by key and values stored wholesale are deep-copied, so the
            tree never shares containers with `partial`. The stored
            sub-mapping itself is updated in place: a mapping that was
            earlier placed in the tree by reference (e.g. with `set_path`)
            sees the merge.
        deep: Nested field names that receive a deeper merge.

    Returns:
        The merged sub-mapping stored at `parent[key]`.
    """

    target = ensure_mapping(parent, key)
    _merge_into(target, partial, tuple(deep))
    return target


def _merge_into(target: MutableMapping[str, Any], partial: Mapping[str, Any], deep: tuple[str, ...]) -> None:
    """Merge one level, recursing only into the names listed in `deep`."""

    for name, value in partial.items():
        if name in _heads(deep) and isinstance(value, Mapping):
            _merge_into(ensure_mapping(target, name), value, _tails(deep, name))
        else:
            target[name] = copy.deepcopy(value)


def _heads(deep: tuple[str, ...]) -> set[str]:
    return {path.split(".", 1)[0] for path in deep}


def _tails(deep: tuple[str, ...], head: str) -> tuple[str, ...]:
    prefix = f"{head}."
    return tuple(path[len(prefix) :] for path in deep if path.startswith(prefix))

# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeIndex - Read-only indexes over a flat node collection.

This module provides the TreeIndex class. Given a flat list of nodes, each
carrying its own id and the id of its parent (or the 'root' sentinel),
TreeIndex builds two lookup tables once at construction time:

    - **by id**: id -> node, for O(1) point lookup
    - **by parent**: parent key -> ordered list of direct children

The items handed to the constructor are the items handed back: a dict
record comes back as that same dict, a TreeIndexNode as that same node.
Records are read through TreeIndexNode views only to find their keys.

Traversals (all descendants, all ancestors) are built on top of them with
explicit work stacks, so deep trees never hit the recursion limit and
cyclic input fails with CyclicStructureError instead of looping forever.

Return conventions:
    - Unknown id to get_item: the default (None)
    - Unknown or childless key to get_children/get_all_children: []
    - Unknown id or top-level node to get_all_parents: None

Example:
    Basic usage::

        items = [
            {'id': 1, 'parent': 'root'},
            {'id': 2, 'parent': 1, 'type': 'test'},
            {'id': 3, 'parent': 2, 'type': None},
        ]
        index = TreeIndex(items)
        index.get_all() == items    # True
        index.get_item(3) is items[2]   # True
        index.get_all_children(1)   # [items[1], items[2]]
        index.get_all_parents(3)    # [items[1], items[0]]
        index.get_all_parents(1)    # None
"""

from __future__ import annotations

import logging
from typing import Any, Hashable, Iterable, Iterator

from ..exceptions import CyclicStructureError, DuplicateIdError
from ..loading import load_nodes
from ..node import ROOT

logger = logging.getLogger(__name__)

_UNSET = object()


class TreeIndex:
    """A read-only index over a flat collection of parent-linked nodes.

    TreeIndex provides:
    - get_all(): all items in original order
    - get_item(id) / index[id]: point lookup by id
    - get_children(key): direct children of a node or of the root sentinel
    - get_all_children(key): all descendants, each child list before its subtrees
    - walk(key): (depth, item) pairs in depth-first pre-order
    - get_all_parents(id): ancestors from nearest to furthest

    Nothing is mutated after construction. Returned lists are fresh, the
    items inside them are the caller's own, shared with the index.

    Example:
        >>> index = TreeIndex([(1, 'root'), (2, 1), (3, 1)])
        >>> index.get_children(1)
        [(2, 1), (3, 1)]
    """

    __slots__ = ('_source', '_nodes', '_by_id', '_by_parent', '_root')

    def __init__(
        self,
        source: Iterable[Any] | None = None,
        root: Hashable = ROOT,
        raise_on_duplicate: bool = False,
    ) -> None:
        """Initialize a TreeIndex.

        Args:
            source: Nodes in collection order. Items can be TreeIndexNode,
                mappings ({'id': .., 'parent': .., 'type': ..}) or tuples
                (id, parent[, type]). Queries return these same items.
            root: Sentinel parent value marking top-level nodes.
            raise_on_duplicate: If True, a repeated id raises DuplicateIdError.
                If False (default), the last node with a given id wins the
                by-id lookup while every node keeps its place among its
                parent's children.

        Raises:
            DuplicateIdError: On a repeated id when raise_on_duplicate is set.
            InvalidRecordError: If a source record is malformed.
        """
        self._root = root
        self._source: tuple[Any, ...] = tuple(source or ())
        # parallel to _source, used to read id/parent of any record shape
        self._nodes = tuple(load_nodes(self._source))
        self._by_id = self._index_by_id(raise_on_duplicate)
        self._by_parent = self._index_by_parent()
        logger.debug(
            "Indexed %d nodes under %d parent keys",
            len(self._nodes), len(self._by_parent),
        )

    def _index_by_id(self, raise_on_duplicate: bool) -> dict[Any, int]:
        by_id: dict[Any, int] = {}
        for pos, node in enumerate(self._nodes):
            if node.id in by_id:
                if raise_on_duplicate:
                    raise DuplicateIdError(node.id)
                logger.debug("Duplicate node id %r, keeping the last one", node.id)
            by_id[node.id] = pos
        return by_id

    def _index_by_parent(self) -> dict[Any, list[int]]:
        by_parent: dict[Any, list[int]] = {}
        for pos, node in enumerate(self._nodes):
            by_parent.setdefault(node.parent, []).append(pos)
        return by_parent

    def _items(self, positions: Iterable[int]) -> list[Any]:
        return [self._source[pos] for pos in positions]

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"TreeIndex({len(self._source)} nodes, root={self._root!r})"

    def __len__(self) -> int:
        """Return the number of nodes in the source collection."""
        return len(self._source)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over all items in original order."""
        return iter(self._source)

    def __contains__(self, node_id: Any) -> bool:
        return node_id in self._by_id

    def __getitem__(self, node_id: Any) -> Any:
        """Get a node by id.

        Raises:
            KeyError: If no node has this id.
        """
        try:
            return self._source[self._by_id[node_id]]
        except KeyError:
            raise KeyError(f"Node id {node_id!r} not found") from None

    @property
    def root(self) -> Hashable:
        """The root sentinel value."""
        return self._root

    # ==================== Core API ====================

    def get_all(self) -> list[Any]:
        """Return all items as given, in the order they were given."""
        return list(self._source)

    def get_item(self, node_id: Any, default: Any = None) -> Any:
        """Return the item with the given id, or default if not indexed."""
        pos = self._by_id.get(node_id)
        return default if pos is None else self._source[pos]

    def get_children(self, parent_key: Any) -> list[Any]:
        """Return the direct children of parent_key in collection order.

        Args:
            parent_key: A node id or the root sentinel.

        Returns:
            List of child items. Empty (never None) when there are none.
        """
        return self._items(self._by_parent.get(parent_key, ()))

    def get_roots(self) -> list[Any]:
        """Return the top-level items."""
        return self.get_children(self._root)

    def is_top_level(self, node_id: Any) -> bool:
        """True if the node's parent is this index's root sentinel.

        Unknown ids are not top level.
        """
        pos = self._by_id.get(node_id)
        return pos is not None and self._nodes[pos].parent == self._root

    def get_all_children(self, parent_key: Any) -> list[Any]:
        """Return all descendants of parent_key.

        The direct children of parent_key come first, in collection order,
        followed by the descendants of each child in turn, built the same
        way: for children [a, b] the result is
        [a, b] + get_all_children(a.id) + get_all_children(b.id).
        Use walk() for a strict depth-first pre-order.

        Args:
            parent_key: A node id or the root sentinel.

        Returns:
            List of descendant items, empty when there are none.

        Raises:
            CyclicStructureError: If a descendant's id is already on the
                path from parent_key.

        Example:
            >>> index = TreeIndex([(1, 'root'), (2, 1), (3, 2), (4, 1)])
            >>> index.get_all_children(1)
            [(2, 1), (4, 1), (3, 2)]
        """
        result: list[int] = []
        on_path: set[Any] = set()
        # (leaving, key): leaving entries pop the key off the current path
        stack: list[tuple[bool, Any]] = [(False, parent_key)]
        while stack:
            leaving, key = stack.pop()
            if leaving:
                on_path.discard(key)
                continue
            if key in on_path:
                raise CyclicStructureError(key)
            on_path.add(key)
            stack.append((True, key))
            children = self._by_parent.get(key, ())
            result.extend(children)
            stack.extend((False, self._nodes[pos].id) for pos in reversed(children))
        return self._items(result)

    def get_all_parents(self, node_id: Any) -> list[Any] | None:
        """Return the ancestors of a node, nearest first.

        The root sentinel itself is never included. A parent id that is not
        indexed ends the chain there without error.

        Args:
            node_id: The node to start from.

        Returns:
            List [parent, grandparent, ...], or None if node_id is unknown
            or the node sits directly under the root sentinel.

        Raises:
            CyclicStructureError: If the parent chain loops.
        """
        pos = self._by_id.get(node_id)
        if pos is None or self._nodes[pos].parent == self._root:
            return None

        parents: list[int] = []
        seen = {self._nodes[pos].id}
        parent_id = self._nodes[pos].parent
        while parent_id != self._root:
            if parent_id in seen:
                raise CyclicStructureError(parent_id)
            seen.add(parent_id)
            parent_pos = self._by_id.get(parent_id)
            if parent_pos is None:
                logger.debug(
                    "Parent id %r of node %r not indexed, ancestor chain truncated",
                    parent_id, node_id,
                )
                break
            parents.append(parent_pos)
            parent_id = self._nodes[parent_pos].parent
        return self._items(parents)

    # ==================== Navigation ====================

    def depth(self, node_id: Any) -> int | None:
        """Return the level of a node (top-level nodes are at depth 1).

        A truncated ancestor chain counts only the ancestors found.
        Returns None for unknown ids.
        """
        if node_id not in self._by_id:
            return None
        return len(self.get_all_parents(node_id) or ()) + 1

    # ==================== Walk ====================

    def _walk_positions(self, parent_key: Any) -> Iterator[tuple[int, int]]:
        path = [parent_key]
        on_path = {parent_key}
        stack = [iter(self._by_parent.get(parent_key, ()))]
        while stack:
            pos = next(stack[-1], None)
            if pos is None:
                stack.pop()
                on_path.discard(path.pop())
                continue
            node_id = self._nodes[pos].id
            if node_id in on_path:
                raise CyclicStructureError(node_id)
            yield len(stack), pos
            children = self._by_parent.get(node_id)
            if children:
                stack.append(iter(children))
                path.append(node_id)
                on_path.add(node_id)

    def walk(self, parent_key: Any = _UNSET) -> Iterator[tuple[int, Any]]:
        """Walk the descendants of parent_key in depth-first pre-order.

        Args:
            parent_key: A node id or the root sentinel. Defaults to the root
                sentinel, walking the whole tree.

        Yields:
            Tuples of (depth, item), where direct children of parent_key
            have depth 1.

        Raises:
            CyclicStructureError: If a node's id is already on the current
                path.

        Example:
            >>> for depth, item in index.walk():
            ...     print('  ' * (depth - 1) + str(item))
        """
        if parent_key is _UNSET:
            parent_key = self._root
        for depth, pos in self._walk_positions(parent_key):
            yield depth, self._source[pos]

    # ==================== Conversion ====================

    def as_nested(self, parent_key: Any = _UNSET) -> list[dict[str, Any]]:
        """Export the descendants of parent_key as nested plain dicts.

        Each entry is {'id', 'parent'[, 'type']} plus a 'children' list.

        Args:
            parent_key: A node id or the root sentinel (default).

        Returns:
            List of nested dicts for the direct children of parent_key.

        Example:
            >>> TreeIndex([(1, 'root'), (2, 1)]).as_nested()
            [{'id': 1, 'parent': 'root', 'children': [
                {'id': 2, 'parent': 1, 'children': []}]}]
        """
        if parent_key is _UNSET:
            parent_key = self._root
        result: list[dict[str, Any]] = []
        levels = [result]
        for depth, pos in self._walk_positions(parent_key):
            entry = self._nodes[pos].as_dict()
            entry['children'] = []
            levels[depth - 1].append(entry)
            del levels[depth:]
            levels.append(entry['children'])
        return result

# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeIndex node class."""

from __future__ import annotations

from typing import Any, Mapping

ROOT = 'root'

_UNSET = object()


class TreeIndexNode:
    """A node of a flat tree collection.

    Each node has:
    - id: Integer identifier, unique within the collection
    - parent: The root sentinel ('root') or the id of another node
    - type: Optional opaque tag, either absent or any value (None included)

    Nodes are read-only once built, so the same instance can be shared
    between the index and its callers.

    Example:
        >>> node = TreeIndexNode(7, 4, type=None)
        >>> node.parent
        4
        >>> node.as_dict()
        {'id': 7, 'parent': 4, 'type': None}
    """

    __slots__ = ('_id', '_parent', '_type')

    def __init__(self, id: int, parent: int | str = ROOT, type: Any = _UNSET) -> None:
        """Initialize a TreeIndexNode.

        Args:
            id: The node identifier.
            parent: Parent id, or the root sentinel for top-level nodes.
            type: Optional tag. Omit it to mark the tag as absent.
        """
        self._id = id
        self._parent = parent
        self._type = type

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> TreeIndexNode:
        """Build a node from a mapping with 'id', 'parent' and optional 'type'.

        Raises:
            KeyError: If 'id' or 'parent' is missing.
        """
        return cls(record['id'], record['parent'], record.get('type', _UNSET))

    def __repr__(self) -> str:
        if self.has_type:
            return f"TreeIndexNode({self._id!r}, parent={self._parent!r}, type={self._type!r})"
        return f"TreeIndexNode({self._id!r}, parent={self._parent!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TreeIndexNode):
            return self.as_dict() == other.as_dict()
        if isinstance(other, Mapping):
            return self.as_dict() == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    @property
    def id(self) -> int:
        """The node identifier."""
        return self._id

    @property
    def parent(self) -> int | str:
        """Parent id or the root sentinel."""
        return self._parent

    @property
    def type(self) -> Any:
        """The type tag, None when absent."""
        return None if self._type is _UNSET else self._type

    @property
    def has_type(self) -> bool:
        """True if a type tag was given, even an explicit None."""
        return self._type is not _UNSET

    def as_dict(self) -> dict[str, Any]:
        """Return the node as a plain dict, omitting an absent type."""
        result: dict[str, Any] = {'id': self._id, 'parent': self._parent}
        if self.has_type:
            result['type'] = self._type
        return result

# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Loading functions that turn source records into TreeIndexNode lists.

Accepted items:
    - TreeIndexNode: kept as is (same instance, no copy)
    - Mapping: {'id': 1, 'parent': 'root', 'type': 'test'} ('type' optional)
    - tuple: (id, parent) or (id, parent, type)
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from .exceptions import InvalidRecordError
from .node import TreeIndexNode


def load_from_dict(record: Mapping[str, Any]) -> TreeIndexNode:
    """Create a node from a mapping record.

    Raises:
        InvalidRecordError: If 'id' or 'parent' is missing.
    """
    try:
        return TreeIndexNode.from_dict(record)
    except KeyError as e:
        raise InvalidRecordError(
            f"Record {dict(record)!r} is missing required key {e.args[0]!r}"
        ) from e


def load_from_tuple(record: tuple) -> TreeIndexNode:
    """Create a node from an (id, parent) or (id, parent, type) tuple.

    Raises:
        InvalidRecordError: If the tuple has the wrong length.
    """
    if len(record) not in (2, 3):
        raise InvalidRecordError(
            f"Tuple record must be (id, parent) or (id, parent, type), got {record!r}"
        )
    return TreeIndexNode(*record)


def load_nodes(source: Iterable[Any]) -> list[TreeIndexNode]:
    """Normalize source items into a list of TreeIndexNode.

    Args:
        source: Iterable of nodes, mappings or tuples, in collection order.

    Returns:
        List of nodes in the same order.

    Raises:
        InvalidRecordError: If a mapping or tuple record is malformed.
        TypeError: If an item is of an unsupported type.
    """
    nodes: list[TreeIndexNode] = []
    for item in source:
        if isinstance(item, TreeIndexNode):
            nodes.append(item)
        elif isinstance(item, Mapping):
            nodes.append(load_from_dict(item))
        elif isinstance(item, tuple):
            nodes.append(load_from_tuple(item))
        else:
            raise TypeError(
                f"source items must be TreeIndexNode, mapping or tuple, "
                f"not {type(item).__name__}"
            )
    return nodes

# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeIndex exceptions."""

from __future__ import annotations

from typing import Any


class TreeIndexError(Exception):
    """Base exception for TreeIndex errors."""

    pass


class InvalidRecordError(TreeIndexError):
    """Raised when a source record cannot be turned into a node."""

    pass


class DuplicateIdError(TreeIndexError):
    """Raised in strict mode when two nodes share the same id."""

    def __init__(self, node_id: Any) -> None:
        super().__init__(f"Duplicate node id: {node_id!r}")
        self.node_id = node_id


class CyclicStructureError(TreeIndexError):
    """Raised when a traversal meets a node already on its current path."""

    def __init__(self, node_id: Any) -> None:
        super().__init__(f"Cyclic parent chain through node {node_id!r}")
        self.node_id = node_id

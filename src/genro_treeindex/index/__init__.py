# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeIndex package - Read-only lookup over flat parent-linked nodes.

This package provides the TreeIndex class, which indexes a flat node
collection by id and by parent and exposes descendant/ancestor traversals.

The package is organized into:
- core: Main TreeIndex class with lookup, traversal, walk and export

Example:
    >>> from genro_treeindex import TreeIndex
    >>> index = TreeIndex([(1, 'root'), (2, 1)])
    >>> index.get_item(2)
    (2, 1)
"""

from .core import TreeIndex

__all__ = ["TreeIndex"]

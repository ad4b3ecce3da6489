# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-TreeIndex - Constant-time lookup over flat parent-linked trees.

A lightweight, zero-dependency library that indexes a flat list of nodes
(each with an id and a parent reference) by id and by parent, and derives
descendant and ancestor traversals from those indexes.
"""

__version__ = "0.1.0"

from .exceptions import (
    CyclicStructureError,
    DuplicateIdError,
    InvalidRecordError,
    TreeIndexError,
)
from .index import TreeIndex
from .loading import load_nodes
from .node import ROOT, TreeIndexNode

__all__ = [
    # Core classes
    "TreeIndex",
    "TreeIndexNode",
    "ROOT",
    # Loading
    "load_nodes",
    # Exceptions
    "TreeIndexError",
    "InvalidRecordError",
    "DuplicateIdError",
    "CyclicStructureError",
]

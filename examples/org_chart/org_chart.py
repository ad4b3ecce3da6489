# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Org chart - Example of TreeIndex over a flat employee table.

A didactic example: rows come from a flat table where each employee
points to a manager id (or 'root' for the top of the company), the way
they would come out of a database query.

Run with:
    python examples/org_chart/org_chart.py
"""

from __future__ import annotations

import logging

from genro_treeindex import TreeIndex, load_nodes

ROWS = [
    {'id': 1, 'parent': 'root', 'type': 'ceo'},
    {'id': 2, 'parent': 1, 'type': 'cto'},
    {'id': 3, 'parent': 1, 'type': 'cfo'},
    {'id': 4, 'parent': 2, 'type': 'engineer'},
    {'id': 5, 'parent': 2, 'type': 'engineer'},
    {'id': 6, 'parent': 3, 'type': 'accountant'},
    {'id': 7, 'parent': 4, 'type': 'intern'},
]


def print_chart(index: TreeIndex) -> None:
    """Print the chart indented by depth."""
    for depth, node in index.walk():
        print(f"{'  ' * (depth - 1)}{node.id} ({node.type})")


def chain_of_command(index: TreeIndex, employee_id: int) -> list[str]:
    """Return the roles above an employee, nearest first."""
    return [node.type for node in index.get_all_parents(employee_id) or []]


if __name__ == '__main__':
    logging.basicConfig(level=logging.DEBUG)
    index = TreeIndex(load_nodes(ROWS), raise_on_duplicate=True)
    print_chart(index)
    print('reports under cto:', [n.id for n in index.get_all_children(2)])
    print('above intern:', chain_of_command(index, 7))

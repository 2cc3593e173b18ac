"""tree.py

Ordered output tree built by the decoders.

Each decoding level returns its own Tree, the caller attaches it under a
fixed key. A key attached more than once holds the children as a list, in
wire order.
"""

from __future__ import annotations

import json
from typing import Any


class Tree(dict[str, Any]):
    def __missing__(self, key: str) -> Tree:
        # like a property tree, reading an absent child gives an empty node
        return Tree()

    def put(self, key: str, value: Any) -> Tree:
        self[key] = value
        return self

    def add_child(self, key: str, child: Tree) -> Tree:
        if key not in self:
            self[key] = child
        elif isinstance(self[key], list):
            self[key].append(child)
        else:
            self[key] = [self[key], child]
        return self

    def children(self, key: str) -> list[Any]:
        """Every child attached under key, as a list (empty when absent)."""
        if key not in self:
            return []
        value = self[key]
        return value if isinstance(value, list) else [value]

    def get_path(self, path: str, default: Any = None) -> Any:
        """Follow a dotted path, 'srv6_l3_service.sid_information.sid_value'."""
        node: Any = self
        for key in path.split('.'):
            if not isinstance(node, dict) or key not in node:
                return default
            node = node[key]
        return node

    def json(self, indent: int | None = None) -> str:
        return json.dumps(self, indent=indent)

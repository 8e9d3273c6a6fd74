"""Tree subpackage: the immutable, path-addressed JSON tree model.

Re-exports the public API for the tree module:
- JsonNode: dataclass representing one JSON value at one path
- NodeType: StrEnum of the six JSON value kinds
- TreeBuilder: converts any valid JSON value into a linked JsonNode tree
- parse / find_node / update_value / add_property / remove_node /
  serialize / collapse_to: pure operations over trees
"""

from json_editor_core.tree.builder import TreeBuilder
from json_editor_core.tree.model import (
    add_property,
    collapse_to,
    find_node,
    parse,
    remove_node,
    serialize,
    update_value,
)
from json_editor_core.tree.nodes import JsonNode, NodeType, node_type_of

__all__ = [
    "JsonNode",
    "NodeType",
    "TreeBuilder",
    "add_property",
    "collapse_to",
    "find_node",
    "node_type_of",
    "parse",
    "remove_node",
    "serialize",
    "update_value",
]

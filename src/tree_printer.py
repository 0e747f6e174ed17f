"""
Text rendering of an OrderedTree for inspection.

Both functions only use the tree's public position accessors.
"""

from typing import Any, List, Optional, Tuple

from ordered_tree import OrderedTree

MISSING_CHILD = "--"


def format_tree(tree: OrderedTree, position: Optional[OrderedTree.Node] = None, indent: str = "    ") -> str:
    """
    Render the subtree at position (default root) one node per line.

    Each line is indented by the node's depth below position. When a node
    has a single child, the empty side is marked with "--" one level deeper,
    so left and right children can be told apart:

        44
            17
                --
                32
    """
    if position is None:
        position = tree.root()
        if position is None:
            return ""

    lines: List[str] = []
    # (node, depth); a None node stands for a missing sibling
    stack: List[Tuple[Any, int]] = [(position, 0)]
    while stack:
        node, depth = stack.pop()
        if node is None:
            lines.append(indent * depth + MISSING_CHILD)
            continue
        lines.append(indent * depth + str(node.element))
        left, right = tree.left(node), tree.right(node)
        if left is None and right is None:
            continue
        stack.append((right, depth + 1))
        stack.append((left, depth + 1))
    return "\n".join(lines)


def format_in_order(tree: OrderedTree, sep: str = "  ") -> str:
    return sep.join(str(element) for element in tree.in_order())

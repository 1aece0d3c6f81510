"""Binary trees and searches for repeated subtrees."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def find_duplicate_subtrees(root: TreeNode | None) -> list[TreeNode]:
    """One root for every subtree shape that occurs more than once, in post-order."""
    seen: Counter[str] = Counter()
    duplicates: list[TreeNode] = []

    def signature(node: TreeNode | None) -> str:
        if node is None:
            return "#"
        key = f"{node.val},{signature(node.left)},{signature(node.right)}"
        seen[key] += 1
        if seen[key] == 2:
            duplicates.append(node)
        return key

    signature(root)
    return duplicates
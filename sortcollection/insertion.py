"""Insertion sorts: plain, binary, shell, cycle, patience, binary-tree and AVL-tree sorts.

Every sort works on the given list in place and returns that same list.
"""

from __future__ import annotations

import heapq
from bisect import bisect_right
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class _AvlNode:
    value: int
    left: Optional["_AvlNode"] = None
    right: Optional["_AvlNode"] = None
    height: int = 1


def _height(node: Optional[_AvlNode]) -> int:
    return node.height if node is not None else 0


def _balance(node: Optional[_AvlNode]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _refresh(node: _AvlNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_left(node: _AvlNode) -> _AvlNode:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def _rotate_right(node: _AvlNode) -> _AvlNode:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def _avl_insert(node: Optional[_AvlNode], value: int) -> _AvlNode:
    if node is None:
        return _AvlNode(value)
    if value < node.value:
        node.left = _avl_insert(node.left, value)
    else:
        node.right = _avl_insert(node.right, value)
    _refresh(node)
    factor = _balance(node)
    if factor > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if factor < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


@dataclass
class _TreeNode:
    value: int
    left: Optional["_TreeNode"] = None
    right: Optional["_TreeNode"] = None


def _in_order(root) -> Iterator[int]:
    stack = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def avl_tree_sort(values: list[int]) -> list[int]:
    """Insert every value into a self-balancing search tree and read it back in order."""
    root: Optional[_AvlNode] = None
    for value in values:
        root = _avl_insert(root, value)
    values[:] = list(_in_order(root))
    return values


def binary_insertion_sort(values: list[int]) -> list[int]:
    """Insertion sort that finds each insertion point by binary search."""
    for i in range(1, len(values)):
        item = values[i]
        pos = bisect_right(values, item, 0, i)
        values[pos + 1 : i + 1] = values[pos:i]
        values[pos] = item
    return values


def cycle_sort(values: list[int]) -> list[int]:
    """Rotate each cycle of misplaced elements so every element is written once."""
    length = len(values)
    for start in range(length - 1):
        item = values[start]
        pos = start + sum(1 for other in values[start + 1 :] if other < item)
        if pos == start:
            continue
        while item == values[pos]:
            pos += 1
        values[pos], item = item, values[pos]
        while pos != start:
            pos = start + sum(1 for other in values[start + 1 :] if other < item)
            while item == values[pos]:
                pos += 1
            values[pos], item = item, values[pos]
    return values


def insertion_sort(values: list[int]) -> list[int]:
    """Shift each element left past the larger ones before it."""
    for i in range(1, len(values)):
        item = values[i]
        j = i - 1
        while j >= 0 and item < values[j]:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = item
    return values


def patience_sort(values: list[int]) -> list[int]:
    """Deal values onto piles with non-increasing tops, then merge the piles."""
    piles: list[list[int]] = []
    for value in values:
        for pile in piles:
            if pile[-1] >= value:
                pile.append(value)
                break
        else:
            piles.append([value])
    values[:] = list(heapq.merge(*(reversed(pile) for pile in piles)))
    return values


def shell_sort(values: list[int]) -> list[int]:
    """Insertion sort over the gap sequence 1, 4, 13, 40, ... from largest to smallest."""
    length = len(values)
    gap = 1
    while gap < length:
        gap = 3 * gap + 1
    while gap > 0:
        for i in range(gap, length):
            item = values[i]
            j = i
            while j >= gap and values[j - gap] > item:
                values[j] = values[j - gap]
                j -= gap
            values[j] = item
        gap //= 3
    return values


def tree_sort(values: list[int]) -> list[int]:
    """Insert every value into an unbalanced search tree and read it back in order."""
    root: Optional[_TreeNode] = None
    for value in values:
        fresh = _TreeNode(value)
        if root is None:
            root = fresh
            continue
        node = root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = fresh
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = fresh
                    break
                node = node.right
    values[:] = list(_in_order(root))
    return values
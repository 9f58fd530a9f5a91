"""
Aster Tree Geometry Module

Each seed owns a conceptual perfect binary tree of capacity 256, using
heap-style indexing: the root sits at position 0 and the node at position
'p' has children at '2p+1' (left) and '2p+2' (right).

The height of a position (its depth below the root) orders neurons: a
synapse may only point to a strictly higher neuron (or to an output), which
keeps every encoded network acyclic.
"""

TREE_CAPACITY       = 256
MAX_HEIGHT          = 7
MAX_PARENT_POSITION = 126   # children of deeper nodes would not fit in a byte

def neuron_height(position: int) -> int:
    """
    Depth of 'position' below the root of its tree (the root has height 0).
    """
    height = 0
    while position > 0:
        position = (position - 1) // 2
        height  += 1
    return height

def inorder_position(position: int) -> int:
    """
    Left-to-right rank of 'position' among the nodes at the same height.

    The root has rank 0; a left child has twice its parent's rank and a
    right child twice its parent's rank plus one. Used for laying out trees.
    """
    if position == 0:
        return 0
    parent_rank = inorder_position(parent_position(position))
    if position % 2 == 1:
        return 2 * parent_rank
    return 2 * parent_rank + 1

def parent_position(position: int) -> int:
    """
    Position of the parent of 'position'.

    Raises:
        ValueError: for the root, which has no parent
    """
    if position <= 0:
        raise ValueError("The root of a tree has no parent")
    return (position - 1) // 2

def child_positions(position: int) -> tuple[int, int]:
    """Positions of the (left, right) children of 'position'."""
    return 2 * position + 1, 2 * position + 2

def can_have_children(position: int) -> bool:
    """Whether both children of 'position' fit inside the tree."""
    return 0 <= position <= MAX_PARENT_POSITION

def is_hidden_position(position: int) -> bool:
    """Whether a hidden neuron may sit at 'position' (any non-root node of height <= MAX_HEIGHT)."""
    return 0 < position < TREE_CAPACITY - 1

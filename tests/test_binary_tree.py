from algokit.binary_tree import (
    BinaryNode,
    build_from_level_order,
    build_from_preorder,
    diameter,
    largest_bst,
    level_order,
    morris_inorder,
)

BST_VALUES = [50, 30, 20, 40, 70, 60, 80]
BST_PREORDER = [50, 30, 20, -1, -1, 40, -1, -1, 70, 60, -1, -1, 80, -1, -1]


def test_level_order_of_driver_tree():
    root = build_from_level_order([1, 2, 3, 4, 5, -1, -1, -1, -1, -1, -1])
    assert level_order(root) == [1, 2, 3, 4, 5]


def test_level_order_build_is_round_trip_for_complete_tree():
    values = [100, 200, 300, 400, 500, 600, 700]
    root = build_from_level_order(values + [-1] * 8)
    assert level_order(root) == values


def test_diameter_of_source_example():
    root = build_from_level_order([100, 200, 300, 400, 500, 600, 700] + [-1] * 8)
    assert diameter(root) == 4


def test_diameter_of_empty_tree():
    assert diameter(None) == 0


def test_diameter_of_chain_is_edges():
    values = [1, 2, 3, 4]
    root = BinaryNode(values[0])
    node = root
    for value in values[1:]:
        node.left = BinaryNode(value)
        node = node.left
    assert diameter(root) == len(values) - 1


def test_preorder_build_accepts_none_as_marker():
    with_minus = build_from_preorder(BST_PREORDER)
    with_none = build_from_preorder([None if v == -1 else v for v in BST_PREORDER])
    assert level_order(with_minus) == level_order(with_none)


def test_morris_inorder_of_bst_is_sorted():
    root = build_from_preorder(BST_PREORDER)
    assert morris_inorder(root) == sorted(BST_VALUES)


def test_morris_leaves_tree_unchanged():
    root = build_from_preorder(BST_PREORDER)
    before = level_order(root)
    morris_inorder(root)
    assert level_order(root) == before
    assert morris_inorder(root) == sorted(BST_VALUES)


def test_morris_of_empty_tree():
    assert morris_inorder(None) == []


def test_largest_bst_of_whole_bst_is_root():
    root = build_from_preorder(BST_PREORDER)
    node, size = largest_bst(root)
    assert node is root
    assert size == len(BST_VALUES)


def test_largest_bst_inside_broken_tree():
    root = build_from_preorder(
        [50, 30, 5, -1, -1, 20, -1, -1, 60, 45, -1, -1, 70, 65, -1, -1, 80, -1, -1]
    )
    node, size = largest_bst(root)
    assert node is root.right
    assert node.data == 60
    values = morris_inorder(node)
    assert len(values) == size
    assert all(a < b for a, b in zip(values, values[1:]))


def test_largest_bst_of_empty_tree():
    assert largest_bst(None) == (None, 0)
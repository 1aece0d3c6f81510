from algodrills.trees import TreeNode, find_duplicate_subtrees


def _example_tree():
    inner_two = TreeNode(2, TreeNode(4))
    root = TreeNode(
        1,
        TreeNode(2, TreeNode(4)),
        TreeNode(3, inner_two, TreeNode(4)),
    )
    return root, inner_two


def test_duplicate_subtrees_example():
    root, _ = _example_tree()
    found = find_duplicate_subtrees(root)
    assert [node.val for node in found] == [4, 2]
    assert found[0] == TreeNode(4)
    assert found[1] == TreeNode(2, TreeNode(4))


def test_duplicate_subtrees_returns_nodes_of_tree():
    root, inner_two = _example_tree()
    found = find_duplicate_subtrees(root)
    assert found[1] is inner_two


def test_each_shape_reported_once():
    root = TreeNode(0, TreeNode(5), TreeNode(0, TreeNode(5), TreeNode(5)))
    found = find_duplicate_subtrees(root)
    assert found == [TreeNode(5)]


def test_no_duplicates():
    root = TreeNode(1, TreeNode(2), TreeNode(3))
    assert find_duplicate_subtrees(root) == []


def test_empty_tree():
    assert find_duplicate_subtrees(None) == []


def test_shape_matters_not_just_values():
    root = TreeNode(1, TreeNode(2, TreeNode(3)), TreeNode(2, None, TreeNode(3)))
    found = find_duplicate_subtrees(root)
    assert found == [TreeNode(3)]
from abtree.node import Internal, Leaf


def test_leaf_is_leaf():
    leaf = Leaf()
    assert leaf.is_leaf()
    assert leaf.keys == []
    assert not hasattr(leaf, "children")


def test_internal_is_not_leaf():
    node = Internal([10], [Leaf([5]), Leaf([15])])
    assert not node.is_leaf()
    assert node.keys == [10]
    assert [child.keys for child in node.children] == [[5], [15]]
    assert len(node.children) == len(node.keys) + 1


def test_nodes_do_not_share_default_lists():
    first, second = Internal(), Internal()
    first.keys.append(1)
    first.children.append(Leaf())

    assert second.keys == []
    assert second.children == []
    assert Leaf().keys == []


def test_node_repr():
    assert repr(Leaf([1, 2])) == "Leaf(keys=[1, 2])"
    assert repr(Internal([3])) == "Internal(keys=[3])"

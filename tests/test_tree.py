from mimecraft.tree import TreeNode, find_node


def test_add_child_appends_in_order():
    root = TreeNode("root")
    a = root.add_child("a")
    b = root.add_child("b")
    assert root.children == [a, b]
    assert a.data == "a"
    assert len(root) == 2


def test_new_node_has_no_children():
    node = TreeNode(5)
    assert node.children == []
    assert list(node) == []


def test_find_node_returns_first_match():
    root = TreeNode()
    first = root.add_child("x")
    root.add_child("x")
    assert find_node(root.children, "x") is first


def test_find_node_missing_returns_none():
    root = TreeNode()
    root.add_child(1)
    assert find_node(root, 2) is None


def test_nested_children():
    root = TreeNode("root")
    child = root.add_child("child")
    grandchild = child.add_child("grandchild")
    found = find_node(root, "child")
    assert found is child
    assert find_node(found, "grandchild") is grandchild
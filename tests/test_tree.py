import os
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from fpmine.tree import Node, Tree

TRANSACTIONS = [
    ["a", "c", "e", "b", "f"],
    ["a", "c", "g"],
    ["e"],
    ["a", "c", "e", "g", "d"],
    ["a", "c", "e", "g"],
    ["e"],
    ["a", "c", "e", "b", "f"],
    ["a", "c", "d"],
    ["a", "c", "e", "g"],
    ["a", "c", "e", "g"],
]


def build_tree():
    tree = Tree()
    for transaction in TRANSACTIONS:
        tree.add_transaction(transaction)
    return tree


def items(path):
    return [node.item for node in path]


def test_node():
    root = Node(None, 0)
    child_1 = Node(1, 1)
    child_2 = Node(2, 2)

    root.add_child(child_1)
    child_1.add_child(child_2)

    assert root.is_root()
    assert root.search(1) is child_1
    assert root.search(2) is None
    assert root.item is None

    assert not child_1.is_root()
    assert child_1.search(1) is None
    assert child_1.search(2) is child_2
    assert child_1.parent is root
    assert child_2.parent is child_1
    assert child_2.is_leaf()
    assert not child_1.is_leaf()


def test_add_child_keeps_existing_item():
    root = Node()
    first = Node("x", 1)
    second = Node("x", 5)
    root.add_child(first)
    root.add_child(second)

    assert list(root.children.values()) == [first]
    assert second.parent is None


def test_zero_count_node_is_not_root():
    placeholder = Node("x", 0)
    assert not placeholder.is_root()
    placeholder.increment(3)
    assert placeholder.count == 3


def test_add_transaction_shares_prefixes():
    tree = build_tree()

    a = tree.root.search("a")
    c = a.search("c")
    assert a.count == 8
    assert c.count == 8
    assert c.search("e").count == 6
    assert c.search("e").search("g").count == 4
    assert c.search("g").count == 1
    assert c.search("d").count == 1
    assert tree.root.search("e").count == 2
    assert tree.root.count == 0


def test_routes_follow_creation_order():
    tree = build_tree()

    assert list(tree.routes) == ["a", "c", "e", "b", "f", "g", "d"]
    g_nodes = tree.get_all_nodes("g")
    assert [node.count for node in g_nodes] == [1, 4]
    assert tree.routes["g"] == (g_nodes[0], g_nodes[-1])
    assert g_nodes[-1].neighbor is None


def test_route_counts_sum_to_support():
    tree = build_tree()
    expected = {"a": 8, "c": 8, "e": 8, "g": 5, "b": 2, "f": 2, "d": 2}

    supports = {item: sum(node.count for node in nodes)
                for item, nodes in tree.get_all_items_nodes().items()}
    assert supports == expected


def test_get_all_nodes_unknown_item():
    assert build_tree().get_all_nodes("z") == []


def test_update_route_ignores_root():
    tree = Tree()
    tree.update_route(tree.root)
    assert tree.routes == {}


def test_generate_prefix_path():
    tree = build_tree()

    assert [items(path) for path in tree.generate_prefix_path("g")] == [
        ["a", "c", "g"],
        ["a", "c", "e", "g"],
    ]
    assert [items(path) for path in tree.generate_prefix_path("d")] == [
        ["a", "c", "e", "g", "d"],
        ["a", "c", "d"],
    ]
    assert [items(path) for path in tree.generate_prefix_path("e")] == [
        ["a", "c", "e"],
        ["e"],
    ]


def test_generate_prefix_path_unknown_item():
    with pytest.raises(KeyError):
        build_tree().generate_prefix_path("z")


def test_generate_partial_tree():
    tree = build_tree()
    partial = Tree.generate_partial_tree(tree.generate_prefix_path("g"))

    a = partial.root.search("a")
    c = a.search("c")
    assert a.count == 5
    assert c.count == 5
    assert c.search("g").count == 1
    assert c.search("e").count == 4
    assert c.search("e").search("g").count == 4
    assert partial.root.search("e") is None
    assert [node.count for node in partial.get_all_nodes("g")] == [1, 4]


def test_generate_partial_tree_is_independent():
    tree = build_tree()
    partial = Tree.generate_partial_tree(tree.generate_prefix_path("d"))

    source_nodes = {id(node) for nodes in tree.get_all_items_nodes().values() for node in nodes}
    partial_nodes = [node for nodes in partial.get_all_items_nodes().values() for node in nodes]
    assert all(id(node) not in source_nodes for node in partial_nodes)

    supports = {item: sum(node.count for node in nodes)
                for item, nodes in partial.get_all_items_nodes().items()}
    assert supports == {"a": 2, "c": 2, "e": 1, "g": 1, "d": 2}
    assert tree.root.search("a").count == 8


def test_generate_partial_tree_empty():
    partial = Tree.generate_partial_tree([])
    assert partial.routes == {}
    assert partial.root.is_leaf()


def test_render():
    tree = Tree()
    tree.add_transaction(["a", "b"])
    tree.add_transaction(["a"])

    assert tree.render() == [
        "Tree:",
        " <(root)>",
        "  <'a' 2>",
        "   <'b' 1>",
        "Routes:",
        "Item: 'a'",
        " <'a' 2>",
        "Item: 'b'",
        " <'b' 1>",
    ]

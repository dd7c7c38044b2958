"""FP-tree data structure used by the FP-Growth miner.

A :py:class:`Tree` is a prefix trie of ordered transactions. Besides the
parent/child shape every node is also linked to the next node holding the
same item (its *neighbor*), and the tree keeps a header table mapping each
item to the head and tail of that chain.
"""
from typing import Any, Dict, Iterable, List, Optional, Tuple


class Node:
    """
    A class representing a node in an FP-tree.

    Attributes:
        item (Any): The item contained in this node, ``None`` for the root.
        count (int): The number of transactions passing through this node.
        children (Dict[Any, 'Node']): Child nodes keyed by their item, in
            insertion order. At most one child per item.
        parent (Optional['Node']): The parent node, ``None`` for the root.
        neighbor (Optional['Node']): The next node in the tree holding the
            same item, in creation order.

    Methods:
        add_child(child: 'Node') -> None:
            Links ``child`` under this node unless a child with the same
            item already exists.

        search(item: Any) -> Optional['Node']:
            Returns the child holding ``item``, if any.

        increment(delta: int) -> None:
            Adds ``delta`` to the count.

        is_root() -> bool:
            True for the root sentinel, the only node without an item.

        is_leaf() -> bool:
            True when the node has no children.

        render(depth: int = 0) -> List[str]:
            Returns the subtree as indented text lines.
    """
    __slots__ = ("item", "count", "children", "parent", "neighbor")

    def __init__(self, item: Any = None, count: int = 0) -> None:
        self.item = item
        self.count = count
        self.children: Dict[Any, 'Node'] = {}
        self.parent: Optional['Node'] = None
        self.neighbor: Optional['Node'] = None

    def add_child(self, child: 'Node') -> None:
        if child.item in self.children:
            return
        child.parent = self
        self.children[child.item] = child

    def search(self, item: Any) -> Optional['Node']:
        return self.children.get(item)

    def increment(self, delta: int) -> None:
        self.count += delta

    def is_root(self) -> bool:
        # zero-count placeholders in partial trees are not roots
        return self.item is None

    def is_leaf(self) -> bool:
        return not self.children

    def render(self, depth: int = 0) -> List[str]:
        """Return this subtree as indented lines, one node per line."""
        padding = " " * depth
        if self.is_root():
            lines = [f"{padding}<(root)>"]
        else:
            lines = [f"{padding}<{self.item!r} {self.count}>"]
        for child in self.children.values():
            lines.extend(child.render(depth + 1))
        return lines

    def __repr__(self) -> str:
        return f"Node({self.item!r}, {self.count})"


class Tree:
    """
    The FP-tree: a root sentinel plus a header table of per-item routes.

    Attributes:
        root (Node): The sentinel node, item ``None`` and count 0.
        routes (Dict[Any, Tuple[Node, Node]]): The header table, mapping
            each item to the (head, tail) of its neighbor chain.
    """

    def __init__(self) -> None:
        self.root = Node(None, 0)
        self.routes: Dict[Any, Tuple[Node, Node]] = {}

    @classmethod
    def generate_partial_tree(cls, paths: List[List[Node]]) -> 'Tree':
        """Build a conditional tree from prefix paths of one item.

        Every path runs top-down and ends with a node holding the target
        item. Shared prefixes are merged; intermediate nodes start at 0 and
        target nodes take the count of the node they were copied from.
        Intermediate counts are then rebuilt by pushing each target node's
        count up to all of its ancestors.

        Parameters
        ----------
        paths : list[list[Node]]
            Output of :py:meth:`generate_prefix_path` on the source tree.

        Returns
        -------
        Tree
            A new tree sharing no nodes with the source tree.
        """
        partial_tree = cls()
        leaf_item = None
        for path in paths:
            leaf = path[-1]
            leaf_item = leaf.item
            cur = partial_tree.root
            for path_node in path[:-1]:
                child = cur.search(path_node.item)
                if child is None:
                    child = Node(path_node.item, 0)
                    cur.add_child(child)
                    partial_tree.update_route(child)
                cur = child
            child = cur.search(leaf_item)
            if child is None:
                child = Node(leaf_item, leaf.count)
                cur.add_child(child)
                partial_tree.update_route(child)
            else:
                child.increment(leaf.count)

        if leaf_item is None:
            return partial_tree

        for path in partial_tree.generate_prefix_path(leaf_item):
            leaf_count = path[-1].count
            for path_node in path[:-1]:
                path_node.increment(leaf_count)
        return partial_tree

    def add_transaction(self, transaction: Iterable[Any]) -> None:
        """Insert an ordered, duplicate-free transaction.

        The tree does not sort or deduplicate; callers hand over items in
        their final order.
        """
        cur = self.root
        for item in transaction:
            child = cur.search(item)
            if child is not None:
                child.increment(1)
            else:
                child = Node(item, 1)
                cur.add_child(child)
                self.update_route(child)
            cur = child

    def update_route(self, node: Node) -> None:
        """Append ``node`` to the tail of its item's neighbor chain."""
        if node.is_root():
            return
        route = self.routes.get(node.item)
        if route is None:
            self.routes[node.item] = (node, node)
        else:
            head, tail = route
            tail.neighbor = node
            self.routes[node.item] = (head, node)

    def generate_prefix_path(self, item: Any) -> List[List[Node]]:
        """Return one root-exclusive, top-down path per node holding ``item``.

        Each path ends with the node holding ``item``. Raises ``KeyError``
        if ``item`` has no route.
        """
        head, _ = self.routes[item]
        paths = []
        end = head
        while end is not None:
            path = [end]
            cur = end.parent
            while cur is not None and not cur.is_root():
                path.append(cur)
                cur = cur.parent
            path.reverse()
            paths.append(path)
            end = end.neighbor
        return paths

    def get_all_nodes(self, item: Any) -> List[Node]:
        route = self.routes.get(item)
        if route is None:
            return []
        nodes = []
        node = route[0]
        while node is not None:
            nodes.append(node)
            node = node.neighbor
        return nodes

    def get_all_items_nodes(self) -> Dict[Any, List[Node]]:
        """Return every item's chain, in header-table insertion order."""
        return {item: self.get_all_nodes(item) for item in self.routes}

    def render(self) -> List[str]:
        lines = ["Tree:"]
        lines.extend(self.root.render(1))
        lines.append("Routes:")
        for item, nodes in self.get_all_items_nodes().items():
            lines.append(f"Item: {item!r}")
            lines.extend(f" <{node.item!r} {node.count}>" for node in nodes)
        return lines

    def print(self) -> None:
        print("\n".join(self.render()))

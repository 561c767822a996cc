"""A key ordered binary search tree kept loosely balanced as a scapegoat tree."""

from __future__ import annotations

from typing import Any, Callable, Iterator

from onekit.alist import AList

__all__ = [
    "ScapegoatTree",
    "DEFAULT_REBALANCE_ALPHA",
    "DEFAULT_DELETE_PERCENT",
    "FULL_REBALANCE_MIN_NODES",
]

Comparator = Callable[[Any, Any], int]

DEFAULT_REBALANCE_ALPHA = 2
DEFAULT_DELETE_PERCENT = 25
FULL_REBALANCE_MIN_NODES = 64


def _natural_compare(left: Any, right: Any) -> int:
    return (left > right) - (left < right)


class _Node:
    __slots__ = ("key", "value", "left", "right", "parent", "deleted")

    def __init__(self, key: Any, value: Any) -> None:
        self.key = key
        self.value = value
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.parent: _Node | None = None
        self.deleted = False


class ScapegoatTree:
    """A map from unique keys to values held in a self balancing search tree.

    Keys are ordered by ``comparator``, a function returning a negative
    number, zero or a positive number as its first argument sorts before,
    equal to or after its second. Without one, keys are compared directly.

    An insertion that lands deeper than ``rebalance_alpha * log2(size)``
    rebuilds the subtree under the nearest scapegoat ancestor. Deleting a
    leaf removes it; deleting an inner node only marks it deleted, and the
    whole tree is rebuilt once the marked nodes exceed ``delete_percent`` of
    the live ones or inserts exceed twice the live nodes (for trees of at
    least 64 live nodes).
    """

    def __init__(
        self,
        comparator: Comparator | None = None,
        rebalance_alpha: int = DEFAULT_REBALANCE_ALPHA,
        delete_percent: float = DEFAULT_DELETE_PERCENT,
    ) -> None:
        self._compare: Comparator = comparator or _natural_compare
        self.rebalance_alpha = rebalance_alpha
        self.delete_percent = delete_percent
        self.rebalance_allowed = True
        self._root: _Node | None = None
        self._nodes = 0
        self.inserts = 0
        self.deletes = 0
        self.updates = 0
        self.marked_deleted = 0
        self.partial_rebalances = 0
        self.full_rebalances = 0

    # -- lookup -------------------------------------------------------------

    def _cmp(self, left: Any, right: Any) -> int:
        result = self._compare(left, right)
        return (result > 0) - (result < 0)

    def _find_or_parent(self, key: Any) -> _Node | None:
        prior = None
        current = self._root
        while current is not None:
            side = self._cmp(key, current.key)
            if side == 0:
                return current
            prior = current
            current = current.left if side < 0 else current.right
        return prior

    def _find(self, key: Any) -> _Node | None:
        node = self._find_or_parent(key)
        if node is None or self._cmp(key, node.key) != 0:
            return None
        return node

    # -- shape --------------------------------------------------------------

    @staticmethod
    def _depth(node: _Node) -> int:
        depth = 0
        while node.parent is not None:
            depth += 1
            node = node.parent
        return depth

    @staticmethod
    def _size(node: _Node | None) -> int:
        count = 0
        pending = [node] if node is not None else []
        while pending:
            current = pending.pop()
            count += 1
            if current.left is not None:
                pending.append(current.left)
            if current.right is not None:
                pending.append(current.right)
        return count

    def _is_unbalanced(self, node: _Node) -> bool:
        size = self._size(self._root)
        return self._depth(node) > self.rebalance_alpha * (size.bit_length() - 1)

    def _is_scapegoat(self, node: _Node) -> bool:
        return 3 * self._size(node) > 2 * self._size(node.parent)

    # -- walking ------------------------------------------------------------

    @staticmethod
    def _in_order_nodes(start: _Node | None) -> Iterator[_Node]:
        pending: list[_Node] = []
        current = start
        while pending or current is not None:
            while current is not None:
                pending.append(current)
                current = current.left
            current = pending.pop()
            yield current
            current = current.right

    def _pre_order_nodes(self) -> Iterator[_Node]:
        pending = [self._root] if self._root is not None else []
        while pending:
            current = pending.pop()
            yield current
            if current.right is not None:
                pending.append(current.right)
            if current.left is not None:
                pending.append(current.left)

    def _post_order_nodes(self) -> Iterator[_Node]:
        pending: list[tuple[_Node, bool]] = (
            [(self._root, False)] if self._root is not None else []
        )
        while pending:
            current, expanded = pending.pop()
            if expanded:
                yield current
                continue
            pending.append((current, True))
            if current.right is not None:
                pending.append((current.right, False))
            if current.left is not None:
                pending.append((current.left, False))

    # -- rebuilding ---------------------------------------------------------

    def _build(self, nodes: list[_Node], low: int, high: int) -> _Node | None:
        if low >= high:
            return None
        middle = low + (high - low) // 2
        root = nodes[middle]
        root.left = self._build(nodes, low, middle)
        root.right = self._build(nodes, middle + 1, high)
        for child in (root.left, root.right):
            if child is not None:
                child.parent = root
        return root

    def _rebuild(self, subtree: _Node) -> _Node | None:
        parent = subtree.parent
        on_left = parent is not None and parent.left is subtree
        live = [node for node in self._in_order_nodes(subtree) if not node.deleted]
        new_subtree = self._build(live, 0, len(live))
        if new_subtree is not None:
            new_subtree.parent = parent
        if parent is None:
            self._root = new_subtree
        else:
            if on_left:
                parent.left = new_subtree
            else:
                parent.right = new_subtree
            self.partial_rebalances += 1
        return new_subtree

    def rebalance(self) -> None:
        """Rebuild the whole tree in balance, dropping nodes marked deleted."""
        if self._root is None:
            return
        self._rebuild(self._root)
        self.inserts = 0
        self.deletes = 0
        self.updates = 0
        self.marked_deleted = 0
        self.full_rebalances += 1

    def _should_full_rebalance(self) -> bool:
        if self._root is None or self._nodes < FULL_REBALANCE_MIN_NODES:
            return False
        if 100 * (self.marked_deleted / self._nodes) > self.delete_percent:
            return True
        return self.inserts > 2 * self._nodes

    # -- map operations -----------------------------------------------------

    def insert(self, key: Any, value: Any) -> bool:
        """Add ``key`` with ``value``; False if the key is already present."""
        parent = self._find_or_parent(key)
        node = _Node(key, value)
        if parent is None:
            self._root = node
        else:
            side = self._cmp(key, parent.key)
            if side == 0:
                if not parent.deleted:
                    return False
                parent.deleted = False
                parent.value = value
                self.marked_deleted -= 1
                self._nodes += 1
                self.inserts += 1
                return True
            node.parent = parent
            if side < 0:
                parent.left = node
            else:
                parent.right = node
        self._nodes += 1
        self.inserts += 1
        if self.rebalance_allowed and self._is_unbalanced(node):
            candidate = node.parent
            while candidate is not None:
                if self._is_scapegoat(candidate):
                    self._rebuild(candidate)
                    break
                candidate = candidate.parent
        return True

    def get(self, key: Any) -> Any:
        """The value for ``key``, or None if it is absent."""
        node = self._find(key)
        if node is None or node.deleted:
            return None
        return node.value

    def update(self, key: Any, value: Any) -> bool:
        """Replace the value for ``key``; False if the key is absent."""
        node = self._find(key)
        if node is None or node.deleted:
            return False
        node.value = value
        self.updates += 1
        return True

    def delete(self, key: Any) -> bool:
        """Remove ``key``.

        Returns False if the key was already deleted; raises KeyError if it
        was never in the tree.
        """
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        if node.deleted:
            return False
        if node.left is None and node.right is None:
            parent = node.parent
            if parent is None:
                self._root = None
            elif parent.left is node:
                parent.left = None
            else:
                parent.right = None
            node.parent = None
            self.deletes += 1
            self._nodes -= 1
            return True
        node.deleted = True
        node.value = None
        self.marked_deleted += 1
        self.deletes += 1
        self._nodes -= 1
        if self._should_full_rebalance():
            self.rebalance()
        return True

    def exists(self, key: Any) -> bool:
        """True when ``key`` is present."""
        node = self._find(key)
        return node is not None and not node.deleted

    # -- collections and traversals ----------------------------------------

    def keys(self) -> AList:
        """An AList of every key, in key order."""
        return AList(node.key for node in self._in_order_nodes(self._root)
                     if not node.deleted)

    def values(self) -> AList:
        """An AList of every value, in key order."""
        return AList(node.value for node in self._in_order_nodes(self._root)
                     if not node.deleted)

    def in_order(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in key order."""
        for node in self._in_order_nodes(self._root):
            if not node.deleted:
                yield node.key, node.value

    def pre_order(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs, each node before its subtrees."""
        for node in self._pre_order_nodes():
            if not node.deleted:
                yield node.key, node.value

    def post_order(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs, each node after its subtrees."""
        for node in self._post_order_nodes():
            if not node.deleted:
                yield node.key, node.value

    # -- queries ------------------------------------------------------------

    def height_for_key(self, key: Any) -> int:
        """Distance from the root to the node holding ``key``, or -1."""
        if key is None:
            return -1
        node = self._find(key)
        return -1 if node is None else self._depth(node)

    def is_empty(self) -> bool:
        """True when no keys are held."""
        return self._nodes == 0

    def __len__(self) -> int:
        return self._nodes

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.in_order())!r})"
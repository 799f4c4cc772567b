import logging
from collections import deque

logger = logging.getLogger(__name__)

LEVEL_ORDER = "level_order"
INORDER = "inorder"
PREORDER = "preorder"
POSTORDER = "postorder"

ORDERS = (LEVEL_ORDER, INORDER, PREORDER, POSTORDER)

# default for methods that start at the root, None means an absent subtree
_ROOT = object()


class Node:
    def __init__(self, value, left=None, right=None):
        self.value = value
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def one_child(self) -> 'Node':
        return self.right if self.left is None else self.left

    def __repr__(self):
        return "Node({})".format(self.value)


class Balanced:
    """ Result of a balance check on a subtree that is balanced all the way down

    """

    def __init__(self, height: int):
        self.height = height

    def __eq__(self, other):
        return isinstance(other, Balanced) and other.height == self.height

    def __repr__(self):
        return "Balanced({})".format(self.height)


class Unbalanced:
    def __repr__(self):
        return "UNBALANCED"


UNBALANCED = Unbalanced()


def _leftmost(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def _check_balance(node: Node):
    """
    Returns Balanced(height) for the subtree rooted at node, or UNBALANCED
    as soon as any subtree below it differs by more than one in height.

    """

    if node is None:
        return Balanced(0)

    left = _check_balance(node.left)
    if left is UNBALANCED:
        return UNBALANCED
    right = _check_balance(node.right)
    if right is UNBALANCED:
        return UNBALANCED

    if abs(left.height - right.height) > 1:
        return UNBALANCED
    return Balanced(1 + max(left.height, right.height))


class OrderedTree():
    """ A binary search tree over a set of distinct numeric keys

    The tree is built minimal-height from its initial values. Inserts and
    removals keep key order but not balance; call rebalance() to rebuild.

    """

    def __init__(self, values=()):
        self.root = self._build(sorted(set(values)))
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("built tree of %d keys, height %d", len(self), self.height())

    def _build(self, sorted_values, low=0, high=None) -> Node:
        if high is None:
            high = len(sorted_values)
        if low >= high:
            return None

        middle = low + (high - low) // 2
        node = Node(sorted_values[middle])
        node.left = self._build(sorted_values, low, middle)
        node.right = self._build(sorted_values, middle + 1, high)
        return node

    def insert(self, value):
        if self.root is None:
            self.root = Node(value)
            return

        # walk down instead of recursing, skewed trees can be arbitrarily deep
        node = self.root
        while True:
            node = self._insert(node, value)
            if node is None:
                return

    def _insert(self, node: Node, value) -> Node:
        """
        Places value as a child of node if that slot is free.

        :return: the child to descend into, or None when done
        """

        if value < node.value:
            if node.left is None:
                node.left = Node(value)
                return None
            return node.left
        if value > node.value:
            if node.right is None:
                node.right = Node(value)
                return None
            return node.right
        return None

    def remove(self, value):
        self.root = self._remove(self.root, value)

    def _remove(self, node: Node, value) -> Node:
        if node is None:
            logger.debug("remove: %r is not in the tree", value)
            return None

        if value < node.value:
            node.left = self._remove(node.left, value)
        elif value > node.value:
            node.right = self._remove(node.right, value)
        else:
            return self._splice(node)
        return node

    def _splice(self, node: Node) -> Node:
        """
        Takes node out of the tree

        :return: the node that takes its place in the parent's child slot
        """

        if node.left is None or node.right is None:
            return node.one_child()

        # the successor has no left child, so removing it terminates below
        successor = _leftmost(node.right)
        node.value = successor.value
        node.right = self._remove(node.right, successor.value)
        return node

    def find(self, value) -> Node:
        node = self.root
        while node is not None and node.value != value:
            if value < node.value:
                node = node.left
            else:
                node = node.right
        return node

    def traverse(self, visitor, order=INORDER):
        """ Calls visitor(node) on every node, in the given order

        """

        if order == LEVEL_ORDER:
            walk = self._walk_level_order
        elif order == INORDER:
            walk = self._walk_inorder
        elif order == PREORDER:
            walk = self._walk_preorder
        elif order == POSTORDER:
            walk = self._walk_postorder
        else:
            raise ValueError("unknown traversal order {!r}, expected one of {}".format(order, ", ".join(ORDERS)))

        for node in walk():
            visitor(node)

    def collect(self, order=INORDER):
        """ Returns the keys in the given order, or None if the tree is empty

        """

        values = []
        self.traverse(lambda node: values.append(node.value), order)
        if values:
            return values
        return None

    def _walk_level_order(self):
        queue = deque()
        if self.root is not None:
            queue.append(self.root)
        while queue:
            node = queue.popleft()
            yield node
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

    def _walk_inorder(self):
        stack = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def _walk_preorder(self):
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _walk_postorder(self):
        stack = [(self.root, False)] if self.root is not None else []
        while stack:
            node, children_done = stack.pop()
            if children_done:
                yield node
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    def _dispatch(self, order, visitor):
        if visitor is None:
            return self.collect(order)
        self.traverse(visitor, order)

    def level_order(self, visitor=None):
        return self._dispatch(LEVEL_ORDER, visitor)

    def inorder(self, visitor=None):
        return self._dispatch(INORDER, visitor)

    def preorder(self, visitor=None):
        return self._dispatch(PREORDER, visitor)

    def postorder(self, visitor=None):
        return self._dispatch(POSTORDER, visitor)

    def height(self, node=_ROOT) -> int:
        if node is _ROOT:
            node = self.root
        return self._height(node)

    def _height(self, node: Node) -> int:
        if node is None:
            return 0
        return 1 + max(self._height(node.left), self._height(node.right))

    def depth(self, value) -> int:
        """
        Number of edges from the root to the node holding value, found by
        following key comparisons. None if the comparison path runs out.

        """

        node = self.root
        edges = 0
        while node is not None:
            if value == node.value:
                return edges
            if value < node.value:
                node = node.left
            else:
                node = node.right
            edges += 1
        return None

    def balance(self):
        return _check_balance(self.root)

    def is_balanced(self) -> bool:
        return self.balance() is not UNBALANCED

    def rebalance(self):
        values = self.inorder() or []
        self.root = self._build(values)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("rebalanced %d keys to height %d", len(values), self.height())

    def render(self, node=_ROOT, prefix="", is_left=True) -> str:
        if node is _ROOT:
            node = self.root
        if node is None:
            return ""
        lines = []
        self._render(node, prefix, is_left, lines)
        return "\n".join(lines)

    def _render(self, node: Node, prefix: str, is_left: bool, lines):
        if node.right is not None:
            self._render(node.right, prefix + ("|   " if is_left else "    "), False, lines)
        lines.append(prefix + ("└── " if is_left else "┌── ") + str(node.value))
        if node.left is not None:
            self._render(node.left, prefix + ("    " if is_left else "|   "), True, lines)

    def pretty_print(self, node=_ROOT, prefix="", is_left=True, file=None):
        rendered = self.render(node, prefix, is_left)
        if rendered:
            print(rendered, file=file)

    def __len__(self):
        count = 0
        for _ in self._walk_preorder():
            count += 1
        return count

    def __contains__(self, value):
        return self.find(value) is not None

    def __repr__(self):
        return "OrderedTree({})".format(self.inorder() or [])

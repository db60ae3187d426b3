"""Visitor pattern for tree-sitter syntax trees.

Enables analyses to react to specific node types without writing their
own traversal. Methods are named ``visit_<node_type>`` after tree-sitter's
snake_case node type names (``visit_import_statement``,
``visit_call_expression``), mirroring Python's ast.NodeVisitor convention.

Unlike ast.NodeVisitor, a visit method never controls descent: the walk
always continues into every child. Traversal is iterative, so deeply
nested trees cannot exhaust the interpreter's recursion limit.

Python 3.13+.
"""

from collections.abc import Callable, Iterator
from typing import ClassVar

from tree_sitter import Node

__all__ = ["TreeVisitor", "iter_preorder"]


def iter_preorder(root: Node) -> Iterator[Node]:
    """Yield every node under ``root`` (inclusive) in pre-order.

    Each node is yielded exactly once. ERROR and MISSING nodes produced by
    parser recovery are yielded like any other node.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        # Reversed so the leftmost child is popped first
        stack.extend(reversed(node.children))


class TreeVisitor:
    """Base visitor for walking a tree-sitter syntax tree.

    Uses class-level dispatch table for performance:
    - Dispatch table built once per class definition via __init_subclass__
    - Node types without a visit method fall through to generic_visit

    Example:
        >>> class CountCalls(TreeVisitor):
        ...     def __init__(self):
        ...         super().__init__()
        ...         self.count = 0
        ...
        ...     def visit_call_expression(self, node: Node) -> None:
        ...         self.count += 1
        ...
        >>> visitor = CountCalls()
        >>> visitor.walk(tree.root_node)
        >>> print(visitor.count)
    """

    __slots__ = ("_instance_dispatch_cache",)

    # Class-level dispatch table (node type -> method name)
    _class_visit_methods: ClassVar[dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Build class-level dispatch table when subclass is defined."""
        super().__init_subclass__(**kwargs)
        cls._class_visit_methods = {}
        for name in dir(cls):
            if name.startswith("visit_"):
                cls._class_visit_methods[name[6:]] = name  # Skip "visit_"

    def __init__(self) -> None:
        """Initialize dispatch cache.

        Subclasses MUST call super().__init__().
        """
        self._instance_dispatch_cache: dict[str, Callable[[Node], None]] = {}

    def walk(self, root: Node) -> None:
        """Visit ``root`` and all of its descendants in pre-order."""
        for node in iter_preorder(root):
            self.visit(node)

    def visit(self, node: Node) -> None:
        """Dispatch a single node to its visit method.

        Args:
            node: Node to visit (its children are not visited here)
        """
        node_type = node.type
        method = self._instance_dispatch_cache.get(node_type)
        if method is None:
            method_name = self._class_visit_methods.get(node_type)
            method = getattr(self, method_name) if method_name else self.generic_visit
            self._instance_dispatch_cache[node_type] = method
        method(node)

    def generic_visit(self, node: Node) -> None:
        """Called for node types without a dedicated visit method."""

"""Syntax layer: parsing, tree traversal and position mapping.

Python 3.13+.
"""

from .parser import SourceTree, parse_source
from .position import LineOffsetCache
from .visitor import TreeVisitor, iter_preorder

__all__ = [
    "LineOffsetCache",
    "SourceTree",
    "TreeVisitor",
    "iter_preorder",
    "parse_source",
]

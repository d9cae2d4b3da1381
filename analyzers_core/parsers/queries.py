"""Structural queries over parsed syntax trees.

Every query accepts a whole tree, a single subtree or any iterable of nodes,
and is total: an empty tree simply yields no matches. Names computed at
runtime are never resolved, so dynamic calls and variable-variables do not
match any literal selector.
"""

import re
from typing import Callable, Optional, Union

from analyzers_core.parsers.nodes import (
    CLASS_LIKE_KINDS,
    DECLARATION_KINDS,
    NodeKind,
    SyntaxNode,
    TreeLike,
    kind_value,
    walk,
)

NodePredicate = Callable[[SyntaxNode], bool]

# Heuristic over literal text: also true for "$100" or a single-quoted '$name'
_VARIABLE_SIGIL = re.compile(r"\$\w+")
_EMBEDDED_EXPRESSION = "{$"


def find_all(tree: TreeLike, predicate: NodePredicate) -> list[SyntaxNode]:
    """All nodes satisfying ``predicate``, pre-order."""
    return [node for node in walk(tree) if predicate(node)]


def find_first(tree: TreeLike, predicate: NodePredicate) -> Optional[SyntaxNode]:
    for node in walk(tree):
        if predicate(node):
            return node
    return None


def find_by_kind(tree: TreeLike, kind: Union[str, NodeKind]) -> list[SyntaxNode]:
    kind = kind_value(kind)
    return find_all(tree, lambda node: node.kind == kind)


def find_method_calls(tree: TreeLike, method_name: str) -> list[SyntaxNode]:
    """Instance method calls (``$obj->name()``) with a literal method name."""
    return find_all(
        tree,
        lambda node: node.kind == NodeKind.METHOD_CALL and node.name is not None and node.name == method_name,
    )


def find_static_calls(tree: TreeLike, class_name: str, method_name: str) -> list[SyntaxNode]:
    """Static calls ``Class::method()`` where both class and method are literal names."""

    def matches(node: SyntaxNode) -> bool:
        if node.kind != NodeKind.STATIC_CALL or node.name is None:
            return False
        if node.name != method_name:
            return False
        return node.owner is not None and node.owner == class_name

    return find_all(tree, matches)


def find_function_calls(tree: TreeLike, function_name: str) -> list[SyntaxNode]:
    """Free function calls by literal name; ``$fn()`` never matches."""
    return find_all(
        tree,
        lambda node: node.kind == NodeKind.FUNCTION_CALL and node.name is not None and node.name == function_name,
    )


def find_declarations(tree: TreeLike, kind: Union[str, NodeKind] = NodeKind.CLASS) -> list[SyntaxNode]:
    """Declarations of one kind (class, interface, trait, enum, function, method, closure)."""
    if kind_value(kind) not in DECLARATION_KINDS:
        return []
    return find_by_kind(tree, kind)


def find_method_declarations(tree: TreeLike, owner: Optional[str] = None) -> list[SyntaxNode]:
    """Method declarations, optionally only those of the first type named ``owner``."""
    if owner is None:
        return find_by_kind(tree, NodeKind.METHOD)

    declaration = find_first(tree, lambda node: node.kind in CLASS_LIKE_KINDS and node.name == owner)
    if declaration is None:
        return []
    return find_by_kind(declaration, NodeKind.METHOD)


def has_concatenation(tree: TreeLike) -> bool:
    return find_first(tree, lambda node: node.kind == NodeKind.CONCAT) is not None


def has_interpolation(tree: TreeLike) -> bool:
    """Whether any string interpolates, or looks like it does.

    True for real interpolated literals, and for plain literals whose raw text
    contains ``{$`` or a ``$word`` pattern. The second rule is a heuristic
    and also fires on text that merely resembles a variable.
    """
    if find_first(tree, lambda node: node.kind == NodeKind.INTERPOLATED_STRING) is not None:
        return True

    for node in find_by_kind(tree, NodeKind.STRING):
        value = node.value or ""
        if _EMBEDDED_EXPRESSION in value or _VARIABLE_SIGIL.search(value):
            return True
    return False


def find_variable_references(tree: TreeLike) -> set[str]:
    """Distinct names of variables referenced by a literal identifier."""
    return {node.name for node in find_by_kind(tree, NodeKind.VARIABLE) if node.name is not None}

"""Syntax node model produced by the PHP parser.

Every construct is represented by a single frozen ``SyntaxNode`` tagged by
``kind``. Kinds the query engine cares about are normalized to ``NodeKind``
values; everything else keeps the grammar's own node type name.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional, Union


class NodeKind(str, Enum):
    """Normalized node kinds."""

    # Declarations
    CLASS = "class"
    INTERFACE = "interface"
    TRAIT = "trait"
    ENUM = "enum"
    METHOD = "method"
    FUNCTION = "function"
    CLOSURE = "closure"
    ARROW_FUNCTION = "arrow_function"

    # Calls
    METHOD_CALL = "method_call"
    NULLSAFE_METHOD_CALL = "nullsafe_method_call"
    STATIC_CALL = "static_call"
    FUNCTION_CALL = "function_call"
    NEW = "new"

    # Expressions
    VARIABLE = "variable"
    STRING = "string"
    INTERPOLATED_STRING = "interpolated_string"
    CONCAT = "concat"
    BINARY_OP = "binary_op"
    ASSIGN = "assign"

    # Statements
    NAMESPACE = "namespace"
    INLINE_HTML = "inline_html"


CLASS_LIKE_KINDS = frozenset(
    kind.value for kind in (NodeKind.CLASS, NodeKind.INTERFACE, NodeKind.TRAIT, NodeKind.ENUM)
)

DECLARATION_KINDS = CLASS_LIKE_KINDS | frozenset(
    kind.value for kind in (NodeKind.FUNCTION, NodeKind.METHOD, NodeKind.CLOSURE)
)


@dataclass(frozen=True, eq=False)
class SyntaxNode:
    """A node of the parsed syntax tree.

    Payload fields are ``None`` when they do not apply to the node's kind, or
    when the value is computed at runtime (``$obj->$method()`` has no
    literal ``name``).
    """

    kind: str
    start_line: int
    end_line: int
    start_column: int = 1
    name: Optional[str] = None  # called or declared identifier, variable name
    owner: Optional[str] = None  # literal owning type of a static call
    value: Optional[str] = None  # raw string literal content, no delimiters
    operator: Optional[str] = None  # binary operator token
    modifiers: tuple[str, ...] = ()
    children: tuple["SyntaxNode", ...] = ()

    def is_kind(self, kind: Union[str, NodeKind]) -> bool:
        return self.kind == kind

    def walk(self) -> Iterator["SyntaxNode"]:
        """Yield this node and all descendants in pre-order."""
        return walk(self)

    def child_of_kind(self, kind: Union[str, NodeKind]) -> Optional["SyntaxNode"]:
        for child in self.children:
            if child.kind == kind:
                return child
        return None

    def __repr__(self) -> str:
        label = f" {self.name!r}" if self.name is not None else ""
        return f"<SyntaxNode {self.kind}{label} L{self.start_line}-{self.end_line}>"


# Ordered top-level nodes of one parsed source. Empty means nothing parsed.
SyntaxTree = tuple[SyntaxNode, ...]

TreeLike = Union[SyntaxNode, Iterable[SyntaxNode]]


def kind_value(kind: Union[str, NodeKind]) -> str:
    return kind.value if isinstance(kind, NodeKind) else kind


def roots(tree: TreeLike) -> tuple[SyntaxNode, ...]:
    """Normalize a tree, a single subtree or any node iterable to a tuple."""
    if isinstance(tree, SyntaxNode):
        return (tree,)
    return tuple(tree)


def walk(tree: TreeLike) -> Iterator[SyntaxNode]:
    """Pre-order traversal in source order.

    Iterative so that long left-nested chains (``"a" . "b" . ...``) do not
    hit the interpreter's recursion limit.
    """
    stack = list(reversed(roots(tree)))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))

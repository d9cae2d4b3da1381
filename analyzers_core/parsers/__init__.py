"""PHP parsing and syntax tree queries."""

from analyzers_core.parsers.nodes import NodeKind, SyntaxNode, SyntaxTree, walk
from analyzers_core.parsers.php_parser import PhpParser
from analyzers_core.parsers.queries import (
    find_all,
    find_by_kind,
    find_declarations,
    find_first,
    find_function_calls,
    find_method_calls,
    find_method_declarations,
    find_static_calls,
    find_variable_references,
    has_concatenation,
    has_interpolation,
)

__all__ = [
    "NodeKind",
    "SyntaxNode",
    "SyntaxTree",
    "walk",
    "PhpParser",
    "find_all",
    "find_by_kind",
    "find_declarations",
    "find_first",
    "find_function_calls",
    "find_method_calls",
    "find_method_declarations",
    "find_static_calls",
    "find_variable_references",
    "has_concatenation",
    "has_interpolation",
]

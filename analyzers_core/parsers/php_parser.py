"""PHP parser using tree-sitter.

Converts the tree-sitter concrete syntax tree into immutable ``SyntaxNode``
trees. Any syntax error discards the whole result: a malformed source and an
empty source both produce an empty tree.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional, Union

import tree_sitter_php
from tree_sitter import Language, Parser

from analyzers_core.parsers.nodes import NodeKind, SyntaxNode, SyntaxTree

logger = logging.getLogger(__name__)

# Grammar node types mapped straight onto a normalized kind
KIND_MAP: dict[str, NodeKind] = {
    "class_declaration": NodeKind.CLASS,
    "interface_declaration": NodeKind.INTERFACE,
    "trait_declaration": NodeKind.TRAIT,
    "enum_declaration": NodeKind.ENUM,
    "method_declaration": NodeKind.METHOD,
    "function_definition": NodeKind.FUNCTION,
    "anonymous_function": NodeKind.CLOSURE,
    "anonymous_function_creation_expression": NodeKind.CLOSURE,
    "arrow_function": NodeKind.ARROW_FUNCTION,
    "member_call_expression": NodeKind.METHOD_CALL,
    "nullsafe_member_call_expression": NodeKind.NULLSAFE_METHOD_CALL,
    "scoped_call_expression": NodeKind.STATIC_CALL,
    "function_call_expression": NodeKind.FUNCTION_CALL,
    "object_creation_expression": NodeKind.NEW,
    "variable_name": NodeKind.VARIABLE,
    "dynamic_variable_name": NodeKind.VARIABLE,
    "assignment_expression": NodeKind.ASSIGN,
    "namespace_definition": NodeKind.NAMESPACE,
    "text": NodeKind.INLINE_HTML,
}

STRING_TYPES = {"string", "encapsed_string", "heredoc", "nowdoc"}
INTERPOLATING_STRING_TYPES = {"encapsed_string", "heredoc"}

# Pieces of a string literal that are plain text, not embedded expressions
LITERAL_PART_TYPES = {
    "string_content",
    "string_value",
    "escape_sequence",
    "heredoc_start",
    "heredoc_end",
    "nowdoc_body",
    "nowdoc_string",
}

LITERAL_NAME_TYPES = {"name", "qualified_name"}
LITERAL_SCOPE_TYPES = LITERAL_NAME_TYPES | {"relative_scope"}

SKIPPED_TYPES = {"comment", "php_tag", "php_end_tag"}

DECLARATION_TYPES = {
    "class_declaration",
    "interface_declaration",
    "trait_declaration",
    "enum_declaration",
    "method_declaration",
    "function_definition",
}


@lru_cache(maxsize=1)
def php_language() -> Language:
    """Compiled PHP grammar, shared by every parser in the process."""
    language = Language(tree_sitter_php.language_php())
    logger.debug("Loaded tree-sitter PHP grammar")
    return language


class PhpParser:
    """Parser for PHP code using tree-sitter."""

    def parse(self, code: Union[str, bytes]) -> SyntaxTree:
        """
        Parse PHP source into a syntax tree.

        Args:
            code: PHP source text (or its UTF-8 bytes)

        Returns:
            Top-level nodes in source order, or an empty tuple when the source
            is empty or contains any syntax error
        """
        source = code.encode("utf-8", errors="replace") if isinstance(code, str) else bytes(code)
        if not source.strip():
            return ()

        try:
            ts_tree = Parser(php_language()).parse(source)
        except Exception as e:
            logger.warning(f"tree-sitter failed to parse source: {e}")
            return ()

        root = ts_tree.root_node
        if root.has_error:
            logger.debug("Discarding syntax tree with parse errors")
            return ()

        return tuple(_convert(child, source) for child in _children(root))

    def parse_file(self, file_path: Union[str, os.PathLike]) -> SyntaxTree:
        """Parse a PHP file. Missing or unreadable files yield an empty tree."""
        path = Path(file_path)
        if not path.is_file():
            return ()

        try:
            source = path.read_bytes()
        except OSError as e:
            logger.debug(f"Cannot read {path}: {e}")
            return ()

        return self.parse(source)


def _children(ts_node: Any) -> list[Any]:
    children = []
    for child in ts_node.named_children:
        if child.type in SKIPPED_TYPES:
            continue
        if child.type == "text_interpolation":
            # A close/reopen tag pair only contributes the inline HTML between them
            children.extend(c for c in child.named_children if c.type == "text")
            continue
        children.append(child)
    return children


def _convert(ts_root: Any, source: bytes) -> SyntaxNode:
    """Build a ``SyntaxNode`` subtree bottom-up without recursion."""
    # Frame: [tree-sitter node, its children, next child index, built children]
    frames: list[list[Any]] = [[ts_root, _children(ts_root), 0, []]]
    while True:
        frame = frames[-1]
        ts_node, children, index, built = frame
        if index < len(children):
            frame[2] = index + 1
            child = children[index]
            frames.append([child, _children(child), 0, []])
            continue

        frames.pop()
        node = _make_node(ts_node, tuple(built), source)
        if not frames:
            return node
        frames[-1][3].append(node)


def _make_node(ts_node: Any, children: tuple[SyntaxNode, ...], source: bytes) -> SyntaxNode:
    ts_type = ts_node.type
    fields: dict[str, Any] = {}

    if ts_type in STRING_TYPES:
        interpolated = ts_type in INTERPOLATING_STRING_TYPES and _has_embedded_expression(ts_node)
        kind = NodeKind.INTERPOLATED_STRING.value if interpolated else NodeKind.STRING.value
        fields["value"] = _string_value(ts_node, source)
    elif ts_type == "binary_expression":
        operator = ts_node.child_by_field_name("operator")
        op = operator.type if operator is not None else None
        kind = NodeKind.CONCAT.value if op == "." else NodeKind.BINARY_OP.value
        fields["operator"] = op
    elif ts_type in KIND_MAP:
        kind = KIND_MAP[ts_type].value
    else:
        kind = ts_type

    if ts_type == "member_call_expression" or ts_type == "nullsafe_member_call_expression":
        fields["name"] = _literal_text(ts_node.child_by_field_name("name"), source, {"name"})
    elif ts_type == "scoped_call_expression":
        fields["name"] = _literal_text(ts_node.child_by_field_name("name"), source, {"name"})
        fields["owner"] = _literal_text(ts_node.child_by_field_name("scope"), source, LITERAL_SCOPE_TYPES)
    elif ts_type == "function_call_expression":
        fields["name"] = _literal_text(ts_node.child_by_field_name("function"), source, LITERAL_NAME_TYPES)
    elif ts_type == "object_creation_expression":
        for child in ts_node.named_children:
            if child.type in LITERAL_NAME_TYPES:
                fields["name"] = _literal_text(child, source, LITERAL_NAME_TYPES)
                break
    elif ts_type == "variable_name":
        fields["name"] = _variable_name(ts_node, source)
    elif ts_type in DECLARATION_TYPES or ts_type == "namespace_definition":
        name_node = ts_node.child_by_field_name("name")
        fields["name"] = _text(name_node, source) if name_node is not None else None
        fields["modifiers"] = tuple(
            _text(child, source).lower() for child in ts_node.children if child.type.endswith("_modifier")
        )

    return SyntaxNode(
        kind=kind,
        start_line=ts_node.start_point[0] + 1,
        end_line=ts_node.end_point[0] + 1,
        start_column=ts_node.start_point[1] + 1,
        children=children,
        **fields,
    )


def _text(ts_node: Any, source: bytes) -> str:
    return source[ts_node.start_byte:ts_node.end_byte].decode("utf-8", errors="replace")


def _literal_text(ts_node: Any, source: bytes, allowed_types: set[str]) -> Optional[str]:
    """Text of ``ts_node`` when it is a literal name, else ``None``."""
    if ts_node is None or ts_node.type not in allowed_types:
        return None
    return _text(ts_node, source).lstrip("\\")


def _variable_name(ts_node: Any, source: bytes) -> Optional[str]:
    for child in ts_node.named_children:
        if child.type == "name":
            return _text(child, source)
    text = _text(ts_node, source)
    return text[1:] if text.startswith("$") and len(text) > 1 else None


def _string_value(ts_node: Any, source: bytes) -> str:
    """Raw literal content without quotes or heredoc markers."""
    if ts_node.type in ("heredoc", "nowdoc"):
        for child in ts_node.named_children:
            if child.type in ("heredoc_body", "nowdoc_body"):
                return _text(child, source)
        return ""

    raw = _text(ts_node, source)
    if raw[:1] in ("b", "B"):
        raw = raw[1:]
    return raw[1:-1] if len(raw) >= 2 else ""


def _has_embedded_expression(ts_node: Any) -> bool:
    for child in ts_node.named_children:
        if child.type == "heredoc_body":
            if _has_embedded_expression(child):
                return True
        elif child.type not in LITERAL_PART_TYPES:
            return True
    return False

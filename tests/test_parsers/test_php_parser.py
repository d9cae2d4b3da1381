"""Tests for the PHP parser using tree-sitter.

These tests verify that the parser:
- Produces normalized nodes for declarations, calls and strings
- Leaves names computed at runtime unset
- Collapses empty, malformed and unreadable input into an empty tree
"""

import os

import pytest

from analyzers_core.parsers import NodeKind, PhpParser, SyntaxNode, find_by_kind, walk


class TestPhpParserDeclarations:
    """Test declaration nodes."""

    def test_parse_returns_top_level_nodes(self, sample_php_class):
        """Parser returns a non-empty tuple of nodes."""
        tree = PhpParser().parse(sample_php_class)

        assert isinstance(tree, tuple)
        assert len(tree) > 0
        assert all(isinstance(node, SyntaxNode) for node in tree)

    def test_class_declaration(self, sample_php_class):
        """Class declaration carries its name, modifiers and line span."""
        tree = PhpParser().parse(sample_php_class)

        classes = find_by_kind(tree, NodeKind.CLASS)
        assert len(classes) == 1
        controller = classes[0]
        assert controller.name == "UserController"
        assert "final" in controller.modifiers
        assert controller.start_line == 8
        assert controller.end_line == 20

    def test_method_declarations(self, sample_php_class):
        """Methods keep source order and lower-cased modifiers."""
        tree = PhpParser().parse(sample_php_class)

        methods = find_by_kind(tree, NodeKind.METHOD)
        assert [m.name for m in methods] == ["index", "find"]
        assert methods[0].start_line == 10
        assert "public" in methods[1].modifiers
        assert "static" in methods[1].modifiers

    def test_other_declaration_kinds(self, sample_php_types):
        """Interfaces, traits, enums, functions and closures are recognized."""
        tree = PhpParser().parse(sample_php_types)

        assert [n.name for n in find_by_kind(tree, NodeKind.INTERFACE)] == ["Shape"]
        assert [n.name for n in find_by_kind(tree, NodeKind.TRAIT)] == ["Greets"]
        assert [n.name for n in find_by_kind(tree, NodeKind.ENUM)] == ["Suit"]
        assert [n.name for n in find_by_kind(tree, NodeKind.FUNCTION)] == ["helper"]
        assert len(find_by_kind(tree, NodeKind.CLOSURE)) == 1
        assert len(find_by_kind(tree, NodeKind.ARROW_FUNCTION)) == 1

    def test_abstract_class_modifier(self, sample_php_types):
        tree = PhpParser().parse(sample_php_types)

        base = find_by_kind(tree, NodeKind.CLASS)[0]
        assert base.name == "Base"
        assert "abstract" in base.modifiers


class TestPhpParserExpressions:
    """Test call, string and variable nodes."""

    def test_static_call_owner_and_name(self, sample_php_class):
        tree = PhpParser().parse(sample_php_class)

        calls = find_by_kind(tree, NodeKind.STATIC_CALL)
        assert [(c.owner, c.name) for c in calls] == [("User", "where"), ("DB", "select")]

    def test_method_call_name(self, sample_php_class):
        tree = PhpParser().parse(sample_php_class)

        calls = find_by_kind(tree, NodeKind.METHOD_CALL)
        assert [c.name for c in calls] == ["get"]
        assert calls[0].start_line == 12

    def test_function_call_name(self, sample_php_class):
        tree = PhpParser().parse(sample_php_class)

        calls = find_by_kind(tree, NodeKind.FUNCTION_CALL)
        assert [c.name for c in calls] == ["view"]

    def test_interpolated_string(self, sample_php_class):
        """A double-quoted string with an embedded variable is interpolated."""
        tree = PhpParser().parse(sample_php_class)

        interpolated = find_by_kind(tree, NodeKind.INTERPOLATED_STRING)
        assert len(interpolated) == 1
        assert interpolated[0].start_line == 18

    def test_plain_string_value(self, sample_php_class):
        """Plain string literals keep their raw text without quotes."""
        tree = PhpParser().parse(sample_php_class)

        values = [n.value for n in find_by_kind(tree, NodeKind.STRING)]
        assert "active" in values
        assert "users.index" in values

    def test_concatenation_node(self, sample_php_dangerous):
        tree = PhpParser().parse(sample_php_dangerous)

        concats = find_by_kind(tree, NodeKind.CONCAT)
        assert len(concats) == 1
        assert concats[0].operator == "."
        assert concats[0].start_line == 10

    def test_dynamic_names_are_unset(self, sample_php_dynamic):
        """Names computed at runtime are None rather than guessed."""
        tree = PhpParser().parse(sample_php_dynamic)

        method_calls = find_by_kind(tree, NodeKind.METHOD_CALL)
        assert [c.name for c in method_calls] == ["save", None]

        function_calls = find_by_kind(tree, NodeKind.FUNCTION_CALL)
        assert [c.name for c in function_calls] == [None]

    def test_static_call_owners(self, sample_php_dynamic):
        """Expression owners are None; relative scopes and qualified names are literal."""
        tree = PhpParser().parse(sample_php_dynamic)

        owners = [c.owner for c in find_by_kind(tree, NodeKind.STATIC_CALL)]
        assert owners == [None, "self", "Foo\\Bar"]

    def test_nullsafe_call_is_separate_kind(self, sample_php_dynamic):
        tree = PhpParser().parse(sample_php_dynamic)

        nullsafe = find_by_kind(tree, NodeKind.NULLSAFE_METHOD_CALL)
        assert [c.name for c in nullsafe] == ["save"]

    def test_comments_are_not_represented(self):
        tree = PhpParser().parse("<?php\n// note\n/* block */\n$a = 1;\n")

        kinds = {node.kind for node in walk(tree)}
        assert "comment" not in kinds
        assert "php_tag" not in kinds

    def test_columns_are_one_based(self):
        tree = PhpParser().parse("<?php\nsystem('ls');\n")

        call = find_by_kind(tree, NodeKind.FUNCTION_CALL)[0]
        assert call.start_line == 2
        assert call.start_column == 1


class TestPhpParserFailures:
    """Test that failures collapse into an empty tree."""

    def test_empty_source(self):
        assert PhpParser().parse("") == ()

    def test_blank_source(self):
        assert PhpParser().parse("   \n\n") == ()

    def test_open_and_close_tags_only(self):
        """Tags without statements produce no nodes."""
        assert PhpParser().parse("<?php ?>") == ()

    def test_inline_html_after_close_tag(self):
        tree = PhpParser().parse("<?php ?>\nhello")

        html = find_by_kind(tree, NodeKind.INLINE_HTML)
        assert len(html) == 1
        assert "text_interpolation" not in {node.kind for node in walk(tree)}
        assert "php_end_tag" not in {node.kind for node in walk(tree)}

    def test_syntax_error_discards_tree(self, sample_php_malformed):
        assert PhpParser().parse(sample_php_malformed) == ()

    def test_accepts_bytes(self):
        tree = PhpParser().parse(b"<?php\nexec('id');\n")

        assert [c.name for c in find_by_kind(tree, NodeKind.FUNCTION_CALL)] == ["exec"]

    def test_deep_concatenation_chain(self):
        """Long left-nested chains do not hit the recursion limit."""
        chain = " . ".join(f"'p{i}'" for i in range(3000))
        tree = PhpParser().parse(f"<?php\n$sql = {chain};\n")

        assert len(find_by_kind(tree, NodeKind.CONCAT)) == 2999

    def test_parse_file(self, tmp_path, sample_php_class):
        path = tmp_path / "UserController.php"
        path.write_text(sample_php_class, encoding="utf-8")

        tree = PhpParser().parse_file(path)

        assert [n.name for n in find_by_kind(tree, NodeKind.CLASS)] == ["UserController"]

    def test_parse_file_missing(self, tmp_path):
        assert PhpParser().parse_file(tmp_path / "missing.php") == ()

    def test_parse_file_directory(self, tmp_path):
        assert PhpParser().parse_file(tmp_path) == ()

    @pytest.mark.skipif(hasattr(os, "geteuid") and os.geteuid() == 0, reason="root can read any file")
    def test_parse_file_unreadable(self, tmp_path):
        path = tmp_path / "secret.php"
        path.write_text("<?php\n$a = 1;\n", encoding="utf-8")
        path.chmod(0)
        try:
            assert PhpParser().parse_file(path) == ()
        finally:
            path.chmod(0o644)

"""C# source parser backed by the tree-sitter C# grammar."""

from dataclasses import dataclass
from typing import Iterator

import tree_sitter_c_sharp
from tree_sitter import Language, Node, Parser, Tree

from poco2csla.exceptions import ParseError
from poco2csla.utils.logging_utils import get_logger

logger = get_logger(__name__)

CSHARP_LANGUAGE = Language(tree_sitter_c_sharp.language())

NAMESPACE_KINDS = ("namespace_declaration", "file_scoped_namespace_declaration")
CLASS_KINDS = ("class_declaration",)
PROPERTY_KINDS = ("property_declaration",)


def walk_nodes(node: Node, *node_types: str) -> Iterator[Node]:
    """Yield all descendant nodes (including self) matching any of the given types, in source order."""
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type in node_types:
            yield current
        stack.extend(reversed(current.children))


@dataclass
class ParsedSource:
    """A parsed C# compilation unit with category queries over its syntax tree."""

    tree: Tree
    source: bytes

    @property
    def root(self) -> Node:
        return self.tree.root_node

    @property
    def has_errors(self) -> bool:
        return self.root.has_error

    def text(self, node: Node | None) -> str:
        """Return the source text of a node verbatim."""
        if node is None:
            return ""
        return self.source[node.start_byte:node.end_byte].decode("utf-8")

    def namespaces(self) -> list[Node]:
        """All namespace declarations, block or file-scoped."""
        return list(walk_nodes(self.root, *NAMESPACE_KINDS))

    def namespace_scope(self, namespace_node: Node) -> Node:
        """
        Node under which a namespace's members live.

        A file-scoped namespace applies to the rest of the compilation unit,
        so its members are searched from the root.
        """
        if namespace_node.type == "file_scoped_namespace_declaration":
            return self.root
        return namespace_node

    def classes(self, scope: Node) -> list[Node]:
        return list(walk_nodes(scope, *CLASS_KINDS))

    def properties(self, scope: Node) -> list[Node]:
        return list(walk_nodes(scope, *PROPERTY_KINDS))

    def name_of(self, node: Node) -> str:
        return self.text(node.child_by_field_name("name")).strip()

    def type_of(self, node: Node) -> str:
        return self.text(node.child_by_field_name("type")).strip()

    def modifiers_of(self, node: Node) -> list[str]:
        return [self.text(child).strip() for child in node.children if child.type == "modifier"]


class CSharpParser:
    """Parser for C# source code using tree-sitter."""

    def __init__(self):
        self._parser = Parser(CSHARP_LANGUAGE)

    def parse(self, source_code: str | bytes) -> ParsedSource:
        """
        Parse C# source and return the queryable tree.

        Args:
            source_code: Raw C# source code, as text or UTF-8 bytes

        Returns:
            ParsedSource wrapping the syntax tree

        Raises:
            ParseError: If the source is not valid UTF-8
        """
        if isinstance(source_code, bytes):
            try:
                source_code = source_code.decode("utf-8-sig")
            except UnicodeDecodeError as e:
                raise ParseError(f"Source is not valid UTF-8: {e}") from e

        source = source_code.lstrip("\ufeff").encode("utf-8")
        tree = self._parser.parse(source)
        parsed = ParsedSource(tree=tree, source=source)

        if parsed.has_errors:
            logger.warning("Source contains syntax errors; extraction may be incomplete")

        return parsed

    def parse_file(self, file_path: str) -> ParsedSource:
        """
        Read and parse a C# file.

        Raises:
            ParseError: If the file is not valid UTF-8
        """
        with open(file_path, "rb") as f:
            return self.parse(f.read())

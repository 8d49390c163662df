"""Extraction of the structural shape of a plain data object."""

from dataclasses import dataclass

from poco2csla.exceptions import StructuralError
from poco2csla.parsers.csharp_parser import CSharpParser, ParsedSource
from poco2csla.utils.logging_utils import get_logger

logger = get_logger(__name__)

VIRTUAL_MODIFIER = "virtual"


@dataclass(frozen=True)
class PropertyModel:
    """A property copied verbatim from the source class."""

    name: str
    type: str


@dataclass(frozen=True)
class StructuralModel:
    """Namespace, class name and non-virtual properties of the source class."""

    namespace_name: str
    class_name: str
    properties: tuple[PropertyModel, ...] = ()


def _single(nodes: list, kind: str):
    """Return the only element of ``nodes``; zero or several is a structural error."""
    if not nodes:
        raise StructuralError(f"no {kind}")
    if len(nodes) > 1:
        raise StructuralError(f"ambiguous {kind}")
    return nodes[0]


class StructuralExtractor:
    """Builds a StructuralModel from C# source holding exactly one namespace and one class."""

    def __init__(self, parser: CSharpParser | None = None):
        self.parser = parser or CSharpParser()

    def extract(self, source_code: str | bytes) -> StructuralModel:
        """
        Parse source text and extract its structural model.

        Args:
            source_code: C# source of the plain data object

        Returns:
            StructuralModel with properties in declaration order

        Raises:
            StructuralError: If the file does not hold exactly one namespace
                and exactly one class inside it
        """
        return self.extract_from_tree(self.parser.parse(source_code))

    def extract_file(self, file_path: str) -> StructuralModel:
        return self.extract_from_tree(self.parser.parse_file(file_path))

    def extract_from_tree(self, parsed: ParsedSource) -> StructuralModel:
        namespace_node = _single(parsed.namespaces(), "namespace")
        class_node = _single(parsed.classes(parsed.namespace_scope(namespace_node)), "class")

        properties = []
        for node in parsed.properties(class_node):
            name = parsed.name_of(node)
            if VIRTUAL_MODIFIER in parsed.modifiers_of(node):
                logger.debug(f"Skipping virtual property {name}")
                continue
            properties.append(PropertyModel(name=name, type=parsed.type_of(node)))

        model = StructuralModel(
            namespace_name=parsed.name_of(namespace_node),
            class_name=parsed.name_of(class_node),
            properties=tuple(properties),
        )
        logger.debug(
            f"Extracted {model.namespace_name}.{model.class_name} "
            f"with {len(model.properties)} properties"
        )
        return model

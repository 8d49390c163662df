"""Deterministic rendering of CSLA wrapper classes."""

from poco2csla.config.models import GenerationConfig
from poco2csla.core.structural_extractor import PropertyModel, StructuralModel
from poco2csla.core.variants import Variant, VariantDescriptor
from poco2csla.utils.text import trim_newline

INDENT = "    "


class VariantRenderer:
    """Renders one generated C# source file per (model, variant, namespace)."""

    def __init__(self, config: GenerationConfig | None = None):
        self.config = config or GenerationConfig()

    def render(
        self,
        model: StructuralModel,
        variant: Variant,
        namespace_override: str | None = None,
    ) -> str:
        """
        Render the source text of ``variant`` for ``model``.

        Args:
            model: Extracted shape of the plain data object
            variant: Variant to render
            namespace_override: Namespace for the generated class; defaults
                to the namespace of the source class

        Returns:
            Generated source, without leading or trailing blank lines
        """
        descriptor = variant.descriptor
        namespace = namespace_override if namespace_override is not None else model.namespace_name
        class_name = self.class_name(model, variant)

        if descriptor.is_list:
            body = self._list_body(model, descriptor, class_name)
        else:
            body = self._object_body(model, descriptor, class_name)

        builder = [f"using {ns};" for ns in self._usings(model, descriptor)]
        builder.append("")
        builder.append(f"namespace {namespace}")
        builder.append("{")
        builder.append(f"{INDENT}[Serializable]")
        builder.extend(body)
        builder.append("}")

        return trim_newline("\n".join(builder))

    def class_name(self, model: StructuralModel, variant: Variant) -> str:
        return model.class_name + variant.suffix

    def file_name(self, model: StructuralModel, variant: Variant) -> str:
        return self.class_name(model, variant) + self.config.file_extension

    # ------------------------------------------------------------------ #
    # Template pieces
    # ------------------------------------------------------------------ #
    def _usings(self, model: StructuralModel, descriptor: VariantDescriptor) -> list[str]:
        usings = [self.config.system_namespace, self.config.base_namespace]
        if not descriptor.is_list:
            usings.append(self.config.framework_namespace)
        usings.append(model.namespace_name)
        return usings

    def _object_body(
        self, model: StructuralModel, descriptor: VariantDescriptor, class_name: str
    ) -> list[str]:
        blocks = [
            "\n".join(self._property_block(prop, descriptor.accessor_method))
            for prop in model.properties
        ]
        return [
            f"{INDENT}public class {class_name} : "
            f"{descriptor.base_type}<{class_name}, {model.class_name}>",
            f"{INDENT}{{",
            "\n\n".join(blocks),
            f"{INDENT}}}",
        ]

    def _property_block(self, prop: PropertyModel, accessor_method: str) -> list[str]:
        member = INDENT * 2
        accessor = INDENT * 3
        binding = f"{prop.name}Property"
        return [
            f"{member}public static readonly PropertyInfo<{prop.type}> {binding} = "
            f"RegisterProperty<{prop.type}>(p => p.{prop.name});",
            f"{member}public {prop.type} {prop.name}",
            f"{member}{{",
            f"{accessor}get => GetProperty({binding});",
            f"{accessor}set => {accessor_method}({binding}, value);",
            f"{member}}}",
        ]

    def _list_body(
        self, model: StructuralModel, descriptor: VariantDescriptor, class_name: str
    ) -> list[str]:
        object_class_name = model.class_name + descriptor.paired_suffix
        member = INDENT * 2
        return [
            f"{INDENT}public class {class_name} : "
            f"{descriptor.base_type}<{class_name}, {object_class_name}, {model.class_name}>",
            f"{INDENT}{{",
            f"{member}public {class_name}()",
            f"{member}{{ }}",
            f"{INDENT}}}",
        ]

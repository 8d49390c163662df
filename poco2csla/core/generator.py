"""Orchestration of extraction, destination inference, rendering and writing."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from poco2csla.config.models import Poco2CslaConfig
from poco2csla.core.destination_resolver import DestinationResolver
from poco2csla.core.structural_extractor import StructuralExtractor, StructuralModel
from poco2csla.core.variant_renderer import VariantRenderer
from poco2csla.core.variants import ALL_TOKEN, Variant, expand_variants
from poco2csla.exceptions import FileOperationError, InputValidationError
from poco2csla.utils.logging_utils import get_logger

logger = get_logger(__name__)


@dataclass
class GenerationResult:
    """Outcome of one generation run."""

    class_name: str
    namespace: str
    destination: str
    written_files: list[str] = field(default_factory=list)


class GenerationOrchestrator:
    """Turns one plain data object source file into its CSLA variants."""

    def __init__(
        self,
        config: Poco2CslaConfig | None = None,
        extractor: StructuralExtractor | None = None,
        resolver: DestinationResolver | None = None,
        renderer: VariantRenderer | None = None,
    ):
        self.config = config or Poco2CslaConfig()
        self.extractor = extractor or StructuralExtractor()
        self.resolver = resolver or DestinationResolver(self.config.destination)
        self.renderer = renderer or VariantRenderer(self.config.generation)

    def generate(
        self,
        input_file_path: str,
        explicit_destination: str | None = None,
        requested_variants: Iterable[Variant | str] = (ALL_TOKEN,),
        explicit_namespace: str | None = None,
    ) -> GenerationResult:
        """
        Generate the requested variants next to the inferred or given destination.

        Extraction runs once, before anything is written. Files are written
        in BO, Info, EL, RL order and overwrite existing files; a failed write
        leaves earlier variants in place.

        Args:
            input_file_path: Source file holding the plain data object
            explicit_destination: Output directory; inferred when None
            requested_variants: Variants or tokens ("All", "BO", "Info", "EL", "RL")
            explicit_namespace: Namespace for generated classes, taking
                precedence over an inferred one

        Returns:
            GenerationResult listing the written files

        Raises:
            InputValidationError: If the input file does not exist
            StructuralError: If the source is not a single-class, single-namespace file
            FileOperationError: If a directory or file cannot be written
        """
        input_path = Path(input_file_path)
        if not input_path.is_file():
            raise InputValidationError(f"File does not exist: {input_file_path}")

        variants = expand_variants(requested_variants)
        model = self.extractor.extract_file(str(input_path))

        namespace = explicit_namespace
        if explicit_destination is None:
            destination, inferred_namespace = self.resolver.resolve(input_path)
            if namespace is None:
                namespace = inferred_namespace
        else:
            destination = explicit_destination

        logger.info(f"Generating {len(variants)} variant(s) of {model.class_name} into {destination}")

        result = GenerationResult(
            class_name=model.class_name,
            namespace=namespace if namespace is not None else model.namespace_name,
            destination=str(destination),
        )

        for variant in variants:
            source_code = self.renderer.render(model, variant, namespace)
            target = Path(destination) / self.renderer.file_name(model, variant)
            self._write(target, source_code)
            result.written_files.append(str(target))

        return result

    def render_all(
        self,
        model: StructuralModel,
        requested_variants: Iterable[Variant | str] = (ALL_TOKEN,),
        namespace_override: str | None = None,
    ) -> dict[Variant, str]:
        """Render the requested variants without touching the filesystem."""
        return {
            variant: self.renderer.render(model, variant, namespace_override)
            for variant in expand_variants(requested_variants)
        }

    def _write(self, target: Path, source_code: str) -> None:
        try:
            target.write_text(source_code, encoding="utf-8")
        except OSError as e:
            raise FileOperationError(f"Failed to write {target}: {e}") from e
        logger.info(f"Wrote {target}")

"""Core extraction and generation components for poco2csla."""

from .destination_resolver import DestinationResolver, strip_module_prefix
from .generator import GenerationOrchestrator, GenerationResult
from .structural_extractor import PropertyModel, StructuralExtractor, StructuralModel
from .variant_renderer import VariantRenderer
from .variants import Variant, VariantDescriptor, expand_variants

__all__ = [
    "DestinationResolver",
    "GenerationOrchestrator",
    "GenerationResult",
    "PropertyModel",
    "StructuralExtractor",
    "StructuralModel",
    "Variant",
    "VariantDescriptor",
    "VariantRenderer",
    "expand_variants",
    "strip_module_prefix",
]

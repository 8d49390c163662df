"""The four CSLA variants a plain data object can be rendered into."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from poco2csla.exceptions import InputValidationError

ALL_TOKEN = "All"


@dataclass(frozen=True)
class VariantDescriptor:
    """
    Fixed rendering parameters of one variant.

    Object variants carry the accessor used by the property setter; list
    variants carry the suffix of the object variant they collect.
    """

    suffix: str
    base_type: str
    accessor_method: str | None = None
    paired_suffix: str | None = None

    @property
    def is_list(self) -> bool:
        return self.paired_suffix is not None


class Variant(Enum):
    """Requested output flavour. Declaration order is the write order."""

    BO = VariantDescriptor("BO", "CslaBusinessBase", accessor_method="SetProperty")
    INFO = VariantDescriptor("Info", "CslaReadOnlyBase", accessor_method="LoadProperty")
    EL = VariantDescriptor("EL", "CslaBusinessListBase", paired_suffix="BO")
    RL = VariantDescriptor("RL", "CslaReadOnlyListBase", paired_suffix="Info")

    @property
    def descriptor(self) -> VariantDescriptor:
        return self.value

    @property
    def suffix(self) -> str:
        return self.value.suffix

    @classmethod
    def from_token(cls, token: str) -> "Variant":
        """Look up a variant by its suffix token, ignoring case."""
        for variant in cls:
            if variant.suffix.lower() == token.lower():
                return variant
        raise InputValidationError(
            f"Unknown variant '{token}', expected one of {tokens()}"
        )


def tokens() -> list[str]:
    """Tokens accepted on the command line."""
    return [ALL_TOKEN] + [variant.suffix for variant in Variant]


def expand_variants(requested: Iterable["Variant | str"]) -> list[Variant]:
    """
    Expand a request into distinct variants in the fixed BO, Info, EL, RL order.

    "All" stands for every variant; duplicates collapse.
    """
    selected = set()
    for item in requested:
        if isinstance(item, Variant):
            selected.add(item)
        elif item.lower() == ALL_TOKEN.lower():
            selected.update(Variant)
        else:
            selected.add(Variant.from_token(item))
    return [variant for variant in Variant if variant in selected]

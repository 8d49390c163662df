"""Inference of the output directory and namespace from the solution layout."""

import os
from pathlib import Path
from typing import Callable

from poco2csla.config.models import DestinationConfig
from poco2csla.exceptions import FileOperationError
from poco2csla.utils.logging_utils import get_logger

logger = get_logger(__name__)

NAMESPACE_SEPARATOR = "."


def strip_module_prefix(name: str) -> str:
    """Drop a two-letter upper-case module prefix, e.g. ``ABCustomer`` -> ``Customer``."""
    if len(name) > 2 and name[0].isupper() and name[1].isupper():
        return name[2:]
    return name


def keep_name(name: str) -> str:
    return name


def _parent_or_none(directory: Path) -> Path | None:
    parent = directory.parent
    return None if parent == directory else parent


class DestinationResolver:
    """
    Places generated files in the business library of the enclosing solution.

    An input file at ``<root>/<project>/<folder>/XYCustomer.cs`` is treated as
    belonging to the solution ``<root>``; its variants go to
    ``<root>/<root name>.BusinessLibrary/BO/Customer`` under the namespace
    ``<root name>.BusinessLibrary.BO.Customer``.
    """

    def __init__(
        self,
        config: DestinationConfig | None = None,
        prefix_policy: Callable[[str], str] | None = None,
    ):
        self.config = config or DestinationConfig()
        if prefix_policy is None:
            prefix_policy = strip_module_prefix if self.config.strip_module_prefix else keep_name
        self.prefix_policy = prefix_policy

    def solution_root(self, input_file: Path) -> Path | None:
        """Grandparent of the input file's directory, if the path is deep enough."""
        parent = _parent_or_none(input_file.parent)
        root = _parent_or_none(parent) if parent is not None else None
        if root is None or not root.name:
            return None
        return root

    def target_directory_name(self, input_file: Path) -> str:
        return self.prefix_policy(input_file.stem)

    def resolve(self, input_file_path: str | os.PathLike) -> tuple[str, str | None]:
        """
        Decide where generated files go and which namespace they declare.

        Args:
            input_file_path: Path of the plain data object source file

        Returns:
            (directory, namespace); namespace is None when no solution root
            could be inferred and the source namespace should be kept

        Raises:
            FileOperationError: If the destination directory cannot be created
        """
        input_file = Path(input_file_path).absolute()
        root = self.solution_root(input_file)

        if root is not None:
            subdirectory = Path(
                f"{root.name}{self.config.library_suffix}",
                self.config.objects_directory,
                self.target_directory_name(input_file),
            )
            destination = root / subdirectory
            try:
                destination.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise FileOperationError(f"Cannot create directory {destination}: {e}") from e

            namespace = str(subdirectory).replace(os.sep, NAMESPACE_SEPARATOR)
            if os.altsep:
                namespace = namespace.replace(os.altsep, NAMESPACE_SEPARATOR)
            logger.debug(f"Resolved destination {destination} (namespace {namespace})")
            return str(destination), namespace

        if input_file.parent.is_dir():
            return str(input_file.parent), None

        return os.getcwd(), None

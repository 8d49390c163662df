"""
Pydantic models for poco2csla configuration.

The defaults reproduce the generated CSLA templates exactly; a YAML file
only needs to name the values it changes.
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from poco2csla.exceptions import ConfigurationError


class GenerationConfig(BaseModel):
    """Configuration for rendering generated classes."""

    file_extension: str = Field(default=".cs", description="Extension of generated files.")
    system_namespace: str = Field(default="System", description="Namespace providing [Serializable].")
    base_namespace: str = Field(
        default="Core.Library.Base",
        description="Namespace holding the Csla*Base classes the variants derive from.",
    )
    framework_namespace: str = Field(
        default="Csla", description="CSLA root namespace (PropertyInfo<T>), used by object variants."
    )

    @field_validator("file_extension")
    @classmethod
    def validate_file_extension(cls, v: str) -> str:
        """Validate that the extension starts with a dot."""
        if not v.startswith(".") or len(v) < 2:
            raise ValueError(f"file_extension must start with '.', got: {v}")
        return v


class DestinationConfig(BaseModel):
    """Configuration for inferring the output directory and namespace."""

    library_suffix: str = Field(
        default=".BusinessLibrary",
        description="Appended to the solution directory name to form the library project.",
    )
    objects_directory: str = Field(
        default="BO", description="Directory inside the library project holding business objects."
    )
    strip_module_prefix: bool = Field(
        default=True,
        description="Drop a two-letter upper-case module prefix from the input file name.",
    )


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = Field(default="INFO", description="Logging level.")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format.",
    )
    file: str | None = Field(default=None, description="Optional log file path.")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate logging level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"level must be one of {allowed}, got: {v}")
        return v_upper


class Poco2CslaConfig(BaseModel):
    """Main poco2csla configuration."""

    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    destination: DestinationConfig = Field(default_factory=DestinationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "extra": "forbid",  # Raise error on unknown fields
        "validate_assignment": True,
    }


def load_config(config_file: str) -> Poco2CslaConfig:
    """
    Load and validate configuration from a YAML file.

    Args:
        config_file: Path to YAML configuration file

    Returns:
        Validated Poco2CslaConfig instance

    Raises:
        ConfigurationError: If the file is missing, unparsable or invalid
    """
    config_path = Path(config_file)

    if not config_path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_file}")

    try:
        with open(config_path, encoding="utf-8") as f:
            config_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse YAML configuration: {e}") from e

    if config_dict is None:
        config_dict = {}

    if not isinstance(config_dict, dict):
        raise ConfigurationError(
            f"Invalid configuration: expected a mapping, got {type(config_dict).__name__}"
        )

    try:
        return Poco2CslaConfig(**config_dict)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def save_config(config: Poco2CslaConfig, config_file: str) -> None:
    """
    Save configuration to a YAML file.

    Args:
        config: Poco2CslaConfig instance to save
        config_file: Path to YAML configuration file
    """
    config_path = Path(config_file)
    config_dict = config.model_dump(exclude_none=True)

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise ConfigurationError(f"Failed to save configuration to {config_file}: {e}") from e

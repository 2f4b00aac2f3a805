from argparse import Namespace
import logging
from typing import Optional, Dict, Any, Self
import yaml
from pathlib import Path

from pydantic import (
    BaseModel,
    Field,
    ValidationError,
    field_validator,
    model_validator,
    ConfigDict,
)

from uitk_string_generator.constants import DefaultConfig
from uitk_string_generator.domain.naming import sanitize_free_text
from uitk_string_generator.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


# --- Pydantic Model for Configuration Schema ---
class GeneratorConfigSchema(BaseModel):
    """Pydantic schema defining the expected structure and types for the configuration."""

    namespace: str = Field(
        default=DefaultConfig.NAMESPACE,
        description="C# namespace of the generated classes; periods allowed.",
    )
    output_dir: str = Field(
        default=DefaultConfig.OUTPUT_DIR,
        description="Directory the generated .cs files are written to.",
    )
    max_identifier_length: int = Field(
        default=DefaultConfig.MAX_IDENTIFIER_LENGTH,
        ge=1,
        description="Constant names longer than this are abbreviated.",
    )
    stylesheet: Optional[str] = Field(
        default=None, description="Path to the USS stylesheet to read class names from."
    )
    markup: Optional[str] = Field(
        default=None, description="Path to the UXML document to read element names from."
    )
    file_extension: str = Field(
        default=DefaultConfig.FILE_EXTENSION,
        min_length=1,
        description="Extension of the generated source files.",
    )

    def __getitem__(self, key: str) -> Any:
        """Allow dictionary-style access."""
        return getattr(self, key)

    def get(self, key: str, default: Any = None) -> Any:
        return getattr(self, key, default)

    # --- Custom Field Validators ---

    @field_validator("namespace", mode="before")
    @classmethod
    def sanitize_namespace(cls, v: Any) -> str:
        """Reduce the namespace to identifier characters; blank falls back to the default."""
        if v is None:
            return DefaultConfig.NAMESPACE
        if not isinstance(v, str):
            raise ValueError(f"namespace must be a string, got {type(v).__name__}")
        return sanitize_free_text(v, allow_periods=True) or DefaultConfig.NAMESPACE

    @field_validator("output_dir", mode="before")
    @classmethod
    def default_blank_output_dir(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return DefaultConfig.OUTPUT_DIR
        return v

    @field_validator("stylesheet", "markup", mode="before")
    @classmethod
    def blank_path_is_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("file_extension")
    @classmethod
    def ensure_leading_dot(cls, v: str) -> str:
        return v if v.startswith(".") else f".{v}"

    # --- Cross-field validation ---
    @model_validator(mode="after")
    def check_asset_selected(self) -> Self:
        """At least one of the two generation targets must be selected."""
        if not self.stylesheet and not self.markup:
            raise ValueError("No StyleSheet or UXML file selected!")
        return self

    model_config = ConfigDict(
        extra="ignore",  # Allow and ignore extra fields from input dict
    )


# --- Validation Function ---
def validate_and_parse_config(config_dict: Dict[str, Any], config_file: Optional[str] = None) -> GeneratorConfigSchema:
    """
    Validates a raw configuration dictionary against the GeneratorConfigSchema.

    Raises:
        ConfigurationError: Listing every failing location when validation fails
    """
    try:
        validated_config = GeneratorConfigSchema.model_validate(config_dict)
        logger.debug(
            "Configuration dictionary parsed and validated successfully against schema."
        )
        return validated_config
    except ValidationError as e:
        problems = {}
        for error in e.errors():
            loc_parts = [str(loc_item) for loc_item in error.get("loc", ())]
            loc_str = " -> ".join(loc_parts) if loc_parts else "Model Level"
            problems[loc_str] = error.get("msg", "Unknown validation error")
            logger.debug(f"Configuration error at '{loc_str}': {problems[loc_str]}")

        raise ConfigurationError(
            "Configuration validation failed! Please check your config file or arguments.",
            config_file=config_file,
            context=problems,
        ) from e


def load_config(config_path: Optional[str], cli_args: Namespace) -> GeneratorConfigSchema:
    """
    Loads configuration from YAML file, merges with CLI arguments,
    validates the result, and returns a validated Pydantic model instance.
    """
    raw_config: Dict[str, Any] = {}

    # 1. Load from YAML file if path is provided
    if config_path:
        try:
            config_file = Path(config_path)
            if config_file.is_file():
                with open(config_file, "r", encoding="utf-8") as f:
                    yaml_config = yaml.safe_load(f)
                    if yaml_config and isinstance(yaml_config, dict):
                        raw_config.update(yaml_config)
                        logger.debug(f"Loaded configuration from {config_path}")
                    elif yaml_config:
                        logger.warning(
                            f"Content in config file {config_path} is not a dictionary. Ignoring file content."
                        )
            else:
                logger.warning(
                    f"Config file not found at {config_path}. Using defaults and CLI arguments."
                )
        except yaml.YAMLError as e:
            logger.error(f"Error parsing YAML file {config_path}: {e}")
            logger.warning("Proceeding with defaults and CLI arguments only.")
        except OSError as e:
            logger.error(f"Error reading config file {config_path}: {e}")
            logger.warning("Proceeding with defaults and CLI arguments only.")

    # 2. Override with CLI arguments (only those explicitly provided)
    cli_dict = vars(cli_args)
    overridden_keys = set()
    for key, value in cli_dict.items():
        if value is not None and key in GeneratorConfigSchema.model_fields:
            raw_config[key] = value
            overridden_keys.add(key)
    if overridden_keys:
        logger.debug(f"Overridden config keys from CLI arguments: {sorted(overridden_keys)}")

    # 3. Validate
    logger.debug("Validating final configuration...")
    return validate_and_parse_config(raw_config, config_file=config_path)

# File: uml_enum_generator/config_validation.py
from argparse import Namespace
import sys
import logging
from typing import List, Optional, Dict, Any, Literal, Self
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

from .constants import DefaultConfig, GeneratedComments, Stereotypes

logger = logging.getLogger(__name__)


# --- Pydantic Models for Configuration Schema ---
class ToolConfigSchema(BaseModel):
    """Pydantic schema defining the expected structure and types for the configuration."""

    model_file: str = Field(
        ...,
        min_length=1,
        description="Path to the YAML/JSON structural model file.",
    )
    output_dir: str = Field(
        DefaultConfig.OUTPUT_DIR,
        min_length=1,
        description="Root directory for generated sources.",
    )
    enumeration_stereotype: str = Field(
        default=Stereotypes.ENUMERATION,
        min_length=1,
        description="Stereotype marking classes to generate as enumerations.",
    )
    source_directory_stereotype: str = Field(
        default=Stereotypes.SOURCE_DIRECTORY,
        min_length=1,
        description="Stereotype marking packages that are source directory roots.",
    )
    target_language: Literal["java"] = Field(
        default=DefaultConfig.TARGET_LANGUAGE,
        description="Language of the generated sources.",
    )
    format_code: bool = Field(
        default=DefaultConfig.FORMAT_CODE,
        description="Whether to run the formatting pass on generated sources.",
    )
    indent_width: int = Field(
        default=DefaultConfig.INDENT_WIDTH,
        ge=1,
        le=8,
        description="Spaces per indentation level used by the formatting pass.",
    )
    fail_fast: bool = Field(
        default=DefaultConfig.FAIL_FAST,
        description="Abort the run on the first classifier that cannot be generated.",
    )
    header_comment: List[str] = Field(
        default_factory=lambda: list(GeneratedComments.PACKAGE_HEADER),
        description="Lines of the header comment placed above the package clause.",
    )

    # --- Custom Field Validators using @field_validator ---

    @field_validator("enumeration_stereotype", "source_directory_stereotype")
    @classmethod
    def check_stereotype_name(cls, v: str) -> str:
        """Ensure stereotype names are not blank."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("Stereotype name cannot be empty or just whitespace.")
        return stripped

    @field_validator("header_comment", mode="before")
    @classmethod
    def check_header_comment(cls, v: Any) -> List[str]:
        """Accept a single string as a one-line header comment."""
        if v is None:
            return []
        if isinstance(v, str):
            return v.splitlines()
        return v

    # --- Custom Model Validator using @model_validator ---
    @model_validator(mode="after")
    def check_stereotypes_differ(self) -> Self:
        """Perform cross-field validation checks."""
        if self.enumeration_stereotype == self.source_directory_stereotype:
            raise ValueError(
                "'enumeration_stereotype' and 'source_directory_stereotype' must be different."
            )
        return self

    model_config = ConfigDict(
        extra="ignore",  # Allow and ignore extra fields from input dict
    )


# --- Validation Function ---
def validate_and_parse_config(config_dict: Dict[str, Any]) -> ToolConfigSchema:
    """
    Validates a raw configuration dictionary against the ToolConfigSchema.
    Exits with error messages if validation fails.
    """
    try:
        validated_config = ToolConfigSchema.model_validate(config_dict)
        logger.debug(
            "Configuration dictionary parsed and validated successfully against schema."
        )
        return validated_config
    except ValidationError as e:
        logger.critical(
            "Configuration validation failed! Please check your config file or arguments."
        )
        print("\n--- Configuration Errors ---", file=sys.stderr)
        for error in e.errors():
            loc_parts = [str(loc_item) for loc_item in error.get("loc", ())]
            loc_str = " -> ".join(loc_parts) if loc_parts else "Model Level"
            msg = error.get("msg", "Unknown validation error")

            print(f"  - Location: '{loc_str}'", file=sys.stderr)
            print(f"    Error:    {msg}", file=sys.stderr)

            if "model_file" in loc_parts and error.get("type") == "missing":
                print(
                    "    Hint:     Pass the model with --model-file or set 'model_file' in the config file.",
                    file=sys.stderr,
                )

        print("----------------------------", file=sys.stderr)
        sys.exit(1)


def load_config(config_path: Optional[str], cli_args: Namespace) -> ToolConfigSchema:
    """
    Loads configuration from YAML file, merges with CLI arguments,
    validates the result, and returns a validated Pydantic model instance.
    Exits with error messages if validation fails.
    """
    raw_config: Dict[str, Any] = {}

    # 1. Load from YAML file if path is provided
    if config_path:
        config_file = Path(config_path)
        if config_file.is_file():
            try:
                with open(config_file, "r", encoding="utf-8") as f:
                    yaml_config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error(f"Error parsing YAML file {config_path}: {e}")
                logger.warning("Proceeding with defaults and CLI arguments only.")
                yaml_config = None
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

    # 2. Override with CLI arguments (only those explicitly provided)
    cli_dict = vars(cli_args)
    overridden_keys = set()
    for key, value in cli_dict.items():
        if value is not None and key in ToolConfigSchema.model_fields:
            raw_config[key] = value
            overridden_keys.add(key)
    if overridden_keys:
        logger.debug(f"Overridden config keys from CLI arguments: {sorted(overridden_keys)}")

    # 3. Validate
    logger.info("Validating final configuration...")
    validated_config: ToolConfigSchema = validate_and_parse_config(raw_config)

    # 4. Post-validation adjustments: model_file relative to the config file
    model_file = Path(validated_config.model_file)
    if config_path and not model_file.is_absolute() and "model_file" not in overridden_keys:
        model_file = Path(config_path).parent / model_file
    validated_config.model_file = str(model_file.resolve())
    validated_config.output_dir = str(Path(validated_config.output_dir).resolve())

    logger.info("Configuration loaded and validated successfully.")
    return validated_config

"""
Structural model loading for UML Enum Generator.

A model is a YAML (or JSON) document describing nested packages, classifiers and
their properties, with stereotypes applied to packages and classifiers:

    name: shop
    packages:
      - name: com.example.shop
        stereotypes: [SourceDirectory]
        packages:
          - name: order
            classifiers:
              - name: OrderStatus
                stereotypes: [Enumeration]
                properties:
                  - name: open
                  - name: shipped
                    type: String
                    default: SHIPPED
                    comments: ["Handed over to the carrier"]

Plain scalars are read as written: `OFF`, `yes`, `1.10` and `007` stay text instead of
becoming YAML 1.1 booleans and numbers. The document is validated with pydantic and
handed to the model walker as is.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from .constants import JavaTypes
from .domain.literals import render_default_value
from .exceptions import ModelLoadError

logger = logging.getLogger(__name__)

# Implicit YAML 1.1 tags that would rewrite a plain scalar such as OFF, yes, 1.10 or 007
TEXT_PRESERVING_TAGS = {
    "tag:yaml.org,2002:bool",
    "tag:yaml.org,2002:int",
    "tag:yaml.org,2002:float",
    "tag:yaml.org,2002:timestamp",
}


class ModelYamlLoader(yaml.SafeLoader):
    """Safe loader that keeps boolean, numeric and date scalars as their source text."""


ModelYamlLoader.yaml_implicit_resolvers = {
    first_char: [(tag, regexp) for tag, regexp in resolvers if tag not in TEXT_PRESERVING_TAGS]
    for first_char, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class PropertySchema(BaseModel):
    """Schema for one classifier attribute."""

    name: str = Field(..., description="Attribute name.")
    type: str = Field(
        default=JavaTypes.STRING,
        min_length=1,
        description="Declared primitive type name (String, Integer, Long, Boolean).",
    )
    default: Optional[str] = Field(
        default=None, description="Explicit literal text; the masked name is used when absent."
    )
    comments: List[str] = Field(default_factory=list, description="Attached comment bodies.")

    model_config = ConfigDict(extra="ignore")

    @field_validator("default", mode="before")
    @classmethod
    def check_default_as_text(cls, v: Any) -> Any:
        """Keep literal values as text, spelling JSON booleans the Java way."""
        if isinstance(v, (bool, int, float)):
            return render_default_value(v)
        return v


class ClassifierSchema(BaseModel):
    """Schema for a class in the model."""

    name: str = Field(..., min_length=1, description="Class name.")
    stereotypes: List[str] = Field(default_factory=list)
    comments: List[str] = Field(default_factory=list)
    properties: List[PropertySchema] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    @field_validator("name")
    @classmethod
    def check_name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Classifier name cannot be empty or just whitespace.")
        return v.strip()


class PackageSchema(BaseModel):
    """Schema for a (possibly nested) package."""

    name: str = Field(..., min_length=1, description="Package name, dotted names allowed.")
    stereotypes: List[str] = Field(default_factory=list)
    classifiers: List[ClassifierSchema] = Field(default_factory=list)
    packages: List["PackageSchema"] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


class ModelDocument(BaseModel):
    """Schema for a whole model file."""

    name: str = Field(default="model", description="Model name.")
    stereotypes: List[str] = Field(default_factory=list)
    classifiers: List[ClassifierSchema] = Field(default_factory=list)
    packages: List[PackageSchema] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


def parse_model(raw_model: Dict[str, Any], source: str = None) -> ModelDocument:
    """
    Validate a raw model dictionary against the model schema.

    Raises:
        ModelLoadError: If the dictionary does not describe a valid model
    """
    try:
        return ModelDocument.model_validate(raw_model)
    except ValidationError as e:
        problems = []
        for error in e.errors():
            loc_parts = [str(loc_item) for loc_item in error.get("loc", ())]
            loc_str = " -> ".join(loc_parts) if loc_parts else "Model Level"
            problems.append(f"{loc_str}: {error.get('msg', 'Unknown validation error')}")
        raise ModelLoadError(
            f"Model validation failed with {len(problems)} error(s)",
            model_file=source,
            context={"errors": "; ".join(problems)},
        ) from e


def load_model(model_path: Union[str, Path]) -> ModelDocument:
    """
    Load and validate a model file.

    Args:
        model_path: Path to a YAML or JSON model file

    Returns:
        The validated model document

    Raises:
        ModelLoadError: If the file cannot be read, parsed or validated
    """
    model_file = Path(model_path)
    if not model_file.is_file():
        raise ModelLoadError(f"Model file not found: {model_file}", model_file=str(model_file))

    try:
        with open(model_file, "r", encoding="utf-8") as f:
            raw_model = yaml.load(f, Loader=ModelYamlLoader)
    except yaml.YAMLError as e:
        raise ModelLoadError(f"Error parsing model file: {e}", model_file=str(model_file)) from e

    if raw_model is None:
        raw_model = {}
    if not isinstance(raw_model, dict):
        raise ModelLoadError(
            f"Model file content must be a mapping, got {type(raw_model).__name__}",
            model_file=str(model_file),
        )

    document = parse_model(raw_model, source=str(model_file))
    logger.debug(f"Loaded model '{document.name}' from {model_file}")
    return document

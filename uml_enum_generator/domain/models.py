"""
Core domain models for UML Enum Generator.

These are small immutable values capturing exactly what enumeration generation needs
from a structural model. They are adapted from the external model at the boundary
(see ``walker.py``) so that generation logic never touches the model store itself.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, FrozenSet, List, Optional, Tuple

from ..constants import JavaTypes


class PrimitiveType(Enum):
    """Primitive literal kinds understood by the literal resolver."""

    STRING = "string"
    INTEGER = "integer"
    LONG = "long"
    BOOLEAN = "boolean"

    @classmethod
    def from_type_name(cls, type_name: Optional[str]) -> Optional["PrimitiveType"]:
        """
        Look up the primitive kind of a declared model type name.

        Returns None for unrecognized names; callers treat those as strings.

        Example:
            >>> PrimitiveType.from_type_name("Long")
            <PrimitiveType.LONG: 'long'>
            >>> PrimitiveType.from_type_name("Date") is None
            True
        """
        if not type_name:
            return None
        lowered = type_name.strip().lower()
        for kind in cls:
            if lowered in JavaTypes.TYPE_ALIASES[kind.value]:
                return kind
        return None

    @property
    def java_type(self) -> str:
        """Java wrapper type holding a payload of this kind."""
        return {
            PrimitiveType.STRING: JavaTypes.STRING,
            PrimitiveType.INTEGER: JavaTypes.INTEGER,
            PrimitiveType.LONG: JavaTypes.LONG,
            PrimitiveType.BOOLEAN: JavaTypes.BOOLEAN,
        }[self]


@dataclass(frozen=True)
class Property:
    """One enumeration literal candidate of a classifier."""

    name: str
    type_name: str = JavaTypes.STRING
    default_value: Optional[Any] = None
    comments: Tuple[str, ...] = ()

    @property
    def has_default(self) -> bool:
        return self.default_value is not None

    @property
    def primitive_type(self) -> Optional[PrimitiveType]:
        return PrimitiveType.from_type_name(self.type_name)


@dataclass(frozen=True)
class Classifier:
    """
    A model element marked for enumeration generation.

    ``package_path`` holds the names of the packages between the source directory
    package and the classifier, outermost first. Property order is generation order.
    """

    name: str
    properties: Tuple[Property, ...] = ()
    stereotypes: FrozenSet[str] = frozenset()
    package_path: Tuple[str, ...] = ()
    comments: Tuple[str, ...] = ()

    def has_stereotype(self, stereotype: str) -> bool:
        return stereotype in self.stereotypes

    @property
    def first_property(self) -> Optional[Property]:
        return self.properties[0] if self.properties else None


@dataclass(frozen=True)
class GenerationContext:
    """Per-call values shared by every step of one enumeration synthesis."""

    type_name: str
    package_name: str
    payload_type: str


@dataclass(frozen=True)
class GenerationFailure:
    """A classifier that produced no output, and why."""

    classifier_name: str
    message: str


@dataclass
class GenerationResult:
    """Outcome of a generation run over a whole model."""

    generated_files: List[Path] = field(default_factory=list)
    failures: List[GenerationFailure] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        """True when no classifier failed."""
        return not self.failures

    def add_file(self, path: Path) -> None:
        self.generated_files.append(path)

    def add_failure(self, classifier_name: str, message: str) -> None:
        self.failures.append(GenerationFailure(classifier_name, message))

"""
Model walking and package resolution for UML Enum Generator.

The walker is the boundary between the structural model store and generation: it
finds the classifiers carrying the enumeration stereotype and adapts each of them
into the small immutable domain values the synthesizer works on.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from .constants import Separators, Stereotypes
from .domain.models import Classifier, Property
from .domain.naming import prefix_with_a_predicate
from .model_loader import ClassifierSchema, ModelDocument, PackageSchema, PropertySchema

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiscoveredClassifier:
    """An enumeration classifier together with the source directory package it lives in."""

    classifier: Classifier
    source_directory_package: str


class PackageResolver:
    """Resolves the dotted package of a classifier's generated source."""

    def resolve_full_package(self, classifier: Classifier, source_directory_package: str) -> str:
        """
        Join the source directory package and the classifier's package path.

        Example:
            >>> PackageResolver().resolve_full_package(Classifier("Status", package_path=("order",)), "com.example")
            'com.example.order'
        """
        parts = [source_directory_package, *classifier.package_path]
        return Separators.PACKAGE.join(part for part in parts if part)


def adapt_property(prop: PropertySchema) -> Property:
    return Property(
        name=prop.name,
        type_name=prop.type,
        default_value=prop.default,
        comments=tuple(prop.comments),
    )


def adapt_classifier(classifier: ClassifierSchema, package_path: Sequence[str]) -> Classifier:
    """Adapt a model classifier into a domain classifier."""
    return Classifier(
        name=classifier.name,
        properties=tuple(adapt_property(prop) for prop in classifier.properties),
        stereotypes=frozenset(classifier.stereotypes),
        package_path=tuple(package_path),
        comments=tuple(classifier.comments),
    )


class ModelWalker:
    """
    Discovers enumeration classifiers in a model document.

    Packages are visited depth-first in document order, the classifiers of a package
    before its sub-packages. A package with the source directory stereotype (or a
    document with it) starts a new source root: its name becomes the source
    directory package and the package path of nested classifiers restarts below it.
    """

    def __init__(
        self,
        enumeration_stereotype: str = Stereotypes.ENUMERATION,
        source_directory_stereotype: str = Stereotypes.SOURCE_DIRECTORY
    ):
        self.enumeration_stereotype = enumeration_stereotype
        self.source_directory_stereotype = source_directory_stereotype

    def walk(self, document: ModelDocument) -> Iterator[DiscoveredClassifier]:
        """Yield every enumeration classifier of the document."""
        source_directory_package = ""
        if self.source_directory_stereotype in document.stereotypes:
            source_directory_package = document.name
            logger.debug(f"SourceDirectory package name: {source_directory_package}")

        yield from self._walk_classifiers(document.classifiers, source_directory_package, ())
        for package in document.packages:
            yield from self._walk_package(package, source_directory_package, ())

    def find_enumerations(self, document: ModelDocument) -> List[DiscoveredClassifier]:
        """Return every enumeration classifier of the document, in walk order."""
        return list(self.walk(document))

    def _walk_package(
        self,
        package: PackageSchema,
        source_directory_package: str,
        package_path: Tuple[str, ...]
    ) -> Iterator[DiscoveredClassifier]:
        if self.source_directory_stereotype in package.stereotypes:
            source_directory_package = package.name
            package_path = ()
            logger.debug(f"SourceDirectory package name: {source_directory_package}")
        else:
            package_path = package_path + (package.name,)

        yield from self._walk_classifiers(package.classifiers, source_directory_package, package_path)
        for sub_package in package.packages:
            yield from self._walk_package(sub_package, source_directory_package, package_path)

    def _walk_classifiers(
        self,
        classifiers: Sequence[ClassifierSchema],
        source_directory_package: str,
        package_path: Tuple[str, ...]
    ) -> Iterator[DiscoveredClassifier]:
        for classifier in classifiers:
            adapted = adapt_classifier(classifier, package_path)
            if not adapted.has_stereotype(self.enumeration_stereotype):
                continue
            logger.debug(f"Found {prefix_with_a_predicate(self.enumeration_stereotype)} classifier: {classifier.name}")
            yield DiscoveredClassifier(
                classifier=adapted,
                source_directory_package=source_directory_package,
            )

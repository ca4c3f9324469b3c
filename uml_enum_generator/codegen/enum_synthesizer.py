"""
Enumeration synthesis for UML Enum Generator.

Builds the complete code model of one enumeration type from a classifier: package
clause, type documentation, constants, serialization identifier, private
constructor, string-conversion factory and value accessor.
"""

import logging
from typing import List, Optional, Sequence

from ..constants import GeneratedComments, JavaNames, Separators
from ..domain.comments import comment_lines, concat_comments
from ..domain.literals import LiteralResolver, format_literal, payload_type_name
from ..domain.models import Classifier, GenerationContext, PrimitiveType, Property
from ..domain.naming import NamingConvention, mask
from ..exceptions import ModelIntegrityError
from ..walker import PackageResolver
from .base import (
    DocComment,
    EnumConstant,
    GeneratedEnumUnit,
    Member,
    create_assign,
    create_constructor,
    create_doc_comment,
    create_enum_constant,
    create_enum_declaration,
    create_field,
    create_literal,
    create_method,
    create_name,
    create_package,
    create_parameter,
    create_return,
    create_static_call,
    create_this_field,
)

logger = logging.getLogger(__name__)


def create_documentation(comments: Sequence[str]) -> Optional[DocComment]:
    """Documentation block for a model element, or None when it has no comments."""
    text = concat_comments(comments)
    if not text:
        return None
    return create_doc_comment(comment_lines(text))


class EnumSynthesizer:
    """
    Synthesizes enumeration code models from classifiers.

    A synthesizer holds only its collaborators; every value that depends on the
    classifier being generated travels in a ``GenerationContext``. One instance can
    therefore be shared by any number of synthesis calls.
    """

    def __init__(
        self,
        package_resolver: Optional[PackageResolver] = None,
        literal_resolver: Optional[LiteralResolver] = None,
        header_comment: Sequence[str] = tuple(GeneratedComments.PACKAGE_HEADER)
    ):
        self._package_resolver = package_resolver or PackageResolver()
        self._literal_resolver = literal_resolver or LiteralResolver()
        self._header_comment = tuple(header_comment)

    def synthesize(self, classifier: Classifier, source_directory_package: str = "") -> GeneratedEnumUnit:
        """
        Build the enumeration for a classifier.

        Args:
            classifier: The enumeration classifier
            source_directory_package: Package of the source directory root the
                classifier belongs to

        Returns:
            The complete enumeration code model

        Raises:
            ModelIntegrityError: If the classifier has no properties or a property
                name masks to an empty identifier
        """
        if not classifier.properties:
            raise ModelIntegrityError(
                f"Enumeration '{classifier.name}' has no properties to turn into constants",
                classifier=classifier.name,
            )

        context = self.create_context(classifier, source_directory_package)
        logger.debug(f"Class: {classifier.name} - payload type {context.payload_type}")

        constants = self.create_constants(classifier, context)
        members = self.create_members(context)

        declaration = create_enum_declaration(
            name=context.type_name,
            modifiers=("public",),
            constants=constants,
            members=members,
            documentation=create_documentation(classifier.comments),
        )
        package = create_package(
            name=context.package_name,
            documentation=create_doc_comment(self._header_comment),
        )
        return GeneratedEnumUnit(package=package, declaration=declaration)

    def create_context(self, classifier: Classifier, source_directory_package: str) -> GenerationContext:
        """Collect the per-call values of one synthesis."""
        # Every constant shares the payload type of the first property
        first_property = classifier.first_property
        payload_type = payload_type_name(first_property.type_name)
        mixed_types = sorted({
            prop.type_name for prop in classifier.properties
            if payload_type_name(prop.type_name) != payload_type
        })
        if mixed_types:
            logger.warning(
                f"Enumeration '{classifier.name}' mixes property types {mixed_types} with "
                f"'{first_property.type_name}'; using '{first_property.type_name}' for every constant."
            )

        return GenerationContext(
            type_name=classifier.name,
            package_name=self._package_resolver.resolve_full_package(
                classifier, source_directory_package
            ),
            payload_type=payload_type,
        )

    def create_constants(self, classifier: Classifier, context: GenerationContext) -> List[EnumConstant]:
        """Create one constant per property, in property order."""
        constants = []
        count = len(classifier.properties)
        for index, prop in enumerate(classifier.properties, start=1):
            terminator = Separators.CONSTANT if index < count else Separators.LAST_CONSTANT
            constants.append(self.create_constant(prop, terminator, context))
        return constants

    def create_constant(self, prop: Property, terminator: str, context: GenerationContext) -> EnumConstant:
        """Create the constant of a single property."""
        identifier = mask(prop.name, NamingConvention.UPPER_SNAKE)
        if not identifier:
            raise ModelIntegrityError(
                f"Property name '{prop.name}' of enumeration '{context.type_name}' "
                "does not yield a constant identifier",
                classifier=context.type_name,
                property_name=prop.name,
            )
        if identifier[0].isdigit():
            logger.warning(
                f"Constant '{identifier}' of enumeration '{context.type_name}' starts with a digit."
            )

        literal = create_literal(self._literal_resolver.resolve(prop, identifier))
        return create_enum_constant(
            name=identifier,
            arguments=[literal],
            terminator=terminator,
            documentation=create_documentation(prop.comments),
        )

    def create_members(self, context: GenerationContext) -> List[Member]:
        """Create the fixed members following the constants, in declaration order."""
        return [
            self.create_serial_version_uid(),
            self.create_payload_field(context),
            self.create_constructor(context),
            self.create_from_string_method(context),
            self.create_value_method(context),
        ]

    def create_serial_version_uid(self) -> Member:
        value = format_literal(JavaNames.SERIAL_VERSION_UID_VALUE, PrimitiveType.LONG)
        return create_field(
            name=JavaNames.SERIAL_VERSION_UID,
            type_name=JavaNames.SERIAL_VERSION_UID_TYPE,
            modifiers=("private", "static", "final"),
            initializer=create_literal(value),
            documentation=create_doc_comment([GeneratedComments.SERIAL_VERSION_UID]),
        )

    def create_payload_field(self, context: GenerationContext) -> Member:
        return create_field(
            name=JavaNames.PAYLOAD_FIELD,
            type_name=context.payload_type,
            modifiers=("private", "final"),
        )

    def create_constructor(self, context: GenerationContext) -> Member:
        return create_constructor(
            type_name=context.type_name,
            modifiers=("private",),
            parameters=[create_parameter(JavaNames.PAYLOAD_PARAMETER, context.payload_type)],
            body=[
                create_assign(
                    create_this_field(JavaNames.PAYLOAD_FIELD),
                    create_name(JavaNames.PAYLOAD_PARAMETER),
                )
            ],
            documentation=create_doc_comment([GeneratedComments.PRIVATE_CONSTRUCTOR]),
        )

    def create_from_string_method(self, context: GenerationContext) -> Member:
        return create_method(
            name=JavaNames.FACTORY_METHOD,
            return_type=context.type_name,
            modifiers=("public", "static"),
            parameters=[
                create_parameter(JavaNames.PAYLOAD_PARAMETER, JavaNames.FACTORY_PARAMETER_TYPE)
            ],
            body=[
                create_return(
                    create_static_call(
                        context.type_name,
                        JavaNames.LOOKUP_METHOD,
                        [create_name(JavaNames.PAYLOAD_PARAMETER)],
                    )
                )
            ],
            documentation=create_doc_comment(
                [GeneratedComments.FROM_STRING.format(type_name=context.type_name)]
            ),
        )

    def create_value_method(self, context: GenerationContext) -> Member:
        return create_method(
            name=JavaNames.ACCESSOR_METHOD,
            return_type=context.payload_type,
            modifiers=("public",),
            body=[create_return(create_this_field(JavaNames.PAYLOAD_FIELD))],
            documentation=create_doc_comment([GeneratedComments.VALUE]),
        )

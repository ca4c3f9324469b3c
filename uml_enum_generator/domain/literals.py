"""
Literal resolution for UML Enum Generator.

Turns a property's declared type and optional default value into the exact literal
syntax passed to the enumeration constant's constructor.
"""

import logging
from typing import Any, Optional

from ..constants import JavaTypes
from .models import PrimitiveType, Property


logger = logging.getLogger(__name__)


def render_default_value(value: Any) -> str:
    """Render a raw model default value as literal text."""
    # bool first: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def format_literal(value_text: str, primitive_type: Optional[PrimitiveType]) -> str:
    """
    Format literal text according to its primitive type.

    Integer and boolean values are emitted unchanged, long values get the long
    literal suffix, and every other type, unrecognized ones included, becomes a
    quoted string. The text is embedded verbatim, no escaping is performed.

    Example:
        >>> format_literal("5", PrimitiveType.LONG)
        '5L'
        >>> format_literal("x y", None)
        '"x y"'
    """
    if primitive_type in (PrimitiveType.INTEGER, PrimitiveType.BOOLEAN):
        return value_text
    if primitive_type is PrimitiveType.LONG:
        return f"{value_text}{JavaTypes.LONG_LITERAL_SUFFIX}"
    return f"{JavaTypes.STRING_QUOTE}{value_text}{JavaTypes.STRING_QUOTE}"


def payload_type_name(type_name: str) -> str:
    """
    Java type of an enumeration payload declared with the given model type.

    Recognized primitives map to their Java wrapper type; any other name is used
    verbatim.
    """
    primitive_type = PrimitiveType.from_type_name(type_name)
    if primitive_type is None:
        return type_name
    return primitive_type.java_type


class LiteralResolver:
    """Resolves the constructor argument literal of an enumeration constant."""

    def resolve(self, prop: Property, canonical_identifier: str) -> str:
        """
        Produce the literal syntax for one property.

        Args:
            prop: The property being turned into a constant
            canonical_identifier: The property's masked constant name, used as the
                value when the property has no default value

        Returns:
            The literal syntax to emit
        """
        if prop.has_default:
            value_text = render_default_value(prop.default_value)
        else:
            value_text = canonical_identifier

        primitive_type = prop.primitive_type
        if primitive_type is None:
            logger.debug(
                f"Unrecognized type '{prop.type_name}' for property '{prop.name}', "
                "emitting a string literal."
            )
        return format_literal(value_text, primitive_type)

"""
Centralized constants for UML Enum Generator.

This module contains the stereotype names, primitive type tables, generated comment
texts and default configuration values used across the code generation pipeline.
"""

from typing import Dict, List


# =============================================================================
# CORE CONFIGURATION
# =============================================================================

class DefaultConfig:
    """Default configuration values."""

    OUTPUT_DIR = "./generated-sources/java"
    TARGET_LANGUAGE = "java"
    FORMAT_CODE = True
    INDENT_WIDTH = 4
    FAIL_FAST = False


# =============================================================================
# MODEL STEREOTYPES
# =============================================================================

class Stereotypes:
    """Stereotype names selecting special generation treatment."""

    ENUMERATION = "Enumeration"
    SOURCE_DIRECTORY = "SourceDirectory"


# =============================================================================
# PRIMITIVE TYPE MAPPINGS
# =============================================================================

class JavaTypes:
    """Java wrapper types used as enumeration payload types."""

    STRING = "String"
    INTEGER = "Integer"
    LONG = "Long"
    BOOLEAN = "Boolean"

    # Model type names (lowercased) accepted for each primitive kind
    TYPE_ALIASES: Dict[str, List[str]] = {
        "string": ["string", "str"],
        "integer": ["integer", "int"],
        "long": ["long"],
        "boolean": ["boolean", "bool"],
    }

    LONG_LITERAL_SUFFIX = "L"
    STRING_QUOTE = '"'


# =============================================================================
# GENERATED CODE
# =============================================================================

class JavaNames:
    """Identifiers of the fixed members of every generated enumeration."""

    SERIAL_VERSION_UID = "serialVersionUID"
    SERIAL_VERSION_UID_TYPE = "long"
    SERIAL_VERSION_UID_VALUE = "1"
    PAYLOAD_FIELD = "enumValue"
    PAYLOAD_PARAMETER = "value"
    FACTORY_METHOD = "fromString"
    FACTORY_PARAMETER_TYPE = "String"
    LOOKUP_METHOD = "valueOf"
    ACCESSOR_METHOD = "value"


class GeneratedComments:
    """Documentation texts emitted into generated sources."""

    PACKAGE_HEADER: List[str] = [
        "This file is generated by uml-enum-generator.",
        "Do not edit it manually, changes will be overwritten on the next generation.",
    ]
    SERIAL_VERSION_UID = "The serial version UID of this class. Needed for serialization."
    PRIVATE_CONSTRUCTOR = (
        "The constructor with enumeration literal value allowing super classes to access it."
    )
    FROM_STRING = "Retrieves an instance of {type_name} from <code>its name</code>."
    VALUE = "Returns an enumeration literal String <code>value</code>."


class Separators:
    """Punctuation used between enumeration constants."""

    CONSTANT = ","
    LAST_CONSTANT = ";"
    PACKAGE = "."
    COMMENT = "\n"

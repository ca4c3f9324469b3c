"""
Domain module for UML Enum Generator.

This module contains the model values and the mapping rules of enumeration
generation, separated from model loading, rendering and file output.
"""

from .models import (
    PrimitiveType,
    Property,
    Classifier,
    GenerationContext,
    GenerationFailure,
    GenerationResult
)

from .naming import (
    NamingConvention,
    split_words,
    mask,
    separate,
    prefix_with_a_predicate,
    describe_count
)

from .comments import (
    concat_comments,
    comment_lines
)

from .literals import (
    LiteralResolver,
    format_literal,
    payload_type_name,
    render_default_value
)

__all__ = [
    # Core models
    'PrimitiveType',
    'Property',
    'Classifier',
    'GenerationContext',
    'GenerationFailure',
    'GenerationResult',

    # Naming
    'NamingConvention',
    'split_words',
    'mask',
    'separate',
    'prefix_with_a_predicate',
    'describe_count',

    # Comments
    'concat_comments',
    'comment_lines',

    # Literals
    'LiteralResolver',
    'format_literal',
    'payload_type_name',
    'render_default_value'
]

"""
Enumeration Code Generator Module

This module builds a code model for every enumeration classifier of a structural
model and renders it as Java source.
"""

from .base import GeneratedEnumUnit, SourceRenderer
from .enum_synthesizer import EnumSynthesizer
from .java_renderer import JavaRenderer
from .code_generator import (
    EnumCodeGenerator,
    RendererFactory,
    build_code_generator,
    generate_enumerations
)


__all__ = [
    'GeneratedEnumUnit',
    'SourceRenderer',
    'EnumSynthesizer',
    'JavaRenderer',
    'EnumCodeGenerator',
    'RendererFactory',
    'build_code_generator',
    'generate_enumerations'
]

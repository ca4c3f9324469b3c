"""
Enumeration Code Generator

This module wires model walking, enumeration synthesis, rendering, formatting and
file output into one generation run over a structural model.
"""

import logging
from pathlib import Path
from typing import Dict, Tuple, Type

from ..codegen_utils import format_java_code
from ..config_validation import ToolConfigSchema
from ..domain.models import GenerationResult
from ..domain.naming import describe_count
from ..exceptions import ConfigurationError, ModelIntegrityError
from ..file_writer import SourceFileWriter
from ..model_loader import ModelDocument, load_model
from ..walker import DiscoveredClassifier, ModelWalker, PackageResolver
from .base import GeneratedEnumUnit, SourceRenderer
from .enum_synthesizer import EnumSynthesizer
from .java_renderer import JavaRenderer

logger = logging.getLogger(__name__)


# Factory Pattern for creating renderers
class RendererFactory:
    """Factory for creating source renderers by target language"""

    _registry: Dict[str, Type[SourceRenderer]] = {
        'java': JavaRenderer,
    }

    @classmethod
    def register(cls, language: str, renderer_class: Type[SourceRenderer]) -> None:
        """Register a new renderer"""
        cls._registry[language] = renderer_class

    @classmethod
    def create(cls, language: str) -> SourceRenderer:
        """Create a renderer instance by target language"""
        renderer_class = cls._registry.get(language)
        if not renderer_class:
            raise ConfigurationError(
                f"Unknown target language: {language}",
                context={"supported_languages": sorted(cls._registry)},
            )
        return renderer_class()


# Facade Pattern for simplified interface
class EnumCodeGenerator:
    """Facade for the enumeration generation system"""

    def __init__(
        self,
        walker: ModelWalker,
        synthesizer: EnumSynthesizer,
        renderer: SourceRenderer,
        writer: SourceFileWriter,
        format_code: bool = True,
        indent_width: int = 4,
        fail_fast: bool = False,
    ):
        self.walker = walker
        self.synthesizer = synthesizer
        self.renderer = renderer
        self.writer = writer
        self.format_code = format_code
        self.indent_width = indent_width
        self.fail_fast = fail_fast

    def render_enum(self, discovered: DiscoveredClassifier) -> Tuple[GeneratedEnumUnit, str]:
        """Synthesize and render one enumeration without writing it."""
        unit = self.synthesizer.synthesize(
            discovered.classifier, discovered.source_directory_package
        )
        code = self.renderer.render(unit)

        # Format the generated Java code if needed
        output_path = self.writer.path_for(unit.package_name, unit.type_name)
        if self.format_code and output_path.suffix == '.java':
            code = format_java_code(output_path, code, self.indent_width)
        return unit, code

    def generate_enum(self, discovered: DiscoveredClassifier) -> Path:
        """Generate the source file of one enumeration classifier."""
        unit, code = self.render_enum(discovered)
        output_path = self.writer.write(unit.package_name, unit.type_name, code)
        logger.info(f"Generated file: {output_path}")
        return output_path

    def generate(self, document: ModelDocument) -> GenerationResult:
        """
        Generate every enumeration of a model.

        A classifier that cannot be generated produces no file and is recorded as a
        failure; with ``fail_fast`` its error is raised instead. I/O errors are
        always raised.
        """
        result = GenerationResult()
        discovered_classifiers = self.walker.find_enumerations(document)
        logger.info(f"Found {describe_count(len(discovered_classifiers), 'enumeration')} in model '{document.name}'")

        for discovered in discovered_classifiers:
            try:
                result.add_file(self.generate_enum(discovered))
            except ModelIntegrityError as e:
                if self.fail_fast:
                    raise
                logger.error(f"Skipping enumeration '{discovered.classifier.name}': {e.message}")
                result.add_failure(discovered.classifier.name, e.message)

        return result


def build_code_generator(config: ToolConfigSchema) -> EnumCodeGenerator:
    """Assemble a generator and its collaborators from a validated configuration"""
    renderer = RendererFactory.create(config.target_language)
    return EnumCodeGenerator(
        walker=ModelWalker(
            enumeration_stereotype=config.enumeration_stereotype,
            source_directory_stereotype=config.source_directory_stereotype,
        ),
        synthesizer=EnumSynthesizer(
            package_resolver=PackageResolver(),
            header_comment=config.header_comment,
        ),
        renderer=renderer,
        writer=SourceFileWriter(config.output_dir, renderer.file_extension),
        format_code=config.format_code,
        indent_width=config.indent_width,
        fail_fast=config.fail_fast,
    )


def generate_enumerations(config: ToolConfigSchema) -> GenerationResult:
    """Load the configured model and generate all of its enumerations"""
    document = load_model(config.model_file)
    generator = build_code_generator(config)
    result = generator.generate(document)

    logger.info(
        f"Generated {describe_count(len(result.generated_files), 'file')} in {config.output_dir}"
    )
    return result

"""
Tests for Enumeration Code Generator

This module tests the generation driver over whole models.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from uml_enum_generator.codegen.base import SourceRenderer
from uml_enum_generator.codegen.code_generator import (
    EnumCodeGenerator,
    RendererFactory,
    build_code_generator,
    generate_enumerations,
)
from uml_enum_generator.codegen.enum_synthesizer import EnumSynthesizer
from uml_enum_generator.codegen.java_renderer import JavaRenderer
from uml_enum_generator.config_validation import ToolConfigSchema
from uml_enum_generator.exceptions import ConfigurationError, ModelIntegrityError
from uml_enum_generator.file_writer import SourceFileWriter
from uml_enum_generator.model_loader import load_model, parse_model
from uml_enum_generator.walker import ModelWalker


BROKEN_MODEL = {
    "name": "broken",
    "classifiers": [
        {"name": "Good", "stereotypes": ["Enumeration"], "properties": [{"name": "one"}]},
        {"name": "Empty", "stereotypes": ["Enumeration"]},
        {"name": "Symbols", "stereotypes": ["Enumeration"], "properties": [{"name": "$$"}]},
        {"name": "Last", "stereotypes": ["Enumeration"], "properties": [{"name": "two"}]},
    ],
}


def make_generator(output_dir: Path, **kwargs) -> EnumCodeGenerator:
    return EnumCodeGenerator(
        walker=ModelWalker(),
        synthesizer=EnumSynthesizer(),
        renderer=JavaRenderer(),
        writer=SourceFileWriter(output_dir),
        **kwargs,
    )


def test_renderer_factory():
    assert isinstance(RendererFactory.create("java"), JavaRenderer)


def test_renderer_factory_unknown_language():
    with pytest.raises(ConfigurationError) as excinfo:
        RendererFactory.create("cobol")
    assert excinfo.value.context["supported_languages"] == ["java"]


def test_generate_sample_model(tmp_path: Path, sample_model_file: Path):
    config = ToolConfigSchema(model_file=str(sample_model_file), output_dir=str(tmp_path))
    result = generate_enumerations(config)

    assert result.succeeded
    root = tmp_path / "com" / "example" / "shop"
    assert result.generated_files == [
        root / "Currency.java",
        root / "order" / "OrderStatus.java",
        root / "billing" / "Priority.java",
    ]
    currency = (root / "Currency.java").read_text(encoding="utf-8")
    assert "package com.example.shop;\n" in currency
    assert '    EURO("EUR"),\n    US_DOLLAR("USD");\n' in currency
    assert "/**\n * Currencies accepted at checkout\n */\npublic enum Currency {" in currency

    priority = (root / "billing" / "Priority.java").read_text(encoding="utf-8")
    assert "package com.example.shop.billing;\n" in priority
    assert "    LOW(1),\n    HIGH(10);\n" in priority
    assert "    private final Integer enumValue;\n" in priority


def test_unformatted_output(tmp_path: Path):
    generator = make_generator(tmp_path, format_code=False)
    result = generator.generate(parse_model({"classifiers": [
        {"name": "Flag", "stereotypes": ["Enumeration"], "properties": [{"name": "on"}]},
    ]}))
    source = result.generated_files[0].read_text(encoding="utf-8")
    assert 'public enum Flag {\nON("ON");\n' in source


def test_failures_are_recorded_and_generation_continues(tmp_path: Path):
    result = make_generator(tmp_path).generate(parse_model(BROKEN_MODEL))

    assert not result.succeeded
    assert [path.name for path in result.generated_files] == ["Good.java", "Last.java"]
    assert [failure.classifier_name for failure in result.failures] == ["Empty", "Symbols"]
    assert not (tmp_path / "Empty.java").exists()
    assert not (tmp_path / "Symbols.java").exists()


def test_fail_fast_stops_at_first_failure(tmp_path: Path):
    generator = make_generator(tmp_path, fail_fast=True)
    with pytest.raises(ModelIntegrityError) as excinfo:
        generator.generate(parse_model(BROKEN_MODEL))
    assert excinfo.value.classifier == "Empty"
    assert (tmp_path / "Good.java").exists()
    assert not (tmp_path / "Last.java").exists()


def test_io_errors_propagate(tmp_path: Path):
    generator = make_generator(tmp_path)
    with patch.object(SourceFileWriter, "write", side_effect=OSError("disk full")):
        with pytest.raises(OSError):
            generator.generate(parse_model(BROKEN_MODEL))


def test_render_enum_does_not_write(tmp_path: Path):
    generator = make_generator(tmp_path)
    discovered = ModelWalker().find_enumerations(parse_model(BROKEN_MODEL))[0]
    unit, code = generator.render_enum(discovered)
    assert unit.type_name == "Good"
    assert code.endswith("}\n")
    assert list(tmp_path.iterdir()) == []


def test_non_java_renderer_output_is_not_formatted(tmp_path: Path):
    class PlainRenderer(SourceRenderer):
        file_extension = ".txt"

        def render(self, unit):
            return f"{unit.type_name} {{\n{len(unit.constants)}\n}}"

    generator = EnumCodeGenerator(
        walker=ModelWalker(),
        synthesizer=EnumSynthesizer(),
        renderer=PlainRenderer(),
        writer=SourceFileWriter(tmp_path, PlainRenderer.file_extension),
    )
    result = generator.generate(parse_model(BROKEN_MODEL))
    assert (tmp_path / "Good.txt").read_text(encoding="utf-8") == "Good {\n1\n}"
    assert len(result.failures) == 2


def test_build_code_generator_uses_config(tmp_path: Path):
    config = ToolConfigSchema(
        model_file="model.yaml",
        output_dir=str(tmp_path),
        enumeration_stereotype="Enum",
        indent_width=2,
        fail_fast=True,
        header_comment=[],
    )
    generator = build_code_generator(config)
    assert generator.walker.enumeration_stereotype == "Enum"
    assert generator.writer.output_dir == tmp_path
    assert generator.indent_width == 2
    assert generator.fail_fast is True
    assert isinstance(generator.renderer, JavaRenderer)


def test_unquoted_yaml_defaults_are_rendered_verbatim(tmp_path: Path):
    model_file = tmp_path / "model.yaml"
    model_file.write_text(
        "name: com.example\n"
        "stereotypes: [SourceDirectory]\n"
        "classifiers:\n"
        "  - name: Status\n"
        "    stereotypes: [Enumeration]\n"
        "    properties:\n"
        "      - name: active\n"
        "      - name: inactive\n"
        "        default: OFF\n"
        "      - name: legacy\n"
        "        default: 1.10\n",
        encoding="utf-8",
    )
    generator = make_generator(tmp_path / "out")
    discovered = ModelWalker().find_enumerations(load_model(model_file))[0]
    _, code = generator.render_enum(discovered)
    assert '    ACTIVE("ACTIVE"),\n    INACTIVE("OFF"),\n    LEGACY("1.10");\n' in code

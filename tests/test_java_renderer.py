"""
Tests for the Java renderer

This module tests the Java text rendered from enumeration code models.
"""

from pathlib import Path
from unittest import TestCase

import pytest

from uml_enum_generator.codegen.base import (
    create_doc_comment,
    create_field,
    create_literal,
    create_method,
    create_name,
    create_return,
)
from uml_enum_generator.codegen.enum_synthesizer import EnumSynthesizer
from uml_enum_generator.codegen.java_renderer import (
    JavaRenderer,
    render_expression,
    render_javadoc,
    render_member,
)
from uml_enum_generator.codegen_utils import format_java_code
from uml_enum_generator.domain.models import Classifier, Property
from uml_enum_generator.exceptions import CodeGenerationError


STATUS_SOURCE = """\
/**
 * This file is generated by uml-enum-generator.
 * Do not edit it manually, changes will be overwritten on the next generation.
 */
package com.example;
public enum Status {
ACTIVE("ACTIVE"),
/**
 * Disabled state
 */
INACTIVE("OFF");
/**
 * The serial version UID of this class. Needed for serialization.
 */
private static final long serialVersionUID = 1L;
private final String enumValue;
/**
 * The constructor with enumeration literal value allowing super classes to access it.
 */
private Status(String value) { this.enumValue = value; }
/**
 * Retrieves an instance of Status from <code>its name</code>.
 */
public static Status fromString(String value) { return Status.valueOf(value); }
/**
 * Returns an enumeration literal String <code>value</code>.
 */
public String value() { return this.enumValue; }
}
"""


class TestRenderHelpers(TestCase):

    def test_javadoc(self):
        assert render_javadoc(create_doc_comment(["a", "b"])) == "/**\n * a\n * b\n */"

    def test_javadoc_escapes_comment_end(self):
        documentation = create_doc_comment(["ends */ early", "a */ b */"])
        assert render_javadoc(documentation) == "/**\n * ends *&#47; early\n * a *&#47; b *&#47;\n */"

    def test_field_without_initializer(self):
        field = create_field("count", "Integer", modifiers=("private",))
        assert render_member(field) == "private Integer count;"

    def test_method_without_body(self):
        method = create_method("reset", "void", modifiers=("public",))
        assert render_member(method) == "public void reset() {}"

    def test_method_with_body(self):
        method = create_method("answer", "int", body=[create_return(create_literal("42"))])
        assert render_member(method) == "int answer() { return 42; }"

    def test_unknown_node(self):
        with pytest.raises(CodeGenerationError):
            render_expression(object())
        with pytest.raises(CodeGenerationError):
            render_member(create_name("x"))


class TestJavaRenderer(TestCase):
    """Test cases for whole compilation units"""

    def setUp(self):
        self.renderer = JavaRenderer()
        self.synthesizer = EnumSynthesizer()

    def test_file_extension(self):
        assert JavaRenderer.file_extension == ".java"

    def test_status_enumeration(self):
        classifier = Classifier(
            name="Status",
            properties=(
                Property(name="active"),
                Property(name="inactive", default_value="OFF", comments=("Disabled state",)),
            ),
        )
        unit = self.synthesizer.synthesize(classifier, "com.example")
        assert self.renderer.render(unit) == STATUS_SOURCE

    def test_default_package_has_no_package_line(self):
        classifier = Classifier(name="Flag", properties=(Property(name="on"),))
        source = self.renderer.render(self.synthesizer.synthesize(classifier))
        assert "package " not in source
        assert "public enum Flag {\nON(\"ON\");\n" in source

    def test_type_documentation(self):
        classifier = Classifier(
            name="Flag",
            properties=(Property(name="on"),),
            comments=("Feature flags",),
        )
        source = self.renderer.render(self.synthesizer.synthesize(classifier))
        assert "/**\n * Feature flags\n */\npublic enum Flag {" in source

    def test_without_header_comment(self):
        synthesizer = EnumSynthesizer(header_comment=[])
        classifier = Classifier(name="Flag", properties=(Property(name="on"),))
        source = self.renderer.render(synthesizer.synthesize(classifier, "com.example"))
        assert source.startswith("package com.example;\npublic enum Flag {")

    def test_long_constants(self):
        classifier = Classifier(
            name="Limit",
            properties=(
                Property(name="small", type_name="Long", default_value=5),
                Property(name="large", type_name="Long", default_value=500),
            ),
        )
        source = self.renderer.render(self.synthesizer.synthesize(classifier))
        assert "SMALL(5L),\nLARGE(500L);\n" in source
        assert "private final Long enumValue;" in source
        assert "public Long value() { return this.enumValue; }" in source

    def test_comment_end_in_property_comment_keeps_source_formattable(self):
        classifier = Classifier(
            name="Flag",
            properties=(Property(name="on", comments=("closes */ here",)),),
        )
        source = self.renderer.render(self.synthesizer.synthesize(classifier))
        assert " * closes *&#47; here\n */\nON(\"ON\");" in source
        formatted = format_java_code(Path("Flag.java"), source)
        assert "    /**\n     * closes *&#47; here\n     */\n    ON(\"ON\");" in formatted

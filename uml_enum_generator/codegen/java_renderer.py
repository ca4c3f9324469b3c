"""
Java rendering of generated enumerations.

The layout of the compilation unit lives in a Jinja2 template; declarations,
statements and expressions are rendered by the filters registered here.
"""

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from ..exceptions import CodeGenerationError
from .base import (
    Assign,
    DocComment,
    EnumConstant,
    EnumDeclaration,
    Expression,
    FieldAccess,
    FieldDeclaration,
    GeneratedEnumUnit,
    Literal,
    Member,
    MethodCall,
    MethodDeclaration,
    NameExpr,
    Parameter,
    Return,
    SourceRenderer,
    Statement,
    ThisExpr,
)

logger = logging.getLogger(__name__)

# Define the path to the templates directory relative to this file
TEMPLATE_DIR = Path(__file__).parent / "templates"
ENUM_TEMPLATE = "enum.java.j2"
COMMENT_END = "*/"
ESCAPED_COMMENT_END = "*&#47;"


def render_javadoc(documentation: DocComment) -> str:
    """Render a documentation block, without a trailing newline."""
    lines = ["/**"]
    # a comment body must not close the block early
    lines.extend(
        f" * {line.replace(COMMENT_END, ESCAPED_COMMENT_END)}" for line in documentation.lines
    )
    lines.append(" */")
    return "\n".join(lines)


def render_expression(expression: Expression) -> str:
    if isinstance(expression, Literal):
        return expression.syntax
    if isinstance(expression, NameExpr):
        return expression.name
    if isinstance(expression, ThisExpr):
        return "this"
    if isinstance(expression, FieldAccess):
        return f"{render_expression(expression.target)}.{expression.name}"
    if isinstance(expression, MethodCall):
        arguments = ", ".join(render_expression(argument) for argument in expression.arguments)
        return f"{render_expression(expression.target)}.{expression.name}({arguments})"
    raise CodeGenerationError(
        f"Cannot render expression of type {type(expression).__name__}",
        component="renderer",
    )


def render_statement(statement: Statement) -> str:
    if isinstance(statement, Return):
        return f"return {render_expression(statement.value)};"
    if isinstance(statement, Assign):
        return f"{render_expression(statement.target)} = {render_expression(statement.value)};"
    raise CodeGenerationError(
        f"Cannot render statement of type {type(statement).__name__}",
        component="renderer",
    )


def render_parameter(parameter: Parameter) -> str:
    return f"{parameter.type_name} {parameter.name}"


def render_field(field: FieldDeclaration) -> str:
    parts = [*field.modifiers, field.type_name, field.name]
    declaration = " ".join(parts)
    if field.initializer is not None:
        declaration += f" = {render_expression(field.initializer)}"
    return f"{declaration};"


def render_method(method: MethodDeclaration) -> str:
    """Render a method or constructor on a single line."""
    parts = list(method.modifiers)
    if not method.is_constructor:
        parts.append(method.return_type)
    parameters = ", ".join(render_parameter(parameter) for parameter in method.parameters)
    parts.append(f"{method.name}({parameters})")
    signature = " ".join(parts)

    if not method.body:
        return f"{signature} {{}}"
    body = " ".join(render_statement(statement) for statement in method.body)
    return f"{signature} {{ {body} }}"


def render_member(member: Member) -> str:
    if isinstance(member, FieldDeclaration):
        return render_field(member)
    if isinstance(member, MethodDeclaration):
        return render_method(member)
    raise CodeGenerationError(
        f"Cannot render member of type {type(member).__name__}",
        component="renderer",
    )


def render_enum_constant(constant: EnumConstant) -> str:
    return f"{constant.name}({constant.literal_syntax}){constant.terminator}"


def render_type_opening(declaration: EnumDeclaration) -> str:
    return " ".join([*declaration.modifiers, "enum", declaration.name, "{"])


def setup_jinja_env() -> Environment:
    """Sets up and returns the Jinja2 environment for Java templates."""
    env = Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        autoescape=False,  # Java source, never markup
        trim_blocks=True,  # Remove first newline after a block tag
        lstrip_blocks=True,  # Strip leading whitespace from lines with block tags
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    env.filters["javadoc"] = render_javadoc
    env.filters["enum_constant"] = render_enum_constant
    env.filters["declaration"] = render_member
    env.filters["type_opening"] = render_type_opening
    return env


class JavaRenderer(SourceRenderer):
    """Renders generated enumerations as Java source."""

    file_extension = ".java"

    def __init__(self, env: Environment = None):
        self.env = env or setup_jinja_env()

    def render(self, unit: GeneratedEnumUnit) -> str:
        """
        Render a generated enumeration as unformatted Java source.

        Every declaration starts on its own line at column zero; indentation is
        left to the formatting pass.
        """
        try:
            template = self.env.get_template(ENUM_TEMPLATE)
            source = template.render(unit=unit)
        except TemplateError as e:
            raise CodeGenerationError(
                f"Error rendering template '{ENUM_TEMPLATE}': {e}",
                component="renderer",
                classifier=unit.type_name,
            ) from e
        logger.debug(f"Compilation unit:\n\n{source}")
        return source

"""
Language-neutral code model for generated enumerations.

The synthesizer builds a tree of these immutable nodes; a renderer per target
language turns the tree into source text. Nodes never hold target syntax except
for ``Literal.syntax``, which is resolved by the literal resolver.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union


@dataclass(frozen=True)
class DocComment:
    """A documentation block, one entry per line."""

    lines: Tuple[str, ...]


@dataclass(frozen=True)
class Literal:
    """A literal value in target syntax."""

    syntax: str


@dataclass(frozen=True)
class NameExpr:
    """A reference to a local name, a parameter or a type."""

    name: str


@dataclass(frozen=True)
class ThisExpr:
    """A reference to the current instance."""


@dataclass(frozen=True)
class FieldAccess:
    target: "Expression"
    name: str


@dataclass(frozen=True)
class MethodCall:
    target: "Expression"
    name: str
    arguments: Tuple["Expression", ...] = ()


Expression = Union[Literal, NameExpr, ThisExpr, FieldAccess, MethodCall]


@dataclass(frozen=True)
class Return:
    value: Expression


@dataclass(frozen=True)
class Assign:
    target: Expression
    value: Expression


Statement = Union[Return, Assign]


@dataclass(frozen=True)
class Parameter:
    name: str
    type_name: str


@dataclass(frozen=True)
class FieldDeclaration:
    name: str
    type_name: str
    modifiers: Tuple[str, ...] = ()
    initializer: Optional[Expression] = None
    documentation: Optional[DocComment] = None


@dataclass(frozen=True)
class MethodDeclaration:
    """A method, or a constructor when ``return_type`` is None."""

    name: str
    return_type: Optional[str]
    modifiers: Tuple[str, ...] = ()
    parameters: Tuple[Parameter, ...] = ()
    body: Tuple[Statement, ...] = ()
    documentation: Optional[DocComment] = None

    @property
    def is_constructor(self) -> bool:
        return self.return_type is None


Member = Union[FieldDeclaration, MethodDeclaration]


@dataclass(frozen=True)
class EnumConstant:
    """One enumeration constant, followed by its list terminator."""

    name: str
    arguments: Tuple[Literal, ...]
    terminator: str
    documentation: Optional[DocComment] = None

    @property
    def literal_syntax(self) -> str:
        return ", ".join(argument.syntax for argument in self.arguments)


@dataclass(frozen=True)
class EnumDeclaration:
    name: str
    modifiers: Tuple[str, ...]
    constants: Tuple[EnumConstant, ...]
    members: Tuple[Member, ...]
    documentation: Optional[DocComment] = None


@dataclass(frozen=True)
class PackageDeclaration:
    name: str
    documentation: Optional[DocComment] = None


@dataclass(frozen=True)
class GeneratedEnumUnit:
    """A complete generated enumeration: package clause plus type declaration."""

    package: PackageDeclaration
    declaration: EnumDeclaration

    @property
    def package_name(self) -> str:
        return self.package.name

    @property
    def type_name(self) -> str:
        return self.declaration.name

    @property
    def constants(self) -> Tuple[EnumConstant, ...]:
        return self.declaration.constants

    @property
    def members(self) -> Tuple[Member, ...]:
        return self.declaration.members


def create_doc_comment(lines: Sequence[str]) -> Optional[DocComment]:
    """Creates a documentation block, or None when there are no lines."""
    if not lines:
        return None
    return DocComment(lines=tuple(lines))


def create_literal(syntax: str) -> Literal:
    """Creates a literal node from already-resolved target syntax."""
    return Literal(syntax=syntax)


def create_name(name: str) -> NameExpr:
    return NameExpr(name=name)


def create_this_field(field_name: str) -> FieldAccess:
    """Creates an access to a field of the current instance."""
    return FieldAccess(target=ThisExpr(), name=field_name)


def create_static_call(type_name: str, method_name: str, arguments: Sequence[Expression] = ()) -> MethodCall:
    """Creates a call of a method on a type."""
    return MethodCall(target=create_name(type_name), name=method_name, arguments=tuple(arguments))


def create_return(value: Expression) -> Return:
    return Return(value=value)


def create_assign(target: Expression, value: Expression) -> Assign:
    return Assign(target=target, value=value)


def create_parameter(name: str, type_name: str) -> Parameter:
    return Parameter(name=name, type_name=type_name)


def create_field(
    name: str,
    type_name: str,
    modifiers: Sequence[str] = (),
    initializer: Optional[Expression] = None,
    documentation: Optional[DocComment] = None
) -> FieldDeclaration:
    """Creates a field declaration node."""
    return FieldDeclaration(
        name=name,
        type_name=type_name,
        modifiers=tuple(modifiers),
        initializer=initializer,
        documentation=documentation
    )


def create_method(
    name: str,
    return_type: Optional[str],
    modifiers: Sequence[str] = (),
    parameters: Sequence[Parameter] = (),
    body: Sequence[Statement] = (),
    documentation: Optional[DocComment] = None
) -> MethodDeclaration:
    """Creates a method declaration node."""
    return MethodDeclaration(
        name=name,
        return_type=return_type,
        modifiers=tuple(modifiers),
        parameters=tuple(parameters),
        body=tuple(body),
        documentation=documentation
    )


def create_constructor(
    type_name: str,
    modifiers: Sequence[str] = (),
    parameters: Sequence[Parameter] = (),
    body: Sequence[Statement] = (),
    documentation: Optional[DocComment] = None
) -> MethodDeclaration:
    """Creates a constructor node for the given type."""
    return create_method(
        name=type_name,
        return_type=None,
        modifiers=modifiers,
        parameters=parameters,
        body=body,
        documentation=documentation
    )


def create_enum_constant(
    name: str,
    arguments: Sequence[Literal],
    terminator: str,
    documentation: Optional[DocComment] = None
) -> EnumConstant:
    """Creates an enumeration constant node."""
    return EnumConstant(
        name=name,
        arguments=tuple(arguments),
        terminator=terminator,
        documentation=documentation
    )


def create_enum_declaration(
    name: str,
    modifiers: Sequence[str],
    constants: Sequence[EnumConstant],
    members: Sequence[Member],
    documentation: Optional[DocComment] = None
) -> EnumDeclaration:
    """Creates an enumeration type declaration node."""
    return EnumDeclaration(
        name=name,
        modifiers=tuple(modifiers),
        constants=tuple(constants),
        members=tuple(members),
        documentation=documentation
    )


def create_package(name: str, documentation: Optional[DocComment] = None) -> PackageDeclaration:
    return PackageDeclaration(name=name, documentation=documentation)


class SourceRenderer(ABC):
    """Abstract renderer turning a generated unit into source text of one language."""

    file_extension: str = ""

    @abstractmethod
    def render(self, unit: GeneratedEnumUnit) -> str:
        """Render the unit as source text."""
        pass

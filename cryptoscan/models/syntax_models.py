"""
Syntax Tree Models — The parsed tree handed over by the host compiler.

The node kind is a closed sum type: every node carries a literal ``kind``
discriminator, so a tree serialized as JSON loads back into exactly the
right variant. Analyzers pattern-match on these classes instead of casting.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Iterator, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class SyntaxKind(str, Enum):
    """Node kinds the host can dispatch on."""

    MODULE_PART = "MODULE_PART"
    FUNCTION_DEFINITION = "FUNCTION_DEFINITION"
    MODULE_VAR_DECL = "MODULE_VAR_DECL"
    EXPRESSION_STATEMENT = "EXPRESSION_STATEMENT"
    LOCAL_VAR_DECL = "LOCAL_VAR_DECL"
    RETURN_STATEMENT = "RETURN_STATEMENT"
    FUNCTION_CALL = "FUNCTION_CALL"
    METHOD_CALL = "METHOD_CALL"
    QUALIFIED_NAME_REFERENCE = "QUALIFIED_NAME_REFERENCE"
    SIMPLE_NAME_REFERENCE = "SIMPLE_NAME_REFERENCE"
    BASIC_LITERAL = "BASIC_LITERAL"


# ── Source positions ──


class LinePosition(BaseModel):
    """Zero-based line and column."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(..., ge=0)
    offset: int = Field(..., ge=0)


class LineRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    file_name: str
    start_line: LinePosition
    end_line: LinePosition


class TextRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    start_offset: int = Field(..., ge=0)
    length: int = Field(..., ge=0)


class Location(BaseModel):
    """Span of a node inside one document."""

    model_config = ConfigDict(frozen=True)

    line_range: LineRange
    text_range: TextRange


class Token(BaseModel):
    """A leaf token; only its text matters to analyzers."""

    model_config = ConfigDict(frozen=True)

    text: str


# ── Nodes ──


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)

    location: Location

    def children(self) -> list[SyntaxNode]:
        return []


class BasicLiteral(_Node):
    kind: Literal["BASIC_LITERAL"] = "BASIC_LITERAL"
    value: str


class SimpleNameReference(_Node):
    """A bare identifier such as ``encryptAesEcb``."""

    kind: Literal["SIMPLE_NAME_REFERENCE"] = "SIMPLE_NAME_REFERENCE"
    name: Token


class QualifiedNameReference(_Node):
    """A ``prefix:identifier`` reference into an imported module."""

    kind: Literal["QUALIFIED_NAME_REFERENCE"] = "QUALIFIED_NAME_REFERENCE"
    module_prefix: Token
    identifier: Token


class FunctionCallExpression(_Node):
    kind: Literal["FUNCTION_CALL"] = "FUNCTION_CALL"
    function_name: NameReference
    arguments: list[Expression] = Field(default_factory=list)

    def children(self) -> list[SyntaxNode]:
        return [self.function_name, *self.arguments]


class MethodCallExpression(_Node):
    """``receiver.method(args)``"""

    kind: Literal["METHOD_CALL"] = "METHOD_CALL"
    expression: Expression
    method_name: SimpleNameReference
    arguments: list[Expression] = Field(default_factory=list)

    def children(self) -> list[SyntaxNode]:
        return [self.expression, self.method_name, *self.arguments]


class ExpressionStatement(_Node):
    kind: Literal["EXPRESSION_STATEMENT"] = "EXPRESSION_STATEMENT"
    expression: Expression

    def children(self) -> list[SyntaxNode]:
        return [self.expression]


class VariableDeclaration(_Node):
    kind: Literal["LOCAL_VAR_DECL"] = "LOCAL_VAR_DECL"
    variable_name: Token
    initializer: Expression | None = None

    def children(self) -> list[SyntaxNode]:
        return [self.initializer] if self.initializer is not None else []


class ReturnStatement(_Node):
    kind: Literal["RETURN_STATEMENT"] = "RETURN_STATEMENT"
    expression: Expression | None = None

    def children(self) -> list[SyntaxNode]:
        return [self.expression] if self.expression is not None else []


class FunctionDefinition(_Node):
    kind: Literal["FUNCTION_DEFINITION"] = "FUNCTION_DEFINITION"
    function_name: Token
    body: list[Statement] = Field(default_factory=list)

    def children(self) -> list[SyntaxNode]:
        return list(self.body)


class ModuleVariableDeclaration(_Node):
    kind: Literal["MODULE_VAR_DECL"] = "MODULE_VAR_DECL"
    variable_name: Token
    initializer: Expression | None = None

    def children(self) -> list[SyntaxNode]:
        return [self.initializer] if self.initializer is not None else []


class ModulePart(_Node):
    """Root of one document's tree."""

    kind: Literal["MODULE_PART"] = "MODULE_PART"
    members: list[ModuleMember] = Field(default_factory=list)

    def children(self) -> list[SyntaxNode]:
        return list(self.members)


NameReference = Annotated[
    Union[QualifiedNameReference, SimpleNameReference],
    Field(discriminator="kind"),
]

Expression = Annotated[
    Union[
        FunctionCallExpression,
        MethodCallExpression,
        QualifiedNameReference,
        SimpleNameReference,
        BasicLiteral,
    ],
    Field(discriminator="kind"),
]

Statement = Annotated[
    Union[ExpressionStatement, VariableDeclaration, ReturnStatement],
    Field(discriminator="kind"),
]

ModuleMember = Annotated[
    Union[FunctionDefinition, ModuleVariableDeclaration],
    Field(discriminator="kind"),
]

SyntaxNode = Union[
    ModulePart,
    FunctionDefinition,
    ModuleVariableDeclaration,
    ExpressionStatement,
    VariableDeclaration,
    ReturnStatement,
    FunctionCallExpression,
    MethodCallExpression,
    QualifiedNameReference,
    SimpleNameReference,
    BasicLiteral,
]

for _model in (
    FunctionCallExpression,
    MethodCallExpression,
    ExpressionStatement,
    VariableDeclaration,
    ReturnStatement,
    FunctionDefinition,
    ModuleVariableDeclaration,
    ModulePart,
):
    _model.model_rebuild()


def iter_nodes(root: SyntaxNode) -> Iterator[SyntaxNode]:
    """Yield every node of the tree rooted at ``root`` in pre-order."""
    stack: list[SyntaxNode] = [root]
    while stack:
        node = stack.pop()
        yield node
        # reversed so siblings come out in source order
        stack.extend(reversed(node.children()))

"""
Test fixtures shared across all cryptoscan tests.
"""

import pytest

from cryptoscan.core.context import SyntaxNodeAnalysisContext
from cryptoscan.models.project_models import Document, DocumentId, Module, ModuleId, Package
from cryptoscan.models.syntax_models import (
    BasicLiteral,
    ExpressionStatement,
    FunctionCallExpression,
    FunctionDefinition,
    LinePosition,
    LineRange,
    Location,
    ModulePart,
    QualifiedNameReference,
    SimpleNameReference,
    TextRange,
    Token,
)


def _loc(line: int, start: int, end: int, file_name: str = "main.bal") -> Location:
    return Location(
        line_range=LineRange(
            file_name=file_name,
            start_line=LinePosition(line=line, offset=start),
            end_line=LinePosition(line=line, offset=end),
        ),
        text_range=TextRange(start_offset=line * 100 + start, length=end - start),
    )


def _call(callee: str, *args: str, line: int = 0, start: int = 4) -> FunctionCallExpression:
    """Build a call such as ``crypto:encryptAesEcb(key, data)`` from its callee text."""
    end = start + len(callee) + 2 + len(", ".join(args))
    if ":" in callee:
        prefix, identifier = callee.split(":", 1)
        name = QualifiedNameReference(
            location=_loc(line, start, start + len(callee)),
            module_prefix=Token(text=prefix),
            identifier=Token(text=identifier),
        )
    else:
        name = SimpleNameReference(
            location=_loc(line, start, start + len(callee)), name=Token(text=callee)
        )

    arguments = []
    offset = start + len(callee) + 1
    for arg in args:
        arguments.append(
            SimpleNameReference(location=_loc(line, offset, offset + len(arg)), name=Token(text=arg))
        )
        offset += len(arg) + 2
    return FunctionCallExpression(location=_loc(line, start, end), function_name=name, arguments=arguments)


@pytest.fixture
def loc():
    return _loc


@pytest.fixture
def make_call():
    return _call


@pytest.fixture
def module_id():
    return ModuleId(id="mod-1", module_name="demo")


@pytest.fixture
def document_id(module_id):
    return DocumentId(id="doc-1", module_id=module_id)


@pytest.fixture
def make_package(module_id, document_id):
    """Wrap statements into a one-function, one-document package."""

    def _make(*statements, name: str = "demo") -> Package:
        body = [ExpressionStatement(location=s.location, expression=s) for s in statements]
        tree = ModulePart(
            location=_loc(0, 0, 0),
            members=[
                FunctionDefinition(
                    location=_loc(0, 0, 0), function_name=Token(text="main"), body=body
                )
            ],
        )
        document = Document(document_id=document_id, name="main.bal", syntax_tree=tree)
        return Package(name=name, modules=[Module(module_id=module_id, documents=[document])])

    return _make


@pytest.fixture
def make_context(make_package, module_id, document_id):
    """Context for analyzing ``node`` inside a package that contains it."""

    def _make(node) -> SyntaxNodeAnalysisContext:
        return SyntaxNodeAnalysisContext(
            node=node,
            module_id=module_id,
            document_id=document_id,
            current_package=make_package(node),
        )

    return _make


@pytest.fixture
def weak_cipher_package(make_call, make_package):
    """Package mixing weak, strong and unrelated crypto calls."""
    return make_package(
        make_call("crypto:encryptAesEcb", "key", "data", line=1),
        make_call("crypto:encryptAesGcm", "key", "data", "nonce", line=2),
        make_call("crypto:encryptAesCbc", "key", "data", "iv", line=3),
        make_call("encryptAesEcb", "key", "data", line=4),
        make_call("io:println", "result", line=5),
    )


@pytest.fixture
def literal():
    return BasicLiteral(location=_loc(9, 0, 4), value="1234")

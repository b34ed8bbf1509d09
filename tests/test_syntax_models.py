"""
Tests for the syntax tree models — JSON loading and traversal.
"""

import copy

import pytest
from pydantic import ValidationError

from cryptoscan.models.project_models import Package
from cryptoscan.models.syntax_models import (
    FunctionCallExpression,
    QualifiedNameReference,
    SimpleNameReference,
    iter_nodes,
)


def _location(line, start, end):
    return {
        "line_range": {
            "file_name": "main.bal",
            "start_line": {"line": line, "offset": start},
            "end_line": {"line": line, "offset": end},
        },
        "text_range": {"start_offset": start, "length": end - start},
    }


PACKAGE_JSON = {
    "name": "demo",
    "modules": [
        {
            "module_id": {"id": "mod-1", "module_name": "demo"},
            "documents": [
                {
                    "document_id": {
                        "id": "doc-1",
                        "module_id": {"id": "mod-1", "module_name": "demo"},
                    },
                    "name": "main.bal",
                    "syntax_tree": {
                        "kind": "MODULE_PART",
                        "location": _location(0, 0, 0),
                        "members": [
                            {
                                "kind": "FUNCTION_DEFINITION",
                                "location": _location(0, 0, 60),
                                "function_name": {"text": "main"},
                                "body": [
                                    {
                                        "kind": "EXPRESSION_STATEMENT",
                                        "location": _location(1, 4, 36),
                                        "expression": {
                                            "kind": "FUNCTION_CALL",
                                            "location": _location(1, 4, 35),
                                            "function_name": {
                                                "kind": "QUALIFIED_NAME_REFERENCE",
                                                "location": _location(1, 4, 24),
                                                "module_prefix": {"text": "crypto"},
                                                "identifier": {"text": "encryptAesEcb"},
                                            },
                                            "arguments": [
                                                {
                                                    "kind": "SIMPLE_NAME_REFERENCE",
                                                    "location": _location(1, 25, 28),
                                                    "name": {"text": "key"},
                                                },
                                            ],
                                        },
                                    }
                                ],
                            }
                        ],
                    },
                }
            ],
        }
    ],
}


def test_package_loads_tagged_variants():
    package = Package.model_validate(PACKAGE_JSON)
    tree = package.modules[0].documents[0].syntax_tree
    call = tree.members[0].body[0].expression

    assert isinstance(call, FunctionCallExpression)
    assert isinstance(call.function_name, QualifiedNameReference)
    assert call.function_name.module_prefix.text == "crypto"
    assert isinstance(call.arguments[0], SimpleNameReference)


def test_json_round_trip_keeps_kinds():
    package = Package.model_validate(PACKAGE_JSON)
    assert Package.model_validate_json(package.model_dump_json()) == package


def test_unknown_kind_rejected():
    bad = {"kind": "LAMBDA", "location": _location(0, 0, 1)}
    with pytest.raises(ValidationError):
        FunctionCallExpression.model_validate(
            {"location": _location(0, 0, 1), "function_name": bad}
        )


def test_literal_not_allowed_as_callee():
    literal = {"kind": "BASIC_LITERAL", "location": _location(0, 0, 1), "value": "1"}
    with pytest.raises(ValidationError):
        FunctionCallExpression.model_validate(
            {"location": _location(0, 0, 1), "function_name": literal}
        )


def test_iter_nodes_preorder():
    tree = Package.model_validate(PACKAGE_JSON).modules[0].documents[0].syntax_tree
    kinds = [node.kind for node in iter_nodes(tree)]
    assert kinds == [
        "MODULE_PART",
        "FUNCTION_DEFINITION",
        "EXPRESSION_STATEMENT",
        "FUNCTION_CALL",
        "QUALIFIED_NAME_REFERENCE",
        "SIMPLE_NAME_REFERENCE",
    ]


def test_lookup_of_missing_module_raises():
    package = Package.model_validate(PACKAGE_JSON)
    other = package.modules[0].module_id.model_copy(update={"id": "nope"})
    with pytest.raises(KeyError):
        package.module(other)


def test_duplicate_document_ids_rejected():
    payload = copy.deepcopy(PACKAGE_JSON)
    documents = payload["modules"][0]["documents"]
    second = copy.deepcopy(documents[0])
    second["name"] = "util.bal"
    documents.append(second)

    with pytest.raises(ValidationError, match="Duplicate document ids"):
        Package.model_validate(payload)


def test_duplicate_module_ids_rejected():
    payload = copy.deepcopy(PACKAGE_JSON)
    second = copy.deepcopy(payload["modules"][0])
    second["documents"][0]["document_id"]["id"] = "doc-2"
    payload["modules"].append(second)

    with pytest.raises(ValidationError, match="Duplicate module ids"):
        Package.model_validate(payload)

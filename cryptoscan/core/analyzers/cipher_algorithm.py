"""
Weak Cipher Algorithm Analyzer — Flags AES in ECB or CBC mode.

Runs on every function call node. Flags ``crypto:encryptAesEcb(...)`` and
``crypto:encryptAesCbc(...)``. The check is on the prefix as written at the
call site; a module imported under another prefix is not recognized.
"""

from __future__ import annotations

import logging

from cryptoscan.core.context import SyntaxNodeAnalysisContext
from cryptoscan.core.crypto_rules import CryptoRule, RuleCatalog
from cryptoscan.core.reporter import Reporter
from cryptoscan.models.project_models import Document, DocumentId, Module
from cryptoscan.models.syntax_models import FunctionCallExpression, QualifiedNameReference

logger = logging.getLogger("cryptoscan.analyzers")

CRYPTO = "crypto"
ENCRYPT_AES_ECB = "encryptAesEcb"
ENCRYPT_AES_CBC = "encryptAesCbc"

WEAK_CIPHER_FUNCTIONS = frozenset({ENCRYPT_AES_ECB, ENCRYPT_AES_CBC})


class UnsupportedNodeError(TypeError):
    """The host dispatched a node this analyzer was not registered for."""


class CryptoCipherAlgorithmAnalyzer:
    """Reports calls to weak AES cipher modes."""

    def __init__(self, reporter: Reporter, catalog: RuleCatalog) -> None:
        self._reporter = reporter
        self._rule_id = catalog.rule_id(CryptoRule.AVOID_WEAK_CIPHER_ALGORITHMS)

    def perform(self, context: SyntaxNodeAnalysisContext) -> None:
        match context.node:
            case FunctionCallExpression(function_name=QualifiedNameReference() as qualified_name):
                pass
            case FunctionCallExpression():
                return
            case other:
                raise UnsupportedNodeError(
                    f"Expected a FUNCTION_CALL node, got {other.kind}"
                )

        if qualified_name.module_prefix.text != CRYPTO:
            return
        if qualified_name.identifier.text not in WEAK_CIPHER_FUNCTIONS:
            return

        document = _get_document(
            context.current_package.module(context.module_id), context.document_id
        )
        logger.debug(
            f"Weak cipher call {CRYPTO}:{qualified_name.identifier.text} in {document.name}"
        )
        self._reporter.report_issue(document, context.node.location, self._rule_id)


def _get_document(module: Module, document_id: DocumentId) -> Document:
    return module.document(document_id)

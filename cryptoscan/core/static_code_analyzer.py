"""
Crypto Static Code Analyzer — Binds the crypto analyzers to node kinds.
"""

from __future__ import annotations

from cryptoscan.core.analyzers.cipher_algorithm import CryptoCipherAlgorithmAnalyzer
from cryptoscan.core.context import CodeAnalysisContext
from cryptoscan.core.crypto_rules import RuleCatalog
from cryptoscan.core.reporter import Reporter
from cryptoscan.models.syntax_models import SyntaxKind


class CryptoStaticCodeAnalyzer:
    def __init__(self, reporter: Reporter, catalog: RuleCatalog) -> None:
        self.reporter = reporter
        self.catalog = catalog

    def init(self, analysis_context: CodeAnalysisContext) -> None:
        analysis_context.add_syntax_node_analysis_task(
            CryptoCipherAlgorithmAnalyzer(self.reporter, self.catalog).perform,
            SyntaxKind.FUNCTION_CALL,
        )

"""
Scan Engine — Walks a package's syntax trees and dispatches analyzers.

The engine owns traversal: one pre-order pass per document, each node handed
to the tasks registered for its kind. Analyzers never walk the tree.
"""

from __future__ import annotations

import logging
import time

from cryptoscan.core.context import CodeAnalysisContext, SyntaxNodeAnalysisContext
from cryptoscan.core.crypto_rules import DEFAULT_CATALOG, RuleCatalog
from cryptoscan.core.reporter import CollectingReporter
from cryptoscan.core.static_code_analyzer import CryptoStaticCodeAnalyzer
from cryptoscan.models.project_models import Package
from cryptoscan.models.rule_models import ScanResult
from cryptoscan.models.syntax_models import iter_nodes

logger = logging.getLogger("cryptoscan.engine")


class ScanEngine:
    """
    Deterministic scan driver.

    Each run gets its own reporter, so concurrent runs never share issues.
    """

    def __init__(self, catalog: RuleCatalog | None = None) -> None:
        self.catalog = catalog if catalog is not None else DEFAULT_CATALOG

    def run(self, package: Package) -> ScanResult:
        """
        Run every registered analyzer over every document of ``package``.

        Args:
            package: The package whose documents are scanned.

        Returns:
            ScanResult with the issues in the order they were reported.
        """
        start = time.monotonic()
        reporter = CollectingReporter()
        analysis_context = CodeAnalysisContext()
        CryptoStaticCodeAnalyzer(reporter, self.catalog).init(analysis_context)

        documents_scanned = 0
        for module in package.modules:
            for document in module.documents:
                documents_scanned += 1
                for node in iter_nodes(document.syntax_tree):
                    tasks = analysis_context.tasks_for(node.kind)
                    if not tasks:
                        continue
                    context = SyntaxNodeAnalysisContext(
                        node=node,
                        module_id=module.module_id,
                        document_id=document.document_id,
                        current_package=package,
                    )
                    for task in tasks:
                        try:
                            task(context)
                        except Exception:
                            logger.exception(
                                f"Analyzer failed on {node.kind} in {document.name}"
                            )
                            raise

        issues = reporter.issues
        elapsed = (time.monotonic() - start) * 1000
        logger.info(
            f"Scanned {documents_scanned} document(s) of '{package.name}': "
            f"{len(issues)} issue(s) in {elapsed:.2f} ms"
        )

        return ScanResult(
            issues=issues,
            rules_executed=[rule.id for rule in self.catalog],
            documents_scanned=documents_scanned,
            scan_duration_ms=round(elapsed, 2),
        )

"""
Reporter — The diagnostic sink analyzers report issues to.
"""

from __future__ import annotations

import logging
import threading
from typing import Protocol

from cryptoscan.models.project_models import Document
from cryptoscan.models.rule_models import Issue
from cryptoscan.models.syntax_models import Location

logger = logging.getLogger("cryptoscan.reporter")


class Reporter(Protocol):
    def report_issue(self, document: Document, location: Location, rule_id: int) -> None:
        ...


class CollectingReporter:
    """
    In-memory reporter.

    Keeps issues in the order they were reported and never deduplicates.
    Safe to share between threads.
    """

    def __init__(self) -> None:
        self._issues: list[Issue] = []
        self._lock = threading.Lock()

    def report_issue(self, document: Document, location: Location, rule_id: int) -> None:
        issue = Issue(
            document=document.name,
            document_id=document.document_id.id,
            location=location,
            rule_id=rule_id,
        )
        with self._lock:
            self._issues.append(issue)
        logger.debug(
            f"Issue for rule {rule_id} in {document.name} "
            f"at line {location.line_range.start_line.line + 1}"
        )

    @property
    def issues(self) -> list[Issue]:
        with self._lock:
            return list(self._issues)

    def clear(self) -> None:
        with self._lock:
            self._issues.clear()

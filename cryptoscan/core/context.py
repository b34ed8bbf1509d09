"""
Analysis Context — What the host hands to an analyzer for one node.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from cryptoscan.models.project_models import DocumentId, ModuleId, Package
from cryptoscan.models.syntax_models import SyntaxKind, SyntaxNode


@dataclass(frozen=True)
class SyntaxNodeAnalysisContext:
    node: SyntaxNode
    module_id: ModuleId
    document_id: DocumentId
    current_package: Package


AnalysisTask = Callable[[SyntaxNodeAnalysisContext], None]


class CodeAnalysisContext:
    """Registration table: syntax kind -> analysis tasks, in registration order."""

    def __init__(self) -> None:
        self._tasks: dict[SyntaxKind, list[AnalysisTask]] = {}

    def add_syntax_node_analysis_task(self, task: AnalysisTask, kind: SyntaxKind) -> None:
        self._tasks.setdefault(kind, []).append(task)

    def tasks_for(self, kind: SyntaxKind | str) -> list[AnalysisTask]:
        return list(self._tasks.get(SyntaxKind(kind), []))

    def registered_kinds(self) -> list[SyntaxKind]:
        return list(self._tasks)

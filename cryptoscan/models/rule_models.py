"""
Rule Data Models — Rules, reported issues, and scan results.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from cryptoscan.models.syntax_models import Location


class RuleKind(str, Enum):
    CODE_SMELL = "CODE_SMELL"
    BUG = "BUG"
    VULNERABILITY = "VULNERABILITY"


class Rule(BaseModel):
    """One analysis check. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0, description="Numeric rule id, stable across releases")
    kind: RuleKind
    description: str = Field(..., min_length=1)

    def to_dict(self) -> dict[str, Any]:
        """Listing form used by rule-enumerating tooling."""
        return {"id": self.id, "kind": self.kind.value, "description": self.description}

    def __str__(self) -> str:
        return json.dumps(self.to_dict())


class Issue(BaseModel):
    """A single rule violation anchored to a document and span."""

    model_config = ConfigDict(frozen=True)

    document: str = Field(..., description="Name of the document the issue is in")
    document_id: str
    location: Location
    rule_id: int


class ScanResult(BaseModel):
    """Result of running all registered analyzers over a package."""

    issues: list[Issue] = Field(default_factory=list)
    rules_executed: list[int] = Field(default_factory=list)
    documents_scanned: int = 0
    scan_duration_ms: float = 0.0

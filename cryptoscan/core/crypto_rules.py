"""
Crypto Rule Catalog — The fixed set of rules this analyzer can flag.

Rules are enum variants; adding a rule means adding a variant with the next
ordinal. Ordinals are never reused, so numeric ids stay stable.
The catalog is a pure function of the host's id offset.
"""

from __future__ import annotations

import json
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from cryptoscan.core.rule_factory import create_rule
from cryptoscan.models.rule_models import Rule, RuleKind


class CryptoRule(Enum):
    AVOID_WEAK_CIPHER_ALGORITHMS = (
        1,
        "Encryption algorithms should be used with secure mode and padding scheme",
        RuleKind.VULNERABILITY,
    )

    def __init__(self, ordinal: int, description: str, kind: RuleKind) -> None:
        self.ordinal = ordinal
        self.description = description
        self.kind = kind


class RuleCatalog:
    """Read-only lookup table of built rules, in ordinal order."""

    def __init__(self, rules: Mapping[CryptoRule, Rule]) -> None:
        self._rules = MappingProxyType(dict(rules))
        self._by_id = MappingProxyType({rule.id: rule for rule in self._rules.values()})

    def __getitem__(self, key: CryptoRule) -> Rule:
        return self._rules[key]

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules.values())

    def __len__(self) -> int:
        return len(self._rules)

    def rule_id(self, key: CryptoRule) -> int:
        return self._rules[key].id

    def find(self, rule_id: int) -> Rule | None:
        return self._by_id.get(rule_id)

    def to_list(self) -> list[dict[str, Any]]:
        return [rule.to_dict() for rule in self]

    def to_json(self) -> str:
        return json.dumps(self.to_list())


def build_catalog(base_offset: int = 0) -> RuleCatalog:
    """Build every rule of the catalog with ids starting after ``base_offset``."""
    ordinals = [entry.ordinal for entry in CryptoRule]
    if len(set(ordinals)) != len(ordinals):
        raise ValueError("Crypto rule ordinals must be unique")

    return RuleCatalog(
        {
            entry: create_rule(
                entry.ordinal, entry.description, entry.kind, base_offset=base_offset
            )
            for entry in sorted(CryptoRule, key=lambda e: e.ordinal)
        }
    )


# Catalog with no host offset; hosts with an id block build their own.
DEFAULT_CATALOG = build_catalog()

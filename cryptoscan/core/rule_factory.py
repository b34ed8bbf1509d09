"""
Rule Factory — Builds rule records from catalog entries.
"""

from __future__ import annotations

from cryptoscan.models.rule_models import Rule, RuleKind


def create_rule(
    ordinal: int,
    description: str,
    kind: RuleKind,
    *,
    base_offset: int = 0,
) -> Rule:
    """
    Create the rule at position ``ordinal`` (1-based) of a catalog.

    ``base_offset`` is the host-assigned start of this analyzer's id block,
    so ids from different analyzers in one host never collide. Without it
    the id is the ordinal itself.
    """
    if ordinal < 1:
        raise ValueError(f"Rule ordinal must start at 1, got {ordinal}")
    if base_offset < 0:
        raise ValueError(f"Rule id offset must not be negative, got {base_offset}")
    return Rule(id=base_offset + ordinal, kind=kind, description=description)

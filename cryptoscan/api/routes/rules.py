"""
Rules Route — GET /rules
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from cryptoscan.api.dependencies import get_rule_catalog
from cryptoscan.core.crypto_rules import RuleCatalog

router = APIRouter()


@router.get("/rules")
async def list_rules(catalog: RuleCatalog = Depends(get_rule_catalog)) -> list[dict[str, Any]]:
    """List every rule the analyzers can report."""
    return catalog.to_list()

"""
Health Check Route — GET /health
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from cryptoscan.api.dependencies import get_rule_catalog
from cryptoscan.core.crypto_rules import RuleCatalog

router = APIRouter()


@router.get("/health")
async def health(catalog: RuleCatalog = Depends(get_rule_catalog)):
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": "1.0.0",
        "rules": len(catalog),
    }

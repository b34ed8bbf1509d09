"""
FastAPI Dependencies — Shared singletons injected via Depends().
"""

from __future__ import annotations

from functools import lru_cache

from cryptoscan.config import settings
from cryptoscan.core.crypto_rules import RuleCatalog, build_catalog
from cryptoscan.core.scan_engine import ScanEngine


@lru_cache
def get_rule_catalog() -> RuleCatalog:
    """Rule catalog built with the configured id offset."""
    return build_catalog(settings.rule_id_offset)


@lru_cache
def get_scan_engine() -> ScanEngine:
    """Shared scan engine singleton."""
    return ScanEngine(catalog=get_rule_catalog())

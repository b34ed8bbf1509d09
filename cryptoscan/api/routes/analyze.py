"""
Analyze Route — POST /analyze

Accepts a parsed package (syntax trees included) and returns the issues
found by the crypto analyzers.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from cryptoscan.api.dependencies import get_scan_engine
from cryptoscan.config import settings
from cryptoscan.core.scan_engine import ScanEngine
from cryptoscan.models.project_models import Package
from cryptoscan.models.rule_models import ScanResult

logger = logging.getLogger("cryptoscan.api.analyze")

router = APIRouter()


class AnalyzeRequest(BaseModel):
    package: Package = Field(..., description="Package with parsed documents")


@router.post("/analyze", response_model=ScanResult)
async def analyze(
    request: AnalyzeRequest,
    engine: ScanEngine = Depends(get_scan_engine),
):
    """Run the crypto analyzers over every document in the package."""
    document_count = request.package.document_count()
    if document_count > settings.max_documents:
        raise HTTPException(
            status_code=400,
            detail=f"Package exceeds maximum of {settings.max_documents} documents",
        )

    logger.info(f"Analyzing package '{request.package.name}' ({document_count} documents)")
    return engine.run(request.package)

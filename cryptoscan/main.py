"""
cryptoscan FastAPI Application.

  GET  /health  → {"status": "ok", ...}
  GET  /rules   → rule listing
  POST /analyze → weak cipher issues for a parsed package
"""

from __future__ import annotations

import logging

from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cryptoscan.api.routes.analyze import router as analyze_router
from cryptoscan.api.routes.health import router as health_router
from cryptoscan.api.routes.rules import router as rules_router
from cryptoscan.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("cryptoscan")

app = FastAPI(
    title="cryptoscan",
    description="Static analyzer for weak cryptographic cipher usage",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(rules_router)
app.include_router(analyze_router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    body = await request.body()
    logger.error(f"Validation Error. Raw body: {body.decode('utf-8')[:500]} | Errors: {exc.errors()}")
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors()), "body": body.decode("utf-8")[:100]},
    )

"""
FastAPI wrapper for SEO Text Analyzer - Vercel Serverless Function.

This module exposes text analysis as a REST API for deployment on Vercel.
"""

import logging
import os
import time
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from seo_text_analyzer.analyzer import MissingTextError, SEOAnalyzer
from seo_text_analyzer.config import AnalyzerConfig
from seo_text_analyzer.oracle import TextRazorClient

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
STARTED_AT = time.monotonic()

# Vercel deployments of the project (previews included) and local development
ALLOWED_ORIGIN_REGEX = (
    r"^(https://seo-analyzer-[a-z0-9-]+\.vercel\.app"
    r"|http://localhost:\d+"
    r"|http://127\.0\.0\.1:\d+)$"
)

AVAILABLE_ENDPOINTS = {
    "root": "GET /",
    "test": "GET /api/test",
    "analyze": "POST /api/analyze",
    "health": "GET /health",
}

app = FastAPI(
    title="SEO Text Analyzer API",
    description="Keyword extraction and SEO scoring for free-form text",
    version=API_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=ALLOWED_ORIGIN_REGEX,
    allow_credentials=True,
    allow_methods=["GET", "PUT", "POST", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Content-Length", "X-Requested-With", "Accept"],
)


class AnalyzeRequest(BaseModel):
    """Request model for text analysis."""
    text: Optional[str] = Field(None, description="Text to analyze")


class KeywordResponse(BaseModel):
    """A ranked keyword."""
    text: str
    relevance: int


class AnalysisReportResponse(BaseModel):
    """Scoring bundle for the analyzed text."""
    readabilityScore: int
    keywordDensity: float
    wordCount: int
    improvementTips: list[str]


class AnalyzeResponse(BaseModel):
    """Response model for analysis results."""
    keywords: list[KeywordResponse]
    analysis: AnalysisReportResponse


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def _environment() -> str:
    return os.environ.get("ENVIRONMENT", "development")


def get_analyzer() -> SEOAnalyzer:
    """Build an analyzer from the environment; no API key means fallback only."""
    config = AnalyzerConfig.from_env()
    oracle = TextRazorClient(config=config) if config.has_api_key else None
    return SEOAnalyzer(oracle=oracle, config=config)


@app.get("/")
async def root():
    """Basic information about the API and its endpoints."""
    return {
        "message": "SEO Analyzer API is running!",
        "timestamp": _timestamp(),
        "version": API_VERSION,
        "environment": _environment(),
        "endpoints": {
            "test": "/api/test",
            "analyze": "/api/analyze (POST)",
            "health": "/health",
        },
    }


@app.get("/api/test")
async def api_test(request: Request):
    """Test endpoint."""
    return {
        "message": "API test endpoint working!",
        "timestamp": _timestamp(),
        "method": request.method,
        "environment": _environment(),
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": _timestamp(),
        "version": API_VERSION,
        "uptime": round(time.monotonic() - STARTED_AT, 3),
    }


@app.get("/api/analyze")
async def analyze_usage():
    """Explain how to call the analysis endpoint."""
    return {
        "message": "Use POST method to analyze text",
        "example": {
            "method": "POST",
            "url": "/api/analyze",
            "body": {"text": "Your text here"},
        },
        "timestamp": _timestamp(),
    }


@app.post("/api/analyze", response_model=AnalyzeResponse)
async def analyze(request: AnalyzeRequest):
    """
    Analyze text for SEO.

    Extracts keywords with TextRazor when configured and reachable, falling
    back to a generic keyword set otherwise. The response shape is the same
    in both cases.
    """
    if not request.text:
        return JSONResponse(status_code=400, content={"error": "Text is required"})

    logger.info(f"Analyze request for {len(request.text)} characters")
    analyzer = get_analyzer()
    try:
        result = await analyzer.analyze(request.text)
    except MissingTextError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})

    return result.to_dict()


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Return JSON for unknown routes, listing the endpoints that exist."""
    if exc.status_code == 404:
        return JSONResponse(
            status_code=404,
            content={
                "error": "Endpoint not found",
                "method": request.method,
                "path": request.url.path,
                "availableEndpoints": AVAILABLE_ENDPOINTS,
                "timestamp": _timestamp(),
            },
        )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

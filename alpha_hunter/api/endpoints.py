"""
FastAPI Endpoints for Alpha Hunter
==================================
RESTful API for project ingestion, alpha hunting analysis and verification.

Base URL: http://localhost:8000

Endpoints:
- GET  /                          - API info
- GET  /api/health                - Health check
- POST /api/projects/parse        - Parse CSV text into projects
- POST /api/analyze               - Parse + filter + score + aggregate
- POST /api/projects/verify       - LLM legitimacy check for one project
- POST /api/export                - Export projects as CSV
- POST /api/test                  - Analyze built-in sample data
"""

import os
from datetime import datetime
from typing import List

from dotenv import load_dotenv
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

# Load environment variables
load_dotenv()

from ..errors import EmptyDatasetError, SchemaError, VerificationError
from ..logging_config import get_logger
from ..models.schemas import (
    AnalysisResult,
    CsvTextRequest,
    ExportRequest,
    Project,
    VerifyRequest,
)
from ..config.settings import EXPORT_FILENAME
from ..engine import AlphaHuntingEngine
from .. import __version__

logger = get_logger(__name__)


# =============================================================================
# FastAPI App Initialization
# =============================================================================

app = FastAPI(
    title="Alpha Hunter API",
    description="""
## Web3 Project Alpha Hunting

Upload a project spreadsheet (Turkish or English headers) and get a ranked
shortlist with summary analytics.

### Features:
- **Lenient parsing**: quoted fields, BOM, mixed line endings, header synonyms
- **Alpha filters**: potential score, launch status, target categories
- **Priority ranking**: weighted, deterministic, stable
- **Verification**: search-augmented LLM legitimacy check via OpenRouter

### Quick Start:
1. `POST /api/analyze` with `csv_text` for the full analysis
2. `POST /api/projects/verify` for any shortlisted project
3. `POST /api/export` to download the shortlist as CSV
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# The dashboard is served from another origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Engine Initialization
# =============================================================================

default_engine = AlphaHuntingEngine(llm_api_key=os.getenv("OPENROUTER_API_KEY"))


def get_engine() -> AlphaHuntingEngine:
    return default_engine


SAMPLE_CSV = """Proje_Adı,Website_URL,Kaynak_Platform,Kategori_Etiketler,Lansman_Tarihi_Durumu,Ham_Açıklama,Potansiyel_Skoru,Analist_Notu
Nebula Quest,nebulaquest.gg,X,"GameFi, NFT",Upcoming Q3,"On-chain RPG with ""play-to-own"" items",9,Strong team
GridPower,https://gridpower.network,Discord,"DePIN, AI",In Development,Decentralized energy sensors,8.5,Early testnet
SwapLite,swaplite.fi,Telegram,DeFi,Live,AMM on L2,6.5,Crowded market
OldChain,N/A,X,Other,Abandoned,Inactive,3,Skip
"""


# =============================================================================
# Health & Info Endpoints
# =============================================================================

@app.get("/", tags=["Info"])
async def root():
    """Service name, version and the route map"""
    return {
        "service": "Alpha Hunter",
        "version": __version__,
        "status": "running",
        "docs": "/docs",
        "endpoints": {
            "Parse": "POST /api/projects/parse",
            "Analyze": "POST /api/analyze",
            "Verify": "POST /api/projects/verify",
            "Export": "POST /api/export",
            "Test": "POST /api/test",
            "Health": "GET /api/health",
        },
    }


@app.get("/api/health", tags=["Info"])
async def health_check(engine: AlphaHuntingEngine = Depends(get_engine)):
    """Liveness probe, also reports whether verification is available"""
    return {
        "status": "healthy",
        "service": "Alpha Hunter",
        "version": __version__,
        "timestamp": datetime.utcnow().isoformat(),
        "llm_configured": engine.verifier.is_configured,
    }


# =============================================================================
# Analysis Endpoints
# =============================================================================

@app.post("/api/projects/parse", response_model=List[Project], tags=["Analysis"])
async def parse_projects(
    request: CsvTextRequest,
    engine: AlphaHuntingEngine = Depends(get_engine),
):
    """
    Parse CSV text into canonical projects (no filtering or scoring)
    """
    return engine.parse(request.csv_text)


@app.post("/api/analyze", response_model=AnalysisResult, tags=["Analysis"])
async def analyze(
    request: CsvTextRequest,
    engine: AlphaHuntingEngine = Depends(get_engine),
):
    """
    Full alpha hunting analysis

    Returns summary statistics, category / launch status / score
    distributions and the top prioritized projects.
    """
    return engine.analyze_text(request.csv_text)


@app.post("/api/projects/verify", response_model=Project, tags=["Verification"])
async def verify_project(
    request: VerifyRequest,
    engine: AlphaHuntingEngine = Depends(get_engine),
):
    """
    Verify a project's legitimacy with a search-augmented LLM

    The returned project carries verificationStatus ("verified" or
    "failed"), a summary, a confidence score and evidence links.
    """
    return await engine.verify_project(request.project)


@app.post("/api/export", tags=["Export"])
async def export_projects(
    request: ExportRequest,
    engine: AlphaHuntingEngine = Depends(get_engine),
):
    """Export projects as a CSV attachment"""
    filename = request.filename or EXPORT_FILENAME
    return Response(
        content=engine.export_csv(request.projects),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@app.post("/api/test", tags=["Testing"])
async def test_api(engine: AlphaHuntingEngine = Depends(get_engine)):
    """
    Run the full analysis on a built-in four-row spreadsheet

    Handy as a smoke test after deploying.
    """
    result = engine.analyze_text(SAMPLE_CSV)
    return {
        "test": "success",
        "total_projects": result.summary_statistics.total_projects,
        "top_project": (
            result.prioritized_projects[0].project_name
            if result.prioritized_projects else None
        ),
        "result": result.model_dump(by_alias=True, mode="json"),
    }


# =============================================================================
# Error Handlers
# =============================================================================

@app.exception_handler(SchemaError)
async def schema_error_handler(request, exc: SchemaError):
    logger.warning("Rejected upload: %s", exc)
    return JSONResponse(
        status_code=422,
        content={"error": str(exc), "missing": exc.missing, "type": "SchemaError"},
    )


@app.exception_handler(EmptyDatasetError)
async def empty_dataset_handler(request, exc: EmptyDatasetError):
    return JSONResponse(
        status_code=400,
        content={"error": str(exc), "type": "EmptyDatasetError"},
    )


@app.exception_handler(VerificationError)
async def verification_error_handler(request, exc: VerificationError):
    return JSONResponse(
        status_code=503,
        content={"error": str(exc), "type": "VerificationError"},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc),
            "type": type(exc).__name__,
        },
    )

import numpy as np
from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_rng
from models.requests import AnalyzeRequest
from models.responses import AnalysisResult
from models.schemas.quick_check import QuickCheckResult
from services.pipeline.orchestrator import analyze as run_analysis
from services.quick_check import quick_check
from services.vocabulary import VOCABULARY_VERSION

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _require_text(body: AnalyzeRequest) -> str:
    if not body.description.strip():
        raise HTTPException(status_code=400, detail="Job description is empty")
    return body.description


@router.get("/health")
def health():
    return {
        "status": "ok",
        "vocabulary_version": VOCABULARY_VERSION,
    }


@router.post("/analyze", response_model=AnalysisResult)
@limiter.limit("10/minute")
def analyze(
    request: Request,
    body: AnalyzeRequest,
    rng: np.random.Generator = Depends(get_rng),
):
    return run_analysis(_require_text(body), rng)


@router.post("/analyze/quick", response_model=QuickCheckResult)
@limiter.limit("10/minute")
def analyze_quick(
    request: Request,
    body: AnalyzeRequest,
    rng: np.random.Generator = Depends(get_rng),
):
    return quick_check(_require_text(body), rng)

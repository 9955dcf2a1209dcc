"""POST /api/classify and /api/analyze: classification + recommendations."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends

from brandlens.config import Settings
from brandlens.dependencies import get_settings
from brandlens.engine.classifier import classify
from brandlens.engine.pipeline import analyze as run_analysis
from brandlens.models.analysis import AnalysisResult
from brandlens.models.requests import AnalyzeRequest, ClassifyRequest
from brandlens.models.responses import AnalyzeResponse

router = APIRouter()


@router.post("/classify", response_model=AnalysisResult)
async def classify_analysis(req: ClassifyRequest) -> AnalysisResult:
    return classify(req.analysis)


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(req: AnalyzeRequest, settings: Settings = Depends(get_settings)) -> AnalyzeResponse:
    start = time.perf_counter()

    limit = req.limit if req.limit is not None else settings.recommendation_limit
    bundle = run_analysis(req.analysis, display_name=req.brand_name, limit=limit)

    elapsed = (time.perf_counter() - start) * 1000

    return AnalyzeResponse(
        analysis=bundle.analysis,
        answers=bundle.answers,
        config=bundle.config,
        presets=bundle.presets,
        processing_time_ms=round(elapsed, 1),
    )

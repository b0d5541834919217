"""
API Routes for the Resume Roast API.

Provides endpoints for:
- Scoring resume text (risk analysis)
- Generating a roast at a chosen intensity
- Building an improvement plan
- Extracting text from an uploaded PDF
- Health checks
"""
from datetime import datetime
import logging

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile
from starlette.concurrency import run_in_threadpool

from resumeroast.models.analysis import (
    AnalyzeRequest,
    RoastRequest,
    ImproveRequest,
    AnalyzeResponse,
    RoastResponse,
    ImproveResponse,
    ExtractResponse,
    HealthResponse,
)
from resumeroast.services.improver import improve
from resumeroast.services.rate_limit import rate_limit
from resumeroast.services.roaster import roast
from resumeroast.services.scorer import analyze
from resumeroast.services.text_extractor import extract_text_from_pdf, is_pdf
from resumeroast.config import Settings, get_settings

logger = logging.getLogger(__name__)
router = APIRouter()


def _require_min_length(text: str, settings: Settings, message: str) -> None:
    if len(text.strip()) < settings.min_text_length:
        raise HTTPException(status_code=400, detail=message)


@router.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """
    Health check endpoint.

    Returns the service status and version.
    """
    settings = get_settings()
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        timestamp=datetime.utcnow(),
    )


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    tags=["Analysis"],
)
@rate_limit()
def analyze_resume(request: Request, payload: AnalyzeRequest, settings: Settings = Depends(get_settings)):
    """
    Score resume text.

    Request body:
    - text: Resume text (1-20,000 characters, at least 50 non-blank)
    - sourceType: Where the text came from (paste or pdf)

    Returns the 1-10 score (higher is healthier), risk label, summary,
    six-category breakdown, strengths, red flags and detected counts.
    """
    _require_min_length(
        payload.text, settings,
        f"Resume text is too short. Please provide at least {settings.min_text_length} characters.",
    )
    return AnalyzeResponse.from_result(analyze(payload.text))


@router.post(
    "/roast",
    response_model=RoastResponse,
    tags=["Analysis"],
)
@rate_limit()
def roast_resume(request: Request, payload: RoastRequest, settings: Settings = Depends(get_settings)):
    """
    Roast resume text.

    Request body:
    - text: Resume text
    - roastLevel: light, medium or spicy

    The same text and level always produce the same roast.
    """
    _require_min_length(payload.text, settings, "Resume text is too short to roast.")
    return RoastResponse.from_result(roast(payload.text, payload.roast_level))


@router.post(
    "/improve",
    response_model=ImproveResponse,
    tags=["Analysis"],
)
@rate_limit()
def improve_resume(request: Request, payload: ImproveRequest, settings: Settings = Depends(get_settings)):
    """
    Build an improvement plan.

    Returns priority fixes, before/after bullet rewrites, an improved
    summary and ATS formatting tips.
    """
    _require_min_length(payload.text, settings, "Resume text is too short to improve.")
    return ImproveResponse.from_result(improve(payload.text))


@router.post(
    "/extract",
    response_model=ExtractResponse,
    tags=["Utilities"],
)
@rate_limit()
async def extract_pdf_text(
    request: Request,
    file: UploadFile | None = File(None),
    settings: Settings = Depends(get_settings),
):
    """
    Extract text from an uploaded PDF resume.

    Image-based PDFs yield too little text and are rejected with 422 so the
    caller can fall back to pasting the text.
    """
    if file is None:
        raise HTTPException(status_code=400, detail="No PDF file uploaded")

    if file.content_type != "application/pdf":
        raise HTTPException(status_code=400, detail="Only PDF files are allowed")

    max_bytes = settings.max_file_size_mb * 1024 * 1024
    content = await file.read(max_bytes + 1)
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Maximum size is {settings.max_file_size_mb}MB.",
        )

    if not is_pdf(content):
        raise HTTPException(status_code=400, detail="Only PDF files are allowed")

    try:
        text = await run_in_threadpool(extract_text_from_pdf, content)
    except Exception as e:
        logger.error(f"PDF extraction failed: {e}")
        raise HTTPException(
            status_code=500,
            detail="Failed to extract text from PDF. Please try pasting your resume text instead.",
        )

    if len(text) < settings.min_extracted_chars:
        raise HTTPException(
            status_code=422,
            detail={
                "error": "PDF appears to be image-based or contains very little text. "
                         "Please paste your resume text instead.",
                "extractedLength": len(text),
            },
        )

    return ExtractResponse(
        text=text[:settings.max_text_length],
        preview=text[:settings.preview_chars],
        total_length=len(text),
    )

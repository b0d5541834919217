"""Data models for the Resume Roast API."""
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

__all__ = [
    "AnalyzeRequest",
    "RoastRequest",
    "ImproveRequest",
    "AnalyzeResponse",
    "RoastResponse",
    "ImproveResponse",
    "ExtractResponse",
    "HealthResponse",
]

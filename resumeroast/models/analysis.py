"""Request and response models for the analysis endpoints."""
from datetime import datetime
from typing import List, Literal
from pydantic import BaseModel, Field

from resumeroast.services.improver import ImprovementResult
from resumeroast.services.roaster import RoastResult
from resumeroast.services.scorer import AnalysisResult

MAX_TEXT_LENGTH = 20000

RoastLevelType = Literal["light", "medium", "spicy"]


class AnalyzeRequest(BaseModel):
    """Request model for risk analysis."""
    text: str = Field(..., min_length=1, max_length=MAX_TEXT_LENGTH, description="Resume text")
    source_type: Literal["paste", "pdf"] = Field("paste", alias="sourceType")

    class Config:
        populate_by_name = True


class RoastRequest(BaseModel):
    """Request model for roast generation."""
    text: str = Field(..., min_length=1, max_length=MAX_TEXT_LENGTH, description="Resume text")
    roast_level: RoastLevelType = Field(..., alias="roastLevel", description="Roast intensity")

    class Config:
        populate_by_name = True


class ImproveRequest(BaseModel):
    """Request model for the improvement plan."""
    text: str = Field(..., min_length=1, max_length=MAX_TEXT_LENGTH, description="Resume text")


class BreakdownItem(BaseModel):
    name: str
    score: int = Field(..., ge=0, le=100)
    note: str


class DetectedInfoResponse(BaseModel):
    word_count: int = Field(alias="wordCount")
    bullet_count: int = Field(alias="bulletCount")
    metric_count: int = Field(alias="metricCount")
    link_count: int = Field(alias="linkCount")
    has_projects: bool = Field(alias="hasProjects")
    has_experience: bool = Field(alias="hasExperience")
    has_skills: bool = Field(alias="hasSkills")
    has_education: bool = Field(alias="hasEducation")

    class Config:
        populate_by_name = True


class AnalyzeResponse(BaseModel):
    """Complete risk analysis response."""
    score: int = Field(..., ge=1, le=10)
    label: Literal["High Risk", "Medium Risk", "Low Risk"]
    summary: str
    breakdown: List[BreakdownItem]
    strengths: List[str] = Field(default_factory=list)
    red_flags: List[str] = Field(alias="redFlags", default_factory=list)
    detected: DetectedInfoResponse
    disclaimers: List[str] = Field(default_factory=list)

    class Config:
        populate_by_name = True

    @classmethod
    def from_result(cls, result: AnalysisResult) -> "AnalyzeResponse":
        d = result.detected
        return cls(
            score=result.score,
            label=result.label,
            summary=result.summary,
            breakdown=[
                BreakdownItem(name=c.name, score=c.display_score, note=c.note)
                for c in result.breakdown
            ],
            strengths=result.strengths,
            red_flags=result.red_flags,
            detected=DetectedInfoResponse(
                word_count=d.word_count,
                bullet_count=d.bullet_count,
                metric_count=d.metric_count,
                link_count=d.link_count,
                has_projects=d.has_projects,
                has_experience=d.has_experience,
                has_skills=d.has_skills,
                has_education=d.has_education,
            ),
            disclaimers=result.disclaimers,
        )


class RoastResponse(BaseModel):
    title: str
    roast_lines: List[str] = Field(alias="roastLines")
    best_line: str = Field(alias="bestLine")
    redemption: List[str]
    boundaries: List[str]

    class Config:
        populate_by_name = True

    @classmethod
    def from_result(cls, result: RoastResult) -> "RoastResponse":
        return cls(
            title=result.title,
            roast_lines=result.roast_lines,
            best_line=result.best_line,
            redemption=result.redemption,
            boundaries=result.boundaries,
        )


class BulletRewriteResponse(BaseModel):
    before: str
    after: str


class ImproveResponse(BaseModel):
    priority_fixes: List[str] = Field(alias="priorityFixes")
    rewritten_bullets: List[BulletRewriteResponse] = Field(alias="rewrittenBullets")
    improved_summary: str = Field(alias="improvedSummary")
    ats_tips: List[str] = Field(alias="atsTips")

    class Config:
        populate_by_name = True

    @classmethod
    def from_result(cls, result: ImprovementResult) -> "ImproveResponse":
        return cls(
            priority_fixes=result.priority_fixes,
            rewritten_bullets=[
                BulletRewriteResponse(before=r.before, after=r.after) for r in result.rewritten_bullets
            ],
            improved_summary=result.improved_summary,
            ats_tips=result.ats_tips,
        )


class ExtractResponse(BaseModel):
    """Text extracted from an uploaded PDF."""
    text: str
    preview: str
    total_length: int = Field(alias="totalLength")

    class Config:
        populate_by_name = True


class HealthResponse(BaseModel):
    """Health check response."""
    status: Literal["healthy"]
    version: str
    timestamp: datetime

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

EvidenceType = Literal["project", "company", "skill"]


class ExtractedEntities(BaseModel):
    projects: list[str] = Field(default_factory=list)
    companies: list[str] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)


class EvidenceItem(BaseModel):
    type: EvidenceType
    snippet: str


class Suggestions(BaseModel):
    prioritized_next_steps: list[str]
    quick_edits: list[str]
    longer_term: list[str]


class RecommendedSnippets(BaseModel):
    professional_summary: str
    project_bullet: str


class ResumeAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall_score: int = Field(ge=0, le=100)
    confidence: int = Field(ge=0, le=100)
    strengths: list[str]
    weaknesses: list[str]
    evidence: list[EvidenceItem]
    ai_feedback: str
    suggestions: Suggestions
    recommended_snippets: RecommendedSnippets


class ResumeAnalysisRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    resume_content: str = Field(alias="resumeContent", min_length=1, max_length=50000)
    target_role: str = Field(alias="targetRole", min_length=1, max_length=200)

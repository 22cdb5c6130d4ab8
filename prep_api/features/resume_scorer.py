from __future__ import annotations

import re

from prep_api.core.tables import get_scoring_value, get_vocabulary_value
from prep_api.schemas.analysis import (
    EvidenceItem,
    ExtractedEntities,
    RecommendedSnippets,
    ResumeAnalysis,
    Suggestions,
)

from .entity_extractor import EntityExtractor, RegexEntityExtractor

_SUMMARY_RE = re.compile(get_vocabulary_value("extraction.summary_section"), re.IGNORECASE)
_TRAINING_RE = re.compile(get_vocabulary_value("extraction.training"), re.IGNORECASE)

_PRIORITIZED_NEXT_STEPS = (
    "Add a 2-3 sentence professional summary focused on the target role with quantifiable outcomes.",
    "For each project, add 1-2 bullet points with achievements and metrics (e.g., % improvement, scale, impact).",
    "List key technical skills at the top and include versions/tools (e.g., Docker, Kubernetes, AWS EC2).",
)
_QUICK_EDITS = (
    "Add metrics to one recent project: 'Reduced latency by 30% by refactoring X pipeline.'",
    "Include a Certifications section if you have relevant certificates (AWS, TensorFlow, etc.).",
    "Format experience bullets to start with strong action verbs and end with measurable results.",
)
_LONGER_TERM = (
    "If targeting ML roles, add 1-2 small reproducible projects with data and evaluation metrics.",
    "If targeting DevOps/Platform roles, add CI/CD and containerization examples and the deployment scale.",
)


def _clamp(value: float, low: int, high: int) -> int:
    return max(low, min(high, round(value)))


def _int(path: str, default: int) -> int:
    return int(get_scoring_value(path, default))


def is_short_resume(resume: str) -> bool:
    return len(resume.strip()) < _int("short_resume_chars", 120)


def compute_score(resume: str, entities: ExtractedEntities) -> int:
    score = _int("score.base", 50)
    score += min(len(entities.skills) * _int("score.skills.per_item", 6), _int("score.skills.cap", 30))
    score += min(len(entities.projects) * _int("score.projects.per_item", 4), _int("score.projects.cap", 12))
    if entities.companies:
        score += _int("score.company_bonus", 4)
    if is_short_resume(resume):
        score -= _int("score.short_resume_penalty", 20)
    if not _SUMMARY_RE.search(resume):
        score -= _int("score.missing_summary_penalty", 6)
    return _clamp(score, _int("score.min", 0), _int("score.max", 100))


def compute_confidence(resume: str, entities: ExtractedEntities) -> int:
    confidence = _int("confidence.base", 60)
    confidence += len(entities.skills) * _int("confidence.skills_per_item", 6)
    confidence += len(entities.projects) * _int("confidence.projects_per_item", 4)
    if is_short_resume(resume):
        confidence -= _int("confidence.short_resume_penalty", 30)
    return _clamp(confidence, _int("confidence.min", 20), _int("confidence.max", 95))


def _caveats(resume: str, entities: ExtractedEntities) -> list[str]:
    notes: list[str] = []
    if is_short_resume(resume):
        notes.append("Resume appears very short — analysis is limited by available content.")
    if not entities.skills:
        notes.append("No clear technical skills detected; this reduces confidence.")
    if not entities.projects:
        notes.append("No explicit projects found; adding project descriptions with outcomes will help.")
    if not _TRAINING_RE.search(resume):
        notes.append("No certifications or formal training detected; adding relevant certs can improve fit.")
    return notes


def _strengths(entities: ExtractedEntities) -> list[str]:
    strengths: list[str] = []
    if entities.skills:
        strengths.append(f"Detected skills: {', '.join(entities.skills)}")
    if entities.projects:
        strengths.append(f"Project mentions detected ({len(entities.projects)})")
    if entities.companies:
        strengths.append(f"Company mentions detected ({len(entities.companies)})")
    return strengths


def _weaknesses(resume: str, entities: ExtractedEntities) -> list[str]:
    weaknesses: list[str] = []
    if is_short_resume(resume):
        weaknesses.append("Resume too brief for a full assessment")
    if not entities.skills:
        weaknesses.append("No technical skills explicitly listed")
    if not entities.projects:
        weaknesses.append("Lack of explicit project result statements")
    return weaknesses


def _evidence(entities: ExtractedEntities) -> list[EvidenceItem]:
    evidence: list[EvidenceItem] = []
    evidence.extend(
        EvidenceItem(type="project", snippet=item)
        for item in entities.projects[: _int("evidence.max_projects", 3)]
    )
    evidence.extend(
        EvidenceItem(type="company", snippet=item)
        for item in entities.companies[: _int("evidence.max_companies", 3)]
    )
    evidence.extend(
        EvidenceItem(type="skill", snippet=item)
        for item in entities.skills[: _int("evidence.max_skills", 8)]
    )
    return evidence


def _feedback(score: int, confidence: int, caveats: list[str]) -> str:
    notes = f"Notes: {' '.join(caveats)}" if caveats else "No major caveats detected."
    return (
        f"Overall, the resume scores {score}/100 with confidence {confidence}%.\n"
        f"{notes}\n"
        "This assessment focuses on explicit mentions of projects, companies, and technical skills. "
        "If key experience is omitted (e.g., private projects, NDA work), add concise descriptions "
        "to improve accuracy."
    )


def build_resume_analysis(
    resume: str,
    target_role: str,
    entities: ExtractedEntities,
) -> ResumeAnalysis:
    score = compute_score(resume, entities)
    confidence = compute_confidence(resume, entities)
    return ResumeAnalysis(
        overall_score=score,
        confidence=confidence,
        strengths=_strengths(entities),
        weaknesses=_weaknesses(resume, entities),
        evidence=_evidence(entities),
        ai_feedback=_feedback(score, confidence, _caveats(resume, entities)),
        suggestions=Suggestions(
            prioritized_next_steps=list(_PRIORITIZED_NEXT_STEPS),
            quick_edits=list(_QUICK_EDITS),
            longer_term=list(_LONGER_TERM),
        ),
        recommended_snippets=RecommendedSnippets(
            professional_summary=(
                f"Experienced {target_role} with X+ years delivering measurable results "
                "(e.g., reduced costs by 20%, improved throughput by 30%). Focus: [primary technologies]."
            ),
            project_bullet=(
                "Developed [feature] using [tech] which resulted in [quantified outcome, metric]. "
                "Example: Reduced processing time by 40% through optimized data pipeline using Python and AWS Lambda."
            ),
        ),
    )


def analyze_resume(
    resume: str,
    target_role: str,
    extractor: EntityExtractor | None = None,
) -> ResumeAnalysis:
    """Score a resume with transparent, deterministic heuristics.

    Never raises for string input; an empty resume simply collects every
    penalty.
    """
    resume = resume or ""
    entities = (extractor or RegexEntityExtractor()).extract(resume)
    return build_resume_analysis(resume, target_role, entities)

from .entity_extractor import EntityExtractor, RegexEntityExtractor
from .matcher import Matcher, contains_tech_token, get_default_matcher, looks_personal_or_hr
from .resume_scorer import analyze_resume, build_resume_analysis, compute_confidence, compute_score
from .sanitizer import is_contact_line, is_technical_line, sanitize_resume

__all__ = [
    "EntityExtractor",
    "RegexEntityExtractor",
    "Matcher",
    "get_default_matcher",
    "contains_tech_token",
    "looks_personal_or_hr",
    "analyze_resume",
    "build_resume_analysis",
    "compute_score",
    "compute_confidence",
    "sanitize_resume",
    "is_contact_line",
    "is_technical_line",
]

from __future__ import annotations

import re

from prep_api.core.tables import get_vocabulary_value

from .matcher import Matcher, get_default_matcher

MIN_TECHNICAL_LINES = 5

_LINE_SPLIT_RE = re.compile(r"\r?\n")
_CONTACT_MARKER_RE = re.compile(get_vocabulary_value("contact_marker"), re.IGNORECASE)
_CONTACT_KEYWORD_RE = re.compile(get_vocabulary_value("contact_keyword"), re.IGNORECASE)
_TECHNICAL_LINE_RE = re.compile(get_vocabulary_value("technical_line"), re.IGNORECASE)


def is_contact_line(line: str) -> bool:
    return bool(_CONTACT_MARKER_RE.search(line) and _CONTACT_KEYWORD_RE.search(line))


def _keep_line(line: str, matcher: Matcher) -> bool:
    if matcher.matches_name(line):
        return False
    # Company suffixes usually sit inside a technical bullet.
    if matcher.matches_company_suffix(line):
        return True
    if matcher.matches_hr_phrase(line):
        return False
    if matcher.mentions_date_or_duration(line):
        return False
    if is_contact_line(line):
        return False
    return True


def is_technical_line(line: str, matcher: Matcher | None = None) -> bool:
    matcher = matcher or get_default_matcher()
    return bool(_TECHNICAL_LINE_RE.search(line)) or matcher.contains_tech_token(line)


def sanitize_resume(raw: str, matcher: Matcher | None = None) -> str:
    """Reduce a resume to its technical, project-related lines.

    Returns the original text untouched when fewer than five technical lines
    survive, so short or unusual resumes are never filtered down to nothing.
    """
    matcher = matcher or get_default_matcher()
    lines = _LINE_SPLIT_RE.split(raw or "")
    kept = [line for line in lines if line.strip() and _keep_line(line.strip(), matcher)]
    technical = [line for line in kept if is_technical_line(line, matcher)]
    if len(technical) >= MIN_TECHNICAL_LINES:
        return "\n".join(technical)
    return raw

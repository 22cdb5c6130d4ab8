from __future__ import annotations

import re
from typing import Protocol

from prep_api.core.tables import get_vocabulary_value
from prep_api.schemas.analysis import ExtractedEntities

_WHITESPACE_RUN_RE = re.compile(r"\s{2,}")


class EntityExtractor(Protocol):
    def extract(self, text: str) -> ExtractedEntities:
        """Return project, company and skill mentions found in raw resume text."""


def _collapse(value: str) -> str:
    return _WHITESPACE_RUN_RE.sub(" ", value)


def _append_unique(target: list[str], value: str) -> None:
    if value and value not in target:
        target.append(value)


class RegexEntityExtractor:
    """Low-precision regex heuristics; over- and under-matching are expected."""

    def __init__(
        self,
        *,
        project_mention: str | None = None,
        project_action: str | None = None,
        company_mention: str | None = None,
        company_role: str | None = None,
        skills: list[str] | None = None,
    ) -> None:
        self._project_mention = re.compile(
            project_mention or get_vocabulary_value("extraction.project_mention"), re.IGNORECASE
        )
        self._project_action = re.compile(
            project_action or get_vocabulary_value("extraction.project_action"), re.IGNORECASE
        )
        self._company_mention = re.compile(
            company_mention or get_vocabulary_value("extraction.company_mention_case_sensitive")
        )
        self._company_role = re.compile(
            company_role or get_vocabulary_value("extraction.company_role_case_sensitive")
        )
        vocabulary = skills if skills is not None else get_vocabulary_value("scored_skills", [])
        self._skills = tuple(str(item).lower() for item in vocabulary)

    def extract_projects(self, text: str) -> list[str]:
        projects: list[str] = []
        for match in self._project_mention.finditer(text):
            value = match.group(1).strip()
            if value:
                projects.append(_collapse(value))
        for match in self._project_action.finditer(text):
            _append_unique(projects, _collapse(match.group(2).strip()))
        return projects

    def extract_companies(self, text: str) -> list[str]:
        companies: list[str] = []
        for match in self._company_mention.finditer(text):
            value = match.group(1).strip()
            if value:
                companies.append(_collapse(value))
        for match in self._company_role.finditer(text):
            _append_unique(companies, _collapse(match.group(1).strip()))
        return companies

    def extract_skills(self, text: str) -> list[str]:
        lowered = text.lower()
        return [skill for skill in self._skills if skill in lowered]

    def extract(self, text: str) -> ExtractedEntities:
        text = text or ""
        return ExtractedEntities(
            projects=self.extract_projects(text),
            companies=self.extract_companies(text),
            skills=self.extract_skills(text),
        )

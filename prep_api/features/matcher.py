from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable

from prep_api.core.config import settings
from prep_api.core.tables import get_vocabulary


def _flatten_tokens(raw: object) -> tuple[str, ...]:
    if isinstance(raw, dict):
        groups: Iterable[object] = raw.values()
    else:
        groups = [raw]
    tokens: list[str] = []
    for group in groups:
        for token in group or []:
            value = str(token).strip().lower()
            if value and value not in tokens:
                tokens.append(value)
    return tuple(tokens)


def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE)


@dataclass(frozen=True)
class Matcher:
    tech_tokens: tuple[str, ...]
    name_patterns: tuple[re.Pattern[str], ...]
    company_suffix: re.Pattern[str]
    month: re.Pattern[str]
    year: re.Pattern[str]
    duration: re.Pattern[str]
    hr_phrases: tuple[re.Pattern[str], ...]

    @classmethod
    def from_tables(
        cls,
        vocabulary: dict,
        *,
        extra_name_patterns: Iterable[str] = (),
    ) -> "Matcher":
        names = [*(vocabulary.get("name_patterns") or []), *extra_name_patterns]
        return cls(
            tech_tokens=_flatten_tokens(vocabulary.get("tech_tokens") or {}),
            name_patterns=tuple(_compile(str(item)) for item in names if str(item).strip()),
            company_suffix=_compile(vocabulary["company_suffix"]),
            month=_compile(vocabulary["month"]),
            year=re.compile(vocabulary["year"]),
            duration=_compile(vocabulary["duration"]),
            hr_phrases=tuple(_compile(item) for item in vocabulary.get("hr_phrases") or []),
        )

    def contains_tech_token(self, text: str) -> bool:
        lowered = (text or "").lower()
        return any(token in lowered for token in self.tech_tokens)

    def matches_name(self, text: str) -> bool:
        return any(pattern.search(text) for pattern in self.name_patterns)

    def matches_company_suffix(self, text: str) -> bool:
        return bool(self.company_suffix.search(text))

    def matches_hr_phrase(self, text: str) -> bool:
        return any(pattern.search(text) for pattern in self.hr_phrases)

    def mentions_date_or_duration(self, text: str) -> bool:
        return bool(self.month.search(text) or self.year.search(text) or self.duration.search(text))

    def looks_personal_or_hr(self, text: str) -> bool:
        if not text:
            return True
        return (
            self.matches_name(text)
            or self.matches_company_suffix(text)
            or self.mentions_date_or_duration(text)
            or self.matches_hr_phrase(text)
        )


@lru_cache(maxsize=1)
def get_default_matcher() -> Matcher:
    return Matcher.from_tables(get_vocabulary(), extra_name_patterns=settings.personal_name_patterns)


def contains_tech_token(text: str) -> bool:
    return get_default_matcher().contains_tech_token(text)


def looks_personal_or_hr(text: str) -> bool:
    return get_default_matcher().looks_personal_or_hr(text)

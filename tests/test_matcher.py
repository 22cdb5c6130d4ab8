import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from prep_api.core.tables import get_vocabulary  # noqa: E402
from prep_api.features.matcher import Matcher, contains_tech_token, looks_personal_or_hr  # noqa: E402


class TechTokenTests(unittest.TestCase):
    def test_tech_tokens_match_case_insensitively(self):
        self.assertTrue(contains_tech_token("Uses REACT and Kafka"))
        self.assertTrue(contains_tech_token("uses react and kafka"))

    def test_plain_prose_has_no_tech_token(self):
        self.assertFalse(contains_tech_token("I enjoy painting"))
        self.assertFalse(contains_tech_token(""))

    def test_multi_word_and_symbol_tokens(self):
        self.assertTrue(contains_tech_token("Pipelines on GitHub Actions"))
        self.assertTrue(contains_tech_token("Ported the service to C#"))


class PersonalOrHRTests(unittest.TestCase):
    def test_empty_text_counts_as_personal(self):
        self.assertTrue(looks_personal_or_hr(""))

    def test_dates_and_durations_are_personal(self):
        self.assertTrue(looks_personal_or_hr("John Smith worked on Django since 2015"))
        self.assertTrue(looks_personal_or_hr("Which framework did you use in March?"))
        self.assertTrue(looks_personal_or_hr("Spent 3 years on the Kafka cluster"))

    def test_hr_phrases_and_company_suffixes_are_personal(self):
        self.assertTrue(looks_personal_or_hr("What was your role on the React team?"))
        self.assertTrue(looks_personal_or_hr("How long did you stay on the Redis migration?"))
        self.assertTrue(looks_personal_or_hr("Which database does Acme Technologies use?"))

    def test_project_question_is_not_personal(self):
        self.assertFalse(
            looks_personal_or_hr("In the Order Pipeline project, which queue did Kafka consumers read from?")
        )

    def test_configured_name_patterns_are_personal(self):
        matcher = Matcher.from_tables(get_vocabulary(), extra_name_patterns=[r"\bjane\s+roe\b"])
        self.assertTrue(matcher.looks_personal_or_hr("Ask Jane Roe about Django"))
        self.assertTrue(matcher.matches_name("JANE ROE"))
        self.assertFalse(matcher.looks_personal_or_hr("Ask the team about Django"))


if __name__ == "__main__":
    unittest.main()

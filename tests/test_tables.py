import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from prep_api.core.tables import get_scoring_config, get_scoring_value, get_vocabulary_value  # noqa: E402


class DataTableTests(unittest.TestCase):
    def test_scoring_lookup(self):
        self.assertIsInstance(get_scoring_config(), dict)
        self.assertEqual(get_scoring_value("score.skills.per_item"), 6)
        self.assertEqual(get_scoring_value("confidence.max"), 95)
        self.assertEqual(get_scoring_value("score.missing.key", "fallback"), "fallback")
        self.assertIsNone(get_scoring_value(""))

    def test_vocabulary_lookup(self):
        languages = get_vocabulary_value("tech_tokens.languages")
        self.assertIn("c#", languages)
        self.assertIn(".net core", get_vocabulary_value("tech_tokens.web_frameworks"))
        self.assertEqual(get_vocabulary_value("scored_skills")[0], "python")
        self.assertEqual(len(get_vocabulary_value("scored_skills")), 19)


if __name__ == "__main__":
    unittest.main()

import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from prep_api.features.resume_scorer import analyze_resume  # noqa: E402
from prep_api.schemas.analysis import ExtractedEntities  # noqa: E402

SCENARIO_A = "Built the Order Pipeline project using Kafka and Python. Reduced latency by 30%."

STRONG_RESUME = "\n".join(
    [
        "Summary: backend engineer focused on event-driven systems.",
        "Platform work at Globex",
        "Project: Ledger Service on Python, SQL and Docker",
        "Project: Search API with React front end and Kubernetes",
        "Project: Stream Processor on Kafka with AWS",
        "Certified Kubernetes Administrator",
    ]
)


class _FixedExtractor:
    def __init__(self, entities: ExtractedEntities):
        self._entities = entities

    def extract(self, text: str) -> ExtractedEntities:
        return self._entities


class ResumeScorerTests(unittest.TestCase):
    def test_short_project_resume(self):
        analysis = analyze_resume(SCENARIO_A, "Backend Engineer")
        skills = [item.snippet for item in analysis.evidence if item.type == "skill"]
        projects = [item.snippet for item in analysis.evidence if item.type == "project"]

        self.assertIn("python", skills)
        self.assertIn("kafka", skills)
        self.assertTrue(any("Order Pipeline" in project for project in projects))
        # 50 + 2 skills * 6 + 2 projects * 4, minus short-resume and missing-summary penalties.
        self.assertEqual(analysis.overall_score, 44)
        self.assertEqual(analysis.confidence, 50)
        self.assertNotIn("No technical skills explicitly listed", analysis.weaknesses)
        self.assertIn("Resume too brief for a full assessment", analysis.weaknesses)

    def test_empty_resume_collects_every_penalty(self):
        analysis = analyze_resume("", "Anything")
        self.assertEqual(analysis.overall_score, 24)
        self.assertEqual(analysis.confidence, 30)
        self.assertEqual(analysis.strengths, [])
        self.assertEqual(analysis.evidence, [])
        self.assertEqual(
            analysis.weaknesses,
            [
                "Resume too brief for a full assessment",
                "No technical skills explicitly listed",
                "Lack of explicit project result statements",
            ],
        )
        self.assertTrue(analysis.ai_feedback)
        self.assertIn("24/100", analysis.ai_feedback)
        self.assertIn("Resume appears very short — analysis is limited by available content.", analysis.ai_feedback)

    def test_strong_resume_hits_caps(self):
        analysis = analyze_resume(STRONG_RESUME, "Platform Engineer")
        self.assertEqual(analysis.overall_score, 96)
        self.assertEqual(analysis.confidence, 95)
        self.assertEqual(analysis.weaknesses, [])
        self.assertIn("Company mentions detected (1)", analysis.strengths)
        self.assertNotIn("certifications", analysis.ai_feedback)

    def test_score_is_clamped_for_oversized_counts(self):
        entities = ExtractedEntities(
            projects=[f"p{i}" for i in range(40)],
            companies=["Globex"],
            skills=[f"s{i}" for i in range(40)],
        )
        analysis = analyze_resume("summary " * 40, "Engineer", extractor=_FixedExtractor(entities))
        self.assertEqual(analysis.overall_score, 96)
        self.assertEqual(analysis.confidence, 95)
        self.assertEqual(len(analysis.evidence), 3 + 1 + 8)

    def test_scores_stay_within_bounds(self):
        samples = ["", " ", "x", SCENARIO_A, STRONG_RESUME, "python " * 500, "Project: a. " * 50]
        for sample in samples:
            analysis = analyze_resume(sample, "Engineer")
            self.assertGreaterEqual(analysis.overall_score, 0)
            self.assertLessEqual(analysis.overall_score, 100)
            self.assertGreaterEqual(analysis.confidence, 20)
            self.assertLessEqual(analysis.confidence, 95)

    def test_analysis_is_deterministic(self):
        first = analyze_resume(STRONG_RESUME, "Platform Engineer")
        second = analyze_resume(STRONG_RESUME, "Platform Engineer")
        self.assertEqual(first.model_dump_json(), second.model_dump_json())

    def test_snippets_use_target_role_and_suggestions_are_static(self):
        analysis = analyze_resume(SCENARIO_A, "Data Engineer")
        self.assertIn("Experienced Data Engineer", analysis.recommended_snippets.professional_summary)
        other = analyze_resume("", "Anything")
        self.assertEqual(analysis.suggestions, other.suggestions)
        self.assertEqual(len(analysis.suggestions.prioritized_next_steps), 3)


if __name__ == "__main__":
    unittest.main()

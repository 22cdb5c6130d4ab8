import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from prep_api.features.sanitizer import is_contact_line, sanitize_resume  # noqa: E402

_TECHNICAL_LINES = [
    "Built the Ledger Service with Python and Postgres",
    "Designed a Kafka pipeline for order events",
    "Migrated deployments to Kubernetes with Helm",
    "Added a GraphQL API gateway for partner integrations",
    "Cut p99 latency with Redis caching",
    "Wrote pytest suites for the billing module",
]


class SanitizerTests(unittest.TestCase):
    def test_drops_personal_lines_and_keeps_technical_ones(self):
        resume = "\n".join(
            [
                "Jane Roe",
                "jane@example.com | linkedin.com/in/jane",
                "Software Engineer at Acme",
                "Jan 2019 - Present",
                "",
                *_TECHNICAL_LINES,
                "Enjoys hiking and chess",
            ]
        )
        self.assertEqual(sanitize_resume(resume), "\n".join(_TECHNICAL_LINES))

    def test_company_suffix_line_survives_date_filter(self):
        resume = "\n".join([*_TECHNICAL_LINES[:4], "Integrated the Acme Labs payments API in 2019"])
        sanitized = sanitize_resume(resume)
        self.assertIn("Integrated the Acme Labs payments API in 2019", sanitized.splitlines())

    def test_falls_back_to_original_when_too_few_technical_lines(self):
        resume = "Jane Roe\n\nSenior Engineer, 2015-2020\nBuilt a Flask API\nUsed Docker daily\n"
        self.assertEqual(sanitize_resume(resume), resume)

    def test_empty_input_is_returned_unchanged(self):
        self.assertEqual(sanitize_resume(""), "")

    def test_reduced_output_never_grows(self):
        resume = "\n".join(["Hobbies: chess", *_TECHNICAL_LINES])
        sanitized = sanitize_resume(resume)
        self.assertTrue(sanitized)
        self.assertLess(len(sanitized.splitlines()), len(resume.splitlines()))

    def test_contact_line_needs_marker_and_keyword(self):
        self.assertTrue(is_contact_line("Portfolio: https://jane.dev"))
        self.assertFalse(is_contact_line("Served https://api requests"))
        self.assertFalse(is_contact_line("Portfolio of microservices"))


if __name__ == "__main__":
    unittest.main()

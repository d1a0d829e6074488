import json
import os
import tempfile
from decimal import Decimal
from io import StringIO

from django.core.exceptions import ValidationError
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase

from core.models import Option, Question, Questionnaire
from core.service.questionnaire_import import import_questionnaire

PAYLOAD = {
    "title": "焦虑自评",
    "version": "1.0.0",
    "is_published": True,
    "questions": [
        {
            "question_text": "最近两周是否感到紧张？",
            "weight": "2.00",
            "sub_type": "anxiety",
            "options": [
                {"option_text": "从不", "score": "0"},
                {"option_text": "经常", "score": "3"},
            ],
        },
        {
            "question_text": "睡眠如何？",
            "options": [{"option_text": "好", "score": 1}],
        },
    ],
}


class ImportQuestionnaireTest(TestCase):
    def test_import_creates_questions_and_options(self):
        questionnaire = import_questionnaire(PAYLOAD)

        self.assertTrue(questionnaire.is_published)
        questions = list(questionnaire.questions.order_by("sort_order"))
        self.assertEqual(len(questions), 2)
        self.assertEqual(questions[0].weight, Decimal("2.00"))
        self.assertEqual(questions[1].weight, Decimal("1.00"))
        self.assertIsNone(questions[1].sub_type)
        self.assertEqual(
            list(questions[0].options.values_list("option_text", flat=True)),
            ["从不", "经常"],
        )

    def test_invalid_payload_rolls_back(self):
        payload = {
            "title": "坏数据",
            "questions": [
                {"question_text": "题1", "options": [{"option_text": "A", "score": 1}]},
                {"question_text": "题2", "options": [{"option_text": "B"}]},
            ],
        }

        with self.assertRaises(ValidationError):
            import_questionnaire(payload)

        self.assertEqual(Questionnaire.objects.count(), 0)
        self.assertEqual(Question.objects.count(), 0)
        self.assertEqual(Option.objects.count(), 0)

    def test_non_finite_numbers_are_rejected(self):
        for bad in ("NaN", "Infinity", "-inf"):
            weight_payload = {
                "title": "非法权重",
                "questions": [
                    {
                        "question_text": "题1",
                        "weight": bad,
                        "options": [{"option_text": "A", "score": 1}],
                    }
                ],
            }
            score_payload = {
                "title": "非法分值",
                "questions": [
                    {"question_text": "题1", "options": [{"option_text": "A", "score": bad}]}
                ],
            }
            for payload in (weight_payload, score_payload):
                with self.subTest(value=bad, title=payload["title"]):
                    with self.assertRaises(ValidationError):
                        import_questionnaire(payload)

        self.assertEqual(Questionnaire.objects.count(), 0)
        self.assertEqual(Question.objects.count(), 0)
        self.assertEqual(Option.objects.count(), 0)

    def test_command_reads_json_file(self):
        with tempfile.NamedTemporaryFile(
            "w", suffix=".json", delete=False, encoding="utf-8"
        ) as f:
            json.dump(PAYLOAD, f, ensure_ascii=False)
            path = f.name
        self.addCleanup(os.remove, path)

        out = StringIO()
        call_command("import_questionnaire", path, stdout=out)

        self.assertIn("2 question(s)", out.getvalue())
        self.assertEqual(Questionnaire.objects.get().title, "焦虑自评")

    def test_command_reports_missing_file(self):
        with self.assertRaises(CommandError):
            call_command("import_questionnaire", "/nonexistent/questionnaire.json")

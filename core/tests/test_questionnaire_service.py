from decimal import Decimal

from django.test import TestCase
from django.urls import reverse

from core.models import Option, Question, Questionnaire
from core.service.questionnaire import QuestionnaireService


class QuestionnaireServiceTest(TestCase):
    def setUp(self) -> None:
        self.questionnaire = Questionnaire.objects.create(
            title="焦虑自评", description="近两周情况", version="1.2.0"
        )
        # 故意打乱创建顺序，验证按 sort_order 排序
        self.q2 = Question.objects.create(
            questionnaire=self.questionnaire,
            question_text="问题2",
            sort_order=2,
            sub_type="sleep",
        )
        self.q1 = Question.objects.create(
            questionnaire=self.questionnaire,
            question_text="问题1",
            sort_order=1,
            weight=Decimal("2.00"),
            sub_type="anxiety",
        )
        self.q_empty = Question.objects.create(
            questionnaire=self.questionnaire, question_text="无选项题", sort_order=3
        )

        self.q1_b = Option.objects.create(
            question=self.q1, option_text="Q1-B", score=Decimal("2"), sort_order=2
        )
        self.q1_a = Option.objects.create(
            question=self.q1, option_text="Q1-A", score=Decimal("1"), sort_order=1
        )
        self.q2_a = Option.objects.create(
            question=self.q2, option_text="Q2-A", score=Decimal("3"), sort_order=1
        )

        other = Questionnaire.objects.create(title="其他问卷")
        other_q = Question.objects.create(questionnaire=other, question_text="其他题")
        Option.objects.create(question=other_q, option_text="其他选项", score=Decimal("1"))

    def test_base_info(self):
        info = QuestionnaireService.get_questionnaire_base_info(self.questionnaire.id)

        self.assertEqual(
            info,
            {
                "id": self.questionnaire.id,
                "title": "焦虑自评",
                "description": "近两周情况",
                "version": "1.2.0",
            },
        )
        self.assertIsNone(QuestionnaireService.get_questionnaire_base_info(999999))

    def test_flat_rows_ordered_by_question_then_option(self):
        rows = QuestionnaireService.get_questionnaire_with_questions(self.questionnaire.id)

        self.assertEqual(
            [(row["id"], row["option_id"]) for row in rows],
            [
                (self.q1.id, self.q1_a.id),
                (self.q1.id, self.q1_b.id),
                (self.q2.id, self.q2_a.id),
            ],
        )
        self.assertEqual(rows[0]["weight"], Decimal("2.00"))
        self.assertEqual(rows[0]["sub_type"], "anxiety")
        self.assertEqual(rows[0]["option_text"], "Q1-A")

    def test_group_questions_nests_options(self):
        rows = QuestionnaireService.get_questionnaire_with_questions(self.questionnaire.id)

        grouped = QuestionnaireService.group_questions(rows)

        self.assertEqual([q["id"] for q in grouped], [self.q1.id, self.q2.id])
        self.assertEqual(
            [opt["option_text"] for opt in grouped[0]["options"]], ["Q1-A", "Q1-B"]
        )
        self.assertEqual(grouped[1]["options"][0]["score"], Decimal("3.00"))

    def test_detail_view(self):
        response = self.client.get(
            reverse("core:questionnaire_detail", args=[self.questionnaire.id])
        )

        self.assertEqual(response.status_code, 200)
        data = response.json()["data"]
        self.assertEqual(data["title"], "焦虑自评")
        self.assertEqual(len(data["questions"]), 2)
        self.assertEqual(data["questions"][0]["weight"], "2.00")

    def test_detail_view_not_found(self):
        response = self.client.get(reverse("core:questionnaire_detail", args=[999999]))

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["code"], 404)

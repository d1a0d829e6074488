from decimal import Decimal
from types import SimpleNamespace

from django.test import SimpleTestCase, TestCase

from answers.models import UserAnswer
from answers.services.scoring import (
    UNCLASSIFIED_SUB_TYPE,
    aggregate_scores,
    compute_obtained_score,
    total_score,
)
from core.exceptions import NotFound
from core.models import Option, Question, Questionnaire


class ComputeObtainedScoreTest(SimpleTestCase):
    def test_multiplies_score_by_weight_with_two_decimals(self):
        option = SimpleNamespace(score=Decimal("3.50"))
        question = SimpleNamespace(weight=Decimal("2.00"))

        result = compute_obtained_score(option, question)

        self.assertEqual(result, Decimal("7.00"))
        self.assertEqual(str(result), "7.00")

    def test_rounds_half_up_to_cents(self):
        option = SimpleNamespace(score=Decimal("1.25"))
        question = SimpleNamespace(weight=Decimal("0.50"))

        self.assertEqual(str(compute_obtained_score(option, question)), "0.63")

    def test_no_binary_float_drift(self):
        # 0.1 × 3 在 float 下为 0.30000000000000004
        option = SimpleNamespace(score=0.1)
        question = SimpleNamespace(weight=3)

        self.assertEqual(str(compute_obtained_score(option, question)), "0.30")

    def test_missing_option_or_question_raises_not_found(self):
        question = SimpleNamespace(weight=Decimal("1.00"))
        option = SimpleNamespace(score=Decimal("1.00"))

        with self.assertRaises(NotFound):
            compute_obtained_score(None, question)
        with self.assertRaises(NotFound):
            compute_obtained_score(option, None)

    def test_total_score_of_empty_mapping_is_zero(self):
        self.assertEqual(total_score({}), Decimal("0.00"))
        self.assertEqual(
            total_score({"a": Decimal("1.50"), "b": Decimal("2.25")}), Decimal("3.75")
        )


class AggregateScoresTest(TestCase):
    def setUp(self) -> None:
        self.questionnaire = Questionnaire.objects.create(title="测试问卷")
        self.q_anxiety = Question.objects.create(
            questionnaire=self.questionnaire, question_text="焦虑题", sub_type="anxiety"
        )
        self.q_depression = Question.objects.create(
            questionnaire=self.questionnaire, question_text="抑郁题", sub_type="depression"
        )
        self.q_plain = Question.objects.create(
            questionnaire=self.questionnaire, question_text="未分组题", sub_type=None
        )
        self.option = Option.objects.create(
            question=self.q_anxiety, option_text="选项", score=Decimal("1.00")
        )

    def _answer(self, user_id, question, score):
        return UserAnswer.objects.create(
            user_id=user_id,
            questionnaire_id=self.questionnaire.id,
            question_id=question.id,
            option_id=self.option.id,
            obtained_score=Decimal(score),
        )

    def test_user_without_answers_gets_empty_mapping(self):
        self.assertEqual(aggregate_scores(1, self.questionnaire.id), {})

    def test_groups_by_sub_type_independently(self):
        self._answer(1, self.q_anxiety, "2.00")
        self._answer(1, self.q_anxiety, "1.50")
        self._answer(1, self.q_depression, "4.00")
        # 其他用户的记录不参与汇总
        self._answer(2, self.q_anxiety, "9.00")

        scores = aggregate_scores(1, self.questionnaire.id)

        self.assertEqual(
            scores, {"anxiety": Decimal("3.50"), "depression": Decimal("4.00")}
        )

    def test_null_and_blank_sub_type_go_to_unclassified_bucket(self):
        blank = Question.objects.create(
            questionnaire=self.questionnaire, question_text="空白分组题", sub_type="  "
        )
        self._answer(1, self.q_plain, "1.00")
        self._answer(1, blank, "2.00")
        self._answer(1, self.q_anxiety, "3.00")

        scores = aggregate_scores(1, self.questionnaire.id)

        self.assertEqual(scores[UNCLASSIFIED_SUB_TYPE], Decimal("3.00"))
        self.assertEqual(scores["anxiety"], Decimal("3.00"))
        self.assertEqual(len(scores), 2)

    def test_answers_of_deleted_question_are_kept_as_unclassified(self):
        self._answer(1, self.q_depression, "5.00")
        self.q_depression.delete()

        scores = aggregate_scores(1, self.questionnaire.id)

        self.assertEqual(scores, {UNCLASSIFIED_SUB_TYPE: Decimal("5.00")})

"""用户答题记录模型。"""

from django.conf import settings
from django.db import models


class UserAnswer(models.Model):
    """
    用户对某道题的一次作答，只追加不修改。

    obtained_score 在提交时按“选项分值 × 题目权重”计算并固化，
    之后题目或选项调整都不会回溯重算。四个外键只在应用层保证，
    数据库不建约束，以便题库调整后历史记录保持原样。
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="answers",
        verbose_name="用户",
    )
    questionnaire = models.ForeignKey(
        "core.Questionnaire",
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="user_answers",
        verbose_name="问卷",
    )
    question = models.ForeignKey(
        "core.Question",
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="user_answers",
        verbose_name="题目",
    )
    option = models.ForeignKey(
        "core.Option",
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="user_answers",
        verbose_name="选中选项",
    )
    obtained_score = models.DecimalField("得分", max_digits=5, decimal_places=2)

    class Meta:
        db_table = "user_answer"
        verbose_name = "用户答题记录"
        verbose_name_plural = "用户答题记录"
        indexes = [
            models.Index(fields=["user", "questionnaire"], name="user_answer_user_q_idx"),
        ]

    def __str__(self) -> str:
        return f"Answer to {self.question_id} by {self.user_id}"

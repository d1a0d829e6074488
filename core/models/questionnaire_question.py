"""问卷题目模型。"""

from decimal import Decimal

from django.db import models

from . import choices


class Question(models.Model):
    """问卷题目。"""

    questionnaire = models.ForeignKey(
        "core.Questionnaire",
        on_delete=models.CASCADE,
        related_name="questions",
        verbose_name="所属问卷",
    )
    question_text = models.TextField("题目内容")
    question_type = models.CharField(
        "题目类型",
        max_length=20,
        choices=choices.QuestionType.choices,
        default=choices.QuestionType.SINGLE,
    )
    sort_order = models.IntegerField("排序号", default=0)
    weight = models.DecimalField(
        "权重", max_digits=5, decimal_places=2, default=Decimal("1.00"), help_text="题目分值权重"
    )
    sub_type = models.CharField(
        "子量表",
        max_length=50,
        blank=True,
        null=True,
        help_text="按子量表分组汇总得分，例如 anxiety、depression；为空则归入“未分类”。",
    )

    class Meta:
        db_table = "question"
        verbose_name = "问卷题目"
        verbose_name_plural = "问卷题目"
        ordering = ("sort_order", "id")

    def __str__(self) -> str:
        return self.question_text[:20]

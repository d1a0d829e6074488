"""题目选项模型。"""

from django.db import models


class Option(models.Model):
    """题目选项。"""

    question = models.ForeignKey(
        "core.Question",
        on_delete=models.CASCADE,
        related_name="options",
        verbose_name="所属题目",
    )
    option_text = models.CharField("选项内容", max_length=255)
    is_correct = models.BooleanField(
        "是否正确答案", default=False, help_text="仅作展示参考，不参与计分"
    )
    score = models.DecimalField(
        "分值", max_digits=5, decimal_places=2, help_text="该选项对应的得分"
    )
    sort_order = models.IntegerField("排序号", default=0)

    class Meta:
        db_table = "option"
        verbose_name = "题目选项"
        verbose_name_plural = "题目选项"
        ordering = ("sort_order", "id")

    def __str__(self) -> str:
        return f"{self.option_text} ({self.score}分)"

"""问卷定义。"""

from django.db import models

from users.models.base import TimeStampedModel


class Questionnaire(TimeStampedModel):
    """问卷，题目与选项挂在其下，由后台或导入命令维护。"""

    title = models.CharField("问卷标题", max_length=255)
    description = models.TextField("问卷说明", blank=True, null=True)
    version = models.CharField(
        "版本号",
        max_length=20,
        default="1.0.0",
        help_text="语义化版本，例如 1.0.0、1.2.0。",
    )
    is_published = models.BooleanField("是否发布", default=False)

    class Meta:
        db_table = "questionnaire"
        verbose_name = "问卷"
        verbose_name_plural = "问卷"
        ordering = ("id",)

    def __str__(self) -> str:
        return f"{self.title} v{self.version}"

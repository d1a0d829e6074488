"""问卷模型通用枚举。"""

from django.db import models


class QuestionType(models.TextChoices):
    SINGLE = "single", "单选"
    MULTIPLE = "multiple", "多选"

from django.db import models


class TimeStampedModel(models.Model):
    """
    【业务说明】需要记录创建与更新时间的实体（问卷、计数器、用户）统一继承本类。
    【用法】继承后自动拥有 `created_at` 和 `updated_at` 字段，无需重复定义。
    """

    created_at = models.DateTimeField("创建时间", auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField("更新时间", auto_now=True)

    class Meta:
        abstract = True

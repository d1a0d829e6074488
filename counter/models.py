from django.db import models

from users.models.base import TimeStampedModel


class Counter(TimeStampedModel):
    """访问计数：每次 inc 插入一行，计数即行数。"""

    count = models.IntegerField("计数", default=1)

    class Meta:
        db_table = "Counter"
        verbose_name = "计数器"
        verbose_name_plural = "计数器"

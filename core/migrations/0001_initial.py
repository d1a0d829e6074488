from decimal import Decimal

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Questionnaire",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True, verbose_name="创建时间")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="更新时间")),
                ("title", models.CharField(max_length=255, verbose_name="问卷标题")),
                ("description", models.TextField(blank=True, null=True, verbose_name="问卷说明")),
                (
                    "version",
                    models.CharField(
                        default="1.0.0",
                        help_text="语义化版本，例如 1.0.0、1.2.0。",
                        max_length=20,
                        verbose_name="版本号",
                    ),
                ),
                ("is_published", models.BooleanField(default=False, verbose_name="是否发布")),
            ],
            options={
                "verbose_name": "问卷",
                "verbose_name_plural": "问卷",
                "db_table": "questionnaire",
                "ordering": ("id",),
            },
        ),
        migrations.CreateModel(
            name="Question",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("question_text", models.TextField(verbose_name="题目内容")),
                (
                    "question_type",
                    models.CharField(
                        choices=[("single", "单选"), ("multiple", "多选")],
                        default="single",
                        max_length=20,
                        verbose_name="题目类型",
                    ),
                ),
                ("sort_order", models.IntegerField(default=0, verbose_name="排序号")),
                (
                    "weight",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("1.00"),
                        help_text="题目分值权重",
                        max_digits=5,
                        verbose_name="权重",
                    ),
                ),
                (
                    "sub_type",
                    models.CharField(
                        blank=True,
                        help_text="按子量表分组汇总得分，例如 anxiety、depression；为空则归入“未分类”。",
                        max_length=50,
                        null=True,
                        verbose_name="子量表",
                    ),
                ),
                (
                    "questionnaire",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="questions",
                        to="core.questionnaire",
                        verbose_name="所属问卷",
                    ),
                ),
            ],
            options={
                "verbose_name": "问卷题目",
                "verbose_name_plural": "问卷题目",
                "db_table": "question",
                "ordering": ("sort_order", "id"),
            },
        ),
        migrations.CreateModel(
            name="Option",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("option_text", models.CharField(max_length=255, verbose_name="选项内容")),
                (
                    "is_correct",
                    models.BooleanField(default=False, help_text="仅作展示参考，不参与计分", verbose_name="是否正确答案"),
                ),
                (
                    "score",
                    models.DecimalField(decimal_places=2, help_text="该选项对应的得分", max_digits=5, verbose_name="分值"),
                ),
                ("sort_order", models.IntegerField(default=0, verbose_name="排序号")),
                (
                    "question",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="options",
                        to="core.question",
                        verbose_name="所属题目",
                    ),
                ),
            ],
            options={
                "verbose_name": "题目选项",
                "verbose_name_plural": "题目选项",
                "db_table": "option",
                "ordering": ("sort_order", "id"),
            },
        ),
    ]

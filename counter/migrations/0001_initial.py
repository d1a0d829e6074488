from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Counter",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True, verbose_name="创建时间")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="更新时间")),
                ("count", models.IntegerField(default=1, verbose_name="计数")),
            ],
            options={
                "verbose_name": "计数器",
                "verbose_name_plural": "计数器",
                "db_table": "Counter",
            },
        ),
    ]

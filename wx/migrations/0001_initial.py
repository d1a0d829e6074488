from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="WechatSession",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "third_session",
                    models.CharField(db_column="thirdSession", max_length=64, unique=True, verbose_name="会话凭证"),
                ),
                ("openid", models.CharField(max_length=64, unique=True, verbose_name="OpenID")),
                ("session_key", models.CharField(db_column="sessionKey", max_length=128, verbose_name="会话密钥")),
                ("expires_at", models.DateTimeField(db_column="expiresAt", verbose_name="过期时间")),
            ],
            options={
                "verbose_name": "小程序会话",
                "verbose_name_plural": "小程序会话",
                "db_table": "wechat_session",
            },
        ),
    ]

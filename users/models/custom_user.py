import uuid

from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin
from django.db import models

from users.managers import CustomUserManager
from users.models.base import TimeStampedModel


def _generate_username() -> str:
    """
    【业务说明】小程序用户不填用户名，需要一个系统唯一的用户名让 Django 认证体系工作。
    【返回值】形如 `user_f12ab34cd56ef7890` 的字符串。
    """

    return f"user_{uuid.uuid4().hex[:20]}"


class CustomUser(TimeStampedModel, AbstractBaseUser, PermissionsMixin):
    """
    【业务说明】小程序用户与后台管理员共用的账号模型。
    【用法】小程序登录时按 OpenID 获取或创建；后台管理员通过 createsuperuser 创建。
    【使用示例】`CustomUser.objects.create_user(wx_openid="oUpF80Mh3VQW...")`。
    """

    username = models.CharField(
        "系统用户名",
        max_length=150,
        unique=True,
        default=_generate_username,
        help_text="认证体系主键，未指定时系统自动生成。",
    )
    wx_openid = models.CharField(
        "微信 OpenID",
        max_length=64,
        unique=True,
        null=True,
        blank=True,
        help_text="小程序用户的 OpenID，后台管理员为空。",
    )
    is_active = models.BooleanField("是否启用", default=True)
    is_staff = models.BooleanField("后台权限", default=False)

    objects = CustomUserManager()

    USERNAME_FIELD = "username"
    REQUIRED_FIELDS: list[str] = []

    class Meta:
        verbose_name = "用户"
        verbose_name_plural = "用户"

    def __str__(self) -> str:
        return self.username

from django.db import models


class WechatSession(models.Model):
    """
    【业务说明】小程序登录后的第三方会话：客户端持有 third_session，服务端保存 openid 与 session_key。
    【用法】登录时按 openid 覆盖写入（每个 openid 仅一条）；每次鉴权按 third_session 查询并校验过期时间。
    【说明】过期记录不会被主动清理，依赖每次使用时的过期校验。
    """

    third_session = models.CharField(
        "会话凭证",
        max_length=64,
        unique=True,
        db_column="thirdSession",
    )
    openid = models.CharField("OpenID", max_length=64, unique=True)
    session_key = models.CharField("会话密钥", max_length=128, db_column="sessionKey")
    expires_at = models.DateTimeField("过期时间", db_column="expiresAt")

    class Meta:
        db_table = "wechat_session"
        verbose_name = "小程序会话"
        verbose_name_plural = "小程序会话"

    def __str__(self) -> str:
        return f"{self.openid} -> {self.expires_at:%Y-%m-%d %H:%M}"

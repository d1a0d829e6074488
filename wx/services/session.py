"""小程序第三方会话的存取与校验。"""

import logging
import uuid
from datetime import timedelta
from typing import Optional

from django.conf import settings
from django.utils import timezone

from core.exceptions import Unauthorized
from wx.models import WechatSession

logger = logging.getLogger(__name__)


class WechatSessionService:
    """WechatSession 读写封装。"""

    @staticmethod
    def save_session(
        openid: str, session_key: str, expires_in: Optional[int] = None
    ) -> WechatSession:
        """
        【功能说明】
        - 生成新的 third_session，并按 openid 覆盖写入会话（upsert）；
        - 同一 openid 再次登录后，旧凭证随记录一起被替换，不再能查到。

        【参数说明】
        :param expires_in: 有效期（秒），默认取 settings.WX_SESSION_EXPIRES_IN。
        """
        if expires_in is None:
            expires_in = settings.WX_SESSION_EXPIRES_IN

        session, created = WechatSession.objects.update_or_create(
            openid=openid,
            defaults={
                "third_session": str(uuid.uuid4()),
                "session_key": session_key,
                "expires_at": timezone.now() + timedelta(seconds=expires_in),
            },
        )
        logger.info(
            "保存小程序会话 openid=%s created=%s expires_at=%s",
            openid,
            created,
            session.expires_at,
        )
        return session

    @staticmethod
    def get_session(token: str) -> Optional[WechatSession]:
        """按凭证查询会话，不做过期判断。"""
        if not token:
            return None
        return WechatSession.objects.filter(third_session=token).first()

    @staticmethod
    def validate_session(token: str) -> WechatSession:
        """
        【功能说明】
        - 校验凭证存在且未过期，返回会话记录（含 openid、session_key）。

        【异常说明】
        - 凭证为空、不存在或当前时间已晚于 expires_at：抛出 Unauthorized。
        """
        if not token:
            raise Unauthorized("未提供会话凭证")

        session = WechatSessionService.get_session(token)
        if session is None:
            raise Unauthorized("会话不存在")
        if timezone.now() > session.expires_at:
            raise Unauthorized("会话已过期")
        return session

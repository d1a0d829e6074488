"""
Auth-related service utilities.
"""

import logging
from typing import Tuple

from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from core.exceptions import Unauthorized
from users.models import CustomUser

logger = logging.getLogger(__name__)


class AuthService:
    """统一处理小程序用户账号：按 OpenID 建号、按会话解析当前用户。"""

    def get_or_create_wechat_user(self, openid: str) -> Tuple[CustomUser, bool]:
        """
        【业务说明】根据 OpenID 获取或创建基础账号。
        【使用场景】小程序登录（jscode2session 换取 openid 之后）。
        【返回值】(user, created)。
        """
        user = CustomUser.objects.filter(wx_openid=openid).first()
        if user:
            return user, False

        try:
            with transaction.atomic():
                user = CustomUser.objects.create_user(wx_openid=openid)
        except (IntegrityError, ValidationError):
            # 并发登录时另一请求已建号
            user = CustomUser.objects.get(wx_openid=openid)
            return user, False

        logger.info("新建小程序用户 user_id=%s", user.id)
        return user, True

    def get_user_by_openid(self, openid: str) -> CustomUser:
        """
        【业务说明】会话校验通过后，根据会话中的 OpenID 找到对应账号。
        【异常】账号不存在或已停用时抛出 Unauthorized。
        """
        user = CustomUser.objects.filter(wx_openid=openid).first()
        if user is None or not user.is_active:
            raise Unauthorized("账号不存在或已停用")
        return user

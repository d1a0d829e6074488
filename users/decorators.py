"""
【业务说明】提供小程序接口的会话校验装饰器。
【用法】在需要登录态的函数视图上添加 `@wechat_session_required`。
【规范】会话凭证取自 `Authorization: Bearer <session>` 请求头，或请求体中的 `session` 字段；
        校验失败统一返回 401 JSON，不进入视图。
"""

import json
import logging
from functools import wraps
from typing import Callable, Optional

from django.http import HttpRequest, HttpResponse, JsonResponse

from core.exceptions import Unauthorized
from users.services import AuthService
from wx.services.session import WechatSessionService

logger = logging.getLogger(__name__)

ViewFunc = Callable[..., HttpResponse]


def get_session_token(request: HttpRequest) -> Optional[str]:
    """
    【业务说明】从请求中提取第三方会话凭证。
    【返回值】凭证字符串；未提供时返回 None。
    """

    authorization = request.headers.get("Authorization", "")
    parts = authorization.split(" ")
    if len(parts) > 1 and parts[1]:
        return parts[1]

    if request.content_type == "application/json" and request.body:
        try:
            body = json.loads(request.body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
        if isinstance(body, dict) and body.get("session"):
            return str(body["session"])
        return None

    return request.POST.get("session") or None


def wechat_session_required(view_func: ViewFunc) -> ViewFunc:
    """
    【业务说明】校验小程序会话，并把会话与用户挂载到 request 上：
        - request.wx_session：WechatSession 记录（含 openid / session_key）；
        - request.wx_user：会话对应的 CustomUser。
    【返回值】包装后的视图；未提供凭证或凭证无效、过期时返回 401。
    """

    @wraps(view_func)
    def _wrapped_view(request: HttpRequest, *args, **kwargs):
        token = get_session_token(request)
        if not token:
            return JsonResponse({"code": 401, "message": "未提供会话凭证"}, status=401)

        try:
            session = WechatSessionService.validate_session(token)
            user = AuthService().get_user_by_openid(session.openid)
        except Unauthorized as exc:
            logger.info("会话校验未通过: %s", exc)
            return JsonResponse({"code": 401, "message": "会话已过期或无效"}, status=401)
        except Exception:
            logger.exception("认证失败")
            return JsonResponse({"code": 500, "message": "服务器内部错误"}, status=500)

        request.wx_session = session
        request.wx_user = user
        return view_func(request, *args, **kwargs)

    return _wrapped_view


__all__ = ["get_session_token", "wechat_session_required"]

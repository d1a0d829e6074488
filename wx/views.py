"""小程序登录与微信相关接口。"""

import json
import logging

import requests
from django.conf import settings
from django.db import transaction
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from users.decorators import wechat_session_required
from users.services import AuthService
from wx.services import (
    UserDataDecryptError,
    WechatAPIError,
    WechatSessionService,
    code_to_session,
    decrypt_user_data,
)

logger = logging.getLogger(__name__)

auth_service = AuthService()


def _read_body(request: HttpRequest) -> dict:
    """兼容 JSON 与表单两种提交方式。"""
    if request.content_type == "application/json":
        body = json.loads(request.body or b"{}")
        if not isinstance(body, dict):
            raise ValueError("请求体必须是 JSON 对象")
        return body
    return request.POST.dict()


@csrf_exempt
@require_POST
def login(request: HttpRequest) -> JsonResponse:
    """
    API: 小程序登录
    POST /api/login  {"code": "<wx.login 返回的 code>"}
    返回: {"code": 0, "data": {"session": "...", "expiresIn": 7200}}
    """
    try:
        body = _read_body(request)
    except (ValueError, UnicodeDecodeError):
        return JsonResponse({"code": 400, "message": "无效的请求数据"}, status=400)

    code = body.get("code")
    if not code:
        return JsonResponse({"code": 400, "message": "缺少 code 参数"}, status=400)

    expires_in = settings.WX_SESSION_EXPIRES_IN
    try:
        wx_data = code_to_session(code)
        openid = wx_data["openid"]
        with transaction.atomic():
            auth_service.get_or_create_wechat_user(openid)
            session = WechatSessionService.save_session(
                openid=openid,
                session_key=wx_data["session_key"],
                expires_in=expires_in,
            )
    except WechatAPIError as exc:
        return JsonResponse({"code": exc.errcode, "message": exc.errmsg}, status=401)
    except requests.RequestException:
        logger.exception("登录失败：请求微信服务器异常")
        return JsonResponse({"code": 500, "message": "服务器内部错误"}, status=500)
    except Exception:
        logger.exception("登录失败")
        return JsonResponse({"code": 500, "message": "服务器内部错误"}, status=500)

    return JsonResponse(
        {
            "code": 0,
            "data": {
                "session": session.third_session,
                "expiresIn": expires_in,
            },
        }
    )


@require_GET
def wx_openid(request: HttpRequest) -> HttpResponse:
    """
    API: 云托管环境下直接返回调用方 OpenID
    GET /api/wx_openid（依赖微信云托管注入的 X-WX-SOURCE / X-WX-OPENID 请求头）
    """
    if request.headers.get("X-WX-Source"):
        return HttpResponse(request.headers.get("X-WX-OpenID", ""))
    return JsonResponse({"code": 400, "message": "非微信云托管来源的请求"}, status=400)


@csrf_exempt
@require_POST
@wechat_session_required
def decrypt_user_info(request: HttpRequest) -> JsonResponse:
    """
    API: 解密小程序用户数据
    POST /api/decrypt-user-data  {"encryptedData": "...", "iv": "..."}
    """
    try:
        body = _read_body(request)
    except (ValueError, UnicodeDecodeError):
        return JsonResponse({"code": 400, "message": "无效的请求数据"}, status=400)

    encrypted_data = body.get("encryptedData")
    iv = body.get("iv")
    if not encrypted_data or not iv:
        return JsonResponse({"code": 400, "message": "缺少 encryptedData 或 iv"}, status=400)

    try:
        data = decrypt_user_data(request.wx_session.session_key, encrypted_data, iv)
    except UserDataDecryptError as exc:
        logger.warning("用户数据解密失败 openid=%s: %s", request.wx_session.openid, exc)
        return JsonResponse({"code": 400, "message": str(exc)}, status=400)
    except Exception:
        logger.exception("用户数据解密异常")
        return JsonResponse({"code": 500, "message": "服务器内部错误"}, status=500)

    data.pop("watermark", None)
    return JsonResponse({"code": 0, "data": data})
